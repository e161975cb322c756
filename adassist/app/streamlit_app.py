"""
Ad Assistant -- Streamlit UI
============================

Three tabs over the task functions:

* **Ad Copy Generator**      -- keywords -> headlines / long headlines / descriptions
* **Performance Optimizer**  -- keywords + ad copy + landing page -> scores and suggestions
* **Negative Keywords**      -- keywords -> exclusion terms with match types

Run with::

    streamlit run adassist/app/streamlit_app.py
"""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

# Ensure project root is on sys.path (needed for Streamlit Cloud deployment)
_PROJECT_ROOT = str(Path(__file__).resolve().parent.parent.parent)
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

import streamlit as st

# ---------------------------------------------------------------------------
# Project imports
# ---------------------------------------------------------------------------

from adcore.providers.audit import AuditLogger
from adcore.providers.base import LLMConfigError, LLMProvider
from adcore.providers.registry import get_model_catalog, get_provider
from adassist.app.version import version_label
from adassist.config.models import MatchType, NegativeKeywordEntry
from adassist.config.settings import AppSettings, ConfigurationError
from adassist.export.formatters import (
    MATCH_TYPE_STYLES,
    ad_copy_to_text,
    analysis_to_report,
    negative_keywords_to_csv,
)
from adassist.tasks.runner import (
    TaskContext,
    analyze_performance,
    blank_fields,
    find_negative_keywords,
    generate_ad_copy,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MSG_MISSING_KEYWORDS = "Please enter some keywords."
MSG_MISSING_FIELDS = "Please fill in all fields."
MSG_FAILED_AD_COPY = "Failed to generate ad copy. The response was empty or invalid."
MSG_FAILED_ANALYSIS = "Failed to analyze performance. The response was empty or invalid."
MSG_FAILED_NEGATIVES = "Failed to find negative keywords. The response was empty or invalid."


# ---------------------------------------------------------------------------
# Process-wide settings / provider / audit trail (created once per server process)
# ---------------------------------------------------------------------------

@st.cache_resource
def _settings() -> AppSettings:
    return AppSettings.from_env()


@st.cache_resource
def _audit() -> AuditLogger:
    return AuditLogger()


@st.cache_resource
def _provider(api_key: str, model_id: str) -> LLMProvider:
    return get_provider(api_key, model_id)


def _context(settings: AppSettings, model_id: str) -> TaskContext:
    selected = replace(settings, model=model_id)
    provider = _provider(selected.api_key, selected.model)
    return TaskContext.from_settings(selected, provider, audit=_audit())


def _init_session_state() -> None:
    """Ensure every required session-state key exists."""
    defaults = {
        "ad_copy_result": None,
        "analysis_result": None,
        "analysis_inputs": ("", ""),
        "negatives_result": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# ---------------------------------------------------------------------------
# Tab: Ad copy
# ---------------------------------------------------------------------------

def _render_ad_copy_tab(ctx: TaskContext) -> None:
    st.subheader("Ad Copy Generator")
    st.caption("Enter your target keywords to generate high-converting ad copy in seconds.")

    keywords = st.text_area(
        "Keywords",
        placeholder="e.g., custom mechanical keyboards, ergonomic keyboard",
        key="ad_copy_keywords",
    )
    if st.button("Generate Ad Copy", key="btn_ad_copy", type="primary"):
        st.session_state["ad_copy_result"] = None
        if blank_fields(keywords=keywords):
            st.error(MSG_MISSING_KEYWORDS)
        else:
            with st.spinner("Generating..."):
                result = asyncio.run(generate_ad_copy(ctx, keywords))
            if result is None:
                st.error(MSG_FAILED_AD_COPY)
            st.session_state["ad_copy_result"] = result

    result = st.session_state["ad_copy_result"]
    if result is None:
        return

    for title, items in (
        ("Headlines", result.headlines),
        ("Long Headlines", result.long_headlines),
        ("Descriptions", result.descriptions),
    ):
        st.markdown(f"#### {title}")
        for item in items:
            st.code(item, language=None)

    st.download_button(
        "Download Ad Copy",
        data=ad_copy_to_text(result),
        file_name="ad-copy.txt",
        mime="text/plain",
        key="dl_ad_copy",
    )


# ---------------------------------------------------------------------------
# Tab: Performance analysis
# ---------------------------------------------------------------------------

def _render_performance_tab(ctx: TaskContext) -> None:
    st.subheader("Performance Optimizer")
    st.caption("Input your campaign details to get an AI-powered analysis and suggestions for improvement.")

    keywords = st.text_area(
        "Keywords", placeholder="Enter your keywords, comma-separated", key="perf_keywords",
    )
    ad_copy = st.text_area(
        "Existing ad copy",
        placeholder="Paste your existing ad copy (headlines and descriptions)",
        key="perf_ad_copy",
    )
    url = st.text_input(
        "Landing page URL",
        placeholder="Enter your landing page URL (e.g., https://example.com)",
        key="perf_url",
    )

    if st.button("Analyze Performance", key="btn_analyze", type="primary"):
        st.session_state["analysis_result"] = None
        if blank_fields(keywords=keywords, ad_copy=ad_copy, landing_page_url=url):
            st.error(MSG_MISSING_FIELDS)
        else:
            with st.spinner("Analyzing..."):
                result = asyncio.run(analyze_performance(ctx, keywords, ad_copy, url))
            if result is None:
                st.error(MSG_FAILED_ANALYSIS)
            st.session_state["analysis_result"] = result
            st.session_state["analysis_inputs"] = (keywords, url)

    analysis = st.session_state["analysis_result"]
    if analysis is None:
        return

    col_qs, col_ar = st.columns(2)
    col_qs.metric("Quality Score Potential", f"{analysis.quality_score_potential:g}/10")
    col_ar.metric("Ad Rank Potential", f"{analysis.ad_rank_potential:g}/10")

    st.markdown("#### Overall Assessment")
    st.write(analysis.overall_assessment)
    for title, items in (
        ("Ad Copy Suggestions", analysis.copy_suggestions),
        ("Landing Page Suggestions", analysis.landing_page_suggestions),
        ("Keyword Suggestions", analysis.keyword_suggestions),
    ):
        st.markdown(f"#### {title}")
        st.markdown("\n".join(f"- {s}" for s in items))

    report_keywords, report_url = st.session_state["analysis_inputs"]
    st.download_button(
        "Download Report",
        data=analysis_to_report(analysis, report_keywords, report_url),
        file_name="performance-analysis-report.txt",
        mime="text/plain",
        key="dl_report",
    )


# ---------------------------------------------------------------------------
# Tab: Negative keywords
# ---------------------------------------------------------------------------

def _match_type_badge(match_type: MatchType) -> str:
    return f":{MATCH_TYPE_STYLES[match_type]}[**{match_type.value}**]"


def _render_negatives_tab(ctx: TaskContext) -> None:
    st.subheader("Negative Keyword Finder")
    st.caption("Enter your primary keywords to discover terms you should exclude to improve ROI.")

    keywords = st.text_area(
        "Primary keywords",
        placeholder="e.g., running shoes for men, cheap flights to Bali",
        key="neg_keywords",
    )
    if st.button("Find Negative Keywords", key="btn_negatives", type="primary"):
        st.session_state["negatives_result"] = None
        if blank_fields(keywords=keywords):
            st.error(MSG_MISSING_KEYWORDS)
        else:
            with st.spinner("Finding..."):
                result = asyncio.run(find_negative_keywords(ctx, keywords))
            if result is None:
                st.error(MSG_FAILED_NEGATIVES)
            st.session_state["negatives_result"] = result

    entries: List[NegativeKeywordEntry] = st.session_state["negatives_result"]
    if entries is None:
        return

    st.markdown("#### Suggested Negative Keywords")
    for entry in entries:
        col_kw, col_mt = st.columns([4, 1])
        col_kw.write(entry.keyword)
        col_mt.markdown(_match_type_badge(entry.match_type))

    st.download_button(
        "Download CSV",
        data=negative_keywords_to_csv(entries),
        file_name="negative-keywords.csv",
        mime="text/csv",
        key="dl_negatives",
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    st.set_page_config(page_title="Ad Assistant", layout="wide")
    _init_session_state()

    try:
        settings = _settings()
    except ConfigurationError as exc:
        st.error(f"Configuration error: {exc}")
        st.stop()
        return

    catalog = get_model_catalog()
    model_ids = [m["model_id"] for m in catalog]

    with st.sidebar:
        st.markdown("### Ad Assistant")
        st.caption(version_label())
        st.divider()
        default_index = model_ids.index(settings.model) if settings.model in model_ids else 0
        model_id = st.selectbox(
            "Model",
            model_ids,
            index=default_index,
            format_func=lambda mid: next(m["label"] for m in catalog if m["model_id"] == mid),
        )
        summary = _audit().summary()
        if summary["total_calls"]:
            st.divider()
            st.caption(f"Calls: {summary['total_calls']} (errors: {summary['errors']})")
            st.caption(
                f"Tokens: {summary['total_input_tokens']} in / "
                f"{summary['total_output_tokens']} out"
            )

    try:
        ctx = _context(settings, model_id)
    except LLMConfigError as exc:
        st.error(f"Configuration error: {exc}")
        st.stop()
        return

    st.title("Ad Assistant")
    tab_copy, tab_perf, tab_neg = st.tabs([
        "Ad Copy Generator",
        "Performance Optimizer",
        "Negative Keywords",
    ])
    with tab_copy:
        _render_ad_copy_tab(ctx)
    with tab_perf:
        _render_performance_tab(ctx)
    with tab_neg:
        _render_negatives_tab(ctx)

    st.caption("Powered by Google Gemini. Designed for modern advertisers.")


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    main()
