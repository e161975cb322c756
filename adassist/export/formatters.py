"""Plain-text renderings of task results for download / clipboard."""
from __future__ import annotations

from typing import Dict, Iterable, List

from ..config.models import AdCopyResult, MatchType, NegativeKeywordEntry, OptimizationAnalysis

# Badge colours for the results table.  Keyed by every MatchType member.
MATCH_TYPE_STYLES: Dict[MatchType, str] = {
    MatchType.BROAD: "violet",
    MatchType.PHRASE: "blue",
    MatchType.EXACT: "green",
}

CSV_HEADER = ("Keyword", "Match Type")


def _csv_quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def match_type_label(match_type: MatchType) -> str:
    """Return the export label for a match type."""
    if match_type is MatchType.BROAD:
        return "Broad"
    if match_type is MatchType.PHRASE:
        return "Phrase"
    if match_type is MatchType.EXACT:
        return "Exact"
    raise ValueError(f"Unhandled match type: {match_type!r}")


def negative_keywords_to_csv(entries: Iterable[NegativeKeywordEntry]) -> str:
    """Render negative keywords as CSV.

    The keyword column is always quoted (embedded quotes doubled); the match
    type column is bare.  Rows are ``\\n``-separated with no trailing newline.
    """
    lines = [",".join(CSV_HEADER)]
    for entry in entries:
        lines.append(f"{_csv_quote(entry.keyword)},{match_type_label(entry.match_type)}")
    return "\n".join(lines)


def _score(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _bullets(items: Iterable[str]) -> List[str]:
    return [f"- {s}" for s in items]


def analysis_to_report(
    analysis: OptimizationAnalysis,
    keywords: str,
    landing_page_url: str,
) -> str:
    """Render a performance analysis as a labelled plain-text report."""
    lines: List[str] = [
        "Performance Analysis Report",
        f"Keywords: {keywords}",
        f"Landing Page: {landing_page_url}",
        "",
        "--- SCORES ---",
        f"Quality Score Potential: {_score(analysis.quality_score_potential)}/10",
        f"Ad Rank Potential: {_score(analysis.ad_rank_potential)}/10",
        "",
        "--- OVERALL ASSESSMENT ---",
        analysis.overall_assessment,
        "",
        "--- AD COPY SUGGESTIONS ---",
        *_bullets(analysis.copy_suggestions),
        "",
        "--- LANDING PAGE SUGGESTIONS ---",
        *_bullets(analysis.landing_page_suggestions),
        "",
        "--- KEYWORD SUGGESTIONS ---",
        *_bullets(analysis.keyword_suggestions),
    ]
    return "\n".join(lines) + "\n"


def ad_copy_to_text(result: AdCopyResult) -> str:
    """Render generated ad copy as three titled sections, one item per line."""
    sections = [
        ("Headlines", result.headlines),
        ("Long Headlines", result.long_headlines),
        ("Descriptions", result.descriptions),
    ]
    blocks = []
    for title, items in sections:
        blocks.append("\n".join([title, *items]))
    return "\n\n".join(blocks) + "\n"
