"""Tests for adassist.tasks.runner -- the three task functions."""

import asyncio
import logging

import pytest

from adcore.providers.base import LLMError
from adassist.config.models import MatchType
from adassist.config.settings import AppSettings
from adassist.export.formatters import negative_keywords_to_csv
from adassist.tasks.runner import (
    TaskContext,
    analyze_performance,
    blank_fields,
    find_negative_keywords,
    generate_ad_copy,
)
from adassist.tasks.schemas import AD_COPY_SCHEMA, NEGATIVE_KEYWORDS_SCHEMA, PERFORMANCE_SCHEMA

from conftest import (
    AD_COPY_PAYLOAD,
    ANALYSIS_PAYLOAD,
    NEGATIVES_PAYLOAD,
    make_mock_provider,
    make_response,
)


class TestBlankInput:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("keywords", ["", "   ", "\n\t"])
    async def test_ad_copy_blank_keywords(self, make_ctx, keywords):
        ctx = make_ctx(make_response(AD_COPY_PAYLOAD))
        assert await generate_ad_copy(ctx, keywords) is None
        assert ctx.provider.generate_structured.await_count == 0

    @pytest.mark.asyncio
    async def test_negatives_blank_keywords(self, make_ctx):
        ctx = make_ctx(make_response(NEGATIVES_PAYLOAD))
        assert await find_negative_keywords(ctx, " ") is None
        assert ctx.provider.generate_structured.await_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "keywords, ad_copy, url",
        [
            ("", "copy", "https://example.com"),
            ("kw", " ", "https://example.com"),
            ("kw", "copy", ""),
        ],
    )
    async def test_analysis_requires_all_inputs(self, make_ctx, keywords, ad_copy, url):
        ctx = make_ctx(make_response(ANALYSIS_PAYLOAD))
        assert await analyze_performance(ctx, keywords, ad_copy, url) is None
        assert ctx.provider.generate_structured.await_count == 0

    @pytest.mark.asyncio
    async def test_blank_input_is_not_audited(self, make_ctx, audit):
        ctx = make_ctx()
        await generate_ad_copy(ctx, "")
        assert audit.records == []

    def test_blank_fields_lists_missing_names(self):
        assert blank_fields(keywords="a", ad_copy="", landing_page_url=None) == [
            "ad_copy", "landing_page_url",
        ]


class TestAdCopy:
    @pytest.mark.asyncio
    async def test_returns_result_in_order(self, make_ctx):
        ctx = make_ctx(make_response(AD_COPY_PAYLOAD))
        result = await generate_ad_copy(ctx, "custom mechanical keyboards")
        assert result.headlines == ["A", "B", "C", "D", "E"]
        assert result.long_headlines == ["L1", "L2", "L3"]
        assert result.descriptions == ["D1", "D2", "D3", "D4"]

    @pytest.mark.asyncio
    async def test_sends_prompt_schema_and_config(self, make_ctx):
        ctx = make_ctx(make_response(AD_COPY_PAYLOAD))
        await generate_ad_copy(ctx, "custom mechanical keyboards")
        ctx.provider.generate_structured.assert_awaited_once()
        args, kwargs = ctx.provider.generate_structured.call_args
        assert 'Keywords: "custom mechanical keyboards"' in args[0]
        assert args[1] is AD_COPY_SCHEMA
        assert kwargs["config"] is ctx.config

    @pytest.mark.asyncio
    async def test_result_counts_are_not_enforced(self, make_ctx):
        payload = dict(AD_COPY_PAYLOAD, headlines=["Only one"])
        ctx = make_ctx(make_response(payload))
        result = await generate_ad_copy(ctx, "kw")
        assert result.headlines == ["Only one"]

    @pytest.mark.asyncio
    async def test_malformed_response_returns_none(self, make_ctx, audit):
        ctx = make_ctx(make_response(None, raw='{"headlines": ["A"'))
        assert await generate_ad_copy(ctx, "kw") is None
        assert audit.records[-1].error == "invalid response"
        assert audit.records[-1].input_tokens == 120


class TestPerformanceAnalysis:
    @pytest.mark.asyncio
    async def test_returns_analysis(self, make_ctx):
        ctx = make_ctx(make_response(ANALYSIS_PAYLOAD))
        result = await analyze_performance(
            ctx, "crm software", "Best CRM for teams", "https://example.com/crm",
        )
        assert result.quality_score_potential == 7
        assert result.ad_rank_potential == 6.5
        assert result.landing_page_suggestions == ["Move the CTA above the fold"]

    @pytest.mark.asyncio
    async def test_sends_performance_schema(self, make_ctx):
        ctx = make_ctx(make_response(ANALYSIS_PAYLOAD))
        await analyze_performance(ctx, "kw", "copy", "https://example.com")
        args, _ = ctx.provider.generate_structured.call_args
        assert args[1] is PERFORMANCE_SCHEMA
        assert '3. Landing Page URL: "https://example.com"' in args[0]

    @pytest.mark.asyncio
    async def test_string_scores_return_none(self, make_ctx):
        payload = dict(ANALYSIS_PAYLOAD, qualityScorePotential="seven")
        ctx = make_ctx(make_response(payload))
        assert await analyze_performance(ctx, "kw", "copy", "https://example.com") is None


class TestNegativeKeywords:
    @pytest.mark.asyncio
    async def test_running_shoes_to_csv(self, make_ctx):
        ctx = make_ctx(make_response(NEGATIVES_PAYLOAD[:1]))
        result = await find_negative_keywords(ctx, "running shoes")
        assert len(result) == 1
        assert result[0].keyword == "free"
        assert result[0].match_type is MatchType.BROAD
        assert negative_keywords_to_csv(result) == 'Keyword,Match Type\n"free",Broad'

    @pytest.mark.asyncio
    async def test_sends_array_schema(self, make_ctx):
        ctx = make_ctx(make_response(NEGATIVES_PAYLOAD))
        result = await find_negative_keywords(ctx, "running shoes")
        args, _ = ctx.provider.generate_structured.call_args
        assert args[1] is NEGATIVE_KEYWORDS_SCHEMA
        assert [e.keyword for e in result] == ["free", "jobs", "running shoes repair"]

    @pytest.mark.asyncio
    async def test_empty_array_is_a_result(self, make_ctx):
        ctx = make_ctx(make_response([]))
        assert await find_negative_keywords(ctx, "running shoes") == []

    @pytest.mark.asyncio
    async def test_unknown_match_type_returns_none(self, make_ctx):
        ctx = make_ctx(make_response([{"keyword": "free", "matchType": "Modified"}]))
        assert await find_negative_keywords(ctx, "running shoes") is None


class TestFaults:
    @pytest.mark.asyncio
    async def test_transport_fault_returns_none_and_logs(self, make_ctx, audit, caplog):
        ctx = make_ctx(LLMError("connection reset", provider="google"))
        with caplog.at_level(logging.ERROR, logger="adassist.tasks.runner"):
            result = await find_negative_keywords(ctx, "running shoes")
        assert result is None
        assert "negative_keywords" in caplog.text
        record = audit.records[-1]
        assert record.task == "negative_keywords"
        assert record.error == "connection reset"
        assert record.provider == "google"

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_absorbed(self, make_ctx):
        ctx = make_ctx(RuntimeError("boom"))
        assert await generate_ad_copy(ctx, "kw") is None

    @pytest.mark.asyncio
    async def test_works_without_audit(self):
        ctx = TaskContext(provider=make_mock_provider([TimeoutError("slow")]))
        assert await generate_ad_copy(ctx, "kw") is None


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_tasks_share_a_context(self, make_ctx, audit):
        ctx = make_ctx(
            make_response(AD_COPY_PAYLOAD),
            make_response(AD_COPY_PAYLOAD),
            make_response(AD_COPY_PAYLOAD),
        )
        results = await asyncio.gather(
            generate_ad_copy(ctx, "a"),
            generate_ad_copy(ctx, "b"),
            generate_ad_copy(ctx, "c"),
        )
        assert all(r is not None for r in results)
        assert ctx.provider.generate_structured.await_count == 3
        assert audit.summary()["by_task"]["ad_copy"]["calls"] == 3

    @pytest.mark.asyncio
    async def test_one_call_per_invocation(self, make_ctx):
        ctx = make_ctx(make_response(None, raw="garbage"))
        assert await generate_ad_copy(ctx, "kw") is None
        assert ctx.provider.generate_structured.await_count == 1


class TestTaskContext:
    def test_from_settings_carries_model_and_temperature(self):
        settings = AppSettings(api_key="k", model="gemini-2.5-pro", temperature=0.2)
        ctx = TaskContext.from_settings(settings, provider=make_mock_provider([]))
        assert ctx.config.model == "gemini-2.5-pro"
        assert ctx.config.temperature == 0.2
        assert ctx.audit is None
