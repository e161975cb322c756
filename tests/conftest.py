"""Shared fixtures for the Ad Assistant test suite.

Provides canned model payloads that mirror real Gemini structured output
and a mock provider so no test needs a live credential.
"""

import json
from typing import Any, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from adcore.providers.audit import AuditLogger
from adcore.providers.base import GenerationConfig, GenerationResponse
from adassist.tasks.runner import TaskContext


# ---------------------------------------------------------------------------
# Canned payloads
# ---------------------------------------------------------------------------

AD_COPY_PAYLOAD = {
    "headlines": ["A", "B", "C", "D", "E"],
    "longHeadlines": ["L1", "L2", "L3"],
    "descriptions": ["D1", "D2", "D3", "D4"],
}

ANALYSIS_PAYLOAD = {
    "qualityScorePotential": 7,
    "adRankPotential": 6.5,
    "overallAssessment": "Relevant copy, thin landing page.",
    "copySuggestions": ["Add the keyword to headline 1", "Include a price point"],
    "landingPageSuggestions": ["Move the CTA above the fold"],
    "keywordSuggestions": ["Split brand and generic terms"],
}

NEGATIVES_PAYLOAD = [
    {"keyword": "free", "matchType": "Broad"},
    {"keyword": "jobs", "matchType": "Phrase"},
    {"keyword": "running shoes repair", "matchType": "Exact"},
]


def make_response(payload: Any, raw: Optional[str] = None) -> GenerationResponse:
    """Build a provider response carrying ``payload`` as JSON text."""
    return GenerationResponse(
        raw_text=raw if raw is not None else json.dumps(payload),
        model="gemini-2.5-flash",
        provider="google",
        input_tokens=120,
        output_tokens=80,
        latency_ms=15,
        finish_reason="STOP",
        prompt_hash="abc123",
    )


def make_mock_provider(responses: List[Any]) -> MagicMock:
    """Create a mock provider whose ``generate_structured`` yields ``responses`` in order.

    Exceptions in the list are raised instead of returned.
    """
    mock = MagicMock()
    mock.provider_name = "google"
    mock.generate_structured = AsyncMock(side_effect=responses)
    return mock


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def audit():
    return AuditLogger()


@pytest.fixture
def make_ctx(audit):
    """Factory: TaskContext around a mock provider returning ``responses``."""

    def _make(*responses: Any) -> TaskContext:
        provider = make_mock_provider(list(responses))
        return TaskContext(
            provider=provider,
            config=GenerationConfig(model="gemini-2.5-flash", temperature=0.7),
            audit=audit,
        )

    return _make
