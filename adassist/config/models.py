"""
Ad Assistant - Domain Models
============================

Pydantic v2 models for the three task results:

  Ad copy      : AdCopyResult
  Performance  : OptimizationAnalysis
  Negatives    : MatchType, NegativeKeywordEntry

Convention
----------
- Python attributes are snake_case; the JSON wire names the model is asked
  to emit are camelCase and declared as aliases.
- Models are frozen.  A result is built once from one response and then
  replaced wholesale by the next run.
- Character/count targets and the 1-10 score range are requested in the
  prompt only; they are NOT enforced here.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


_RESULT_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# ============================================================
# Ad copy
# ============================================================


class AdCopyResult(BaseModel):
    """Generated responsive search ad assets.

    Attributes:
        headlines:       Target 5 items, <= 30 chars each.
        long_headlines:  Target 3 items, <= 90 chars each.
        descriptions:    Target 4 items, <= 90 chars each.
    """

    model_config = _RESULT_CONFIG

    headlines: List[str]
    long_headlines: List[str] = Field(alias="longHeadlines")
    descriptions: List[str]


# ============================================================
# Performance analysis
# ============================================================


class OptimizationAnalysis(BaseModel):
    """Model-estimated Quality Score / Ad Rank review of a campaign.

    Scores are intended to be 1-10 but out-of-range values pass through
    unchanged.
    """

    model_config = _RESULT_CONFIG

    quality_score_potential: float = Field(alias="qualityScorePotential", strict=True)
    ad_rank_potential: float = Field(alias="adRankPotential", strict=True)
    overall_assessment: str = Field(alias="overallAssessment")
    copy_suggestions: List[str] = Field(alias="copySuggestions")
    landing_page_suggestions: List[str] = Field(alias="landingPageSuggestions")
    keyword_suggestions: List[str] = Field(alias="keywordSuggestions")


# ============================================================
# Negative keywords
# ============================================================


class MatchType(str, Enum):
    """Keyword matching strictness."""

    BROAD = "Broad"
    PHRASE = "Phrase"
    EXACT = "Exact"


class NegativeKeywordEntry(BaseModel):
    """A single term to exclude, with its suggested match type."""

    model_config = _RESULT_CONFIG

    keyword: str
    match_type: MatchType = Field(alias="matchType")
