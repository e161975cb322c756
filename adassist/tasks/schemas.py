"""Structured-output declarations, one per task.

These are passed as ``response_schema`` so Gemini emits JSON in the
shape of the result models in ``adassist.config.models``.  Field names are
the camelCase wire names.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..config.models import MatchType


class TaskName(str, Enum):
    """Identifier used in logs and audit records."""

    AD_COPY = "ad_copy"
    PERFORMANCE_ANALYSIS = "performance_analysis"
    NEGATIVE_KEYWORDS = "negative_keywords"


_STRING_LIST: Dict[str, Any] = {"type": "ARRAY", "items": {"type": "STRING"}}

AD_COPY_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "headlines": _STRING_LIST,
        "longHeadlines": _STRING_LIST,
        "descriptions": _STRING_LIST,
    },
    "required": ["headlines", "longHeadlines", "descriptions"],
}

PERFORMANCE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "qualityScorePotential": {"type": "NUMBER"},
        "adRankPotential": {"type": "NUMBER"},
        "overallAssessment": {"type": "STRING"},
        "copySuggestions": _STRING_LIST,
        "landingPageSuggestions": _STRING_LIST,
        "keywordSuggestions": _STRING_LIST,
    },
    "required": [
        "qualityScorePotential",
        "adRankPotential",
        "overallAssessment",
        "copySuggestions",
        "landingPageSuggestions",
        "keywordSuggestions",
    ],
}

NEGATIVE_KEYWORDS_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "keyword": {"type": "STRING"},
            "matchType": {
                "type": "STRING",
                "enum": [m.value for m in MatchType],
            },
        },
        "required": ["keyword", "matchType"],
    },
}

TASK_SCHEMAS: Dict[TaskName, Dict[str, Any]] = {
    TaskName.AD_COPY: AD_COPY_SCHEMA,
    TaskName.PERFORMANCE_ANALYSIS: PERFORMANCE_SCHEMA,
    TaskName.NEGATIVE_KEYWORDS: NEGATIVE_KEYWORDS_SCHEMA,
}
