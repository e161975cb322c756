"""Export formatters for task results."""

from .formatters import (
    MATCH_TYPE_STYLES,
    ad_copy_to_text,
    analysis_to_report,
    match_type_label,
    negative_keywords_to_csv,
)

__all__ = [
    "MATCH_TYPE_STYLES",
    "ad_copy_to_text",
    "analysis_to_report",
    "match_type_label",
    "negative_keywords_to_csv",
]
