"""Configuration and domain models."""

from .models import AdCopyResult, MatchType, NegativeKeywordEntry, OptimizationAnalysis
from .settings import AppSettings, ConfigurationError, load_overrides

__all__ = [
    "AdCopyResult",
    "MatchType",
    "NegativeKeywordEntry",
    "OptimizationAnalysis",
    "AppSettings",
    "ConfigurationError",
    "load_overrides",
]
