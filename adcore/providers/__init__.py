"""LLM Provider abstraction layer.

A single backend (Google Gemini) behind a small async interface, with an
output guard and an audit trail.
"""

from .base import (
    GenerationConfig,
    GenerationResponse,
    LLMConfigError,
    LLMError,
    LLMJSONError,
    LLMProvider,
)
from .google_provider import GoogleProvider
from .guards import JSONOutputGuard
from .audit import AuditLogger, AuditRecord
from .registry import get_model_catalog, get_provider, validate_model

__all__ = [
    "GenerationConfig",
    "GenerationResponse",
    "LLMConfigError",
    "LLMError",
    "LLMJSONError",
    "LLMProvider",
    "GoogleProvider",
    "JSONOutputGuard",
    "AuditLogger",
    "AuditRecord",
    "get_model_catalog",
    "get_provider",
    "validate_model",
]
