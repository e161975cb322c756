"""Gemini model catalog and provider factory.

Central list of the models the assistant offers, plus a factory that
builds a ready provider for a given credential/model selection.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .base import LLMConfigError, LLMProvider

# ---------------------------------------------------------------------------
# Model catalog -- supported Gemini models
# ---------------------------------------------------------------------------

DEFAULT_MODEL = "gemini-2.5-flash"

MODEL_CATALOG: List[Dict[str, Any]] = [
    {
        "provider": "google",
        "model_id": "gemini-2.5-flash",
        "label": "Gemini 2.5 Flash",
        "tier": "standard",
        "description": "Fast, low cost. Default for all tasks",
    },
    {
        "provider": "google",
        "model_id": "gemini-2.5-flash-lite",
        "label": "Gemini 2.5 Flash-Lite",
        "tier": "fast",
        "description": "Cheapest option for short keyword lists",
    },
    {
        "provider": "google",
        "model_id": "gemini-2.5-pro",
        "label": "Gemini 2.5 Pro",
        "tier": "premium",
        "description": "Highest quality analysis",
    },
    {
        "provider": "google",
        "model_id": "gemini-2.0-flash",
        "label": "Gemini 2.0 Flash",
        "tier": "fast",
        "description": "Previous generation flash model",
    },
]


def get_model_catalog() -> List[Dict[str, Any]]:
    """Return the full model catalog for UI/CLI consumption."""
    return MODEL_CATALOG


def get_default_model() -> str:
    """Return the standard-tier model id."""
    for m in MODEL_CATALOG:
        if m["tier"] == "standard":
            return m["model_id"]
    return DEFAULT_MODEL


def validate_model(model_id: str) -> bool:
    """Check if a model id is in the catalog."""
    return any(m["model_id"] == model_id for m in MODEL_CATALOG)


# ---------------------------------------------------------------------------
# Provider factory
# ---------------------------------------------------------------------------

def get_provider(api_key: str, model: Optional[str] = None) -> LLMProvider:
    """Create and return an LLMProvider for the given credential/model.

    Raises
    ------
    LLMConfigError
        If the credential is missing or the model is not in the catalog.
    """
    model_id = model or get_default_model()
    if not validate_model(model_id):
        supported = ", ".join(m["model_id"] for m in MODEL_CATALOG)
        raise LLMConfigError(
            f"Unknown Gemini model: {model_id!r}. Supported: {supported}",
            provider="google",
        )

    from .google_provider import GoogleProvider
    return GoogleProvider(api_key=api_key, default_model=model_id)
