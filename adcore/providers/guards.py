"""Output guards for LLM responses.

The endpoint is asked for ``application/json`` but conformance is not
guaranteed, so every payload passes through here before it becomes a
domain object.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from .base import LLMJSONError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JSONOutputGuard:
    """Decode raw LLM text into a validated value, all-or-nothing."""

    @staticmethod
    def strip_fence(raw_text: str) -> str:
        """Remove one surrounding markdown code block (```json ... ```)."""
        text = raw_text.strip()
        if text.startswith("```"):
            first_nl = text.find("\n")
            if first_nl > 0:
                text = text[first_nl + 1:]
            if text.rstrip().endswith("```"):
                text = text.rstrip()[:-3].rstrip()
        return text

    @staticmethod
    def decode(raw_text: str, adapter: TypeAdapter[T]) -> T:
        """Validate ``raw_text`` against ``adapter``.

        Raises
        ------
        LLMJSONError
            If the text is empty, is not JSON, or does not match the shape.
        """
        text = JSONOutputGuard.strip_fence(raw_text or "")
        if not text:
            raise LLMJSONError("LLM response was empty", raw_text=raw_text or "")
        try:
            return adapter.validate_json(text)
        except ValidationError as e:
            raise LLMJSONError(
                f"LLM response did not match the expected shape: {e}",
                raw_text=raw_text,
            ) from e


def preview(text: Any, limit: int = 500) -> str:
    """Truncate text for log output."""
    s = str(text)
    if len(s) <= limit:
        return s
    return s[:limit] + f"... [{len(s) - limit} more chars]"
