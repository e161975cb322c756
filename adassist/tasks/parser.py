"""Decode raw model text into task results.

Decoding is all-or-nothing: a response that does not match the result
type yields ``None`` and a warning in the log, never an exception.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

from pydantic import TypeAdapter

from adcore.providers.base import LLMJSONError
from adcore.providers.guards import JSONOutputGuard, preview

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def parse_response(task: str, raw_text: str, result_type: Any) -> Optional[Any]:
    """Validate ``raw_text`` as ``result_type`` (a model class or ``List[Model]``).

    Returns the decoded value, or ``None`` if the text is malformed or
    does not match the declared shape.
    """
    try:
        return JSONOutputGuard.decode(raw_text, _adapter(result_type))
    except LLMJSONError as e:
        logger.warning(
            "Failed to parse %s response: %s | raw=%s",
            task, e, preview(e.raw_text),
        )
        return None
