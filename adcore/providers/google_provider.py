"""Google Gemini provider.

Implements the LLMProvider interface on top of ``google-generativeai``
using its structured-output support (``response_schema``).
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
import weakref
from typing import Any, Dict, Optional

import google.generativeai as genai

from .base import (
    GenerationConfig,
    GenerationResponse,
    LLMConfigError,
    LLMError,
    LLMProvider,
    prompt_digest,
)

logger = logging.getLogger(__name__)


class GoogleProvider(LLMProvider):
    """LLM Provider backed by the Google Gemini API.

    The credential is passed in explicitly and checked at construction,
    so a process without one fails before any request is attempted.
    """

    provider_name = "google"

    def __init__(self, api_key: str, default_model: str = "gemini-2.5-flash"):
        if not api_key or not api_key.strip():
            raise LLMConfigError("Gemini API key is not set", provider=self.provider_name)
        self.api_key = api_key
        self.default_model = default_model
        self._models: weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, Dict[str, Any]] = (
            weakref.WeakKeyDictionary()
        )
        self._lock = threading.Lock()

    def _model(self, model_id: str):
        """Return a ``GenerativeModel`` bound to the running event loop.

        The SDK creates its async client on the loop of the first call and
        that client cannot be used from any other loop, so handles are
        memoised per loop.  ``genai.configure`` drops the SDK's cached
        clients, so each new loop gets a fresh one.
        """
        loop = asyncio.get_running_loop()
        with self._lock:
            models = self._models.get(loop)
            if models is None:
                genai.configure(api_key=self.api_key)
                models = self._models[loop] = {}
            if model_id not in models:
                models[model_id] = genai.GenerativeModel(model_id)
            return models[model_id]

    async def generate_structured(
        self,
        prompt: str,
        schema: Dict[str, Any],
        *,
        config: Optional[GenerationConfig] = None,
    ) -> GenerationResponse:
        cfg = self._default_config(config)
        model_id = cfg.model or self.default_model

        gen_config = {
            "temperature": cfg.temperature,
            "max_output_tokens": cfg.max_output_tokens,
            "response_mime_type": cfg.response_mime_type,
            "response_schema": schema,
        }

        t0 = time.time()
        try:
            response = await self._model(model_id).generate_content_async(
                prompt, generation_config=gen_config,
            )
            raw_text = response.text or ""
        except LLMError:
            raise
        except Exception as e:
            raise LLMError(
                f"Gemini request failed: {e}", provider=self.provider_name
            ) from e
        latency_ms = int((time.time() - t0) * 1000)

        usage = getattr(response, "usage_metadata", None)
        finish_reason = ""
        candidates = getattr(response, "candidates", None) or []
        if candidates:
            reason = getattr(candidates[0], "finish_reason", "")
            finish_reason = getattr(reason, "name", str(reason))

        logger.debug(
            "Gemini response: model=%s chars=%d latency=%dms",
            model_id, len(raw_text), latency_ms,
        )

        return GenerationResponse(
            raw_text=raw_text,
            model=model_id,
            provider=self.provider_name,
            input_tokens=getattr(usage, "prompt_token_count", 0) if usage else 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) if usage else 0,
            latency_ms=latency_ms,
            finish_reason=finish_reason,
            prompt_hash=prompt_digest(prompt),
        )
