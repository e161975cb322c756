"""LLM Provider interface -- abstract base for generation backends.

Every provider must implement ``generate_structured``.  Task functions
receive a provider via dependency injection, so tests can substitute a
mock without a live credential.
"""

from __future__ import annotations

import abc
import hashlib
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable configuration for a single generation call."""

    model: str = "gemini-2.5-flash"
    temperature: float = 0.7
    max_output_tokens: int = 8192
    response_mime_type: str = "application/json"


@dataclass
class GenerationResponse:
    """Standardised response from any provider."""

    raw_text: str
    model: str = ""
    provider: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: int = 0
    finish_reason: str = ""
    prompt_hash: str = ""


def prompt_digest(prompt: str) -> str:
    """Short stable hash of a prompt, used to correlate audit records."""
    return hashlib.sha256(prompt.encode()).hexdigest()[:16]


class LLMProvider(abc.ABC):
    """Abstract base class for LLM providers."""

    provider_name: str = "base"

    @abc.abstractmethod
    async def generate_structured(
        self,
        prompt: str,
        schema: Dict[str, Any],
        *,
        config: Optional[GenerationConfig] = None,
    ) -> GenerationResponse:
        """Send one prompt constrained by ``schema`` and return the raw text.

        Parameters
        ----------
        prompt : str
            Fully rendered instruction text.
        schema : dict
            Structured-output declaration the endpoint should conform to.
        config : GenerationConfig, optional
            Override default config for this call.

        Returns
        -------
        GenerationResponse
            Contains ``raw_text`` and usage metadata.  The text is NOT
            decoded here.

        Raises
        ------
        LLMError
            On transport, authentication or remote-side failure.  There is
            no retry.
        """
        ...

    def _default_config(self, config: Optional[GenerationConfig]) -> GenerationConfig:
        return config or GenerationConfig()


class LLMError(Exception):
    """Base exception for LLM provider errors."""

    def __init__(self, message: str, provider: str = ""):
        super().__init__(message)
        self.provider = provider


class LLMConfigError(LLMError):
    """Provider could not be constructed (missing credential, bad model)."""


class LLMJSONError(LLMError):
    """Provider returned text that does not decode to the declared shape."""

    def __init__(self, message: str, raw_text: str = "", provider: str = ""):
        super().__init__(message, provider=provider)
        self.raw_text = raw_text
