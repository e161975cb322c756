"""LLM audit logging -- tracks every generation call for cost monitoring and debugging.

Audit records are stored in-memory by default, with an optional
``persist_fn`` hook for shipping them elsewhere.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .base import GenerationResponse

logger = logging.getLogger(__name__)


@dataclass
class AuditRecord:
    """Single generation call audit entry."""

    task: str = ""
    provider: str = ""
    model: str = ""
    prompt_hash: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: int = 0
    timestamp: float = field(default_factory=time.time)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "task": self.task,
            "provider": self.provider,
            "model": self.model,
            "prompt_hash": self.prompt_hash,
            "token_usage": {
                "input": self.input_tokens,
                "output": self.output_tokens,
            },
            "latency_ms": self.latency_ms,
            "timestamp": self.timestamp,
            "error": self.error,
        }


class AuditLogger:
    """Collects LLM audit records.

    Usage::

        audit = AuditLogger()
        # ... after a generation call ...
        audit.log(response, task="ad_copy")

        # Get usage summary
        print(audit.summary())
    """

    def __init__(self, persist_fn: Optional[Callable[[AuditRecord], None]] = None):
        """
        Parameters
        ----------
        persist_fn : callable, optional
            Function to persist an audit record.
            If None, records are stored in-memory only.
        """
        self._records: List[AuditRecord] = []
        self._persist_fn = persist_fn

    def log(
        self,
        response: GenerationResponse,
        *,
        task: str = "",
        error: Optional[str] = None,
    ) -> AuditRecord:
        """Record a completed generation call."""
        record = AuditRecord(
            task=task,
            provider=response.provider,
            model=response.model,
            prompt_hash=response.prompt_hash,
            input_tokens=response.input_tokens,
            output_tokens=response.output_tokens,
            latency_ms=response.latency_ms,
            error=error,
        )
        self._append(record)
        logger.info(
            "LLM audit: task=%s provider=%s model=%s tokens=%d+%d latency=%dms",
            record.task,
            record.provider,
            record.model,
            record.input_tokens,
            record.output_tokens,
            record.latency_ms,
        )
        return record

    def log_failure(
        self,
        *,
        task: str,
        model: str,
        error: str,
        provider: str = "",
        prompt_hash: str = "",
    ) -> AuditRecord:
        """Record a call that never produced a response."""
        record = AuditRecord(
            task=task,
            provider=provider,
            model=model,
            prompt_hash=prompt_hash,
            error=error,
        )
        self._append(record)
        logger.info("LLM audit: task=%s model=%s failed: %s", task, model, error)
        return record

    def _append(self, record: AuditRecord) -> None:
        self._records.append(record)
        if self._persist_fn:
            try:
                self._persist_fn(record)
            except Exception as e:
                logger.error("Failed to persist audit record: %s", e)

    def summary(self) -> Dict[str, Any]:
        """Return aggregate stats for all recorded calls."""
        by_task: Dict[str, Dict[str, int]] = {}
        for r in self._records:
            if r.task not in by_task:
                by_task[r.task] = {"calls": 0, "errors": 0, "input_tokens": 0, "output_tokens": 0}
            by_task[r.task]["calls"] += 1
            by_task[r.task]["errors"] += 1 if r.error else 0
            by_task[r.task]["input_tokens"] += r.input_tokens
            by_task[r.task]["output_tokens"] += r.output_tokens

        return {
            "total_calls": len(self._records),
            "total_input_tokens": sum(r.input_tokens for r in self._records),
            "total_output_tokens": sum(r.output_tokens for r in self._records),
            "total_latency_ms": sum(r.latency_ms for r in self._records),
            "errors": sum(1 for r in self._records if r.error),
            "by_task": by_task,
        }

    @property
    def records(self) -> List[AuditRecord]:
        return list(self._records)
