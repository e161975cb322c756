"""Task functions -- one awaitable operation per task.

Each task:
    1. rejects blank input locally (no network call),
    2. renders its prompt and schema,
    3. makes exactly one provider call,
    4. decodes the response.

Every per-request fault (transport, auth, remote, decoding) is absorbed
here and returned as ``None``.  Details go to the log and audit trail.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from adcore.providers.audit import AuditLogger
from adcore.providers.base import GenerationConfig, LLMProvider, prompt_digest

from ..config.models import AdCopyResult, NegativeKeywordEntry, OptimizationAnalysis
from ..config.settings import AppSettings
from .parser import parse_response
from .prompts import (
    build_ad_copy_prompt,
    build_negative_keywords_prompt,
    build_performance_prompt,
)
from .schemas import TASK_SCHEMAS, TaskName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskContext:
    """Collaborators shared read-only by every task invocation."""

    provider: LLMProvider
    config: GenerationConfig = GenerationConfig()
    audit: Optional[AuditLogger] = None

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        provider: LLMProvider,
        audit: Optional[AuditLogger] = None,
    ) -> "TaskContext":
        return cls(
            provider=provider,
            config=GenerationConfig(model=settings.model, temperature=settings.temperature),
            audit=audit,
        )


def blank_fields(**inputs: Optional[str]) -> List[str]:
    """Return the names of inputs that are empty after trimming."""
    return [name for name, value in inputs.items() if not (value or "").strip()]


async def _run(
    ctx: TaskContext,
    task: TaskName,
    prompt: str,
    result_type: Any,
) -> Optional[Any]:
    schema = TASK_SCHEMAS[task]
    try:
        response = await ctx.provider.generate_structured(prompt, schema, config=ctx.config)
    except Exception as e:
        logger.exception("Task %s failed: generation call raised %s", task.value, type(e).__name__)
        if ctx.audit:
            ctx.audit.log_failure(
                task=task.value,
                model=ctx.config.model,
                provider=getattr(ctx.provider, "provider_name", ""),
                prompt_hash=prompt_digest(prompt),
                error=str(e),
            )
        return None

    result = parse_response(task.value, response.raw_text, result_type)
    if ctx.audit:
        ctx.audit.log(
            response,
            task=task.value,
            error=None if result is not None else "invalid response",
        )
    return result


def _reject_blank(task: TaskName, inputs: Dict[str, Optional[str]]) -> bool:
    missing = blank_fields(**inputs)
    if missing:
        logger.info("Task %s skipped: missing input %s", task.value, ", ".join(missing))
        return True
    return False


async def generate_ad_copy(ctx: TaskContext, keywords: str) -> Optional[AdCopyResult]:
    """Generate headlines, long headlines and descriptions for ``keywords``."""
    if _reject_blank(TaskName.AD_COPY, {"keywords": keywords}):
        return None
    return await _run(
        ctx, TaskName.AD_COPY, build_ad_copy_prompt(keywords), AdCopyResult,
    )


async def analyze_performance(
    ctx: TaskContext,
    keywords: str,
    ad_copy: str,
    landing_page_url: str,
) -> Optional[OptimizationAnalysis]:
    """Estimate Quality Score / Ad Rank potential and suggest improvements.

    All three inputs are required.
    """
    inputs = {
        "keywords": keywords,
        "ad_copy": ad_copy,
        "landing_page_url": landing_page_url,
    }
    if _reject_blank(TaskName.PERFORMANCE_ANALYSIS, inputs):
        return None
    return await _run(
        ctx,
        TaskName.PERFORMANCE_ANALYSIS,
        build_performance_prompt(keywords, ad_copy, landing_page_url),
        OptimizationAnalysis,
    )


async def find_negative_keywords(
    ctx: TaskContext, keywords: str
) -> Optional[List[NegativeKeywordEntry]]:
    """Suggest terms to exclude for ``keywords``, each with a match type."""
    if _reject_blank(TaskName.NEGATIVE_KEYWORDS, {"keywords": keywords}):
        return None
    return await _run(
        ctx,
        TaskName.NEGATIVE_KEYWORDS,
        build_negative_keywords_prompt(keywords),
        List[NegativeKeywordEntry],
    )
