"""Prompt building, schema declarations, parsing and the task functions."""

from .parser import parse_response
from .prompts import (
    build_ad_copy_prompt,
    build_negative_keywords_prompt,
    build_performance_prompt,
)
from .runner import (
    TaskContext,
    analyze_performance,
    blank_fields,
    find_negative_keywords,
    generate_ad_copy,
)
from .schemas import TASK_SCHEMAS, TaskName

__all__ = [
    "parse_response",
    "build_ad_copy_prompt",
    "build_negative_keywords_prompt",
    "build_performance_prompt",
    "TaskContext",
    "analyze_performance",
    "blank_fields",
    "find_negative_keywords",
    "generate_ad_copy",
    "TASK_SCHEMAS",
    "TaskName",
]
