"""Shared utilities for diagram generation workflows."""

from .llm_utils import ModelTier, extract_response_content, get_llm
from .retry_utils import with_retry

__all__ = [
    "ModelTier",
    "extract_response_content",
    "get_llm",
    "with_retry",
]
