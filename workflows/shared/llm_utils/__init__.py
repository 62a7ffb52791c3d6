"""LLM utilities for diagram generation workflows.

Provides Anthropic Claude model selection (Haiku/Sonnet/Opus) and
response text extraction.
"""

from .models import DEFAULT_MAX_TOKENS, ModelTier, get_llm
from .response_parsing import extract_response_content

__all__ = [
    "DEFAULT_MAX_TOKENS",
    "ModelTier",
    "extract_response_content",
    "get_llm",
]
