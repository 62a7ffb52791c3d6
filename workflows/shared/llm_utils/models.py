"""Model tier definitions and LLM initialization."""

import os
from enum import Enum
from typing import Any

from dotenv import load_dotenv

load_dotenv()

from core.config import configure_langsmith

configure_langsmith()

from langchain_anthropic import ChatAnthropic

# Diagram batches are long: several full Mermaid definitions per response
DEFAULT_MAX_TOKENS = 16384
DEFAULT_TEMPERATURE = 0.7


class ModelTier(Enum):
    """Model tiers for diagram generation.

    HAIKU: Fast drafts, short articles
    SONNET: Default for article-to-diagram generation
    OPUS: Long or dense articles
    """
    HAIKU = "claude-haiku-4-5-20251001"
    SONNET = "claude-sonnet-4-5-20250929"
    OPUS = "claude-opus-4-5-20251101"


def get_llm(
    tier: ModelTier = ModelTier.SONNET,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
) -> ChatAnthropic:
    """
    Get a configured Anthropic Claude LLM instance.

    Args:
        tier: Model tier selection (HAIKU, SONNET, OPUS)
        max_tokens: Maximum output tokens
        temperature: Sampling temperature; diagram layouts benefit from some variety

    Returns:
        ChatAnthropic instance configured for the specified tier

    Raises:
        ValueError: If ANTHROPIC_API_KEY is not set
    """
    api_key = os.getenv("ANTHROPIC_API_KEY")
    if not api_key:
        raise ValueError("ANTHROPIC_API_KEY not set")

    kwargs: dict[str, Any] = {
        "model": tier.value,
        "api_key": api_key,
        "max_tokens": max_tokens,
        "temperature": temperature,
    }
    return ChatAnthropic(**kwargs)
