"""Model call for article-to-diagrams generation."""

import logging

from workflows.shared.llm_utils import (
    DEFAULT_MAX_TOKENS,
    ModelTier,
    extract_response_content,
    get_llm,
)
from workflows.shared.retry_utils import with_retry

from .errors import EmptyResponseError
from .prompts import ARTICLE_TO_DIAGRAMS_PROMPT

logger = logging.getLogger(__name__)


async def request_diagram_response(
    prompt: str,
    tier: ModelTier = ModelTier.SONNET,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    max_attempts: int = 3,
) -> str:
    """Send the article prompt to the model and return its text.

    Transient API failures are retried with exponential backoff.

    Args:
        prompt: User prompt from build_article_prompt
        tier: Model tier
        max_tokens: Output token limit; several diagrams per response need room
        max_attempts: Attempts before giving up

    Returns:
        Raw response text (delimited diagrams, possibly with noise)

    Raises:
        EmptyResponseError: Model returned no text
        RuntimeError: All attempts failed
    """
    llm = get_llm(tier=tier, max_tokens=max_tokens)

    async def _invoke():
        return await llm.ainvoke(
            [
                {"role": "system", "content": ARTICLE_TO_DIAGRAMS_PROMPT},
                {"role": "user", "content": prompt},
            ]
        )

    response = await with_retry(
        _invoke,
        max_attempts=max_attempts,
        error_message="Diagram generation failed after {attempts} attempts",
    )

    text = extract_response_content(response)
    if not text:
        raise EmptyResponseError("Model returned an empty response")

    logger.info(f"Received diagram response ({len(text)} chars) from {tier.name}")
    return text
