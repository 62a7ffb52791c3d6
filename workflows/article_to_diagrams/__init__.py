"""Article to diagrams: one model call, many titled flowcharts.

Example:
    from workflows.article_to_diagrams import article_to_diagrams, build_theme_instructions

    result = await article_to_diagrams(
        article_text,
        theme_instructions=build_theme_instructions(),
        count=3,
    )
    print(f"{result.success_count}/{len(result.diagrams)} diagrams rendered")

Environment Variables:
    ANTHROPIC_API_KEY: Required for the default model call
"""

import logging

from .api import MIN_ARTICLE_CHARS, article_to_diagrams
from .errors import ArticleTooShortError, EmptyResponseError, NoDiagramsError
from .generation import request_diagram_response
from .prompts import ARTICLE_TO_DIAGRAMS_PROMPT, build_article_prompt
from .schemas import ArticleDiagramsResult
from .theme_instructions import (
    FlowchartOrientation,
    ThemeInstructionConfig,
    build_theme_instructions,
    theme_config_warnings,
    theme_instructions_from_preset,
)

__all__ = [
    "ARTICLE_TO_DIAGRAMS_PROMPT",
    "ArticleDiagramsResult",
    "ArticleTooShortError",
    "EmptyResponseError",
    "FlowchartOrientation",
    "MIN_ARTICLE_CHARS",
    "NoDiagramsError",
    "ThemeInstructionConfig",
    "article_to_diagrams",
    "build_article_prompt",
    "build_theme_instructions",
    "cleanup_diagram_resources",
    "request_diagram_response",
    "theme_config_warnings",
    "theme_instructions_from_preset",
]

logger = logging.getLogger(__name__)


async def cleanup_diagram_resources() -> None:
    """Clean up all diagram workflow resources (idempotent).

    Calls the central cleanup registry which closes the render coordinator
    and any HTTP clients created lazily during the workflow.
    """
    from core.utils.async_http_client import cleanup_all_clients

    await cleanup_all_clients()
