"""Article-to-diagrams entry point."""

import logging
import uuid
from typing import Awaitable, Callable

from core.diagrams import parse_diagram_response
from core.logging import end_run, start_run
from core.rendering import RenderCoordinator, get_render_coordinator
from core.theming import ThemeRequest

from .errors import ArticleTooShortError, EmptyResponseError, NoDiagramsError
from .generation import request_diagram_response
from .prompts import build_article_prompt
from .schemas import ArticleDiagramsResult

logger = logging.getLogger(__name__)

MIN_ARTICLE_CHARS = 10

LLMCall = Callable[[str], Awaitable[str]]


async def article_to_diagrams(
    article: str,
    theme_instructions: str | None = None,
    count: int = 3,
    theme_request: ThemeRequest | None = None,
    render: bool = True,
    llm_call: LLMCall | None = None,
    coordinator: RenderCoordinator | None = None,
) -> ArticleDiagramsResult:
    """Turn an article into titled, rendered diagrams.

    Pipeline:
    1. Build the prompt (article + optional theme instructions)
    2. One model call returning delimited diagrams
    3. Extract and sanitize diagrams (single-diagram fallback if the
       model ignored the delimiters)
    4. Optionally render every diagram; failures stay per-diagram

    Args:
        article: Article text (at least 10 non-blank characters)
        theme_instructions: Styling section for the prompt
        count: Number of diagrams to ask for
        theme_request: Theme applied at render time
        render: Render the extracted diagrams
        llm_call: Prompt -> response text; defaults to the Anthropic call
        coordinator: Render coordinator; defaults to the global one

    Returns:
        ArticleDiagramsResult with diagrams and (when rendered) results

    Raises:
        ArticleTooShortError: Article is empty or too short
        EmptyResponseError: Model returned nothing
        NoDiagramsError: Response contained no usable diagram

    Example:
        result = await article_to_diagrams(article_text, theme_request=ThemeRequest(preset_id="ocean"))
        for diagram, rendered in zip(result.diagrams, result.results):
            print(diagram.title, rendered.ok)
    """
    if not article or len(article.strip()) < MIN_ARTICLE_CHARS:
        raise ArticleTooShortError("Article text is too short or empty")
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    run_id = f"article-{uuid.uuid4().hex[:8]}"
    # Start logging run (triggers log rotation on first write to each module)
    start_run(run_id)

    try:
        prompt = build_article_prompt(article, theme_instructions, count)
        logger.info(
            f"[{run_id}] Requesting {count} diagram(s) for article of {len(article)} chars"
            + (" with theme instructions" if theme_instructions else "")
        )

        call = llm_call or request_diagram_response
        raw_response = await call(prompt)
        if not raw_response or not raw_response.strip():
            raise EmptyResponseError("Model returned an empty response")

        extraction = parse_diagram_response(raw_response)
        if not extraction.diagrams:
            raise NoDiagramsError(
                "Model response contained no diagrams", raw_response=raw_response
            )

        for i, diagram in enumerate(extraction.diagrams, start=1):
            first_line = diagram.source_text.split("\n", 1)[0]
            logger.debug(f"  {i}. '{diagram.title}' ({first_line})")

        results = []
        if render:
            coordinator = coordinator or get_render_coordinator()
            results = await coordinator.render_batch(extraction.diagrams, theme_request)

        return ArticleDiagramsResult(
            diagrams=extraction.diagrams,
            results=results,
            used_fallback=extraction.used_fallback,
            raw_response=raw_response,
        )
    finally:
        end_run()
