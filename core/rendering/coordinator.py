"""Render coordinator: sanitize, resolve theme, render, collect results.

Per-diagram lifecycle: pending -> sanitized -> theme_resolved -> rendered,
or failed from any step after pending.

A failure is captured in that diagram's RenderResult and never aborts the
rest of a batch. Nothing is retried; callers re-invoke render() with an
edited source to start over.
"""

import logging

from core.diagrams.sanitizer import sanitize
from core.diagrams.schemas import DiagramSpec, RenderResult, RenderState, ValidationResult
from core.diagrams.syntax import check_syntax
from core.theming import ThemeRequest, resolve_theme
from core.utils.async_http_client import register_cleanup
from core.utils.concurrency import run_with_concurrency

from .config import RenderConfig, get_render_config
from .conversion import convert_svg_to_png
from .errors import DiagramSyntaxError, RenderError
from .renderers import DiagramRenderer, get_renderer
from .svg_styling import apply_decision_text_styling

logger = logging.getLogger(__name__)


class RenderCoordinator:
    """Renders DiagramSpecs through a renderer backend.

    Usage:
        coordinator = get_render_coordinator()
        result = await coordinator.render(spec, ThemeRequest(preset_id="ocean"))
        results = await coordinator.render_batch(specs)

    Args:
        renderer: Backend to use; created from config on first use when None
        config: Render configuration (defaults to the global config)
    """

    def __init__(
        self,
        renderer: DiagramRenderer | None = None,
        config: RenderConfig | None = None,
    ):
        self._config = config or get_render_config()
        self._renderer = renderer

    def _get_renderer(self) -> DiagramRenderer:
        """Get or create renderer (lazy initialization)."""
        if self._renderer is None:
            self._renderer = get_renderer(self._config)
        return self._renderer

    def _failed(
        self, spec: DiagramSpec, sanitized: str, stage: RenderState, message: str
    ) -> RenderResult:
        return RenderResult(
            title=spec.title,
            ok=False,
            error_message=message,
            sanitized_source=sanitized,
            state=RenderState.FAILED,
            failed_stage=stage,
        )

    async def render(
        self,
        spec: DiagramSpec,
        theme_request: ThemeRequest | None = None,
    ) -> RenderResult:
        """Render one diagram. Never raises for a bad diagram.

        Args:
            spec: Diagram to render; its source is sanitized again here
            theme_request: Preset and overrides (default preset when None)

        Returns:
            RenderResult with SVG on success or an error message on failure
        """
        if not isinstance(spec, DiagramSpec):
            raise TypeError(f"spec must be a DiagramSpec, got {type(spec).__name__}")

        state = RenderState.PENDING
        sanitized = spec.source_text

        try:
            sanitized = sanitize(spec.source_text)
            state = RenderState.SANITIZED
            if not sanitized:
                raise DiagramSyntaxError("Diagram source is empty after sanitization")

            theme = resolve_theme(theme_request)
            state = RenderState.THEME_RESOLVED

            svg = await self._get_renderer().render(sanitized, theme)
            if theme.decision_text_color != theme.edge_label_color:
                svg = apply_decision_text_styling(svg, theme.decision_text_color)

        except RenderError as e:
            logger.warning(f"Render failed for '{spec.title}' at {state.value}: {e.message}")
            return self._failed(spec, sanitized, state, e.message)
        except Exception as e:
            logger.exception(f"Unexpected error rendering '{spec.title}' at {state.value}")
            return self._failed(spec, sanitized, state, f"{type(e).__name__}: {e}")

        png_bytes = None
        if self._config.include_png:
            png_bytes = convert_svg_to_png(
                svg, dpi=self._config.png_dpi, background_color=theme.background
            )

        logger.info(f"Rendered '{spec.title}' ({len(svg)} chars of SVG)")
        return RenderResult(
            title=spec.title,
            ok=True,
            artifact=svg,
            sanitized_source=sanitized,
            state=RenderState.RENDERED,
            png_bytes=png_bytes,
        )

    async def validate(self, source: str) -> ValidationResult:
        """Sanitize and parse-check source without rendering an image."""
        if not isinstance(source, str):
            raise TypeError(f"source must be a string, got {type(source).__name__}")

        sanitized = sanitize(source)
        try:
            await self._get_renderer().parse(sanitized)
        except DiagramSyntaxError as e:
            return ValidationResult(
                is_valid=False,
                error_message=e.message,
                sanitized_source=sanitized,
                issues=check_syntax(sanitized),
            )
        except RenderError as e:
            logger.warning(f"Validation could not run: {e.message}")
            return ValidationResult(
                is_valid=False, error_message=e.message, sanitized_source=sanitized
            )
        except Exception as e:
            logger.exception(f"Unexpected error validating diagram: {e}")
            return ValidationResult(
                is_valid=False,
                error_message=f"{type(e).__name__}: {e}",
                sanitized_source=sanitized,
            )

        return ValidationResult(is_valid=True, sanitized_source=sanitized)

    async def render_batch(
        self,
        specs: list[DiagramSpec],
        theme_request: ThemeRequest | None = None,
        max_concurrent: int | None = None,
    ) -> list[RenderResult]:
        """Render diagrams concurrently, one result per spec in input order.

        Args:
            specs: Diagrams to render
            theme_request: Theme shared by every diagram in the batch
            max_concurrent: Renders in flight at once (default from config)
        """
        if not specs:
            return []

        limit = max_concurrent or self._config.max_concurrent
        outcomes = await run_with_concurrency(
            [self.render(spec, theme_request) for spec in specs],
            max_concurrent=limit,
        )

        results: list[RenderResult] = []
        for spec, outcome in zip(specs, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"Render task for '{spec.title}' raised: {outcome}")
                outcome = self._failed(spec, spec.source_text, RenderState.PENDING, str(outcome))
            results.append(outcome)

        ok_count = sum(1 for r in results if r.ok)
        logger.info(f"Rendered batch: {ok_count}/{len(results)} succeeded")
        return results

    async def close(self) -> None:
        """Close the renderer backend."""
        if self._renderer is not None:
            await self._renderer.close()
            self._renderer = None


_coordinator: RenderCoordinator | None = None


def get_render_coordinator() -> RenderCoordinator:
    """Get global RenderCoordinator instance."""
    global _coordinator
    if _coordinator is None:
        _coordinator = RenderCoordinator()
        register_cleanup("RenderCoordinator", _close_render_coordinator)
    return _coordinator


async def _close_render_coordinator() -> None:
    """Close the global RenderCoordinator."""
    global _coordinator
    if _coordinator:
        await _coordinator.close()
        _coordinator = None


async def render_diagram(
    spec: DiagramSpec, theme_request: ThemeRequest | None = None
) -> RenderResult:
    """Render one diagram with the global coordinator."""
    return await get_render_coordinator().render(spec, theme_request)


async def validate_diagram(source: str) -> ValidationResult:
    """Validate diagram source with the global coordinator."""
    return await get_render_coordinator().validate(source)


async def render_diagrams(
    specs: list[DiagramSpec],
    theme_request: ThemeRequest | None = None,
    max_concurrent: int | None = None,
) -> list[RenderResult]:
    """Render a batch with the global coordinator."""
    return await get_render_coordinator().render_batch(specs, theme_request, max_concurrent)


__all__ = [
    "RenderCoordinator",
    "get_render_coordinator",
    "render_diagram",
    "render_diagrams",
    "validate_diagram",
]
