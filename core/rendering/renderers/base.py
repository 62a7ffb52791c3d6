"""Base class for diagram renderer backends."""

from abc import ABC, abstractmethod

from core.diagrams.syntax import check_syntax, format_issues
from core.theming import ResolvedTheme
from core.utils.async_context import AsyncContextManager

from ..directives import apply_theme_directive
from ..errors import DiagramSyntaxError


class DiagramRenderer(AsyncContextManager, ABC):
    """Abstract base for renderers that turn Mermaid source into SVG."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Renderer identifier used in errors and logs."""
        pass

    @abstractmethod
    async def render(self, source: str, theme: ResolvedTheme) -> str:
        """Render source with a theme.

        Args:
            source: Sanitized diagram source
            theme: Resolved theme to apply

        Returns:
            SVG markup

        Raises:
            DiagramSyntaxError: Source was rejected by the diagram grammar
            RenderError: Any other backend failure
        """
        pass

    async def parse(self, source: str) -> None:
        """Check source without producing an image.

        Raises:
            DiagramSyntaxError: Source has syntax problems
        """
        issues = check_syntax(source)
        if issues:
            raise DiagramSyntaxError(format_issues(issues), renderer=self.name)

    def prepare_source(self, source: str, theme: ResolvedTheme) -> str:
        """Source as sent to the backend, with the theme directive applied."""
        return apply_theme_directive(source, theme)

    async def close(self) -> None:
        """Release backend resources."""
        pass
