"""Kroki renderer backend.

API: POST {KROKI_URL}/mermaid/svg with the diagram source as the body.
Kroki answers 400 with the parser message when the source is invalid.
"""

import logging

from core.theming import ResolvedTheme
from core.utils.async_http_client import BaseAsyncHttpClient
from core.utils.http_errors import safe_http_request

from ..errors import (
    DiagramSyntaxError,
    RenderError,
    RendererTimeoutError,
    RendererUnavailableError,
)
from .base import DiagramRenderer

logger = logging.getLogger(__name__)

DIAGRAM_TYPE = "mermaid"
OUTPUT_FORMAT = "svg"


class KrokiRenderer(BaseAsyncHttpClient, DiagramRenderer):
    """Render Mermaid through a Kroki server."""

    @property
    def name(self) -> str:
        return "kroki"

    async def render(self, source: str, theme: ResolvedTheme) -> str:
        """Render themed source to SVG via Kroki."""
        client = await self._get_client()
        payload = self.prepare_source(source, theme)

        try:
            response = await safe_http_request(
                client,
                "POST",
                f"/{DIAGRAM_TYPE}/{OUTPUT_FORMAT}",
                error_class=RenderError,
                status_errors={400: DiagramSyntaxError},
                connect_error_class=RendererUnavailableError,
                timeout_error_class=RendererTimeoutError,
                content=payload.encode("utf-8"),
                headers={"Content-Type": "text/plain"},
            )
        except RenderError as e:
            e.renderer = self.name
            raise

        svg = response.text
        if "<svg" not in svg:
            raise RenderError("Kroki response did not contain SVG markup", renderer=self.name)

        logger.debug(f"Kroki rendered {len(payload)} chars of source into {len(svg)} chars of SVG")
        return svg
