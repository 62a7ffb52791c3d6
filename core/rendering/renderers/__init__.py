"""Renderer backends."""

from ..config import RenderConfig, get_render_config
from .base import DiagramRenderer
from .kroki import KrokiRenderer
from .mermaid_cli import MermaidCliRenderer


def get_renderer(config: RenderConfig | None = None) -> DiagramRenderer:
    """Create the renderer selected by configuration."""
    config = config or get_render_config()
    if config.renderer == "mermaid-cli":
        return MermaidCliRenderer(mmdc_path=config.mmdc_path, timeout=config.timeout)
    return KrokiRenderer(base_url=config.kroki_url, timeout=config.timeout)


__all__ = [
    "DiagramRenderer",
    "KrokiRenderer",
    "MermaidCliRenderer",
    "get_renderer",
]
