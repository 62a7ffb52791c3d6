"""Diagram rendering: theme injection, backends and the render coordinator.

Example:
    from core.diagrams import DiagramSpec
    from core.rendering import render_diagrams
    from core.theming import ThemeRequest

    results = await render_diagrams(specs, ThemeRequest(preset_id="forest"))
    for result in results:
        print(result.title, "ok" if result.ok else result.error_message)

Environment Variables:
    DIAGRAM_RENDERER: "kroki" (default) or "mermaid-cli"
    KROKI_URL: Kroki server (default https://kroki.io)
    MMDC_PATH: mermaid-cli executable (default mmdc)
"""

from .config import RenderConfig, get_render_config
from .conversion import convert_svg_to_png
from .coordinator import (
    RenderCoordinator,
    get_render_coordinator,
    render_diagram,
    render_diagrams,
    validate_diagram,
)
from .directives import apply_theme_directive, build_init_directive, split_init_directive
from .errors import (
    DiagramSyntaxError,
    RenderError,
    RendererTimeoutError,
    RendererUnavailableError,
)
from .renderers import DiagramRenderer, KrokiRenderer, MermaidCliRenderer, get_renderer
from .svg_styling import apply_decision_text_styling

__all__ = [
    # Config
    "RenderConfig",
    "get_render_config",
    # Coordinator
    "RenderCoordinator",
    "get_render_coordinator",
    "render_diagram",
    "render_diagrams",
    "validate_diagram",
    # Backends
    "DiagramRenderer",
    "KrokiRenderer",
    "MermaidCliRenderer",
    "get_renderer",
    # Errors
    "DiagramSyntaxError",
    "RenderError",
    "RendererTimeoutError",
    "RendererUnavailableError",
    # Helpers
    "apply_decision_text_styling",
    "apply_theme_directive",
    "build_init_directive",
    "convert_svg_to_png",
    "split_init_directive",
]
