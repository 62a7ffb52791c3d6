"""Configuration for diagram rendering."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

SUPPORTED_RENDERERS = ("kroki", "mermaid-cli")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class RenderConfig:
    """Configuration for the render coordinator and its backends.

    Environment Variables:
        DIAGRAM_RENDERER: "kroki" or "mermaid-cli" (default: kroki)
        KROKI_URL: Kroki server base URL (default: https://kroki.io)
        MMDC_PATH: mermaid-cli executable (default: mmdc)
        DIAGRAM_RENDER_TIMEOUT: Per-diagram timeout in seconds (default: 30)
        DIAGRAM_RENDER_CONCURRENCY: Diagrams rendered at once in a batch (default: 4)
        DIAGRAM_PNG_DPI: DPI for PNG conversion (default: 150)
        DIAGRAM_INCLUDE_PNG: Also convert successful renders to PNG (default: false)
    """

    renderer: str = field(
        default_factory=lambda: os.environ.get("DIAGRAM_RENDERER", "kroki").strip().lower()
    )
    kroki_url: str = field(
        default_factory=lambda: os.environ.get("KROKI_URL", "https://kroki.io").rstrip("/")
    )
    mmdc_path: str = field(default_factory=lambda: os.environ.get("MMDC_PATH", "mmdc"))
    timeout: float = field(
        default_factory=lambda: float(os.environ.get("DIAGRAM_RENDER_TIMEOUT", "30"))
    )
    max_concurrent: int = field(
        default_factory=lambda: int(os.environ.get("DIAGRAM_RENDER_CONCURRENCY", "4"))
    )
    png_dpi: int = field(default_factory=lambda: int(os.environ.get("DIAGRAM_PNG_DPI", "150")))
    include_png: bool = field(default_factory=lambda: _env_flag("DIAGRAM_INCLUDE_PNG"))

    def __post_init__(self) -> None:
        if self.renderer not in SUPPORTED_RENDERERS:
            raise ValueError(
                f"Unknown renderer '{self.renderer}', expected one of {SUPPORTED_RENDERERS}"
            )
        if self.max_concurrent < 1:
            raise ValueError(f"max_concurrent must be >= 1, got {self.max_concurrent}")


_config: RenderConfig | None = None


def get_render_config() -> RenderConfig:
    """Get global RenderConfig instance."""
    global _config
    if _config is None:
        _config = RenderConfig()
    return _config
