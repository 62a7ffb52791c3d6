"""Tests for environment-driven render configuration."""

import pytest

from core.rendering import RenderConfig


class TestRenderConfig:
    """Tests for RenderConfig defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in (
            "DIAGRAM_RENDERER",
            "KROKI_URL",
            "MMDC_PATH",
            "DIAGRAM_RENDER_TIMEOUT",
            "DIAGRAM_RENDER_CONCURRENCY",
            "DIAGRAM_PNG_DPI",
            "DIAGRAM_INCLUDE_PNG",
        ):
            monkeypatch.delenv(name, raising=False)

        config = RenderConfig()

        assert config.renderer == "kroki"
        assert config.kroki_url == "https://kroki.io"
        assert config.mmdc_path == "mmdc"
        assert config.timeout == 30.0
        assert config.max_concurrent == 4
        assert config.png_dpi == 150
        assert config.include_png is False

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("DIAGRAM_RENDERER", " Mermaid-CLI ")
        monkeypatch.setenv("KROKI_URL", "http://localhost:8000/")
        monkeypatch.setenv("DIAGRAM_RENDER_TIMEOUT", "7.5")
        monkeypatch.setenv("DIAGRAM_RENDER_CONCURRENCY", "8")
        monkeypatch.setenv("DIAGRAM_INCLUDE_PNG", "yes")

        config = RenderConfig()

        assert config.renderer == "mermaid-cli"
        assert config.kroki_url == "http://localhost:8000"
        assert config.timeout == 7.5
        assert config.max_concurrent == 8
        assert config.include_png is True

    def test_unknown_renderer(self, monkeypatch):
        monkeypatch.setenv("DIAGRAM_RENDERER", "graphviz")
        with pytest.raises(ValueError, match="Unknown renderer"):
            RenderConfig()

    def test_concurrency_must_be_positive(self):
        with pytest.raises(ValueError, match="max_concurrent"):
            RenderConfig(renderer="kroki", max_concurrent=0)
