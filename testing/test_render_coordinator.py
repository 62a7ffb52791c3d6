"""Tests for the render coordinator using an in-memory renderer."""

import asyncio
import logging

import pytest

import core.rendering.coordinator as coordinator_module
from core.diagrams import DiagramSpec, RenderState
from core.rendering import (
    DiagramSyntaxError,
    RenderConfig,
    RenderCoordinator,
    RendererUnavailableError,
    render_diagram,
    render_diagrams,
    validate_diagram,
)
from core.theming import ThemeRequest, get_preset
from testing.utils import FakeRenderer


def _spec(title, body):
    return DiagramSpec(title=title, source_text=f"flowchart TD\n    {body}")


@pytest.fixture
def coordinator(fake_renderer, render_config):
    return RenderCoordinator(renderer=fake_renderer, config=render_config)


class TestRender:
    """Tests for rendering a single diagram."""

    def test_success(self, coordinator, fake_renderer, simple_spec):
        result = asyncio.run(coordinator.render(simple_spec))

        assert result.ok
        assert result.state == RenderState.RENDERED
        assert result.title == "Login Flow"
        assert result.artifact.startswith("<svg")
        assert result.error_message is None
        assert result.failed_stage is None
        assert result.sanitized_source == simple_spec.source_text
        assert fake_renderer.calls == [simple_spec.source_text]

    def test_source_is_sanitized_before_render(self, coordinator, fake_renderer):
        spec = DiagramSpec(
            title="Fenced",
            source_text="```mermaid\nflowchart TD\n  A[Load (cache)] --> B\n```\nNote: done",
        )
        result = asyncio.run(coordinator.render(spec))

        assert result.ok
        assert result.sanitized_source == "flowchart TD\n  A[Load - cache -] --> B"
        assert fake_renderer.calls == [result.sanitized_source]

    def test_theme_reaches_renderer(self, coordinator, fake_renderer, simple_spec):
        asyncio.run(coordinator.render(simple_spec, ThemeRequest(preset_id="forest")))

        prepared = fake_renderer.prepared[0]
        assert prepared.startswith("%%{init: ")
        assert get_preset("forest").node_color in prepared
        assert prepared.endswith(simple_spec.source_text)

    def test_syntax_error_becomes_failed_result(self, render_config):
        renderer = FakeRenderer(fail_on={"BROKEN": DiagramSyntaxError("Parse error on line 2")})
        coordinator = RenderCoordinator(renderer=renderer, config=render_config)

        result = asyncio.run(coordinator.render(_spec("Bad", "A[BROKEN] --> B")))

        assert not result.ok
        assert result.state == RenderState.FAILED
        assert result.failed_stage == RenderState.THEME_RESOLVED
        assert result.error_message == "Parse error on line 2"
        assert result.artifact is None
        assert result.sanitized_source == "flowchart TD\n    A[BROKEN] --> B"

    def test_unexpected_error_becomes_failed_result(self, render_config):
        renderer = FakeRenderer(fail_on={"BOOM": RuntimeError("backend crashed")})
        coordinator = RenderCoordinator(renderer=renderer, config=render_config)

        result = asyncio.run(coordinator.render(_spec("Crash", "BOOM --> B")))

        assert not result.ok
        assert result.error_message == "RuntimeError: backend crashed"

    def test_empty_source_fails_at_sanitize(self, coordinator, fake_renderer):
        result = asyncio.run(coordinator.render(DiagramSpec(title="Empty", source_text="```\n```")))

        assert not result.ok
        assert result.failed_stage == RenderState.SANITIZED
        assert result.sanitized_source == ""
        assert "empty" in result.error_message
        assert fake_renderer.calls == []

    def test_rejects_non_spec(self, coordinator):
        with pytest.raises(TypeError):
            asyncio.run(coordinator.render("flowchart TD\nA-->B"))

    def test_decision_styling_applied_when_colors_differ(self, coordinator, simple_spec):
        request = ThemeRequest(
            overrides={"edgeLabelColor": "#000000", "decision_text_color": "#ff0000"}
        )
        result = asyncio.run(coordinator.render(simple_spec, request))

        assert 'fill="#ff0000"' in result.artifact
        assert 'fill="#000000"' not in result.artifact

    def test_decision_styling_skipped_by_default(self, coordinator, simple_spec):
        result = asyncio.run(coordinator.render(simple_spec))
        assert 'fill="#000000"' in result.artifact

    def test_png_conversion(self, fake_renderer, render_config, simple_spec, monkeypatch):
        calls = []

        def fake_convert(svg, dpi, background_color):
            calls.append((dpi, background_color))
            return b"\x89PNG"

        monkeypatch.setattr(coordinator_module, "convert_svg_to_png", fake_convert)
        render_config.include_png = True
        coordinator = RenderCoordinator(renderer=fake_renderer, config=render_config)

        result = asyncio.run(coordinator.render(simple_spec))

        assert result.png_bytes == b"\x89PNG"
        assert calls == [(render_config.png_dpi, get_preset(None).preview_bg)]


class TestRenderBatch:
    """Tests for concurrent batch rendering."""

    def test_failure_does_not_abort_batch(self, render_config):
        renderer = FakeRenderer(fail_on={"BROKEN": DiagramSyntaxError("Parse error")})
        coordinator = RenderCoordinator(renderer=renderer, config=render_config)
        specs = [
            _spec("First", "A --> B"),
            _spec("Second", "A[BROKEN] --> B"),
            _spec("Third", "C --> D"),
        ]

        results = asyncio.run(coordinator.render_batch(specs))

        assert [r.title for r in results] == ["First", "Second", "Third"]
        assert [r.ok for r in results] == [True, False, True]

    def test_results_keep_input_order(self, render_config):
        renderer = FakeRenderer(delays={"slow": 0.05})
        coordinator = RenderCoordinator(renderer=renderer, config=render_config)
        specs = [_spec("Slow", "slow --> X"), _spec("Fast", "fast --> Y")]

        results = asyncio.run(coordinator.render_batch(specs, max_concurrent=2))

        assert [r.title for r in results] == ["Slow", "Fast"]
        assert "fast" in renderer.completed[0]

    def test_concurrency_limit_of_one_is_sequential(self, render_config):
        renderer = FakeRenderer(delays={"slow": 0.05})
        coordinator = RenderCoordinator(renderer=renderer, config=render_config)
        specs = [_spec("Slow", "slow --> X"), _spec("Fast", "fast --> Y")]

        asyncio.run(coordinator.render_batch(specs, max_concurrent=1))

        assert "slow" in renderer.completed[0]

    def test_duplicate_titles(self, coordinator):
        specs = [_spec("Same", "A --> B"), _spec("Same", "C --> D")]
        results = asyncio.run(coordinator.render_batch(specs))

        assert [r.sanitized_source.splitlines()[1].strip() for r in results] == [
            "A --> B",
            "C --> D",
        ]

    def test_raising_task_becomes_failed_result(self, coordinator, simple_spec, monkeypatch):
        original = coordinator.render

        async def render(spec, theme_request=None):
            if spec.title == "Explodes":
                raise RuntimeError("task died")
            return await original(spec, theme_request)

        monkeypatch.setattr(coordinator, "render", render)
        specs = [simple_spec, _spec("Explodes", "A --> B")]

        results = asyncio.run(coordinator.render_batch(specs))

        assert results[0].ok
        assert results[1].error_message == "task died"
        assert not results[1].ok
        assert results[1].failed_stage == RenderState.PENDING

    def test_empty_batch(self, coordinator):
        assert asyncio.run(coordinator.render_batch([])) == []


class TestValidate:
    """Tests for validate-only mode."""

    def test_valid_source(self, coordinator, fake_renderer):
        result = asyncio.run(coordinator.validate("```mermaid\nflowchart TD\nA --> B\n```"))

        assert result.is_valid
        assert result.error_message is None
        assert result.sanitized_source == "flowchart TD\nA --> B"
        assert fake_renderer.calls == []

    def test_invalid_source(self, coordinator):
        result = asyncio.run(coordinator.validate("flowchart TD\nA[open --> B"))

        assert not result.is_valid
        assert "Missing ']'" in result.error_message
        assert [issue.line for issue in result.issues] == [2]

    def test_backend_unavailable(self, render_config):
        class UnavailableRenderer(FakeRenderer):
            async def parse(self, source):
                raise RendererUnavailableError("no backend", renderer=self.name)

        coordinator = RenderCoordinator(renderer=UnavailableRenderer(), config=render_config)
        result = asyncio.run(coordinator.validate("flowchart TD\nA --> B"))

        assert not result.is_valid
        assert result.error_message == "no backend"
        assert result.issues == []

    def test_unexpected_error_becomes_invalid(self, render_config, caplog):
        class CrashingRenderer(FakeRenderer):
            async def parse(self, source):
                raise RuntimeError("parser crashed")

        coordinator = RenderCoordinator(renderer=CrashingRenderer(), config=render_config)
        with caplog.at_level(logging.ERROR, logger="core.rendering.coordinator"):
            result = asyncio.run(coordinator.validate("flowchart TD\nA --> B"))

        assert not result.is_valid
        assert result.error_message == "RuntimeError: parser crashed"
        assert result.sanitized_source == "flowchart TD\nA --> B"
        assert "parser crashed" in caplog.text


class TestGlobalCoordinator:
    """Tests for the module-level helpers."""

    def test_helpers_use_global_instance(self, fake_renderer, render_config, simple_spec, monkeypatch):
        coordinator = RenderCoordinator(renderer=fake_renderer, config=render_config)
        monkeypatch.setattr(coordinator_module, "_coordinator", coordinator)

        assert asyncio.run(render_diagram(simple_spec)).ok
        assert len(asyncio.run(render_diagrams([simple_spec, simple_spec]))) == 2
        assert asyncio.run(validate_diagram(simple_spec.source_text)).is_valid

    def test_close(self, fake_renderer, render_config, monkeypatch):
        coordinator = RenderCoordinator(renderer=fake_renderer, config=render_config)
        monkeypatch.setattr(coordinator_module, "_coordinator", coordinator)

        asyncio.run(coordinator_module._close_render_coordinator())

        assert fake_renderer.closed
        assert coordinator_module._coordinator is None


def test_config_rejects_unknown_renderer():
    with pytest.raises(ValueError):
        RenderConfig(renderer="graphviz")


def test_workflow_cleanup_closes_global_coordinator(fake_renderer, render_config, monkeypatch):
    import core.utils.async_http_client as http_client_module
    from workflows.article_to_diagrams import cleanup_diagram_resources

    monkeypatch.setattr(http_client_module, "_cleanup_registry", [])
    monkeypatch.setattr(coordinator_module, "_coordinator", None)
    monkeypatch.setattr(
        coordinator_module,
        "RenderCoordinator",
        lambda: RenderCoordinator(renderer=fake_renderer, config=render_config),
    )

    coordinator_module.get_render_coordinator()
    asyncio.run(cleanup_diagram_resources())

    assert fake_renderer.closed
    assert coordinator_module._coordinator is None
