"""
Pytest configuration for diagram pipeline tests.

Usage:
    pytest testing/
    pytest testing/test_sanitizer.py
"""

from collections.abc import Generator

import pytest

from core.diagrams import DiagramSpec
from core.logging import end_run, start_run
from core.rendering import RenderConfig
from testing.utils import FakeRenderer


@pytest.fixture(autouse=True)
def logging_run(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Rotate logs at test module boundaries.

    Each test module gets its own logging run, which triggers log rotation
    on first write to each module's log file.
    """
    # Use test module path as run identifier (e.g., "test-testing-test_sanitizer")
    test_path = request.node.nodeid.split("::")[0]
    test_name = test_path.replace("/", "-").replace(".py", "")
    start_run(f"test-{test_name}")
    yield
    end_run()


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def render_config() -> RenderConfig:
    """Config independent of the environment's renderer settings."""
    return RenderConfig(
        renderer="kroki",
        kroki_url="http://kroki.test",
        timeout=5.0,
        max_concurrent=2,
        include_png=False,
    )


@pytest.fixture
def simple_spec() -> DiagramSpec:
    return DiagramSpec(
        title="Login Flow",
        source_text=(
            "flowchart TD\n"
            "    A((Start)) --> B{Valid?}\n"
            "    B -->|Yes| C([Home])\n"
            "    B -->|No| A"
        ),
    )


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests requiring external services",
    )
