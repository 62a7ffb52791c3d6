"""
Shared testing utilities for diagram pipeline tests.

- fakes: in-memory renderer backend and model call
"""

from .fakes import FakeLLM, FakeRenderer

__all__ = [
    "FakeLLM",
    "FakeRenderer",
]
