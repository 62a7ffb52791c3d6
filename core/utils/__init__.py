"""Core utilities for async HTTP clients and error handling."""

from .async_context import AsyncContextManager
from .async_http_client import (
    BaseAsyncHttpClient,
    cleanup_all_clients,
    register_cleanup,
)
from .concurrency import run_with_concurrency
from .http_errors import safe_http_request

__all__ = [
    "AsyncContextManager",
    "BaseAsyncHttpClient",
    "cleanup_all_clients",
    "register_cleanup",
    "run_with_concurrency",
    "safe_http_request",
]
