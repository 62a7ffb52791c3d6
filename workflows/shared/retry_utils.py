"""Retry utilities for async operations."""

import asyncio
import logging
from typing import Awaitable, Callable, Type, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def with_retry(
    fn: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    backoff_factor: float = 2.0,
    retry_on: Type[Exception] | tuple[Type[Exception], ...] = Exception,
    error_message: str = "Operation failed after {attempts} attempts",
) -> T:
    """Execute async function with exponential backoff retry.

    Exceptions not matching retry_on propagate immediately.
    """
    last_error = None
    for attempt in range(max_attempts):
        try:
            return await fn()
        except retry_on as e:
            last_error = e
            if attempt < max_attempts - 1:
                wait_time = backoff_factor**attempt
                logger.warning(
                    f"Attempt {attempt + 1}/{max_attempts} failed: {e}. Retrying in {wait_time:.1f}s"
                )
                await asyncio.sleep(wait_time)
    raise RuntimeError(error_message.format(attempts=max_attempts)) from last_error
