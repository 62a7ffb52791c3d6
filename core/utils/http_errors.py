"""HTTP error handling utilities."""

import logging
from typing import Any, Mapping, Optional, Type

import httpx

logger = logging.getLogger(__name__)


async def safe_http_request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    error_class: Type[Exception],
    status_errors: Optional[Mapping[int, Type[Exception]]] = None,
    connect_error_class: Optional[Type[Exception]] = None,
    timeout_error_class: Optional[Type[Exception]] = None,
    **kwargs: Any,
) -> httpx.Response:
    """
    Make HTTP request with consistent error handling.

    Args:
        client: httpx.AsyncClient instance
        method: HTTP method (GET, POST, etc.)
        path: Request path
        error_class: Exception class raised for any failure not mapped below
        status_errors: Status code -> exception class (e.g. {400: DiagramSyntaxError});
            the response body becomes the exception message
        connect_error_class: Raised on connection failures (default error_class)
        timeout_error_class: Raised on timeouts (default error_class)
        **kwargs: Additional arguments for request

    Returns:
        Response object

    Raises:
        error_class (or a mapped class): On HTTP or connection errors
    """
    try:
        response = await client.request(method, path, **kwargs)
        response.raise_for_status()
        return response
    except httpx.ConnectError as e:
        logger.error(f"Connection failed to {client.base_url}{path}: {e}")
        raise (connect_error_class or error_class)(f"Connection failed: {e}") from e
    except httpx.TimeoutException as e:
        logger.error(f"Request timeout for {client.base_url}{path}: {e}")
        raise (timeout_error_class or error_class)(f"Request timeout: {e}") from e
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        mapped = (status_errors or {}).get(status)
        if mapped is not None:
            logger.debug(f"HTTP {status} from {client.base_url}{path} mapped to {mapped.__name__}")
            raise mapped(e.response.text.strip() or f"HTTP {status}") from e
        logger.error(f"HTTP {status} error for {client.base_url}{path}")
        raise error_class(f"HTTP {status}: {e.response.text}") from e
    except httpx.HTTPError as e:
        logger.error(f"Unexpected error for {client.base_url}{path}: {e}")
        raise error_class(f"Request failed: {e}") from e
