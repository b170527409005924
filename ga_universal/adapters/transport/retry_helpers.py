"""Retry helpers for the collection endpoint transport.

The Measurement Protocol endpoint answers 2xx for anything it can parse, so
only throttling, server errors and network-level failures are worth retrying.
"""

import httpx
from tenacity import wait_exponential

_wait_backoff = wait_exponential(multiplier=0.5, min=0.5, max=4)


def should_retry_on_status(exception: BaseException) -> bool:
    """Check if exception is a 429 or 5xx response.

    Args:
        exception: Exception to check

    Returns:
        True if the server asked us to back off or failed on its side
    """
    if isinstance(exception, httpx.HTTPStatusError):
        status = exception.response.status_code
        return status == 429 or status >= 500
    return False


def should_retry_on_timeout(exception: BaseException) -> bool:
    """Check if exception is a timeout or connection error that should be retried.

    Args:
        exception: Exception to check

    Returns:
        True if this is a timeout or transient connection exception
    """
    return isinstance(
        exception,
        (
            httpx.ConnectTimeout,
            httpx.ReadTimeout,
            httpx.WriteTimeout,
            httpx.PoolTimeout,
            httpx.ConnectError,
            httpx.RemoteProtocolError,
        ),
    )


def should_retry_on_status_or_timeout(exception: BaseException) -> bool:
    """Combined retry condition used by HttpxFormTransport."""
    return should_retry_on_status(exception) or should_retry_on_timeout(exception)


def wait_retry_after_with_backoff(retry_state) -> float:
    """Wait strategy that respects Retry-After on 429s, exponential backoff otherwise.

    Args:
        retry_state: tenacity retry state

    Returns:
        Number of seconds to wait before retry
    """
    exception = retry_state.outcome.exception()

    if isinstance(exception, httpx.HTTPStatusError) and exception.response.status_code == 429:
        retry_after = exception.response.headers.get("Retry-After")
        if retry_after:
            try:
                # Clamped to [0.5, 30] seconds
                return min(max(float(retry_after), 0.5), 30.0)
            except (ValueError, TypeError):
                pass

    return _wait_backoff(retry_state)
