"""httpx form transport.

Posts Measurement Protocol payloads as ``application/x-www-form-urlencoded``
bodies. Implements the FormTransport protocol.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

import httpx
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception, stop_after_attempt

from ga_universal.adapters.transport.retry_helpers import (
    should_retry_on_status_or_timeout,
    wait_retry_after_with_backoff,
)
from ga_universal.core.config import settings
from ga_universal.core.exceptions import TransportError
from ga_universal.core.protocols.transport import FormTransport, TransportResponse

logger = logging.getLogger(__name__)


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_form(payload: Mapping[str, Any]) -> Dict[str, str]:
    """Render every scalar payload value as form text.

    ``None`` is dropped. Mappings and sequences have no form representation
    in the Measurement Protocol and are dropped too.

    Example:
        encode_form({"v": 1, "ni": True, "tr": 10.0, "ta": None, "cd1": {"a": 1}})
        # => {"v": "1", "ni": "1", "tr": "10"}
    """
    form: Dict[str, str] = {}
    for key, value in payload.items():
        if value is None:
            continue
        if isinstance(value, (Mapping, list, tuple, set, frozenset)):
            logger.debug("Dropping non-scalar form field %s", key)
            continue
        form[key] = _stringify(value)
    return form


def _log_retry(retry_state: RetryCallState) -> None:
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Retrying collection request (attempt %d failed): %s",
        retry_state.attempt_number,
        exception,
    )


class HttpxFormTransport(FormTransport):
    """Form POST transport with a bounded retry budget.

    Each call opens its own client; nothing is pooled between events.
    A request is attempted at most ``retries + 1`` times. Timeouts,
    connection errors, 429 and 5xx responses are retried; any other
    non-2xx status fails immediately.
    """

    def __init__(
        self,
        retries: Optional[int] = None,
        timeout: Optional[float] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
        wait: Optional[Callable[[RetryCallState], float]] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            retries: Retries after the first attempt. Defaults to settings.RETRIES.
            timeout: Per-request timeout in seconds. Defaults to settings.TIMEOUT.
            http_transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
            wait: Optional tenacity wait strategy between attempts.
        """
        self.retries = settings.RETRIES if retries is None else retries
        self.timeout = settings.TIMEOUT if timeout is None else timeout
        self._http_transport = http_transport
        self._wait = wait or wait_retry_after_with_backoff

    async def post_form(
        self,
        endpoint: str,
        payload: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """Post the payload, retrying transient failures.

        Raises:
            TransportError: If the final attempt did not produce a 2xx response.
        """
        body = encode_form(payload)
        attempts = 0

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._http_transport
        ) as client:
            try:
                async for attempt in AsyncRetrying(
                    stop=stop_after_attempt(self.retries + 1),
                    retry=retry_if_exception(should_retry_on_status_or_timeout),
                    wait=self._wait,
                    before_sleep=_log_retry,
                    reraise=True,
                ):
                    with attempt:
                        attempts = attempt.retry_state.attempt_number
                        response = await client.post(
                            endpoint, data=body, headers=dict(headers or {})
                        )
                        response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                raise TransportError(
                    f"Collection endpoint returned HTTP {status} after {attempts} attempt(s)",
                    status,
                ) from exc
            except httpx.HTTPError as exc:
                raise TransportError(
                    f"Failed to reach collection endpoint after {attempts} attempt(s): {exc}"
                ) from exc

        return TransportResponse(status_code=response.status_code, attempts=attempts)
