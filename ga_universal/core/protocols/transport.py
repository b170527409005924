"""Transport protocol.

The dispatcher only needs one capability from the network layer: post a
flat form payload to an endpoint and learn the status. Retries live below
this boundary.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Outcome of a successful form post."""

    status_code: int
    attempts: int = 1


@runtime_checkable
class FormTransport(Protocol):
    """Send ``application/x-www-form-urlencoded`` payloads.

    Implementations retry transient failures themselves and raise
    TransportError once the retry budget is exhausted.
    """

    async def post_form(
        self,
        endpoint: str,
        payload: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """Post ``payload`` to ``endpoint`` and return the final response."""
        ...
