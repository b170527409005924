"""Fake form transport for testing."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ga_universal.core.exceptions import TransportError
from ga_universal.core.protocols.transport import TransportResponse


@dataclass
class SentForm:
    """Single recorded post_form call."""

    endpoint: str
    payload: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)


class FakeFormTransport:
    """In-memory test double for FormTransport.

    Records every call, including ones scripted to fail.

    Usage:
        transport = FakeFormTransport()
        transport.fail_on(1)  # second call raises TransportError
        ga = create_integration(settings, transport)
        with pytest.raises(BatchDispatchError):
            await ga.completed_order(track)
        assert len(transport.sent) == 3
    """

    def __init__(self, status_code: int = 200) -> None:
        """Initialize with no recorded calls."""
        self.status_code = status_code
        self.sent: list[SentForm] = []
        self._failures: Dict[int, TransportError] = {}

    def fail_on(self, index: int, error: Optional[TransportError] = None) -> None:
        """Make the call with the given 0-based index raise ``error``."""
        self._failures[index] = error or TransportError("Scripted failure", 500)

    async def post_form(
        self,
        endpoint: str,
        payload: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """Record the call, then succeed or raise the scripted failure."""
        index = len(self.sent)
        self.sent.append(SentForm(endpoint, dict(payload), dict(headers or {})))
        if index in self._failures:
            raise self._failures[index]
        return TransportResponse(status_code=self.status_code)

    @property
    def payloads(self) -> list[Dict[str, Any]]:
        """Return just the payloads, in send order."""
        return [s.payload for s in self.sent]

    def of_type(self, hit_type: str) -> list[Dict[str, Any]]:
        """Return recorded payloads whose ``t`` field equals ``hit_type``."""
        return [p for p in self.payloads if p.get("t") == hit_type]

    def clear(self) -> None:
        """Reset recorded calls and scripted failures."""
        self.sent.clear()
        self._failures.clear()
