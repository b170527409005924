"""Core protocols for dependency injection."""

from ga_universal.core.protocols.transport import FormTransport, TransportResponse

__all__ = [
    "FormTransport",
    "TransportResponse",
]
