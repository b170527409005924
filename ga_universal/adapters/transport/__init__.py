"""Form transport adapters."""

from ga_universal.adapters.transport.fake import FakeFormTransport
from ga_universal.adapters.transport.httpx_transport import HttpxFormTransport, encode_form

__all__ = [
    "FakeFormTransport",
    "HttpxFormTransport",
    "encode_form",
]
