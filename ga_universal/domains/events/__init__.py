"""Vendor-neutral event facades."""

from ga_universal.domains.events.lookup import lookup, normalize_key
from ga_universal.domains.events.types import (
    Event,
    EventKind,
    Facade,
    Page,
    Screen,
    Track,
    build_event,
    parse_number,
)

__all__ = [
    "Event",
    "EventKind",
    "Facade",
    "Page",
    "Screen",
    "Track",
    "build_event",
    "lookup",
    "normalize_key",
    "parse_number",
]
