"""Event facades.

Read-only accessors over a raw message ``dict``. One class per message
kind; mappers pick their function from ``Facade.kind`` rather than from
the class hierarchy.
"""

import re
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Union

from ga_universal.core.exceptions import UnsupportedEventError
from ga_universal.domains.events.lookup import lookup, normalize_key

_NUMBER_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_COMPLETED_ORDER_NAMES = {"completedorder", "ordercompleted"}


class EventKind(str, Enum):
    """Closed set of message kinds the adapter maps."""

    page = "page"
    screen = "screen"
    track = "track"


def parse_number(value: Any) -> Optional[Union[int, float]]:
    """Coerce numbers and currency-formatted strings (``"$1,204.50"``) to a number.

    Returns ``None`` for anything that does not start with a number.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return None
    match = _NUMBER_PREFIX.match(value.replace("$", "").replace(",", "").strip())
    if not match:
        return None
    return float(match.group(0))


class Facade:
    """Common accessors shared by every message kind."""

    kind: ClassVar[EventKind]

    def __init__(self, obj: Mapping[str, Any]) -> None:
        """Wrap ``obj``; the mapping is never mutated."""
        self.obj = obj

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.obj)!r})"

    def proxy(self, path: str) -> Any:
        """Return the value at a dotted path, or ``None`` if any segment is missing.

        ``context.*`` paths fall back to the legacy ``options`` block.
        """
        value = lookup(self.obj, path)
        if value is None and normalize_key(path.split(".", 1)[0]) == "context":
            value = lookup(self.obj, "options" + path[len("context"):])
        return value

    def field(self, name: str) -> Any:
        """Return a top-level field."""
        return lookup(self.obj, name)

    def user_id(self) -> Optional[str]:
        return self.field("userId")

    def anonymous_id(self) -> Optional[str]:
        return self.field("anonymousId")

    def traits(self) -> Dict[str, Any]:
        traits = self.proxy("context.traits")
        if traits is None:
            traits = self.field("traits")
        return dict(traits) if isinstance(traits, Mapping) else {}

    def properties(self, renames: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Return the message properties.

        With ``renames`` (source name -> target name), return only the
        renamed keys whose source value is present.
        """
        if renames is None:
            props = self.field("properties")
            return dict(props) if isinstance(props, Mapping) else {}

        renamed: Dict[str, Any] = {}
        for source, target in renames.items():
            value = self.proxy(f"properties.{source}")
            if value is not None:
                renamed[target] = value
        return renamed

    def library(self) -> Any:
        """Return ``context.library``, a name string or a dict with ``name``."""
        return self.proxy("context.library")

    def user_agent(self) -> Optional[str]:
        return self.proxy("context.userAgent")

    def ip(self) -> Optional[str]:
        return self.proxy("context.ip")

    def referrer(self) -> Optional[str]:
        return (
            self.proxy("context.referrer.url")
            or self.proxy("context.page.referrer")
            or self.proxy("properties.referrer")
        )

    def options(self, integration: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Return per-call options, optionally for a single integration.

        Returns ``None`` when the message disables ``integration``
        explicitly (``{"integrations": {"Google Analytics": false}}``).
        """
        block = self.field("options")
        if not isinstance(block, Mapping):
            block = self.field("context")
        if not isinstance(block, Mapping):
            block = {}
        if integration is None:
            return dict(block)

        value = lookup(self.field("integrations") or {}, integration)
        if value is None:
            value = lookup(block, integration)
        if value is False:
            return None
        return dict(value) if isinstance(value, Mapping) else {}


class _Named(Facade):
    """Name and category accessors shared by page and screen calls."""

    def name(self) -> Optional[str]:
        return self.field("name") or self.proxy("properties.name")

    def category(self) -> Optional[str]:
        return self.field("category") or self.proxy("properties.category")

    def full_name(self) -> Optional[str]:
        """Return ``"<category> <name>"`` when both are set, else the name."""
        name = self.name()
        category = self.category()
        return f"{category} {name}" if name and category else name


class Page(_Named):
    """A ``page`` call."""

    kind = EventKind.page

    def url(self) -> Optional[str]:
        return self.proxy("properties.url") or self.proxy("context.page.url")

    def title(self) -> Optional[str]:
        return self.proxy("properties.title") or self.proxy("context.page.title")


class Screen(_Named):
    """A ``screen`` call."""

    kind = EventKind.screen


class Track(Facade):
    """A ``track`` call, including e-commerce events and single products."""

    kind = EventKind.track

    @classmethod
    def for_product(cls, product: Mapping[str, Any]) -> "Track":
        """Wrap one entry of ``properties.products`` so product accessors apply."""
        return cls({"properties": product})

    def event(self) -> Optional[str]:
        return self.field("event")

    def category(self) -> Optional[str]:
        return self.proxy("properties.category")

    def value(self) -> Optional[Union[int, float]]:
        return parse_number(self.proxy("properties.value"))

    def revenue(self) -> Optional[Union[int, float]]:
        """Return ``properties.revenue``; completed orders fall back to ``total``."""
        revenue = self.proxy("properties.revenue")
        event_name = normalize_key(self.event() or "").replace(".", "")
        if revenue is None and event_name in _COMPLETED_ORDER_NAMES:
            revenue = self.proxy("properties.total")
        return parse_number(revenue)

    def currency(self) -> str:
        return self.proxy("properties.currency") or "USD"

    def order_id(self) -> Optional[str]:
        return self.proxy("properties.orderId") or self.proxy("properties.id")

    def shipping(self) -> Optional[Union[int, float]]:
        return parse_number(self.proxy("properties.shipping"))

    def tax(self) -> Optional[Union[int, float]]:
        return parse_number(self.proxy("properties.tax"))

    def products(self) -> List[Dict[str, Any]]:
        products = self.proxy("properties.products")
        if not isinstance(products, list):
            return []
        return [dict(p) for p in products if isinstance(p, Mapping)]

    # Product-level accessors, meaningful on Track.for_product(...)

    def id(self) -> Any:
        return self.proxy("properties.id")

    def sku(self) -> Any:
        return self.proxy("properties.sku")

    def name(self) -> Optional[str]:
        return self.proxy("properties.name")

    def price(self) -> Any:
        return self.proxy("properties.price")

    def quantity(self) -> Any:
        quantity = self.proxy("properties.quantity")
        return 1 if quantity is None else quantity

    def brand(self) -> Optional[str]:
        return self.proxy("properties.brand")

    def variant(self) -> Optional[str]:
        return self.proxy("properties.variant")


_FACADES: Dict[str, type] = {
    EventKind.page.value: Page,
    EventKind.screen.value: Screen,
    EventKind.track.value: Track,
}

Event = Union[Page, Screen, Track]


def build_event(message: Mapping[str, Any]) -> Event:
    """Build the facade matching ``message["type"]``.

    Raises:
        UnsupportedEventError: If the type is missing or not page/screen/track.
    """
    event_type = message.get("type")
    facade_cls = _FACADES.get(str(event_type).lower()) if event_type else None
    if facade_cls is None:
        raise UnsupportedEventError(event_type)
    return facade_cls(message)
