"""Google Analytics Universal dispatchers.

Two implementations, picked once at construction by ``create_integration``:

- UniversalAnalytics: page, screen, track and completed order.
- EnhancedEcommerceAnalytics: adds the product, checkout, refund and
  promotion hits. The basic class has no such attributes at all.
"""

import asyncio
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar, Union

from ga_universal.core.config import settings as app_settings
from ga_universal.core.exceptions import BatchDispatchError, ConfigurationError
from ga_universal.core.logging import logger
from ga_universal.core.protocols.transport import FormTransport
from ga_universal.domains.events import Event, EventKind, Facade, Page, Screen, Track, build_event
from ga_universal.domains.integration.routing import (
    BASE_ROUTES,
    ENHANCED_ECOMMERCE_ROUTES,
    route_for,
)
from ga_universal.domains.integration.types import DispatchResult
from ga_universal.domains.mapping import INTEGRATION_NAME, IntegrationSettings, Payload, mappers

F = TypeVar("F", bound=Facade)

EventInput = Union[Facade, Mapping[str, Any]]

ENHANCED_ECOMMERCE_METHODS = (
    "viewed_product",
    "clicked_product",
    "added_product",
    "removed_product",
    "started_order",
    "updated_order",
    "viewed_checkout_step",
    "completed_checkout_step",
    "refunded_order",
    "viewed_promotion",
    "clicked_promotion",
)


def _as(event: EventInput, facade_cls: Type[F]) -> F:
    if isinstance(event, facade_cls):
        return event
    if isinstance(event, Facade):
        return facade_cls(event.obj)
    return facade_cls(event)


class UniversalAnalytics:
    """Sends Measurement Protocol hits for page, screen and track calls.

    Track calls are routed by event name through ``routes``; names with no
    route are sent as generic ``event`` hits.
    """

    name: ClassVar[str] = INTEGRATION_NAME
    routes: ClassVar[Dict[str, str]] = BASE_ROUTES

    def __init__(
        self,
        settings: Union[IntegrationSettings, Mapping[str, Any]],
        transport: FormTransport,
        endpoint: Optional[str] = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            settings: Integration settings, or the raw settings mapping.
            transport: Transport used for every form post.
            endpoint: Collection URL. Defaults to settings.ENDPOINT.
        """
        self.settings = IntegrationSettings.coerce(settings)
        self.transport = transport
        self.endpoint = endpoint or app_settings.ENDPOINT
        self._logger = logger.with_context(integration=type(self).__name__)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def dispatch(self, event: EventInput) -> DispatchResult:
        """Send any page, screen or track call.

        Raises:
            UnsupportedEventError: If a raw message has an unknown ``type``.
        """
        if not isinstance(event, Facade):
            event = build_event(event)
        if event.kind is EventKind.page:
            return await self.page(event)
        if event.kind is EventKind.screen:
            return await self.screen(event)
        return await self.track(event)

    async def page(self, event: EventInput) -> DispatchResult:
        page = _as(event, Page)
        return await self._send(page, mappers.page(page, self.settings))

    async def screen(self, event: EventInput) -> DispatchResult:
        screen = _as(event, Screen)
        return await self._send(screen, mappers.screen(screen, self.settings))

    async def track(self, event: EventInput) -> DispatchResult:
        """Route a track call to its e-commerce handler, else send an ``event`` hit."""
        track = _as(event, Track)
        handler_name = route_for(track.event(), self.routes)
        if handler_name is not None:
            return await getattr(self, handler_name)(track)
        return await self._send(track, mappers.track(track, self.settings))

    async def completed_order(self, event: EventInput) -> DispatchResult:
        """Send the transaction hit and one item hit per product as one batch."""
        track = _as(event, Track)
        return await self._send_batch(track, mappers.completed_order(track, self.settings))

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    def _headers(self, event: Event) -> Dict[str, str]:
        return {"User-Agent": event.user_agent() or "not set"}

    def _validate(self, payloads: List[Payload]) -> None:
        for payload in payloads:
            if not payload.get("tid"):
                raise ConfigurationError(
                    "No tracking id configured: set serversideTrackingId "
                    "(or mobileTrackingId for mobile libraries)"
                )

    async def _send(self, event: Event, payload: Payload) -> DispatchResult:
        self._validate([payload])
        response = await self.transport.post_form(self.endpoint, payload, self._headers(event))
        self._logger.debug("Sent %s hit (status=%d)", payload.get("t"), response.status_code)
        return DispatchResult([response.status_code])

    async def _send_batch(self, event: Event, payloads: List[Payload]) -> DispatchResult:
        """Send every payload concurrently; any failure fails the batch.

        All sends are attempted. Successful sends are not retracted when
        another one fails.
        """
        self._validate(payloads)
        headers = self._headers(event)
        results = await asyncio.gather(
            *(self.transport.post_form(self.endpoint, p, headers) for p in payloads),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            first = failures[0]
            if not isinstance(first, Exception):
                raise first
            self._logger.error(
                "%d of %d payloads failed for %s: %s",
                len(failures),
                len(payloads),
                event.proxy("event") or event.kind.value,
                first,
            )
            raise BatchDispatchError(first, len(failures), len(payloads)) from first

        self._logger.debug("Sent batch of %d hits", len(payloads))
        return DispatchResult([r.status_code for r in results])


class EnhancedEcommerceAnalytics(UniversalAnalytics):
    """UniversalAnalytics plus the enhanced e-commerce hits."""

    routes: ClassVar[Dict[str, str]] = ENHANCED_ECOMMERCE_ROUTES

    async def _map_and_send(
        self, event: EventInput, mapper: Callable[[Track, IntegrationSettings], Payload]
    ) -> DispatchResult:
        track = _as(event, Track)
        return await self._send(track, mapper(track, self.settings))

    async def viewed_product(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.viewed_product)

    async def clicked_product(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.clicked_product)

    async def added_product(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.added_product)

    async def removed_product(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.removed_product)

    async def started_order(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.started_order)

    async def updated_order(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.updated_order)

    async def viewed_checkout_step(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.viewed_checkout_step)

    async def completed_checkout_step(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.completed_checkout_step)

    async def refunded_order(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.refunded_order)

    async def viewed_promotion(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.viewed_promotion)

    async def clicked_promotion(self, event: EventInput) -> DispatchResult:
        return await self._map_and_send(event, mappers.clicked_promotion)
