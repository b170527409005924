"""Event to Measurement Protocol payload mappers.

Pure functions of ``(event, settings)``. Each builds its payload by merging
field groups in a fixed order; a later group wins on key collisions.
``None`` values never reach the payload.

https://developers.google.com/analytics/devguides/collection/protocol/v1/devguide
"""

import math
from typing import Any, List, Mapping, Optional

from ga_universal.domains.events import Page, Screen, Track
from ga_universal.domains.mapping.common import Payload, common_form
from ga_universal.domains.mapping.page import location_fields, page_context_fields
from ga_universal.domains.mapping.products import format_products
from ga_universal.domains.mapping.settings import IntegrationSettings

ECOMMERCE_CATEGORY = "EnhancedEcommerce"

_CHECKOUT_RENAMES = {"step": "cos", "option": "col"}
_REFUND_RENAMES = {"orderId": "ti"}
_PROMOTION_RENAMES = {
    "creative": "promo1cr",
    "id": "promo1id",
    "name": "promo1nm",
    "position": "promo1ps",
}


def merge(*parts: Optional[Mapping[str, Any]]) -> Payload:
    """Merge field groups left to right, dropping ``None`` values."""
    form: Payload = {}
    for part in parts:
        if not part:
            continue
        form.update({k: v for k, v in part.items() if v is not None})
    return form


def round_half_up(value: Any) -> int:
    """Round to the nearest int, halves upward. Non-numbers, NaN and inf give 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if not isinstance(value, float) or not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


# ---------------------------------------------------------------------------
# Basic hits
# ---------------------------------------------------------------------------


def page(event: Page, settings: IntegrationSettings) -> Payload:
    """Map a page call to a ``pageview`` hit."""
    return merge(
        common_form(event, settings),
        location_fields(event),
        {
            "dr": event.referrer() or None,
            "dt": event.full_name(),
            "t": "pageview",
        },
    )


def screen(event: Screen, settings: IntegrationSettings) -> Payload:
    """Map a screen call to a ``screenview`` hit."""
    return merge(
        common_form(event, settings),
        {"cd": event.name(), "t": "screenview"},
    )


def track(event: Track, settings: IntegrationSettings) -> Payload:
    """Map a track call to an ``event`` hit.

    ``ev`` is the rounded ``value``, falling back to ``revenue`` then 0.
    ``ni`` is 1 when ``properties.nonInteraction`` or the integration
    default is set, 0 when the property is explicitly falsy, and left out
    otherwise.
    """
    requested = event.proxy("properties.nonInteraction")
    if requested or settings.non_interaction:
        non_interaction = 1
    elif requested is not None:
        non_interaction = 0
    else:
        non_interaction = None
    return merge(
        common_form(event, settings),
        location_fields(event),
        {
            "ev": round_half_up(event.value() or event.revenue() or 0),
            "el": event.proxy("properties.label") or "event",
            "ec": event.category() or "All",
            "ea": event.event(),
            "t": "event",
            "ni": non_interaction,
        },
    )


def completed_order(event: Track, settings: IntegrationSettings) -> List[Payload]:
    """Map a completed order to one ``transaction`` hit plus one ``item`` hit per product.

    Transaction fields:
        - ``ti`` transaction id (.order_id())
        - ``ta`` affiliation (.properties.affiliation)
        - ``tr`` revenue (.revenue())
        - ``ts`` shipping (.shipping())
        - ``tt`` tax (.tax())
        - ``cu`` currency code (.currency())

    Every item shares the transaction's ``ti`` and ``cu``.
    """
    currency = event.currency()
    order_id = event.order_id()

    transaction = merge(
        common_form(event, settings),
        location_fields(event),
        {
            "ta": event.proxy("properties.affiliation"),
            "ts": event.shipping(),
            "tr": event.revenue(),
            "tt": event.tax(),
            "cu": currency,
            "ti": order_id,
            "t": "transaction",
        },
    )

    items = []
    for entry in event.products():
        product = Track.for_product(entry)
        items.append(
            merge(
                common_form(event, settings),
                {
                    "iq": product.quantity(),
                    "iv": product.category(),
                    "ip": product.price(),
                    "in": product.name(),
                    "ic": product.sku(),
                    "cu": currency,
                    "ti": order_id,
                    "t": "item",
                },
            )
        )

    return [transaction] + items


# ---------------------------------------------------------------------------
# Enhanced e-commerce
# ---------------------------------------------------------------------------


def _product_action(event: Track, settings: IntegrationSettings, action: str, **static) -> Payload:
    return merge(
        {
            "ea": event.event(),
            "ec": event.category() or ECOMMERCE_CATEGORY,
            "pa": action,
            "t": "event",
            **static,
        },
        common_form(event, settings),
        format_products([event.properties()]),
    )


def viewed_product(event: Track, settings: IntegrationSettings) -> Payload:
    """Product detail view: non-interaction ``event`` with ``pa=detail``."""
    return _product_action(event, settings, "detail", ni=1)


def clicked_product(event: Track, settings: IntegrationSettings) -> Payload:
    return _product_action(event, settings, "click")


def added_product(event: Track, settings: IntegrationSettings) -> Payload:
    return _product_action(event, settings, "add")


def removed_product(event: Track, settings: IntegrationSettings) -> Payload:
    return _product_action(event, settings, "remove")


def viewed_checkout_step(event: Track, settings: IntegrationSettings) -> Payload:
    """Map a viewed checkout step to a non-interaction ``pageview``.

    Fields:
        - ``pa``       'checkout'
        - ``cos``      (.properties.step) checkout step
        - ``col``      (.properties.option) checkout step option
        - ``pr<N>*``   one slot per entry in .properties.products
        - ``dh``/``dp``/``dt`` from .context.page
        - ``ni``       1
    """
    return merge(
        {"t": "pageview", "pa": "checkout", "ni": 1},
        common_form(event, settings),
        format_products(event.products()),
        page_context_fields(event),
        event.properties(_CHECKOUT_RENAMES),
    )


# FIXME: started/updated order reuse the checkout-step mapping unchanged.
# Confirm with product whether they should produce distinct hits.
started_order = viewed_checkout_step
updated_order = viewed_checkout_step


def completed_checkout_step(event: Track, settings: IntegrationSettings) -> Payload:
    """Map a completed checkout step to an ``event`` with ``pa=checkout_option``."""
    return merge(
        {
            "ea": event.event(),
            "ec": event.category() or ECOMMERCE_CATEGORY,
            "pa": "checkout_option",
            "t": "event",
        },
        common_form(event, settings),
        event.properties(_CHECKOUT_RENAMES),
    )


def refunded_order(event: Track, settings: IntegrationSettings) -> Payload:
    """Map a refunded order to a non-interaction ``event`` with ``pa=refund``."""
    return merge(
        {
            "ea": event.event(),
            "ec": event.category() or ECOMMERCE_CATEGORY,
            "ni": 1,
            "pa": "refund",
            "t": "event",
        },
        common_form(event, settings),
        event.properties(_REFUND_RENAMES),
    )


def viewed_promotion(event: Track, settings: IntegrationSettings) -> Payload:
    return merge(
        {"t": "pageview"},
        common_form(event, settings),
        page_context_fields(event),
        event.properties(_PROMOTION_RENAMES),
    )


def clicked_promotion(event: Track, settings: IntegrationSettings) -> Payload:
    return merge(
        {
            "ea": event.event(),
            "ec": event.category() or ECOMMERCE_CATEGORY,
            "promoa": "click",
            "t": "event",
        },
        common_form(event, settings),
        event.properties({**_PROMOTION_RENAMES, "label": "el"}),
    )
