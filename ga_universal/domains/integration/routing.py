"""Track event name routing.

Names are compared after lowercasing and dropping everything but letters
and digits, so ``Completed Order``, ``completed_order`` and
``completedOrder`` route the same. Both the legacy verb-noun names and
the newer noun-verb names are recognised.
"""

import re
from typing import Dict, Mapping, Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_event_name(name: Optional[str]) -> str:
    return _NON_ALNUM.sub("", (name or "").lower())


BASE_ROUTES: Dict[str, str] = {
    "completedorder": "completed_order",
    "ordercompleted": "completed_order",
}

ENHANCED_ECOMMERCE_ROUTES: Dict[str, str] = {
    **BASE_ROUTES,
    "viewedproduct": "viewed_product",
    "productviewed": "viewed_product",
    "clickedproduct": "clicked_product",
    "productclicked": "clicked_product",
    "addedproduct": "added_product",
    "productadded": "added_product",
    "removedproduct": "removed_product",
    "productremoved": "removed_product",
    "startedorder": "started_order",
    "checkoutstarted": "started_order",
    "updatedorder": "updated_order",
    "orderupdated": "updated_order",
    "viewedcheckoutstep": "viewed_checkout_step",
    "checkoutstepviewed": "viewed_checkout_step",
    "completedcheckoutstep": "completed_checkout_step",
    "checkoutstepcompleted": "completed_checkout_step",
    "refundedorder": "refunded_order",
    "orderrefunded": "refunded_order",
    "viewedpromotion": "viewed_promotion",
    "promotionviewed": "viewed_promotion",
    "clickedpromotion": "clicked_promotion",
    "promotionclicked": "clicked_promotion",
}


def route_for(event_name: Optional[str], routes: Mapping[str, str]) -> Optional[str]:
    """Return the handler name for ``event_name``, or ``None`` for a generic track."""
    return routes.get(normalize_event_name(event_name))
