"""Enhanced e-commerce product slots (``pr<N>...``)."""

from typing import Any, Dict, Iterable, Mapping

from ga_universal.domains.events import Track
from ga_universal.domains.mapping.common import Payload

PRODUCT_FIELDS = (
    ("brand", "br"),
    ("category", "ca"),
    ("id", "id"),
    ("name", "nm"),
    ("price", "pr"),
    ("quantity", "qty"),
    ("variant", "va"),
)


def product_renames(slot: int) -> Dict[str, str]:
    """Property name -> vendor field for the 1-based ``slot``."""
    prefix = f"pr{slot}"
    return {source: f"{prefix}{suffix}" for source, suffix in PRODUCT_FIELDS}


def format_products(products: Iterable[Mapping[str, Any]], start: int = 1) -> Payload:
    """Flatten a list of products into numbered product slots.

    Fields a product doesn't have are left out. Neither ``id`` nor
    ``name`` is enforced here although GA needs one of them.

    Example:
        format_products([{"id": 9, "name": "Toothbrush"}, {"id": 33, "name": "Toothpaste"}])
        # => {"pr1id": 9, "pr1nm": "Toothbrush", "pr2id": 33, "pr2nm": "Toothpaste"}
    """
    form: Payload = {}
    for slot, product in enumerate(products, start=start):
        form.update(Track.for_product(product).properties(product_renames(slot)))
    return form
