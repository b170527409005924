"""Mapping from vendor-neutral events to Measurement Protocol payloads."""

from ga_universal.domains.mapping import mappers
from ga_universal.domains.mapping.common import (
    PROTOCOL_VERSION,
    Payload,
    common_form,
    custom_definitions,
    shorten,
)
from ga_universal.domains.mapping.identity import (
    INTEGRATION_NAME,
    client_id,
    is_mobile,
    string_hash,
    tracking_id,
)
from ga_universal.domains.mapping.page import location_fields, page_context_fields, split_url
from ga_universal.domains.mapping.products import format_products
from ga_universal.domains.mapping.settings import IntegrationSettings

__all__ = [
    "INTEGRATION_NAME",
    "IntegrationSettings",
    "PROTOCOL_VERSION",
    "Payload",
    "client_id",
    "common_form",
    "custom_definitions",
    "format_products",
    "is_mobile",
    "location_fields",
    "mappers",
    "page_context_fields",
    "shorten",
    "split_url",
    "string_hash",
    "tracking_id",
]
