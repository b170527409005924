"""Dispatchers sending mapped payloads to the collection endpoint."""

from ga_universal.domains.integration.factory import create_integration
from ga_universal.domains.integration.routing import normalize_event_name, route_for
from ga_universal.domains.integration.service import (
    ENHANCED_ECOMMERCE_METHODS,
    EnhancedEcommerceAnalytics,
    UniversalAnalytics,
)
from ga_universal.domains.integration.types import DispatchResult

__all__ = [
    "DispatchResult",
    "ENHANCED_ECOMMERCE_METHODS",
    "EnhancedEcommerceAnalytics",
    "UniversalAnalytics",
    "create_integration",
    "normalize_event_name",
    "route_for",
]
