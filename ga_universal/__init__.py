"""Google Analytics Universal Measurement Protocol adapter."""

from ga_universal.domains.integration import (
    EnhancedEcommerceAnalytics,
    UniversalAnalytics,
    create_integration,
)
from ga_universal.domains.mapping import IntegrationSettings

__all__ = [
    "EnhancedEcommerceAnalytics",
    "IntegrationSettings",
    "UniversalAnalytics",
    "create_integration",
]
