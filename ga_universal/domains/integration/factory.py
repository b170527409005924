"""Factory for the Google Analytics dispatcher."""

from typing import Any, Mapping, Optional, Union

from ga_universal.adapters.transport.httpx_transport import HttpxFormTransport
from ga_universal.core.protocols.transport import FormTransport
from ga_universal.domains.integration.service import (
    EnhancedEcommerceAnalytics,
    UniversalAnalytics,
)
from ga_universal.domains.mapping import IntegrationSettings


def create_integration(
    settings: Union[IntegrationSettings, Mapping[str, Any]],
    transport: Optional[FormTransport] = None,
    endpoint: Optional[str] = None,
) -> UniversalAnalytics:
    """Build the dispatcher whose capabilities match ``settings``.

    ``enhancedEcommerce`` selects EnhancedEcommerceAnalytics; otherwise the
    returned object has no enhanced e-commerce methods.
    """
    settings = IntegrationSettings.coerce(settings)
    cls = EnhancedEcommerceAnalytics if settings.enhanced_ecommerce else UniversalAnalytics
    return cls(settings, transport or HttpxFormTransport(), endpoint=endpoint)
