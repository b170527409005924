"""Root conftest for pytest configuration and shared fixtures.

Loaded before both testpaths (tests/ and the colocated ga_universal/**/tests),
so its fixtures are available to all of them.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables: must be set before any ga_universal module import
# Uses setdefault so real env vars are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("GA_UNIVERSAL_LOG_LEVEL", "DEBUG")
os.environ.setdefault("GA_UNIVERSAL_RETRIES", "2")

SERVERSIDE_TRACKING_ID = "UA-27033709-11"
MOBILE_TRACKING_ID = "UA-27033709-23"


@pytest.fixture
def ga_settings() -> dict:
    """Raw integration settings as the control plane sends them."""
    return {
        "serversideTrackingId": SERVERSIDE_TRACKING_ID,
        "mobileTrackingId": MOBILE_TRACKING_ID,
        "serversideClassic": False,
    }


@pytest.fixture
def settings(ga_settings):
    """Validated IntegrationSettings built from ga_settings."""
    from ga_universal.domains.mapping import IntegrationSettings

    return IntegrationSettings.model_validate(ga_settings)


@pytest.fixture
def fake_transport():
    """Fake FormTransport that records every post."""
    from ga_universal.adapters.transport.fake import FakeFormTransport

    return FakeFormTransport()
