"""Tests for process settings and integration settings."""

import pytest
from pydantic import ValidationError

from ga_universal.core.config import DEFAULT_ENDPOINT, Settings
from ga_universal.domains.mapping import IntegrationSettings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ENDPOINT", "RETRIES", "TIMEOUT", "LOG_LEVEL"):
            monkeypatch.delenv(f"GA_UNIVERSAL_{name}", raising=False)
        settings = Settings()
        assert settings.ENDPOINT == DEFAULT_ENDPOINT
        assert settings.RETRIES == 2
        assert settings.TIMEOUT == 10.0
        assert settings.LOG_LEVEL == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("GA_UNIVERSAL_RETRIES", "5")
        monkeypatch.setenv("GA_UNIVERSAL_ENDPOINT", "https://www.google-analytics.com/debug/collect")
        monkeypatch.setenv("GA_UNIVERSAL_LOG_LEVEL", "warning")
        settings = Settings()
        assert settings.RETRIES == 5
        assert settings.ENDPOINT.endswith("/debug/collect")
        assert settings.LOG_LEVEL == "WARNING"

    def test_rejects_negative_retries(self, monkeypatch):
        monkeypatch.setenv("GA_UNIVERSAL_RETRIES", "-1")
        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("GA_UNIVERSAL_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings()


class TestIntegrationSettings:
    def test_camel_case_keys(self):
        settings = IntegrationSettings.model_validate(
            {
                "serversideTrackingId": "UA-1",
                "mobileTrackingId": "UA-2",
                "sendUserId": True,
                "nonInteraction": True,
                "enhancedEcommerce": True,
                "dimensions": {"plan": "dimension1"},
                "metrics": {"revenue": "metric8"},
                "serversideClassic": False,
            }
        )
        assert settings.serverside_tracking_id == "UA-1"
        assert settings.mobile_tracking_id == "UA-2"
        assert settings.send_user_id is True
        assert settings.non_interaction is True
        assert settings.enhanced_ecommerce is True
        assert settings.dimensions == {"plan": "dimension1"}
        assert settings.metrics == {"revenue": "metric8"}

    def test_snake_case_names(self):
        settings = IntegrationSettings(serverside_tracking_id="UA-1", send_user_id=True)
        assert settings.serverside_tracking_id == "UA-1"
        assert settings.send_user_id is True

    def test_defaults(self):
        settings = IntegrationSettings()
        assert settings.serverside_tracking_id is None
        assert settings.mobile_tracking_id is None
        assert settings.send_user_id is False
        assert settings.non_interaction is False
        assert settings.enhanced_ecommerce is False
        assert settings.dimensions == {}
        assert settings.metrics == {}

    def test_blank_tracking_ids_are_unset(self):
        settings = IntegrationSettings.model_validate(
            {"serversideTrackingId": "  ", "mobileTrackingId": ""}
        )
        assert settings.serverside_tracking_id is None
        assert settings.mobile_tracking_id is None

    def test_null_mappings(self):
        settings = IntegrationSettings.model_validate({"dimensions": None, "metrics": None})
        assert settings.dimensions == {}
        assert settings.metrics == {}

    def test_coerce(self):
        settings = IntegrationSettings(serverside_tracking_id="UA-1")
        assert IntegrationSettings.coerce(settings) is settings
        assert IntegrationSettings.coerce({"serversideTrackingId": "UA-1"}) == settings

    def test_frozen(self):
        settings = IntegrationSettings()
        with pytest.raises(ValidationError):
            settings.send_user_id = True
