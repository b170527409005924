"""Process-level settings loaded from the environment."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://ssl.google-analytics.com/collect"


class Settings(BaseSettings):
    """Transport and logging settings.

    Env vars use the ``GA_UNIVERSAL_`` prefix:
        GA_UNIVERSAL_RETRIES=3
        GA_UNIVERSAL_ENDPOINT=https://www.google-analytics.com/debug/collect
    """

    model_config = SettingsConfigDict(
        env_prefix="GA_UNIVERSAL_",
        extra="ignore",
    )

    ENDPOINT: str = Field(DEFAULT_ENDPOINT, description="Measurement Protocol collect URL")
    RETRIES: int = Field(2, ge=0, description="Retries per request after the first attempt")
    TIMEOUT: float = Field(10.0, gt=0, description="Per-request timeout in seconds")
    LOG_LEVEL: str = Field("INFO", description="Level for the ga_universal logger")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any standard level name, case-insensitively."""
        level = value.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level: {value}")
        return level
