"""Configuration module.

Usage:
    from ga_universal.core.config import settings

    transport = HttpxFormTransport(retries=settings.RETRIES, timeout=settings.TIMEOUT)
"""

from ga_universal.core.config.settings import DEFAULT_ENDPOINT, Settings

__all__ = [
    "DEFAULT_ENDPOINT",
    "Settings",
    "settings",
]

# Singleton settings instance
settings = Settings()
