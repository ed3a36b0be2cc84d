"""localekit configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings section
    get_settings: Process-wide settings singleton

Example:
    ```python
    from localekit.configuration import get_settings

    settings = get_settings()
    default_locale = settings.i18n.default_locale
    ```
"""

from functools import lru_cache

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.settings import Settings


@lru_cache
def get_settings() -> Settings:
    """Get process-wide settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Call ``get_settings.cache_clear()`` to pick up environment changes.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


__all__ = ["Settings", "I18nSettings", "get_settings"]
