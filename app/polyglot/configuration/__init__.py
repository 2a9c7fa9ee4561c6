"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings
    get_settings: Cached singleton accessor

Example:
    ```python
    from polyglot.configuration import get_settings

    settings = get_settings()
    separator = settings.i18n.default_separator
    ```
"""

from polyglot.configuration.i18n import I18nSettings
from polyglot.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "get_settings"]
