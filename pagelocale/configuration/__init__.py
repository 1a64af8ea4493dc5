"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: i18n component settings class
"""

from pagelocale.configuration.i18n import I18nSettings
from pagelocale.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
