"""Configuration package."""

from meeting_cost.config.settings import (
    AppSettings,
    CalculatorSettings,
    LoggingSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "CalculatorSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
