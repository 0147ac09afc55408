"""Configuration subpackage."""

from ci_notify.config.config import (
    AppSettings,
    LoggingSettings,
    NotificationSettings,
    ResendSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "NotificationSettings",
    "ResendSettings",
    "Settings",
    "get_settings",
]
