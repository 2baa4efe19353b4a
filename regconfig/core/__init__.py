"""Tool settings and logging setup."""

from regconfig.core.config import Settings, LoggingConfig, get_settings
from regconfig.core.log import configure_logging

__all__ = [
    "Settings",
    "LoggingConfig",
    "get_settings",
    "configure_logging",
]
