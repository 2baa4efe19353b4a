"""
Logging setup.

Library modules only create loggers; handlers are attached here, once, by
the application entry point.
"""

import logging
from pathlib import Path
from typing import Optional

from regconfig.core.config import LoggingConfig


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure logging for the regconfig package.

    Call this at application startup to enable logging.

    Args:
        level: Logging level (default: WARNING).
        format_string: Optional custom format string.
        handler: Optional custom handler (default: StreamHandler).
        log_file: Optional file to log to in addition to the handler.

    Returns:
        The package logger.

    Example:
        from regconfig.core.log import configure_logging
        configure_logging(level=logging.DEBUG)
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    if handler is None:
        handler = logging.StreamHandler()

    package_logger = logging.getLogger("regconfig")
    package_logger.setLevel(level)

    handler.setFormatter(logging.Formatter(format_string))
    package_logger.addHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(format_string))
        package_logger.addHandler(file_handler)

    return package_logger


def configure_from_settings(
    logging_config: LoggingConfig,
    level_override: Optional[str] = None,
) -> logging.Logger:
    """Configure logging from the settings file, optionally overriding the level."""
    level_name = (level_override or logging_config.level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    return configure_logging(level=level, log_file=logging_config.file)
