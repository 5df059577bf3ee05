"""
ft-config Logger Module

Diagnostics for the loader, mappers and service. Output is off by default.

Usage:
    from ft_config.logger import enable_logging, ComponentLogger

    # Turn on diagnostics for every loader that doesn't set verbose explicitly
    enable_logging()

    # Or configure a single component
    log = ComponentLogger(verbose=True)
    log.info("Load", "Initialized - loading from OS environment variables")

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_FORMAT: "console" (default) or "json"

    Where {PREFIX} is derived from the logger name (e.g., FT_CONFIG for "ft-config")
"""

import logging
from typing import Optional

from .component import ComponentLogger
from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter
from .switch import LogSwitch, disable_logging, enable_logging, is_logging_enabled


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "ft-config" -> "FT_CONFIG"
        "my-app" -> "MY_APP"
    """
    return name.upper().replace("-", "_")


def create_logger(
    name: str = "ft-config",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters left as None are read from ``LogSettings.from_env`` using the
    prefix derived from ``name``.

    Args:
        name: Logger name (e.g., "ft-config")
        level: Logging level (defaults to INFO or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    from ft_config.config.settings import LogSettings

    settings = LogSettings.from_env(_get_env_prefix(name))

    if level is None:
        level = getattr(logging, settings.level, logging.INFO)

    if log_file is None:
        log_file = settings.file

    if json_format is None:
        json_format = settings.format == "json"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = "ft-config") -> Logger:
    """Get a logger configured from environment variables.

    Example:
        # export FT_CONFIG_LOG_LEVEL=DEBUG
        # export FT_CONFIG_LOG_FORMAT=json
        logger = get_logger("ft-config")
    """
    return create_logger(name=name)


__all__ = [
    # Interface
    "Logger",
    # Implementations
    "StructuredLogger",
    "ComponentLogger",
    # Formatters (for custom use)
    "JsonFormatter",
    "TextFormatter",
    # Switch
    "LogSwitch",
    "enable_logging",
    "disable_logging",
    "is_logging_enabled",
    # Factory functions
    "create_logger",
    "get_logger",
]
