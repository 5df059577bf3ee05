"""Dataclass-based settings for ft-config itself.

Only the library's own diagnostics are configurable; what gets loaded is
decided entirely by the caller's mapping or dataclass.
"""

import os
from dataclasses import dataclass
from typing import Optional

_ALLOWED_LOG_FORMATS = {"console", "json"}


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log format (console or json)
        file: Optional file path for log output
    """

    level: str = "INFO"
    format: str = "console"
    file: Optional[str] = None

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        self.format = self.format.lower()
        if self.format not in _ALLOWED_LOG_FORMATS:
            raise ValueError(
                f"Invalid log format '{self.format}'. Expected one of {_ALLOWED_LOG_FORMATS}."
            )

    @classmethod
    def from_env(cls, prefix: str = "FT_CONFIG") -> "LogSettings":
        """Load logging settings from environment variables

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level
            {prefix}_LOG_FORMAT: Log format
            {prefix}_LOG_FILE: Log file path
        """
        return cls(
            level=os.environ.get(f"{prefix}_LOG_LEVEL", "INFO"),
            format=os.environ.get(f"{prefix}_LOG_FORMAT", "console"),
            file=os.environ.get(f"{prefix}_LOG_FILE") or None,
        )
