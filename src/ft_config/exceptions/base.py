"""Base exception classes for ft-config.

All ft-config exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from typing import Any, Dict, Optional


class FtConfigError(Exception):
    """Base exception for all ft-config errors.

    Attributes:
        code: Machine-readable error code (e.g., "KEY_NOT_FOUND")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code (e.g., "EMPTY_KEY")
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(FtConfigError):
    """Base for all validation errors.

    Used when a key, value or load target is rejected before any work is done.
    """

    pass


class ResourceNotFoundError(FtConfigError):
    """Base for lookups of things that don't exist."""

    pass


class ConfigurationError(FtConfigError):
    """Base for configuration and setup errors.

    Used when the configuration source is unreadable or incomplete.
    """

    pass
