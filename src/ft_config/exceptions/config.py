"""Concrete error kinds raised by the store, mappers and loader.

Each kind carries a fixed code so callers can branch on either the class or
``error.code``. The message can still be passed as the first positional
argument, e.g. ``raise EmptyKeyError()`` or ``raise EmptyKeyError("custom")``.
"""

from typing import Any, Dict, List, Optional, Sequence

from ft_config.exceptions.base import (
    ConfigurationError,
    ResourceNotFoundError,
    ValidationError,
)


class KeyNotFoundError(ResourceNotFoundError):
    """Raised when a key is absent from the store."""

    def __init__(self, key: str, details: Optional[Dict[str, Any]] = None):
        self.key = key
        super().__init__(
            code="KEY_NOT_FOUND",
            message=f"configuration key not found: {key}",
            details=details,
        )


class EmptyKeyError(ValidationError):
    """Raised when the empty string is used as a key."""

    def __init__(
        self, message: str = "key cannot be empty", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code="EMPTY_KEY", message=message, details=details)


class InvalidValueError(ValidationError):
    """Raised when a key or value has an invalid type."""

    def __init__(
        self, message: str = "invalid value type", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code="INVALID_VALUE", message=message, details=details)


class InvalidTargetError(ValidationError):
    """Raised when a load target is not a dataclass instance, service or mapping."""

    def __init__(
        self,
        message: str = "config must be a dataclass instance",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code="INVALID_TARGET", message=message, details=details)


class LoadEnvError(ConfigurationError):
    """Raised when the .env file cannot be read or parsed.

    The underlying cause is chained via ``raise ... from``.
    """

    def __init__(
        self, message: str = "failed to load .env file", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code="LOAD_ENV_FAILED", message=message, details=details)


class NoMappingError(ConfigurationError):
    """Raised by strict services when the mapping table is empty."""

    def __init__(
        self,
        message: str = "no configuration mapping provided",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code="NO_MAPPING", message=message, details=details)


class MissingRequiredFieldsError(ConfigurationError):
    """Raised once with every annotated field whose variable was not found.

    Attributes:
        missing_keys: Environment variable names in field declaration order
    """

    def __init__(self, missing_keys: Sequence[str]):
        self.missing_keys: List[str] = list(missing_keys)
        super().__init__(
            code="MISSING_REQUIRED_FIELDS",
            message="missing required environment variables: " + ", ".join(self.missing_keys),
            details={"missing": self.missing_keys},
        )

    def __str__(self) -> str:
        # The message already names every key
        return f"{self.code}: {self.message}"
