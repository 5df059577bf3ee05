"""Exceptions for ft-config.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from ft_config.exceptions import (
        FtConfigError,
        KeyNotFoundError,
        MissingRequiredFieldsError,
    )
"""

from ft_config.exceptions.base import (
    ConfigurationError,
    FtConfigError,
    ResourceNotFoundError,
    ValidationError,
)
from ft_config.exceptions.config import (
    EmptyKeyError,
    InvalidTargetError,
    InvalidValueError,
    KeyNotFoundError,
    LoadEnvError,
    MissingRequiredFieldsError,
    NoMappingError,
)

__all__ = [
    # Base exceptions
    "FtConfigError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    # Concrete kinds
    "KeyNotFoundError",
    "EmptyKeyError",
    "InvalidValueError",
    "InvalidTargetError",
    "LoadEnvError",
    "NoMappingError",
    "MissingRequiredFieldsError",
]
