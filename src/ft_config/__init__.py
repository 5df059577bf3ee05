"""ft-config - Load .env files and environment variables into typed config.

This package provides:
- config: load() into annotated dataclasses, ConfigService for mapping tables
- store: Thread-safe string key/value store with override semantics
- logger: Toggleable diagnostics, structured text/JSON output
- exceptions: Error classes with structured error info
"""

__version__ = "1.0.0"

from ft_config.logger import (
    ComponentLogger,
    Logger,
    StructuredLogger,
    create_logger,
    disable_logging,
    enable_logging,
    get_logger,
    is_logging_enabled,
)

from ft_config.exceptions import (
    ConfigurationError,
    EmptyKeyError,
    FtConfigError,
    InvalidTargetError,
    InvalidValueError,
    KeyNotFoundError,
    LoadEnvError,
    MissingRequiredFieldsError,
    NoMappingError,
    ResourceNotFoundError,
    ValidationError,
)

from ft_config.store import ConfigStore, StoreBase

from ft_config.config import (
    ConfigMapping,
    ConfigService,
    EnvLoader,
    env_field,
    load,
    new_service,
)

__all__ = [
    "__version__",
    # Entry points
    "load",
    "new_service",
    "ConfigService",
    "ConfigMapping",
    "env_field",
    "EnvLoader",
    # Store
    "ConfigStore",
    "StoreBase",
    # Logger
    "Logger",
    "StructuredLogger",
    "ComponentLogger",
    "create_logger",
    "get_logger",
    "enable_logging",
    "disable_logging",
    "is_logging_enabled",
    # Exceptions
    "FtConfigError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    "KeyNotFoundError",
    "EmptyKeyError",
    "InvalidValueError",
    "InvalidTargetError",
    "LoadEnvError",
    "NoMappingError",
    "MissingRequiredFieldsError",
]
