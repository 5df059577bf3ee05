"""Configuration loading for ft-config

Populates annotated dataclasses or mapping-driven stores from a .env file
and/or the process environment.

Example:
    from ft_config.config import env_field, load, new_service

    # One-shot, every annotated field required
    config = load(".env", AppConfig())

    # Mapping table, missing keys stay absent
    service = new_service({"SupabaseKey": "SUPABASE_ANON_KEY"})
    service.load(".env")
"""

from ft_config.config.env_loader import EnvLoader, export_to_environ, read_source
from ft_config.config.fields import (
    ENV_METADATA_KEY,
    ConfigMapping,
    FieldBinding,
    env_field,
    freeze_mapping,
)
from ft_config.config.loader import load
from ft_config.config.mapper import DeclarativeMapper, ReflectiveMapper, validate_target
from ft_config.config.service import ConfigService, new_service
from ft_config.config.settings import LogSettings

__all__ = [
    # Entry points
    "load",
    "ConfigService",
    "new_service",
    # Field annotations
    "env_field",
    "ENV_METADATA_KEY",
    "ConfigMapping",
    "FieldBinding",
    "freeze_mapping",
    # Mappers
    "DeclarativeMapper",
    "ReflectiveMapper",
    "validate_target",
    # Environment source
    "EnvLoader",
    "export_to_environ",
    "read_source",
    # Settings
    "LogSettings",
]
