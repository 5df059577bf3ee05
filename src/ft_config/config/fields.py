"""Field annotations and mapping tables.

Dataclass fields opt in to loading by carrying the environment variable name
in their metadata:

    @dataclass
    class AppConfig:
        supabase_key: str = env_field("SUPABASE_KEY")
        port: str = env_field("PORT")
        debug_note: str = ""          # never touched by the loader
"""

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from ft_config.exceptions import EmptyKeyError, InvalidValueError

ENV_METADATA_KEY = "env"

# Logical field name -> environment variable name
ConfigMapping = Mapping[str, str]


def env_field(name: str, *, default: Any = "", **kwargs: Any) -> Any:
    """Declare a dataclass field sourced from environment variable ``name``.

    Extra keyword arguments are passed to ``dataclasses.field``; any metadata
    given is kept alongside the env name.
    """
    if not name:
        raise EmptyKeyError("environment variable name cannot be empty")

    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[ENV_METADATA_KEY] = name

    if "default_factory" in kwargs:
        return dataclasses.field(metadata=metadata, **kwargs)
    return dataclasses.field(default=default, metadata=metadata, **kwargs)


@dataclass(frozen=True)
class FieldBinding:
    """One annotated dataclass field and how the loader will treat it.

    Attributes:
        field_name: Attribute name on the dataclass
        env_name: Environment variable it is sourced from
        supported: Field is declared as ``str``
        writable: Field can be assigned (dataclass is not frozen)
    """

    field_name: str
    env_name: str
    supported: bool = True
    writable: bool = True


def freeze_mapping(mapping: ConfigMapping) -> Mapping[str, str]:
    """Validate a mapping table and return a read-only copy.

    Raises:
        InvalidValueError: If the table is not a mapping of strings
        EmptyKeyError: If a logical name or environment name is empty
    """
    if not isinstance(mapping, Mapping):
        raise InvalidValueError(
            f"mapping must be a Mapping, got {type(mapping).__name__}"
        )

    copied = dict(mapping)
    for logical, env_name in copied.items():
        if not isinstance(logical, str) or not isinstance(env_name, str):
            raise InvalidValueError(
                "mapping entries must be strings",
                details={"key": repr(logical), "value": repr(env_name)},
            )
        if not logical:
            raise EmptyKeyError(details={"env": env_name})
        if not env_name:
            raise EmptyKeyError(
                "environment variable name cannot be empty", details={"key": logical}
            )
    return MappingProxyType(copied)
