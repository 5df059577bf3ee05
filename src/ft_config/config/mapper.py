"""Strategies for applying looked-up values to a target.

- DeclarativeMapper: mapping table -> ConfigStore. Misses are soft; the key
  simply stays absent and can be queried later with get_or_default.
- ReflectiveMapper: annotated dataclass instance. Every annotated ``str`` field
  is required; all misses are reported together in one
  MissingRequiredFieldsError.
"""

import dataclasses
import typing
from typing import Any, List, Mapping, Optional

from ft_config.exceptions import InvalidTargetError, MissingRequiredFieldsError
from ft_config.logger import ComponentLogger
from ft_config.store import StoreBase

from .fields import ENV_METADATA_KEY, ConfigMapping, FieldBinding, freeze_mapping


def validate_target(target: Any) -> None:
    """Ensure ``target`` is a dataclass instance that can be filled in place.

    Raises:
        InvalidTargetError: For classes, None, mappings and plain objects
    """
    if isinstance(target, type) or not dataclasses.is_dataclass(target):
        raise InvalidTargetError(
            "config must be a dataclass instance",
            details={"type": type(target).__name__},
        )


def _is_str(field_type: Any) -> bool:
    # Unresolvable string annotations are compared by name
    return field_type is str or field_type == "str"


class ReflectiveMapper:
    """Fill annotated dataclass fields from a lookup source."""

    def __init__(self, logger: Optional[ComponentLogger] = None):
        self._log = logger or ComponentLogger()

    def bindings(self, target: Any) -> List[FieldBinding]:
        """Return the annotated fields of ``target`` in declaration order."""
        validate_target(target)
        cls = type(target)

        try:
            hints = typing.get_type_hints(cls)
        except (NameError, TypeError):
            hints = {}

        params = getattr(cls, "__dataclass_params__", None)
        writable = not (params is not None and params.frozen)

        result: List[FieldBinding] = []
        for f in dataclasses.fields(target):
            env_name = f.metadata.get(ENV_METADATA_KEY)
            if not env_name:
                continue
            result.append(
                FieldBinding(
                    field_name=f.name,
                    env_name=env_name,
                    supported=_is_str(hints.get(f.name, f.type)),
                    writable=writable,
                )
            )
        return result

    def populate(self, source: Mapping[str, str], target: Any) -> Any:
        """Assign every resolvable annotated field, then report all misses.

        Fields that resolve are assigned even when others are missing.

        Returns:
            The same ``target`` instance

        Raises:
            InvalidTargetError: If target is not a dataclass instance
            MissingRequiredFieldsError: If any annotated field was not found
        """
        missing: List[str] = []

        for binding in self.bindings(target):
            if not binding.writable:
                self._log.warning("Load", f"Field {binding.field_name} is not settable")
                continue
            if not binding.supported:
                self._log.warning(
                    "Load", f"Unsupported field type for {binding.field_name}, skipping"
                )
                continue

            value = source.get(binding.env_name)
            if value is None:
                missing.append(binding.env_name)
                continue

            setattr(target, binding.field_name, value)
            self._log.info("Load", f"Loaded {binding.env_name} -> {binding.field_name}")

        if missing:
            err = MissingRequiredFieldsError(missing)
            self._log.error("Load", err)
            raise err

        self._log.info("Load", "Successfully loaded all configuration values")
        return target


class DeclarativeMapper:
    """Copy mapped environment values into a store under their logical names."""

    def __init__(self, mapping: ConfigMapping, logger: Optional[ComponentLogger] = None):
        self.mapping = freeze_mapping(mapping)
        self._log = logger or ComponentLogger()

    def apply(
        self, source: Mapping[str, str], store: StoreBase, operation: str = "Load"
    ) -> List[str]:
        """Write every hit into ``store`` in one update.

        Returns:
            Environment names that were not found, in mapping order
        """
        resolved = {}
        unresolved: List[str] = []

        for logical, env_name in self.mapping.items():
            value = source.get(env_name)
            if value is None:
                unresolved.append(env_name)
                self._log.debug(operation, f"{env_name} not set, {logical} left absent")
                continue
            resolved[logical] = value

        store.update(resolved)
        for logical in resolved:
            self._log.info(operation, f"Loaded {self.mapping[logical]} -> {logical}")
        return unresolved
