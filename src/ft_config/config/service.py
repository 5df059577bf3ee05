"""ConfigService: a mapping table bound to its own ConfigStore.

Example:
    service = new_service({"SupabaseKey": "SUPABASE_ANON_KEY", "Port": "PORT"})
    service.load(".env")
    service.get("SupabaseKey")
    service.get_or_default("Port", "8080")
"""

from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from ft_config.exceptions import NoMappingError
from ft_config.logger import ComponentLogger, Logger
from ft_config.store import ConfigStore

from .env_loader import read_source
from .fields import ConfigMapping
from .mapper import DeclarativeMapper


class ConfigService:
    """Loads a mapping table into a store it owns exclusively.

    Args:
        mapping: Logical name -> environment variable name; copied on construction
        verbose: Diagnostics on/off for this service; None follows the global switch
        logger: Backend logger for diagnostics
        strict: Reject an empty mapping with NoMappingError on load
    """

    def __init__(
        self,
        mapping: ConfigMapping,
        *,
        verbose: Optional[bool] = None,
        logger: Optional[Logger] = None,
        strict: bool = False,
    ):
        self._log = ComponentLogger(verbose=verbose, logger=logger)
        self._mapper = DeclarativeMapper(mapping, self._log)
        self._store = ConfigStore()
        self.strict = strict

    @property
    def mapping(self) -> Mapping[str, str]:
        """Read-only view of the mapping table."""
        return self._mapper.mapping

    @property
    def config(self) -> ConfigStore:
        """The store backing this service."""
        return self._store

    def load(
        self,
        env_file: Optional[Union[str, Path]] = "",
        overrides: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Resolve every mapped variable into the store.

        Unresolved entries are left absent; keys already in the store that
        don't resolve keep their current value.

        Raises:
            NoMappingError: If strict and the mapping is empty
            LoadEnvError: If env_file is given and cannot be read or parsed
        """
        if self.strict and not self._mapper.mapping:
            err = NoMappingError()
            self._log.error("Service.Load", err)
            raise err

        source = read_source(env_file, self._log, overrides, operation="Service.Load")
        unresolved = self._mapper.apply(source, self._store, operation="Service.Load")

        if unresolved:
            self._log.info("Service.Load", "Unresolved: " + ", ".join(unresolved))
        self._log.info(
            "Service.Load",
            f"Loaded {len(self._mapper.mapping) - len(unresolved)} of "
            f"{len(self._mapper.mapping)} mapped keys",
        )

    def get(self, key: str) -> str:
        return self._store.get(key)

    def get_or_default(self, key: str, default: str = "") -> str:
        return self._store.get_or_default(key, default)

    def has(self, key: str) -> bool:
        return self._store.has(key)

    def set(self, key: str, value: str) -> None:
        self._store.set(key, value)

    def delete(self, key: str) -> None:
        self._store.delete(key)

    def clear(self) -> None:
        self._store.clear()

    def get_all(self) -> Dict[str, str]:
        return self._store.get_all()


def new_service(mapping: ConfigMapping, **kwargs) -> ConfigService:
    """Create a ConfigService; keyword arguments go to the constructor."""
    return ConfigService(mapping, **kwargs)
