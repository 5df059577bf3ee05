"""In-memory configuration store.

Thread-safe: every operation holds the store's readers-writer lock for its
whole duration, so a completed ``set`` is visible to every later ``get``.

Example:
    store = ConfigStore()
    store.set("Port", "8080")
    store.get("Port")                  # "8080"
    store.get_or_default("Host", "0.0.0.0")
"""

from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from ft_config.exceptions import EmptyKeyError, InvalidValueError, KeyNotFoundError

from .base import StoreBase
from .rwlock import ReadWriteLock


def _check_entry(key: object, value: object) -> None:
    if not isinstance(key, str):
        raise InvalidValueError(
            f"key must be a string, got {type(key).__name__}",
            details={"key": repr(key)},
        )
    if key == "":
        raise EmptyKeyError()
    if not isinstance(value, str):
        raise InvalidValueError(
            f"value for {key} must be a string, got {type(value).__name__}",
            details={"key": key},
        )


class ConfigStore(StoreBase):
    """Dict-backed store guarded by a ReadWriteLock."""

    def __init__(
        self,
        initial: Optional[Union[Mapping[str, str], Iterable[Tuple[str, str]]]] = None,
    ) -> None:
        self._values: Dict[str, str] = {}
        self._lock = ReadWriteLock()
        if initial is not None:
            self.update(initial)

    def get(self, key: str) -> str:
        if key == "":
            raise EmptyKeyError()
        with self._lock.read():
            try:
                return self._values[key]
            except KeyError:
                raise KeyNotFoundError(key) from None

    def get_or_default(self, key: str, default: str = "") -> str:
        with self._lock.read():
            return self._values.get(key, default)

    def has(self, key: str) -> bool:
        with self._lock.read():
            return key in self._values

    def set(self, key: str, value: str) -> None:
        _check_entry(key, value)
        with self._lock.write():
            self._values[key] = value

    def update(
        self, values: Union[Mapping[str, str], Iterable[Tuple[str, str]]]
    ) -> None:
        """Set several entries under one write lock.

        Every entry is validated first; nothing is written if any is invalid.
        """
        items = list(values.items() if isinstance(values, Mapping) else values)
        for key, value in items:
            _check_entry(key, value)
        with self._lock.write():
            self._values.update(items)

    def delete(self, key: str) -> None:
        with self._lock.write():
            self._values.pop(key, None)

    def clear(self) -> None:
        with self._lock.write():
            self._values.clear()

    def get_all(self) -> Dict[str, str]:
        with self._lock.read():
            return dict(self._values)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._values)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._values

    def __repr__(self) -> str:
        return f"ConfigStore(keys={sorted(self.get_all())})"
