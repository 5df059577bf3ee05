"""Base store interface

Defines the abstract interface that configuration stores must follow.
"""

from abc import ABC, abstractmethod
from typing import Dict, Mapping


class StoreBase(ABC):
    """Abstract base class for string key/value configuration stores"""

    @abstractmethod
    def get(self, key: str) -> str:
        """
        Retrieve a value by key

        Args:
            key: Logical configuration key

        Returns:
            The stored value

        Raises:
            EmptyKeyError: If key is the empty string
            KeyNotFoundError: If key is not present
        """
        pass

    @abstractmethod
    def get_or_default(self, key: str, default: str = "") -> str:
        """
        Retrieve a value by key, falling back to default when absent

        Never raises.
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check if a key exists in the store"""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Insert or overwrite a value

        Args:
            key: Logical configuration key (must not be empty)
            value: String value; the empty string is a legal value

        Raises:
            EmptyKeyError: If key is the empty string
            InvalidValueError: If key or value is not a string
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key; removing an absent key is a no-op"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries"""
        pass

    @abstractmethod
    def get_all(self) -> Dict[str, str]:
        """
        Return all entries

        Returns:
            An independent copy; mutating it does not affect the store
        """
        pass

    def update(self, values: Mapping[str, str]) -> None:
        """Set several entries; implementations may do this atomically"""
        for key, value in values.items():
            self.set(key, value)
