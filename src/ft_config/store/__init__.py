"""Store module for ft-config

Provides the thread-safe string key/value store populated by the declarative
loader and exposed through ConfigService.
"""

from .base import StoreBase
from .memory import ConfigStore
from .rwlock import ReadWriteLock

__all__ = [
    "StoreBase",
    "ConfigStore",
    "ReadWriteLock",
]
