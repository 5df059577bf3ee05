"""Process-wide logging switch.

Convenience layer for callers that don't pass ``verbose`` explicitly.
Disabled by default so the library stays silent in production.
"""

import threading


class LogSwitch:
    """Thread-safe enabled/disabled flag."""

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled
        self._lock = threading.Lock()

    def enable(self) -> None:
        with self._lock:
            self._enabled = True

    def disable(self) -> None:
        with self._lock:
            self._enabled = False

    def is_enabled(self) -> bool:
        with self._lock:
            return self._enabled


_GLOBAL_SWITCH = LogSwitch()


def global_switch() -> LogSwitch:
    """Return the switch consulted by loggers created with ``verbose=None``."""
    return _GLOBAL_SWITCH


def enable_logging() -> None:
    """Enable diagnostic output for every ComponentLogger without explicit verbosity."""
    _GLOBAL_SWITCH.enable()


def disable_logging() -> None:
    """Disable diagnostic output for every ComponentLogger without explicit verbosity."""
    _GLOBAL_SWITCH.disable()


def is_logging_enabled() -> bool:
    """Return whether the process-wide switch is on."""
    return _GLOBAL_SWITCH.is_enabled()
