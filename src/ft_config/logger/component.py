"""
Component logger emitting ``[component] [operation] message`` lines.

Every loader, mapper and service writes its diagnostics through one of these.
When disabled, calls return immediately without touching the backend.
"""

from typing import Any, Optional

from .interface import Logger
from .switch import LogSwitch, global_switch


class ComponentLogger:
    """Toggleable diagnostic stream for one component.

    Verbosity is resolved per call:
    - ``verbose=True`` / ``verbose=False``: fixed for this instance
    - ``verbose=None``: follow the process-wide switch (see ``enable_logging``)

    Example:
        log = ComponentLogger(verbose=True)
        log.info("Load", "Loaded PORT -> port")
        # -> "[ft_config] [Load] Loaded PORT -> port"
    """

    def __init__(
        self,
        component: str = "ft_config",
        verbose: Optional[bool] = None,
        logger: Optional[Logger] = None,
        switch: Optional[LogSwitch] = None,
    ):
        self.component = component
        self.verbose = verbose
        self._logger = logger
        self._switch = switch or global_switch()

    @property
    def enabled(self) -> bool:
        if self.verbose is not None:
            return self.verbose
        return self._switch.is_enabled()

    @property
    def backend(self) -> Logger:
        """Backend logger, created on first use from FT_CONFIG_LOG_* settings."""
        if self._logger is None:
            from . import get_logger

            self._logger = get_logger("ft-config")
        return self._logger

    def format(self, operation: str, message: str) -> str:
        return f"[{self.component}] [{operation}] {message}"

    def debug(self, operation: str, message: str, **kwargs: Any) -> None:
        if self.enabled:
            self.backend.debug(self.format(operation, message), **kwargs)

    def info(self, operation: str, message: str, **kwargs: Any) -> None:
        if self.enabled:
            self.backend.info(self.format(operation, message), **kwargs)

    def warning(self, operation: str, message: str, **kwargs: Any) -> None:
        if self.enabled:
            self.backend.warning(self.format(operation, message), **kwargs)

    def error(self, operation: str, err: BaseException, **kwargs: Any) -> None:
        if self.enabled:
            self.backend.error(self.format(operation, f"ERROR: {err}"), **kwargs)
