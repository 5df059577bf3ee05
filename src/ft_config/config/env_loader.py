"""Environment loader with optional .env support.

Loads key/value pairs in deterministic order:
1) .env file (only when a path is given)
2) OS environment variables
3) Explicit overrides (highest precedence)

A given file must exist and parse cleanly; otherwise LoadEnvError is raised
and nothing is exported.
"""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values
from dotenv.parser import parse_stream

from ft_config.exceptions import LoadEnvError
from ft_config.logger import ComponentLogger


class EnvLoader:
    """Load environment-style key/value pairs with .env support.

    Args:
        env_file: Path to a .env file; empty or None means OS environment only
        export: Copy file entries into os.environ, never overriding variables
            that are already set
    """

    def __init__(self, env_file: Optional[Path | str] = None, export: bool = True) -> None:
        self.env_file = Path(env_file) if env_file else None
        self.export = export

    def read_file(self) -> Dict[str, str]:
        """Parse the .env file without touching os.environ.

        Keys declared without a value (``KEY`` with no ``=``) are dropped.

        Raises:
            LoadEnvError: If the file cannot be read or a line fails to parse
        """
        if self.env_file is None:
            return {}

        path = str(self.env_file)
        try:
            text = self.env_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadEnvError(
                f"failed to load .env file: {path}",
                details={"path": path, "reason": str(exc)},
            ) from exc

        for binding in parse_stream(io.StringIO(text)):
            if binding.error:
                raise LoadEnvError(
                    f"failed to parse .env file: {path}",
                    details={
                        "path": path,
                        "line": binding.original.line,
                        "content": binding.original.string.rstrip("\r\n"),
                    },
                )

        values = dotenv_values(stream=io.StringIO(text))
        return {k: v for k, v in values.items() if v is not None}

    def load(self, overrides: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Load environment data with deterministic precedence.

        Precedence (low -> high): .env file, OS env vars, overrides
        """
        data: Dict[str, str] = {}

        file_values = self.read_file()
        data.update(file_values)
        if self.export:
            export_to_environ(file_values)

        data.update(os.environ)

        if overrides:
            data.update({k: str(v) for k, v in overrides.items()})

        return data


def export_to_environ(values: Mapping[str, str]) -> None:
    """Set each variable in os.environ unless it is already defined."""
    for key, value in values.items():
        if key not in os.environ:
            os.environ[key] = value


def read_source(
    env_file: Optional[Path | str],
    log: ComponentLogger,
    overrides: Optional[Mapping[str, str]] = None,
    operation: str = "Load",
) -> Dict[str, str]:
    """Read the lookup source for a load call, logging where it came from."""
    if env_file:
        log.info(operation, f"Initialized - loading from file: {env_file}")
    else:
        log.info(operation, "Initialized - loading from OS environment variables")

    try:
        return EnvLoader(env_file).load(overrides)
    except LoadEnvError as exc:
        log.error(operation, exc)
        raise


__all__ = ["EnvLoader", "export_to_environ", "read_source"]
