"""One-call loading entry point.

Usage:

    @dataclass
    class MyConfig:
        supabase_key: str = env_field("SUPABASE_ANON_KEY")
        database_url: str = env_field("DATABASE_URL")
        port: str = env_field("PORT")

    config = MyConfig()
    load(".env", config)

An empty path loads from OS environment variables only. Every annotated field
is required; a single MissingRequiredFieldsError names all that were missing.
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ft_config.exceptions import InvalidTargetError
from ft_config.logger import ComponentLogger, Logger
from ft_config.store import ConfigStore

from .env_loader import read_source
from .mapper import DeclarativeMapper, ReflectiveMapper, validate_target
from .service import ConfigService


def load(
    env_file: Optional[Union[str, Path]],
    target: Any,
    *,
    verbose: Optional[bool] = None,
    logger: Optional[Logger] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Any:
    """Load environment variables (and optionally a .env file) into ``target``.

    Args:
        env_file: Path to a .env file, or "" / None for OS environment only
        target: One of
            - a dataclass instance with ``env_field`` annotations, filled in place
            - a ConfigService, loaded with its own mapping
            - a mapping table (logical name -> env name), loaded into a new ConfigStore
        verbose: Diagnostics on/off for this call; None follows the global switch
        logger: Backend logger for diagnostics
        overrides: Values taking precedence over both file and environment

    Returns:
        The populated dataclass instance, the service, or the new ConfigStore

    Raises:
        InvalidTargetError: If target has none of the supported shapes
        LoadEnvError: If env_file is given and cannot be read or parsed
        MissingRequiredFieldsError: If annotated dataclass fields were not found
    """
    if isinstance(target, ConfigService):
        target.load(env_file, overrides=overrides)
        return target

    log = ComponentLogger(verbose=verbose, logger=logger)

    if isinstance(target, Mapping):
        mapper = DeclarativeMapper(target, log)
        store = ConfigStore()
        mapper.apply(read_source(env_file, log, overrides), store)
        return store

    try:
        validate_target(target)
    except InvalidTargetError as exc:
        log.error("Load", exc)
        raise

    source = read_source(env_file, log, overrides)
    return ReflectiveMapper(log).populate(source, target)
