"""Library configuration: LogFormat enum, Settings, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from sumkit._logging import configure_logging

__all__ = [
    'LogFormat',
    'Settings',
    'current_settings',
    'get_config',
    'init',
]

_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


class LogFormat(Enum):
    """Rendering used for sumkit's structured logs."""

    JSON = 'json'
    CONSOLE = 'console'


@dataclass(frozen=True)
class Settings:
    """Configuration for sumkit's ambient behaviour.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        log_format: JSON or console rendering when logging is configured.
        log_captures: Whether ``@safe`` emits ``safe.captured`` for each
            exception it turns into a Failure.
    """

    log_level: str | None = None
    log_format: LogFormat = LogFormat.JSON
    log_captures: bool = True


_DEFAULTS = Settings()
_config: Settings | None = None


def _detect_log_level() -> str | None:
    """Read SUMKIT_LOG_LEVEL, returning None when unset or empty."""
    level = os.environ.get('SUMKIT_LOG_LEVEL', '').strip().upper()
    return level or None


def _detect_log_format() -> LogFormat:
    """Read SUMKIT_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    env_format = os.environ.get('SUMKIT_LOG_FORMAT', '').lower()
    if not env_format:
        return LogFormat.JSON
    try:
        return LogFormat(env_format)
    except ValueError:
        logging.getLogger(__name__).warning("Unknown SUMKIT_LOG_FORMAT value '%s', defaulting to json", env_format)
        return LogFormat.JSON


def _detect_log_captures() -> bool:
    """Read SUMKIT_LOG_CAPTURES; "0", "false", "no" and "off" disable it."""
    return os.environ.get('SUMKIT_LOG_CAPTURES', '').strip().lower() not in _FALSE_VALUES


def init(
    log_level: str | None = None,
    log_format: LogFormat | str | None = None,
    log_captures: bool | None = None,
) -> Settings:
    """Initialize sumkit's configuration.

    Unset arguments fall back to the SUMKIT_LOG_LEVEL, SUMKIT_LOG_FORMAT and
    SUMKIT_LOG_CAPTURES environment variables. Logging is configured only
    when a level resolves.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.).
        log_format: LogFormat or its string value ("json", "console").
        log_captures: Whether ``@safe`` logs the failures it captures.

    Returns:
        The Settings that were stored.

    Example:
        ```python
        import sumkit

        sumkit.init(log_level='DEBUG', log_format='console')
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    if log_format is None:
        resolved_format = _detect_log_format()
    elif isinstance(log_format, str):
        resolved_format = LogFormat(log_format.lower())
    else:
        resolved_format = log_format

    resolved_captures = _detect_log_captures() if log_captures is None else log_captures

    _config = Settings(log_level=resolved_level, log_format=resolved_format, log_captures=resolved_captures)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_format is LogFormat.JSON)

    return _config


def get_config() -> Settings:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'sumkit not initialized. Call sumkit.init() first.'
        raise RuntimeError(msg)
    return _config


def current_settings() -> Settings:
    """Return the stored Settings, or the defaults before init()."""
    return _config if _config is not None else _DEFAULTS
