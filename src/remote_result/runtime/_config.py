"""Runtime configuration: Config, init() and get_config().

The combinators never read this configuration. It only decides whether and
how remote-result's debug events are logged.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from remote_result.runtime._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'REMOTE_RESULT_LOG_LEVEL'
LOG_FORMAT_ENV = 'REMOTE_RESULT_LOG_FORMAT'


@dataclass(frozen=True)
class Config:
    """Configuration for remote-result.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs if True, console output if False.
    """

    log_level: str | None = None
    json_logs: bool = True


_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read the log level from REMOTE_RESULT_LOG_LEVEL, if set."""
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read the output format from REMOTE_RESULT_LOG_FORMAT.

    Accepts "json" or "console"; anything else falls back to JSON.
    """
    fmt = os.environ.get(LOG_FORMAT_ENV, '').strip().lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, fmt)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> Config:
    """Initialize remote-result's configuration.

    Unset arguments are read from the environment.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = read
            REMOTE_RESULT_LOG_LEVEL, silent if that is unset too.
        json_logs: JSON or console output. None = read
            REMOTE_RESULT_LOG_FORMAT.

    Returns:
        The Config that was set.

    Example:
        ```python
        from remote_result.runtime import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = Config(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'remote-result not initialized. Call runtime.init() first.'
        raise RuntimeError(msg)
    return _config
