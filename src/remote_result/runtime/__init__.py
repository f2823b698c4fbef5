"""
remote_result.runtime: logging and configuration.

Nothing here is needed to use the outcome types. Call :func:`init` to turn
on structured logging of the library's debug events.
"""

from remote_result.runtime._config import Config, get_config, init
from remote_result.runtime._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

__all__ = [
    # Config
    'Config',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'remove_log_hook',
]
