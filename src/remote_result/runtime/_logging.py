"""Structured logging for remote-result.

Library events are built by structlog but always handed to the stdlib
``logging`` module, under the ``remote_result`` logger hierarchy. The global
structlog configuration is never touched, so an application that uses
structlog for itself keeps its own setup, and an application that only uses
stdlib logging sees the events in its own handlers with their fields as
record attributes.

Events are emitted at debug level and only when the ``remote_result``
logger is enabled for DEBUG. :func:`configure_logging` is a convenience
that attaches a JSON or console handler to that logger; the root logger is
left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'debug_enabled',
    'get_logger',
    'remove_log_hook',
]

LOGGER_NAME = 'remote_result'

# Handler installed by configure_logging, replaced on each call
_handler: logging.Handler | None = None


def _event_processors() -> list[Any]:
    """Processors applied when an event is emitted, before stdlib sees it."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _create_hook_processor(),
        structlog.stdlib.render_to_log_kwargs,
    ]


def _create_formatter(json_output: bool) -> logging.Formatter:
    import structlog

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.ExtraAdder(),
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    propagate: bool = False,
) -> None:
    """Send remote-result's events to stderr as JSON or console lines.

    Only the ``remote_result`` logger is configured. Calling this again
    replaces the handler installed by the previous call.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
        propagate: Also pass records on to the application's root handlers.
    """
    global _handler  # noqa: PLW0603

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_create_formatter(json_output))

    library_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = propagate
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger writing to the stdlib logger ``name``.

    Args:
        name: Logger name, usually ``__name__``. Defaults to ``remote_result``.

    Returns:
        A structlog BoundLogger that does not depend on structlog's global
        configuration.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=_event_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def debug_enabled(name: str) -> bool:
    """Return True if the stdlib logger ``name`` would emit DEBUG records."""
    return logging.getLogger(name).isEnabledFor(logging.DEBUG)


# --- Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook called with a copy of every event from :func:`get_logger` loggers.

    Args:
        hook: Callable that receives the event dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    def hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for hook in _log_hooks:
            try:
                hook(event_dict.copy())
            except Exception:  # noqa: BLE001, S110
                pass  # a failing hook must not break logging
        return event_dict

    return hook_processor
