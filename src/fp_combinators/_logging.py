"""Structured logging for fp_combinators.

Loggers are structlog-wrapped stdlib loggers under the ``fp_combinators``
namespace with their own processor chain, so the library never touches
structlog's global configuration or the root logger. ``configure_logging``
only installs a handler on the ``fp_combinators`` logger.

The library itself only logs when tracing is enabled (see ``_config.init``):
monad operations then emit debug events describing each step of a pipeline.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'describe',
    'get_logger',
    'remove_log_hook',
    'reset_logging',
    'trace',
]

LOGGER_NAME = 'fp_combinators'

# Output format and handler chosen by the last configure_logging() call
_json_output = True
_handler: logging.Handler | None = None


def _render(logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:
    """Render with JSON or console output, whichever is currently selected."""
    if _json_output:
        return structlog.processors.JSONRenderer()(logger, method_name, event_dict)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())(logger, method_name, event_dict)


def _get_processors() -> list[Any]:
    """Processor chain for library loggers; hooks see the dict before rendering."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _hook_processor,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _render,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Send fp_combinators log output to stderr at the given level.

    Replaces any handler installed by a previous call. The library logger
    stops propagating so its lines are not duplicated by the host's handlers;
    other loggers, including the root logger, are left alone.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    global _json_output, _handler  # noqa: PLW0603

    _json_output = json_output
    library_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter('%(message)s'))
    library_logger.addHandler(_handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False


def reset_logging() -> None:
    """Undo configure_logging(): drop its handler and restore propagation."""
    global _json_output, _handler  # noqa: PLW0603

    library_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)
        _handler = None
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True
    _json_output = True


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger in the fp_combinators namespace.

    Args:
        name: Child logger name, e.g. "monad" for "fp_combinators.monad".
            None returns the package logger.

    Returns:
        A structlog BoundLogger wrapping the stdlib logger.
    """
    logger_name = f'{LOGGER_NAME}.{name}' if name else LOGGER_NAME
    return structlog.wrap_logger(
        logging.getLogger(logger_name),
        processors=_get_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def trace(event: str, **fields: Any) -> None:
    """Emit a debug event if tracing is enabled in the current config."""
    from fp_combinators._config import get_config

    if get_config().trace:
        get_logger().debug(event, **fields)


def describe(f: Any) -> str:
    """Name a callable for trace output."""
    return getattr(f, '__qualname__', None) or getattr(f, '__name__', None) or repr(f)


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook called with a copy of each fp_combinators log entry.

    Hooks run whether or not logging is configured, so they can collect trace
    events without any output being written.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001
            # hook failures never break logging
            continue
    return event_dict
