"""Library configuration: Config and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fp_combinators._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
    'reset',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})


@dataclass(frozen=True)
class Config:
    """Configuration for fp_combinators.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        trace: Emit debug events for map/chain/fork and Maybe demotion.
    """

    log_level: str | None = None
    trace: bool = False


# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read FP_LOG_LEVEL from the environment, if set."""
    return os.environ.get('FP_LOG_LEVEL') or None


def _detect_trace() -> bool:
    """Read FP_TRACE from the environment ("1", "true", "yes", "on")."""
    return os.environ.get('FP_TRACE', '').strip().lower() in _TRUTHY


def _resolve_log_level(level: str) -> str:
    resolved = level.upper()
    if not isinstance(getattr(logging, resolved, None), int):
        msg = f"Unknown log level '{level}'"
        raise ValueError(msg)
    return resolved


def _build_config(log_level: str | None, trace: bool | None) -> Config:
    """Fill unset values from the environment and validate the level."""
    if log_level is None:
        log_level = _detect_log_level()
    if trace is None:
        trace = _detect_trace()

    if log_level is not None:
        log_level = _resolve_log_level(log_level)
    elif trace:
        log_level = 'DEBUG'

    return Config(log_level=log_level, trace=trace)


def init(
    log_level: str | None = None,
    trace: bool | None = None,
) -> Config:
    """Initialize fp_combinators with the given configuration.

    Unset arguments fall back to the FP_LOG_LEVEL and FP_TRACE environment
    variables. Tracing without an explicit level configures logging at DEBUG.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        trace: Enable trace events for monad operations.

    Returns:
        The Config that was set.

    Raises:
        ValueError: If log_level is not a known logging level name.

    Example:
        ```python
        from fp_combinators import init

        init(trace=True)
        Maybe.of(3).map(lambda _: None)  # logs monad.map and maybe.demoted
        ```
    """
    global _config  # noqa: PLW0603

    _config = _build_config(log_level, trace)

    if _config.log_level is not None:
        configure_logging(_config.log_level)

    return _config


def get_config() -> Config:
    """Get the current configuration, reading the environment if init() was never called.

    Building the configuration this way never configures logging; only an
    explicit init() does.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _build_config(None, None)
    return _config


def reset() -> None:
    """Forget the current configuration; the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
