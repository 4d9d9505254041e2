"""Argument errors raised by combinators and monad operations."""

from __future__ import annotations

from typing import Any

__all__ = ['NotCallableError', 'ensure_callable']


class NotCallableError(TypeError):
    """Raised when an operation expecting a function receives something else.

    Subclasses TypeError so callers catching the built-in error keep working.
    """

    def __init__(self, operation: str, value: Any) -> None:
        self.operation = operation
        self.value = value
        super().__init__(f"{operation}() expected a callable, got '{type(value).__name__}'")


def ensure_callable(operation: str, *fns: Any) -> None:
    """Raise NotCallableError for the first argument that is not callable."""
    for f in fns:
        if not callable(f):
            raise NotCallableError(operation, f)
