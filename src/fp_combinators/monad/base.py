"""Monad base: the shared of/map/chain/pipe/emit/inspect contract.

Every variant is a frozen msgspec Struct holding a single value. Variants
decide how values are wrapped by overriding the ``of`` classmethod; ``map``
always re-wraps through ``type(self).of``, so a variant's construction rules
(scalar promotion in Collection, demotion to Nothing in Maybe) apply to
every step of a pipeline.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, Self

import msgspec

from fp_combinators._logging import describe, trace
from fp_combinators.errors import ensure_callable

__all__ = ['Monad']


class Monad(msgspec.Struct, frozen=True, gc=False):
    """Base class for single-value wrappers.

    Subclasses declare their payload field (conventionally ``value``) and
    must override :meth:`of`.

    Examples:
        >>> Identity.of(2).pipe(lambda x: x + 1, lambda x: x * 2).emit()
        6
        >>> (Identity.of('a') | str.upper).inspect()
        'Identity(A)'
    """

    @classmethod
    def of(cls, x: Any) -> Monad:
        """Wrap x according to the variant's construction rules.

        Raises:
            NotImplementedError: If the variant does not override it.
        """
        msg = f'{cls.__name__} must implement of()'
        raise NotImplementedError(msg)

    def emit(self) -> Any:
        """Return the wrapped value unchanged."""
        return self.value  # type: ignore[attr-defined]

    def inspect(self) -> str:
        """Return a debug string naming the variant and its value."""
        return f'{type(self).__name__}({self.emit()})'

    def chain[U](self, fn: Callable[[Any], U]) -> U:
        """Apply fn to the wrapped value and return its result as-is.

        No re-wrapping happens; fn is responsible for returning a monad if
        the caller wants to keep chaining.
        """
        ensure_callable('chain', fn)
        trace('monad.chain', variant=type(self).__name__, fn=describe(fn))
        return fn(self.emit())

    def map(self, fn: Callable[[Any], Any]) -> Self:
        """Apply fn to the wrapped value and re-wrap through this variant's of()."""
        ensure_callable('map', fn)
        trace('monad.map', variant=type(self).__name__, fn=describe(fn))
        return type(self).of(fn(self.emit()))

    def pipe(self, *fns: Callable[[Any], Any]) -> Self:
        """Map each function in order: ``m.pipe(f, g) == m.map(f).map(g)``."""
        ensure_callable('pipe', *fns)
        return functools.reduce(lambda current, fn: current.map(fn), fns, self)

    def __or__(self, fn: Callable[[Any], Any]) -> Self:
        """Pipe operator: ``m | f`` is ``m.map(f)``."""
        if not callable(fn):
            return NotImplemented
        return self.map(fn)
