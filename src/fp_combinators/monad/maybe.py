"""Maybe: Just[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fp_combinators._logging import describe, trace
from fp_combinators.errors import ensure_callable
from fp_combinators.monad.base import Monad

__all__ = ['Just', 'Maybe', 'Nothing']


class Maybe(Monad, frozen=True, gc=False):
    """Sum type over Just and Nothing.

    Use :meth:`Maybe.of` to build one: ``None``, or a Maybe that is already
    Nothing, gives ``Nothing()``; any other value gives ``Just(value)``.
    Mapping a Just re-wraps the result through :meth:`Maybe.of`, so a
    function returning ``None`` turns the rest of the pipeline into Nothing.

    Examples:
        >>> Maybe.of(5).map(lambda x: x + 1)
        Just(value=6)
        >>> Maybe.of(5).map(lambda _: None).map(lambda x: x + 1)
        Nothing()
        >>> Maybe.of(None).fork(lambda: 'missing', str)
        'missing'
    """

    is_just = False
    is_nothing = False

    @classmethod
    def of[T](cls, x: T | None) -> Just[T] | Nothing:
        if x is None or (isinstance(x, Maybe) and x.is_nothing):
            return Nothing()
        return Just(x)

    def map(self, fn: Callable[[Any], Any]) -> Just[Any] | Nothing:
        ensure_callable('map', fn)
        match self:
            case Just(value=value):
                trace('monad.map', variant='Just', fn=describe(fn))
                mapped = Maybe.of(fn(value))
                if mapped.is_nothing:
                    trace('maybe.demoted', fn=describe(fn))
                return mapped
            case Nothing():
                return Nothing()
        msg = f'Unknown Maybe variant: {type(self).__name__}'
        raise TypeError(msg)

    def fork[R](self, on_nothing: Callable[[], R], on_just: Callable[[Any], R]) -> R:
        """Consume the Maybe: call on_just(value) for Just, on_nothing() for Nothing."""
        ensure_callable('fork', on_nothing, on_just)
        match self:
            case Just(value=value):
                trace('maybe.fork', variant='Just')
                return on_just(value)
            case Nothing():
                trace('maybe.fork', variant='Nothing')
                return on_nothing()
        msg = f'Unknown Maybe variant: {type(self).__name__}'
        raise TypeError(msg)

    def unwrap_or[T](self, default: T) -> T | Any:
        """Return the wrapped value for Just, default for Nothing."""
        return self.fork(lambda: default, lambda value: value)


class Just[T](Maybe, frozen=True, gc=False):
    """Maybe variant holding a present value."""

    value: T

    is_just = True
    is_nothing = False


class Nothing(Maybe, frozen=True, gc=False):
    """Maybe variant representing absence. ``emit()`` returns None."""

    is_just = False
    is_nothing = True

    def emit(self) -> None:
        return None

    def chain(self, fn: Callable[[Any], Any]) -> Nothing:
        """Return Nothing without calling fn."""
        ensure_callable('chain', fn)
        return Nothing()

    def inspect(self) -> str:
        return 'Nothing()'
