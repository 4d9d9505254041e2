"""Collection: a monad over a sequence, promoting scalars to singletons."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fp_combinators.monad.base import Monad

__all__ = ['Collection']

# Sequences that are treated as single values
_SCALAR_SEQUENCES = (str, bytes, bytearray)


def _as_sequence(x: Any) -> list[Any] | tuple[Any, ...]:
    """Return an unshared sequence holding x's elements, or [x] for scalars.

    Tuples are kept as they are; any other sequence is copied into a new list.
    """
    if isinstance(x, tuple):
        return x
    if isinstance(x, Sequence) and not isinstance(x, _SCALAR_SEQUENCES):
        return list(x)
    return [x]


class Collection[T](Monad, frozen=True, gc=False):
    """Wraps a sequence; any other value is wrapped as a one-element list.

    Lists and other mutable sequences are copied on the way in and on the
    way out, so neither the caller's list nor the result of :meth:`emit` can
    change a Collection. ``map`` hands the whole sequence to the function,
    not each element, and re-wraps the result through :meth:`of`.

    Examples:
        >>> Collection.of(5).emit()
        [5]
        >>> Collection.of(range(3)).concat([3]).inspect()
        'Collection(0, 1, 2, 3)'
        >>> Collection.of([3, 1, 2]).map(sorted).emit()
        [1, 2, 3]
    """

    value: list[T] | tuple[T, ...]

    @classmethod
    def of(cls, x: Any) -> Collection[Any]:
        return Collection(_as_sequence(x))

    def emit(self) -> list[T] | tuple[T, ...]:
        if isinstance(self.value, tuple):
            return self.value
        return list(self.value)

    def inspect(self) -> str:
        return f'Collection({", ".join(str(e) for e in self.value)})'

    def concat(self, xs: Sequence[T] | T) -> Collection[T]:
        """Append the elements of xs, keeping order and the current sequence type.

        A scalar xs is promoted to a one-element sequence first.
        """
        combined = [*self.value, *_as_sequence(xs)]
        if isinstance(self.value, tuple):
            return Collection(tuple(combined))
        return Collection(combined)
