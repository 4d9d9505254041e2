"""Identity: the trivial wrapper."""

from __future__ import annotations

from fp_combinators.monad.base import Monad

__all__ = ['Identity']


class Identity[T](Monad, frozen=True, gc=False):
    """Wraps any value without validation or coercion.

    Examples:
        >>> Identity.of(3).map(lambda x: x + 1)
        Identity(value=4)
        >>> Identity.of(None).inspect()
        'Identity(None)'
    """

    value: T

    @classmethod
    def of[U](cls, x: U) -> Identity[U]:
        return Identity(x)
