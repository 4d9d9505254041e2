"""@lift decorator for wrapping return values through a monad's of()."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from fp_combinators.errors import ensure_callable
from fp_combinators.monad.base import Monad

__all__ = ['lift']


def lift[**P, T](variant: type[Monad]) -> Callable[[Callable[P, T]], Callable[P, Monad]]:
    """Decorator factory that passes a function's return value through ``variant.of``.

    Useful for plugging plain functions into monadic code, e.g. turning a
    lookup that may return None into one that returns Just/Nothing.

    Args:
        variant: The monad class whose ``of`` wraps results.

    Returns:
        A decorator producing functions that return ``variant.of(result)``.

    Raises:
        NotCallableError: If variant has no callable ``of``.

    Example:
        ```python
        @lift(Maybe)
        def find(users: dict[str, int], name: str) -> int | None:
            return users.get(name)

        find({'ann': 1}, 'ann')
        # Just(value=1)
        find({'ann': 1}, 'bob')
        # Nothing()
        ```
    """
    ensure_callable('lift', getattr(variant, 'of', None))

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Monad:
        return variant.of(wrapped(*args, **kwargs))

    return wrapper  # type: ignore[return-value]
