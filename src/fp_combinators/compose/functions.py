"""partial() and compose(): function-level combinators."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar, overload

from fp_combinators.errors import ensure_callable

__all__ = ['compose', 'identity', 'partial']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')


def identity[T](x: T) -> T:
    """Return the argument unchanged."""
    return x


def partial(f: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Callable[..., Any]:
    """Bind leading arguments of f ahead of a later call.

    Bound positional arguments always precede call-time ones. Bound keyword
    arguments can be overridden at call time. Only one level is applied: the
    returned function performs the full call when invoked.

    Args:
        f: The function to partially apply.
        *args: Leading positional arguments to bind.
        **kwargs: Keyword arguments to bind.

    Returns:
        A new callable computing ``f(*args, *call_args, **kwargs, **call_kwargs)``.

    Raises:
        NotCallableError: If f is not callable.

    Example:
        ```python
        add = lambda a, b: a + b
        partial(add, 1)(2)
        # 3
        ```
    """
    ensure_callable('partial', f)
    return functools.partial(f, *args, **kwargs)


@overload
def compose() -> Callable[[T], T]: ...
@overload
def compose(fn1: Callable[[T], T1], /) -> Callable[[T], T1]: ...
@overload
def compose(fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> Callable[[T], T2]: ...
@overload
def compose(
    fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> Callable[[T], T3]: ...
@overload
def compose(
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> Callable[[T], T4]: ...
@overload
def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]: ...


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Combine unary functions into one, applied left to right.

    ``compose(f, g)(x) == g(f(x))``: the first argument runs first, like a
    pipeline rather than mathematical composition. With no arguments the
    identity function is returned.

    Raises:
        NotCallableError: If any argument is not callable.

    Example:
        ```python
        compose(lambda x: x + 1, lambda x: x * 2)(5)
        # 12
        ```
    """
    ensure_callable('compose', *fns)
    if not fns:
        return identity
    if len(fns) == 1:
        return fns[0]

    def composed(x: Any) -> Any:
        return functools.reduce(lambda acc, f: f(acc), fns, x)

    return composed
