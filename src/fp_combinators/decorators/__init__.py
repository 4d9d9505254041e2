"""Decorators for lifting plain functions into monadic ones."""

from fp_combinators.decorators.lift import lift

__all__ = [
    'lift',
]
