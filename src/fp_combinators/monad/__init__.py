"""Monad contract and its variants: Identity, Collection, Maybe (Just | Nothing)."""

from fp_combinators.monad.base import Monad
from fp_combinators.monad.collection import Collection
from fp_combinators.monad.identity import Identity
from fp_combinators.monad.maybe import Just, Maybe, Nothing

__all__ = [
    'Collection',
    'Identity',
    'Just',
    'Maybe',
    'Monad',
    'Nothing',
]
