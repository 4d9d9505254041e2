"""Composition utilities: partial() and left-to-right compose()."""

from fp_combinators.compose.functions import compose, identity, partial

__all__ = [
    'compose',
    'identity',
    'partial',
]
