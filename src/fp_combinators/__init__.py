"""fp-combinators: small functional programming toolkit.

Partial application, left-to-right composition, and a monad contract
(of, map, chain, pipe, emit, inspect) with Identity, Collection and
Maybe (Just | Nothing) variants.

Flat imports (preferred):
    from fp_combinators import partial, compose
    from fp_combinators import Identity, Collection, Maybe, Just, Nothing

Submodule imports (for organization):
    from fp_combinators.compose import partial, compose
    from fp_combinators.monad import Maybe, Just, Nothing
    from fp_combinators.decorators import lift
"""

# Configuration and logging
from fp_combinators._config import Config, get_config, init
from fp_combinators._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Composition
from fp_combinators.compose import compose, identity, partial

# Decorators
from fp_combinators.decorators import lift

# Errors
from fp_combinators.errors import NotCallableError

# Monads
from fp_combinators.monad import (
    Collection,
    Identity,
    Just,
    Maybe,
    Monad,
    Nothing,
)

__all__ = [
    # Monads
    'Collection',
    # Configuration
    'Config',
    'Identity',
    'Just',
    'Maybe',
    'Monad',
    # Errors
    'NotCallableError',
    'Nothing',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    # Composition
    'compose',
    'configure_logging',
    'get_config',
    'get_logger',
    'identity',
    'init',
    # Decorators
    'lift',
    'partial',
    'remove_log_hook',
]
