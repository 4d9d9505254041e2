"""Shared fixtures for fp_combinators tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest
from fp_combinators import _config
from fp_combinators._logging import clear_log_hooks, reset_logging
from hypothesis import HealthCheck, settings

# clean_runtime only resets process-wide state, so it is safe to share across examples
settings.register_profile('fp', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('fp')


@pytest.fixture(autouse=True)
def clean_runtime() -> Iterator[None]:
    """Start each test with no stored config, hooks, library handler or FP_* variables."""
    env = {k: v for k, v in os.environ.items() if not k.startswith('FP_')}
    with patch.dict(os.environ, env, clear=True):
        _config.reset()
        clear_log_hooks()
        reset_logging()
        yield
        _config.reset()
        clear_log_hooks()
        reset_logging()
