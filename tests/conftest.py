from __future__ import annotations

import pytest

from tessera.session import reset


@pytest.fixture(autouse=True)
def fresh_session():
    """Start every test with empty counters, registry, and listeners."""
    reset()
    yield
    reset()
