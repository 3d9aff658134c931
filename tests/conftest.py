"""Pytest fixtures for neurevo tests."""

import numpy as np
import pytest

from neurevo import NetworkBuilder, ProgramFactory


@pytest.fixture
def rng():
    """Provide a deterministic generator for tests."""
    return np.random.default_rng(42)


@pytest.fixture
def builder(rng):
    """Fresh graph compiler with a seeded generator."""
    return NetworkBuilder(rng)


@pytest.fixture
def programs():
    return ProgramFactory()
