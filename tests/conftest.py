"""Shared fixtures for descriptor engine tests."""
import numpy as np
import pytest

from facematch.domain.entities.descriptor import Descriptor


@pytest.fixture
def axis():
    """Factory for descriptors that are zero except for one axis.

    ``axis(1, 0.3)`` is ``[0, 0.3, 0, 0]``; its distance to the origin is exactly 0.3.
    """
    def _make(index: int, value: float, dimension: int = 4) -> Descriptor:
        values = np.zeros(dimension)
        values[index] = value
        return Descriptor(values)

    return _make


@pytest.fixture
def origin() -> Descriptor:
    """Four-dimensional zero descriptor used as a probe."""
    return Descriptor(np.zeros(4))


@pytest.fixture
def random_descriptor():
    """Factory for unit-length 128-d descriptors."""
    rng = np.random.default_rng(1234)

    def _make() -> Descriptor:
        emb = rng.standard_normal(128)
        emb /= np.linalg.norm(emb)
        return Descriptor(emb)

    return _make
