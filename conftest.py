"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from catad.core.space import SCALAR, IndexedSpace, ProductSpace, compose
from catad.vector.linmap import LinMap


@pytest.fixture
def rng():
    """Seeded generator for reproducibility."""
    return np.random.default_rng(42)


@pytest.fixture
def pair():
    return ProductSpace(SCALAR, SCALAR)


@pytest.fixture(params=['scalar', 'pair', 'nested', 'indexed'])
def space(request):
    """Fixture that parametrizes over several object shapes."""
    if request.param == 'scalar':
        return SCALAR
    elif request.param == 'pair':
        return ProductSpace(SCALAR, SCALAR)
    elif request.param == 'nested':
        return ProductSpace(ProductSpace(SCALAR, SCALAR), SCALAR)
    elif request.param == 'indexed':
        return IndexedSpace(SCALAR, 3)


@pytest.fixture
def random_vector(rng):
    """make(space) -> vector with normally distributed coordinates."""
    def make(space):
        return compose(space, {b: rng.normal() for b in space.basis()})
    return make


@pytest.fixture
def random_linmap(random_vector):
    """make(a, b) -> LinMap a -> b with a random basis table."""
    def make(a, b):
        table = {x: random_vector(b) for x in a.basis()}
        return LinMap(a, b, table.__getitem__)
    return make
