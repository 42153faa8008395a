"""Pytest configuration for raytracer tests.

Shared fixtures: the two-sphere reference world, a glass sphere factory and
a seeded random generator.
"""

import numpy as np
import pytest

from core.matrix import identity
from geometry.sphere import glass_sphere
from geometry.world import World


@pytest.fixture
def default_world():
    """A fresh copy of the reference world for each test, so tests can mutate it."""
    return World.default()


@pytest.fixture
def make_glass_sphere():
    """Factory for glass spheres with a given transform and refractive index."""

    def _make(transform=None, refractive_index=1.5):
        s = glass_sphere()
        s.transform = transform if transform is not None else identity()
        s.material.refractive_index = refractive_index
        return s

    return _make


@pytest.fixture
def rng():
    """Seeded generator so jittered rays are repeatable."""
    return np.random.default_rng(1234)
