"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Make the src/ layout importable without an install
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from pathtracer.core.vector import Vector3  # noqa: E402
from pathtracer.core.ray import Ray  # noqa: E402


class ScriptedRandom:
    """Random stream that replays fixed values, for pinning down sampling branches."""

    def __init__(self, uniforms=(), randoms=()):
        self._uniforms = list(uniforms)
        self._randoms = list(randoms)

    def uniform(self, a, b):
        return self._uniforms.pop(0)

    def random(self):
        return self._randoms.pop(0)


@pytest.fixture
def rng():
    """A seeded random stream so sampled tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def scripted_random():
    return ScriptedRandom


def random_ray(rng, spread=5.0):
    origin = Vector3.random(rng, -spread, spread)
    direction = Vector3.random(rng, -1.0, 1.0)
    while direction.near_zero(1e-3):
        direction = Vector3.random(rng, -1.0, 1.0)
    return Ray(origin, direction, rng.random())


@pytest.fixture
def make_random_ray():
    return random_ray
