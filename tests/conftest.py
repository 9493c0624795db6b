"""Pytest configuration for spheretracer tests.

Provides a seeded random generator, a scripted generator for forcing
specific samples, and small render settings that keep end-to-end tests fast.
"""

import os

import numpy as np
import pytest

# pygame must never try to open a real window during tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class ScriptedRng:
    """Stand-in for numpy.random.Generator returning queued values.

    uniform() pops the next queued vector, random() the next queued scalar.
    """

    def __init__(self, vectors=(), scalars=()):
        self.vectors = list(vectors)
        self.scalars = list(scalars)

    def uniform(self, low=0.0, high=1.0, size=None):
        return np.array(self.vectors.pop(0), dtype=np.float64)

    def random(self):
        return self.scalars.pop(0)


@pytest.fixture
def rng():
    """Seeded generator so random-based assertions are repeatable."""
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def tiny_settings():
    from spheretracer.config import RenderSettings

    return RenderSettings(width=12, aspect_ratio=1.5, samples_per_pixel=2, max_depth=5, seed=7)
