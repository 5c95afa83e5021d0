"""Pytest configuration and shared fixtures."""

import itertools
import random

import pytest

from rtweekend.core.vector import Vector3
from rtweekend.geometry.hittable import HitRecord


class ScriptedRng:
    """Stands in for random.Random, replaying a fixed cycle of draws."""

    def __init__(self, values):
        self._values = itertools.cycle(values)

    def random(self):
        return next(self._values)

    def uniform(self, a, b):
        return a + (b - a) * self.random()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def upward_hit():
    """A front-face hit at the origin on a surface facing +z."""
    def make(material=None):
        return HitRecord(p=Vector3(0, 0, 0), normal=Vector3(0, 0, 1), t=1.0,
                         front_face=True, material=material)
    return make
