"""Pytest configuration and shared fixtures."""

import random

import pytest

from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord


class ScriptedRng:
    """Stands in for random.Random, replaying queued draws."""

    def __init__(self, uniforms=(), randoms=(), randints=()):
        self.uniforms = list(uniforms)
        self.randoms = list(randoms)
        self.randints = list(randints)

    def uniform(self, a, b):
        return self.uniforms.pop(0)

    def random(self):
        return self.randoms.pop(0)

    def randint(self, a, b):
        return self.randints.pop(0)


@pytest.fixture
def rng():
    """Seeded generator so stochastic tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def make_record():
    """Builds a hit record at the origin with an upward normal."""
    def _make(normal=Vector3(0, 1, 0), p=Vector3(0, 0, 0), front_face=True, u=0.0, v=0.0):
        return HitRecord(p=p, normal=normal, t=1.0, u=u, v=v, front_face=front_face)
    return _make
