"""Unit tests for Vector3 and the reflect/refract helpers."""

import math

import pytest

from spheretracer.core.utils import random_in_unit_sphere, reflect, refract
from spheretracer.core.vector import Vector3


class TestVectorArithmetic:
    def test_add_sub_neg(self):
        a = Vector3(1, 2, 3)
        b = Vector3(10, 20, 30)
        assert a + b == Vector3(11, 22, 33)
        assert b - a == Vector3(9, 18, 27)
        assert -a == Vector3(-1, -2, -3)

    def test_scalar_add(self):
        assert Vector3(1, 2, 3) + 1.0 == Vector3(2, 3, 4)

    def test_scalar_and_componentwise_multiply(self):
        a = Vector3(1, 2, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * Vector3(2, 0, -1) == Vector3(2, 0, -3)

    def test_divide(self):
        assert Vector3(2, 4, 6) / 2 == Vector3(1, 2, 3)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == 32

    def test_lengths(self):
        v = Vector3(3, 4, 12)
        assert v.length_squared() == 169
        assert v.length() == 13

    def test_zero_default(self):
        assert Vector3() == Vector3.zero() == Vector3(0, 0, 0)


class TestVectorHelpers:
    def test_normalize(self):
        n = Vector3(0, 3, 4).normalize()
        assert n.length() == pytest.approx(1.0)
        assert n == Vector3(0, 0.6, 0.8)

    def test_normalize_zero_vector_stays_zero(self):
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_clamp(self):
        assert Vector3(-0.5, 0.5, 2.0).clamp(0.0, 0.999) == Vector3(0.0, 0.5, 0.999)

    def test_sqrt(self):
        assert Vector3(4, 9, 0.25).sqrt() == Vector3(2, 3, 0.5)

    def test_near_zero(self):
        assert Vector3(1e-20, 0, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()

    def test_is_immutable(self):
        v = Vector3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5

    def test_hashable_and_iterable(self):
        assert len({Vector3(1, 2, 3), Vector3(1, 2, 3)}) == 1
        assert tuple(Vector3(1, 2, 3)) == (1.0, 2.0, 3.0)
        assert Vector3(1, 2, 3).to_tuple() == (1.0, 2.0, 3.0)


class TestReflectRefract:
    def test_reflect_about_normal(self):
        assert reflect(Vector3(1, -1, 0), Vector3(0, 1, 0)) == Vector3(1, 1, 0)

    def test_refract_head_on_goes_straight_through(self):
        refracted = refract(Vector3(0, -1, 0), Vector3(0, 1, 0), 1 / 1.5)
        assert refracted == Vector3(0, -1, 0)

    def test_refract_obeys_snell(self):
        angle = math.radians(30)
        incoming = Vector3(math.sin(angle), -math.cos(angle), 0)
        eta = 1 / 1.5
        refracted = refract(incoming, Vector3(0, 1, 0), eta)
        sin_out = refracted.x / refracted.length()
        assert sin_out == pytest.approx(eta * math.sin(angle))
        assert refracted.length() == pytest.approx(1.0)


class TestRandomSampling:
    def test_points_lie_inside_unit_sphere(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_same_seed_same_points(self):
        import numpy as np

        a = [random_in_unit_sphere(np.random.default_rng(3)) for _ in range(3)]
        b = [random_in_unit_sphere(np.random.default_rng(3)) for _ in range(3)]
        assert a == b
