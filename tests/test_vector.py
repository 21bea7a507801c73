"""Unit tests for the host-side Vec3 value type."""

import math

import pytest

from src.minitrace.core.vector import DegenerateGeometry, Vec3


class TestVec3Arithmetic:
    """Tests for component-wise operations."""

    def test_add_and_sub(self):
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(4.0, 5.0, 6.0)
        assert a.add(b) == Vec3(5.0, 7.0, 9.0)
        assert b.sub(a) == Vec3(3.0, 3.0, 3.0)
        assert a + b == a.add(b)
        assert b - a == b.sub(a)

    def test_scale(self):
        assert Vec3(1.0, -2.0, 0.5).scale(2.0) == Vec3(2.0, -4.0, 1.0)
        assert 2.0 * Vec3(1.0, 1.0, 1.0) == Vec3(2.0, 2.0, 2.0)
        assert Vec3(1.0, 1.0, 1.0) * 3.0 == Vec3(3.0, 3.0, 3.0)

    def test_mul_is_component_wise(self):
        assert Vec3(1.0, 2.0, 3.0).mul(Vec3(2.0, 0.5, 0.0)) == Vec3(2.0, 1.0, 0.0)

    def test_dot(self):
        assert Vec3(1.0, 2.0, 3.0).dot(Vec3(4.0, -5.0, 6.0)) == 12.0
        assert Vec3(1.0, 0.0, 0.0).dot(Vec3(0.0, 1.0, 0.0)) == 0.0

    def test_neg(self):
        assert -Vec3(1.0, -2.0, 3.0) == Vec3(-1.0, 2.0, -3.0)

    def test_operations_return_new_values(self):
        """Test that operands are left unchanged."""
        a = Vec3(1.0, 2.0, 3.0)
        a.add(Vec3(1.0, 1.0, 1.0))
        a.scale(10.0)
        assert a == Vec3(1.0, 2.0, 3.0)

    def test_frozen(self):
        v = Vec3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0


class TestVec3Normalize:
    """Tests for magnitude and normalization."""

    def test_mag(self):
        assert Vec3(3.0, 0.0, 4.0).mag() == pytest.approx(5.0)
        assert Vec3().mag() == 0.0

    def test_normalize(self):
        n = Vec3(3.0, 0.0, 4.0).normalize()
        assert n.x == pytest.approx(0.6)
        assert n.y == pytest.approx(0.0)
        assert n.z == pytest.approx(0.8)
        assert n.mag() == pytest.approx(1.0)

    def test_normalize_arbitrary_vector_is_unit(self):
        n = Vec3(-7.5, 0.25, 13.0).normalize()
        assert math.isclose(n.mag(), 1.0, rel_tol=1e-12)

    def test_normalize_zero_vector_raises(self):
        with pytest.raises(DegenerateGeometry):
            Vec3(0.0, 0.0, 0.0).normalize()

    def test_degenerate_geometry_is_value_error(self):
        assert issubclass(DegenerateGeometry, ValueError)


class TestVec3Conversion:
    """Tests for coercion helpers."""

    def test_of_tuple(self):
        assert Vec3.of((1, 2, 3)) == Vec3(1.0, 2.0, 3.0)

    def test_of_vec3_is_identity(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert Vec3.of(v) is v

    def test_of_wrong_length_raises(self):
        with pytest.raises(ValueError, match="Expected 3 components"):
            Vec3.of((1.0, 2.0))

    def test_iter_and_as_tuple(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert tuple(v) == (1.0, 2.0, 3.0)
        assert v.as_tuple() == (1.0, 2.0, 3.0)
