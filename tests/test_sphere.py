"""Unit tests for ray-sphere intersection.

Tests cover:
- Ray hitting sphere from outside
- Ray missing sphere
- Ray starting inside sphere (smaller root is behind the origin)
- Sphere entirely behind the ray
- Ray tangent to sphere
- Outward surface normal
"""

import pytest
import taichi as ti

from src.minitrace.geometry.sphere import T_MISS


def _run_hit(origin, direction, center, radius):
    """Intersect one ray with one sphere and return (hit, t)."""
    from src.minitrace.core.ray import make_ray, vec3
    from src.minitrace.geometry.sphere import Sphere, hit_sphere

    hit = ti.field(dtype=ti.i32, shape=())
    t_val = ti.field(dtype=ti.f32, shape=())

    @ti.kernel
    def test_kernel(o: ti.math.vec3, d: ti.math.vec3, c: ti.math.vec3, r: ti.f32):
        ray = make_ray(o, d)
        result = hit_sphere(ray, Sphere(center=c, radius=r))
        hit[None] = result.hit
        t_val[None] = result.t

    test_kernel(vec3(*origin), vec3(*direction), vec3(*center), radius)
    return hit[None], t_val[None]


class TestSphereIntersection:
    """Tests for hit_sphere."""

    def test_direct_hit(self):
        """Test ray hitting a sphere head-on from outside."""
        hit, t = _run_hit((0.0, 0.0, 1.0), (0.0, 0.0, -1.0), (0.0, 0.0, -2.0), 1.0)
        assert hit == 1
        # Front of the sphere is at z = -1
        assert abs(t - 2.0) < 1e-5

    def test_miss(self):
        """Test ray passing beside the sphere."""
        hit, t = _run_hit((0.0, 0.0, 1.0), (0.0, 1.0, 0.0), (0.0, 0.0, -2.0), 1.0)
        assert hit == 0
        assert t == pytest.approx(T_MISS, rel=1e-6)

    def test_offset_ray_misses(self):
        hit, _ = _run_hit((2.0, 0.0, 5.0), (0.0, 0.0, -1.0), (0.0, 0.0, 0.0), 1.0)
        assert hit == 0

    def test_origin_inside_reports_negative_root(self):
        """Test that the smaller root is reported even behind the origin."""
        hit, t = _run_hit((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 0.0, 0.0), 1.0)
        assert hit == 1
        assert abs(t + 1.0) < 1e-5

    def test_sphere_behind_ray_reports_negative_t(self):
        hit, t = _run_hit((0.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, 0.0, -5.0), 1.0)
        assert hit == 1
        assert t < 0.0
        assert abs(t + 6.0) < 1e-4

    def test_tangent_ray(self):
        """Test a ray grazing the sphere: zero discriminant, single root."""
        hit, t = _run_hit((1.0, 0.0, 5.0), (0.0, 0.0, -1.0), (0.0, 0.0, 0.0), 1.0)
        assert hit == 1
        assert abs(t - 5.0) < 1e-5

    def test_hit_distance_scales_with_direction_normalization(self):
        """Test that an unnormalized input direction yields the same t."""
        _, t_unit = _run_hit((0.0, 0.0, 5.0), (0.0, 0.0, -1.0), (0.0, 0.0, 0.0), 2.0)
        _, t_long = _run_hit((0.0, 0.0, 5.0), (0.0, 0.0, -10.0), (0.0, 0.0, 0.0), 2.0)
        assert abs(t_unit - 3.0) < 1e-5
        assert abs(t_unit - t_long) < 1e-5

    def test_far_sphere_is_stable(self):
        """Test a distant sphere, where cancellation would hurt the naive formula."""
        hit, t = _run_hit((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 0.0, -1000.0), 1.0)
        assert hit == 1
        assert abs(t - 999.0) < 1e-2


class TestSphereNormal:
    """Tests for sphere_normal."""

    def test_normal_points_outward(self):
        from src.minitrace.geometry.sphere import Sphere, sphere_normal, vec3

        normal = ti.field(dtype=ti.math.vec3, shape=())

        @ti.kernel
        def test_kernel():
            sphere = Sphere(center=vec3(1.0, 1.0, 1.0), radius=2.0)
            normal[None] = sphere_normal(sphere, vec3(1.0, 3.0, 1.0))

        test_kernel()
        n = normal[None]
        assert abs(n[0]) < 1e-6
        assert abs(n[1] - 1.0) < 1e-6
        assert abs(n[2]) < 1e-6

    def test_normal_is_unit_length(self):
        from src.minitrace.geometry.sphere import Sphere, sphere_normal, vec3

        length = ti.field(dtype=ti.f32, shape=())

        @ti.kernel
        def test_kernel():
            sphere = Sphere(center=vec3(0.0, 0.0, -2.0), radius=0.5)
            n = sphere_normal(sphere, vec3(0.3, 0.4, -2.0))
            length[None] = n.norm()

        test_kernel()
        assert abs(length[None] - 1.0) < 1e-6
