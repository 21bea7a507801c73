"""Infinite plane primitive with ray-plane intersection.

A plane is given by a point po on it and a normal n. Any point p on the
plane satisfies dot(p - po, n) = 0; substituting the ray o + d*t gives

    t = dot(po - o, n) / dot(d, n)

When dot(d, n) is close to zero the ray runs parallel to the plane and is
reported as a miss instead of dividing by a vanishing denominator. Only
intersections with t >= 0 are accepted.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.minitrace.geometry.plane import Plane, hit_plane
    >>> # Floor at y = -1 facing up
    >>> floor = Plane(point=ti.math.vec3(0, -1, 0), normal=ti.math.vec3(0, 1, 0))
    >>> # Use hit_plane within a Taichi kernel
"""

import taichi as ti
import taichi.math as tm

from src.minitrace.core.ray import Ray
from src.minitrace.geometry.sphere import T_MISS, HitResult

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3

# Below this |dot(direction, normal)| a ray counts as parallel to the plane
PARALLEL_EPSILON = 1e-6


@ti.dataclass
class Plane:
    """An infinite plane.

    Attributes:
        point: Any point lying on the plane (vec3).
        normal: The plane normal (vec3). Expected to be unit length;
            this is not enforced.
    """

    point: vec3
    normal: vec3


@ti.func
def hit_plane(ray: Ray, plane: Plane) -> HitResult:
    """Test for ray-plane intersection.

    Args:
        ray: The ray to test (unit direction).
        plane: The plane to test against.

    Returns:
        A HitResult. Near-parallel rays and intersections behind the ray
        origin (t < 0) are misses.
    """
    denom = tm.dot(ray.direction, plane.normal)

    did_hit = 0
    hit_t = T_MISS

    if ti.abs(denom) >= PARALLEL_EPSILON:
        t = tm.dot(plane.point - ray.origin, plane.normal) / denom
        if t >= 0.0:
            did_hit = 1
            hit_t = t

    return HitResult(hit=did_hit, t=hit_t)


@ti.func
def plane_normal(plane: Plane, point: vec3) -> vec3:
    """Return the plane normal, which is the same at every point."""
    return plane.normal
