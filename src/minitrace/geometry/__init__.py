"""Geometry module for shape primitives.

This module provides the two primitive shapes of the kernel:

Components:
    sphere: Sphere primitive with ray-sphere intersection
    plane: Infinite plane primitive with ray-plane intersection

Every primitive exposes the same two Taichi functions:
    hit_<shape>(ray, shape) -> HitResult(hit, t)
    <shape>_normal(shape, point) -> vec3

Misses report t = T_MISS so that nearest-hit selection can compare
parameters without consulting the hit flag.
"""

from .plane import PARALLEL_EPSILON, Plane, hit_plane, plane_normal
from .sphere import T_MISS, HitResult, Sphere, hit_sphere, sphere_normal

__all__ = [
    "Sphere",
    "HitResult",
    "hit_sphere",
    "sphere_normal",
    "T_MISS",
    "Plane",
    "hit_plane",
    "plane_normal",
    "PARALLEL_EPSILON",
]
