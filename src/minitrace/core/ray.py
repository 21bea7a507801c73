"""Ray data structure and vector utilities for the rendering kernel.

This module provides the Ray dataclass and the small set of vector helpers
the kernel needs. All functions are Taichi functions and can only be called
from within Taichi kernels.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> @ti.kernel
    ... def demo() -> ti.f32:
    ...     ray = make_ray(vec3(0.0, 0.0, 1.0), vec3(0.0, 0.0, -2.0))
    ...     return ray_at(ray, 3.0).z  # -2.0, the direction was normalized
"""

import taichi as ti
import taichi.math as tm

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@ti.dataclass
class Ray:
    """A ray with an origin point and a unit direction vector.

    Attributes:
        origin: The starting point of the ray (vec3).
        direction: The direction of the ray (vec3). Always unit length when
            the ray is built with make_ray().
    """

    origin: vec3
    direction: vec3


@ti.func
def ray_at(ray: Ray, t: ti.f32) -> vec3:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.origin + t * ray.direction


@ti.func
def make_ray(origin: vec3, direction: vec3) -> Ray:
    """Create a ray from an origin and a direction.

    The direction is normalized here, so every ray in the kernel carries a
    unit direction. The direction must not be the zero vector.

    Args:
        origin: The starting point of the ray.
        direction: The direction vector (any non-zero length).

    Returns:
        A new Ray instance with a unit direction.
    """
    return Ray(origin=origin, direction=tm.normalize(direction))


@ti.func
def dot(a: vec3, b: vec3) -> ti.f32:
    """Compute the dot product of two vectors."""
    return tm.dot(a, b)


@ti.func
def length(v: vec3) -> ti.f32:
    """Compute the length (magnitude) of a vector."""
    return tm.sqrt(tm.dot(v, v))


@ti.func
def normalize(v: vec3) -> vec3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector. Must have non-zero length; a zero vector
            produces NaN components.

    Returns:
        A unit vector in the same direction as v.
    """
    return v / length(v)
