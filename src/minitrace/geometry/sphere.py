"""Sphere primitive with ray-sphere intersection.

The intersection solves the quadratic

    a*t^2 + b*t + c = 0

with, for oc = origin - center:

    a = dot(direction, direction)
    b = 2 * dot(oc, direction)
    c = dot(oc, oc) - radius^2

The sign of the discriminant b^2 - 4ac decides between a miss, a tangent
hit and two crossings. When there are two roots the algebraically smaller
one is reported, even if it is negative; rejecting hits behind the ray
origin is left to the scene tracer.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.minitrace.geometry.sphere import Sphere, hit_sphere
    >>> sphere = Sphere(center=ti.math.vec3(0, 0, -1), radius=0.5)
    >>> # Use hit_sphere within a Taichi kernel
"""

import taichi as ti
import taichi.math as tm

from src.minitrace.core.ray import Ray, normalize

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3

# Parameter reported for rays that miss a primitive. Finite so that it
# survives f32 arithmetic unchanged; larger than any renderable distance.
T_MISS = 1e30


@ti.dataclass
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere (vec3).
        radius: The radius of the sphere (positive float).
    """

    center: vec3
    radius: ti.f32


@ti.dataclass
class HitResult:
    """Result of intersecting a ray with a single primitive.

    Attributes:
        hit: 1 if the ray intersects the primitive, 0 otherwise.
        t: The parameter along the ray of the reported intersection,
            or T_MISS when hit == 0.
    """

    hit: ti.i32
    t: ti.f32


@ti.func
def _solve_quadratic_robust(a: ti.f32, b: ti.f32, c: ti.f32, sqrt_d: ti.f32):
    """Solve a*t^2 + b*t + c = 0 for a positive discriminant.

    Uses q = -(b + sign(b) * sqrt(d)) / 2 so that the two roots q/a and c/q
    are computed without subtracting nearly equal quantities.

    Returns:
        Tuple of (t0, t1) where t0 <= t1.
    """
    sign_b = ti.select(b < 0.0, -1.0, 1.0)
    q = -0.5 * (b + sign_b * sqrt_d)

    t0 = 0.0
    t1 = 0.0

    if ti.abs(q) < 1e-10:
        # Fall back to the textbook formula when q vanishes
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
    else:
        t0 = q / a
        t1 = c / q

    if t0 > t1:
        temp = t0
        t0 = t1
        t1 = temp

    return t0, t1


@ti.func
def hit_sphere(ray: Ray, sphere: Sphere) -> HitResult:
    """Test for ray-sphere intersection.

    Args:
        ray: The ray to test (unit direction).
        sphere: The sphere to test against.

    Returns:
        A HitResult. When the discriminant is zero the single root -b/(2a)
        is reported; when positive, the smaller of the two roots.
    """
    oc = ray.origin - sphere.center

    a = tm.dot(ray.direction, ray.direction)
    b = 2.0 * tm.dot(oc, ray.direction)
    c = tm.dot(oc, oc) - sphere.radius * sphere.radius

    discriminant = b * b - 4.0 * a * c

    did_hit = 0
    hit_t = T_MISS

    if discriminant == 0.0:
        did_hit = 1
        hit_t = -b / (2.0 * a)
    elif discriminant > 0.0:
        t0, _ = _solve_quadratic_robust(a, b, c, ti.sqrt(discriminant))
        did_hit = 1
        hit_t = t0

    return HitResult(hit=did_hit, t=hit_t)


@ti.func
def sphere_normal(sphere: Sphere, point: vec3) -> vec3:
    """Compute the outward unit normal of a sphere at a surface point.

    Args:
        sphere: The sphere.
        point: A point on the sphere surface (must differ from the center).

    Returns:
        normalize(point - center).
    """
    return normalize(point - sphere.center)
