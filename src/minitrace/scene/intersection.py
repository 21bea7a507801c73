"""Scene-level nearest-hit ray intersection.

This module tests a ray against every primitive of a packed scene and
returns the closest hit. Primitives are tested in scene order with no early
exit; a primitive only replaces the current best when its distance is
strictly smaller, so on equal distances the earlier primitive wins.

Hits closer than t_min are rejected here. Spheres report their smaller root
even when it lies behind the ray origin, so with the default t_min = 0.0 a
sphere behind the camera is never visible.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.minitrace.scene.manager import Scene
    >>> from src.minitrace.scene.intersection import trace_ray
    >>> scene = Scene()
    >>> scene.add_sphere((0, 0, -2), 1.0)
    0
    >>> trace_ray(scene, (0, 0, 1), (0, 0, -1))
    TraceResult(hit=True, t=2.0, index=0)
"""

from typing import NamedTuple

import numpy as np
import taichi as ti
import taichi.math as tm

from src.minitrace.core.ray import Ray, make_ray, ray_at
from src.minitrace.core.vector import Vec3
from src.minitrace.geometry.plane import Plane, hit_plane, plane_normal
from src.minitrace.geometry.sphere import T_MISS, HitResult, Sphere, hit_sphere, sphere_normal
from src.minitrace.scene.manager import PrimitiveKind, Scene, VectorLike

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@ti.dataclass
class SceneHit:
    """Record of the nearest ray-scene intersection.

    Attributes:
        hit: 1 if any primitive was hit, 0 otherwise.
        t: The distance along the ray of the nearest hit, T_MISS on a miss.
        point: The intersection point. Only valid if hit == 1.
        normal: The surface normal of the hit primitive at point.
            Only valid if hit == 1.
        index: Scene index of the hit primitive, -1 on a miss.
    """

    hit: ti.i32
    t: ti.f32
    point: vec3
    normal: vec3
    index: ti.i32


@ti.func
def load_vec3(arr: ti.template(), i: ti.i32) -> vec3:
    """Read row i of an (n, 3) array as a vec3."""
    return vec3(arr[i, 0], arr[i, 1], arr[i, 2])


@ti.func
def intersect_primitive(
    ray: Ray,
    kind: ti.i32,
    position: vec3,
    normal: vec3,
    radius: ti.f32,
) -> HitResult:
    """Dispatch a ray intersection to the primitive's shape.

    Args:
        ray: The ray to test.
        kind: The PrimitiveKind of the primitive.
        position: Sphere center or plane point.
        normal: Plane normal (ignored for spheres).
        radius: Sphere radius (ignored for planes).

    Returns:
        The HitResult of the shape-specific test, a miss for unknown kinds.
    """
    result = HitResult(hit=0, t=T_MISS)
    if kind == int(PrimitiveKind.SPHERE):
        result = hit_sphere(ray, Sphere(center=position, radius=radius))
    elif kind == int(PrimitiveKind.PLANE):
        result = hit_plane(ray, Plane(point=position, normal=normal))
    return result


@ti.func
def primitive_normal(
    kind: ti.i32,
    position: vec3,
    normal: vec3,
    radius: ti.f32,
    point: vec3,
) -> vec3:
    """Compute the surface normal of a primitive at a point on it."""
    result = vec3(0.0, 0.0, 0.0)
    if kind == int(PrimitiveKind.SPHERE):
        result = sphere_normal(Sphere(center=position, radius=radius), point)
    elif kind == int(PrimitiveKind.PLANE):
        result = plane_normal(Plane(point=position, normal=normal), point)
    return result


@ti.func
def intersect_scene(
    ray: Ray,
    kinds: ti.template(),
    positions: ti.template(),
    normals: ti.template(),
    radii: ti.template(),
    num_primitives: ti.i32,
    t_min: ti.f32,
) -> SceneHit:
    """Find the nearest intersection of a ray with the scene.

    Args:
        ray: The ray to trace.
        kinds: PrimitiveKind per primitive.
        positions: Sphere centers / plane points, shape (n, 3).
        normals: Plane normals, shape (n, 3).
        radii: Sphere radii, shape (n,).
        num_primitives: Number of valid rows in the arrays.
        t_min: Hits with t < t_min are ignored.

    Returns:
        A SceneHit for the nearest primitive, or a miss record.
    """
    closest_t = T_MISS
    closest_index = -1

    for i in range(num_primitives):
        rec = intersect_primitive(
            ray, kinds[i], load_vec3(positions, i), load_vec3(normals, i), radii[i]
        )
        if rec.hit == 1 and rec.t >= t_min and rec.t < closest_t:
            closest_t = rec.t
            closest_index = i

    result = SceneHit(
        hit=0,
        t=T_MISS,
        point=vec3(0.0, 0.0, 0.0),
        normal=vec3(0.0, 0.0, 0.0),
        index=-1,
    )

    if closest_index >= 0:
        point = ray_at(ray, closest_t)
        n = primitive_normal(
            kinds[closest_index],
            load_vec3(positions, closest_index),
            load_vec3(normals, closest_index),
            radii[closest_index],
            point,
        )
        result = SceneHit(hit=1, t=closest_t, point=point, normal=n, index=closest_index)

    return result


class TraceResult(NamedTuple):
    """Result of trace_ray().

    Attributes:
        hit: Whether any primitive was hit.
        t: Distance to the nearest hit, inf on a miss.
        index: Scene index of the hit primitive, None on a miss.
    """

    hit: bool
    t: float
    index: int | None


@ti.kernel
def _trace_kernel(
    origin: tm.vec3,
    direction: tm.vec3,
    kinds: ti.types.ndarray(),
    positions: ti.types.ndarray(),
    normals: ti.types.ndarray(),
    radii: ti.types.ndarray(),
    num_primitives: ti.i32,
    t_min: ti.f32,
    out_t: ti.types.ndarray(),
    out_index: ti.types.ndarray(),
):
    # Single-iteration outer loop keeps the primitive loop serial
    for _ in range(1):
        ray = make_ray(origin, direction)
        rec = intersect_scene(ray, kinds, positions, normals, radii, num_primitives, t_min)
        out_t[0] = rec.t
        out_index[0] = rec.index


def trace_ray(
    scene: Scene,
    origin: VectorLike,
    direction: VectorLike,
    t_min: float = 0.0,
) -> TraceResult:
    """Trace a single ray through the scene from Python scope.

    Useful for testing and debugging; rendering traces rays inside the
    frame kernel.

    Args:
        scene: The scene to trace against.
        origin: Ray origin.
        direction: Ray direction (normalized before tracing).
        t_min: Hits with t < t_min are ignored.

    Returns:
        A TraceResult for the nearest hit.
    """
    direction_vec = Vec3.of(direction).normalize()
    origin_vec = Vec3.of(origin)
    packed = scene.pack()

    out_t = np.zeros(1, dtype=np.float32)
    out_index = np.zeros(1, dtype=np.int32)
    _trace_kernel(
        vec3(*origin_vec),
        vec3(*direction_vec),
        packed.kinds,
        packed.positions,
        packed.normals,
        packed.radii,
        packed.count,
        t_min,
        out_t,
        out_index,
    )

    index = int(out_index[0])
    if index < 0:
        return TraceResult(hit=False, t=float("inf"), index=None)
    return TraceResult(hit=True, t=float(out_t[0]), index=index)
