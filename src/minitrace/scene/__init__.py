"""Scene module for scene description and ray-scene queries.

This module handles scene representation and nearest-hit tracing:

Components:
    manager: Scene container holding primitives and point lights
    intersection: Nearest-hit tracing over the packed primitive arrays
    demo: Ready-made demo scenes

The scene is described in Python with Vec3 values and packed into a
Structure-of-Arrays layout (one row per primitive, tagged with its
PrimitiveKind) that is passed to the kernel explicitly.
"""

from .demo import (
    add_random_spheres,
    create_demo_scene,
    create_single_sphere_scene,
    create_two_sphere_scene,
)
from .intersection import (
    SceneHit,
    TraceResult,
    intersect_primitive,
    intersect_scene,
    primitive_normal,
    trace_ray,
)
from .manager import (
    PackedScene,
    PlaneInfo,
    PointLight,
    PrimitiveKind,
    Scene,
    SphereInfo,
)

__all__ = [
    # Manager module
    "Scene",
    "SphereInfo",
    "PlaneInfo",
    "PointLight",
    "PrimitiveKind",
    "PackedScene",
    # Intersection module
    "SceneHit",
    "TraceResult",
    "intersect_primitive",
    "intersect_scene",
    "primitive_normal",
    "trace_ray",
    # Demo module
    "create_single_sphere_scene",
    "create_two_sphere_scene",
    "create_demo_scene",
    "add_random_spheres",
]
