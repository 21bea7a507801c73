"""Facing-ratio shading.

A crude, non-physical shading proxy: surfaces facing the viewer keep their
base color, surfaces seen edge-on fade to black. The ratio is the clamped
cosine between the surface normal and the view direction (the reversed ray
direction), boosted non-linearly by its own sine:

    ratio = max(0, dot(normal, -ray_direction))
    ratio = ratio * sin(ratio)
    color = base_color * ratio
"""

import taichi as ti
import taichi.math as tm

# Type alias for 3D vectors
vec3 = tm.vec3


@ti.func
def facing_ratio(normal: vec3, ray_direction: vec3) -> ti.f32:
    """Compute the boosted facing ratio.

    Args:
        normal: The unit surface normal at the hit point.
        ray_direction: The unit direction of the incoming ray.

    Returns:
        ratio * sin(ratio) with ratio = max(0, dot(normal, -ray_direction)).
    """
    ratio = tm.max(0.0, tm.dot(normal, -ray_direction))
    return ratio * tm.sin(ratio)


@ti.func
def shade_facing_ratio(base_color: vec3, normal: vec3, ray_direction: vec3) -> vec3:
    """Scale the base color by the facing ratio."""
    return base_color * facing_ratio(normal, ray_direction)
