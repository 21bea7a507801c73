"""Lambertian shading with a single point light.

Implements Lambert's cosine law for one point light:

    light_dir = normalize(light_position - point)
    color = light_color * (albedo / pi * intensity)
            * max(0, dot(normal, light_dir)) * base_color

where the final product with base_color is component-wise. The light is
not attenuated with distance and the albedo is a single scalar for every
surface (0.18 by default, a common mid-grey reflectance). Both are
simplifications, not a physical light model.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.minitrace.shading.lambertian import shade_lambertian
    >>> # Use within a Taichi kernel:
    >>> # color = shade_lambertian(base, normal, point, pos, light_color, 20.0, 0.18)
"""

import taichi as ti
import taichi.math as tm

from src.minitrace.core.ray import normalize

# Type alias for 3D vectors
vec3 = tm.vec3

# Fraction of incident light diffusely reflected by every surface
DEFAULT_ALBEDO = 0.18


@ti.func
def lambert_cosine(normal: vec3, point: vec3, light_position: vec3) -> ti.f32:
    """Compute max(0, dot(normal, light_dir)) for a point light.

    Args:
        normal: The unit surface normal at point.
        point: The shaded surface point (must differ from light_position).
        light_position: The light position.

    Returns:
        The clamped cosine between the normal and the direction to the light.
    """
    light_dir = normalize(light_position - point)
    return tm.max(0.0, tm.dot(normal, light_dir))


@ti.func
def shade_lambertian(
    base_color: vec3,
    normal: vec3,
    point: vec3,
    light_position: vec3,
    light_color: vec3,
    light_intensity: ti.f32,
    albedo: ti.f32,
) -> vec3:
    """Shade a surface point lit by one point light.

    Args:
        base_color: The primitive's base color, RGB in [0, 255].
        normal: The unit surface normal at point.
        point: The shaded surface point.
        light_position: The light position.
        light_color: The light color as an RGB multiplier.
        light_intensity: The light intensity.
        albedo: The diffuse reflectance.

    Returns:
        The shaded RGB color. Not clamped; see shading.color.
    """
    cosine = lambert_cosine(normal, point, light_position)
    return light_color * (albedo / tm.pi * light_intensity) * cosine * base_color
