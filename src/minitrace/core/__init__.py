"""Core rendering module.

This module contains the fundamental building blocks of the kernel:

Components:
    vector: Immutable Vec3 value type and the DegenerateGeometry error
    ray: Ray data structure and kernel-side vector helpers
    framebuffer: Flat RGBA frame buffer handed to display sinks
    renderer: Per-pixel frame kernel and the render() entry point

Rendering traces exactly one primary ray per pixel through the center of
the pixel; there is no sampling, accumulation or recursion.
"""

from .framebuffer import BYTES_PER_PIXEL, FrameBuffer
from .ray import Ray, dot, length, make_ray, normalize, ray_at, vec3
from .vector import DegenerateGeometry, Vec3

# Note: renderer is NOT imported here to avoid circular imports.
# Import directly from src.minitrace.core.renderer when needed:
#   from src.minitrace.core.renderer import RenderSettings, render

__all__ = [
    "Vec3",
    "DegenerateGeometry",
    "Ray",
    "ray_at",
    "make_ray",
    "vec3",
    "dot",
    "length",
    "normalize",
    "FrameBuffer",
    "BYTES_PER_PIXEL",
]
