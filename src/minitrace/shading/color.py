"""Conversion of shaded colors into RGBA8 pixels.

Shading works on float RGB in the [0, 255] range. Before a color reaches
the frame buffer every channel is sanitised (NaN becomes 0), clamped into
[0, 255] and truncated to an integer, so out-of-range values saturate
instead of wrapping around. Alpha is always fully opaque.
"""

import taichi as ti
import taichi.math as tm

# Type alias for 3D vectors
vec3 = tm.vec3

CHANNEL_MAX = 255.0
OPAQUE_ALPHA = 255


@ti.func
def clamp_channel(value: ti.f32) -> ti.f32:
    """Clamp one color channel into [0, 255], mapping NaN to 0."""
    result = value
    if tm.isnan(value):
        result = 0.0
    return tm.clamp(result, 0.0, CHANNEL_MAX)


@ti.func
def clamp_color(color: vec3) -> vec3:
    """Clamp every channel of an RGB color into [0, 255]."""
    return vec3(clamp_channel(color.x), clamp_channel(color.y), clamp_channel(color.z))


@ti.func
def to_rgba8(color: vec3) -> ti.types.vector(4, ti.i32):
    """Convert a float RGB color into integer RGBA in [0, 255].

    Channels are clamped and then truncated toward zero; alpha is 255.
    """
    c = clamp_color(color)
    return ti.Vector(
        [ti.cast(c.x, ti.i32), ti.cast(c.y, ti.i32), ti.cast(c.z, ti.i32), OPAQUE_ALPHA],
        dt=ti.i32,
    )
