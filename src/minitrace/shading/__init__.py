"""Shading module for turning hits into pixel colors.

Components:
    facing_ratio: View-dependent facing-ratio shading
    lambertian: Single point-light Lambertian shading
    color: Channel clamping and RGBA8 packing

Shading models are interchangeable policies selected per render:
    FLAT: the primitive's base color, no lighting
    FACING_RATIO: base color scaled by the boosted facing ratio
    LAMBERTIAN: Lambert's cosine law with the scene's first point light
    RAY_DIRECTION: debug gradient of the camera ray direction, ignores the scene

All shading functions are Taichi functions; results are clamped into
[0, 255] before being written to the frame buffer.
"""

from enum import IntEnum

from .color import CHANNEL_MAX, OPAQUE_ALPHA, clamp_channel, clamp_color, to_rgba8
from .facing_ratio import facing_ratio, shade_facing_ratio
from .lambertian import DEFAULT_ALBEDO, lambert_cosine, shade_lambertian


class ShadingModel(IntEnum):
    """Enumeration of supported shading models.

    Used for shading dispatch in the frame kernel.
    """

    FLAT = 0
    FACING_RATIO = 1
    LAMBERTIAN = 2
    RAY_DIRECTION = 3

    @classmethod
    def parse(cls, value: "ShadingModel | str | int") -> "ShadingModel":
        """Look up a shading model by enum value, name or integer.

        Names are case-insensitive and accept dashes, e.g. "facing-ratio".

        Raises:
            ValueError: If the value names no shading model.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_")
            if key in cls.__members__:
                return cls[key]
            raise ValueError(f"Unknown shading model: {value}")
        return cls(value)


__all__ = [
    "ShadingModel",
    "facing_ratio",
    "shade_facing_ratio",
    "DEFAULT_ALBEDO",
    "lambert_cosine",
    "shade_lambertian",
    "CHANNEL_MAX",
    "OPAQUE_ALPHA",
    "clamp_channel",
    "clamp_color",
    "to_rgba8",
]
