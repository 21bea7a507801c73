"""Camera module for primary ray generation.

Components:
    pinhole: Axis-aligned pinhole (perspective) camera

Camera responsibilities:
    - Map raster pixel coordinates to screen space (pixel centers)
    - Correct for the image aspect ratio
    - Scale by the field of view
    - Build a unit-direction ray from the eye point

Ray generation runs inside the frame kernel, one ray per pixel.
"""

from .pinhole import PinholeCamera, camera_ray, get_ray

__all__ = [
    "PinholeCamera",
    "get_ray",
    "camera_ray",
]
