"""Pinhole camera model for perspective projection ray generation.

The camera sits at a fixed eye point and looks down the -z axis; there is
no camera-to-world transform. Each pixel (x, y) maps to one primary ray
through the center of the pixel:

1. Normalized device coordinates:
       ndc_x = (x + 0.5) / width,  ndc_y = (y + 0.5) / height
2. Screen space in [-1, 1], y flipped because raster rows grow downward:
       sx = 2 * ndc_x - 1,  sy = 1 - 2 * ndc_y
3. Aspect ratio correction:
       sx *= width / height
4. Field of view scale:
       scale = tan(fov / 2),  sx *= scale,  sy *= scale
5. Direction from the eye through the image-plane point (sx, sy, -1):
       direction = normalize((sx, sy, -1) - eye)

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.minitrace.camera.pinhole import PinholeCamera, camera_ray
    >>> camera = PinholeCamera(fov=90.0)
    >>> origin, direction = camera_ray(camera, 32, 32, 64, 64)
"""

import math
from dataclasses import dataclass

import numpy as np
import taichi as ti
import taichi.math as tm

from src.minitrace.core.ray import Ray, make_ray, vec3
from src.minitrace.core.vector import Vec3


@dataclass(frozen=True)
class PinholeCamera:
    """Configuration for the axis-aligned pinhole camera.

    Attributes:
        fov: Field of view in degrees, applied to the vertical extent of the
            image (the horizontal extent is widened by the aspect ratio).
            Must lie strictly between 0 and 180.
        eye: Camera position in world space (x, y, z).
    """

    fov: float = 90.0
    eye: tuple[float, float, float] = (0.0, 0.0, 1.0)

    def __post_init__(self) -> None:
        if not 0.0 < self.fov < 180.0:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {self.fov}")
        object.__setattr__(self, "eye", Vec3.of(self.eye).as_tuple())

    @property
    def fov_scale(self) -> float:
        """tan(fov / 2), the screen-space scale for the field of view."""
        return math.tan(math.radians(self.fov) / 2.0)


@ti.func
def get_ray(
    x: ti.i32,
    y: ti.i32,
    width: ti.i32,
    height: ti.i32,
    eye: vec3,
    fov_scale: ti.f32,
) -> Ray:
    """Generate the primary ray through the center of pixel (x, y).

    This function is designed to be called from within Taichi kernels.

    Args:
        x: Pixel column, 0 = left.
        y: Pixel row, 0 = top.
        width: Image width in pixels.
        height: Image height in pixels.
        eye: Camera position.
        fov_scale: tan(fov / 2), see PinholeCamera.fov_scale.

    Returns:
        A Ray starting at the eye with a unit direction.
    """
    w = ti.cast(width, ti.f32)
    h = ti.cast(height, ti.f32)

    ndc_x = (ti.cast(x, ti.f32) + 0.5) / w
    ndc_y = (ti.cast(y, ti.f32) + 0.5) / h

    screen_x = (2.0 * ndc_x - 1.0) * (w / h) * fov_scale
    screen_y = (1.0 - 2.0 * ndc_y) * fov_scale

    return make_ray(eye, vec3(screen_x, screen_y, -1.0) - eye)


@ti.kernel
def _camera_ray_kernel(
    x: ti.i32,
    y: ti.i32,
    width: ti.i32,
    height: ti.i32,
    eye: tm.vec3,
    fov_scale: ti.f32,
    out: ti.types.ndarray(),
):
    ray = get_ray(x, y, width, height, eye, fov_scale)
    for k in ti.static(range(3)):
        out[0, k] = ray.origin[k]
        out[1, k] = ray.direction[k]


def camera_ray(
    camera: PinholeCamera,
    x: int,
    y: int,
    width: int,
    height: int,
) -> tuple[Vec3, Vec3]:
    """Generate the primary ray for one pixel from Python scope.

    Useful for inspecting the camera mapping; rendering calls get_ray()
    directly inside the frame kernel.

    Args:
        camera: The camera configuration.
        x: Pixel column in [0, width).
        y: Pixel row in [0, height).
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Tuple of (origin, direction) as Vec3 values.

    Raises:
        ValueError: If the pixel lies outside the image.
    """
    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(f"Pixel ({x}, {y}) is outside a {width}x{height} image")

    out = np.zeros((2, 3), dtype=np.float32)
    _camera_ray_kernel(x, y, width, height, vec3(*camera.eye), camera.fov_scale, out)
    return Vec3(*map(float, out[0])), Vec3(*map(float, out[1]))
