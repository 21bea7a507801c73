"""Frame renderer: one primary ray per pixel into an RGBA frame buffer.

For every pixel (x, y) the kernel
1. generates the camera ray through the pixel center,
2. finds the nearest hit in the scene,
3. shades the hit with the selected shading model, or uses the
   background color on a miss,
4. clamps the color and writes R, G, B, A=255 at (y * width + x) * 4.

Pixels are independent: each reads the packed scene and writes its own
4 bytes, so the outer pixel loop runs as a parallel Taichi range loop.
Rendering is deterministic; identical inputs give identical bytes.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.minitrace.camera.pinhole import PinholeCamera
    >>> from src.minitrace.core.renderer import RenderSettings, render
    >>> from src.minitrace.scene.manager import Scene
    >>> from src.minitrace.shading import ShadingModel
    >>>
    >>> scene = Scene()
    >>> scene.add_sphere((0, 0, -2), 1.0, color=(220, 180, 70))
    0
    >>> settings = RenderSettings(64, 64, shading=ShadingModel.FLAT)
    >>> frame = render(scene, PinholeCamera(), settings)
    >>> frame.pixel(32, 32)
    (220, 180, 70, 255)
"""

import logging
import time
from dataclasses import dataclass

import numpy as np
import taichi as ti
import taichi.math as tm

from src.minitrace.camera.pinhole import PinholeCamera, get_ray
from src.minitrace.core.framebuffer import BYTES_PER_PIXEL, FrameBuffer
from src.minitrace.core.vector import Vec3
from src.minitrace.scene.intersection import intersect_scene, load_vec3
from src.minitrace.scene.manager import Scene
from src.minitrace.shading import ShadingModel
from src.minitrace.shading.color import to_rgba8
from src.minitrace.shading.facing_ratio import shade_facing_ratio
from src.minitrace.shading.lambertian import DEFAULT_ALBEDO, shade_lambertian

logger = logging.getLogger(__name__)

# Type alias for 3D vectors
vec3 = tm.vec3

# Color of pixels whose ray hits nothing
BACKGROUND_COLOR = (60.0, 40.0, 190.0)


@dataclass(frozen=True)
class RenderSettings:
    """Configuration for rendering one frame.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        shading: Shading model (enum, name or integer value).
        background: RGB color in [0, 255] for rays that hit nothing.
        albedo: Diffuse reflectance used by Lambertian shading.
        t_min: Hits closer than this distance along the ray are ignored.
    """

    width: int
    height: int
    shading: ShadingModel = ShadingModel.FACING_RATIO
    background: tuple[float, float, float] = BACKGROUND_COLOR
    albedo: float = DEFAULT_ALBEDO
    t_min: float = 0.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.albedo < 0.0:
            raise ValueError(f"Albedo must be non-negative, got {self.albedo}")
        object.__setattr__(self, "shading", ShadingModel.parse(self.shading))
        object.__setattr__(self, "background", Vec3.of(self.background).as_tuple())


@ti.func
def _shade_ray_direction(direction: vec3) -> vec3:
    """Map a unit ray direction from [-1, 1] to a color in [0, 255]."""
    return (vec3(1.0, 1.0, 1.0) + direction) * 0.5 * 255.0


@ti.kernel
def _render_kernel(
    out: ti.types.ndarray(),
    width: ti.i32,
    height: ti.i32,
    eye: tm.vec3,
    fov_scale: ti.f32,
    kinds: ti.types.ndarray(),
    positions: ti.types.ndarray(),
    normals: ti.types.ndarray(),
    radii: ti.types.ndarray(),
    colors: ti.types.ndarray(),
    num_primitives: ti.i32,
    light_position: tm.vec3,
    light_color: tm.vec3,
    light_intensity: ti.f32,
    num_lights: ti.i32,
    shading: ti.i32,
    background: tm.vec3,
    albedo: ti.f32,
    t_min: ti.f32,
):
    """Render every pixel of the frame into out, shape (height, width, 4)."""
    for y, x in ti.ndrange(height, width):
        ray = get_ray(x, y, width, height, eye, fov_scale)
        color = background

        if shading == int(ShadingModel.RAY_DIRECTION):
            color = _shade_ray_direction(ray.direction)
        else:
            rec = intersect_scene(ray, kinds, positions, normals, radii, num_primitives, t_min)
            if rec.hit == 1:
                base = load_vec3(colors, rec.index)
                if shading == int(ShadingModel.FLAT):
                    color = base
                elif shading == int(ShadingModel.FACING_RATIO):
                    color = shade_facing_ratio(base, rec.normal, ray.direction)
                elif shading == int(ShadingModel.LAMBERTIAN):
                    # Without a light every surface is unlit
                    color = vec3(0.0, 0.0, 0.0)
                    if num_lights > 0:
                        color = shade_lambertian(
                            base,
                            rec.normal,
                            rec.point,
                            light_position,
                            light_color,
                            light_intensity,
                            albedo,
                        )

        rgba = to_rgba8(color)
        for k in ti.static(range(BYTES_PER_PIXEL)):
            out[y, x, k] = ti.cast(rgba[k], ti.u8)


def render(
    scene: Scene,
    camera: PinholeCamera,
    settings: RenderSettings,
) -> FrameBuffer:
    """Render the scene as seen by the camera.

    The scene is packed into fresh arrays for this call, so the render sees
    a consistent snapshot of it.

    Args:
        scene: The primitives and lights to render.
        camera: The pinhole camera.
        settings: Resolution, shading model and background.

    Returns:
        A new FrameBuffer of settings.width x settings.height pixels.
    """
    packed = scene.pack()
    light = scene.get_primary_light()
    if light is None:
        light_position, light_color, light_intensity, num_lights = Vec3(), Vec3(), 0.0, 0
    else:
        light_position, light_color = light.position, light.color
        light_intensity, num_lights = light.intensity, len(scene.lights)

    logger.debug(
        "Rendering %s at %dx%d with %s shading",
        scene.summary(),
        settings.width,
        settings.height,
        settings.shading.name,
    )
    start = time.perf_counter()

    pixels = np.zeros((settings.height, settings.width, BYTES_PER_PIXEL), dtype=np.uint8)
    _render_kernel(
        pixels,
        settings.width,
        settings.height,
        vec3(*camera.eye),
        camera.fov_scale,
        packed.kinds,
        packed.positions,
        packed.normals,
        packed.radii,
        packed.colors,
        packed.count,
        vec3(*light_position),
        vec3(*light_color),
        light_intensity,
        num_lights,
        int(settings.shading),
        vec3(*settings.background),
        settings.albedo,
        settings.t_min,
    )

    logger.debug("Rendered frame in %.3fs", time.perf_counter() - start)
    return FrameBuffer(pixels)
