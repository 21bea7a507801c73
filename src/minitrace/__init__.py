"""Minimal Taichi-based ray tracing kernel.

This package renders a scene of spheres and planes into a flat RGBA byte
buffer, one primary ray per pixel, with:
- Pinhole camera ray generation with configurable field of view
- Analytic ray-sphere and ray-plane intersection
- Nearest-hit resolution over an ordered, mixed primitive list
- Flat, facing-ratio and single-point-light Lambertian shading

Subpackages:
    core: Vector value type, rays, frame buffer and the frame renderer
    geometry: Sphere and plane primitives
    camera: Pinhole camera ray generation
    scene: Scene container, nearest-hit tracer and demo scenes
    shading: Shading models and color packing
    preview: Display sinks (PNG export, Matplotlib preview)
"""

__version__ = "0.1.0"
