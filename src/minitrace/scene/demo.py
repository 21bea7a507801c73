"""Demo scenes from the ray tracing walkthrough.

Provides the scenes used while building up the renderer step by step:
- A single sphere in front of the camera
- Two overlapping spheres to show nearest-hit resolution
- Randomly placed spheres above a floor plane, lit by one point light

Random scenes take a seed so that a demo renders the same image every run.

Example:
    >>> from src.minitrace.scene.demo import create_demo_scene
    >>> scene = create_demo_scene(num_spheres=12, seed=7)
    >>> scene.summary()
    'Scene(12 spheres, 1 planes, 1 lights)'
"""

from __future__ import annotations

import numpy as np

from src.minitrace.scene.manager import Scene

# Floor plane one unit below the camera, facing up
FLOOR_POINT = (0.0, -1.0, 0.0)
FLOOR_NORMAL = (0.0, 1.0, 0.0)
FLOOR_COLOR = (20.0, 20.0, 20.0)

# Light to the upper left of the spheres
LIGHT_POSITION = (-2.0, 2.0, 1.0)
LIGHT_COLOR = (1.0, 1.0, 1.0)
LIGHT_INTENSITY = 20.0

# Random sphere radii are drawn from [MIN_RADIUS, 1)
MIN_RADIUS = 0.05


def create_single_sphere_scene() -> Scene:
    """Create a scene with one small golden sphere above the view axis."""
    scene = Scene()
    scene.add_sphere(center=(0.25, 1.0, -2.0), radius=0.25, color=(220.0, 180.0, 70.0))
    return scene


def create_two_sphere_scene() -> Scene:
    """Create a scene with a far sphere partly covered by a near one."""
    scene = Scene()
    scene.add_sphere(center=(0.5, 0.0, -4.0), radius=0.5, color=(180.0, 70.0, 230.0))
    scene.add_sphere(center=(-0.25, -0.1, -0.25), radius=0.33, color=(70.0, 130.0, 215.0))
    return scene


def add_random_spheres(
    scene: Scene,
    count: int,
    rng: np.random.Generator,
) -> list[int]:
    """Add randomly placed and colored spheres to a scene.

    Centers have x and y in [-1, 1) and z an integer in [-9, -1]; radii lie
    in [MIN_RADIUS, 1); colors are integer RGB in [0, 255).

    Args:
        scene: The scene to add to.
        count: Number of spheres.
        rng: NumPy random generator.

    Returns:
        The scene indices of the added spheres.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"Sphere count must be non-negative, got {count}")

    indices = []
    for _ in range(count):
        x, y = rng.uniform(-1.0, 1.0, size=2)
        z = -float(rng.integers(1, 10))
        radius = float(rng.uniform(MIN_RADIUS, 1.0))
        color = tuple(float(c) for c in rng.integers(0, 255, size=3))
        indices.append(scene.add_sphere(center=(x, y, z), radius=radius, color=color))
    return indices


def create_demo_scene(
    num_spheres: int = 12,
    seed: int | None = None,
    with_floor: bool = True,
    with_light: bool = True,
) -> Scene:
    """Create the full demo scene: random spheres, a floor and a light.

    Args:
        num_spheres: Number of random spheres.
        seed: Seed for the random generator.
        with_floor: Whether to add the floor plane.
        with_light: Whether to add the point light.

    Returns:
        The populated Scene.
    """
    rng = np.random.default_rng(seed)
    scene = Scene()
    add_random_spheres(scene, num_spheres, rng)
    if with_floor:
        scene.add_plane(point=FLOOR_POINT, normal=FLOOR_NORMAL, color=FLOOR_COLOR)
    if with_light:
        scene.add_light(position=LIGHT_POSITION, color=LIGHT_COLOR, intensity=LIGHT_INTENSITY)
    return scene
