"""Scene container for primitives and lights.

This module provides the host-side scene description. A Scene holds an
ordered list of primitives (spheres and planes) and a list of point lights.
Scene order matters: when two primitives report the same hit distance, the
one added first wins.

Before rendering, the scene is packed into NumPy arrays laid out as a
Structure of Arrays, one row per primitive, tagged with a PrimitiveKind.
The arrays are handed to the kernel as explicit arguments; no scene data
lives in module-level fields.

Example:
    >>> from src.minitrace.scene.manager import Scene
    >>> scene = Scene()
    >>> scene.add_sphere(center=(0, 0, -2), radius=1.0, color=(220, 180, 70))
    0
    >>> scene.add_plane(point=(0, -1, 0), normal=(0, 1, 0), color=(80, 80, 80))
    1
    >>> scene.add_light(position=(-2, 2, 1), intensity=20.0)
    0
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Union

import numpy as np
import numpy.typing as npt

from src.minitrace.core.vector import DegenerateGeometry, Vec3

VectorLike = Union[Vec3, Iterable[float]]


class PrimitiveKind(IntEnum):
    """Tag identifying the shape stored in a packed primitive row.

    Used for primitive dispatch in the scene tracer.
    """

    SPHERE = 0
    PLANE = 1


@dataclass(frozen=True)
class SphereInfo:
    """A sphere in the scene.

    Attributes:
        center: The center of the sphere.
        radius: The radius of the sphere (positive).
        color: Base color as (R, G, B) in [0, 255].
    """

    center: Vec3
    radius: float
    color: Vec3

    kind = PrimitiveKind.SPHERE


@dataclass(frozen=True)
class PlaneInfo:
    """An infinite plane in the scene.

    Attributes:
        point: A point on the plane.
        normal: The plane normal. Expected to be unit length (not enforced).
        color: Base color as (R, G, B) in [0, 255].
    """

    point: Vec3
    normal: Vec3
    color: Vec3

    kind = PrimitiveKind.PLANE


Primitive = Union[SphereInfo, PlaneInfo]


@dataclass(frozen=True)
class PointLight:
    """A point light.

    The light is not attenuated with distance; intensity is a flat multiplier.

    Attributes:
        position: The light position in world space.
        color: Light color as an RGB multiplier, typically in [0, 1].
        intensity: Scalar intensity (positive).
    """

    position: Vec3
    color: Vec3
    intensity: float


class PackedScene(NamedTuple):
    """Scene primitives packed for the kernel.

    Every array has at least one row so that empty scenes can still be
    passed to Taichi; only the first `count` rows are meaningful.

    Attributes:
        kinds: PrimitiveKind per primitive, shape (n,), int32.
        positions: Sphere center or plane point, shape (n, 3), float32.
        normals: Plane normal (zero for spheres), shape (n, 3), float32.
        radii: Sphere radius (zero for planes), shape (n,), float32.
        colors: Base color, shape (n, 3), float32.
        count: Number of primitives.
    """

    kinds: npt.NDArray[np.int32]
    positions: npt.NDArray[np.float32]
    normals: npt.NDArray[np.float32]
    radii: npt.NDArray[np.float32]
    colors: npt.NDArray[np.float32]
    count: int


class Scene:
    """An ordered collection of primitives plus point lights.

    Primitives are immutable once added. The scene itself only grows; build
    a new Scene for a different setup.

    Attributes:
        primitives: Primitives in scene order.
        lights: Point lights in insertion order.
    """

    def __init__(self) -> None:
        """Initialize an empty scene."""
        self.primitives: list[Primitive] = []
        self.lights: list[PointLight] = []

    def __len__(self) -> int:
        return len(self.primitives)

    def add_sphere(
        self,
        center: VectorLike,
        radius: float,
        color: VectorLike = (255.0, 255.0, 255.0),
    ) -> int:
        """Add a sphere to the scene.

        Args:
            center: The center point of the sphere.
            radius: The radius of the sphere.
            color: Base color as (R, G, B) in [0, 255].

        Returns:
            The index of the sphere in scene order.

        Raises:
            DegenerateGeometry: If the radius is not positive.
        """
        if not radius > 0.0:
            raise DegenerateGeometry(f"Sphere radius must be positive, got {radius}")
        sphere = SphereInfo(center=Vec3.of(center), radius=float(radius), color=Vec3.of(color))
        self.primitives.append(sphere)
        return len(self.primitives) - 1

    def add_plane(
        self,
        point: VectorLike,
        normal: VectorLike,
        color: VectorLike = (255.0, 255.0, 255.0),
    ) -> int:
        """Add an infinite plane to the scene.

        Args:
            point: Any point on the plane.
            normal: The plane normal, expected to be unit length.
            color: Base color as (R, G, B) in [0, 255].

        Returns:
            The index of the plane in scene order.

        Raises:
            DegenerateGeometry: If the normal is the zero vector.
        """
        normal_vec = Vec3.of(normal)
        if normal_vec.mag() == 0.0:
            raise DegenerateGeometry("Plane normal must not be the zero vector")
        plane = PlaneInfo(point=Vec3.of(point), normal=normal_vec, color=Vec3.of(color))
        self.primitives.append(plane)
        return len(self.primitives) - 1

    def add_light(
        self,
        position: VectorLike,
        color: VectorLike = (1.0, 1.0, 1.0),
        intensity: float = 1.0,
    ) -> int:
        """Add a point light to the scene.

        Only the first light contributes to Lambertian shading.

        Args:
            position: The light position.
            color: The light color as an RGB multiplier.
            intensity: The light intensity.

        Returns:
            The index of the light.

        Raises:
            ValueError: If the intensity is not positive.
        """
        if not intensity > 0.0:
            raise ValueError(f"Light intensity must be positive, got {intensity}")
        light = PointLight(
            position=Vec3.of(position), color=Vec3.of(color), intensity=float(intensity)
        )
        self.lights.append(light)
        return len(self.lights) - 1

    def get_sphere_count(self) -> int:
        """Get the number of spheres in the scene."""
        return sum(1 for p in self.primitives if p.kind == PrimitiveKind.SPHERE)

    def get_plane_count(self) -> int:
        """Get the number of planes in the scene."""
        return sum(1 for p in self.primitives if p.kind == PrimitiveKind.PLANE)

    def get_primary_light(self) -> PointLight | None:
        """Get the light used for shading, or None if the scene has no lights."""
        return self.lights[0] if self.lights else None

    def pack(self) -> PackedScene:
        """Pack the primitives into arrays for the kernel.

        Returns:
            A PackedScene snapshot. Later changes to the scene do not affect
            an already packed copy.
        """
        count = len(self.primitives)
        rows = max(count, 1)

        kinds = np.zeros(rows, dtype=np.int32)
        positions = np.zeros((rows, 3), dtype=np.float32)
        normals = np.zeros((rows, 3), dtype=np.float32)
        radii = np.zeros(rows, dtype=np.float32)
        colors = np.zeros((rows, 3), dtype=np.float32)

        for i, primitive in enumerate(self.primitives):
            kinds[i] = int(primitive.kind)
            colors[i] = primitive.color.as_tuple()
            if isinstance(primitive, SphereInfo):
                positions[i] = primitive.center.as_tuple()
                radii[i] = primitive.radius
            else:
                positions[i] = primitive.point.as_tuple()
                normals[i] = primitive.normal.as_tuple()

        return PackedScene(kinds, positions, normals, radii, colors, count)

    def summary(self) -> str:
        """One-line description of the scene contents."""
        return (
            f"Scene({self.get_sphere_count()} spheres, "
            f"{self.get_plane_count()} planes, {len(self.lights)} lights)"
        )
