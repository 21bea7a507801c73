"""Immutable 3D vector value type for scene description.

Kernel code works on ``taichi.math.vec3``; this module provides the
host-side counterpart used to describe scenes, validate geometry and
inspect results in Python scope.

Example:
    >>> from src.minitrace.core.vector import Vec3
    >>> v = Vec3(3.0, 0.0, 4.0)
    >>> v.mag()
    5.0
    >>> v.normalize()
    Vec3(x=0.6, y=0.0, z=0.8)
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


class DegenerateGeometry(ValueError):
    """Raised when geometry cannot be used as given.

    Covers zero-length vectors passed to ``normalize``, spheres with a
    non-positive radius and planes with a zero normal.
    """


@dataclass(frozen=True)
class Vec3:
    """A three component vector.

    Every operation returns a new vector; instances are never mutated.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def of(cls, value: Vec3 | Iterable[float]) -> Vec3:
        """Coerce a Vec3 or a 3-element iterable into a Vec3.

        Raises:
            ValueError: If the iterable does not have exactly 3 elements.
        """
        if isinstance(value, Vec3):
            return value
        components = tuple(float(c) for c in value)
        if len(components) != 3:
            raise ValueError(f"Expected 3 components, got {len(components)}: {components}")
        return cls(*components)

    def add(self, other: Vec3) -> Vec3:
        """Return the component-wise sum."""
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec3) -> Vec3:
        """Return the component-wise difference."""
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, s: float) -> Vec3:
        """Return the vector multiplied by a scalar."""
        return Vec3(self.x * s, self.y * s, self.z * s)

    def mul(self, other: Vec3) -> Vec3:
        """Return the component-wise product (used to mix colors)."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def dot(self, other: Vec3) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def mag(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """Return a unit vector with the same direction.

        Precondition: the vector has a non-zero magnitude.

        Raises:
            DegenerateGeometry: If the vector has zero length.
        """
        m = self.mag()
        if m == 0.0:
            raise DegenerateGeometry("Cannot normalize a zero-length vector")
        return self.scale(1.0 / m)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Vec3) -> Vec3:
        return self.add(other)

    def __sub__(self, other: Vec3) -> Vec3:
        return self.sub(other)

    def __mul__(self, s: float) -> Vec3:
        return self.scale(s)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))
