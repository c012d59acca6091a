"""Two-dimensional vectors and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Operand = Union["Vector2D", float, int]


@dataclass
class Vector2D:
    """A mutable 2D vector with element-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_angle(cls, angle_rad: float) -> "Vector2D":
        """Unit vector pointing at ``angle_rad`` radians."""
        return cls(math.cos(angle_rad), math.sin(angle_rad))

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> "Vector2D":
        """Return a unit-length copy; the zero vector stays zero."""
        length = self.magnitude()
        if length > 0.0:
            return Vector2D(self.x / length, self.y / length)
        return Vector2D(self.x, self.y)

    def negative_reciprocal(self) -> "Vector2D":
        """The vector rotated a quarter turn counter-clockwise."""
        return Vector2D(-self.y, self.x)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2D") -> float:
        return self.x * other.y - self.y * other.x

    def angle_between(self, other: "Vector2D") -> float:
        return math.atan2(self.cross(other), self.dot(other))

    @staticmethod
    def _components(other: Operand) -> tuple[float, float]:
        if isinstance(other, Vector2D):
            return other.x, other.y
        if isinstance(other, (int, float)):
            return float(other), float(other)
        raise TypeError(f"unsupported operand: {other!r}")

    def __add__(self, other: Operand) -> "Vector2D":
        ox, oy = self._components(other)
        return Vector2D(self.x + ox, self.y + oy)

    def __sub__(self, other: Operand) -> "Vector2D":
        ox, oy = self._components(other)
        return Vector2D(self.x - ox, self.y - oy)

    def __mul__(self, other: Operand) -> "Vector2D":
        ox, oy = self._components(other)
        return Vector2D(self.x * ox, self.y * oy)

    def __truediv__(self, other: Operand) -> "Vector2D":
        ox, oy = self._components(other)
        return Vector2D(self.x / ox, self.y / oy)

    def __iadd__(self, other: Operand) -> "Vector2D":
        ox, oy = self._components(other)
        self.x += ox
        self.y += oy
        return self

    def __isub__(self, other: Operand) -> "Vector2D":
        ox, oy = self._components(other)
        self.x -= ox
        self.y -= oy
        return self

    def __imul__(self, other: Operand) -> "Vector2D":
        ox, oy = self._components(other)
        self.x *= ox
        self.y *= oy
        return self

    def __itruediv__(self, other: Operand) -> "Vector2D":
        ox, oy = self._components(other)
        self.x /= ox
        self.y /= oy
        return self


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0