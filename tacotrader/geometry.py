"""Small 2D vector and transform types."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / length, self.y / length)

    def rotate(self, other: Vec2) -> Vec2:
        """Rotate ``other`` by the angle of this vector, scaling by its length."""
        return Vec2(
            self.x * other.x - self.y * other.y,
            self.y * other.x + self.x * other.y,
        )

    def to_angle(self) -> float:
        return math.atan2(self.y, self.x)

    @classmethod
    def from_angle(cls, angle: float) -> Vec2:
        return cls(math.cos(angle), math.sin(angle))


ZERO = Vec2(0.0, 0.0)


@dataclass
class Transform:
    """Position, z-rotation and scale of a 2D object."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    rotation: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    @xy.setter
    def xy(self, value: Vec2) -> None:
        self.x = value.x
        self.y = value.y

    def rotate_z(self, angle: float) -> None:
        self.rotation += angle