"""
Points and projection axes in the plane.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class Point:
    """A point in 2D space."""
    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def rotated(self, degrees: float, pivot: Optional[Point] = None) -> Point:
        """Rotate counter-clockwise about pivot (the origin by default)."""
        px, py = (0.0, 0.0) if pivot is None else (pivot.x, pivot.y)
        c = math.cos(math.radians(degrees))
        s = math.sin(math.radians(degrees))
        x = self.x - px
        y = self.y - py
        return Point(c * x - s * y + px, s * x + c * y + py)


@dataclass(frozen=True)
class Axis:
    """
    A direction onto which points are projected.

    Build axes with ``Axis.through(x, y)``, which scales the direction to unit
    length so that ``project`` returns the exact scalar projection. The zero
    vector has no direction and is kept as is: every point projects to 0 on it.
    """
    direction: Point

    @classmethod
    def through(cls, x: float, y: float) -> Axis:
        mag = math.hypot(x, y)
        if mag == 0.0:
            return cls(Point(0.0, 0.0))
        return cls(Point(x / mag, y / mag))

    @property
    def x(self) -> float:
        return self.direction.x

    @property
    def y(self) -> float:
        return self.direction.y

    def __str__(self) -> str:
        return str(self.direction)

    def project(self, point: Point) -> float:
        return self.x * point.x + self.y * point.y

    def project_all(self, points: np.ndarray) -> np.ndarray:
        """Project each row of an (n, 2) array onto this axis."""
        return points @ self.direction.to_array()

    def perpendicular(self) -> Axis:
        # 0.0 - y keeps the axis-aligned perpendicular free of a -0.0 component
        return Axis(Point(0.0 - self.y, self.x))

    def is_parallel(self, other: Axis) -> bool:
        return self.x * other.y - self.y * other.x == 0.0

    def is_perpendicular(self, other: Axis) -> bool:
        return self.x * other.x + self.y * other.y == 0.0
