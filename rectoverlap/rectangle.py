"""
Oriented rectangles and the separating axis test between two of them.

A rectangle is built from its center, width, height and a counter-clockwise
rotation in degrees::

    a = Rectangle(0, 0, 4, 2, 30)
    b = Rectangle(3, 1, 2, 2, -10)
    a.overlapped(b)                  # True or False, same as b.overlapped(a)
    hit, axis = a.overlapped_with_axis(b)

When the rectangles are apart, ``axis`` is a unit direction onto which the
projections of the two rectangles do not intersect. Rectangles that only
touch along an edge or at a corner count as overlapping.

For two rectangles only the directions of their edges need to be tested,
two per rectangle, and a rectangle whose edges are parallel to the other's
adds nothing new.
"""
from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np

from .geometry import Axis, Point


class Rectangle:
    def __init__(self, x: float, y: float, width: float, height: float, rotation: float = 0.0):
        self._center = Point(x, y)
        self._width = width
        self._height = height
        self._rotation = rotation

        dw = width / 2
        dh = height / 2
        # bottom-left, bottom-right, top-right, top-left
        corners = np.array([[x - dw, y - dh],
                            [x + dw, y - dh],
                            [x + dw, y + dh],
                            [x - dw, y + dh]], dtype=np.float64)

        theta = math.radians(rotation)
        c = math.cos(theta)
        s = math.sin(theta)
        if rotation != 0:
            R = np.array([[c, -s], [s, c]])
            offset = np.array([[x, y]])
            corners = (corners - offset) @ R.T + offset
        corners.flags.writeable = False

        self._corners = corners
        self._vertices = tuple(Point(float(px), float(py)) for px, py in corners)
        self._direction = Axis.through(c, s)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def vertices(self) -> Tuple[Point, Point, Point, Point]:
        return self._vertices

    @property
    def corners(self) -> np.ndarray:
        """Read-only (4, 2) array of the vertices."""
        return self._corners

    @property
    def direction(self) -> Axis:
        """Unit direction of the line through the first edge."""
        return self._direction

    def __str__(self) -> str:
        return "Rectangle vertices: " + "   ".join(str(v) for v in self._vertices)

    def __repr__(self) -> str:
        return (f"Rectangle({self._center.x!r}, {self._center.y!r}, "
                f"{self._width!r}, {self._height!r}, {self._rotation!r})")

    def translated(self, dx: float, dy: float) -> Rectangle:
        center = self._center.translated(dx, dy)
        return Rectangle(center.x, center.y, self._width, self._height, self._rotation)

    def rotated(self, degrees: float, pivot: Optional[Point] = None) -> Rectangle:
        """Rotate the whole rectangle about pivot, its own center by default."""
        center = self._center if pivot is None else self._center.rotated(degrees, pivot)
        return Rectangle(center.x, center.y, self._width, self._height, self._rotation + degrees)

    def slope(self) -> Optional[float]:
        """
        Slope of the edge between the first two vertices.

        Returns None only when the x coordinates of the two vertices are
        exactly equal, i.e. for a zero-length edge or an exactly vertical one.
        A 90 degree rotation can leave a tiny nonzero run and give a very
        large slope instead.
        """
        p1, p2 = self._vertices[0], self._vertices[1]
        dx = p2.x - p1.x
        if dx == 0:
            return None
        return (p2.y - p1.y) / dx

    def candidate_axes(self, other: Rectangle) -> Tuple[Axis, ...]:
        """
        Axes to test against other: other's edge directions first, then ours.

        Our pair is left out when our edges are parallel or perpendicular to
        other's, as it would describe the same two lines.
        """
        d = other.direction
        axes = (d, d.perpendicular())
        own = self._direction
        if own.is_parallel(d) or own.is_perpendicular(d):
            return axes
        return axes + (own, own.perpendicular())

    def projection_interval(self, axis: Axis) -> Tuple[float, float]:
        """Smallest and largest projection of the vertices onto axis."""
        p = axis.project_all(self._corners)
        return float(np.min(p)), float(np.max(p))

    def find_separating_axis(self, other: Rectangle) -> Optional[Axis]:
        """
        Return the first candidate axis along which the two rectangles are
        apart, or None if they overlap.
        """
        for axis in self.candidate_axes(other):
            min_other, max_other = other.projection_interval(axis)
            min_self, max_self = self.projection_interval(axis)
            if min_self > max_other or min_other > max_self:
                return axis
        return None

    def overlapped(self, other: Rectangle) -> bool:
        return self.find_separating_axis(other) is None

    def overlapped_with_axis(self, other: Rectangle) -> Tuple[bool, Optional[Axis]]:
        axis = self.find_separating_axis(other)
        return axis is None, axis
