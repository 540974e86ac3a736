"""Overlap test for rotated rectangles using the separating axis theorem."""

from .geometry import Axis, Point
from .rectangle import Rectangle

__all__ = ["Axis", "Point", "Rectangle"]
__version__ = "0.1.0"
