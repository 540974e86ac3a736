"""
Compiled overlap test for many rectangle pairs at once.

Rectangles are passed as arrays of corners, shape (n, 4, 2), in cyclic
order. Pair i of the first array is tested against pair i of the second.
"""
import logging

import numpy as np
from numba import njit

logger = logging.getLogger(__name__)


def corners_array(rectangles):
    """Stack the corners of a sequence of Rectangles into an (n, 4, 2) array."""
    if len(rectangles) == 0:
        return np.empty((0, 4, 2), dtype=np.float64)
    return np.stack([r.corners for r in rectangles]).astype(np.float64)


@njit
def _max(a, n):
    loc_max = a[0]
    for i in range(1, n):
        loc_max = max(loc_max, a[i])
    return loc_max


@njit
def _min(a, n):
    loc_min = a[0]
    for i in range(1, n):
        loc_min = min(loc_min, a[i])
    return loc_min


@njit
def _edge_axes(R, axes):
    # two edges are enough, the other two are parallel to them
    axes[0, 0] = R[1, 0] - R[0, 0]
    axes[0, 1] = R[1, 1] - R[0, 1]
    axes[1, 0] = R[2, 0] - R[1, 0]
    axes[1, 1] = R[2, 1] - R[1, 1]
    # a zero-length edge takes the normal of the other edge
    if axes[0, 0] == 0.0 and axes[0, 1] == 0.0:
        axes[0, 0] = axes[1, 1]
        axes[0, 1] = -axes[1, 0]
    if axes[1, 0] == 0.0 and axes[1, 1] == 0.0:
        axes[1, 0] = -axes[0, 1]
        axes[1, 1] = axes[0, 0]
    # both edges empty: the rectangle is a point
    if axes[0, 0] == 0.0 and axes[0, 1] == 0.0:
        axes[0, 0] = 1.0
        axes[1, 1] = 1.0


@njit
def _separated_along_edges(R, R1, R2, axes, p1, p2):
    _edge_axes(R, axes)
    for i in range(2):
        norm0 = axes[i, 0]
        norm1 = axes[i, 1]
        for k in range(4):
            p1[k] = norm0 * R1[k, 0] + norm1 * R1[k, 1]
            p2[k] = norm0 * R2[k, 0] + norm1 * R2[k, 1]

        min1, max1 = _min(p1, 4), _max(p1, 4)
        min2, max2 = _min(p2, 4), _max(p2, 4)
        if max1 < min2 or max2 < min1:
            return True
    return False


@njit
def _convex_collide(R1, R2, axes, p1, p2):
    if _separated_along_edges(R1, R1, R2, axes, p1, p2):
        return False
    if _separated_along_edges(R2, R1, R2, axes, p1, p2):
        return False
    return True


@njit
def _overlap_pairs(first, second, out):
    axes = np.empty((2, 2), dtype=np.float64)
    p1 = np.empty(4, dtype=np.float64)
    p2 = np.empty(4, dtype=np.float64)
    for i in range(first.shape[0]):
        out[i] = _convex_collide(first[i], second[i], axes, p1, p2)


def overlap_pairs(first, second):
    """
    Return a boolean array telling for each i whether first[i] and second[i]
    overlap. Touching rectangles overlap.
    """
    first = np.ascontiguousarray(first, dtype=np.float64)
    second = np.ascontiguousarray(second, dtype=np.float64)
    if first.ndim != 3 or first.shape[1:] != (4, 2):
        raise ValueError(f"expected corners of shape (n, 4, 2), got {first.shape}")
    if first.shape != second.shape:
        raise ValueError(f"shape mismatch: {first.shape} vs {second.shape}")

    out = np.empty(first.shape[0], dtype=np.bool_)
    logger.debug("testing %d rectangle pairs", first.shape[0])
    _overlap_pairs(first, second, out)
    return out
