"""
Draw two rectangles and, when they are apart, their separating axis.
"""
import logging

import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)


def plot_rectangle(ax, rectangle, **kwargs):
    rect = rectangle.corners
    return ax.plot(rect[:, 0].tolist() + [rect[0, 0]], rect[:, 1].tolist() + [rect[0, 1]], **kwargs)


def plot_overlap(first, second, path=None):
    """
    Plot both rectangles on equal axes and return the figure.

    If the rectangles are apart the witness axis is drawn as a dashed line
    through the origin. The figure is written to path when one is given.
    """
    collide, axis = first.overlapped_with_axis(second)

    fig, ax = plt.subplots(figsize=(6, 6))
    plot_rectangle(ax, first, label="first")
    plot_rectangle(ax, second, label="second")

    if axis is not None:
        points = np.vstack([first.corners, second.corners])
        reach = float(np.max(np.abs(points))) or 1.0
        d = axis.direction.to_array() * reach
        ax.plot([-d[0], d[0]], [-d[1], d[1]], linestyle="--", color="gray",
                label=f"separating axis {axis}")

    ax.set_title(f"collide = {collide}")
    ax.set_aspect('equal')
    ax.legend(loc="best")

    if path is not None:
        fig.savefig(path)
        logger.info("saved plot to %s", path)
    return fig
