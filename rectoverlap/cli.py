"""
Command line driver.

Usage:
    rectoverlap --first 0 0 2 2 0 --second 10 0 2 2 0 --axis
    rectoverlap --scene scene.json --plot scene.png
    python -m rectoverlap --scene scene.json
"""

import argparse
import logging
import sys

from .config import ConfigError, RectangleSpec, SceneConfig
from .plotting import plot_overlap

logger = logging.getLogger(__name__)

RECT_FIELDS = ("X", "Y", "W", "H", "R")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rectoverlap",
        description="Check whether two rotated rectangles overlap",
    )
    parser.add_argument(
        "--first",
        nargs=5,
        type=float,
        metavar=RECT_FIELDS,
        help="First rectangle: center x, center y, width, height, rotation in degrees",
    )
    parser.add_argument(
        "--second",
        nargs=5,
        type=float,
        metavar=RECT_FIELDS,
        help="Second rectangle, same fields as --first",
    )
    parser.add_argument(
        "--scene",
        help="JSON file with a 'rectangles' list of two entries",
    )
    parser.add_argument(
        "--axis",
        action="store_true",
        help="Also print the separating axis when the rectangles are apart",
    )
    parser.add_argument(
        "--plot",
        metavar="PATH",
        help="Save a drawing of both rectangles to PATH",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def load_scene(parser, args):
    if args.scene:
        if args.first or args.second:
            parser.error("--scene cannot be combined with --first/--second")
        try:
            return SceneConfig.from_config_file(args.scene)
        except (FileNotFoundError, ConfigError) as e:
            logger.debug("could not load scene: %s", e)
            parser.error(str(e))

    if not (args.first and args.second):
        parser.error("either --scene or both --first and --second are required")
    return SceneConfig(RectangleSpec(*args.first), RectangleSpec(*args.second))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    first, second = load_scene(parser, args).build()
    logger.debug("first: %s", first)
    logger.debug("second: %s", second)

    overlapped, axis = first.overlapped_with_axis(second)
    print(f"overlapped: {overlapped}")
    if args.axis and axis is not None:
        print(f"separating axis: {axis}")

    if args.plot:
        plot_overlap(first, second, args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
