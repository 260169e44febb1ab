#
# PROJECT: braille-turtle
# MODULE: braille_turtle/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import sys

from .config import CanvasConfig
from .turtle import Turtle


def draw_polygon(turtle: Turtle, sides: int, length: float):
    for _ in range(sides):
        turtle.forward(length)
        turtle.right(360.0 / sides)


def draw_star(turtle: Turtle, sides: int, length: float):
    # Odd point counts close in one stroke by skipping every other vertex
    points = sides if sides % 2 else sides + 1
    for _ in range(points):
        turtle.forward(length)
        turtle.right(180.0 - 180.0 / points)


def draw_spiral(turtle: Turtle, sides: int, length: float):
    step = length / 40.0
    for i in range(1, 41):
        turtle.forward(step * i)
        turtle.right(360.0 / sides + 30.0)


FIGURES = {
    'square': lambda t, sides, length: draw_polygon(t, 4, length),
    'polygon': draw_polygon,
    'star': draw_star,
    'spiral': draw_spiral,
}


def parse_size(text: str) -> CanvasConfig:
    """Parse WIDTHxHEIGHT (pixels) into a CanvasConfig."""
    try:
        w, h = (int(v) for v in text.lower().split('x'))
        return CanvasConfig(pixel_width=w, pixel_height=h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT in pixels, got {text!r}")


def render_figure(figure: str, config: CanvasConfig, sides: int = 5, length: float = 0.0) -> str:
    """
    Draw ``figure`` centred on a canvas of ``config``'s size and return the frame.

    A zero ``length`` picks one that fits the canvas.
    """
    w, h = config.pixel_width, config.pixel_height
    if not length:
        length = max(4.0, min(w, h) * 0.4)
    turtle = Turtle(w / 2.0 - length / 2.0, h / 2.0 - length / 2.0).configure(config)
    if figure == 'spiral':
        turtle.up()
        turtle.move(w / 2.0, h / 2.0)
        turtle.down()
    FIGURES[figure](turtle, sides, length)
    return turtle.frame()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Draw a turtle figure with Braille characters",
    )
    parser.add_argument("figure", nargs='?', default='star', choices=sorted(FIGURES),
                        help="Figure to draw (default: star)")
    parser.add_argument("--size", type=parse_size, default=None,
                        help="Canvas size WIDTHxHEIGHT in pixels (default: terminal size)")
    parser.add_argument("--sides", type=int, default=5,
                        help="Sides or points for polygon, star and spiral (default: 5)")
    parser.add_argument("--length", type=float, default=0.0,
                        help="Edge length in pixels (default: fit the canvas)")
    args = parser.parse_args(argv)
    if args.sides < 3:
        parser.error("--sides must be at least 3")
    return args


def main(argv=None):
    args = parse_args(argv)
    config = args.size or CanvasConfig.detect_terminal()
    try:
        print(render_figure(args.figure, config, args.sides, args.length))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
