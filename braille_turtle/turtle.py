#
# PROJECT: braille-turtle
# MODULE: braille_turtle/turtle.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .canvas import Canvas


def _round_pixel(v: float) -> int:
    """Nearest integer, halves away from zero, floored at 0."""
    r = math.floor(abs(v) + 0.5)
    if v < 0:
        r = -r
    return max(0, int(r))


class Turtle:
    """
    Pen-carrying cursor that draws on its own Canvas.

    Position is kept in floating-point pixel space and may wander into
    negative coordinates; only the drawn line endpoints are rounded and
    clamped onto the canvas. Heading is in degrees, 0 pointing along +x
    and positive turns (``right``) rotating toward +y, i.e. down the screen.
    """
    __slots__ = ('x', 'y', 'brush', 'rotation', 'canvas')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.brush = True        # Pen down
        self.rotation = 0.0      # Heading (degrees), never wrapped
        self.canvas = Canvas()

    def __repr__(self):
        pen = 'down' if self.brush else 'up'
        return f"Turtle(x={self.x:.2f}, y={self.y:.2f}, rotation={self.rotation:.2f}, pen={pen})"

    @property
    def position(self):
        return (self.x, self.y)

    # ── Canvas size ────────────────────────────────────────────────────
    def width(self, pixel_width: int) -> 'Turtle':
        """Set the declared canvas width in pixels. Returns self for chaining."""
        self.canvas.width = pixel_width // 2
        return self

    def height(self, pixel_height: int) -> 'Turtle':
        """Set the declared canvas height in pixels. Returns self for chaining."""
        self.canvas.height = pixel_height // 4
        return self

    def configure(self, config) -> 'Turtle':
        """Apply a CanvasConfig's size to the owned canvas."""
        return self.width(config.pixel_width).height(config.pixel_height)

    # ── Pen ────────────────────────────────────────────────────────────
    def up(self):
        self.brush = False

    def down(self):
        self.brush = True

    def toggle(self):
        self.brush = not self.brush

    # ── Heading ────────────────────────────────────────────────────────
    def right(self, angle: float):
        self.rotation += angle

    def left(self, angle: float):
        self.rotation -= angle

    # ── Motion ─────────────────────────────────────────────────────────
    def forward(self, dist: float):
        rad = math.radians(self.rotation)
        self.move(self.x + math.cos(rad) * dist, self.y + math.sin(rad) * dist)

    def back(self, dist: float):
        self.forward(-dist)

    def move(self, x: float, y: float):
        """
        Go to (x, y), tracing a line when the pen is down.

        Endpoints are rounded before clamping, so -0.4 lands on 0 and so
        does -3.0; the stored position keeps the exact target.
        """
        if self.brush:
            self.canvas.line(_round_pixel(self.x), _round_pixel(self.y),
                             _round_pixel(x), _round_pixel(y))
        self.x = float(x)
        self.y = float(y)

    def frame(self) -> str:
        return self.canvas.frame()
