#
# PROJECT: braille-turtle
# MODULE: braille_turtle/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .config import CanvasConfig
from .canvas import Canvas, PIXEL_MAP, render_cell
from .rasterizer import line_points
from .turtle import Turtle
