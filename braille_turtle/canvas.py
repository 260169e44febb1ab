#
# PROJECT: braille-turtle
# MODULE: braille_turtle/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .rasterizer import line_points

BRAILLE_OFFSET = 0x2800

# Braille dot mapping for a 2x4 cell, indexed [y % 4][x % 2]
#  1 4
#  2 5
#  3 6
#  7 8
PIXEL_MAP = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)


def render_cell(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not 0 <= mask <= 0xFF:
        raise ValueError(f"cell mask out of range: {mask!r}")
    if not mask:
        return ' '
    return chr(BRAILLE_OFFSET + mask)


class Canvas:
    """
    Sparse pixel surface rendered with Braille characters.

    Pixels live on a virtual grid twice as wide and four times as tall as
    the character grid. Only touched cells are stored, keyed by
    (cell_col, cell_row). ``width``/``height`` are the declared size in
    cells; they set the minimum rendered extent, and drawing past them
    grows the frame.
    """
    __slots__ = ('cells', 'width', 'height')

    def __init__(self, pixel_width: int = 0, pixel_height: int = 0):
        self.cells = {}
        self.width = pixel_width // 2
        self.height = pixel_height // 4

    @classmethod
    def from_config(cls, config) -> 'Canvas':
        """Build a canvas sized from a CanvasConfig."""
        return cls(config.pixel_width, config.pixel_height)

    def __repr__(self):
        return f"Canvas(width={self.width}, height={self.height}, cells={len(self.cells)})"

    def __eq__(self, other):
        if not isinstance(other, Canvas):
            return NotImplemented
        return (self.width == other.width and self.height == other.height
                and self._lit_cells() == other._lit_cells())

    def _lit_cells(self):
        return {k: v for k, v in self.cells.items() if v}

    def copy(self) -> 'Canvas':
        clone = Canvas()
        clone.width, clone.height = self.width, self.height
        clone.cells = dict(self.cells)
        return clone

    def clear(self):
        """Drop every pixel. The declared size is kept."""
        self.cells.clear()

    # Negative pixels are off the grid and silently dropped
    def set(self, x: int, y: int):
        if x < 0 or y < 0: return
        key = (x >> 1, y >> 2)
        self.cells[key] = self.cells.get(key, 0) | PIXEL_MAP[y & 3][x & 1]

    def unset(self, x: int, y: int):
        if x < 0 or y < 0: return
        key = (x >> 1, y >> 2)
        self.cells[key] = self.cells.get(key, 0) & ~PIXEL_MAP[y & 3][x & 1] & 0xFF

    def toggle(self, x: int, y: int):
        if x < 0 or y < 0: return
        key = (x >> 1, y >> 2)
        self.cells[key] = self.cells.get(key, 0) ^ PIXEL_MAP[y & 3][x & 1]

    def get(self, x: int, y: int) -> bool:
        if x < 0 or y < 0:
            return False
        mask = self.cells.get((x >> 1, y >> 2), 0)
        return bool(mask & PIXEL_MAP[y & 3][x & 1])

    def rows(self):
        """
        Yields the rendered rows top to bottom.

        The extent covers the declared size and every stored cell,
        whichever is larger on each axis.
        """
        n_cols = max([self.width] + [col + 1 for col, _ in self.cells])
        n_rows = max([self.height] + [row + 1 for _, row in self.cells])
        cells = self.cells
        for y in range(n_rows):
            yield ''.join(render_cell(cells.get((x, y), 0)) for x in range(n_cols))

    def frame(self) -> str:
        return '\n'.join(self.rows())

    def line_vec(self, x1: int, y1: int, x2: int, y2: int):
        return line_points(x1, y1, x2, y2)

    def line(self, x1: int, y1: int, x2: int, y2: int):
        for x, y in line_points(x1, y1, x2, y2):
            self.set(x, y)
