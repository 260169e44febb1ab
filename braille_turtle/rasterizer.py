#
# PROJECT: braille-turtle
# MODULE: braille_turtle/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def line_points(x1: int, y1: int, x2: int, y2: int):
    """
    Rasterizes a segment with a symmetric DDA and returns the pixel list.

    Steps along the longer axis; the shorter axis advances by
    trunc(i * diff / steps). Both endpoints are included, so the result
    always holds max(|dx|, |dy|) + 1 points.
    """
    xdiff = abs(x1 - x2)
    ydiff = abs(y1 - y2)
    xdir = 1 if x1 <= x2 else -1
    ydir = 1 if y1 <= y2 else -1

    r = max(xdiff, ydiff)

    points = []
    for i in range(r + 1):
        x, y = x1, y1
        if ydiff:
            y += _trunc_div(i * ydiff, r) * ydir
        if xdiff:
            x += _trunc_div(i * xdiff, r) * xdir
        points.append((x, y))
    return points
