#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .canvas import Canvas


def fill_triangle(canvas: Canvas, p1, p2, p3, color):
    """
    Rasterizes a solid triangle onto the canvas, overwriting what is there.
    p1, p2, p3 are (x, y) tuples in dot coordinates.
    """
    # Sort vertices by Y
    if p1[1] > p2[1]: p1, p2 = p2, p1
    if p1[1] > p3[1]: p1, p3 = p3, p1
    if p2[1] > p3[1]: p2, p3 = p3, p2

    x1, y1 = p1[0], p1[1]
    x2, y2 = p2[0], p2[1]
    x3, y3 = p3[0], p3[1]

    # Scanlines through dot centres between the top and bottom vertex
    y_start = max(0, math.ceil(y1 - 0.5))
    y_end = min(canvas.h - 1, math.floor(y3 - 0.5))
    if y_start > y_end or y3 == y1:
        # Thinner than one dot row: still mark the row it sits on
        row = int(math.floor((y1 + y3) / 2))
        xs = (x1, x2, x3)
        canvas.fill_span(row, int(math.floor(min(xs))), int(math.floor(max(xs))), color)
        return

    long_dy = y3 - y1
    for y in range(y_start, y_end + 1):
        sy = y + 0.5
        xa = x1 + (x3 - x1) * (sy - y1) / long_dy
        if sy < y2:
            dy = y2 - y1
            xb = x1 + (x2 - x1) * (sy - y1) / dy if dy else x2
        else:
            dy = y3 - y2
            xb = x2 + (x3 - x2) * (sy - y2) / dy if dy else x2
        if xa > xb: xa, xb = xb, xa
        canvas.fill_span(y, int(math.floor(xa)), int(math.floor(xb)), color)


def fill_circle(canvas: Canvas, center, diameter: float, color):
    """Fills a disc of the given diameter (in dots) centred on (x, y)."""
    cx, cy = center[0], center[1]
    radius = diameter / 2.0
    if radius < 0.5:
        canvas.set_pixel(int(math.floor(cx)), int(math.floor(cy)), color)
        return

    y_start = max(0, math.ceil(cy - radius - 0.5))
    y_end = min(canvas.h - 1, math.floor(cy + radius - 0.5))
    for y in range(y_start, y_end + 1):
        dy = y + 0.5 - cy
        half = math.sqrt(max(0.0, radius * radius - dy * dy))
        canvas.fill_span(y, int(math.floor(cx - half)), int(math.floor(cx + half)), color)
