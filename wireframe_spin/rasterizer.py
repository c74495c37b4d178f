#
# PROJECT: wireframe-spin
# MODULE: wireframe_spin/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


def clip_segment(x1, y1, x2, y2, xmin, ymin, xmax, ymax):
    """
    Liang-Barsky clip of a 2D segment against an axis-aligned rectangle.
    Returns the clipped (x1, y1, x2, y2) or None when nothing is inside.
    Non-finite input is rejected outright.
    """
    if not all(math.isfinite(v) for v in (x1, y1, x2, y2)):
        return None

    dx = x2 - x1
    dy = y2 - y1
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x1 - xmin), (dx, xmax - x1),
                 (-dy, y1 - ymin), (dy, ymax - y1)):
        if p == 0:
            if q < 0:
                return None  # parallel and outside
            continue
        t = q / p
        if p < 0:
            if t > t1: return None
            if t > t0: t0 = t
        else:
            if t < t0: return None
            if t < t1: t1 = t

    return (x1 + t0 * dx, y1 + t0 * dy, x1 + t1 * dx, y1 + t1 * dy)


def draw_line_dda(grid, p1, p2):
    """
    Draws a line into the pixel grid using the DDA algorithm.
    p1, p2 are (x, y) in grid pixels; the segment is clipped to the grid first
    so far off-screen endpoints never cost more than the visible part.
    """
    clipped = clip_segment(p1[0], p1[1], p2[0], p2[1],
                           0, 0, grid.w - 1, grid.h - 1)
    if clipped is None:
        return
    x1, y1, x2, y2 = (int(round(v)) for v in clipped)

    dx = x2 - x1
    dy = y2 - y1
    step = max(abs(dx), abs(dy))
    if step == 0:
        grid.set_pixel(x1, y1)
        return

    x_inc = dx / step
    y_inc = dy / step
    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        grid.set_pixel(int(round(cx)), int(round(cy)))
        cx += x_inc; cy += y_inc


def fill_rect(grid, x0, y0, x1, y1):
    """Fill the pixel rectangle [x0, x1) x [y0, y1), clipped to the grid."""
    if not all(math.isfinite(v) for v in (x0, y0, x1, y1)):
        return
    sx, ex = max(0, int(x0)), min(grid.w, int(math.ceil(x1)))
    sy, ey = max(0, int(y0)), min(grid.h, int(math.ceil(y1)))
    for y in range(sy, ey):
        for x in range(sx, ex):
            grid.set_pixel(x, y)
