import pytest

from wireframe_spin.canvas import (PixelGrid, TerminalCanvas, render_cell_ascii,
                                   render_cell_braille)
from wireframe_spin.config import RenderConfig
from wireframe_spin.math_utils import ScreenPoint
from wireframe_spin.rasterizer import clip_segment, draw_line_dda, fill_rect

from conftest import FakeWindow


def lit(grid):
    return {(x, y) for y in range(grid.h) for x in range(grid.w)
            if grid.grid[y >> 2][x >> 1] & (1 << ((y & 3) + (x & 1) * 4))}


def test_cell_rendering():
    assert render_cell_braille(0) == ' '
    assert render_cell_braille(0xFF) == '⣿'
    assert render_cell_braille(0x01) == '⠁'
    assert render_cell_ascii(0) == ' '
    assert render_cell_ascii(0b11) == ':'
    assert render_cell_ascii(0xFF) == '%'


def test_clip_segment():
    assert clip_segment(1, 1, 5, 5, 0, 0, 9, 9) == (1, 1, 5, 5)
    assert clip_segment(-10, 5, 20, 5, 0, 0, 9, 9) == pytest.approx((0, 5, 9, 5))
    assert clip_segment(-10, -10, -1, -1, 0, 0, 9, 9) is None
    assert clip_segment(0, float('inf'), 1, 1, 0, 0, 9, 9) is None


def test_huge_line_is_clipped_not_walked():
    grid = PixelGrid(10, 8)
    draw_line_dda(grid, (-1e12, 3), (1e12, 3))
    assert lit(grid) == {(x, 3) for x in range(10)}


def test_diagonal_line():
    grid = PixelGrid(10, 8)
    draw_line_dda(grid, (0, 0), (3, 3))
    assert lit(grid) == {(0, 0), (1, 1), (2, 2), (3, 3)}


def test_fill_rect_clips():
    grid = PixelGrid(4, 4)
    fill_rect(grid, -5, -5, 2, 2)
    assert lit(grid) == {(0, 0), (1, 0), (0, 1), (1, 1)}


def test_canvas_scales_surface_onto_window(window):
    # 41 columns -> 80 pixels wide, 20 rows -> 80 pixels high
    canvas = TerminalCanvas(window, RenderConfig())
    assert (canvas.pixels.w, canvas.pixels.h) == (80, 80)

    canvas.clear()
    canvas.draw_line(ScreenPoint(0, 400), ScreenPoint(800, 400))
    assert {y for _, y in lit(canvas.pixels)} == {40}
    assert len(lit(canvas.pixels)) == 80


def test_canvas_point_is_a_small_square(window):
    canvas = TerminalCanvas(window, RenderConfig())
    canvas.clear()
    canvas.draw_point(ScreenPoint(400, 400))
    # 10 surface units -> 1 pixel each side of the center
    assert lit(canvas.pixels) == {(39, 39), (40, 39), (39, 40), (40, 40)}


def test_canvas_present_writes_cells(window):
    canvas = TerminalCanvas(window, RenderConfig(use_braille=False))
    canvas.clear()
    assert window.erased == 1
    canvas.draw_line(ScreenPoint(0, 0), ScreenPoint(800, 0))
    canvas.present()
    assert window.refreshed == 1
    assert set(window.cells.values()) == {':'}
    assert len(window.cells) == 40
    assert all(y == 0 for y, _ in window.cells)


def test_clear_wipes_previous_frame(window):
    canvas = TerminalCanvas(window, RenderConfig())
    canvas.draw_line(ScreenPoint(0, 0), ScreenPoint(800, 800))
    canvas.clear()
    assert lit(canvas.pixels) == set()


@pytest.mark.parametrize("stdscr", [None, FakeWindow(rows=0, cols=1)])
def test_unavailable_canvas_is_silent(stdscr):
    canvas = TerminalCanvas(stdscr, RenderConfig())
    assert not canvas.available
    canvas.clear()
    canvas.draw_point(ScreenPoint(1, 1))
    canvas.draw_line(ScreenPoint(0, 0), ScreenPoint(1e30, -1e30))
    canvas.present()


def test_canvas_follows_window_resize(window):
    canvas = TerminalCanvas(window, RenderConfig())
    window.rows, window.cols = 10, 21
    canvas.clear()
    assert (canvas.pixels.w, canvas.pixels.h) == (40, 40)


def test_square_stays_square_on_wide_window():
    # 80 columns x 24 rows -> 158 x 96 pixels
    window = FakeWindow(rows=24, cols=80)
    canvas = TerminalCanvas(window, RenderConfig())
    assert (canvas.pixels.w, canvas.pixels.h) == (158, 96)

    canvas.clear()
    corners = [ScreenPoint(200, 200), ScreenPoint(600, 200),
               ScreenPoint(600, 600), ScreenPoint(200, 600)]
    for a, b in zip(corners, corners[1:] + corners[:1]):
        canvas.draw_line(a, b)

    xs = {x for x, _ in lit(canvas.pixels)}
    ys = {y for _, y in lit(canvas.pixels)}
    assert max(xs) - min(xs) == max(ys) - min(ys) == 48
    # letterboxed: centred horizontally, full height used
    assert (min(xs) + max(xs)) / 2 == pytest.approx(79, abs=1)
    assert (min(ys), max(ys)) == (24, 72)


def test_surface_center_maps_to_window_center_on_tall_window():
    window = FakeWindow(rows=40, cols=21)   # 40 x 160 pixels
    canvas = TerminalCanvas(window, RenderConfig())
    canvas.clear()
    canvas.draw_line(ScreenPoint(400, 400), ScreenPoint(400, 400))
    assert lit(canvas.pixels) == {(20, 80)}
