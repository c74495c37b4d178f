#
# PROJECT: wireframe-spin
# MODULE: wireframe_spin/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses

from .rasterizer import draw_line_dda, fill_rect


class PixelGrid:
    __slots__ = ['w', 'h', 'grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    def set_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        # Bit index 0-3 for the left column, 4-7 for the right column
        self.grid[y >> 2][x >> 1] |= (1 << ((y & 3) + (x & 1) * 4))

    def cells(self):
        """Yield (row, col, mask) for every non-empty cell."""
        for cy, row in enumerate(self.grid):
            for cx, mask in enumerate(row):
                if mask:
                    yield cy, cx, mask


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'

def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(PixelGrid.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)


class TerminalCanvas:
    """
    Drawing surface on a curses window.

    Callers work in surface units (0..config.width x 0..config.height); the
    canvas scales them uniformly onto a 2x4-per-cell pixel grid sized to the
    window, centred along the longer axis.
    Drawing only touches the grid; present() writes it out.

    With no window (stdscr=None) or a window too small to hold a pixel,
    every operation does nothing.
    """

    def __init__(self, stdscr, config, fg_pair=0, bg_pair=0):
        self.stdscr = stdscr
        self.config = config
        self.fg_pair = fg_pair
        self.bg_pair = bg_pair
        self.pixels = None
        self.scale = 1.0
        self.offset_x = self.offset_y = 0.0
        self._resize()

    @property
    def available(self) -> bool:
        return self.pixels is not None

    def _resize(self):
        """Rebuild the pixel grid when the window size changes."""
        if self.stdscr is None:
            self.pixels = None
            return
        th, tw = self.stdscr.getmaxyx()
        # Leave the last column free: writing the bottom-right cell raises
        W = (tw - 1) * 2
        H = th * 4
        if W <= 0 or H <= 0:
            self.pixels = None
            return
        if self.pixels is None or (self.pixels.w, self.pixels.h) != (W, H):
            self.pixels = PixelGrid(W, H)

        # Braille pixels are close to square, so one scale for both axes keeps
        # the surface's aspect; the spare axis is centred (letterbox)
        width, height = self.config.width, self.config.height
        self.scale = min(W / width, H / height)
        self.offset_x = (W - width * self.scale) / 2
        self.offset_y = (H - height * self.scale) / 2

    def _to_pixels(self, p):
        return (self.offset_x + p.x * self.scale,
                self.offset_y + p.y * self.scale)

    def clear(self):
        self._resize()
        if not self.available:
            return
        self.pixels = PixelGrid(self.pixels.w, self.pixels.h)
        self.stdscr.erase()
        if self.bg_pair:
            try:
                self.stdscr.bkgd(' ', curses.color_pair(self.bg_pair))
            except curses.error:
                pass

    def draw_point(self, p):
        if not self.available:
            return
        cx, cy = self._to_pixels(p)
        half = self.config.point_size / 2 * self.scale
        fill_rect(self.pixels, cx - half, cy - half, cx + half, cy + half)

    def draw_line(self, p1, p2):
        if not self.available:
            return
        draw_line_dda(self.pixels, self._to_pixels(p1), self._to_pixels(p2))

    def present(self, state=None):
        """Write the pixel grid to the window and refresh it."""
        if not self.available:
            return
        render_cell = render_cell_braille if self.config.use_braille else render_cell_ascii
        attr = curses.color_pair(self.fg_pair) if self.fg_pair else curses.A_NORMAL
        for y, x, mask in self.pixels.cells():
            try:
                self.stdscr.addstr(y, x, render_cell(mask), attr)
            except curses.error:
                pass
        self.stdscr.refresh()
