#
# PROJECT: wireframe-spin
# MODULE: wireframe_spin/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging

logger = logging.getLogger(__name__)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or '#RRGGBBAA' ('#' optional, case-insensitive).
    The alpha byte is ignored; terminals cannot blend.
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) not in (6, 8):
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        if len(val) == 8:
            int(val[6:8], 16)
        return (r, g, b)
    except ValueError:
        return None

# The 6x6x6 xterm color cube occupies indices 16-231.
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]

def _rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp (232-255)."""

    def _nearest_cube_val(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx

def _rgb_to_nearest_ansi8(r, g, b):
    """Nearest basic ANSI color index (0-7), for 8-color terminals."""
    best_idx = 0
    best_dist = None
    for i, (ar, ag, ab) in enumerate(_ANSI8):
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if best_dist is None or d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx

def _resolve_slots(fg_rgb, bg_rgb, num_colors, can_redefine):
    """Pick curses color numbers for foreground and background.
    Cascade: exact RGB (redefinable slots) -> xterm-256 -> ANSI 8."""
    if can_redefine and num_colors >= 256:
        slots = []
        for slot, (r, g, b) in ((16, fg_rgb), (17, bg_rgb)):
            try:
                curses.init_color(slot, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
                slots.append(slot)
            except curses.error:
                slots.append(_rgb_to_nearest_xterm(r, g, b))
        return slots[0], slots[1]
    if num_colors >= 256:
        return _rgb_to_nearest_xterm(*fg_rgb), _rgb_to_nearest_xterm(*bg_rgb)
    if num_colors >= 8:
        return _rgb_to_nearest_ansi8(*fg_rgb), _rgb_to_nearest_ansi8(*bg_rgb)
    return None

def init_colors(config):
    """
    Initialize curses color pairs for the wireframe and the background.
    Call once after curses.wrapper init.
    Returns (fg_pair, bg_pair); 0 means "terminal default / monochrome".
    """
    if not config.use_color:
        return 0, 0

    fg_rgb = parse_hex_color(config.foreground)
    bg_rgb = parse_hex_color(config.background)

    try:
        if not curses.has_colors():
            return 0, 0
        curses.start_color()

        num_colors = getattr(curses, 'COLORS', 8)
        try:
            can_redefine = curses.can_change_color()
        except curses.error:
            can_redefine = False

        slots = _resolve_slots(fg_rgb, bg_rgb, num_colors, can_redefine)
        if slots is None:
            return 0, 0
        fg_slot, bg_slot = slots

        curses.init_pair(1, fg_slot, bg_slot)
        curses.init_pair(2, bg_slot, bg_slot)
        logger.debug("Color pairs: fg slot %d, bg slot %d (%d colors)",
                     fg_slot, bg_slot, num_colors)
        return 1, 2
    except curses.error as e:
        logger.warning("Color setup failed, falling back to monochrome: %s", e)
        return 0, 0
