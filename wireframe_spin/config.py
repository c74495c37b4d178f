#
# PROJECT: wireframe-spin
# MODULE: wireframe_spin/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
import os
from dataclasses import dataclass

from .color import parse_hex_color


@dataclass
class RenderConfig:
    """Fixed start-up constants for the spinning wireframe."""
    foreground: str = "#61E552FF"
    background: str = "#101010"
    width: int = 800
    height: int = 800
    fps: int = 60
    depth_offset: float = 2.0
    angular_speed: float = 0.5   # revolutions per second
    point_size: float = 10.0
    show_vertices: bool = False
    use_color: bool = True
    use_braille: bool = True

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Surface size must be positive, got {self.width}x{self.height}")
        for name in ('foreground', 'background'):
            if parse_hex_color(getattr(self, name)) is None:
                raise ValueError(f"Invalid {name} color: {getattr(self, name)!r}")

    @property
    def frame_delta(self) -> float:
        return 1 / self.fps

    @property
    def frame_interval(self) -> float:
        """Delay between frames, in seconds (what time.sleep expects)."""
        return self.frame_delta

    @property
    def angle_step(self) -> float:
        return 2 * math.pi * self.frame_delta * self.angular_speed

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Guess terminal capabilities from TERM and LANG and return a default config.
        Only the display switches are affected; the animation constants stay fixed.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille
            use_braille=supports_utf8 and not is_linux_console,
        )
