#
# PROJECT: wireframe-spin
# MODULE: wireframe_spin/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging

from .animation import AnimationLoop
from .canvas import TerminalCanvas
from .color import init_colors
from .config import RenderConfig
from .mesh import Mesh

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Curses harness: the reference mesh spinning on a terminal canvas.
    There is no input handling; the host stops it (Ctrl+C).
    """

    def __init__(self, stdscr, config=None):
        self.stdscr = stdscr

        try:
            curses.curs_set(0)
        except curses.error:
            pass

        self.config = config if config is not None else RenderConfig.detect_terminal()

        fg_pair, bg_pair = init_colors(self.config)
        self.canvas = TerminalCanvas(stdscr, self.config, fg_pair, bg_pair)
        if not self.canvas.available:
            logger.warning("Terminal too small to draw; animation keeps running blind")

        self.mesh = Mesh.reference()
        self.loop = AnimationLoop(self.canvas, self.mesh, self.config,
                                  on_frame=self.canvas.present)

    def run(self):
        return self.loop.run()

    def stop(self):
        self.loop.stop()


def main(stdscr, config=None):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config)
    try:
        app.run()
    except KeyboardInterrupt:
        app.stop()
    return app.loop.state
