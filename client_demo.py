#!/usr/bin/env python3
#
# PROJECT: wireframe-spin
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import os
import sys

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from wireframe_spin.demo import main
from wireframe_spin.logging_config import setup_logging

logger = logging.getLogger("wireframe_spin.client_demo")


def run():
    setup_logging()
    try:
        state = curses.wrapper(main)
    except KeyboardInterrupt:
        return 0
    except Exception:
        # curses.wrapper has already restored the terminal
        logger.exception("Demo crashed")
        return 1
    logger.info("Stopped at frame %d (angle %.3f rad)", state.frame, state.angle)
    return 0


if __name__ == "__main__":
    sys.exit(run())
