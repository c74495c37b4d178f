#
# PROJECT: wireframe-spin
# MODULE: wireframe_spin/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import WorldPoint, ScreenPoint, has_depth
from .transform import rotate_xz, translate_z, to_ndc, to_screen, project_vertex
from .config import RenderConfig
from .color import parse_hex_color, init_colors
from .mesh import Mesh
from .canvas import TerminalCanvas
from .animation import (AnimationState, AnimationLoop, LoopStatus, Ticker,
                        advance, render_mesh, step_frame)
from .logging_config import setup_logging
