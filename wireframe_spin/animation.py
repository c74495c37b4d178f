#
# PROJECT: wireframe-spin
# MODULE: wireframe_spin/animation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import enum
import logging
import time
from dataclasses import dataclass, replace

from .transform import project_vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnimationState:
    """Per-frame animation values. Each frame returns a new instance."""
    angle: float = 0.0
    depth_offset: float = 2.0
    frame: int = 0

    @classmethod
    def initial(cls, config) -> 'AnimationState':
        return cls(depth_offset=config.depth_offset)


def advance(state: AnimationState, config) -> AnimationState:
    """Move the rotation forward by one frame. The angle is never wrapped."""
    return replace(state, angle=state.angle + config.angle_step, frame=state.frame + 1)


def render_mesh(surface, mesh, state: AnimationState, config):
    """
    Draw every mesh edge at the given state.

    Each endpoint goes through the whole pipeline on its own; vertices shared
    between edges are simply projected again.
    """
    w, h = config.width, config.height
    verts = mesh.vertices
    for i, j in mesh.edges():
        surface.draw_line(
            project_vertex(verts[i], state.angle, state.depth_offset, w, h),
            project_vertex(verts[j], state.angle, state.depth_offset, w, h),
        )

    if config.show_vertices:
        for v in verts:
            surface.draw_point(project_vertex(v, state.angle, state.depth_offset, w, h))


def step_frame(surface, mesh, state: AnimationState, config) -> AnimationState:
    """One frame: clear -> advance angle -> draw. Returns the new state."""
    surface.clear()
    state = advance(state, config)
    render_mesh(surface, mesh, state, config)
    return state


class Ticker:
    """
    Fixed-rate tick source.

    Sleeps `interval` seconds before every tick, the first one included, so
    the wait is measured from the end of the previous frame. stop() ends the
    sequence before the next tick is handed out.
    """

    def __init__(self, interval: float, sleep=time.sleep):
        self.interval = interval
        self._sleep = sleep
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self):
        self._stopped = True

    def __iter__(self):
        tick = 0
        while not self._stopped:
            self._sleep(self.interval)
            if self._stopped:
                return
            yield tick
            tick += 1


class LoopStatus(enum.Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    STOPPED = 'stopped'


class AnimationLoop:
    """
    Single-threaded driver: one frame per tick.

    The loop owns its AnimationState. on_frame(state) is called after every
    frame, which is where a surface gets flushed to the screen.
    """

    def __init__(self, surface, mesh, config, state=None, on_frame=None):
        self.surface = surface
        self.mesh = mesh
        self.config = config
        self.state = state if state is not None else AnimationState.initial(config)
        self.on_frame = on_frame
        self.status = LoopStatus.IDLE
        self._ticker = None

    def step(self) -> AnimationState:
        if self.status is LoopStatus.IDLE:
            self.status = LoopStatus.RUNNING
        self.state = step_frame(self.surface, self.mesh, self.state, self.config)
        logger.debug("Frame %d, angle %.4f", self.state.frame, self.state.angle)
        if self.on_frame is not None:
            self.on_frame(self.state)
        return self.state

    def run(self, ticks=None) -> AnimationState:
        """Run one frame per tick until the ticks run out or stop() is called."""
        if ticks is None:
            ticks = self._ticker = Ticker(self.config.frame_interval)
        elif isinstance(ticks, Ticker):
            self._ticker = ticks

        logger.info("Animation started: %d fps, %d edges per frame",
                    self.config.fps, self.mesh.edge_count)
        for _ in ticks:
            if self.status is LoopStatus.STOPPED:
                break
            self.step()
        logger.info("Animation finished after %d frames", self.state.frame)
        return self.state

    def stop(self):
        self.status = LoopStatus.STOPPED
        if self._ticker is not None:
            self._ticker.stop()
