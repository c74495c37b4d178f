import pytest

from wireframe_spin.config import RenderConfig
from wireframe_spin.mesh import Mesh


class RecordingSurface:
    """Drawing surface that remembers every call."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(('clear',))

    def draw_point(self, p):
        self.calls.append(('point', p))

    def draw_line(self, p1, p2):
        self.calls.append(('line', p1, p2))

    def of(self, kind):
        return [c for c in self.calls if c[0] == kind]


class FakeWindow:
    """Just enough of a curses window for TerminalCanvas."""

    def __init__(self, rows=20, cols=41):
        self.rows, self.cols = rows, cols
        self.cells = {}
        self.erased = 0
        self.refreshed = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def erase(self):
        self.erased += 1
        self.cells.clear()

    def addstr(self, y, x, s, attr=0):
        self.cells[(y, x)] = s

    def refresh(self):
        self.refreshed += 1


@pytest.fixture
def config():
    return RenderConfig()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def window():
    return FakeWindow()


@pytest.fixture
def square_mesh():
    return Mesh([(-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1)], [[0, 1, 2, 3]])
