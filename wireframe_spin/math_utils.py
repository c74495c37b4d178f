#
# PROJECT: wireframe-spin
# MODULE: wireframe_spin/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class WorldPoint:
    """Immutable 3-component point that still carries depth."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("WorldPoint is immutable")

    def __repr__(self):
        return f"WorldPoint({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("WorldPoint index out of range")

    def __eq__(self, other):
        if isinstance(other, WorldPoint):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash(('world', self.x, self.y, self.z))


class ScreenPoint:
    """Immutable 2-component point. Depth has already been consumed
    (normalized device coordinates or surface pixels)."""
    __slots__ = ('x', 'y')

    def __init__(self, x: float, y: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))

    def __setattr__(self, name, value):
        raise AttributeError("ScreenPoint is immutable")

    def __repr__(self):
        return f"ScreenPoint({self.x:.2f}, {self.y:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        raise IndexError("ScreenPoint index out of range")

    def __eq__(self, other):
        if isinstance(other, ScreenPoint):
            return (self.x, self.y) == (other.x, other.y)
        return NotImplemented

    def __hash__(self):
        return hash(('screen', self.x, self.y))


def has_depth(p) -> bool:
    """True for a WorldPoint with non-zero depth.

    A depth of exactly 0 is treated like a missing one, so rotation is skipped
    and projection falls back to the origin instead of dividing by zero.
    """
    return isinstance(p, WorldPoint) and p.z != 0.0
