#
# PROJECT: wireframe-spin
# MODULE: wireframe_spin/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import WorldPoint, ScreenPoint


class Mesh:
    """
    Read-only wireframe mesh: a vertex pool plus polylines of vertex indices.

    Every polyline is drawn as a closed loop, so the last index always
    connects back to the first one. A two-index polyline therefore yields
    the same edge twice.
    """
    __slots__ = ('vertices', 'polylines')

    def __init__(self, vertices, polylines):
        verts = []
        for v in vertices:
            if isinstance(v, ScreenPoint):
                raise ValueError(f"Mesh vertex {v!r} has no depth")
            if not isinstance(v, WorldPoint):
                if len(v) != 3:
                    raise ValueError(f"Mesh vertex {v!r} needs exactly 3 components")
                v = WorldPoint(*v)
            verts.append(v)

        lines = []
        for n, line in enumerate(polylines):
            for idx in line:
                # bool is an int subclass but never a sensible index
                if not isinstance(idx, int) or isinstance(idx, bool):
                    raise ValueError(f"Polyline {n}: index {idx!r} is not an integer")
                if idx < 0 or idx >= len(verts):
                    raise ValueError(
                        f"Polyline {n}: index {idx} out of range for {len(verts)} vertices")
            lines.append(tuple(line))

        self.vertices = tuple(verts)
        self.polylines = tuple(lines)

    def __repr__(self):
        return f"Mesh(V:{len(self.vertices)}, P:{len(self.polylines)})"

    def edges(self):
        """Yield (i, j) vertex index pairs in polyline order, then edge order."""
        for line in self.polylines:
            n = len(line)
            for i in range(n):
                yield line[i], line[(i + 1) % n]

    @property
    def edge_count(self) -> int:
        return sum(len(line) for line in self.polylines)

    @classmethod
    def reference(cls):
        """Cube with a smaller box sitting on its top face (16 vertices, 12 polylines)."""
        vertices = [
            # cube, front (z = +0.5) then back (z = -0.5)
            ( 0.5,  0.5,  0.5), (-0.5,  0.5,  0.5), (-0.5, -0.5,  0.5), ( 0.5, -0.5,  0.5),
            ( 0.5,  0.5, -0.5), (-0.5,  0.5, -0.5), (-0.5, -0.5, -0.5), ( 0.5, -0.5, -0.5),
            # top box
            ( 0.25, 0.75, 0.5),  (-0.25, 0.75, 0.5),  (-0.25, 0.5, 0.5),  ( 0.25, 0.5, 0.5),
            ( 0.25, 0.75, 0.25), (-0.25, 0.75, 0.25), (-0.25, 0.5, 0.25), ( 0.25, 0.5, 0.25),
        ]
        polylines = [
            [0, 1, 2, 3],
            [4, 5, 6, 7],
            [0, 4], [1, 5], [2, 6], [3, 7],

            [8, 9, 10, 11],
            [12, 13, 14, 15],
            [8, 12], [9, 13], [10, 14], [11, 15],
        ]
        return cls(vertices, polylines)
