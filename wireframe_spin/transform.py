#
# PROJECT: wireframe-spin
# MODULE: wireframe_spin/transform.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .math_utils import WorldPoint, ScreenPoint, has_depth


def rotate_xz(p, angle: float):
    """Rotate around the vertical axis (in the x/z plane) by `angle` radians.

    Points without depth are returned unchanged.
    """
    if not has_depth(p):
        return p

    c = math.cos(angle)
    s = math.sin(angle)
    return WorldPoint(
        p.x * c - p.z * s,
        p.y,
        p.x * s + p.z * c,
    )


def translate_z(p, dz: float):
    """Push a point along depth. Points without depth (a ScreenPoint, or a
    WorldPoint at depth 0) are returned unchanged and stay depthless."""
    if not has_depth(p):
        return p
    return WorldPoint(p.x, p.y, p.z + dz)


def to_ndc(p) -> ScreenPoint:
    """Perspective divide: world space -> normalized device coordinates.

    No clamping and no sign check. Depths close to zero give huge coordinates
    and negative depths mirror the point; both are passed on as they are.
    Without depth the point collapses onto the origin.
    """
    if not has_depth(p):
        return ScreenPoint(0.0, 0.0)

    return ScreenPoint(p.x / p.z, p.y / p.z)


def to_screen(p, width: float, height: float) -> ScreenPoint:
    """Map NDC (-1..1) onto surface pixels (0..width, 0..height), y pointing down."""
    return ScreenPoint(
        (p.x + 1) / 2 * width,
        (1 - (p.y + 1) / 2) * height,
    )


def project_vertex(p, angle: float, dz: float, width: float, height: float) -> ScreenPoint:
    """Full pipeline for one vertex: rotate -> translate -> divide -> map."""
    return to_screen(to_ndc(translate_z(rotate_xz(p, angle), dz)), width, height)
