"""
Coordinate mapping from fixture points to pattern working coordinates.

Planar patterns center the point on the view. The cube pattern walks the
four lateral faces (or wraps a helix around the vertical axis) to get a
continuous horizontal coordinate around the fixture.
"""

import math
from enum import Enum
from typing import Tuple

TWO_PI = math.pi * 2


class Face(Enum):
    """Lateral cube faces, in perimeter order"""
    SOUTH = 0
    EAST = 1
    NORTH = 2
    WEST = 3


def centered(point) -> Tuple[float, float]:
    """Point position relative to the center of the view"""
    return point.xn - 0.5, point.yn - 0.5


def effective_scale(scale) -> float:
    """Map a 0-1 scale knob onto the usable tiling scale range"""
    return 0.2 + scale * 1.5


def rotate(x, y, turns) -> Tuple[float, float]:
    """Rotate (x, y) by a knob value in turns (1.0 == 2*pi)"""
    rot = turns * TWO_PI
    cos_r = math.cos(rot)
    sin_r = math.sin(rot)
    return x * cos_r - y * sin_r, x * sin_r + y * cos_r


def polar(x, y) -> Tuple[float, float]:
    """(angle, radius); atan2(0, 0) is 0"""
    return math.atan2(y, x), math.sqrt(x * x + y * y)


def classify_face(xn, zn) -> Face:
    """
    Pick the lateral face a point sits on.

    The axis further from center wins. Exact diagonals fall to the Z
    comparison, i.e. North or South.
    """
    dx = xn - 0.5
    dz = zn - 0.5
    if abs(dx) > abs(dz):
        return Face.EAST if dx > 0 else Face.WEST
    return Face.NORTH if dz > 0 else Face.SOUTH


def cube_face_uv(xn, yn, zn, mirror_ns=False) -> Tuple[Face, float, float]:
    """
    Map a point on the cube's lateral faces to (face, u, v).

    u runs around the perimeter South -> East -> North -> West, one unit
    per face, so it is continuous at every shared corner apart from the
    West/South seam where it jumps from 4 back to 0. Mirroring flips the
    North face so it reads in the same direction as South.
    """
    face = classify_face(xn, zn)
    if face is Face.SOUTH:
        local = xn
    elif face is Face.EAST:
        local = zn
    elif face is Face.NORTH:
        local = xn if mirror_ns else 1.0 - xn
    else:
        local = 1.0 - zn
    return face, face.value + local, yn


def cylinder_uv(xn, yn, zn) -> Tuple[float, float]:
    """Helical wrap: angle around the vertical axis plus height"""
    theta = math.atan2(zn - 0.5, xn - 0.5)
    u = theta / TWO_PI + 0.5 + yn
    return u, yn
