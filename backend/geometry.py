"""
Fixture point layouts for the preview engine.

Each layout returns the points to evaluate together with the pixel
(column, row) each one lands on in the preview image.
"""

import numpy as np

from backend.lx import LXPoint


def _axis(n):
    """n normalized positions spanning [0, 1] inclusive"""
    if n <= 1:
        return np.array([0.5])
    return np.linspace(0.0, 1.0, n)


def plane_points(width, height):
    """Flat grid; image row 0 is the top, so yn counts down from 1"""
    xs = _axis(width)
    ys = _axis(height)[::-1]
    points = []
    pixels = []
    index = 0
    for row in range(height):
        for col in range(width):
            points.append(LXPoint(float(xs[col]), float(ys[row]), 0.5, index))
            pixels.append((col, row))
            index += 1
    return points, pixels


def cube_points(face_width, height):
    """
    The four lateral faces of a unit cube, unrolled side by side.

    Faces appear left to right as South, East, North, West; each face is
    face_width columns wide and walks its edge in the same direction the
    perimeter coordinate does.
    """
    t = _axis(face_width)
    ys = _axis(height)[::-1]
    edges = (
        (t, np.zeros_like(t)),          # South: x 0 -> 1 at z = 0
        (np.ones_like(t), t),           # East: z 0 -> 1 at x = 1
        (t[::-1], np.ones_like(t)),     # North: x 1 -> 0 at z = 1
        (np.zeros_like(t), t[::-1]),    # West: z 1 -> 0 at x = 0
    )
    points = []
    pixels = []
    index = 0
    for face, (xs, zs) in enumerate(edges):
        for row in range(height):
            for col in range(face_width):
                points.append(LXPoint(float(xs[col]), float(ys[row]), float(zs[col]), index))
                pixels.append((face * face_width + col, row))
                index += 1
    return points, pixels
