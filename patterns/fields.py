"""
Scalar field functions shared by the patterns.
"""

import math

from patterns.mapping import polar

SQRT3_OVER_3 = math.sqrt(3) / 3.0


def swirl(x, y, folds, scale, twist):
    """Rotationally symmetric swirl with a radial phase ramp"""
    angle, radius = polar(x, y)
    return math.sin(folds * angle + radius * scale + twist)


def ignition(x, y, folds, flare, spin, band):
    """Power-law flared spiral plus a ring highlight at radius == band"""
    angle, radius = polar(x, y)
    warped = math.pow(radius, flare)
    ring = math.sin((radius - band) * 20.0)
    return math.sin(folds * (angle + spin) + warped * 8) + 0.5 * ring


def moire(xn, yn, base_freq, rotation, offset=0.1):
    """
    Interference of two sinusoidal grids.

    The second grid scales each axis frequency by cos/sin of the rotation
    instead of rotating its sampling coordinates. Patterns saved against
    this look depend on it.
    """
    gx1 = math.sin(xn * base_freq)
    gy1 = math.sin(yn * base_freq)
    gx2 = math.sin((xn + offset) * base_freq * math.cos(rotation))
    gy2 = math.sin((yn + offset) * base_freq * math.sin(rotation))
    return abs(gx1 * gy1 - gx2 * gy2)


def hex_axial(px, py):
    """Project onto axial hex coordinates (q, r, s) with q + r + s == 0"""
    # + 0.0 turns -0.0 into 0.0 so atan2 at the origin is 0, not pi
    q = 2.0 / 3.0 * px + 0.0
    r = -1.0 / 3.0 * px + SQRT3_OVER_3 * py + 0.0
    s = -q - r + 0.0
    return q, r, s


def quasicrystal(px, py, symmetry_factor, angle):
    """Sum of two symmetry-fold cosine waves over the hex lattice, in [-2, 2]"""
    q, r, s = hex_axial(px, py)
    return (math.cos(symmetry_factor * math.atan2(s, q) + angle)
            + math.cos(symmetry_factor * math.atan2(r, s) + angle))
