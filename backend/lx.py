"""
LX host compatibility layer for pattern scripts.

Provides the pieces a pattern expects the host to supply: a read-only
point with normalized coordinates, the hsb() color constructor, and the
clamp/dist helpers.
"""

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LXPoint:
    """A fixture point with coordinates normalized to [0, 1] on each axis."""
    xn: float
    yn: float
    zn: float = 0.5
    index: int = 0


def clamp(value, lo, hi):
    """Clamp value into [lo, hi]"""
    return max(lo, min(hi, value))


def dist(x1, y1, x2, y2):
    """Euclidean distance between two 2D points"""
    return math.hypot(x2 - x1, y2 - y1)


def wrap_hue(hue):
    """Wrap a hue in degrees into [0, 360)"""
    hue = hue % 360.0
    # -1e-17 % 360.0 == 360.0 in floating point
    if hue >= 360.0:
        return 0.0
    return hue


def round_half_up(value, fallback=0):
    """
    Round the way the host does: halves go up, not to even.

    NaN and infinities have no integer; they give fallback.
    """
    if not math.isfinite(value):
        return fallback
    return int(math.floor(value + 0.5))


def _finite_or_zero(value):
    return 0.0 if math.isnan(value) else value


@dataclass(frozen=True)
class LXColor:
    """Color value produced by hsb(). Hue in degrees, saturation and brightness in percent."""
    hue: float
    saturation: float
    brightness: float

    def rgb(self) -> Tuple[int, int, int]:
        """Convert to 0-255 RGB channels"""
        s = self.saturation / 100.0
        v = self.brightness / 100.0
        if s == 0:
            c = int(round(v * 255))
            return (c, c, c)

        h = self.hue / 60.0
        i = int(h) % 6
        f = h - int(h)
        p = v * (1 - s)
        q = v * (1 - f * s)
        t = v * (1 - (1 - f) * s)

        if i == 0:
            r, g, b = v, t, p
        elif i == 1:
            r, g, b = q, v, p
        elif i == 2:
            r, g, b = p, v, t
        elif i == 3:
            r, g, b = p, q, v
        elif i == 4:
            r, g, b = t, p, v
        else:
            r, g, b = v, p, q
        return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))

    @property
    def argb(self) -> int:
        """Packed 0xAARRGGBB value with full alpha"""
        r, g, b = self.rgb()
        return (0xFF << 24) | (r << 16) | (g << 8) | b


def hsb(h, s, b) -> LXColor:
    """
    Build a color from hue (degrees), saturation and brightness (0-100).

    Hue is wrapped, saturation and brightness are clamped. A NaN component
    renders as 0 so a bad input shows up as a wrong color instead of
    stopping the frame.
    """
    h = _finite_or_zero(float(h))
    s = _finite_or_zero(float(s))
    b = _finite_or_zero(float(b))
    if math.isinf(h):
        h = 0.0
    return LXColor(wrap_hue(h), clamp(s, 0.0, 100.0), clamp(b, 0.0, 100.0))
