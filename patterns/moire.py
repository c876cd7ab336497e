"""
Moire pattern generator

Dynamic moire patterns after Carsten Nicolai's 'The Moire Index':
two overlapping grids whose interference produces the pattern.
"""

import math
from dataclasses import dataclass

from backend.lx import hsb
from backend.params import ParameterSet, knob, toggle
from patterns import fields, tone
from patterns.base import PatternInfo

GRID_OFFSET = 0.1


@dataclass(frozen=True)
class MoireParams(ParameterSet):
    frequency: float = knob("frequency", "Frequency", "Base frequency of the moire pattern", 0.5)
    angle: float = knob("angle", "Angle", "Rotation angle of the overlaid grid", 0.5)
    contrast: float = knob("contrast", "Contrast", "Contrast intensity of the pattern", 0.5)
    hue: float = knob("hue", "Hue", "Hue to render", 0.5)
    sat: float = knob("sat", "Saturation", "Saturation to render", 0.5)
    brt: float = knob("brt", "Brightness", "Brightness to render", 0.5)
    animate: bool = toggle("animate", "Animate", "Enable animation of the moire effect", True)


DEFAULTS = MoireParams()


def render_point(point, delta_ms, params=None):
    """
    Moire interference at a point.

    Uses the raw normalized coordinates, not centered ones. The animate
    toggle is read by the host, which sweeps the angle knob between frames.
    """
    p = params or DEFAULTS
    base_freq = 5 + p.frequency * 20  # ~5 to 25
    rotation = p.angle * math.pi * 2

    value = fields.moire(point.xn, point.yn, base_freq, rotation, GRID_OFFSET)
    level = p.brt * math.pow(value, p.contrast * 2)

    return hsb(p.hue * 360, p.sat * 100, tone.brightness(level))


PATTERN = PatternInfo("moire", "Moire Generator", MoireParams, render_point, animated_knob="angle")
