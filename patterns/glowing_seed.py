"""
Glowing Seed

Swirl that works across cube faces, with a manual orientation knob so
the pattern can be turned independent of how the fixture is mounted.
"""

import math
from dataclasses import dataclass

from backend.lx import hsb
from backend.params import ParameterSet, knob
from patterns import fields, mapping, tone
from patterns.base import PatternInfo


@dataclass(frozen=True)
class GlowingSeedParams(ParameterSet):
    freq: float = knob("swirlFreq", "Swirl Frequency", "Swirl density", 0.5)
    size: float = knob("swirlSize", "Swirl Size", "Swirl radius scaling", 0.5)
    twist: float = knob("swirlTwist", "Swirl Twist", "Phase offset", 0.5)
    orient: float = knob("swirlOrient", "Orientation", "Manual swirl rotation", 0.0)
    hue: float = knob("swirlHue", "Hue", "Hue (0 = red, 1 = violet)", 0.1)
    brt: float = knob("swirlBrt", "Brightness", "Brightness", 0.5)
    sharp: float = knob("swirlSharp", "Sharpness", "Contrast", 0.5)


DEFAULTS = GlowingSeedParams()


def render_point(point, delta_ms, params=None):
    p = params or DEFAULTS
    dx, dy = mapping.centered(point)
    x, y = mapping.rotate(dx, dy, p.orient)

    folds = 1 + p.freq * 12
    twist = p.twist * math.pi * 2
    scale = 1 + p.size * 6

    wave = fields.swirl(x, y, folds, scale, twist)
    contrast = tone.sharpen(wave, p.sharp)

    return hsb(p.hue * 360, 90, tone.brightness(p.brt * contrast))


PATTERN = PatternInfo("glowing-seed", "Glowing Seed", GlowingSeedParams, render_point)
