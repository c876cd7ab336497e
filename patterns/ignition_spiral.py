"""
Ignition Spiral

Flame-inspired swirl with an asymmetric radial flare, a bright ignition
band at a chosen distance, and full saturation control.
"""

import math
from dataclasses import dataclass

from backend.lx import hsb
from backend.params import ParameterSet, knob
from patterns import fields, mapping, tone
from patterns.base import PatternInfo


@dataclass(frozen=True)
class IgnitionSpiralParams(ParameterSet):
    freq: float = knob("spiralFreq", "Spiral Frequency", "Number of spiral arms", 0.4)
    flare: float = knob("spiralFlare", "Spiral Flare", "Asymmetric flare warp", 0.3)
    spin: float = knob("spiralSpin", "Spin Offset", "Rotational offset", 0.1)
    band: float = knob("spiralBand", "Ignition Band", "Distance band flare", 0.5)
    hue: float = knob("spiralHue", "Hue", "Color warmth (0 = red, 1 = yellow)", 0.2)
    sat: float = knob("spiralSat", "Saturation", "Color saturation (0 = white, 1 = full color)", 1.0)
    brt: float = knob("spiralBrt", "Brightness", "Brightness", 0.6)
    sharp: float = knob("spiralSharp", "Sharpness", "Contrast of spiral", 0.5)


DEFAULTS = IgnitionSpiralParams()


def render_point(point, delta_ms, params=None):
    p = params or DEFAULTS
    dx, dy = mapping.centered(point)

    flare = 1 + p.flare * 3.0
    folds = 2 + p.freq * 10
    spin = p.spin * math.pi * 2

    wave = fields.ignition(dx, dy, folds, flare, spin, p.band)
    contrast = tone.sharpen(wave, p.sharp)

    # warm range only: red through yellow
    hue = 10 + p.hue * 40
    return hsb(hue, p.sat * 100, tone.brightness(p.brt * contrast))


PATTERN = PatternInfo("ignition-spiral", "Ignition Spiral", IgnitionSpiralParams, render_point)
