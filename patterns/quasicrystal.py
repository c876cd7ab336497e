"""
Quasicrystal tiling generator

Tiles the view with a hex-lattice interference pattern whose rotational
symmetry runs from 1-fold to 10-fold under the symmetry knob.
"""

import math
from dataclasses import dataclass

from backend.lx import hsb, round_half_up
from backend.params import ParameterSet, knob, toggle
from patterns import fields, mapping, tone
from patterns.base import PatternInfo

MAX_FOLDS = 10


@dataclass(frozen=True)
class QuasicrystalParams(ParameterSet):
    symmetry: float = knob("symmetry", "Symmetry", "Choose tiling symmetry (1 to 10)", 0.5)
    scale: float = knob("scale", "Scale", "Scaling factor for the tiling pattern", 0.5)
    rotation: float = knob("rotation", "Rotation", "Rotation angle", 0.5)
    hue: float = knob("hue", "Hue", "Hue to render", 0.5)
    sat: float = knob("sat", "Saturation", "Saturation to render", 0.5)
    brt: float = knob("brt", "Brightness", "Brightness to render", 0.5)
    fade: bool = toggle("fade", "Fade", "Fade brightness from center", True)
    quasiperiodic: bool = toggle("quasiperiodic", "Quasiperiodic", "Enable quasiperiodic tiling", True)


DEFAULTS = QuasicrystalParams()


def symmetry_factor(symmetry) -> int:
    return round_half_up(1 + symmetry * (MAX_FOLDS - 1), fallback=1)


def render_point(point, delta_ms, params=None):
    p = params or DEFAULTS
    angle = p.rotation * math.pi * 2
    scale = mapping.effective_scale(p.scale)
    folds = symmetry_factor(p.symmetry)

    px = ((point.xn * folds) % 1 - 0.5) * scale
    py = ((point.yn * folds) % 1 - 0.5) * scale

    tile = fields.quasicrystal(px, py, folds, angle)
    level = p.brt * (abs(tile) if p.quasiperiodic else 1)

    if p.fade:
        level *= tone.center_fade(point.xn, point.yn)

    return hsb(p.hue * 360, p.sat * 100, tone.brightness(level))


PATTERN = PatternInfo("quasicrystal", "Quasicrystal Tiling", QuasicrystalParams, render_point)
