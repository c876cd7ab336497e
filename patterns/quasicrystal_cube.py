"""
Quasicrystal Cube

The quasicrystal tiling wrapped around the lateral faces of a cube (or
helically around a cylinder), with the hue walking across three stops as
the tiling phase changes.
"""

import math
from dataclasses import dataclass

from backend.lx import hsb, round_half_up
from backend.params import ParameterSet, knob, toggle
from patterns import fields, mapping, tone
from patterns.base import CUBE, PatternInfo

MAX_FOLDS = 7


@dataclass(frozen=True)
class QuasicrystalCubeParams(ParameterSet):
    mirror_ns: bool = toggle("mirrorNSFaces", "Mirror North/South Faces",
                             "Mirror the North face so it reads like the South face", False)
    use_3d: bool = toggle("use3D", "Cylindrical Wrap",
                          "Wrap the tiling helically around the vertical axis instead of per face", False)
    symmetry: float = knob("symmetry", "Symmetry", "Choose tiling symmetry (1 to 7)", 0.5)
    scale: float = knob("scale", "Scale", "Scaling factor for the tiling pattern", 0.5)
    rotation: float = knob("rotation", "Rotation", "Rotation angle", 0.5)
    hue_a: float = knob("hue1", "Hue A", "First hue stop", 0.6)
    hue_b: float = knob("hue2", "Hue B", "Middle hue stop", 0.3)
    hue_c: float = knob("hue3", "Hue C", "Last hue stop", 0.1)
    sat: float = knob("sat", "Saturation", "Saturation to render", 0.85)
    brt: float = knob("brt", "Brightness", "Brightness to render", 1.25, max=2.0)
    contrast: float = knob("contrast", "Contrast", "Tile contrast gain", 1.1, max=2.0)


DEFAULTS = QuasicrystalCubeParams()


def symmetry_factor(symmetry) -> int:
    return round_half_up(1 + symmetry * (MAX_FOLDS - 1), fallback=1)


def map_point(point, params):
    """Working (u, v) for a point under the current mapping mode"""
    if params.use_3d:
        return mapping.cylinder_uv(point.xn, point.yn, point.zn)
    _, u, v = mapping.cube_face_uv(point.xn, point.yn, point.zn, params.mirror_ns)
    return u, v


def render_point(point, delta_ms, params=None):
    p = params or DEFAULTS
    folds = symmetry_factor(p.symmetry)
    scale = mapping.effective_scale(p.scale)
    angle = p.rotation * math.pi * 2

    u, v = map_point(point, p)
    px = (u * folds * scale) % 1.0 - 0.5
    py = (v * folds * scale) % 1.0 - 0.5

    tile = fields.quasicrystal(px, py, folds, angle)
    hue = tone.blend_hue(tile, p.hue_a, p.hue_b, p.hue_c)
    level = p.brt * abs(tile) * p.contrast

    return hsb(hue * 360, p.sat * 100, tone.brightness(level))


PATTERN = PatternInfo("quasicrystal-cube", "Quasicrystal Pattern", QuasicrystalCubeParams,
                      render_point, geometry=CUBE)
