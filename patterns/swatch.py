"""
Swatch

Fills every point with one color from the host swatch.
"""

from dataclasses import dataclass

from backend.lx import clamp, hsb, round_half_up
from backend.params import ParameterSet, knobi
from patterns.base import PatternInfo

# Host default swatch
SWATCH = (
    hsb(0, 100, 100),
    hsb(30, 100, 100),
    hsb(60, 100, 100),
    hsb(120, 100, 100),
    hsb(210, 100, 100),
    hsb(280, 100, 100),
)


@dataclass(frozen=True)
class SwatchParams(ParameterSet):
    index: int = knobi("index", "Index", "Swatch color to render", 0, 0, len(SWATCH) - 1)


DEFAULTS = SwatchParams()


def render_point(point, delta_ms, params=None, swatch=SWATCH):
    p = params or DEFAULTS
    return swatch[clamp(round_half_up(p.index), 0, len(swatch) - 1)]


PATTERN = PatternInfo("swatch", "Swatch", SwatchParams, render_point)
