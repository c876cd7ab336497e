"""
Tone mapping: field value plus user parameters to HSB components.
"""

import math

from backend.lx import clamp, dist


def sharpen(wave, sharpness):
    """Power-law contrast; sharpness 0 is linear, 1 is close to on/off"""
    return math.pow(abs(wave), 1 + sharpness * 4)


def brightness(level):
    """Brightness percent from a 0-1 level, never above 100"""
    return clamp(min(1.0, level) * 100.0, 0.0, 100.0)


def blend_hue(tile_value, hue_a, hue_b, hue_c):
    """
    Three-stop hue blend keyed on the tiling phase.

    Returns a hue in knob units (0-1 per turn); the blend factor
    0.5 + 0.5*sin(tile*pi) walks A -> B -> C.
    """
    blend = 0.5 + 0.5 * math.sin(tile_value * math.pi)
    if blend < 0.5:
        return hue_a * (1 - 2 * blend) + hue_b * (2 * blend)
    return hue_b * (2 - 2 * blend) + hue_c * (2 * blend - 1)


def center_fade(xn, yn):
    """1 at the center, falling off linearly with distance"""
    return clamp(1 - dist(0.5, 0.5, xn, yn), 0, 1)
