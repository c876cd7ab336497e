"""
Pattern registry

Every pattern module exposes a PATTERN descriptor; this is the one list
the host looks patterns up in.
"""

from patterns import (
    glowing_seed,
    ignition_spiral,
    moire,
    quasicrystal,
    quasicrystal_cube,
    swatch,
)
from patterns.base import CUBE, PLANE, PatternInfo


class UnknownPatternError(KeyError):
    """Raised for a pattern name that is not registered"""


PATTERNS = {
    info.name: info
    for info in (
        glowing_seed.PATTERN,
        ignition_spiral.PATTERN,
        moire.PATTERN,
        quasicrystal.PATTERN,
        quasicrystal_cube.PATTERN,
        swatch.PATTERN,
    )
}


def get_pattern(name) -> PatternInfo:
    try:
        return PATTERNS[name]
    except KeyError:
        raise UnknownPatternError(name) from None


def list_patterns():
    """[{'name', 'title', 'geometry'}] for every registered pattern"""
    return [
        {'name': info.name, 'title': info.title, 'geometry': info.geometry}
        for info in PATTERNS.values()
    ]


__all__ = ["CUBE", "PLANE", "PATTERNS", "PatternInfo", "UnknownPatternError",
           "get_pattern", "list_patterns"]
