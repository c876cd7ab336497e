from typing import Callable, NamedTuple, Optional, Type

from backend.params import ParameterSet

PLANE = "plane"
CUBE = "cube"


class PatternInfo(NamedTuple):
    """What the host needs to load and drive a pattern"""
    name: str
    title: str
    params: Type[ParameterSet]
    render_point: Callable
    geometry: str = PLANE
    animated_knob: Optional[str] = None
