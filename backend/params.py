"""
Parameter declarations for patterns

Each pattern declares its knobs and toggles as fields of a frozen
dataclass. The key/label/description/default tuple the host shows in its
UI lives in the field metadata, so one class is both the typed parameter
set the render function reads and the schema the host binds controls to.
"""

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


class ParameterError(ValueError):
    """Raised when host values cannot be bound to a parameter set"""


@dataclass(frozen=True)
class Knob:
    """Continuous numeric parameter"""
    key: str
    label: str
    description: str
    default: float
    min: float = 0.0
    max: float = 1.0
    integer: bool = False

    @property
    def type(self) -> str:
        return "int" if self.integer else "float"

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "type": self.type,
            "default": self.default,
            "label": self.label,
            "description": self.description,
            "min": self.min,
            "max": self.max,
        }


@dataclass(frozen=True)
class Toggle:
    """Boolean parameter"""
    key: str
    label: str
    description: str
    default: bool

    @property
    def type(self) -> str:
        return "bool"

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "type": self.type,
            "default": self.default,
            "label": self.label,
            "description": self.description,
        }


Declaration = Union[Knob, Toggle]

_META = "param"


def knob(key, label, description, default, min=0.0, max=1.0):
    return dataclasses.field(default=default, metadata={
        _META: Knob(key, label, description, default, min, max)
    })


def knobi(key, label, description, default, min, max):
    return dataclasses.field(default=int(default), metadata={
        _META: Knob(key, label, description, int(default), min, max, integer=True)
    })


def toggle(key, label, description, default):
    return dataclasses.field(default=bool(default), metadata={
        _META: Toggle(key, label, description, bool(default))
    })


@dataclass(frozen=True)
class ParameterSet:
    """
    Base class for a pattern's parameters.

    Instances are immutable snapshots; the host builds a new one when a
    control moves. Values are not range-clamped here.
    """

    @classmethod
    def declarations(cls) -> List[Tuple[str, Declaration]]:
        """(field name, declaration) pairs in declaration order"""
        return [(f.name, f.metadata[_META]) for f in dataclasses.fields(cls) if _META in f.metadata]

    @classmethod
    def declaration(cls, key: str) -> Tuple[str, Declaration]:
        for name, decl in cls.declarations():
            if decl.key == key:
                return name, decl
        raise ParameterError(f"Unknown parameter '{key}' for {cls.__name__}")

    @classmethod
    def schema(cls) -> List[dict]:
        return [decl.to_dict() for _, decl in cls.declarations()]

    @classmethod
    def from_values(cls, values: Optional[Mapping[str, Any]] = None) -> "ParameterSet":
        """Build a parameter set from host values keyed by parameter key"""
        kwargs: Dict[str, Any] = {}
        for key, value in (values or {}).items():
            name, decl = cls.declaration(key)
            kwargs[name] = _coerce(decl, value)
        return cls(**kwargs)

    def with_values(self, **changes) -> "ParameterSet":
        """Copy with fields replaced by field name"""
        names = {name: decl for name, decl in self.declarations()}
        for name, value in changes.items():
            if name not in names:
                raise ParameterError(f"Unknown parameter field '{name}' for {type(self).__name__}")
            changes[name] = _coerce(names[name], value)
        return dataclasses.replace(self, **changes)

    def values(self) -> Dict[str, Any]:
        """Current values keyed by parameter key"""
        return {decl.key: getattr(self, name) for name, decl in self.declarations()}


def _coerce(decl: Declaration, value):
    if isinstance(decl, Toggle):
        if not isinstance(value, bool):
            raise ParameterError(f"Toggle '{decl.key}' expects a bool, got {type(value).__name__}")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParameterError(f"Knob '{decl.key}' expects a number, got {type(value).__name__}")
    if decl.integer:
        if not math.isfinite(value):
            raise ParameterError(f"Knob '{decl.key}' expects a finite integer, got {value}")
        return int(value)
    return float(value)
