"""Value kinds of configuration variables.

A value kind knows how to turn a raw string into a typed Python value, how
to coerce an already typed value, and how to write a value back in its
canonical string form. Per-variable domain checks live on the variable
descriptors (see matcfg.config.descriptor), not here.

Kinds:
    DoubleKind(unit): float, optional unit suffix ("300K", "0.5deg")
    IntKind: int
    BoolKind: bool ("true"/"false", "1"/"0", "yes"/"no")
    StrKind: str, normalised by the variable's own check
    VectorKind: tuple of 3 floats ("0,0,1")
    OrientDirKind: OrientDir ("@crys:1,0,0@lab:0,0,1")

Import Policy:
    from matcfg.config.value_kinds import DoubleKind, IntKind, BoolKind

DO NOT use: from matcfg.config.value_kinds import *
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any

import numpy as np

from matcfg.config.enums import UnitKind
from matcfg.config.units import parse_number, parse_quantity
from matcfg.core.errors import BadInput
from matcfg.core.types import CrystalAxis, HKLPoint, LabAxis, OrientDir, fmt_float

_INT_PATTERN = re.compile(r"^[+-]?[0-9]+$")

# Integer values must fit a signed 64-bit integer
_INT_BITS = 63

_BOOL_WORDS = {
    "true": True,
    "1": True,
    "yes": True,
    "false": False,
    "0": False,
    "no": False,
}


def _invalid(name: str, raw: Any, reason: str = "") -> BadInput:
    msg = f'Invalid value specified for parameter "{name}": "{raw}"'
    if reason:
        msg += f" ({reason})"
    return BadInput(msg)


def _is_real_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _to_float(name: str, value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        # Python ints beyond the float range (also too long to print in full)
        raise BadInput(
            f'Invalid value specified for parameter "{name}": integer with '
            f"{int(value).bit_length()} bits (value too large)"
        ) from None


class ValueKind:
    """Base class of all value kinds."""

    label = "value"

    @property
    def units(self) -> str:
        """Base unit label (empty if dimensionless)."""
        return ""

    def coerce(self, name: str, value: Any) -> Any:
        raise NotImplementedError

    def from_str(self, name: str, raw: str) -> Any:
        raise NotImplementedError

    def to_str(self, value: Any) -> str:
        return str(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DoubleKind(ValueKind):
    """Floating point value with a physical dimension."""

    label = "double"

    def __init__(self, unit: UnitKind = UnitKind.PURE_NUMBER):
        self.unit = unit

    @property
    def units(self) -> str:
        return self.unit.value

    def coerce(self, name: str, value: Any) -> float:
        if not _is_real_number(value):
            raise _invalid(name, value, "expected a number")
        value = _to_float(name, value)
        if math.isnan(value):
            raise _invalid(name, value, "NaN is not allowed")
        return value

    def from_str(self, name: str, raw: str) -> float:
        value = parse_quantity(raw, self.unit)
        if value is None:
            raise _invalid(name, raw)
        return value

    def to_str(self, value: float) -> str:
        return fmt_float(value)

    def __repr__(self) -> str:
        return f"DoubleKind({self.unit})"


class IntKind(ValueKind):
    """Integral value."""

    label = "int"

    def coerce(self, name: str, value: Any) -> int:
        if isinstance(value, (bool, np.bool_)):
            raise _invalid(name, value, "expected an integer")
        if isinstance(value, numbers.Integral):
            result = int(value)
        elif isinstance(value, numbers.Real) and _to_float(name, value).is_integer():
            result = int(value)
        else:
            raise _invalid(name, value, "expected an integer")
        if result.bit_length() > _INT_BITS:
            raise BadInput(
                f'Invalid value specified for parameter "{name}": integer with '
                f"{result.bit_length()} bits (value too large)"
            )
        return result

    def from_str(self, name: str, raw: str) -> int:
        text = raw.strip()
        if not _INT_PATTERN.fullmatch(text):
            raise _invalid(name, raw, "expected an integer")
        # 2**63 has 19 digits
        if len(text.lstrip("+-").lstrip("0")) > 19:
            raise _invalid(name, raw, "value too large")
        return int(text)


class BoolKind(ValueKind):
    """Boolean flag."""

    label = "bool"

    def coerce(self, name: str, value: Any) -> bool:
        if isinstance(value, (bool, np.bool_)):
            return bool(value)
        raise _invalid(name, value, "expected a boolean")

    def from_str(self, name: str, raw: str) -> bool:
        text = raw.strip()
        if text not in _BOOL_WORDS:
            raise _invalid(name, raw, "expected true or false")
        return _BOOL_WORDS[text]

    def to_str(self, value: bool) -> str:
        return "true" if value else "false"


class StrKind(ValueKind):
    """String value. Syntax and normalisation belong to the variable's check."""

    label = "str"

    def coerce(self, name: str, value: Any) -> str:
        if not isinstance(value, str):
            raise _invalid(name, value, "expected a string")
        return value

    def from_str(self, name: str, raw: str) -> str:
        return raw


def _parse_triplet(text: str) -> tuple[float, float, float] | None:
    parts = text.split(",")
    if len(parts) != 3:
        return None
    values = [parse_number(p) for p in parts]
    if any(v is None for v in values):
        return None
    return (values[0], values[1], values[2])


class VectorKind(ValueKind):
    """Three-component vector, given as "x,y,z"."""

    label = "vector"

    def coerce(self, name: str, value: Any) -> tuple[float, float, float]:
        if isinstance(value, str):
            raise _invalid(name, value, "expected three numbers")
        try:
            items = list(value)
        except TypeError:
            raise _invalid(name, value, "expected three numbers") from None
        if len(items) != 3 or not all(_is_real_number(v) for v in items):
            raise _invalid(name, value, "expected three numbers")
        vec = tuple(_to_float(name, v) for v in items)
        if any(math.isnan(v) for v in vec):
            raise _invalid(name, value, "NaN is not allowed")
        return vec

    def from_str(self, name: str, raw: str) -> tuple[float, float, float]:
        vec = _parse_triplet(raw.strip())
        if vec is None:
            raise _invalid(name, raw, 'expected format "x,y,z"')
        return vec

    def to_str(self, value: tuple[float, float, float]) -> str:
        return ",".join(fmt_float(v) for v in value)


class OrientDirKind(ValueKind):
    """Single crystal orientation, "@crys:c1,c2,c3@lab:l1,l2,l3".

    The crystal direction can alternatively be given as an HKL plane normal
    with "@crys_hkl:" instead of "@crys:".
    """

    label = "orientdir"

    _PATTERN = re.compile(r"^@\s*(crys|crys_hkl)\s*:([^@]*)@\s*lab\s*:([^@]*)$")

    def coerce(self, name: str, value: Any) -> OrientDir:
        if not isinstance(value, OrientDir):
            raise _invalid(name, value, "expected an OrientDir")
        for axis in (value.crystal, value.lab):
            arr = axis.as_array()
            if not np.all(np.isfinite(arr)):
                raise BadInput(f'Infinite or NaN components in "{name}" direction: {value}')
            if not axis.mag2() > 0.0:
                raise BadInput(f'Null vector provided in "{name}" direction: {value}')
            if math.isinf(axis.mag2()):
                raise BadInput(f'Too large values specified in "{name}" direction: {value}')
        return value

    def from_str(self, name: str, raw: str) -> OrientDir:
        # Whitespace is allowed around tokens only, never inside a number
        m = self._PATTERN.fullmatch(raw.strip())
        if m is None:
            raise _invalid(name, raw, 'expected format "@crys:c1,c2,c3@lab:l1,l2,l3"')
        crys = _parse_triplet(m.group(2))
        lab = _parse_triplet(m.group(3))
        if crys is None or lab is None:
            raise _invalid(name, raw, "expected three numbers per direction")
        crystal_cls = HKLPoint if m.group(1) == "crys_hkl" else CrystalAxis
        return self.coerce(name, OrientDir(crystal_cls.from_sequence(crys), LabAxis.from_sequence(lab)))

    def to_str(self, value: OrientDir) -> str:
        return str(value)
