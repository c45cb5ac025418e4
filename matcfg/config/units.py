"""Unit suffix handling for floating point configuration values.

Values are converted to the base unit of their UnitKind before validation,
so that all bounds refer to base units (K, Aa, rad).

Usage:
    from matcfg.config.units import parse_quantity
    parse_quantity("0.5deg", UnitKind.ANGLE)   # -> 0.00872...
"""

from __future__ import annotations

import math
import re
from typing import Callable

from matcfg.config.enums import UnitKind
from matcfg.core.constants import (
    ANGSTROM_PER_CM,
    ANGSTROM_PER_M,
    ANGSTROM_PER_MM,
    ANGSTROM_PER_NM,
    CELSIUS_OFFSET,
    RAD_PER_ARCMIN,
    RAD_PER_ARCSEC,
    RAD_PER_DEG,
)

_NUMBER_PATTERN = re.compile(r"^[+-]?(([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|inf)$")

# Suffix -> conversion to base unit, per unit kind
UNIT_CONVERTERS: dict[UnitKind, dict[str, Callable[[float], float]]] = {
    UnitKind.TEMPERATURE: {
        "K": lambda v: v,
        "C": lambda v: v + CELSIUS_OFFSET,
        "F": lambda v: (v - 32.0) * 5.0 / 9.0 + CELSIUS_OFFSET,
    },
    UnitKind.LENGTH: {
        "Aa": lambda v: v,
        "nm": lambda v: v * ANGSTROM_PER_NM,
        "mm": lambda v: v * ANGSTROM_PER_MM,
        "cm": lambda v: v * ANGSTROM_PER_CM,
        "m": lambda v: v * ANGSTROM_PER_M,
    },
    UnitKind.ANGLE: {
        "rad": lambda v: v,
        "deg": lambda v: v * RAD_PER_DEG,
        "arcmin": lambda v: v * RAD_PER_ARCMIN,
        "arcsec": lambda v: v * RAD_PER_ARCSEC,
    },
    UnitKind.PURE_NUMBER: {},
}


def unit_suffixes(unit: UnitKind) -> list[str]:
    """Accepted suffixes for a unit kind, base unit first."""
    return list(UNIT_CONVERTERS[unit])


def parse_number(text: str) -> float | None:
    """Parse a plain decimal number.

    Accepts an optional sign, an optional exponent and "inf". Rejects NaN,
    digit separators and embedded whitespace.

    Args:
        text: Number text

    Returns:
        The parsed float, or None if text is not a number
    """
    text = text.strip()
    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    return float(text)


def parse_quantity(text: str, unit: UnitKind) -> float | None:
    """Parse a number with an optional unit suffix into base units.

    Args:
        text: Value text such as "300", "20C", "0.5Aa" or "10arcmin"
        unit: Physical dimension of the value

    Returns:
        Value in base units, or None if text can not be parsed
    """
    text = text.strip()
    converters = UNIT_CONVERTERS[unit]
    # Longest suffix first so that "mm" wins over "m"
    for suffix in sorted(converters, key=len, reverse=True):
        if text.endswith(suffix):
            value = parse_number(text[: -len(suffix)])
            if value is None:
                return None
            result = converters[suffix](value)
            return None if math.isnan(result) else result
    return parse_number(text)
