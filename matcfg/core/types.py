"""Value types carried by configuration variables.

Orientation descriptors for single crystals and material density states,
together with their compact textual forms.

Import Policy:
    from matcfg.core.types import OrientDir, CrystalAxis, HKLPoint, LabAxis
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

import numpy as np


def fmt_float(value: float) -> str:
    """Format a float in its shortest round-trip form.

    Integral values are written without a trailing ".0" so that "300" and
    "300.0" share one canonical text.

    Args:
        value: Number to format

    Returns:
        Compact string representation (e.g. "300", "0.5", "1e-07", "inf")
    """
    value = float(value)
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


# =============================================================================
# Three-vectors
# =============================================================================


@dataclass(frozen=True)
class _Axis:
    """Immutable 3-vector base class."""

    x: float
    y: float
    z: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]):
        if len(values) != 3:
            raise ValueError(f"{cls.__name__} needs exactly 3 components, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        return np.array(self.as_tuple(), dtype=np.float64)

    def mag2(self) -> float:
        """Squared magnitude (may overflow to inf for huge components)."""
        arr = self.as_array()
        with np.errstate(over="ignore"):
            return float(np.dot(arr, arr))

    def to_str(self) -> str:
        return ",".join(fmt_float(v) for v in self.as_tuple())


class CrystalAxis(_Axis):
    """Direction in the crystal frame (direct lattice coordinates)."""


class HKLPoint(_Axis):
    """Direction given as the normal of an HKL plane."""


class LabAxis(_Axis):
    """Direction in the laboratory frame."""


@dataclass(frozen=True)
class OrientDir:
    """One single-crystal orientation constraint.

    Associates a direction in the crystal frame (either a crystal axis or an
    HKL plane normal) with a direction in the laboratory frame.

    Attributes:
        crystal: Direction in the crystal frame
        lab: Corresponding direction in the lab frame
    """

    crystal: Union[CrystalAxis, HKLPoint]
    lab: LabAxis

    def __str__(self) -> str:
        if isinstance(self.crystal, HKLPoint):
            prefix = "@crys_hkl:"
        else:
            prefix = "@crys:"
        return f"{prefix}{self.crystal.to_str()}@lab:{self.lab.to_str()}"


# =============================================================================
# Density state
# =============================================================================


class DensityStateType(Enum):
    """How a DensityState value must be interpreted.

    Options:
        SCALEFACTOR: Relative scaling of the density found in the input data
        DENSITY: Absolute mass density [g/cm3]
        NUMBERDENSITY: Absolute number density [atoms/Aa3]
    """

    SCALEFACTOR = "x"
    DENSITY = "gcm3"
    NUMBERDENSITY = "perAa3"


@dataclass(frozen=True)
class DensityState:
    """Material density override, formatted like "2x" or "2.7gcm3"."""

    type: DensityStateType
    value: float

    def __post_init__(self):
        if not (math.isfinite(self.value) and self.value > 0.0):
            raise ValueError(f"Density value must be finite and positive: {self.value}")

    def __str__(self) -> str:
        return f"{fmt_float(self.value)}{self.type.value}"
