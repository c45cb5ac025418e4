"""Core types, constants and helpers used by the configuration layer."""

from matcfg.core.errors import BadInput, CalcError
from matcfg.core.types import (
    CrystalAxis,
    DensityState,
    DensityStateType,
    HKLPoint,
    LabAxis,
    OrientDir,
    fmt_float,
)

__all__ = [
    "BadInput",
    "CalcError",
    "CrystalAxis",
    "HKLPoint",
    "LabAxis",
    "OrientDir",
    "DensityState",
    "DensityStateType",
    "fmt_float",
]
