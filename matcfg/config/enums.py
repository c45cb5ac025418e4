"""
Configuration Enums for matcfg

This module defines the enumeration types used by the configuration variables.

Import Policy:
    from matcfg.config.enums import VarGroup, UnitKind, VarListMode

DO NOT use: from matcfg.config.enums import *
"""

from enum import Enum


class VarGroup(Enum):
    """Category of a configuration variable.

    Used purely for grouping and documentation, it has no effect on parsing
    or validation.

    Options:
        INFO: General material information (temperature, d-spacing cutoffs, ...)
        SCATTER_BASE: Base scattering options (elastic/inelastic toggles, ...)
        SCATTER_EXTRA: Extra scattering options (single crystal orientation, ...)
        ABSORPTION: Absorption options
    """
    INFO = "general info"
    SCATTER_BASE = "base scattering"
    SCATTER_EXTRA = "extra scattering"
    ABSORPTION = "absorption"


class UnitKind(Enum):
    """Physical dimension of a floating point variable.

    Options:
        TEMPERATURE: Base unit Kelvin, also accepts C and F suffixes
        LENGTH: Base unit Angstrom (Aa), also accepts nm, mm, cm and m
        ANGLE: Base unit radian (rad), also accepts deg, arcmin and arcsec
        PURE_NUMBER: Dimensionless, no unit suffix allowed
    """
    TEMPERATURE = "K"
    LENGTH = "Aa"
    ANGLE = "rad"
    PURE_NUMBER = ""


class VarListMode(Enum):
    """Output format of the variable list report.

    Options:
        TXT_SHORT: One line per variable
        TXT_FULL: Multi-line entries including descriptions
        JSON: Machine readable list of objects
    """
    TXT_SHORT = "short"
    TXT_FULL = "full"
    JSON = "json"
