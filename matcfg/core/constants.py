"""Numerical and unit constants for configuration variables.

This module is the Single Source of Truth (SSOT) for the mathematical
constants, unit conversion factors and validation bounds used by the
configuration variables. Import from here rather than defining constants
locally.

Import Policy:
    from matcfg.core.constants import K_PI, K_PI_HALF, K_INFINITY

DO NOT use: from matcfg.core.constants import *
"""

import math

# =============================================================================
# Mathematical Constants
# =============================================================================

K_PI = math.pi
K_PI_HALF = 0.5 * math.pi
K_INFINITY = math.inf

# =============================================================================
# Unit Conversion Factors (to base units)
# =============================================================================

# Temperature: base unit is Kelvin
CELSIUS_OFFSET = 273.15  # [K] at 0 degC

# Length: base unit is Angstrom (Aa)
ANGSTROM_PER_NM = 10.0
ANGSTROM_PER_MM = 1.0e7
ANGSTROM_PER_CM = 1.0e8
ANGSTROM_PER_M = 1.0e10

# Angle: base unit is radian
RAD_PER_DEG = math.pi / 180.0
RAD_PER_ARCMIN = RAD_PER_DEG / 60.0
RAD_PER_ARCSEC = RAD_PER_ARCMIN / 60.0

# =============================================================================
# Validation Bounds
# =============================================================================

# Temperature [K]. -1.0 is the "use data default" sentinel.
TEMPERATURE_SENTINEL = -1.0
TEMPERATURE_MIN = 0.001
TEMPERATURE_MAX = 1.0e6

# d-spacing lower cutoff [Aa]. -1.0 is a legacy alias of 0.0 (auto).
DCUTOFF_LEGACY_AUTO = -1.0
DCUTOFF_MIN = 1.0e-3
DCUTOFF_MAX = 1.0e5

# Mosaic precision (dimensionless)
MOSPREC_MIN = 1.0e-7
MOSPREC_MAX = 1.0e-1

# VDOS expansion luxury levels
VDOSLUX_MIN = 0
VDOSLUX_MAX = 5

# Layered crystal mode: number of sampled crystallites (sign selects model)
LCMODE_LIMIT = 4000000000

# Relative tolerance for mixture fractions in atomic database lines
ATOMDB_FRACTION_TOLERANCE = 1.0e-10
