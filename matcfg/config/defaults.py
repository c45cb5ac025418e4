"""
Default Values for Configuration Variables

This module contains ALL default values of the configuration variables.
This is the Single Source of Truth (SSOT) for defaults.

IMPORTANT Import Policies:
    1. DO NOT use: from matcfg.config.defaults import *

    2. DO use explicit imports:
       from matcfg.config.defaults import DEFAULT_TEMP, DEFAULT_VDOSLUX

    3. DO NOT define defaults elsewhere. All defaults must be in this file.

Variables without a default value (mos, dir1, dir2, lcaxis) must be set
explicitly whenever they are used and do not appear here.
"""

from matcfg.core.constants import K_INFINITY

# =============================================================================
# General Info Defaults
# =============================================================================

# Temperature [K]
# -1.0 means 293.15K unless the input data is only valid at one temperature
DEFAULT_TEMP = -1.0

# d-spacing cutoffs [Aa]
# 0.0 selects the lower threshold automatically
DEFAULT_DCUTOFF = 0.0
DEFAULT_DCUTOFFUP = K_INFINITY

# Atomic database override (empty: no changes)
DEFAULT_ATOMDB = ""

# Factory selection for material info objects (empty: automatic)
DEFAULT_INFOFACTORY = ""

# =============================================================================
# Base Scattering Defaults
# =============================================================================

DEFAULT_COH_ELAS = True
DEFAULT_INCOH_ELAS = True
DEFAULT_SANS = True

# Inelastic model selection ("auto" leaves the choice to the code)
DEFAULT_INELAS = "auto"

# VDOS expansion luxury level
# 3: 800x400 grid, Emax=5eV, ~8MB, ~0.2s init
DEFAULT_VDOSLUX = 3

DEFAULT_SCATFACTORY = ""

# =============================================================================
# Extra Scattering Defaults
# =============================================================================

# Single crystal modelling cutoff [Aa]
DEFAULT_SCCUTOFF = 0.4

# Orientation tolerance [rad]
DEFAULT_DIRTOL = 1.0e-4

# Relative precision of the mosaic model
DEFAULT_MOSPREC = 1.0e-3

# Layered crystal model (0: recommended model)
DEFAULT_LCMODE = 0

# =============================================================================
# Absorption Defaults
# =============================================================================

DEFAULT_ABSNFACTORY = ""
