"""
Configuration Advisories

Values accepted by the variable checks can still be poor choices (very slow
or memory hungry models, models that are unsafe with threads). This module
reports such choices as warnings. Each advisory looks at one variable only.

Import Policy:
    from matcfg.config.validation import warn_if_unsafe, ConfigurationWarning

DO NOT use: from matcfg.config.validation import *
"""

import warnings
from typing import List

from matcfg.config.cfg_data import CfgValues
from matcfg.config.registry import VarId
from matcfg.core.constants import VDOSLUX_MAX


class ConfigurationWarning(Warning):
    """Warning for potentially unsafe configuration choices."""

    pass


def warn_if_unsafe(cfg: CfgValues) -> List[str]:
    """Check for potentially unsafe configuration choices.

    Warnings are issued via Python's warnings module.

    Args:
        cfg: Configuration values to check

    Returns:
        List of warning messages (empty if no warnings)
    """
    warnings_list = []

    # Check 1: Highest VDOS luxury level (large kernels)
    vdoslux = cfg.get(VarId.vdoslux)
    if vdoslux == VDOSLUX_MAX:
        warnings_list.append(
            f"vdoslux={vdoslux} builds 3200x1600 scattering kernels (~125MB, ~5s init per element). "
            "Consider vdoslux<=4 unless the extra precision is needed."
        )

    # Check 2: Layered crystal models
    lcmode = cfg.get(VarId.lcmode)
    if lcmode < 0:
        warnings_list.append(
            f"lcmode={lcmode} resamples crystallite orientations on every cross section call. "
            "This model is NOT safe for multi-threaded use."
        )
    elif lcmode > 0:
        warnings_list.append(
            f"lcmode={lcmode} selects the slow reference model for layered crystals. "
            "Use lcmode=0 for production runs."
        )

    for warning_msg in warnings_list:
        warnings.warn(warning_msg, ConfigurationWarning, stacklevel=2)

    return warnings_list
