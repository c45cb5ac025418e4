"""Scattering kinematics helpers in (alpha, beta) variables.

alpha is the dimensionless momentum transfer and beta the dimensionless
energy transfer, both in units of kT.

Import Policy:
    from matcfg.core.kinematics import get_alpha_limits, convert_alpha_beta_to_delta_e_mu
"""

import math

from matcfg.core.errors import CalcError


def get_alpha_limits(ekin_div_kT: float, beta: float) -> tuple[float, float]:
    """Kinematically allowed alpha range for given energy and beta.

    Args:
        ekin_div_kT: Neutron kinetic energy divided by kT (>= 0)
        beta: Energy transfer in units of kT

    Returns:
        (alpha_min, alpha_max). When the transfer is kinematically forbidden
        the empty interval (1.0, -1.0) is returned.

    Raises:
        ValueError: If ekin_div_kT is negative or beta is NaN
    """
    if not ekin_div_kT >= 0.0:
        raise ValueError(f"ekin_div_kT must be >= 0, got {ekin_div_kT}")
    if math.isnan(beta):
        raise ValueError("beta must not be NaN")

    kk = ekin_div_kT + beta
    if not kk >= 0.0:
        return (1.0, -1.0)

    a = kk + ekin_div_kT
    b = 2.0 * math.sqrt(ekin_div_kT * kk)
    return (max(0.0, a - b), a + b)


def convert_alpha_beta_to_delta_e_mu(alpha: float, beta: float, ekin: float, kT: float) -> tuple[float, float]:
    """Convert (alpha, beta) to energy transfer and scattering cosine.

    Args:
        alpha: Momentum transfer in units of kT (>= 0)
        beta: Energy transfer in units of kT
        ekin: Initial kinetic energy [eV]
        kT: Temperature times Boltzmann constant [eV]

    Returns:
        (delta_e, mu) where delta_e = beta * kT [eV] and mu is the cosine of
        the scattering angle, clamped to [-1, 1].

    Raises:
        ValueError: If the inputs violate the preconditions
        CalcError: At beta = -ekin/kT, where mu is undefined
    """
    if not ekin >= 0.0:
        raise ValueError(f"ekin must be >= 0, got {ekin}")
    if not kT > 0.0:
        raise ValueError(f"kT must be > 0, got {kT}")
    if not alpha >= 0.0:
        raise ValueError(f"alpha must be >= 0, got {alpha}")
    if not beta * kT >= -ekin:
        raise ValueError(f"beta*kT ({beta * kT}) must be >= -ekin ({-ekin})")

    delta_e = beta * kT
    ekin_final = ekin + delta_e
    denom = 2.0 * math.sqrt(ekin * ekin_final)
    if not denom:
        raise CalcError(
            "convert_alpha_beta_to_delta_e_mu invalid for beta=-E/kT "
            "(calling code should revert to flat alpha/mu distribution near that limit)"
        )
    mu = (ekin + ekin_final - alpha * kT) / denom
    return (delta_e, min(1.0, max(-1.0, mu)))
