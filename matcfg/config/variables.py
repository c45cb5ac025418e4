"""Definitions of all configuration variables.

Each variable is one VarDef with its domain check. VARLIST holds all of them
sorted by name; the registry (matcfg.config.registry) relies on this order.

To add a new variable xxx:
    1. Add a default to matcfg.config.defaults (unless it is required).
    2. Add a _check_xxx function (if needed) and an XXX VarDef below.
    3. Insert XXX into VARLIST at its sorted position.
    4. Add a matching member to VarId in matcfg.config.registry.

Import Policy:
    from matcfg.config.variables import VARLIST, TEMP, DCUTOFF

DO NOT use: from matcfg.config.variables import *
"""

from __future__ import annotations

import math

from matcfg.config.defaults import (
    DEFAULT_ABSNFACTORY,
    DEFAULT_ATOMDB,
    DEFAULT_COH_ELAS,
    DEFAULT_DCUTOFF,
    DEFAULT_DCUTOFFUP,
    DEFAULT_DIRTOL,
    DEFAULT_INCOH_ELAS,
    DEFAULT_INELAS,
    DEFAULT_INFOFACTORY,
    DEFAULT_LCMODE,
    DEFAULT_MOSPREC,
    DEFAULT_SANS,
    DEFAULT_SCATFACTORY,
    DEFAULT_SCCUTOFF,
    DEFAULT_TEMP,
    DEFAULT_VDOSLUX,
)
from matcfg.config.descriptor import REQUIRED, VarDef
from matcfg.config.enums import UnitKind, VarGroup
from matcfg.config.factory_request import parse_factory_request
from matcfg.config.value_kinds import (
    BoolKind,
    DoubleKind,
    IntKind,
    OrientDirKind,
    StrKind,
    VectorKind,
)
from matcfg.core.atomdb import NODEFAULTS, validate_atomdb_line
from matcfg.core.constants import (
    DCUTOFF_LEGACY_AUTO,
    DCUTOFF_MAX,
    DCUTOFF_MIN,
    K_PI,
    K_PI_HALF,
    LCMODE_LIMIT,
    MOSPREC_MAX,
    MOSPREC_MIN,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    TEMPERATURE_SENTINEL,
    VDOSLUX_MAX,
    VDOSLUX_MIN,
)
from matcfg.core.errors import BadInput
from matcfg.core.types import fmt_float

_INELAS_CHARSET = frozenset("abcdefghijklmnopqrstuvwxyz_0123456789")
_INELAS_DISABLED = ("none", "0", "sterile", "false")


# =============================================================================
# Domain checks
# =============================================================================


def _check_temp(value: float) -> float:
    if not (value == TEMPERATURE_SENTINEL or TEMPERATURE_MIN <= value <= TEMPERATURE_MAX):
        raise BadInput(
            f'Out of range temperature value {fmt_float(value)}K provided for parameter "temp" '
            "(valid temperatures must be in the range 0.001K .. 1000000K)"
        )
    return value


def _check_dcutoff(value: float) -> float:
    # -1 is a legacy spelling of 0 (automatic selection)
    if value == DCUTOFF_LEGACY_AUTO or value == 0.0:
        return 0.0
    if not value > 0.0:
        raise BadInput(f"dcutoff must be >=0.0 (got {fmt_float(value)})")
    if not (DCUTOFF_MIN <= value <= DCUTOFF_MAX):
        raise BadInput(
            f"dcutoff must be 0 (for automatic selection), or in range [1e-3,1e5] (Aa) "
            f"(got {fmt_float(value)})"
        )
    return value


def _check_non_negative(name: str):
    def check(value: float) -> float:
        if not value >= 0.0:
            raise BadInput(f"{name} must be >=0.0 (got {fmt_float(value)})")
        return value

    return check


def _check_mos(value: float) -> float:
    if not value > 0.0 or value > K_PI_HALF:
        raise BadInput(f"mos must be in range (0.0,pi/2] (got {fmt_float(value)})")
    return value


def _check_dirtol(value: float) -> float:
    if not (value > 0.0 and value <= K_PI):
        raise BadInput(f"dirtol must be in range (0.0,pi] (got {fmt_float(value)})")
    return value


def _check_mosprec(value: float) -> float:
    if not value >= MOSPREC_MIN or value > MOSPREC_MAX:
        raise BadInput(f"mosprec must be in range [1e-7,1e-1] (got {fmt_float(value)})")
    return value


def _check_vdoslux(value: int) -> int:
    if value < VDOSLUX_MIN or value > VDOSLUX_MAX:
        raise BadInput(f"vdoslux must be an integral value from 0 to 5 (got {value})")
    return value


def _check_lcmode(value: int) -> int:
    if value < -LCMODE_LIMIT or value > LCMODE_LIMIT:
        raise BadInput(
            f"lcmode must be an integral value from {-LCMODE_LIMIT} to {LCMODE_LIMIT} (got {value})"
        )
    return value


def _check_lcaxis(value: tuple[float, float, float]) -> tuple[float, float, float]:
    if any(math.isinf(v) for v in value):
        raise BadInput(f'Infinities or too large values specified in lcaxis vector {value}')
    mag2 = sum(v * v for v in value)
    if not mag2 > 0.0:
        raise BadInput(f'Null vector provided for parameter "lcaxis": {value}')
    if math.isinf(mag2):
        raise BadInput(f'Infinities or too large values specified in lcaxis vector {value}')
    return value


def _check_inelas(value: str) -> str:
    if not value or not set(value) <= _INELAS_CHARSET:
        raise BadInput(f'invalid value specified for parameter inelas: "{value}"')
    if value in _INELAS_DISABLED:
        return "0"
    return value


def _check_factory(name: str):
    def check(value: str) -> str:
        try:
            return parse_factory_request(value).to_string()
        except BadInput as err:
            raise BadInput(f"Syntax error in {name} parameter. Error is: {err}") from err

    return check


def _check_atomdb(value: str) -> str:
    lines: list[str] = []
    for piece in value.split("@"):
        words = piece.replace(":", " ").split()
        if not words:
            continue
        line = ":".join(words)
        try:
            validate_atomdb_line(words)
        except BadInput as err:
            raise BadInput(
                f'Invalid entry in atomdb cfg parameter in the line: "{line}". Error is: {err}'
            ) from err
        if line == NODEFAULTS and lines:
            raise BadInput('Invalid entry in atomdb cfg parameter ("nodefaults" must be the first line).')
        lines.append(line)
    return "@".join(lines)


# =============================================================================
# Shared description text
# =============================================================================

_FACTORY_DESCRIPTION = (
    "Lets experts bypass the usual factory selection logic for {} objects."
    " A factory is selected by giving its name, or excluded by prefixing the"
    ' name with "!". Multiple entries are separated by "@" and at most one'
    " non-excluded entry may appear."
)

_ORIENTATION_SYNTAX = (
    ' The direction is given in both the crystal frame (c1,c2,c3) and the lab'
    ' frame (l1,l2,l3) using the format "@crys:c1,c2,c3@lab:l1,l2,l3". The'
    ' crystal direction may instead be given as the normal of an HKL plane by'
    ' writing "@crys_hkl:" in place of "@crys:".'
)


# =============================================================================
# Variables
# =============================================================================

ABSNFACTORY = VarDef(
    name="absnfactory",
    group=VarGroup.ABSORPTION,
    kind=StrKind(),
    description=_FACTORY_DESCRIPTION.format("Absorption"),
    default=DEFAULT_ABSNFACTORY,
    check=_check_factory("absnfactory"),
)

ATOMDB = VarDef(
    name="atomdb",
    group=VarGroup.INFO,
    kind=StrKind(),
    description=(
        "Modify atomic definitions where supported (in practice NCMAT data)."
        " The syntax is that of @ATOMDB sections in NCMAT files, except that"
        ' ":" characters count as whitespace and "@" characters separate lines.'
        " The lines are appended to any @ATOMDB section already present in the"
        ' input data. An initial line holding only the word "nodefaults" disables'
        " the internal database of elements and isotopes."
    ),
    default=DEFAULT_ATOMDB,
    check=_check_atomdb,
)

COH_ELAS = VarDef(
    name="coh_elas",
    group=VarGroup.SCATTER_BASE,
    kind=BoolKind(),
    description=(
        "Include coherent elastic components for solid materials. For"
        " crystalline materials this is essentially Bragg diffraction."
    ),
    default=DEFAULT_COH_ELAS,
)

DCUTOFF = VarDef(
    name="dcutoff",
    group=VarGroup.INFO,
    kind=DoubleKind(UnitKind.LENGTH),
    description=(
        "Crystal planes with d-spacing below this value are ignored. The value 0"
        " selects the threshold automatically. For backwards compatibility -1 is"
        " treated as 0."
    ),
    default=DEFAULT_DCUTOFF,
    check=_check_dcutoff,
)

DCUTOFFUP = VarDef(
    name="dcutoffup",
    group=VarGroup.INFO,
    kind=DoubleKind(UnitKind.LENGTH),
    description="Crystal planes with d-spacing above this value are ignored.",
    default=DEFAULT_DCUTOFFUP,
    check=_check_non_negative("dcutoffup"),
)

DIR1 = VarDef(
    name="dir1",
    group=VarGroup.SCATTER_EXTRA,
    kind=OrientDirKind(),
    description=(
        "Primary orientation axis of a single crystal." + _ORIENTATION_SYNTAX
        + " Requires mos and dir2 to be set as well."
    ),
)

DIR2 = VarDef(
    name="dir2",
    group=VarGroup.SCATTER_EXTRA,
    kind=OrientDirKind(),
    description=(
        "Secondary orientation axis of a single crystal." + _ORIENTATION_SYNTAX
        + " The opening angle between dir1 and dir2 must be nonzero and agree"
        " between crystal and lab frames within dirtol. Components parallel to"
        " dir1 are ignored. Requires mos and dir1 to be set as well."
    ),
)

DIRTOL = VarDef(
    name="dirtol",
    group=VarGroup.SCATTER_EXTRA,
    kind=DoubleKind(UnitKind.ANGLE),
    description=(
        "Tolerance on the secondary direction of a single crystal orientation"
        " (see dir2). A value of 180deg sets up a monochromator where only the"
        " primary direction matters. Requires mos, dir1 and dir2 to be set."
    ),
    default=DEFAULT_DIRTOL,
    check=_check_dirtol,
)

INCOH_ELAS = VarDef(
    name="incoh_elas",
    group=VarGroup.SCATTER_BASE,
    kind=BoolKind(),
    description="Include incoherent elastic scattering components for solid materials.",
    default=DEFAULT_INCOH_ELAS,
)

INELAS = VarDef(
    name="inelas",
    group=VarGroup.SCATTER_BASE,
    kind=StrKind(),
    description=(
        'Choice of inelastic scattering model. The default "auto" leaves the'
        ' choice to the code, while "none", "0", "false" and "sterile" all'
        " disable inelastic scattering. Other recognised values are"
        ' "external", "dyninfo", "vdosdebye" and "freegas"; "auto" picks the'
        " first possible of those in that order."
    ),
    default=DEFAULT_INELAS,
    check=_check_inelas,
)

INFOFACTORY = VarDef(
    name="infofactory",
    group=VarGroup.INFO,
    kind=StrKind(),
    description=_FACTORY_DESCRIPTION.format("material Info"),
    default=DEFAULT_INFOFACTORY,
    check=_check_factory("infofactory"),
)

LCAXIS = VarDef(
    name="lcaxis",
    group=VarGroup.SCATTER_EXTRA,
    kind=VectorKind(),
    description=(
        "Symmetry axis of anisotropic layered crystals such as pyrolytic"
        ' graphite, in direct lattice coordinates (e.g. "0,0,1"). Together with'
        " an orientation (dir1, dir2) this selects the layered single crystal"
        " model for Bragg diffraction. The vector is not normalised."
    ),
    check=_check_lcaxis,
)

LCMODE = VarDef(
    name="lcmode",
    group=VarGroup.SCATTER_EXTRA,
    kind=IntKind(),
    description=(
        "Model used for layered crystals (ignored unless lcaxis, dir1 and dir2"
        " are set). 0 selects the recommended fast and accurate model. A"
        " positive N selects a slow reference model sampling N crystallite"
        " orientations. A negative -N resamples N random crystallites on every"
        " cross section call and is not safe for multi-threaded use."
    ),
    default=DEFAULT_LCMODE,
    check=_check_lcmode,
)

MOS = VarDef(
    name="mos",
    group=VarGroup.SCATTER_EXTRA,
    kind=DoubleKind(UnitKind.ANGLE),
    description=(
        "Mosaic FWHM spread of mosaic single crystals. Requires dir1 and dir2"
        " to be set as well."
    ),
    check=_check_mos,
)

MOSPREC = VarDef(
    name="mosprec",
    group=VarGroup.SCATTER_EXTRA,
    kind=DoubleKind(UnitKind.PURE_NUMBER),
    description="Approximate relative numerical precision of the mosaic model in single crystals.",
    default=DEFAULT_MOSPREC,
    check=_check_mosprec,
)

SANS = VarDef(
    name="sans",
    group=VarGroup.SCATTER_BASE,
    kind=BoolKind(),
    description="Enable SANS models.",
    default=DEFAULT_SANS,
)

SCATFACTORY = VarDef(
    name="scatfactory",
    group=VarGroup.SCATTER_BASE,
    kind=StrKind(),
    description=_FACTORY_DESCRIPTION.format("Scatter"),
    default=DEFAULT_SCATFACTORY,
    check=_check_factory("scatfactory"),
)

SCCUTOFF = VarDef(
    name="sccutoff",
    group=VarGroup.SCATTER_EXTRA,
    kind=DoubleKind(UnitKind.LENGTH),
    description=(
        "Single crystal modelling cutoff. Planes with d-spacing below this value"
        " are treated as having infinite mosaicity (as in a powder). 0 disables"
        " the approximation."
    ),
    default=DEFAULT_SCCUTOFF,
    check=_check_non_negative("sccutoff"),
)

TEMP = VarDef(
    name="temp",
    group=VarGroup.INFO,
    kind=DoubleKind(UnitKind.TEMPERATURE),
    description=(
        "Temperature of the material. The special value -1 means 293.15K, unless"
        " the input data is only valid at one temperature, which is then used."
    ),
    default=DEFAULT_TEMP,
    check=_check_temp,
)

VDOSLUX = VarDef(
    name="vdoslux",
    group=VarGroup.SCATTER_BASE,
    kind=IntKind(),
    description=(
        "Luxury level when expanding phonon spectra (VDOS) into scattering"
        " kernels, affecting grid size, the energy above which free-gas"
        " extrapolation is used, memory and initialisation time:"
        " 0 (100x50, Emax=0.5eV, 0.1MB), 1 (200x100, Emax=1eV, 0.5MB),"
        " 2 (400x200, Emax=3eV, 2MB), 3 (800x400, Emax=5eV, 8MB),"
        " 4 (1600x800, Emax=8eV, 30MB), 5 (3200x1600, Emax=12eV, 125MB)."
        " When the VDOS is approximated from a Debye temperature the level"
        " used is 3 lower (but at least 0)."
    ),
    default=DEFAULT_VDOSLUX,
    check=_check_vdoslux,
)

# Sorted by name. Position in this tuple is the variable's VarId.
VARLIST = (
    ABSNFACTORY,
    ATOMDB,
    COH_ELAS,
    DCUTOFF,
    DCUTOFFUP,
    DIR1,
    DIR2,
    DIRTOL,
    INCOH_ELAS,
    INELAS,
    INFOFACTORY,
    LCAXIS,
    LCMODE,
    MOS,
    MOSPREC,
    SANS,
    SCATFACTORY,
    SCCUTOFF,
    TEMP,
    VDOSLUX,
)

# Variables without default value (for documentation, see VarDef.has_default)
REQUIRED_VARIABLES = tuple(v.name for v in VARLIST if v.default is REQUIRED)
