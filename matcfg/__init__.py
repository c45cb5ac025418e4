"""Typed configuration variables for neutron scattering material descriptions.

Translates short textual values ("temp=300K", "dcutoff=0.5",
"mos=0.3deg") into validated, unit-aware physics parameters, and parses the
factory selection grammar ("myfact@!notthis").

Key Principles:
- One immutable descriptor per variable, with its own domain check
- Sorted registry: identifiers and runtime name lookups can never disagree
- Validators are pure, canonical values re-validate to themselves
- A single error kind (BadInput) naming the parameter and offending value

Version: 1.0
"""

__version__ = "1.0"

from matcfg.core.errors import BadInput, CalcError
from matcfg.core.types import CrystalAxis, HKLPoint, LabAxis, OrientDir
from matcfg.config import (
    CfgValues,
    FactoryRequest,
    VarId,
    parse_factory_request,
    var_id_from_name,
    var_info,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "BadInput",
    "CalcError",
    # Types
    "OrientDir",
    "CrystalAxis",
    "HKLPoint",
    "LabAxis",
    # Configuration
    "VarId",
    "var_info",
    "var_id_from_name",
    "CfgValues",
    "FactoryRequest",
    "parse_factory_request",
]
