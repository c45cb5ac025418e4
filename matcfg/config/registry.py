"""Registry of configuration variables and name resolution.

The registry is the sorted tuple of all VarDef objects (VARLIST). A
variable's position in it is its identifier, exposed as the VarId enum.

Name resolution uses binary search over the sorted names. VarId members are
computed by static_var_index() and runtime lookups by var_id_from_name(); both
go through the same search over the same table, so a VarId always equals what
its name resolves to at runtime.

Lifecycle:
    The registry is built once, when this module is first imported (Python's
    import lock orders that before any use from other threads), and is never
    modified afterwards. Concurrent readers need no locking.

Usage:
    from matcfg.config.registry import VarId, var_info, var_id_from_name

    var_id_from_name("temp")        # -> VarId.temp
    var_info(VarId.temp).parse("300K")
"""

from __future__ import annotations

import bisect
import logging
from enum import IntEnum
from typing import Iterator, Optional, Sequence

from matcfg.config.descriptor import VarDef
from matcfg.config.enums import VarGroup
from matcfg.config.variables import VARLIST

logger = logging.getLogger(__name__)


def _find_name(names: Sequence[str], name: str) -> Optional[int]:
    """Binary search for name in a sorted sequence of names."""
    idx = bisect.bisect_left(names, name)
    if idx < len(names) and names[idx] == name:
        return idx
    return None


class VarRegistry:
    """Immutable, name-sorted collection of variable definitions.

    Args:
        varlist: Variable definitions, strictly sorted by name

    Raises:
        RuntimeError: If names are not strictly increasing (unsorted or
            duplicated entries)
    """

    def __init__(self, varlist: Sequence[VarDef]):
        self._varlist = tuple(varlist)
        self._names = tuple(v.name for v in self._varlist)
        for prev, curr in zip(self._names, self._names[1:]):
            if not prev < curr:
                kind = "Duplicate" if prev == curr else "Unsorted"
                raise RuntimeError(f"{kind} variable names in registry: {prev!r}, {curr!r}")

    def __len__(self) -> int:
        return len(self._varlist)

    def __iter__(self) -> Iterator[VarDef]:
        return iter(self._varlist)

    def __getitem__(self, index: int) -> VarDef:
        return self._varlist[index]

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def index_of(self, name: str) -> Optional[int]:
        """Index of the variable with exactly this name, or None."""
        return _find_name(self._names, name)


REGISTRY = VarRegistry(VARLIST)


def static_var_index(name: str) -> int:
    """Index of a variable whose name is known when the code is written.

    Raises:
        RuntimeError: If no such variable exists
    """
    idx = REGISTRY.index_of(name)
    if idx is None:
        raise RuntimeError(f"Unknown configuration variable name: {name!r}")
    return idx


class VarId(IntEnum):
    """Symbolic identifiers of the configuration variables.

    Values are positions in REGISTRY. They are only meaningful within one
    version of the package and must not be persisted.
    """

    absnfactory = static_var_index("absnfactory")
    atomdb = static_var_index("atomdb")
    coh_elas = static_var_index("coh_elas")
    dcutoff = static_var_index("dcutoff")
    dcutoffup = static_var_index("dcutoffup")
    dir1 = static_var_index("dir1")
    dir2 = static_var_index("dir2")
    dirtol = static_var_index("dirtol")
    incoh_elas = static_var_index("incoh_elas")
    inelas = static_var_index("inelas")
    infofactory = static_var_index("infofactory")
    lcaxis = static_var_index("lcaxis")
    lcmode = static_var_index("lcmode")
    mos = static_var_index("mos")
    mosprec = static_var_index("mosprec")
    sans = static_var_index("sans")
    scatfactory = static_var_index("scatfactory")
    sccutoff = static_var_index("sccutoff")
    temp = static_var_index("temp")
    vdoslux = static_var_index("vdoslux")


# Every registered variable must have exactly one VarId member (IntEnum would
# silently turn a repeated value into an alias), named like the variable
if len(VarId.__members__) != len(REGISTRY) or sorted(VarId) != list(range(len(REGISTRY))):
    raise RuntimeError("VarId members do not cover the registry exactly once")
for _member_name, _member in VarId.__members__.items():
    if REGISTRY[_member].name != _member_name:
        raise RuntimeError(f"VarId.{_member_name} refers to variable {REGISTRY[_member].name!r}")
del _member_name, _member

logger.debug(f"Configuration variable registry built with {len(REGISTRY)} variables")


def var_id_from_name(name: str) -> Optional[VarId]:
    """Resolve a variable name at runtime.

    Args:
        name: Variable name (exact, case sensitive, no trimming)

    Returns:
        Matching VarId, or None if no variable has this name
    """
    if not isinstance(name, str):
        return None
    idx = REGISTRY.index_of(name)
    return None if idx is None else VarId(idx)


def var_info(var_id: VarId) -> VarDef:
    """Definition of a variable."""
    return REGISTRY[int(var_id)]


def var_name(var_id: VarId) -> str:
    return REGISTRY[int(var_id)].name


def var_group(var_id: VarId) -> VarGroup:
    return REGISTRY[int(var_id)].group


def all_var_ids() -> list[VarId]:
    """All identifiers in registry (name) order."""
    return list(VarId)
