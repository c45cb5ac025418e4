"""Container of configuration variable values.

CfgValues stores the values that were set explicitly, keyed by VarId, and
falls back to the registered defaults for everything else. It validates each
value on its own; checks involving several variables belong to the code
consuming the values.

Usage:
    from matcfg.config.cfg_data import CfgValues
    from matcfg.config.registry import VarId

    cfg = CfgValues.from_string("temp=20C;dcutoff=0.5;inelas=none")
    cfg.get(VarId.temp)      # -> 293.15
    cfg.get(VarId.vdoslux)   # -> 3 (default)
    cfg.to_string()          # -> "dcutoff=0.5;inelas=0;temp=293.15"
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Union

from matcfg.config.registry import VarId, var_id_from_name, var_info
from matcfg.core.errors import BadInput

logger = logging.getLogger(__name__)

VarRef = Union[VarId, str]


def resolve_var(var: VarRef) -> VarId:
    """Turn a VarId or a variable name into a VarId.

    Raises:
        BadInput: If the name is unknown
    """
    if isinstance(var, VarId):
        return var
    var_id = var_id_from_name(var)
    if var_id is None:
        raise BadInput(f'Unknown configuration parameter: "{var}"')
    return var_id


def split_assignments(text: str) -> list[tuple[str, str]]:
    """Split "name1=value1;name2=value2" into (name, raw value) pairs.

    Pieces are separated by ";", surrounding whitespace is removed and empty
    pieces are skipped. Values are returned as raw strings.

    Raises:
        BadInput: If a piece has no "=" or an empty name
    """
    result = []
    for piece in text.split(";"):
        piece = piece.strip()
        if not piece:
            continue
        name, sep, raw = piece.partition("=")
        name = name.strip()
        if not sep or not name:
            raise BadInput(f'Invalid assignment "{piece}" (expected name=value)')
        result.append((name, raw.strip()))
    return result


class CfgValues:
    """Explicitly set configuration values plus access to defaults."""

    def __init__(self):
        self._values: dict[VarId, Any] = {}

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> CfgValues:
        """Create from an assignment string such as "temp=300;mos=0.5deg".

        Later assignments of the same variable override earlier ones.
        """
        cfg = cls()
        for name, raw in split_assignments(text):
            cfg.set_from_string(name, raw)
        return cfg

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CfgValues:
        """Create from a {name: value} mapping.

        String values are parsed, anything else is validated as a typed value.
        """
        cfg = cls()
        for name, value in mapping.items():
            if isinstance(value, str):
                cfg.set_from_string(name, value)
            else:
                cfg.set(name, value)
        return cfg

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def set(self, var: VarRef, value: Any) -> Any:
        """Validate and store a typed value. Returns the canonical value."""
        var_id = resolve_var(var)
        validated = var_info(var_id).validate(value)
        self._values[var_id] = validated
        logger.debug(f"Set {var_id.name} = {validated!r}")
        return validated

    def set_from_string(self, var: VarRef, raw: str) -> Any:
        """Parse, validate and store a raw string value. Returns the canonical value."""
        var_id = resolve_var(var)
        validated = var_info(var_id).parse(raw)
        self._values[var_id] = validated
        logger.debug(f"Set {var_id.name} = {validated!r} (from {raw!r})")
        return validated

    def get(self, var: VarRef) -> Any:
        """Value of a variable: explicit value, else its default.

        Raises:
            BadInput: If the variable is not set and has no default
        """
        var_id = resolve_var(var)
        if var_id in self._values:
            return self._values[var_id]
        return var_info(var_id).default_value()

    def is_set(self, var: VarRef) -> bool:
        return resolve_var(var) in self._values

    def unset(self, var: VarRef) -> None:
        self._values.pop(resolve_var(var), None)

    def items(self) -> Iterator[tuple[VarId, Any]]:
        """Explicitly set (VarId, value) pairs in registry order."""
        for var_id in sorted(self._values):
            yield var_id, self._values[var_id]

    def to_string(self) -> str:
        """Canonical "name=value;..." form of the explicitly set values."""
        return ";".join(f"{var_id.name}={var_info(var_id).to_str(value)}" for var_id, value in self.items())

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, var: VarRef) -> bool:
        return self.is_set(var)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CfgValues):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"CfgValues({self.to_string()!r})"
