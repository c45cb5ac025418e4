"""Configuration variable descriptor.

One immutable VarDef exists per configuration variable. It combines the
variable's name, group, value kind, default value and domain check.

Import Policy:
    from matcfg.config.descriptor import VarDef, REQUIRED
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from matcfg.config.enums import VarGroup
from matcfg.config.value_kinds import ValueKind
from matcfg.core.errors import BadInput

_VAR_NAME_PATTERN = re.compile(r"^[a-z0-9_]+$")


class _Required:
    """Marker for variables which have no default value."""

    def __repr__(self) -> str:
        return "REQUIRED"


REQUIRED = _Required()


@dataclass(frozen=True)
class VarDef:
    """Definition of one configuration variable.

    Attributes:
        name: Variable name used in configuration strings (e.g. "temp")
        group: Documentation category
        kind: Value kind responsible for parsing and formatting
        description: Human readable description
        default: Default value, or REQUIRED if the variable must be set
            explicitly whenever it is used
        check: Pure function validating (and possibly normalising) a typed
            value. Raises BadInput for values outside the domain.
    """

    name: str
    group: VarGroup
    kind: ValueKind
    description: str
    default: Any = REQUIRED
    check: Optional[Callable[[Any], Any]] = None

    def __post_init__(self):
        if not _VAR_NAME_PATTERN.fullmatch(self.name):
            raise ValueError(f"Invalid variable name: {self.name!r}")

    @property
    def has_default(self) -> bool:
        return self.default is not REQUIRED

    @property
    def units(self) -> str:
        return self.kind.units

    def default_value(self) -> Any:
        """Return the default value.

        Raises:
            BadInput: If the variable has no default value
        """
        if not self.has_default:
            raise BadInput(f'Parameter "{self.name}" has no default value and must be set explicitly')
        return self.default

    def validate(self, value: Any) -> Any:
        """Validate a typed value and return its canonical form.

        Args:
            value: Typed value (float, int, bool, str, 3-sequence or OrientDir)

        Returns:
            Canonical validated value

        Raises:
            BadInput: If the value has the wrong type or is out of range
        """
        value = self.kind.coerce(self.name, value)
        if self.check is not None:
            value = self.check(value)
        return value

    def parse(self, raw: str) -> Any:
        """Parse a raw string and validate the result.

        Args:
            raw: Value text as found in a configuration string

        Returns:
            Canonical validated value

        Raises:
            BadInput: On syntax errors or values out of range
        """
        if not isinstance(raw, str):
            raise BadInput(f'Parameter "{self.name}" must be given as a string, got {raw!r}')
        return self.validate(self.kind.from_str(self.name, raw))

    def to_str(self, value: Any) -> str:
        """Canonical string form of a (validated) value."""
        return self.kind.to_str(value)

    def default_str(self) -> Optional[str]:
        """Canonical string form of the default, or None if required."""
        return self.to_str(self.default) if self.has_default else None
