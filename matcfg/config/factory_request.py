"""Factory selection requests.

Parses strings like "myfact", "!notthis" or "myfact@!notthis@!notthat" into
an immutable FactoryRequest: at most one specifically requested factory plus
a list of excluded factories.

Grammar:
    request := entry ('@' entry)*
    entry   := '!' name | name
    name    := [A-Za-z0-9_-]+      (surrounding whitespace is ignored)

Empty entries (e.g. from "a@@!b") are skipped.

Import Policy:
    from matcfg.config.factory_request import FactoryRequest, parse_factory_request
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from matcfg.core.errors import BadInput

_FACTORY_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def check_factory_name(name: str) -> None:
    """Raise BadInput unless name is a valid factory name."""
    if not _FACTORY_NAME_PATTERN.fullmatch(name):
        raise BadInput(f'Not a valid factory name: "{name}"')


@dataclass(frozen=True, eq=False)
class FactoryRequest:
    """Request for a specific named factory and/or exclusion of others.

    Instances are immutable. Use parse_factory_request() to create them and
    the with_* methods to derive modified copies. Equality ignores the order
    of the exclusions.

    Attributes:
        specific: Name of the requested factory, or None
        excluded: Names of excluded factories, in insertion order
    """

    specific: Optional[str] = None
    excluded: tuple[str, ...] = ()

    def __post_init__(self):
        """Validate names, drop duplicate exclusions and detect conflicts."""
        if self.specific is not None:
            check_factory_name(self.specific)
        seen: list[str] = []
        for name in self.excluded:
            check_factory_name(name)
            if name not in seen:
                seen.append(name)
        if self.specific is not None and self.specific in seen:
            raise BadInput(
                f'The factory "{self.specific}" is both specified as being '
                "simultaneously required and excluded."
            )
        object.__setattr__(self, "excluded", tuple(seen))

    def has_specific_request(self) -> bool:
        return self.specific is not None

    def excludes(self, name: str) -> bool:
        return name in self.excluded

    def with_additional_exclude(self, name: str) -> FactoryRequest:
        """Return a request which also excludes the named factory.

        Args:
            name: Factory name to exclude (surrounding whitespace ignored)

        Returns:
            New FactoryRequest, or self if name is already excluded

        Raises:
            BadInput: If name is invalid or is the specifically requested factory
        """
        name = name.strip()
        check_factory_name(name)
        if self.excludes(name):
            return self
        return FactoryRequest(self.specific, self.excluded + (name,))

    def with_no_specific_request(self) -> FactoryRequest:
        """Return a request with the same exclusions but no specific factory."""
        return FactoryRequest(None, self.excluded)

    def to_string(self) -> str:
        """Canonical form: specific first, then sorted exclusions."""
        entries = [self.specific] if self.specific is not None else []
        entries.extend(f"!{name}" for name in sorted(self.excluded))
        return "@".join(entries)

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other) -> bool:
        if not isinstance(other, FactoryRequest):
            return NotImplemented
        return self.specific == other.specific and set(self.excluded) == set(other.excluded)

    def __hash__(self) -> int:
        return hash((self.specific, frozenset(self.excluded)))


def parse_factory_request(text: str) -> FactoryRequest:
    """Parse a factory selection string.

    Args:
        text: Request string, e.g. "myfact@!notthis"

    Returns:
        Parsed FactoryRequest

    Raises:
        BadInput: On invalid names, more than one non-excluded entry, or a
            factory which is both requested and excluded

    Example:
        >>> parse_factory_request("!notthis@myfact")
        FactoryRequest(specific='myfact', excluded=('notthis',))
    """
    specific = None
    excluded: list[str] = []

    for entry in text.split("@"):
        entry = entry.strip()
        if not entry:
            continue
        if entry.startswith("!"):
            name = entry[1:].strip()
            check_factory_name(name)
            if name not in excluded:
                excluded.append(name)
        else:
            check_factory_name(entry)
            if specific is not None:
                raise BadInput(
                    f'Contains more than one (non-negated) entry ("{specific}" and "{entry}").'
                )
            specific = entry

    return FactoryRequest(specific, tuple(excluded))
