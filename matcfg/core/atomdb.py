"""Validation of atomic-database (@ATOMDB style) definition lines.

Each line is given as a list of words and takes one of three forms:

    nodefaults
    <label> <mass>u <coh_scat_len>fm <incoh_xs>b <abs_xs>b
    <label> is <fraction> <component> [<fraction> <component> ...]

Examples:
    Al 26.98u 3.449fm 0.0082b 0.231b
    H is 0.9 H1 0.1 D

Labels are element symbols ("Al"), isotopes ("He3", "D", "T") or custom
markers ("X", "X1" .. "X99").

Import Policy:
    from matcfg.core.atomdb import validate_atomdb_line
"""

from __future__ import annotations

import math
import re
from typing import Sequence

from matcfg.core.constants import ATOMDB_FRACTION_TOLERANCE
from matcfg.core.errors import BadInput

# Element symbols ordered by atomic number (index + 1 == Z)
ELEMENT_SYMBOLS = (
    "H", "He", "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar", "K", "Ca",
    "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr", "Rb", "Sr", "Y", "Zr",
    "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "In", "Sn",
    "Sb", "Te", "I", "Xe", "Cs", "Ba", "La", "Ce", "Pr", "Nd",
    "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb",
    "Lu", "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
    "Tl", "Pb", "Bi", "Po", "At", "Rn", "Fr", "Ra", "Ac", "Th",
    "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm",
    "Md", "No", "Lr", "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds",
    "Rg", "Cn", "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
)

_Z_BY_SYMBOL = {sym: z for z, sym in enumerate(ELEMENT_SYMBOLS, start=1)}

_ISOTOPE_PATTERN = re.compile(r"^([A-Z][a-z]?)([1-9][0-9]{0,2})$")
_MARKER_PATTERN = re.compile(r"^X([1-9][0-9]?)?$")
_NUMBER_PATTERN = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")

NODEFAULTS = "nodefaults"


def is_valid_label(label: str) -> bool:
    """Check whether label names an element, isotope or custom marker.

    Args:
        label: Candidate label (e.g. "Al", "He3", "D", "X2")

    Returns:
        True if the label is acceptable
    """
    if label in _Z_BY_SYMBOL or label in ("D", "T"):
        return True
    if _MARKER_PATTERN.fullmatch(label):
        return True
    m = _ISOTOPE_PATTERN.fullmatch(label)
    if m is None or m.group(1) not in _Z_BY_SYMBOL:
        return False
    # Mass number can never be below the atomic number
    return int(m.group(2)) >= _Z_BY_SYMBOL[m.group(1)]


def _parse_number(word: str, what: str, line: str) -> float:
    if not _NUMBER_PATTERN.fullmatch(word):
        raise BadInput(f'Invalid {what} "{word}" in atomdb line "{line}"')
    return float(word)


def _parse_with_suffix(word: str, suffix: str, what: str, line: str) -> float:
    if not word.endswith(suffix):
        raise BadInput(f'Missing unit "{suffix}" on {what} "{word}" in atomdb line "{line}"')
    return _parse_number(word[: -len(suffix)], what, line)


def _validate_element_definition(words: Sequence[str], line: str) -> None:
    mass = _parse_with_suffix(words[1], "u", "mass", line)
    _parse_with_suffix(words[2], "fm", "coherent scattering length", line)
    incoh_xs = _parse_with_suffix(words[3], "b", "incoherent cross section", line)
    abs_xs = _parse_with_suffix(words[4], "b", "absorption cross section", line)
    if not mass > 0.0:
        raise BadInput(f'Mass must be positive in atomdb line "{line}"')
    if incoh_xs < 0.0 or abs_xs < 0.0:
        raise BadInput(f'Cross sections can not be negative in atomdb line "{line}"')


def _validate_mixture(words: Sequence[str], line: str) -> None:
    parts = words[2:]
    if len(parts) < 2 or len(parts) % 2 != 0:
        raise BadInput(f'Mixture must list pairs of fraction and component in atomdb line "{line}"')

    total = 0.0
    components = set()
    for frac_word, component in zip(parts[0::2], parts[1::2]):
        fraction = _parse_number(frac_word, "fraction", line)
        if not (0.0 < fraction <= 1.0):
            raise BadInput(f'Fraction {frac_word} not in (0,1] in atomdb line "{line}"')
        if not is_valid_label(component):
            raise BadInput(f'Invalid component "{component}" in atomdb line "{line}"')
        if component in components:
            raise BadInput(f'Component "{component}" appears more than once in atomdb line "{line}"')
        components.add(component)
        total += fraction

    if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=ATOMDB_FRACTION_TOLERANCE):
        raise BadInput(f'Fractions sum to {total} instead of 1 in atomdb line "{line}"')


def validate_atomdb_line(words: Sequence[str]) -> None:
    """Validate one atomic-database line.

    Args:
        words: Whitespace-separated words of the line

    Raises:
        BadInput: If the line is not a valid definition
    """
    line = " ".join(words)
    if not words:
        raise BadInput("Empty atomdb line")

    if words[0] == NODEFAULTS:
        if len(words) != 1:
            raise BadInput(f'"{NODEFAULTS}" must appear alone on its line: "{line}"')
        return

    if not is_valid_label(words[0]):
        raise BadInput(f'Invalid element or isotope label "{words[0]}" in atomdb line "{line}"')

    if len(words) >= 2 and words[1] == "is":
        _validate_mixture(words, line)
    elif len(words) == 5:
        _validate_element_definition(words, line)
    else:
        raise BadInput(f'Wrong number of entries in atomdb line "{line}"')
