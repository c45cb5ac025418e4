"""Listing of the available configuration variables.

Usage:
    from matcfg.config.reporting import dump_cfg_var_list, cfg_var_list_text
    from matcfg.config.enums import VarListMode

    dump_cfg_var_list(sys.stdout, VarListMode.TXT_SHORT)
    text = cfg_var_list_text(VarListMode.JSON)
"""

from __future__ import annotations

import io
import json
import textwrap
from typing import TextIO

from matcfg.config.descriptor import VarDef
from matcfg.config.enums import VarListMode
from matcfg.config.registry import REGISTRY

_DESCRIPTION_WIDTH = 78


def _default_label(var: VarDef) -> str:
    text = var.default_str()
    if text is None:
        return "<required>"
    return f'"{text}"' if text == "" else text


def _units_label(var: VarDef) -> str:
    return f" [{var.units}]" if var.units else ""


def var_to_dict(var: VarDef) -> dict:
    """Convert a variable definition to a JSON-compatible dictionary."""
    return {
        "name": var.name,
        "group": var.group.value,
        "kind": var.kind.label,
        "units": var.units,
        "required": not var.has_default,
        "default": var.default_str(),
        "description": var.description,
    }


def dump_cfg_var_list(stream: TextIO, mode: VarListMode, line_prefix: str = "") -> None:
    """Write the list of configuration variables to a stream.

    Args:
        stream: Output text stream
        mode: TXT_SHORT (one line each), TXT_FULL (with descriptions) or JSON
        line_prefix: String prepended to every output line
    """
    if mode == VarListMode.JSON:
        text = json.dumps([var_to_dict(v) for v in REGISTRY], indent=2)
        for line in text.splitlines():
            stream.write(f"{line_prefix}{line}\n")
        return

    width = max(len(v.name) for v in REGISTRY)
    for var in REGISTRY:
        stream.write(
            f"{line_prefix}{var.name:<{width}} = {_default_label(var)}{_units_label(var)}"
            f" ({var.kind.label}, {var.group.value})\n"
        )
        if mode == VarListMode.TXT_FULL:
            for line in textwrap.wrap(var.description, max(20, _DESCRIPTION_WIDTH - len(line_prefix) - 4)):
                stream.write(f"{line_prefix}    {line}\n")
            stream.write(f"{line_prefix}\n")


def cfg_var_list_text(mode: VarListMode, line_prefix: str = "") -> str:
    """Return the variable list as a string (see dump_cfg_var_list)."""
    buf = io.StringIO()
    dump_cfg_var_list(buf, mode, line_prefix)
    return buf.getvalue()
