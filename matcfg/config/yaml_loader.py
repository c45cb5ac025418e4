"""YAML Configuration Loader

Loads configuration variable values from a YAML mapping of variable names
to values, e.g.:

    temp: 20C
    dcutoff: 0.5
    vdoslux: 4
    lcaxis: [0, 0, 1]
    dir1: "@crys_hkl:0,0,1@lab:0,0,1"

String values are parsed exactly like values in configuration strings;
native YAML numbers, booleans and lists are validated as typed values.

Usage:
    from matcfg.config.yaml_loader import load_cfg_yaml
    cfg = load_cfg_yaml("material.yaml")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from matcfg.config.cfg_data import CfgValues
from matcfg.config.registry import var_id_from_name, var_info
from matcfg.config.value_kinds import StrKind
from matcfg.core.errors import BadInput

logger = logging.getLogger(__name__)

CFG_PATH_ENV = "MATCFG_CFG_PATH"


def _get_yaml_path(path: Optional[Union[str, Path]]) -> Path:
    """Resolve the YAML file to load.

    The file is taken from, in order:
    1. The path argument
    2. Environment variable MATCFG_CFG_PATH

    Raises:
        FileNotFoundError: If no file is given or the file does not exist
    """
    if path is None:
        env_path = os.getenv(CFG_PATH_ENV)
        if not env_path:
            raise FileNotFoundError(
                f"No configuration file given and {CFG_PATH_ENV} environment variable is not set"
            )
        path = env_path

    yaml_path = Path(path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
    return yaml_path


def _normalise_yaml_value(name: str, value: Any) -> Any:
    # YAML sequences arrive as lists, vector values are tuples
    if isinstance(value, list):
        return tuple(value)
    # Unquoted scalars like "inelas: 0" or "inelas: false" reach string
    # variables as int or bool
    var_id = var_id_from_name(name)
    if var_id is not None and isinstance(var_info(var_id).kind, StrKind):
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
    return value


def load_cfg_yaml(path: Optional[Union[str, Path]] = None) -> CfgValues:
    """Load configuration values from a YAML file.

    Args:
        path: YAML file. Defaults to the file named by MATCFG_CFG_PATH.

    Returns:
        CfgValues holding the validated values

    Raises:
        FileNotFoundError: If the file can not be found
        BadInput: If the file is not a mapping or contains invalid values
    """
    yaml_path = _get_yaml_path(path)
    with open(yaml_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise BadInput(f"Configuration file {yaml_path} must contain a mapping of parameter names to values")

    cfg = CfgValues.from_mapping({str(k): _normalise_yaml_value(str(k), v) for k, v in data.items()})
    logger.info(f"Loaded {len(cfg)} configuration values from {yaml_path}")
    return cfg


def save_cfg_yaml(cfg: CfgValues, path: Union[str, Path]) -> None:
    """Save the explicitly set values of cfg as canonical strings.

    Args:
        cfg: Values to save
        path: Output YAML file
    """
    data = {var_id.name: var_info(var_id).to_str(value) for var_id, value in cfg.items()}

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info(f"Saved {len(data)} configuration values to {out}")
