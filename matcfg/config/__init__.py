"""Configuration Module - Configuration Variables of Material Descriptions

This module provides the typed configuration variables (temperature,
d-spacing cutoffs, single crystal orientation, factory selection, ...),
their registry, and helpers to parse, store and list them.

Recommended Usage:
    from matcfg.config import VarId, var_info, var_id_from_name, CfgValues

    # Parse and validate a single value
    temp = var_info(VarId.temp).parse("20C")     # -> 293.15

    # Resolve a name at runtime
    var_id = var_id_from_name("dcutoff")         # -> VarId.dcutoff

    # Work with a set of values
    cfg = CfgValues.from_string("temp=300;mos=0.5deg;dir1=@crys_hkl:0,0,1@lab:0,0,1")

    # Factory selection strings
    from matcfg.config import parse_factory_request
    req = parse_factory_request("myfact@!notthis")

Import Policy:
    DO NOT use: from matcfg.config import *

Submodules:
    enums: VarGroup, UnitKind, VarListMode
    defaults: Default values (SSOT)
    units: Unit suffix parsing
    value_kinds: Parsing and formatting per value kind
    factory_request: Factory selection grammar
    descriptor: VarDef
    variables: All variable definitions (VARLIST)
    registry: VarId and name resolution
    cfg_data: CfgValues container
    reporting: Variable list output
    yaml_loader: YAML file loading
    validation: Advisory warnings
"""

from matcfg.config.enums import UnitKind, VarGroup, VarListMode
from matcfg.config.descriptor import REQUIRED, VarDef
from matcfg.config.factory_request import FactoryRequest, parse_factory_request
from matcfg.config.registry import (
    REGISTRY,
    VarId,
    VarRegistry,
    all_var_ids,
    var_group,
    var_id_from_name,
    var_info,
    var_name,
)
from matcfg.config.cfg_data import CfgValues, split_assignments
from matcfg.config.reporting import cfg_var_list_text, dump_cfg_var_list
from matcfg.config.yaml_loader import load_cfg_yaml, save_cfg_yaml
from matcfg.config.validation import ConfigurationWarning, warn_if_unsafe


__all__ = [
    # Enums
    "VarGroup",
    "UnitKind",
    "VarListMode",
    # Descriptors and registry
    "VarDef",
    "REQUIRED",
    "VarRegistry",
    "REGISTRY",
    "VarId",
    "var_id_from_name",
    "var_info",
    "var_name",
    "var_group",
    "all_var_ids",
    # Factory requests
    "FactoryRequest",
    "parse_factory_request",
    # Values
    "CfgValues",
    "split_assignments",
    "load_cfg_yaml",
    "save_cfg_yaml",
    # Reporting
    "dump_cfg_var_list",
    "cfg_var_list_text",
    # Advisories
    "ConfigurationWarning",
    "warn_if_unsafe",
]
