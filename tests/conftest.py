"""Pytest configuration and shared fixtures for matcfg tests."""

import pytest

from matcfg.config.cfg_data import CfgValues
from matcfg.config.registry import REGISTRY, VarId, var_info


# Fixtures for configuration variables


@pytest.fixture
def temp_var():
    """Temperature variable definition."""
    return var_info(VarId.temp)


@pytest.fixture
def dcutoff_var():
    """Lower d-spacing cutoff variable definition."""
    return var_info(VarId.dcutoff)


@pytest.fixture
def all_vars():
    """All registered variable definitions, in registry order."""
    return list(REGISTRY)


@pytest.fixture
def empty_cfg():
    """Configuration without explicitly set values."""
    return CfgValues()


@pytest.fixture
def single_crystal_cfg():
    """Configuration of a mosaic single crystal."""
    return CfgValues.from_string(
        "temp=20C;mos=0.3deg;dir1=@crys_hkl:0,0,1@lab:0,0,1;"
        "dir2=@crys_hkl:1,0,0@lab:1,0,0;dirtol=1deg"
    )


@pytest.fixture
def yaml_cfg_file(tmp_path):
    """YAML configuration file with a mix of string and native values."""
    path = tmp_path / "material.yaml"
    path.write_text(
        "temp: 20C\n"
        "dcutoff: -1\n"
        "vdoslux: 4\n"
        "coh_elas: false\n"
        "inelas: none\n"
        "lcaxis: [0, 0, 1]\n"
        "dir1: \"@crys:0,0,1@lab:0,0,1\"\n"
        "scatfactory: \"!notthis@myfact\"\n",
        encoding="utf-8",
    )
    return path
