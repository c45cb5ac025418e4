"""Tests for the per-variable domain checks.

Covers the documented domains, the sentinel/legacy values and the
idempotence of validation on canonical values.
"""

import math

import pytest

from matcfg.config.registry import REGISTRY, VarId, var_info
from matcfg.core.errors import BadInput
from matcfg.core.types import CrystalAxis, HKLPoint, LabAxis, OrientDir


def validate(var_id, value):
    return var_info(var_id).validate(value)


def parse(var_id, raw):
    return var_info(var_id).parse(raw)


class TestTemperature:
    """temp: -1 sentinel, otherwise [0.001, 1e6] K."""

    def test_sentinel_passes_unchanged(self):
        assert validate(VarId.temp, -1.0) == -1.0

    def test_regular_value(self):
        assert validate(VarId.temp, 300.0) == 300.0

    @pytest.mark.parametrize("value", [0.0005, 0.0, -2.0, 1.0000001e6, math.inf, -math.inf])
    def test_out_of_range(self, value):
        with pytest.raises(BadInput, match="temp"):
            validate(VarId.temp, value)

    def test_bounds_inclusive(self):
        assert validate(VarId.temp, 0.001) == 0.001
        assert validate(VarId.temp, 1e6) == 1e6

    def test_nan_rejected(self):
        with pytest.raises(BadInput):
            validate(VarId.temp, math.nan)

    def test_parse_units(self):
        assert parse(VarId.temp, "300") == 300.0
        assert parse(VarId.temp, "300K") == 300.0
        assert parse(VarId.temp, "20C") == pytest.approx(293.15)
        assert parse(VarId.temp, "-1") == -1.0

    def test_error_names_value(self):
        with pytest.raises(BadInput, match=r"0\.0005K"):
            validate(VarId.temp, 0.0005)

    @pytest.mark.parametrize("value", [10 ** 400, -(10 ** 400), 10 ** 5000], ids=["1e400", "-1e400", "1e5000"])
    def test_integer_beyond_float_range(self, value):
        with pytest.raises(BadInput, match="temp.*too large"):
            validate(VarId.temp, value)

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(BadInput, match="temp"):
            parse(VarId.temp, "٣٠٠")


class TestDCutoff:
    """dcutoff: -1 and 0 both mean automatic selection."""

    def test_legacy_alias(self):
        assert validate(VarId.dcutoff, -1.0) == 0.0

    def test_zero(self):
        assert validate(VarId.dcutoff, 0.0) == 0.0

    def test_regular_value(self):
        assert validate(VarId.dcutoff, 1.0) == 1.0

    @pytest.mark.parametrize("value", [-5.0, -0.5, 2e5, 1e-4, math.inf])
    def test_out_of_range(self, value):
        with pytest.raises(BadInput, match="dcutoff"):
            validate(VarId.dcutoff, value)

    def test_parse_with_units(self):
        assert parse(VarId.dcutoff, "0.1nm") == pytest.approx(1.0)
        assert parse(VarId.dcutoff, "-1") == 0.0


class TestDCutoffUpAndSCCutoff:
    def test_dcutoffup_default_is_infinite(self):
        assert var_info(VarId.dcutoffup).default_value() == math.inf

    def test_dcutoffup_accepts_infinity(self):
        assert parse(VarId.dcutoffup, "inf") == math.inf

    def test_dcutoffup_negative(self):
        with pytest.raises(BadInput, match="dcutoffup"):
            validate(VarId.dcutoffup, -0.1)

    def test_sccutoff(self):
        assert var_info(VarId.sccutoff).default_value() == 0.4
        assert validate(VarId.sccutoff, 0.0) == 0.0
        with pytest.raises(BadInput, match="sccutoff"):
            validate(VarId.sccutoff, -1.0)


class TestAngles:
    """mos in (0, pi/2], dirtol in (0, pi]."""

    def test_mos_is_required(self):
        mos = var_info(VarId.mos)
        assert not mos.has_default
        with pytest.raises(BadInput, match="no default"):
            mos.default_value()

    def test_mos_range(self):
        assert validate(VarId.mos, math.pi / 2) == math.pi / 2
        assert validate(VarId.mos, 1e-6) == 1e-6
        for bad in (0.0, -0.1, math.pi / 2 + 1e-9):
            with pytest.raises(BadInput, match="mos"):
                validate(VarId.mos, bad)

    def test_mos_parse_degrees(self):
        assert parse(VarId.mos, "0.5deg") == pytest.approx(0.5 * math.pi / 180)
        assert parse(VarId.mos, "30arcmin") == pytest.approx(0.5 * math.pi / 180)

    def test_dirtol(self):
        assert var_info(VarId.dirtol).default_value() == 1e-4
        assert validate(VarId.dirtol, math.pi) == math.pi
        assert parse(VarId.dirtol, "90deg") == pytest.approx(math.pi / 2)
        for bad in (0.0, math.pi + 1e-9):
            with pytest.raises(BadInput, match="dirtol"):
                validate(VarId.dirtol, bad)


class TestMosPrec:
    def test_range(self):
        assert validate(VarId.mosprec, 1e-7) == 1e-7
        assert validate(VarId.mosprec, 1e-1) == 1e-1
        for bad in (1e-8, 0.2, 0.0):
            with pytest.raises(BadInput, match="mosprec"):
                validate(VarId.mosprec, bad)

    def test_units_not_accepted(self):
        with pytest.raises(BadInput):
            parse(VarId.mosprec, "0.001deg")


class TestIntegers:
    """vdoslux in [0, 5], lcmode in [-4e9, 4e9]."""

    def test_vdoslux(self):
        assert validate(VarId.vdoslux, 3) == 3
        for bad in (-1, 6, 7):
            with pytest.raises(BadInput, match="vdoslux"):
                validate(VarId.vdoslux, bad)

    def test_vdoslux_parse(self):
        assert parse(VarId.vdoslux, "5") == 5
        with pytest.raises(BadInput):
            parse(VarId.vdoslux, "3.5")

    @pytest.mark.parametrize("raw", ["٣", "３", "1٠"])
    def test_non_ascii_digits_rejected(self, raw):
        with pytest.raises(BadInput, match="vdoslux"):
            parse(VarId.vdoslux, raw)

    def test_lcmode(self):
        assert validate(VarId.lcmode, 4000000000) == 4000000000
        assert validate(VarId.lcmode, -4000000000) == -4000000000
        assert parse(VarId.lcmode, "-100") == -100
        with pytest.raises(BadInput, match="lcmode"):
            validate(VarId.lcmode, 4000000001)

    def test_huge_integers(self):
        with pytest.raises(BadInput, match="lcmode.*too large"):
            validate(VarId.lcmode, 10 ** 5000)
        with pytest.raises(BadInput, match="vdoslux"):
            parse(VarId.vdoslux, "1" + "0" * 5000)

    def test_bool_is_not_an_integer(self):
        with pytest.raises(BadInput):
            validate(VarId.vdoslux, True)


class TestBooleans:
    @pytest.mark.parametrize("var_id", [VarId.incoh_elas, VarId.coh_elas, VarId.sans])
    def test_default_true(self, var_id):
        assert var_info(var_id).default_value() is True

    def test_parse(self):
        assert parse(VarId.sans, "false") is False
        assert parse(VarId.sans, "0") is False
        assert parse(VarId.coh_elas, "true") is True
        with pytest.raises(BadInput):
            parse(VarId.coh_elas, "maybe")


class TestInelas:
    """Inelastic model selector normalisation."""

    @pytest.mark.parametrize("value", ["none", "0", "sterile", "false"])
    def test_disabled_aliases(self, value):
        assert validate(VarId.inelas, value) == "0"

    def test_regular_value(self):
        assert validate(VarId.inelas, "freegas") == "freegas"
        assert var_info(VarId.inelas).default_value() == "auto"

    @pytest.mark.parametrize("value", ["VDOSDEBYE", "", "free gas", "vdos-debye"])
    def test_invalid(self, value):
        with pytest.raises(BadInput, match="inelas"):
            validate(VarId.inelas, value)


class TestLCAxis:
    """Layering axis: finite, non-null, not normalised."""

    def test_valid_unchanged(self):
        assert validate(VarId.lcaxis, (0, 0, 1)) == (0.0, 0.0, 1.0)
        assert validate(VarId.lcaxis, [0.0, 0.0, 2.0]) == (0.0, 0.0, 2.0)

    def test_null_vector(self):
        with pytest.raises(BadInput, match="Null vector"):
            validate(VarId.lcaxis, (0, 0, 0))

    @pytest.mark.parametrize("vec", [(math.inf, 0, 0), (0, -math.inf, 1), (1e200, 0, 0)])
    def test_infinite(self, vec):
        with pytest.raises(BadInput, match="lcaxis"):
            validate(VarId.lcaxis, vec)

    def test_nan(self):
        with pytest.raises(BadInput):
            validate(VarId.lcaxis, (math.nan, 0, 1))

    def test_integer_beyond_float_range(self):
        with pytest.raises(BadInput, match="lcaxis"):
            validate(VarId.lcaxis, (10 ** 400, 0, 0))

    def test_parse(self):
        assert parse(VarId.lcaxis, "0,0,1") == (0.0, 0.0, 1.0)
        assert parse(VarId.lcaxis, " 1, 2 ,3 ") == (1.0, 2.0, 3.0)
        with pytest.raises(BadInput):
            parse(VarId.lcaxis, "0,0")


class TestOrientation:
    def test_parse_crystal_axis(self):
        value = parse(VarId.dir1, "@crys:0,0,1@lab:0,0,1")
        assert value == OrientDir(CrystalAxis(0.0, 0.0, 1.0), LabAxis(0.0, 0.0, 1.0))

    def test_parse_hkl(self):
        value = parse(VarId.dir2, "@crys_hkl:1,1,0@lab:1,0,0")
        assert isinstance(value.crystal, HKLPoint)
        assert str(value) == "@crys_hkl:1,1,0@lab:1,0,0"

    @pytest.mark.parametrize(
        "raw",
        [
            "@crys:0,0,0@lab:0,0,1",
            "@crys:0,0,1@lab:0,0,0",
            "@crys:0,0,inf@lab:0,0,1",
            "crys:0,0,1@lab:0,0,1",
            "@crys:0,0,1",
            "@lab:0,0,1@crys:0,0,1",
            "@crys:0,1@lab:0,0,1",
            "@crys:1 0,0,1@lab:0,0,1",
            "@crys:0,0,1@lab:0,0 1",
            "@cr ys:0,0,1@lab:0,0,1",
            "@crys:1e 3,0,1@lab:0,0,1",
        ],
    )
    def test_invalid(self, raw):
        with pytest.raises(BadInput, match="dir1"):
            parse(VarId.dir1, raw)

    def test_whitespace_around_tokens(self):
        value = parse(VarId.dir1, " @ crys_hkl : 1 , 0 ,0 @ lab: 0, 0, 1 ")
        assert str(value) == "@crys_hkl:1,0,0@lab:0,0,1"

    def test_overlong_component(self):
        with pytest.raises(BadInput, match="dir1"):
            parse(VarId.dir1, "@crys:" + "9" * 400 + ",0,0@lab:0,0,1")

    def test_required(self):
        assert not var_info(VarId.dir1).has_default
        assert not var_info(VarId.dir2).has_default


class TestFactoryVariables:
    @pytest.mark.parametrize("var_id", [VarId.infofactory, VarId.scatfactory, VarId.absnfactory])
    def test_canonical_reserialisation(self, var_id):
        assert validate(var_id, "") == ""
        assert validate(var_id, " !b @ myfact@!a ") == "myfact@!a@!b"

    def test_error_is_wrapped(self):
        with pytest.raises(BadInput, match="Syntax error in scatfactory parameter"):
            validate(VarId.scatfactory, "a@b")

    def test_shared_description(self):
        descr = {var_info(v).description for v in (VarId.infofactory, VarId.scatfactory, VarId.absnfactory)}
        assert len(descr) == 3
        assert all("factory selection logic" in d for d in descr)


class TestAtomDB:
    def test_empty(self):
        assert validate(VarId.atomdb, "") == ""

    def test_normalisation(self):
        raw = "nodefaults@  Al 26.98u 3.449fm 0.0082b 0.231b @@H:is:0.9:H1 0.1 D"
        assert validate(VarId.atomdb, raw) == (
            "nodefaults@Al:26.98u:3.449fm:0.0082b:0.231b@H:is:0.9:H1:0.1:D"
        )

    def test_nodefaults_must_be_first(self):
        with pytest.raises(BadInput, match="must be the first line"):
            validate(VarId.atomdb, "Al 26.98u 3.449fm 0.0082b 0.231b@nodefaults")

    def test_invalid_line_is_reported(self):
        with pytest.raises(BadInput, match='in the line: "Qq:1u:1fm:1b:1b"'):
            validate(VarId.atomdb, "Qq 1u 1fm 1b 1b")


class TestIdempotence:
    """Validating a canonical value returns it unchanged, for every variable."""

    SAMPLE_INPUTS = {
        "absnfactory": "!x@y",
        "atomdb": "nodefaults@Al 26.98u 3.449fm 0.0082b 0.231b",
        "coh_elas": "false",
        "dcutoff": "-1",
        "dcutoffup": "5nm",
        "dir1": "@crys_hkl:0,0,1@lab:0,0,1",
        "dir2": "@crys:1,0,0@lab:1,0,0",
        "dirtol": "90deg",
        "incoh_elas": "true",
        "inelas": "sterile",
        "infofactory": "!a@!a",
        "lcaxis": "0,0,2",
        "lcmode": "-10",
        "mos": "0.3deg",
        "mosprec": "1e-4",
        "sans": "no",
        "scatfactory": "myfact",
        "sccutoff": "0.4",
        "temp": "20C",
        "vdoslux": "2",
    }

    def test_inputs_cover_all_variables(self):
        assert set(self.SAMPLE_INPUTS) == set(REGISTRY.names)

    @pytest.mark.parametrize("var", list(REGISTRY), ids=lambda v: v.name)
    def test_validate_is_idempotent(self, var):
        first = var.parse(self.SAMPLE_INPUTS[var.name])
        assert var.validate(first) == first

    @pytest.mark.parametrize("var", list(REGISTRY), ids=lambda v: v.name)
    def test_canonical_string_reparses(self, var):
        first = var.parse(self.SAMPLE_INPUTS[var.name])
        text = var.to_str(first)
        assert var.parse(text) == first
        assert var.to_str(var.parse(text)) == text

    @pytest.mark.parametrize("var", [v for v in REGISTRY if v.has_default], ids=lambda v: v.name)
    def test_defaults_are_valid(self, var):
        assert var.validate(var.default) == var.default


class TestDescriptors:
    """Properties shared by all variable definitions."""

    def test_temp_descriptor(self, temp_var):
        assert temp_var.name == "temp"
        assert temp_var.units == "K"
        assert temp_var.default_str() == "-1"

    def test_dcutoff_descriptor(self, dcutoff_var):
        assert dcutoff_var.units == "Aa"
        assert dcutoff_var.default_value() == 0.0
        assert dcutoff_var.parse(" 0.5Aa ") == 0.5

    def test_every_variable_is_documented(self, all_vars):
        for var in all_vars:
            assert var.description
            assert var.description.endswith(".")

    def test_required_variables(self, all_vars):
        required = sorted(v.name for v in all_vars if not v.has_default)
        assert required == ["dir1", "dir2", "lcaxis", "mos"]

    def test_parse_requires_string(self, temp_var):
        with pytest.raises(BadInput, match="must be given as a string"):
            temp_var.parse(300.0)
