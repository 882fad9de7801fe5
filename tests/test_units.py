#
# Engnote - Units Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import math

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from pytest import raises

# Local ----------------------------------------------------------------------------------------------------------------
from engnote.notation import to_engineering
from engnote.units import (
    DEG_TO_RAD,
    GRAD_TO_RAD,
    RAD_TO_DEG,
    RAD_TO_GRAD,
    BandRangeError,
    Prefix,
    Symbol,
    Unit,
    band_code,
    band_codes,
    band_exponent,
    band_index,
    code_exponent,
    valid_exponents,
)

# @formatter:off
EXPECTED_CODES = {
    -24: "y", -21: "z", -18: "a", -15: "f", -12: "p", -9: "n", -6: "µ", -3: "m",
    0: "",
    3: "k", 6: "M", 9: "G", 12: "T", 15: "P", 18: "E", 21: "Z", 24: "Y",
}
# @formatter:on


# Tests ----------------------------------------------------------------------------------------------------------------

class TestBandTable:

    def test_codes(self):
        assert dict(band_codes) == EXPECTED_CODES
        assert len(band_codes) == 17

    def test_immutable(self):
        with raises(TypeError):
            band_codes[0] = " "

    def test_valid_exponents_are_multiples_of_three(self):
        assert valid_exponents == tuple(range(-24, 25, 3))


class TestBandCode:

    @pytest.mark.parametrize("exponent, code", EXPECTED_CODES.items())
    def test_band_exponents(self, exponent, code):
        assert band_code(exponent) == code

    @pytest.mark.parametrize(
        "exponent, code",
        [
            pytest.param(-4, "µ", id="micro-band"),
            pytest.param(-1, "m", id="milli-band"),
            pytest.param(2, "", id="unit-band"),
            pytest.param(5, "k", id="kilo-band"),
            pytest.param(-22, "y", id="yocto-band"),
        ],
    )
    def test_exponent_inside_band(self, exponent, code):
        assert band_code(exponent) == code

    @pytest.mark.parametrize("exponent", [-27, 27, -25, 25, 26, 300])
    def test_out_of_range(self, exponent):
        assert band_code(exponent) == ""

    def test_lookup_narrower_than_formatter(self):
        assert band_code(26) == ""
        assert to_engineering(1e26) == "100Y"

    def test_type(self):
        with raises(TypeError, match="exponent must be an int"):
            band_code(3.0)


class TestBandIndex:

    @pytest.mark.parametrize(
        "exponent, index",
        [
            pytest.param(-24, 0, id="yocto"),
            pytest.param(-9, 5, id="nano"),
            pytest.param(-4, 6, id="micro-band"),
            pytest.param(0, 8, id="unit"),
            pytest.param(3, 9, id="kilo"),
            pytest.param(24, 16, id="yotta"),
        ],
    )
    def test_index(self, exponent, index):
        assert band_index(exponent) == index

    @pytest.mark.parametrize("exponent", [-27, -25, 25, 27])
    def test_index_out_of_range(self, exponent):
        with raises(BandRangeError, match="exponent must be in"):
            band_index(exponent)

    @pytest.mark.parametrize("index", range(17))
    def test_exponent_invariant(self, index):
        assert band_exponent(index) == index * 3 - 24
        assert band_index(band_exponent(index)) == index

    @pytest.mark.parametrize("index", [-1, 17, 100])
    def test_exponent_out_of_range(self, index):
        with raises(BandRangeError, match="band index must be in"):
            band_exponent(index)

    @pytest.mark.parametrize("index", [True, 1.0, "1", None])
    def test_exponent_type(self, index):
        with raises(TypeError):
            band_exponent(index)

    def test_range_error_is_value_error(self):
        with raises(ValueError):
            band_exponent(17)


class TestCodeExponent:

    @pytest.mark.parametrize("exponent, code", EXPECTED_CODES.items())
    def test_codes(self, exponent, code):
        assert code_exponent(code) == exponent

    @pytest.mark.parametrize(
        "code, exponent",
        [
            pytest.param("u", -6, id="ascii-micro"),
            pytest.param("μ", -6, id="greek-mu"),
            pytest.param(" ", 0, id="space-unit"),
        ],
    )
    def test_aliases(self, code, exponent):
        assert code_exponent(code) == exponent

    @pytest.mark.parametrize("code", ["x", "K", "mm", "e+27"])
    def test_unknown(self, code):
        with raises(BandRangeError, match="unknown band code"):
            code_exponent(code)

    def test_type(self):
        with raises(TypeError, match="band code must be a str"):
            code_exponent(3)


class TestPrefix:

    def test_values(self):
        assert Prefix.YOTTA == 24
        assert Prefix.UNIT == 0
        assert Prefix.NANO == -9
        assert Prefix.YOCTO == -24
        assert len(Prefix) == 17

    @pytest.mark.parametrize("prefix", list(Prefix))
    def test_index_invariant(self, prefix):
        assert prefix.index * 3 - 24 == prefix
        assert Prefix.from_index(prefix.index) is prefix

    def test_codes(self):
        assert Prefix.NANO.code == "n"
        assert Prefix.MICRO.code == "µ"
        assert Prefix.UNIT.code == ""
        assert Prefix.MEGA.code == "M"

    def test_from_code(self):
        assert Prefix.from_code("M") is Prefix.MEGA
        assert Prefix.from_code("u") is Prefix.MICRO
        assert Prefix.from_code("") is Prefix.UNIT

    def test_from_index_out_of_range(self):
        with raises(BandRangeError):
            Prefix.from_index(17)


class TestUnitsAndSymbols:

    @pytest.mark.parametrize(
        "unit, abbreviation",
        [
            pytest.param(Unit.AMPERE, "A", id="ampere"),
            pytest.param(Unit.VOLT, "V", id="volt"),
            pytest.param(Unit.OHM, "Ω", id="ohm"),
            pytest.param(Unit.HERTZ, "Hz", id="hertz"),
            pytest.param(Unit.FARAD, "F", id="farad"),
            pytest.param(Unit.HENRY, "H", id="henry"),
            pytest.param(Unit.WATT, "W", id="watt"),
        ],
    )
    def test_units(self, unit, abbreviation):
        assert unit == abbreviation
        assert f"{unit}" == abbreviation

    def test_symbols(self):
        assert Symbol.ABOUT == "≈"
        assert Symbol.DEGREE == "°"
        assert f"{Symbol.ABOUT}5 {Unit.VOLT}" == "≈5 V"

    def test_angle_factors(self):
        assert math.isclose(180 * DEG_TO_RAD, math.pi)
        assert math.isclose(math.pi * RAD_TO_DEG, 180)
        assert math.isclose(math.pi * RAD_TO_GRAD, 200)
        assert math.isclose(200 * GRAD_TO_RAD, math.pi)
