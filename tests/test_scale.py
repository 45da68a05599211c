#
# Scaler - Scale Selection Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from scaler.options import Scaling
from scaler.scale import Scale, floor_log, select_scale


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFloorLog:

    @pytest.mark.parametrize('value, base, expected', [
        pytest.param(1, 10, 0, id='one'),
        pytest.param(9, 10, 0, id='nine'),
        pytest.param(10, 10, 1, id='ten'),
        pytest.param(999, 10, 2, id='999'),
        pytest.param(1000, 10, 3, id='1000'),
        pytest.param(0.001, 10, -3, id='milli_float'),
        pytest.param(Fraction(1, 1000), 10, -3, id='milli_exact'),
        pytest.param(Fraction(999, 1000), 10, -1, id='below_one'),
        pytest.param(10 ** 400, 10, 400, id='beyond_float'),
        pytest.param(Fraction(1, 10 ** 400), 10, -400, id='below_float'),
        pytest.param(1023, 2, 9, id='1023'),
        pytest.param(1024, 2, 10, id='1024'),
        pytest.param(0.1, 2, -4, id='tenth_base2'),
        pytest.param(2 ** 200 - 1, 2, 199, id='just_below_power'),
    ])
    def test_values(self, value, base, expected):
        assert floor_log(value, base) == expected

    @pytest.mark.parametrize('value', [0, -1, Fraction(-1, 2)])
    def test_non_positive(self, value):
        with pytest.raises(ValueError):
            floor_log(value, 10)


class TestSelectScaleDecimal:

    def test_kilo(self):
        scale = select_scale(42069, Scaling.decimal())
        assert scale == Scale(mantissa=Fraction(42069, 1000), base=10, exponent=3, prefix="k")

    def test_micro(self):
        scale = select_scale(Fraction(1, 10000), Scaling.decimal())
        assert (scale.exponent, scale.prefix) == (-6, "µ")
        assert scale.mantissa == 100

    def test_no_prefix(self):
        scale = select_scale(999, Scaling.decimal())
        assert (scale.exponent, scale.prefix, scale.mantissa) == (0, "", 999)

    @pytest.mark.parametrize('value, exponent', [
        pytest.param(Fraction(1, 10 ** 31), -31, id='below_quecto'),
        pytest.param(10 ** 33, 33, id='above_quetta'),
        pytest.param(5 * 10 ** 40, 40, id='far_above'),
    ])
    def test_fallback(self, value, exponent):
        scale = select_scale(value, Scaling.decimal())
        assert scale.scientific and scale.fallback
        assert scale.prefix is None
        assert scale.base == 10
        assert scale.exponent == exponent
        assert 1 <= scale.mantissa < 10

    @pytest.mark.parametrize('value', [1, 999, 1000, 0.5, 123456789, Fraction(7, 3), 1e-29, 9.99e32])
    def test_mantissa_bounds(self, value):
        scale = select_scale(value, Scaling.decimal())
        assert not scale.fallback
        assert 1 <= scale.mantissa < 1000
        assert scale.value == Fraction(value)


class TestSelectScaleBinary:

    def test_kibi(self):
        scale = select_scale(1024, Scaling.binary())
        assert scale == Scale(mantissa=Fraction(1), base=2, exponent=10, prefix="Ki")

    def test_below_kibi(self):
        scale = select_scale(1023, Scaling.binary())
        assert (scale.exponent, scale.prefix, scale.mantissa) == (0, "", 1023)

    @pytest.mark.parametrize('value, exponent, mantissa', [
        pytest.param(0.5, -1, 1, id='half'),
        pytest.param(0.1, -4, Fraction(0.1) * 16, id='tenth'),
        pytest.param(2 ** 90, 90, 1, id='above_yobi'),
    ])
    def test_fallback(self, value, exponent, mantissa):
        scale = select_scale(value, Scaling.binary())
        assert scale.scientific and scale.fallback
        assert (scale.base, scale.exponent, scale.mantissa) == (2, exponent, mantissa)


class TestSelectScaleOther:

    def test_none(self):
        scale = select_scale(123.456, Scaling.none())
        assert scale == Scale(mantissa=Fraction(123.456), base=10, exponent=0, prefix=None)

    def test_scientific(self):
        scale = select_scale(1234, Scaling.scientific())
        assert scale == Scale(mantissa=Fraction(1234, 1000), base=10, exponent=3, scientific=True)
        assert not scale.fallback

    def test_scientific_small(self):
        scale = select_scale(Fraction(5, 1000), Scaling.scientific())
        assert (scale.exponent, scale.mantissa) == (-3, 5)

    @pytest.mark.parametrize('scaling, prefix, scientific', [
        pytest.param(Scaling.decimal(), "", False, id='decimal'),
        pytest.param(Scaling.binary(), "", False, id='binary'),
        pytest.param(Scaling.none(), None, False, id='none'),
        pytest.param(Scaling.scientific(), None, True, id='scientific'),
    ])
    def test_zero(self, scaling, prefix, scientific):
        scale = select_scale(0, scaling)
        assert scale.mantissa == 0
        assert scale.exponent == 0
        assert scale.prefix == prefix
        assert scale.scientific is scientific
        assert scale.base == scaling.base

    def test_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            select_scale(-1, Scaling.decimal())

    def test_invalid_scaling(self):
        with pytest.raises(TypeError, match="Scaling"):
            select_scale(1, "decimal")

    def test_unit(self):
        assert select_scale(2048, Scaling.binary()).unit == 1024
        assert select_scale(0.002, Scaling.decimal()).unit == Fraction(1, 1000)
