#
# Scaler - Render Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from scaler.options import Sign
from scaler.render import group_digits, render_infinity, render_number, sign_symbol
from scaler.round import Rounded
from scaler.scale import Scale


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSignSymbol:

    @pytest.mark.parametrize('value, sign, expected', [
        pytest.param(-1.0, Sign.ALWAYS, "-", id='negative_always'),
        pytest.param(-1.0, Sign.ONLY_MINUS, "-", id='negative_only_minus'),
        pytest.param(0.0, Sign.ALWAYS, "+", id='zero_always'),
        pytest.param(0.0, Sign.ONLY_MINUS, "", id='zero_only_minus'),
        pytest.param(-0.0, Sign.ALWAYS, "+", id='negative_zero_always'),
        pytest.param(-0.0, Sign.ONLY_MINUS, "", id='negative_zero_only_minus'),
        pytest.param(2.0, Sign.ALWAYS, "+", id='positive_always'),
        pytest.param(2.0, Sign.ONLY_MINUS, "", id='positive_only_minus'),
        pytest.param(math.inf, Sign.ALWAYS, "+", id='inf_always'),
        pytest.param(-math.inf, Sign.ONLY_MINUS, "-", id='neg_inf_only_minus'),
    ])
    def test_sign(self, value, sign, expected):
        assert sign_symbol(value, sign) == expected


class TestGroupDigits:

    @pytest.mark.parametrize('digits, separator, expected', [
        pytest.param("0", ".", "0", id='zero'),
        pytest.param("123", ".", "123", id='three'),
        pytest.param("1234", ".", "1.234", id='four'),
        pytest.param("123456", " ", "123 456", id='six'),
        pytest.param("1234567", ".", "1.234.567", id='seven'),
        pytest.param("1234", "", "1234", id='disabled'),
        pytest.param("1234567", "'", "1'234'567", id='apostrophe'),
        pytest.param("12345", "--", "12--345", id='multichar'),
    ])
    def test_grouping(self, digits, separator, expected):
        assert group_digits(digits, separator) == expected


class TestRenderNumber:

    @staticmethod
    def _kilo(integer: str, fraction: str) -> Rounded:
        return Rounded(integer=integer, fraction=fraction,
                       scale=Scale(mantissa=Fraction(1234), exponent=3, prefix="k"))

    def test_prefix_spaced(self):
        s = render_number(self._kilo("1234", "500"), group_separator=".", decimal_separator=",")
        assert s == "1.234,500 k"

    def test_prefix_unspaced(self):
        s = render_number(self._kilo("1234", "500"), group_separator=".", decimal_separator=",", spaced=False)
        assert s == "1.234,500k"

    def test_strip_trailing_zeros(self):
        s = render_number(self._kilo("1234", "500"), group_separator=".", decimal_separator=",",
                          trailing_zeros=False)
        assert s == "1.234,5 k"

    def test_strip_dangling_separator(self):
        s = render_number(self._kilo("12", "000"), group_separator=".", decimal_separator=",",
                          trailing_zeros=False)
        assert s == "12 k"

    def test_empty_prefix(self):
        r = Rounded(integer="999", fraction="0", scale=Scale(mantissa=Fraction(999), prefix=""))
        assert render_number(r, group_separator=".", decimal_separator=",") == "999,0"

    def test_no_prefix(self):
        r = Rounded(integer="1000", fraction="", scale=Scale(mantissa=Fraction(1000)))
        assert render_number(r, group_separator=".", decimal_separator=",") == "1.000"

    @pytest.mark.parametrize('trailing_zeros, mult, expected', [
        pytest.param(True, "*", "1,000 * 2^(-10)", id='default'),
        pytest.param(False, "*", "1 * 2^(-10)", id='stripped'),
        pytest.param(True, "×", "1,000 × 2^(-10)", id='cross'),
    ])
    def test_scientific(self, trailing_zeros, mult, expected):
        r = Rounded(integer="1", fraction="000",
                    scale=Scale(mantissa=Fraction(1), base=2, exponent=-10, scientific=True, fallback=True))
        s = render_number(r, group_separator=".", decimal_separator=",", trailing_zeros=trailing_zeros, mult=mult)
        assert s == expected


class TestRenderInfinity:

    @pytest.mark.parametrize('value, sign, expected', [
        pytest.param(math.inf, Sign.ONLY_MINUS, "∞", id='inf'),
        pytest.param(math.inf, Sign.ALWAYS, "+∞", id='inf_always'),
        pytest.param(-math.inf, Sign.ONLY_MINUS, "-∞", id='neg_inf'),
        pytest.param(-math.inf, Sign.ALWAYS, "-∞", id='neg_inf_always'),
    ])
    def test_infinity(self, value, sign, expected):
        assert render_infinity(value, sign) == expected

    def test_custom_symbol(self):
        assert render_infinity(-math.inf, Sign.ONLY_MINUS, symbol="inf") == "-inf"

    def test_finite(self):
        with pytest.raises(ValueError):
            render_infinity(1.0, Sign.ALWAYS)
