"""
Rendering of rounded numbers: sign, digit grouping, decimal separator and unit suffix.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math

# Local ----------------------------------------------------------------------------------------------------------------
from .options import Sign
from .round import Rounded


# Methods --------------------------------------------------------------------------------------------------------------

def sign_symbol(value: float, sign: Sign) -> str:
    """
    Sign glyph of the original signed value, independent of rounding.

    Sign.ALWAYS gives "+" for zero (including -0.0), positive values and +inf, "-" otherwise.
    Sign.ONLY_MINUS gives "-" for negative values and -inf, "" otherwise.

    Examples:
        >>> sign_symbol(0.0, Sign.ALWAYS)
        '+'
        >>> sign_symbol(-0.0, Sign.ONLY_MINUS)
        ''
        >>> sign_symbol(float('-inf'), Sign.ONLY_MINUS)
        '-'
    """
    if value < 0:
        return "-"
    if sign == Sign.ALWAYS:
        return "+"
    return ""


def group_digits(digits: str, separator: str) -> str:
    """
    Insert the separator between every 3 digits, counted from the least significant digit.

    Examples:
        >>> group_digits("10000000000", ".")
        '10.000.000.000'
        >>> group_digits("123", ".")
        '123'
        >>> group_digits("1234", "")
        '1234'
    """
    if not separator or len(digits) <= 3:
        return digits

    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def render_number(rounded: Rounded,
                  *,
                  group_separator: str,
                  decimal_separator: str,
                  trailing_zeros: bool = True,
                  spaced: bool = True,
                  mult: str = "*") -> str:
    """
    Assemble the unsigned number string from rounded digits.

    - integer digits grouped with group_separator;
    - decimal_separator and fractional digits, trailing zeros stripped if trailing_zeros
      is False, the separator omitted with an empty fraction;
    - unit prefix, preceded by a space if spaced and the prefix is non-empty;
    - or scientific suffix " * base^(exponent)".

    Examples:
        1.5 Ki, rounded to 4 digits: "1,500 Ki"
        Same with trailing_zeros=False: "1,5 Ki"
    """
    number = group_digits(rounded.integer, group_separator)

    fraction = rounded.fraction if trailing_zeros else rounded.fraction.rstrip("0")
    if fraction:
        number = f"{number}{decimal_separator}{fraction}"

    return f"{number}{_suffix_str(rounded, spaced=spaced, mult=mult)}"


def render_infinity(value: float, sign: Sign, symbol: str = "∞") -> str:
    """
    Infinity with its sign glyph.

    Examples:
        >>> render_infinity(float('-inf'), Sign.ONLY_MINUS)
        '-∞'
        >>> render_infinity(float('inf'), Sign.ALWAYS)
        '+∞'
    """
    if not math.isinf(value):
        raise ValueError(f"infinite value required, got {value!r}")
    return f"{sign_symbol(value, sign)}{symbol}"


# Private Methods ------------------------------------------------------------------------------------------------------

def _suffix_str(rounded: Rounded, *, spaced: bool, mult: str) -> str:
    """Unit prefix or scientific multiplier suffix."""
    scale = rounded.scale

    if scale.scientific:
        return f" {mult} {scale.base}^({scale.exponent})"

    if scale.prefix:
        return f" {scale.prefix}" if spaced else scale.prefix

    return ""
