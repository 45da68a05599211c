"""
Rounding of scaled numbers to a magnitude or to significant digits.

All arithmetic is exact (fractions.Fraction), rounding is half away from zero.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .options import Rounding, Scaling
from .scale import Scale, floor_log, select_scale
from .tools import fmt_type

# Upper limit of re-evaluations after a rounding carry into the next bucket
MAX_CARRY = 2


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Rounded:
    """
    Rounded mantissa as exact decimal digit runs.

    Attributes:
        integer: integer digits of the mantissa, no separators, at least "0".
        fraction: fractional digits, padded with zeros to the rounding width.
        scale: the bucket the digits belong to, revised after a rounding carry.

    Example:
        999.96 rounded to 4 significant digits in decimal scaling is
        Rounded(integer='1', fraction='000', scale=<bucket of 'k'>)
    """
    integer: str
    fraction: str
    scale: Scale

    @property
    def places(self) -> int:
        """Number of fractional digits."""
        return len(self.fraction)


# Methods --------------------------------------------------------------------------------------------------------------

def round_scale(scale: Scale, scaling: Scaling, rounding: Rounding) -> Rounded:
    """
    Round the mantissa of a Scale and resolve bucket overflow caused by rounding.

    If rounding pushes the mantissa to the bucket bound (999.96 → 1000.0 in decimal
    scaling, 1023.96 → 1024 in binary, 9.9996 → 10.000 in scientific notation) the rounded
    value is re-scaled to the next bucket and rounded again under the same rule.
    The same happens when rounding adds an integer digit in "none" scaling
    (9.9996 → 10.00 for 4 significant digits). At most MAX_CARRY re-evaluations.

    Raises:
        TypeError: If scale, scaling or rounding have invalid types.
    """
    if not isinstance(scale, Scale):
        raise TypeError(f"scale must be Scale, but got {fmt_type(scale)}")
    if not isinstance(scaling, Scaling):
        raise TypeError(f"scaling must be Scaling, but got {fmt_type(scaling)}")
    if not isinstance(rounding, Rounding):
        raise TypeError(f"rounding must be Rounding, but got {fmt_type(rounding)}")

    if rounding.type == "significant" and rounding.precision == 0:
        scale = select_scale(0, scaling)

    for attempt in range(MAX_CARRY + 1):
        position = _round_position(scale, scaling, rounding)
        mantissa = _round_half_up(scale.mantissa, position)

        if mantissa == 0 and scale.mantissa != 0:
            # Rounded away completely, render as zero
            scale = select_scale(0, scaling)
            position = _round_position(scale, scaling, rounding)
            break

        carried = select_scale(mantissa * scale.unit, scaling)
        if attempt == MAX_CARRY or _same_bucket(carried, scale, mantissa):
            break
        scale = carried

    return _digits(mantissa, places=max(0, position), scale=scale)


def round_mag(x: float, magnitude: int) -> float:
    """
    Round a number x to a specific magnitude m where x ≈ 10^m.

    Rounding to whole numbers is magnitude 0, to tens magnitude 1, to tenths magnitude -1.
    Ties round away from zero. Non-finite values are returned unchanged.

    Examples:
        >>> round_mag(42.069, -2)
        42.07
        >>> round_mag(42.069, 0)
        42.0
        >>> round_mag(42.069, 1)
        40.0
        >>> round_mag(42.069, 2)
        0.0
        >>> round_mag(0.5, 0)
        1.0
    """
    if not isinstance(magnitude, int) or isinstance(magnitude, bool):
        raise TypeError(f"magnitude must be int, but got {fmt_type(magnitude)}")
    if not math.isfinite(x) or x == 0:
        return x

    rounded = _round_half_up(Fraction(abs(x)), -magnitude)
    try:
        return math.copysign(float(rounded), x)
    except OverflowError:
        # 1.7976931348623157e308 rounded up leaves the float range
        return math.copysign(math.inf, x)


def round_sig(x: float, significants: int) -> float:
    """
    Round a number x to a specific number of significant digits.

    Rounding to 0 significant digits always returns 0. Ties round away from zero.
    Non-finite values are returned unchanged.

    Raises:
        TypeError: If significants is not an int.
        ValueError: If significants < 0.

    Examples:
        >>> round_sig(123.45, 0)
        0.0
        >>> round_sig(123.45, 2)
        120.0
        >>> round_sig(123.45, 4)
        123.5
        >>> round_sig(0.789, 2)
        0.79
    """
    if not isinstance(significants, int) or isinstance(significants, bool):
        raise TypeError(f"significants must be int, but got {fmt_type(significants)}")
    if significants < 0:
        raise ValueError(f"significants must be >= 0, got {significants}")
    if not math.isfinite(x):
        return x
    if x == 0 or significants == 0:
        return 0.0

    magnitude = floor_log(abs(x), 10)
    return round_mag(x, magnitude - significants + 1)


# Private Methods ------------------------------------------------------------------------------------------------------

def _round_position(scale: Scale, scaling: Scaling, rounding: Rounding) -> int:
    """
    Number of fractional mantissa digits to keep; negative rounds to tens, hundreds, ...
    """
    if rounding.type == "significant":
        return rounding.precision - _integer_digits(scale.mantissa)

    # Magnitude: convert the absolute target 10^precision to a mantissa digit position
    if scaling.type == "scientific":
        return max(0, -rounding.precision)
    return _decimal_order(scale) - rounding.precision


def _decimal_order(scale: Scale) -> int:
    """
    Decimal order of the bucket unit: exponent for base 10, floor(log10(2^e)) for base 2.
    """
    if scale.base == 10 or scale.exponent == 0:
        return scale.exponent
    return floor_log(scale.unit, 10)


def _integer_digits(mantissa: Fraction) -> int:
    """
    Count of digits before the decimal point: 3 for 123.4, 1 for 1.5,
    0 for 0.12 and -1 for 0.012. A zero mantissa counts as the single digit "0".
    """
    if mantissa == 0:
        return 1
    return floor_log(mantissa, 10) + 1


def _round_half_up(value: Fraction, position: int) -> Fraction:
    """Round a non-negative value to `position` fractional digits, ties away from zero."""
    factor = Fraction(10) ** position
    return Fraction(math.floor(value * factor + Fraction(1, 2))) / factor


def _same_bucket(carried: Scale, scale: Scale, mantissa: Fraction) -> bool:
    """True if the rounded mantissa stays in the bucket and keeps its integer digit count."""
    return (carried.exponent == scale.exponent
            and carried.scientific == scale.scientific
            and _integer_digits(mantissa) == _integer_digits(scale.mantissa))


def _digits(mantissa: Fraction, places: int, scale: Scale) -> Rounded:
    scaled = mantissa * 10 ** places
    # Exact after rounding at a position <= places
    number = str(scaled.numerator // scaled.denominator).rjust(places + 1, "0")
    if places == 0:
        return Rounded(integer=number, fraction="", scale=scale)
    return Rounded(integer=number[:-places], fraction=number[-places:], scale=scale)
