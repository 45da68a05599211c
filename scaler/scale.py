"""
Scale bucket selection: split a non-negative value into mantissa and bucket exponent.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .options import Scaling
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Scale:
    """
    A value split into mantissa and bucket:

        value = mantissa * base^exponent

    Attributes:
        mantissa: exact scaled value; in [1, base^step) for a resolved prefix,
            in [1, base) for scientific notation, 0 for zero.
        base: scaling base, 2 or 10.
        exponent: bucket exponent of the base.
        prefix: resolved unit prefix ("" for no prefix), None if no prefix applies.
        scientific: rendered as "mantissa * base^(exponent)".
        fallback: scientific only because the prefix table does not cover the exponent.

    Example:
        123456 in decimal scaling is Scale(mantissa=Fraction(15432, 125), base=10,
        exponent=3, prefix='k', scientific=False, fallback=False), i.e. 123.456 k
    """
    mantissa: Fraction
    base: int = 10
    exponent: int = 0
    prefix: str | None = None
    scientific: bool = False
    fallback: bool = False

    @property
    def unit(self) -> Fraction:
        """Bucket value base^exponent."""
        return Fraction(self.base) ** self.exponent

    @property
    def value(self) -> Fraction:
        """The unscaled value, mantissa * base^exponent."""
        return self.mantissa * self.unit


# Methods --------------------------------------------------------------------------------------------------------------

def floor_log(value: Fraction | int | float, base: int) -> int:
    """
    Exact integer floor(log_base(value)) of a positive value.

    The float estimate is corrected with exact rational comparisons, so values sitting
    on a power boundary and values beyond the float range are handled correctly.

    Examples:
        >>> floor_log(1000, 10)
        3
        >>> floor_log(0.001, 10)  # float 0.001 is slightly above 10⁻³
        -3
        >>> floor_log(1023, 2)
        9
        >>> floor_log(10**400, 10)
        400
    """
    value = Fraction(value)
    if value <= 0:
        raise ValueError(f"positive value required, got {fmt_value(float(value))}")

    estimate = (math.log(value.numerator) - math.log(value.denominator)) / math.log(base)
    exponent = math.floor(estimate)

    base_ = Fraction(base)
    while base_ ** exponent > value:
        exponent -= 1
    while base_ ** (exponent + 1) <= value:
        exponent += 1
    return exponent


def select_scale(value: Fraction | int | float, scaling: Scaling) -> Scale:
    """
    Pick the bucket exponent and mantissa for a finite non-negative value.

    - "none": mantissa is the value itself, exponent 0.
    - "scientific": exponent is floor(log10(value)), mantissa in [1, 10).
    - "decimal"/"binary": the prefix grid exponent with mantissa in [1, 1000) or [1, 1024);
      values beyond the prefix table fall back to scientific notation in the table base.
    - zero: exponent 0 and the prefix of exponent 0 where a table applies.

    Raises:
        TypeError: If scaling is not a Scaling instance.
        ValueError: If value is negative.

    Examples:
        >>> select_scale(42069, Scaling.decimal()).prefix
        'k'
        >>> s = select_scale(0.1, Scaling.binary())
        >>> s.exponent, s.fallback
        (-4, True)
    """
    if not isinstance(scaling, Scaling):
        raise TypeError(f"scaling must be Scaling, but got {fmt_type(scaling)}")

    value = Fraction(value)
    if value < 0:
        raise ValueError(f"non-negative value required, got {fmt_value(float(value))}")

    table = scaling.table

    if value == 0:
        return Scale(mantissa=Fraction(0),
                     base=scaling.base,
                     exponent=0,
                     prefix=table.lookup(0) if table is not None else None,
                     scientific=scaling.type == "scientific")

    if scaling.type == "none":
        return Scale(mantissa=value, base=10, exponent=0)

    if scaling.type == "scientific":
        return _scientific(value, base=10)

    raw_exponent = floor_log(value, table.base)
    exponent = table.bucket(raw_exponent)
    if not table.covers(exponent):
        return _scientific(value, base=table.base, fallback=True)

    return Scale(mantissa=value / Fraction(table.base) ** exponent,
                 base=table.base,
                 exponent=exponent,
                 prefix=table.lookup(exponent))


def _scientific(value: Fraction, base: int, fallback: bool = False) -> Scale:
    exponent = floor_log(value, base)
    return Scale(mantissa=value / Fraction(base) ** exponent,
                 base=base,
                 exponent=exponent,
                 scientific=True,
                 fallback=fallback)
