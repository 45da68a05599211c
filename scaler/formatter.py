"""
Number formatter to scale, round, and display numbers.
"""

# ## Scope
#
# `Formatter` is designed for **one-way formatting** (numeric value → human-readable string).
# It is NOT designed for parsing strings back to values.

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import math
import warnings
from dataclasses import dataclass
from fractions import Fraction
from typing import Callable, Literal, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import std_float
from .options import Rounding, Scaling, Sign
from .render import render_infinity, render_number, sign_symbol
from .round import round_scale
from .scale import select_scale
from .sentinels import UNSET, UnsetType, ifnotunset
from .tools import fmt_type, fmt_value


# @formatter:off

class FormatterConf:
    """
    Default configuration constants for Formatter.

    Attributes:
        DECIMAL_SEPARATOR: Separator of integer and fractional digits.
        GROUP_SEPARATOR: Separator of integer digit groups of 3.
        ROUNDING: 4 significant digits.
        SCALING: Decimal SI prefixes, space between number and prefix.
        SIGN: Sign shown for negative values only.
        TRAILING_ZEROS: Keep fractional zeros up to the rounding precision.

        INFINITY: Symbol of infinity, preceded by the sign glyph.
        NAN: Symbol of Not-a-Number, never signed.
        MULT: Multiplier symbol of the scientific suffix " * 10^(3)".
        AMBIGUOUS_CHARS: Characters which make a separator ambiguous.
    """
    DECIMAL_SEPARATOR = ","
    GROUP_SEPARATOR = "."
    ROUNDING = Rounding.significant(4)
    SCALING = Scaling.decimal(spaced=True)
    SIGN = Sign.ONLY_MINUS
    TRAILING_ZEROS = True

    INFINITY = "∞"
    NAN = "NaN"
    MULT = "*"
    AMBIGUOUS_CHARS = "0123456789+-∞"

# @formatter:on


class AmbiguousSeparatorWarning(UserWarning):
    """Group and decimal separators may render numbers ambiguously."""


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Formatter:
    """
    A convenient formatter to scale, round, and display numbers.

    Immutable: setters return an updated copy, so one instance can be shared freely.
    Defaults are only minus sign, decimal scaling, rounding to 4 significant digits,
    "." as group separator and "," as decimal separator.

    Attributes:
        decimal_separator: separates the integer and fractional parts of a number.
        group_separator: separates groups of 3 digits before the decimal separator.
        rounding: rounding mode with precision, see Rounding.
        scaling: scaling mode, see Scaling.
        sign: sign display policy, see Sign.
        trailing_zeros: keep trailing fractional zeros; if False they are stripped
            together with a dangling decimal separator.

    Examples:
        >>> f = Formatter().set_rounding(Rounding.significant(2))  # general display
        >>> f.format(123), f.format(4.56)
        ('120', '4,6')

        >>> f = Formatter()  # calculation results
        >>> f.format(456789), f.format(0.1)
        ('456,8 k', '100,0 m')

        >>> f = Formatter().set_scaling(Scaling.none()).set_rounding(Rounding.magnitude(0))  # absolute values
        >>> f.format(0.1), f.format(1), f.format(1000)
        ('0', '1', '1.000')

        >>> f = Formatter().set_scaling(Scaling.binary())  # data sizes
        >>> f.format(0.1), f.format(1023), f.format(1024)
        ('1,600 * 2^(-4)', '1.023', '1,000 Ki')
    """
    decimal_separator: str = FormatterConf.DECIMAL_SEPARATOR
    group_separator: str = FormatterConf.GROUP_SEPARATOR
    rounding: Rounding = FormatterConf.ROUNDING
    scaling: Scaling = FormatterConf.SCALING
    sign: Sign = FormatterConf.SIGN
    trailing_zeros: bool = FormatterConf.TRAILING_ZEROS

    def __post_init__(self):
        """
        Validate fields
        """
        if not isinstance(self.decimal_separator, str):
            raise TypeError(f"decimal_separator must be str, but got {fmt_type(self.decimal_separator)}")
        if not isinstance(self.group_separator, str):
            raise TypeError(f"group_separator must be str, but got {fmt_type(self.group_separator)}")
        if not isinstance(self.rounding, Rounding):
            raise TypeError(f"rounding must be Rounding, but got {fmt_type(self.rounding)}")
        if not isinstance(self.scaling, Scaling):
            raise TypeError(f"scaling must be Scaling, but got {fmt_type(self.scaling)}")
        if not isinstance(self.trailing_zeros, bool):
            raise TypeError(f"trailing_zeros must be bool, but got {fmt_type(self.trailing_zeros)}")

        # Accept Sign values as plain strings ("always"), store the enum member
        try:
            object.__setattr__(self, "sign", Sign(self.sign))
        except ValueError:
            raise ValueError(f"sign expected one of {[s.value for s in Sign]} "
                             f"but found {fmt_value(self.sign)}") from None

    def __call__(self, value) -> str:
        """Alias of format()."""
        return self.format(value)

    @classmethod
    def default(cls) -> Self:
        """
        Formatter with default options, see FormatterConf.
        """
        return cls()

    def merge(self,
              decimal_separator: str | UnsetType = UNSET,
              group_separator: str | UnsetType = UNSET,
              rounding: Rounding | UnsetType = UNSET,
              scaling: Scaling | UnsetType = UNSET,
              sign: Sign | UnsetType = UNSET,
              trailing_zeros: bool | UnsetType = UNSET,
              ) -> Self:
        """
        Create a new Formatter with merged options.

        Parameters not provided (UNSET) are inherited from the current instance.
        No separator ambiguity check is made here, use set_separators() for that.
        """
        return type(self)(
            decimal_separator=ifnotunset(decimal_separator, default=self.decimal_separator),
            group_separator=ifnotunset(group_separator, default=self.group_separator),
            rounding=ifnotunset(rounding, default=self.rounding),
            scaling=ifnotunset(scaling, default=self.scaling),
            sign=ifnotunset(sign, default=self.sign),
            trailing_zeros=ifnotunset(trailing_zeros, default=self.trailing_zeros),
        )

    def set_rounding(self, rounding: Rounding) -> Self:
        """
        Sets the rounding mode and precision.

        Args:
            rounding: new rounding mode, contains precision
                - Rounding.magnitude(n): round statically to the digit at 10^n
                - Rounding.significant(n): round dynamically to n significant digits

        Returns:
            Updated Formatter.
        """
        return self.merge(rounding=rounding)

    def set_scaling(self, scaling: Scaling) -> Self:
        """
        Sets the scaling mode.

        Args:
            scaling: new scaling mode
                - Scaling.binary(spaced): scale by 2^10 = 1024 until no more prefixes,
                  then fall back to scientific notation
                - Scaling.decimal(spaced): scale by 10^3 = 1000 until no more prefixes,
                  then fall back to scientific notation
                - Scaling.none(): no scaling, no fallback to scientific notation
                - Scaling.scientific(): always scientific notation

        Returns:
            Updated Formatter.
        """
        return self.merge(scaling=scaling)

    def set_separators(self,
                       group_separator: str,
                       decimal_separator: str,
                       *,
                       on_ambiguous: Literal["warn", "ignore"] | Callable[[str], None] = "warn",
                       ) -> Self:
        """
        Sets the group and decimal separator.

        Separators are ambiguous if the decimal separator is empty, both separators are
        the same, or one of them contains a digit, a sign glyph or the infinity symbol.
        Ambiguous separators are accepted as is; only an advisory message is reported.

        Args:
            group_separator: separates groups of 3 digits before the decimal separator,
                empty string disables grouping.
            decimal_separator: separates the integer and fractional parts of a number.
            on_ambiguous: advisory message sink
                - "warn": issue AmbiguousSeparatorWarning via warnings.warn
                - "ignore": no message
                - callable: called with the message string

        Returns:
            Updated Formatter.

        Raises:
            ValueError: If on_ambiguous is not "warn", "ignore" or a callable.
        """
        if not (on_ambiguous in ("warn", "ignore") or isinstance(on_ambiguous, abc.Callable)):
            raise ValueError(f"on_ambiguous must be 'warn', 'ignore' or callable, "
                             f"but found {fmt_value(on_ambiguous)}")

        formatter = self.merge(group_separator=group_separator, decimal_separator=decimal_separator)

        message = _ambiguity_message(group_separator, decimal_separator)
        if message is None or on_ambiguous == "ignore":
            return formatter

        if on_ambiguous == "warn":
            warnings.warn(message, AmbiguousSeparatorWarning, stacklevel=2)
        else:
            on_ambiguous(message)

        return formatter

    def set_sign(self, sign: Sign) -> Self:
        """
        Sets the sign mode.

        Args:
            sign: new sign mode
                - Sign.ALWAYS: always show sign, "+" for zero and positive values
                - Sign.ONLY_MINUS: only show sign when negative

        Returns:
            Updated Formatter.
        """
        return self.merge(sign=sign)

    def set_trailing_zeros(self, trailing_zeros: bool) -> Self:
        """
        Keep (True) or strip (False) trailing fractional zeros.

        Returns:
            Updated Formatter.
        """
        return self.merge(trailing_zeros=trailing_zeros)

    def format(self, value) -> str:
        """
        Scale, round, and display a number.

        Args:
            value: the number to format; int, float or a numeric type convertible
                with std_float() (Decimal, Fraction, NumPy scalars). Converted to float first.

        Returns:
            The formatted number. Never raises for numeric input: infinities render as
            "∞" with sign, NaN renders as "NaN" regardless of the sign mode.

        Raises:
            TypeError: If value is not numeric (bool, None, str, ...).

        Examples:
            >>> Formatter().format(42069)
            '42,07 k'
            >>> Formatter().set_rounding(Rounding.magnitude(-2)).format(42069)
            '42,06900 k'
            >>> Formatter().set_scaling(Scaling.scientific()).format(1e3)
            '1,000 * 10^(3)'
            >>> Formatter().set_scaling(Scaling.decimal()).format(1e33)
            '1,000 * 10^(33)'
            >>> Formatter().set_sign(Sign.ALWAYS).format(0)
            '+0,000'
            >>> Formatter().set_trailing_zeros(False).format(1000)
            '1 k'
        """
        x = std_float(value)

        if math.isnan(x):
            return FormatterConf.NAN

        if math.isinf(x):
            return render_infinity(x, self.sign, symbol=FormatterConf.INFINITY)

        scale = select_scale(Fraction(abs(x)), self.scaling)
        rounded = round_scale(scale, self.scaling, self.rounding)
        number = render_number(rounded,
                               group_separator=self.group_separator,
                               decimal_separator=self.decimal_separator,
                               trailing_zeros=self.trailing_zeros,
                               spaced=self.scaling.spaced,
                               mult=FormatterConf.MULT)
        return f"{sign_symbol(x, self.sign)}{number}"


# Methods --------------------------------------------------------------------------------------------------------------

def new_default_configuration() -> Formatter:
    """Formatter with default options."""
    return Formatter.default()


def set_scaling(formatter: Formatter, scaling: Scaling) -> Formatter:
    return formatter.set_scaling(scaling)


def set_rounding(formatter: Formatter, rounding: Rounding) -> Formatter:
    return formatter.set_rounding(rounding)


def set_separators(formatter: Formatter,
                   group_separator: str,
                   decimal_separator: str,
                   *,
                   on_ambiguous: Literal["warn", "ignore"] | Callable[[str], None] = "warn") -> Formatter:
    return formatter.set_separators(group_separator, decimal_separator, on_ambiguous=on_ambiguous)


def set_sign(formatter: Formatter, sign: Sign) -> Formatter:
    return formatter.set_sign(sign)


def set_trailing_zeros(formatter: Formatter, trailing_zeros: bool) -> Formatter:
    return formatter.set_trailing_zeros(trailing_zeros)


def fmt_number(formatter: Formatter, value) -> str:
    """
    Format a number with the given Formatter.

    Examples:
        >>> fmt_number(new_default_configuration(), 999)
        '999,0'
    """
    if not isinstance(formatter, Formatter):
        raise TypeError(f"formatter must be Formatter, but got {fmt_type(formatter)}")
    return formatter.format(value)


# Private Methods ------------------------------------------------------------------------------------------------------

def _ambiguity_message(group_separator: str, decimal_separator: str) -> str | None:
    """Advisory message for ambiguous separators, None if separators are fine."""
    if decimal_separator == "":
        return "Decimal separator is empty. This may lead to ambiguous formatting."

    if decimal_separator == group_separator:
        return (f"Group separator {group_separator!r} and decimal separator {decimal_separator!r} "
                f"are the same. This may lead to ambiguous formatting.")

    for name, separator in (("Group", group_separator), ("Decimal", decimal_separator)):
        clashes = [c for c in FormatterConf.AMBIGUOUS_CHARS if c in separator]
        if clashes:
            return (f"{name} separator {separator!r} contains {''.join(clashes)!r} "
                    f"which also appears in formatted numbers. This may lead to ambiguous formatting.")

    return None