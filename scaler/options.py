"""
Scaler formatting options: scaling mode, rounding mode and sign policy.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Literal, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .prefixes import PrefixTable, BINARY_PREFIXES, DECIMAL_PREFIXES
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Scaling:
    """
    Scaling mode of the formatted number.

    Attributes:
        type: scaling type, one of:
            - "binary": scale by 2¹⁰ = 1024 while IEC prefixes last, then fall back to
              base 2 scientific notation. Example: "1,000 Ki"
            - "decimal": scale by 10³ = 1000 while SI prefixes last, then fall back to
              base 10 scientific notation. Example: "1,000 k"
            - "none": no scaling, never scientific notation. Example: "1.000"
            - "scientific": always scientific notation. Example: "1,000 * 10^(3)"
        spaced: put a space between number and a non-empty unit prefix;
            used by "binary" and "decimal" only.

    Examples:
        >>> Scaling.decimal(spaced=False)
        Scaling(type='decimal', spaced=False)
        >>> Scaling.binary().table.step
        10
    """
    type: Literal["binary", "decimal", "none", "scientific"] = "decimal"
    spaced: bool = True

    def __post_init__(self):
        if self.type not in ("binary", "decimal", "none", "scientific"):
            raise ValueError(f"scaling type expected one of 'binary', 'decimal', 'none', 'scientific' "
                             f"but found {fmt_value(self.type)}")
        if not isinstance(self.spaced, bool):
            raise TypeError(f"spaced must be bool, but got {fmt_type(self.spaced)}")

    @classmethod
    def binary(cls, spaced: bool = True) -> Self:
        return cls(type="binary", spaced=spaced)

    @classmethod
    def decimal(cls, spaced: bool = True) -> Self:
        return cls(type="decimal", spaced=spaced)

    @classmethod
    def none(cls) -> Self:
        return cls(type="none", spaced=False)

    @classmethod
    def scientific(cls) -> Self:
        return cls(type="scientific", spaced=False)

    @property
    def base(self) -> int:
        """Scaling base: 2 for binary, 10 otherwise."""
        return 2 if self.type == "binary" else 10

    @property
    def table(self) -> PrefixTable | None:
        """Unit prefix table of the scaling mode, None for "none" and "scientific"."""
        if self.type == "binary":
            return BINARY_PREFIXES
        if self.type == "decimal":
            return DECIMAL_PREFIXES
        return None


@dataclass(frozen=True)
class Rounding:
    """
    Rounding mode and precision.

    Attributes:
        type: rounding type, one of:
            - "magnitude": round statically to the digit at 10^precision;
              precision -2 keeps hundredths, 0 keeps units, 1 rounds to tens.
            - "significant": round dynamically to `precision` significant digits;
              0 significant digits always renders as 0.
        precision: rounding precision, any int for "magnitude", int >= 0 for "significant".

    Examples:
        >>> Rounding.magnitude(-2)
        Rounding(type='magnitude', precision=-2)
        >>> Rounding.significant(4)
        Rounding(type='significant', precision=4)
    """
    type: Literal["magnitude", "significant"] = "significant"
    precision: int = 4

    def __post_init__(self):
        if self.type not in ("magnitude", "significant"):
            raise ValueError(f"rounding type expected one of 'magnitude', 'significant' "
                             f"but found {fmt_value(self.type)}")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"precision must be int, but got {fmt_type(self.precision)}")
        if self.type == "significant" and self.precision < 0:
            raise ValueError(f"significant digits must be >= 0, got {self.precision}")

    @classmethod
    def magnitude(cls, precision: int) -> Self:
        return cls(type="magnitude", precision=precision)

    @classmethod
    def significant(cls, precision: int) -> Self:
        return cls(type="significant", precision=precision)


# @formatter:off
@unique
class Sign(StrEnum):
    """
    Sign display policy.

    ALWAYS shows "+" for zero and positive values, ONLY_MINUS shows "-" for negative values only.
    """
    ALWAYS = "always"
    ONLY_MINUS = "only_minus"
# @formatter:on
