"""
Scaler unit prefix tables

Read-only exponent-to-prefix lookups for decimal (SI) and binary (IEC) scaling.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping, Iterator, KeysView, ValuesView, ItemsView
from typing import Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class PrefixTable(Mapping[int, str]):
    """
    Immutable exponent → unit prefix map with reverse lookup.

    - Forward direction (exponent -> prefix) implements the stdlib Mapping protocol.
      Membership (x in table) applies to EXPONENTS only, like dict.
    - Reverse direction (prefix -> exponent) available via exponent_of(prefix).
    - Exponents must be unique, strictly increasing and contiguous in steps of `step`.
      Prefixes must be unique.

    An exponent outside [min_exponent, max_exponent] is not an error: lookup() returns None
    and the caller falls back to scientific notation.

    Examples:
        >>> DECIMAL_PREFIXES.lookup(3)
        'k'
        >>> DECIMAL_PREFIXES.lookup(33) is None
        True
        >>> BINARY_PREFIXES.exponent_of("Mi")
        20
    """

    def __init__(self, base: int, step: int, prefixes: Mapping[int, str] | Iterable[tuple[int, str]]) -> None:
        if base not in (2, 10):
            raise ValueError(f"prefix table base must be 2 or 10, got {fmt_value(base)}")
        if not isinstance(step, int) or step < 1:
            raise ValueError(f"prefix table step must be a positive int, got {fmt_value(step)}")

        pairs = list(prefixes.items() if isinstance(prefixes, Mapping) else prefixes)
        if not pairs:
            raise ValueError("prefix table must not be empty")

        self._base = base
        self._step = step
        self._forward_map: dict[int, str] = {}
        self._backward_map: dict[str, int] = {}

        for exponent, prefix in sorted(pairs):
            if exponent % step:
                raise ValueError(f"exponent {fmt_value(exponent)} is not a multiple of step {step}")
            if prefix in self._backward_map:
                raise ValueError(f"prefix {fmt_value(prefix)} already exists "
                                 f"(mapped from {self._backward_map[prefix]!r})")
            if self._forward_map and exponent != max(self._forward_map) + step:
                raise ValueError(f"prefix table must be contiguous, gap before exponent {fmt_value(exponent)}")
            self._forward_map[exponent] = prefix
            self._backward_map[prefix] = exponent

    # ----- Mapping required methods -----

    def __getitem__(self, exponent: int) -> str:
        return self._forward_map[exponent]

    def __iter__(self) -> Iterator[int]:
        return iter(self._forward_map)

    def __len__(self) -> int:
        return len(self._forward_map)

    def keys(self) -> KeysView[int]:
        return self._forward_map.keys()

    def values(self) -> ValuesView[str]:
        return self._forward_map.values()

    def items(self) -> ItemsView[int, str]:
        return self._forward_map.items()

    # ----- Table properties -----

    @property
    def base(self) -> int:
        """Scaling base, 10 for SI and 2 for IEC prefixes."""
        return self._base

    @property
    def step(self) -> int:
        """Exponent distance between neighbouring prefixes."""
        return self._step

    @property
    def min_exponent(self) -> int:
        return min(self._forward_map)

    @property
    def max_exponent(self) -> int:
        return max(self._forward_map)

    # ----- Lookups -----

    def bucket(self, exponent: int) -> int:
        """
        Floor a raw exponent to the prefix grid.

        Examples:
            >>> DECIMAL_PREFIXES.bucket(5)
            3
            >>> DECIMAL_PREFIXES.bucket(-4)
            -6
        """
        return (exponent // self._step) * self._step

    def covers(self, exponent: int) -> bool:
        """True if a prefix exists for the exponent."""
        return exponent in self._forward_map

    def lookup(self, exponent: int) -> str | None:
        """Prefix for the exponent, or None when no prefix is available."""
        return self._forward_map.get(exponent)

    def exponent_of(self, prefix: str) -> int:
        """Reverse lookup. Raises KeyError for an unknown prefix."""
        return self._backward_map[prefix]

    # ----- Equality and representation -----

    def __repr__(self) -> str:
        return f"PrefixTable(base={self._base}, step={self._step}, {self._forward_map!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PrefixTable):
            return (self._base, self._step, self._forward_map) == (other._base, other._step, other._forward_map)
        if isinstance(other, Mapping):
            return dict(self._forward_map.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._base, self._step, tuple(self._forward_map.items())))


# @formatter:off

# SI Prefixes: 10^(3N) exponents only
DECIMAL_PREFIXES = PrefixTable(base=10, step=3, prefixes={
    -30: "q",   # quecto
    -27: "r",   # ronto
    -24: "y",   # yocto
    -21: "z",   # zepto
    -18: "a",   # atto
    -15: "f",   # femto
    -12: "p",   # pico  = 10⁻¹²
    -9: "n",    # nano  = 10⁻⁹
    -6: "µ",    # micro = 10⁻⁶
    -3: "m",    # milli = 10⁻³
    0: "",      # (no prefix) = 10⁰
    3: "k",     # kilo  = 10³
    6: "M",     # mega  = 10⁶
    9: "G",     # giga  = 10⁹
    12: "T",    # tera  = 10¹²
    15: "P",    # peta
    18: "E",    # exa
    21: "Z",    # zetta
    24: "Y",    # yotta
    27: "R",    # ronna
    30: "Q",    # quetta
})

# IEC Binary Prefixes (powers of 2)
BINARY_PREFIXES = PrefixTable(base=2, step=10, prefixes={
    0: "",      # no prefix = 2⁰ = 1
    10: "Ki",   # kibi = 2¹⁰ = 1,024
    20: "Mi",   # mebi = 2²⁰ = 1,048,576
    30: "Gi",   # gibi = 2³⁰
    40: "Ti",   # tebi = 2⁴⁰
    50: "Pi",   # pebi = 2⁵⁰
    60: "Ei",   # exbi = 2⁶⁰
    70: "Zi",   # zebi = 2⁷⁰
    80: "Yi",   # yobi = 2⁸⁰
})

# @formatter:on
