"""
Sentinel for distinguishing an unprovided optional argument from None.

Sentinels:
    UNSET: Represents an unprovided optional argument

Helper Functions:
    ifnotunset: Return default if value is UNSET, otherwise return value

Example:
    >>> def merge(self, sign: Sign | UnsetType = UNSET) -> "Formatter":
    ...     sign = ifnotunset(sign, default=self.sign)
"""

from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifnotunset',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton optimized for identity checks; falsy, picklable to the same instance.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


UNSET: Final = UnsetType()


# Helper Functions -----------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any) -> Any:
    """
    Return default if value is UNSET, otherwise return value.

    Examples:
        >>> ifnotunset(UNSET, default=4)
        4
        >>> ifnotunset(None, default=4) is None
        True
    """
    return default if value is UNSET else value
