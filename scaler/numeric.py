"""
Normalize numeric input from Python stdlib and third-party libraries to a float.

Formatting works on 64-bit floats only; this module is the single conversion point.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type


def std_float(value) -> float:
    """
    Convert a numeric value to a standard Python float.

    Parameters
    ----------
    value : various
        Python int/float, Decimal, Fraction, and third-party scalars via
        __index__, .item() or __float__ (NumPy, PyTorch, pandas scalars).

    Returns
    -------
    float
        The value as float. Special IEEE 754 values (inf, -inf, nan, -0.0) are
        preserved. Integers beyond the float range become inf/-inf instead of
        raising OverflowError.

    Raises
    ------
    TypeError
        For bool, None, str and other non-numeric types.

    Examples
    --------
    >>> std_float(42)
    42.0
    >>> std_float(10**400)
    inf
    >>> from decimal import Decimal
    >>> std_float(Decimal("0.5"))
    0.5
    >>> std_float(True)
    Traceback (most recent call last):
        ...
    TypeError: boolean values not supported, got True
    """
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    # Fast path
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        return _int_to_float(value)

    # NumPy integers implement __index__, exact int first
    if hasattr(value, '__index__'):
        try:
            return _int_to_float(operator.index(value))
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float via __index__: {e}") from e

    # Array and tensor scalars
    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)) and not isinstance(result, bool):
            return std_float(result)

    # Decimal, Fraction, NumPy floats and other duck-typed floats
    if hasattr(value, '__float__'):
        try:
            return float(value)
        except OverflowError:
            # Fraction beyond float range
            return math.inf if value > 0 else -math.inf
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, or types implementing __index__, .item() or __float__ "
        f"(e.g., numpy scalars, Decimal, Fraction)"
    )


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
