#
# Scaler Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, unique
from typing import Any


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class FmtStyle(str, Enum):
    """
    Display styles of the type-value tokens used in exception and warning messages.

    Members are str subclasses and can be passed anywhere a plain style string is expected.
    """
    ASCII = "ascii"
    UNICODE_ANGLE = "unicode-angle"
    EQUAL = "equal"


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, style: str = "ascii", max_repr: int = 120) -> str:
    """Format type information for exception messages.

    Args:
        obj: Any Python object or type.
        style: "ascii" (default), "unicode-angle" or "equal".
        max_repr: Maximum length of the type name before truncation.

    Returns:
        Formatted type string like "<type: int>".

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(str)
        '<type: str>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)

    truncated_name = _fmt_truncate(type_name, max_repr, ellipsis=_fmt_more_token(style))
    return _fmt_format_pair("type", truncated_name, style)


def fmt_value(x: Any, *, style: str = "ascii", max_repr: int = 120) -> str:
    """
    Format a single value as a type–value pair for exception and warning messages.

    Broken __repr__ methods are handled gracefully; ASCII style escapes inner ">".

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("hello world", max_repr=8)
        "<str: 'hell'...>"
        >>> fmt_value(",", style="equal")
        "str=','"
    """
    t = type(x).__name__

    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    if style == FmtStyle.ASCII:
        base_repr = base_repr.replace(">", "\\>")

    r = _fmt_truncate(base_repr, max_repr, ellipsis=_fmt_more_token(style))
    return _fmt_format_pair(t, r, style)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int, ellipsis: str = "…") -> str:
    """
    Truncate s to at most max_len visible characters before appending the ellipsis.

    Quoted reprs keep their quotes, with the ellipsis placed outside the closing quote.
    """
    if max_len <= 0:
        return ""
    if len(s) <= max_len:
        return s

    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        inner_budget = max(1, max_len - 4)
        inner = s[1:1 + inner_budget]
        return f"{s[0]}{inner}{s[0]}{ellipsis}"

    return s[:max(1, max_len)] + ellipsis


def _fmt_format_pair(type_name: str, value_repr: str, style: str) -> str:
    """Combine a type name and a repr into a single display token according to style."""
    if style == FmtStyle.UNICODE_ANGLE:
        return f"⟨{type_name}: {value_repr}⟩"
    if style == FmtStyle.EQUAL:
        return f"{type_name}={value_repr}"
    return f"<{type_name}: {value_repr}>"


def _fmt_more_token(style: str) -> str:
    return "..." if style == FmtStyle.ASCII else "…"
