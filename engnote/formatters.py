"""
Formatting helpers for exception messages.

Values are shown as type-value pairs so an error raised deep inside a conversion
still tells the caller what it was given, e.g. "<str: '12x'>" or "<NoneType>".
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, fully_qualified: bool = False) -> str:
    """Format the type of an instance, or a type itself, as "<name>".

    Builtins are never module-qualified.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(int)
        '<int>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    name = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", "?")
    if fully_qualified and cls.__module__ != "builtins":
        name = f"{cls.__module__}.{name}"
    return f"<{name}>"


def fmt_value(obj: Any, *, max_repr: int = 80, ellipsis: str = "...") -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Args:
        obj: Any Python object.
        max_repr: Maximum length of the value's repr before truncation.
        ellipsis: Truncation token appended to a shortened repr.

    Returns:
        String like "<int: 42>" or "<str: 'kΩ'>".

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("x" * 100, max_repr=5)
        "<str: 'xxx...>"
    """
    repr_ = _safe_repr(obj)
    if max_repr > 0 and len(repr_) > max_repr:
        repr_ = repr_[:max(1, max_repr - 1)] + ellipsis

    if obj is None:
        return "<NoneType>"
    return f"<{type(obj).__name__}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _safe_repr(obj) -> str:
    """repr() that falls back to a placeholder when __repr__ raises."""
    try:
        repr_ = repr(obj)
    except Exception as e:
        repr_ = f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
    return repr_
