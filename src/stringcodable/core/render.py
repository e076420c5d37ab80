"""Plain and debug rendering of shapes."""

from __future__ import annotations

from ..models import Absent, Mapping, Sequence, Shape, Text

NIL_DESCRIPTION = str(None)


def describe(shape: Shape) -> str:
    """Plain rendering: Absent as ``None``, Text as the string itself."""
    match shape:
        case Absent():
            return NIL_DESCRIPTION
        case Text(text=text):
            return text
        case Sequence(items=items):
            return "[" + ", ".join(describe(item) for item in items) + "]"
        case Mapping(entries=entries):
            inner = ", ".join(f"{key}: {describe(child)}" for key, child in entries.items())
            return "{" + inner + "}"
    return str(shape)


def debug_describe(shape: Shape, flavor: str) -> str:
    """Debug rendering wrapped in a flavor envelope, e.g. ``DynamicValue('x')``."""
    match shape:
        case Absent():
            inner = NIL_DESCRIPTION
        case Text(text=text):
            inner = repr(text)
        case Sequence(items=items):
            inner = "[" + ", ".join(debug_describe(item, flavor) for item in items) + "]"
        case Mapping(entries=entries):
            inner = (
                "{"
                + ", ".join(
                    f"{key!r}: {debug_describe(child, flavor)}"
                    for key, child in entries.items()
                )
                + "}"
            )
        case _:
            inner = repr(shape)
    return f"{flavor}({inner})"
