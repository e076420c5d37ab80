"""Classification of native Python values into the four shapes."""

from __future__ import annotations

from collections.abc import Mapping as AbcMapping
from collections.abc import Sequence as AbcSequence

from ..errors import CodingKey, CodingPath, InvalidValueError
from ..models import (
    ABSENT,
    SHAPE_TYPES,
    Absent,
    Mapping,
    Sequence,
    Shape,
    ShapeCarrier,
    Text,
    mapping_of,
    sequence_of,
)
from ..models.types import NativeValue

_BINARY_TYPES = (bytes, bytearray, memoryview)


def to_shape(value: object, *, max_depth: int | None = None) -> Shape:
    """
    Convert a native value into its canonical shape.

    ``None`` becomes Absent, ``str`` becomes Text, string-keyed mappings and
    non-string sequences are converted recursively. Existing shapes and
    dynamic values of any flavor pass through unchanged.

    Args:
        value: Source value.
        max_depth: Optional nesting limit (root counts as depth 1).

    Returns:
        The converted shape.

    Raises:
        InvalidValueError: If any node is not representable (numbers,
            booleans, binary data, non-string keys, other objects) or the
            nesting limit is exceeded.
    """
    return _convert(value, (), max_depth)


def _convert(value: object, path: CodingPath, max_depth: int | None) -> Shape:
    if max_depth is not None and len(path) >= max_depth:
        raise InvalidValueError(
            value,
            f"Maximum nesting depth of {max_depth} exceeded",
            coding_path=path,
        )
    if value is None:
        return ABSENT
    if isinstance(value, (*SHAPE_TYPES, ShapeCarrier)):
        shape: Shape = value.shape if isinstance(value, ShapeCarrier) else value  # type: ignore[assignment]
        if max_depth is not None:
            _check_depth(shape, path, max_depth)
        return shape
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, AbcMapping):
        entries: dict[str, Shape] = {}
        for key, child in value.items():
            if not isinstance(key, str):
                raise InvalidValueError(
                    key, "Mapping keys must be strings", coding_path=path
                )
            entries[key] = _convert(child, _child_path(path, key), max_depth)
        return mapping_of(entries)
    if isinstance(value, AbcSequence) and not isinstance(value, _BINARY_TYPES):
        return sequence_of(
            _convert(child, _child_path(path, index), max_depth)
            for index, child in enumerate(value)
        )
    raise InvalidValueError(value, "Value cannot be encoded", coding_path=path)


def _child_path(path: CodingPath, key: CodingKey) -> CodingPath:
    return (*path, key)


def _check_depth(shape: Shape, path: CodingPath, max_depth: int) -> None:
    """Walk an already-built shape so pass-through input honors the nesting limit."""
    if len(path) >= max_depth:
        raise InvalidValueError(
            shape, f"Maximum nesting depth of {max_depth} exceeded", coding_path=path
        )
    match shape:
        case Sequence(items=items):
            for index, item in enumerate(items):
                _check_depth(item, _child_path(path, index), max_depth)
        case Mapping(entries=entries):
            for key, child in entries.items():
                _check_depth(child, _child_path(path, key), max_depth)


def to_native(shape: Shape) -> NativeValue:
    """Return the plain Python payload (None / str / list / dict) of a shape."""
    match shape:
        case Absent():
            return None
        case Text(text=text):
            return text
        case Sequence(items=items):
            return [to_native(item) for item in items]
        case Mapping(entries=entries):
            return {key: to_native(child) for key, child in entries.items()}
    raise InvalidValueError(shape, "Value is not a known shape")
