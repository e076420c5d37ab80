"""Type-erased dynamic values in three flavors.

``DynamicValue`` decodes and encodes, ``DecodableDynamicValue`` only decodes,
``EncodableDynamicValue`` only encodes. All three wrap the same canonical
shape, compare equal whenever their shapes are equal, and can be used as
field types on pydantic models.

Examples:
    >>> from stringcodable import DynamicValue
    >>> value = DynamicValue({"array": ["1", "2"], "name": "x"})
    >>> value["array"]
    DynamicValue([DynamicValue('1'), DynamicValue('2')])
    >>> str(value["name"])
    'x'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from collections.abc import Mapping as AbcMapping
from typing import Any, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .core.convert import to_native, to_shape
from .core.decode import decode_shape
from .core.encode import encode_shape
from .core.protocols import NodeReader, NodeWriter
from .core.render import debug_describe, describe
from .errors import InvalidValueError
from .models import (
    ABSENT,
    SHAPE_TYPES,
    Mapping,
    Sequence,
    Shape,
    ShapeCarrier,
    ShapeKind,
    Text,
)
from .models.types import NativeValue

T = TypeVar("T", bound="_DynamicValueBase")


class _DynamicValueBase(ShapeCarrier):
    """Shared behavior of every flavor: construction, equality, rendering."""

    __slots__ = ("_shape",)

    _shape: Shape

    def __init__(self, value: object = None, *, max_depth: int | None = None) -> None:
        object.__setattr__(self, "_shape", to_shape(value, max_depth=max_depth))

    @classmethod
    def _wrap(cls: type[T], shape: Shape) -> T:
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_shape", shape)
        return obj

    # -- Literal construction -------------------------------------------

    @classmethod
    def from_null(cls: type[T]) -> T:
        return cls._wrap(ABSENT)

    @classmethod
    def from_string(cls: type[T], text: str) -> T:
        if not isinstance(text, str):
            raise InvalidValueError(text, "Expected a string")
        return cls(text)

    @classmethod
    def from_sequence(cls: type[T], items: Iterable[object]) -> T:
        return cls(list(items))

    @classmethod
    def from_mapping(
        cls: type[T],
        entries: AbcMapping[str, object] | Iterable[tuple[str, object]],
    ) -> T:
        """Build a Mapping value; on duplicate keys the last pair wins."""
        return cls(dict(entries))

    # -- Read-only access -----------------------------------------------

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def kind(self) -> ShapeKind:
        return self._shape.kind

    @property
    def value(self) -> NativeValue:
        """The erased payload as plain Python data (None / str / list / dict)."""
        return to_native(self._shape)

    # -- Flavor conversion ----------------------------------------------

    def bidirectional(self) -> DynamicValue:
        return DynamicValue._wrap(self._shape)

    def decodable(self) -> DecodableDynamicValue:
        return DecodableDynamicValue._wrap(self._shape)

    def encodable(self) -> EncodableDynamicValue:
        return EncodableDynamicValue._wrap(self._shape)

    # -- Container access -----------------------------------------------

    def __getitem__(self: T, key: int | str) -> T:
        shape = self._shape
        if isinstance(shape, Sequence) and isinstance(key, int):
            return type(self)._wrap(shape.items[key])
        if isinstance(shape, Mapping) and isinstance(key, str):
            return type(self)._wrap(shape.entries[key])
        raise TypeError(f"{self.kind.value} value is not subscriptable by {key!r}")

    def __iter__(self) -> Iterator[Any]:
        shape = self._shape
        if isinstance(shape, Sequence):
            return (type(self)._wrap(item) for item in shape.items)
        if isinstance(shape, Mapping):
            return iter(shape.entries)
        raise TypeError(f"{self.kind.value} value is not iterable")

    def __len__(self) -> int:
        shape = self._shape
        if isinstance(shape, Sequence):
            return len(shape.items)
        if isinstance(shape, Mapping):
            return len(shape.entries)
        raise TypeError(f"{self.kind.value} value has no length")

    def __bool__(self) -> bool:
        """Falsy for Absent, empty text and empty containers."""
        shape = self._shape
        if isinstance(shape, Text):
            return bool(shape.text)
        if isinstance(shape, Sequence):
            return bool(shape.items)
        if isinstance(shape, Mapping):
            return bool(shape.entries)
        return False

    # -- Equality and rendering -----------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ShapeCarrier):
            return self._shape == other.shape
        if isinstance(other, SHAPE_TYPES):
            return self._shape == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._shape)

    def __str__(self) -> str:
        return describe(self._shape)

    def __repr__(self) -> str:
        return debug_describe(self._shape, type(self).__name__)

    # -- Immutability ---------------------------------------------------

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.value,))

    # -- pydantic integration -------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_value
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "anyOf": [
                {"type": "null"},
                {"type": "string"},
                {"type": "array", "items": {}},
                {"type": "object", "additionalProperties": {}},
            ]
        }

    @classmethod
    def _validate(cls: type[T], data: object) -> T:
        if isinstance(data, cls):
            return data
        if isinstance(data, ShapeCarrier):
            return cls._wrap(data.shape)
        return cls._validate_native(data)  # type: ignore[attr-defined]


def _serialize_value(value: _DynamicValueBase) -> NativeValue:
    return value.value


class _DecodingMixin:
    """Adds the decode side of the codec contract."""

    __slots__ = ()

    @classmethod
    def decode_from(cls, reader: NodeReader) -> Any:
        """Decode one node by shape probing (null, string, sequence, mapping)."""
        return cls._wrap(decode_shape(reader, DynamicValue))  # type: ignore[attr-defined]

    @classmethod
    def _validate_native(cls, data: object) -> Any:
        from .io.tree import decode_native

        return decode_native(cls, data)  # type: ignore[arg-type]


class _EncodingMixin:
    """Adds the encode side of the codec contract."""

    __slots__ = ()

    def encode_to(self, writer: NodeWriter) -> None:
        """Encode into one node, re-wrapping children as DynamicValue."""
        encode_shape(writer, self.shape, DynamicValue._wrap)  # type: ignore[attr-defined]

    @classmethod
    def _validate_native(cls, data: object) -> Any:
        return cls(data)


class DynamicValue(_DecodingMixin, _EncodingMixin, _DynamicValueBase):
    """A type-erased value that can be both decoded and encoded."""

    __slots__ = ()


class DecodableDynamicValue(_DecodingMixin, _DynamicValueBase):
    """A type-erased value that can only be decoded."""

    __slots__ = ()


class EncodableDynamicValue(_EncodingMixin, _DynamicValueBase):
    """A type-erased value that can only be encoded."""

    __slots__ = ()


__all__ = ["DecodableDynamicValue", "DynamicValue", "EncodableDynamicValue"]
