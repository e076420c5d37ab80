"""StringCodable: type-erased dynamic values restricted to strings, lists and maps."""

from __future__ import annotations

from .core.protocols import Decodable, Encodable, NodeReader, NodeWriter
from .errors import (
    ConfigError,
    DataCorruptedError,
    DecodingError,
    EncodingError,
    InvalidValueError,
    MissingDependencyError,
    OutputError,
    SerializationError,
    ShapeMismatch,
    StringCodableError,
)
from .io import (
    TreeReader,
    TreeWriter,
    decode_native,
    dumps,
    encode_native,
    load,
    loads,
    save,
)
from .models import ABSENT, Absent, Mapping, Sequence, Shape, ShapeKind, Text
from .options import CodecOptions
from .values import DecodableDynamicValue, DynamicValue, EncodableDynamicValue

__all__ = [
    "ABSENT",
    "Absent",
    "CodecOptions",
    "ConfigError",
    "DataCorruptedError",
    "DecodableDynamicValue",
    "Decodable",
    "DecodingError",
    "DynamicValue",
    "EncodableDynamicValue",
    "Encodable",
    "EncodingError",
    "InvalidValueError",
    "Mapping",
    "MissingDependencyError",
    "NodeReader",
    "NodeWriter",
    "OutputError",
    "Sequence",
    "SerializationError",
    "Shape",
    "ShapeKind",
    "ShapeMismatch",
    "StringCodableError",
    "Text",
    "TreeReader",
    "TreeWriter",
    "decode_native",
    "dumps",
    "encode_native",
    "load",
    "loads",
    "save",
]
