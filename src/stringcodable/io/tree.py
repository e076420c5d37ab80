"""Reader and writer over native Python trees (the JSON data model)."""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping as AbcMapping
from typing import TypeVar

from ..core.protocols import Decodable, Encodable
from ..errors import CodingKey, CodingPath, EncodingError, ShapeMismatch
from ..models.types import JsonStructure
from ..options import CodecOptions

D = TypeVar("D", bound=Decodable)

_UNSET = object()


def _type_name(node: object) -> str:
    return "null" if node is None else type(node).__name__


class TreeReader:
    """Single-node reader over ``None`` / ``str`` / number / ``bool`` / list / dict."""

    def __init__(
        self,
        node: object,
        path: CodingPath = (),
        *,
        max_depth: int | None = None,
    ) -> None:
        self._node = node
        self._path = path
        self._max_depth = max_depth

    @property
    def coding_path(self) -> CodingPath:
        return self._path

    @property
    def max_depth(self) -> int | None:
        return self._max_depth

    def _child(self, node: object, key: CodingKey) -> TreeReader:
        return TreeReader(node, (*self._path, key), max_depth=self._max_depth)

    def is_null(self) -> bool:
        return self._node is None

    def read_string(self) -> str:
        if not isinstance(self._node, str):
            raise ShapeMismatch(f"Expected a string but found {_type_name(self._node)}")
        return self._node

    def read_sequence(self, kind: type[D]) -> list[D]:
        node = self._node
        if not isinstance(node, (list, tuple)):
            raise ShapeMismatch(f"Expected a sequence but found {_type_name(node)}")
        return [
            kind.decode_from(self._child(child, index))
            for index, child in enumerate(node)
        ]

    def read_mapping(self, kind: type[D]) -> dict[str, D]:
        node = self._node
        if not isinstance(node, AbcMapping):
            raise ShapeMismatch(f"Expected a mapping but found {_type_name(node)}")
        if not all(isinstance(key, str) for key in node):
            raise ShapeMismatch("Expected a mapping with string keys")
        return {key: kind.decode_from(self._child(child, key)) for key, child in node.items()}


class TreeWriter:
    """Single-node writer that builds a native Python tree.

    Exactly one value may be written; read it back from :attr:`result`.
    """

    def __init__(self, path: CodingPath = (), *, max_depth: int | None = None) -> None:
        self._path = path
        self._max_depth = max_depth
        self._result: object = _UNSET

    @property
    def coding_path(self) -> CodingPath:
        return self._path

    @property
    def max_depth(self) -> int | None:
        return self._max_depth

    @property
    def result(self) -> JsonStructure:
        if self._result is _UNSET:
            raise EncodingError("Nothing has been written yet")
        return self._result  # type: ignore[return-value]

    def _store(self, value: object) -> None:
        if self._result is not _UNSET:
            raise EncodingError("A value has already been written to this node")
        self._result = value

    def _encode_child(self, item: Encodable, key: CodingKey) -> JsonStructure:
        child = TreeWriter((*self._path, key), max_depth=self._max_depth)
        item.encode_to(child)
        return child.result

    def write_null(self) -> None:
        self._store(None)

    def write_string(self, value: str) -> None:
        self._store(value)

    def write_sequence(self, items: Iterable[Encodable]) -> None:
        self._store([self._encode_child(item, index) for index, item in enumerate(items)])

    def write_mapping(self, entries: AbcMapping[str, Encodable]) -> None:
        self._store({key: self._encode_child(item, key) for key, item in entries.items()})


def decode_native(
    kind: type[D], data: object, *, options: CodecOptions | None = None
) -> D:
    """Decode native Python data as *kind* (e.g. ``DynamicValue``).

    Raises:
        DataCorruptedError: If any node matches no known shape.
    """
    opts = options or CodecOptions()
    return kind.decode_from(TreeReader(data, max_depth=opts.max_depth))


def encode_native(value: Encodable, *, options: CodecOptions | None = None) -> JsonStructure:
    """Encode a value into native Python data.

    Raises:
        InvalidValueError: If the value holds an unencodable payload.
    """
    opts = options or CodecOptions()
    writer = TreeWriter(max_depth=opts.max_depth)
    value.encode_to(writer)
    return writer.result
