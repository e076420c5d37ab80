"""Reader/writer contracts consumed by the decode and encode algorithms.

A reader or writer addresses exactly one node of some structured-data tree.
Container probes hand each child to the element type's own
``decode_from``/``encode_to``, so recursion is driven by the values rather
than by the backend.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol, TypeVar

from ..errors import CodingPath
from ..models import Shape

D = TypeVar("D", bound="Decodable")


class Decodable(Protocol):
    """A type that can build itself from a single-node reader."""

    @classmethod
    def decode_from(cls: type[D], reader: NodeReader) -> D:
        """Decode one node."""
        ...  # pragma: no cover


class Encodable(Protocol):
    """A value that can write itself to a single-node writer."""

    def encode_to(self, writer: NodeWriter) -> None:
        """Encode into one node."""
        ...  # pragma: no cover


class ShapeDecodable(Decodable, Protocol):
    """A decodable type whose instances expose their canonical shape."""

    @property
    def shape(self) -> Shape:
        ...  # pragma: no cover


class NodeReader(Protocol):
    """Contract for a single-node structured-data reader.

    Every probe that finds a node of a different shape must raise
    :class:`~stringcodable.errors.ShapeMismatch`; any other exception is
    treated as a genuine failure and propagates.
    """

    @property
    def coding_path(self) -> CodingPath:
        """Keys and indices from the root to this node."""
        ...  # pragma: no cover

    @property
    def max_depth(self) -> int | None:
        """Maximum nesting depth to accept, or None for no limit."""
        ...  # pragma: no cover

    def is_null(self) -> bool:
        """Return True if the node is null."""
        ...  # pragma: no cover

    def read_string(self) -> str:
        """Read the node as a string."""
        ...  # pragma: no cover

    def read_sequence(self, kind: type[D]) -> list[D]:
        """Read the node as a sequence, decoding every element as *kind*."""
        ...  # pragma: no cover

    def read_mapping(self, kind: type[D]) -> dict[str, D]:
        """Read the node as a string-keyed mapping, decoding every value as *kind*."""
        ...  # pragma: no cover


class NodeWriter(Protocol):
    """Contract for a single-node structured-data writer."""

    @property
    def coding_path(self) -> CodingPath:
        """Keys and indices from the root to this node."""
        ...  # pragma: no cover

    @property
    def max_depth(self) -> int | None:
        """Maximum nesting depth to produce, or None for no limit."""
        ...  # pragma: no cover

    def write_null(self) -> None:
        """Write a null node."""
        ...  # pragma: no cover

    def write_string(self, value: str) -> None:
        """Write a string node."""
        ...  # pragma: no cover

    def write_sequence(self, items: Iterable[Encodable]) -> None:
        """Write a sequence node, encoding each item into its own child node."""
        ...  # pragma: no cover

    def write_mapping(self, entries: Mapping[str, Encodable]) -> None:
        """Write a mapping node, encoding each value into its own child node."""
        ...  # pragma: no cover
