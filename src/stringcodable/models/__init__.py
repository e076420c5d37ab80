from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from collections.abc import Mapping as AbcMapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar

from ..errors import InvalidValueError


class ShapeKind(str, Enum):
    """The four structural categories a dynamic value can take."""

    ABSENT = "absent"
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


@dataclass(frozen=True, slots=True)
class Absent:
    """No value (null)."""

    kind: ClassVar[ShapeKind] = ShapeKind.ABSENT


@dataclass(frozen=True, slots=True)
class Text:
    """A string payload."""

    text: str

    kind: ClassVar[ShapeKind] = ShapeKind.TEXT

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidValueError(self.text, "Text payload must be a string")


@dataclass(frozen=True, slots=True)
class Sequence:
    """An ordered list of child shapes."""

    items: tuple[Shape, ...] = ()

    kind: ClassVar[ShapeKind] = ShapeKind.SEQUENCE

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class Mapping:
    """String-keyed child shapes.

    Entries are stored behind a read-only view; comparison ignores key order.
    """

    entries: AbcMapping[str, Shape] = field(default_factory=dict)

    kind: ClassVar[ShapeKind] = ShapeKind.MAPPING

    def __post_init__(self) -> None:
        for key in self.entries:
            if not isinstance(key, str):
                raise InvalidValueError(key, "Mapping keys must be strings")
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __reduce__(self) -> tuple[Any, ...]:
        return (Mapping, (dict(self.entries),))


Shape = Absent | Text | Sequence | Mapping
SHAPE_TYPES: tuple[type, ...] = (Absent, Text, Sequence, Mapping)

ABSENT = Absent()


def sequence_of(items: Iterable[Shape]) -> Sequence:
    """Build a Sequence shape from already-converted children."""
    return Sequence(tuple(items))


def mapping_of(entries: AbcMapping[str, Shape]) -> Mapping:
    """Build a Mapping shape from already-converted children."""
    return Mapping(entries)


class ShapeCarrier(ABC):
    """Anything that exposes a canonical shape (every dynamic value flavor)."""

    __slots__ = ()

    @property
    @abstractmethod
    def shape(self) -> Shape:
        """The canonical shape behind this value."""


__all__ = [
    "ABSENT",
    "Absent",
    "Mapping",
    "SHAPE_TYPES",
    "Sequence",
    "Shape",
    "ShapeCarrier",
    "ShapeKind",
    "Text",
    "mapping_of",
    "sequence_of",
]
