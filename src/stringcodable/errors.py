from __future__ import annotations

"""Project-specific exception hierarchy for StringCodable."""

from collections.abc import Sequence

CodingKey = str | int
CodingPath = tuple[CodingKey, ...]


def format_coding_path(path: Sequence[CodingKey]) -> str:
    """Render a coding path as a JSONPath-like string.

    Args:
        path: Keys (str) and indices (int) from the root to a node.

    Returns:
        ``$`` for the root, otherwise e.g. ``$["nested"][0]``.
    """
    parts = ["$"]
    for key in path:
        if isinstance(key, int):
            parts.append(f"[{key}]")
        else:
            parts.append(f'["{key}"]')
    return "".join(parts)


class StringCodableError(Exception):
    """Base exception for StringCodable."""


class DecodingError(StringCodableError):
    """Raised when a structured-data node cannot be decoded."""


class DataCorruptedError(DecodingError, ValueError):
    """Raised when a node matches none of the known shapes (also a ValueError for compatibility)."""

    def __init__(self, message: str, *, coding_path: Sequence[CodingKey] = ()) -> None:
        self.coding_path: CodingPath = tuple(coding_path)
        super().__init__(f"{message} at {format_coding_path(self.coding_path)}")


class EncodingError(StringCodableError):
    """Raised when a value cannot be written to a structured-data node."""


class InvalidValueError(EncodingError, ValueError):
    """Raised when a payload is not one of the encodable shapes (also a ValueError for compatibility)."""

    def __init__(
        self, value: object, message: str, *, coding_path: Sequence[CodingKey] = ()
    ) -> None:
        self.value = value
        self.coding_path: CodingPath = tuple(coding_path)
        super().__init__(
            f"{message}: {value!r} at {format_coding_path(self.coding_path)}"
        )


class ShapeMismatch(StringCodableError):
    """Raised by a reader probe when the node has a different shape."""


class ConfigError(StringCodableError):
    """Raised when user-provided configuration or parameters are invalid."""


class SerializationError(StringCodableError):
    """Raised when serialization fails or an unsupported format is requested."""


class MissingDependencyError(StringCodableError):
    """Raised when an optional dependency required for the requested operation is missing."""


class OutputError(StringCodableError):
    """Raised when writing outputs to disk or reading inputs from disk fails."""
