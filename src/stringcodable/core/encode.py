"""Shape-dispatched encode."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import InvalidValueError
from ..models import Absent, Mapping, Sequence, Shape, Text
from .protocols import Encodable, NodeWriter

logger = logging.getLogger(__name__)


def encode_shape(
    writer: NodeWriter, shape: Shape, wrap: Callable[[Shape], Encodable]
) -> None:
    """
    Write a shape to the writer's current node.

    Container children are re-wrapped with *wrap* and encoded by the writer,
    which hands each one its own child node.

    Args:
        writer: Single-node writer positioned at the target node.
        shape: Shape to write.
        wrap: Turns a child shape into an encodable value.

    Raises:
        InvalidValueError: If *shape* is not one of the four known shapes or
            the nesting limit is exceeded.
    """
    path = writer.coding_path
    max_depth = writer.max_depth
    if max_depth is not None and len(path) >= max_depth:
        logger.debug("Nesting limit %d reached while encoding", max_depth)
        raise InvalidValueError(
            shape, f"Maximum nesting depth of {max_depth} exceeded", coding_path=path
        )

    match shape:
        case Absent():
            writer.write_null()
        case Text(text=text):
            writer.write_string(text)
        case Sequence(items=items):
            writer.write_sequence([wrap(item) for item in items])
        case Mapping(entries=entries):
            writer.write_mapping({key: wrap(child) for key, child in entries.items()})
        case _:
            logger.debug("Refusing to encode unknown payload %r", shape)
            raise InvalidValueError(
                shape, "Dynamic value cannot be encoded", coding_path=path
            )
