"""Schema-free decode by ordered shape probing."""

from __future__ import annotations

import logging

from ..errors import DataCorruptedError, ShapeMismatch
from ..models import ABSENT, Shape, ShapeKind, Text, mapping_of, sequence_of
from .logging_utils import log_probe_miss
from .protocols import NodeReader, ShapeDecodable

logger = logging.getLogger(__name__)


def decode_shape(reader: NodeReader, element_kind: type[ShapeDecodable]) -> Shape:
    """
    Decode the reader's current node into a shape.

    Probes run in a fixed order and the first match wins: null, string,
    sequence, mapping. Container children are decoded as *element_kind*
    and their shapes lifted out. Only :class:`ShapeMismatch` falls through
    to the next probe; anything else propagates.

    Args:
        reader: Single-node reader positioned at the node to decode.
        element_kind: Type used to decode container children.

    Returns:
        The decoded shape.

    Raises:
        DataCorruptedError: If no probe matches or the nesting limit is exceeded.
    """
    path = reader.coding_path
    max_depth = reader.max_depth
    if max_depth is not None and len(path) >= max_depth:
        logger.debug("Nesting limit %d reached while decoding", max_depth)
        raise DataCorruptedError(
            f"Maximum nesting depth of {max_depth} exceeded", coding_path=path
        )

    if reader.is_null():
        return ABSENT

    try:
        return Text(reader.read_string())
    except ShapeMismatch:
        log_probe_miss(logger, ShapeKind.TEXT, path)

    try:
        items = reader.read_sequence(element_kind)
    except ShapeMismatch:
        log_probe_miss(logger, ShapeKind.SEQUENCE, path)
    else:
        return sequence_of(item.shape for item in items)

    try:
        entries = reader.read_mapping(element_kind)
    except ShapeMismatch:
        log_probe_miss(logger, ShapeKind.MAPPING, path)
    else:
        return mapping_of({key: child.shape for key, child in entries.items()})

    logger.debug("No shape matched while decoding")
    raise DataCorruptedError("Dynamic value cannot be decoded", coding_path=path)
