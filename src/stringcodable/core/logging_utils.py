from __future__ import annotations

import logging
from collections.abc import Sequence

from ..errors import CodingKey, format_coding_path
from ..models import ShapeKind


def log_probe_miss(
    logger: logging.Logger, probe: ShapeKind, path: Sequence[CodingKey]
) -> None:
    """Log a standardized shape-probe fall-through.

    Args:
        logger: Logger instance to emit the message.
        probe: Shape that was attempted.
        path: Coding path of the node being probed.
    """
    logger.debug("[%s] probe did not match at %s", probe.value, format_coding_path(path))
