"""Alignment helpers."""

import logging

log = logging.getLogger(__name__)


def align_size(value: int, alignment: int) -> int:
    """Round value up to the next multiple of alignment.

    An already aligned value is returned unchanged.
    """
    if alignment <= 0:
        raise ValueError(f"alignment must be positive, got {alignment}")
    remainder = value % alignment
    result = value if remainder == 0 else value + alignment - remainder
    log.debug("align_size(value=%d, alignment=%d) == %d", value, alignment, result)
    return result
