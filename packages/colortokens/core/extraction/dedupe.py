"""Hex-based color deduplication."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from colortokens.core.models import ColorSample

logger = logging.getLogger(__name__)


def deduplicate_colors(colors: Iterable[ColorSample]) -> list[ColorSample]:
    """Deduplicate colors by hex while preserving first-occurrence order.

    Alpha and source of later duplicates are discarded.

    Args:
        colors: Colors, possibly repeating a hex value.

    Returns:
        One color per distinct hex, in order of first occurrence.
    """
    seen: set[str] = set()
    result: list[ColorSample] = []
    for color in colors:
        if color.hex in seen:
            continue
        seen.add(color.hex)
        result.append(color)

    logger.debug("Deduplicated to %d unique color(s)", len(result))
    return result


__all__ = [
    "deduplicate_colors",
]
