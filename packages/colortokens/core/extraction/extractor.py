"""Solid color extraction from a host node tree.

Walks the selected nodes depth-first (pre-order) and collects one
ColorSample per visible solid paint. Per node the order is fills, strokes,
then (text nodes only) fills again as text colors, then children.

The tree is only read, never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from colortokens.core.models import ColorSample, ColorSource

logger = logging.getLogger(__name__)

SOLID_PAINT_TYPE = "SOLID"
TEXT_NODE_TYPE = "TEXT"


def extract_paint(paint: Any, source: ColorSource) -> ColorSample | None:
    """Convert one paint descriptor to a ColorSample.

    Args:
        paint: Paint with ``type``, ``color`` and optional ``opacity``/``visible``.
        source: Which node property the paint came from.

    Returns:
        ColorSample for a visible solid paint, None for anything else
        (gradients, images, hidden paints).
    """
    if getattr(paint, "type", None) != SOLID_PAINT_TYPE:
        return None
    if getattr(paint, "visible", None) is False:
        return None

    color = getattr(paint, "color", None)
    if color is None:
        return None

    opacity = getattr(paint, "opacity", None)
    return ColorSample(
        r=color.r,
        g=color.g,
        b=color.b,
        a=1.0 if opacity is None else opacity,
        source=source,
    )


def _paint_list(node: Any, attribute: str) -> list[Any]:
    # Hosts may expose a sentinel (e.g. "mixed") instead of a list.
    value = getattr(node, attribute, None)
    if isinstance(value, list | tuple):
        return list(value)
    return []


def _iter_node_sources(node: Any) -> Iterator[tuple[Any, ColorSource]]:
    for paint in _paint_list(node, "fills"):
        yield paint, ColorSource.FILL
    for paint in _paint_list(node, "strokes"):
        yield paint, ColorSource.STROKE
    if getattr(node, "type", None) == TEXT_NODE_TYPE:
        for paint in _paint_list(node, "fills"):
            yield paint, ColorSource.TEXT


def extract_colors_from_node(node: Any) -> list[ColorSample]:
    """Extract colors from a node and all of its descendants.

    Args:
        node: SceneNode-like object.

    Returns:
        Colors in depth-first pre-order, duplicates included.
    """
    colors: list[ColorSample] = []
    for paint, source in _iter_node_sources(node):
        sample = extract_paint(paint, source)
        if sample is not None:
            colors.append(sample)

    for child in getattr(node, "children", None) or ():
        colors.extend(extract_colors_from_node(child))

    return colors


def extract_colors(nodes: Iterable[Any]) -> list[ColorSample]:
    """Extract colors from every node of a selection, in selection order."""
    colors: list[ColorSample] = []
    for node in nodes:
        colors.extend(extract_colors_from_node(node))
    logger.debug("Extracted %d raw color(s)", len(colors))
    return colors


__all__ = [
    "SOLID_PAINT_TYPE",
    "TEXT_NODE_TYPE",
    "extract_colors",
    "extract_colors_from_node",
    "extract_paint",
]
