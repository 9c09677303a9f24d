"""Color extraction from node trees and hex deduplication."""

from colortokens.core.extraction.dedupe import deduplicate_colors
from colortokens.core.extraction.extractor import (
    extract_colors,
    extract_colors_from_node,
    extract_paint,
)

__all__ = [
    "deduplicate_colors",
    "extract_colors",
    "extract_colors_from_node",
    "extract_paint",
]
