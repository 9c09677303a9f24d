"""JSON token document export.

Tailwind names are nested by color group and shade::

    {"colors": {"blue": {"500": "#0000FF"}}}

Every other pattern produces a flat mapping::

    {"colors": {"color-primary": "#1A73E8"}}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from colortokens.core.models import ColorSample, NamingPattern

logger = logging.getLogger(__name__)

JSON_INDENT = 2


def _nested_by_shade(colors: Iterable[ColorSample]) -> dict[str, dict[str, str]]:
    nested: dict[str, dict[str, str]] = {}
    for color in colors:
        # Split at the last hyphen: "blue-500" -> ("blue", "500"),
        # "blue-500-1" -> ("blue-500", "1"), "white" -> ("", "white").
        group, _, shade = color.token_name.rpartition("-")
        nested.setdefault(group, {})[shade] = color.hex
    return nested


def build_token_document(
    colors: Iterable[ColorSample], pattern: NamingPattern | str
) -> dict[str, Any]:
    """Build the token document for named colors.

    Later colors with the same key overwrite earlier ones.

    Args:
        colors: Named colors.
        pattern: Pattern the names were produced with.

    Returns:
        ``{"colors": {...}}`` nested for tailwind, flat otherwise.
    """
    if NamingPattern(pattern) is NamingPattern.TAILWIND:
        return {"colors": _nested_by_shade(colors)}
    return {"colors": {color.token_name: color.hex for color in colors}}


def build_json(colors: Iterable[ColorSample], pattern: NamingPattern | str) -> str:
    """Serialize the token document as 2-space indented JSON.

    Non-ASCII token names are kept as-is (the file is written as UTF-8).
    """
    return json.dumps(
        build_token_document(colors, pattern), indent=JSON_INDENT, ensure_ascii=False
    )


def write_token_json(
    path: str | Path,
    colors: Iterable[ColorSample],
    pattern: NamingPattern | str,
) -> Path:
    """Write the token document to a UTF-8 JSON file.

    Args:
        path: Output file path (parent directories are created)
        colors: Named colors
        pattern: Pattern the names were produced with

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = build_json(colors, pattern)
    path.write_text(content + "\n", encoding="utf-8")
    logger.info("Wrote token file %s", path)
    return path


__all__ = [
    "JSON_INDENT",
    "build_json",
    "build_token_document",
    "write_token_json",
]
