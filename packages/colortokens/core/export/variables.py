"""Export named colors to the host's design-variable store.

One collection per naming pattern is found or created; each color becomes
(or updates) a color variable of the same name in that collection, with its
value set on the collection's first mode. Colors are written one at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from colortokens.core.errors import VariableExportError
from colortokens.core.host.protocols import (
    RGBA,
    ColorVariable,
    VariableCollection,
    VariableStore,
)
from colortokens.core.models import ColorSample, NamingPattern

logger = logging.getLogger(__name__)

COLLECTION_NAMES: dict[NamingPattern, str] = {
    NamingPattern.MATERIAL: "Material Design 3 Colors",
    NamingPattern.TAILWIND: "Tailwind CSS Colors",
    NamingPattern.ANTD: "Ant Design Colors",
    NamingPattern.WCAG: "WCAG Accessible Colors",
    NamingPattern.CUSTOM: "Custom Design Tokens",
}


def collection_name_for(pattern: NamingPattern | str) -> str:
    """Return the variable collection name used for a naming pattern."""
    return COLLECTION_NAMES[NamingPattern(pattern)]


async def _find_or_create_collection(store: VariableStore, name: str) -> VariableCollection:
    for collection in await store.list_collections():
        if collection.name == name:
            logger.debug("Using existing collection '%s' (%s)", name, collection.id)
            return collection
    return await store.create_collection(name)


async def _find_or_create_variable(
    store: VariableStore, name: str, collection: VariableCollection
) -> ColorVariable:
    for variable in await store.list_color_variables():
        if variable.name == name and variable.collection_id == collection.id:
            return variable
    return await store.create_color_variable(name, collection)


async def export_to_variables(
    colors: Sequence[ColorSample],
    pattern: NamingPattern | str,
    store: VariableStore,
) -> int:
    """Write named colors as color variables.

    Args:
        colors: Named colors to export.
        pattern: Pattern the names were produced with (selects the collection).
        store: Host variable store.

    Returns:
        Number of colors exported.

    Raises:
        VariableExportError: If any store call fails. Colors written before
            the failure stay written; ``exported`` reports how many.
    """
    name = collection_name_for(pattern)
    exported = 0

    try:
        collection = await _find_or_create_collection(store, name)
        if not collection.modes:
            raise ValueError(f"Collection '{name}' has no modes")
        mode_id = collection.modes[0].mode_id

        for color in colors:
            variable = await _find_or_create_variable(store, color.token_name, collection)
            await store.set_variable_value(
                variable, mode_id, RGBA(r=color.r, g=color.g, b=color.b, a=color.a)
            )
            exported += 1
    except Exception as e:
        raise VariableExportError(
            reason=str(e) or type(e).__name__,
            exported=exported,
            total=len(colors),
            cause=e,
        ) from e

    logger.info("Exported %d color variable(s) to '%s'", exported, name)
    return exported


__all__ = [
    "COLLECTION_NAMES",
    "collection_name_for",
    "export_to_variables",
]
