"""In-memory host implementations.

Used by tests and by the CLI, which has no live design tool: the selection
is a fixed list of nodes and variables live in dictionaries.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from colortokens.core.host.protocols import (
    RGBA,
    ColorVariable,
    VariableCollection,
    VariableMode,
)

logger = logging.getLogger(__name__)


class StaticSelection:
    """SelectionProvider returning a fixed list of nodes."""

    def __init__(self, nodes: Sequence[Any] = ()) -> None:
        self._nodes = list(nodes)

    def get_selection(self) -> list[Any]:
        return list(self._nodes)


class InMemoryVariableStore:
    """VariableStore backed by dictionaries.

    Args:
        fail_after_writes: If set, ``set_variable_value`` raises RuntimeError
            once this many values have been written. Simulates a host that
            fails part-way through a batch.

    Example:
        >>> store = InMemoryVariableStore()
        >>> collection = await store.create_collection("Tailwind CSS Colors")
        >>> variable = await store.create_color_variable("blue-500", collection)
        >>> await store.set_variable_value(variable, collection.modes[0].mode_id, RGBA(r=0, g=0, b=1))
    """

    def __init__(self, fail_after_writes: int | None = None) -> None:
        self.collections: dict[str, VariableCollection] = {}
        self.variables: dict[str, ColorVariable] = {}
        self.values: dict[tuple[str, str], RGBA] = {}
        self.write_count = 0
        self._fail_after_writes = fail_after_writes
        self._next_id = 1

    def _new_id(self, prefix: str) -> str:
        new_id = f"{prefix}:{self._next_id}"
        self._next_id += 1
        return new_id

    async def list_collections(self) -> list[VariableCollection]:
        return list(self.collections.values())

    async def create_collection(self, name: str) -> VariableCollection:
        collection_id = self._new_id("VariableCollectionId")
        collection = VariableCollection(
            id=collection_id,
            name=name,
            modes=[VariableMode(mode_id=f"{collection_id}/mode:1")],
        )
        self.collections[collection_id] = collection
        logger.debug("Created collection '%s' (%s)", name, collection_id)
        return collection

    async def list_color_variables(self) -> list[ColorVariable]:
        return list(self.variables.values())

    async def create_color_variable(
        self, name: str, collection: VariableCollection
    ) -> ColorVariable:
        if collection.id not in self.collections:
            raise KeyError(f"Unknown collection: {collection.id}")
        variable = ColorVariable(
            id=self._new_id("VariableID"),
            name=name,
            collection_id=collection.id,
        )
        self.variables[variable.id] = variable
        return variable

    async def set_variable_value(
        self, variable: ColorVariable, mode_id: str, value: RGBA
    ) -> None:
        if self._fail_after_writes is not None and self.write_count >= self._fail_after_writes:
            raise RuntimeError(f"Host rejected value for variable '{variable.name}'")
        if variable.id not in self.variables:
            raise KeyError(f"Unknown variable: {variable.id}")
        self.values[(variable.id, mode_id)] = value
        self.write_count += 1

    def value_of(self, name: str, collection_name: str) -> RGBA | None:
        """Look up the first-mode value of a variable by names (test helper)."""
        for collection in self.collections.values():
            if collection.name != collection_name:
                continue
            for variable in self.variables.values():
                if variable.collection_id == collection.id and variable.name == name:
                    return self.values.get((variable.id, collection.modes[0].mode_id))
        return None


__all__ = [
    "InMemoryVariableStore",
    "StaticSelection",
]
