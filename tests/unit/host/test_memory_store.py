"""Tests for the in-memory host implementations."""

from __future__ import annotations

import pytest

from colortokens.core.host.memory import InMemoryVariableStore, StaticSelection
from colortokens.core.host.protocols import RGBA, VariableCollection


def test_static_selection_returns_copy():
    nodes = ["a", "b"]
    selection = StaticSelection(nodes)
    result = selection.get_selection()
    result.append("c")
    assert selection.get_selection() == ["a", "b"]


def test_static_selection_defaults_to_empty():
    assert StaticSelection().get_selection() == []


class TestInMemoryVariableStore:
    """Test suite for InMemoryVariableStore."""

    @pytest.mark.asyncio
    async def test_collection_has_one_mode(self):
        store = InMemoryVariableStore()
        collection = await store.create_collection("Tailwind CSS Colors")
        assert collection.id == "VariableCollectionId:1"
        assert [m.mode_id for m in collection.modes] == ["VariableCollectionId:1/mode:1"]
        assert await store.list_collections() == [collection]

    @pytest.mark.asyncio
    async def test_variable_lifecycle(self):
        store = InMemoryVariableStore()
        collection = await store.create_collection("Tailwind CSS Colors")
        variable = await store.create_color_variable("blue-500", collection)
        mode_id = collection.modes[0].mode_id

        await store.set_variable_value(variable, mode_id, RGBA(r=0.0, g=0.0, b=1.0))

        assert variable.collection_id == collection.id
        assert await store.list_color_variables() == [variable]
        assert store.values[(variable.id, mode_id)] == RGBA(r=0.0, g=0.0, b=1.0)
        assert store.write_count == 1
        assert store.value_of("blue-500", "Tailwind CSS Colors") == RGBA(r=0.0, g=0.0, b=1.0)

    @pytest.mark.asyncio
    async def test_unknown_collection(self):
        store = InMemoryVariableStore()
        stranger = VariableCollection(id="VariableCollectionId:99", name="Other")
        with pytest.raises(KeyError):
            await store.create_color_variable("blue-500", stranger)

    @pytest.mark.asyncio
    async def test_fail_after_writes(self):
        store = InMemoryVariableStore(fail_after_writes=0)
        collection = await store.create_collection("Tailwind CSS Colors")
        variable = await store.create_color_variable("blue-500", collection)
        with pytest.raises(RuntimeError, match="Host rejected value for variable 'blue-500'"):
            await store.set_variable_value(
                variable, collection.modes[0].mode_id, RGBA(r=0.0, g=0.0, b=1.0)
            )
        assert store.write_count == 0

    def test_value_of_unknown(self):
        assert InMemoryVariableStore().value_of("blue-500", "Tailwind CSS Colors") is None
