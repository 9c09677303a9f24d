"""Tests for exporting named colors as host variables."""

from __future__ import annotations

import pytest

from colortokens.core.errors import VariableExportError
from colortokens.core.export.variables import (
    COLLECTION_NAMES,
    collection_name_for,
    export_to_variables,
)
from colortokens.core.host.memory import InMemoryVariableStore
from colortokens.core.host.protocols import RGBA, VariableCollection
from colortokens.core.models import NamingPattern
from colortokens.core.naming.engine import assign_token_names
from tests.fixtures.builders import sample


def _named(pattern, *hexes):
    return assign_token_names([sample(h) for h in hexes], pattern)


class _ModelessStore(InMemoryVariableStore):
    async def create_collection(self, name: str) -> VariableCollection:
        collection = VariableCollection(id="VariableCollectionId:0", name=name)
        self.collections[collection.id] = collection
        return collection


@pytest.mark.parametrize(
    ("pattern", "name"),
    [
        ("material", "Material Design 3 Colors"),
        ("tailwind", "Tailwind CSS Colors"),
        ("antd", "Ant Design Colors"),
        ("wcag", "WCAG Accessible Colors"),
        ("custom", "Custom Design Tokens"),
    ],
)
def test_collection_name_for(pattern, name):
    assert collection_name_for(pattern) == name


def test_every_pattern_has_a_collection():
    assert set(COLLECTION_NAMES) == set(NamingPattern)


class TestExportToVariables:
    """Test suite for export_to_variables."""

    @pytest.mark.asyncio
    async def test_creates_collection_and_variables(self):
        store = InMemoryVariableStore()
        colors = _named("tailwind", "#0000FF", "#FF0000")

        count = await export_to_variables(colors, "tailwind", store)

        assert count == 2
        assert [c.name for c in store.collections.values()] == ["Tailwind CSS Colors"]
        assert sorted(v.name for v in store.variables.values()) == ["blue-500", "red-500"]
        assert store.value_of("blue-500", "Tailwind CSS Colors") == RGBA(r=0.0, g=0.0, b=1.0)

    @pytest.mark.asyncio
    async def test_alpha_written(self):
        store = InMemoryVariableStore()
        colors = assign_token_names([sample("#FF0000", a=0.5)], "material")

        await export_to_variables(colors, "material", store)

        value = store.value_of("color-error", "Material Design 3 Colors")
        assert value is not None
        assert value.a == 0.5

    @pytest.mark.asyncio
    async def test_reuses_existing_collection(self):
        store = InMemoryVariableStore()
        existing = await store.create_collection("Ant Design Colors")

        await export_to_variables(_named("antd", "#0000FF"), "antd", store)

        assert list(store.collections) == [existing.id]

    @pytest.mark.asyncio
    async def test_reexport_updates_existing_variables(self):
        store = InMemoryVariableStore()
        colors = _named("tailwind", "#0000FF")
        await export_to_variables(colors, "tailwind", store)

        recolored = [colors[0].model_copy(update={"r": 0.5})]
        await export_to_variables(recolored, "tailwind", store)

        assert len(store.variables) == 1
        assert store.value_of("blue-500", "Tailwind CSS Colors") == RGBA(r=0.5, g=0.0, b=1.0)

    @pytest.mark.asyncio
    async def test_patterns_use_separate_collections(self):
        store = InMemoryVariableStore()
        await export_to_variables(_named("tailwind", "#0000FF"), "tailwind", store)
        await export_to_variables(_named("wcag", "#0000FF"), "wcag", store)

        assert len(store.collections) == 2
        assert store.value_of("color-info", "WCAG Accessible Colors") is not None

    @pytest.mark.asyncio
    async def test_empty_batch(self):
        store = InMemoryVariableStore()
        assert await export_to_variables([], "tailwind", store) == 0

    @pytest.mark.asyncio
    async def test_failure_reports_progress(self):
        store = InMemoryVariableStore(fail_after_writes=1)
        colors = _named("tailwind", "#0000FF", "#FF0000", "#00FF00")

        with pytest.raises(VariableExportError) as exc_info:
            await export_to_variables(colors, "tailwind", store)

        error = exc_info.value
        assert error.exported == 1
        assert error.total == 3
        assert error.message == (
            "Host rejected value for variable 'red-500' "
            "(exported 1 of 3 colors before the failure)"
        )
        assert isinstance(error.cause, RuntimeError)
        # No rollback of what was already written.
        assert store.value_of("blue-500", "Tailwind CSS Colors") is not None

    @pytest.mark.asyncio
    async def test_collection_without_modes(self):
        store = _ModelessStore()

        with pytest.raises(VariableExportError, match="has no modes") as exc_info:
            await export_to_variables(_named("tailwind", "#0000FF"), "tailwind", store)

        assert exc_info.value.exported == 0
