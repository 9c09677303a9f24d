"""Tests for batch token naming."""

from __future__ import annotations

import pytest

from colortokens.core.errors import UnknownPatternError
from colortokens.core.models import NamingPattern
from colortokens.core.naming.engine import assign_token_names
from colortokens.core.naming.strategies import StrategyRegistry, TailwindStrategy
from tests.fixtures.builders import sample


def _names(colors):
    return [c.token_name for c in colors]


class TestAssignTokenNames:
    """Test suite for assign_token_names."""

    def test_single_color_every_pattern(self):
        blue = [sample("#0000FF")]
        assert _names(assign_token_names(blue, NamingPattern.TAILWIND)) == ["blue-500"]
        assert _names(assign_token_names(blue, NamingPattern.MATERIAL)) == ["color-primary"]
        assert _names(assign_token_names(blue, NamingPattern.ANTD)) == ["primary-6"]
        assert _names(assign_token_names(blue, NamingPattern.WCAG)) == ["color-info"]
        assert _names(assign_token_names(blue, NamingPattern.CUSTOM)) == ["color-blue-500"]

    def test_collisions_suffixed_in_input_order(self):
        colors = [sample("#0000FF"), sample("#1A1AE6"), sample("#3333CC")]
        named = assign_token_names(colors, "tailwind")
        assert _names(named) == ["blue-500", "blue-500-1", "blue-500-2"]

    def test_reordering_changes_suffixes(self):
        colors = [sample("#3333CC"), sample("#0000FF")]
        named = assign_token_names(colors, "tailwind")
        assert [(c.hex, c.token_name) for c in named] == [
            ("#3333CC", "blue-500"),
            ("#0000FF", "blue-500-1"),
        ]

    def test_names_unique_within_batch(self):
        colors = [sample("#FF0000"), sample("#0000FF"), sample("#1A1AE6"), sample("#FF00FF")]
        names = _names(assign_token_names(colors, "wcag"))
        assert names == ["color-error", "color-info", "color-info-1", "color-error-1"]
        assert len(set(names)) == len(names)

    def test_deterministic(self):
        colors = [sample("#1A73E8"), sample("#202124"), sample("#FFFFFF")]
        first = assign_token_names(colors, "antd")
        second = assign_token_names(colors, "antd")
        assert _names(first) == _names(second)

    def test_inputs_not_modified(self):
        colors = [sample("#0000FF")]
        named = assign_token_names(colors, "tailwind")
        assert colors[0].token_name == ""
        assert named[0] is not colors[0]
        assert named[0].hex == colors[0].hex

    def test_existing_names_replaced(self):
        colors = assign_token_names([sample("#0000FF")], "tailwind")
        renamed = assign_token_names(colors, "material")
        assert _names(renamed) == ["color-primary"]

    def test_custom_prefix(self):
        named = assign_token_names([sample("#FF0000")], "custom", "brand")
        assert _names(named) == ["brand-red-500"]

    @pytest.mark.parametrize("prefix", [None, "", "  "])
    def test_custom_prefix_defaults(self, prefix):
        named = assign_token_names([sample("#FF0000")], "custom", prefix)
        assert _names(named) == ["color-red-500"]

    def test_empty_input(self):
        assert assign_token_names([], "tailwind") == []

    def test_unknown_pattern(self):
        with pytest.raises(UnknownPatternError):
            assign_token_names([sample("#0000FF")], "bootstrap")

    def test_custom_strategy_registry(self):
        registry = StrategyRegistry()
        registry.register(TailwindStrategy())
        named = assign_token_names([sample("#0000FF")], "tailwind", strategies=registry)
        assert _names(named) == ["blue-500"]
        with pytest.raises(KeyError):
            assign_token_names([sample("#0000FF")], "material", strategies=registry)
