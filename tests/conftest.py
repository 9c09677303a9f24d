"""Shared pytest fixtures for colortokens tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from colortokens.core.host.document import DocumentNode
from colortokens.core.host.memory import InMemoryVariableStore, StaticSelection
from colortokens.core.session.handler import TokenSession
from tests.fixtures.builders import build_node, make_node, solid

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_document_path(fixtures_dir: Path) -> Path:
    """Path to a small design-file export."""
    return fixtures_dir / "sample_document.json"


# ============================================================================
# Host Fixtures
# ============================================================================


@pytest.fixture
def button_node() -> DocumentNode:
    """Frame with a blue fill, a dark stroke and a white text child."""
    return build_node(
        "FRAME",
        node_id="1:1",
        fills=[solid("#1A73E8")],
        strokes=[solid("#202124")],
        children=[
            make_node("TEXT", node_id="1:2", fills=[solid("#FFFFFF")]),
        ],
    )


@pytest.fixture
def store() -> InMemoryVariableStore:
    """Fresh in-memory variable store."""
    return InMemoryVariableStore()


@pytest.fixture
def session(button_node: DocumentNode, store: InMemoryVariableStore) -> TokenSession:
    """Session with the button node selected."""
    return TokenSession(StaticSelection([button_node]), store)
