"""Host boundary: capability protocols, document loading and in-memory hosts."""

from colortokens.core.host.document import (
    DocumentNode,
    DocumentPaint,
    PaintColor,
    load_document,
    parse_nodes,
    select_nodes,
)
from colortokens.core.host.memory import InMemoryVariableStore, StaticSelection
from colortokens.core.host.protocols import (
    RGBA,
    ColorVariable,
    Paint,
    SceneNode,
    SelectionProvider,
    VariableCollection,
    VariableMode,
    VariableStore,
)

__all__ = [
    # Protocols
    "Paint",
    "SceneNode",
    "SelectionProvider",
    "VariableStore",
    # Store models
    "RGBA",
    "ColorVariable",
    "VariableCollection",
    "VariableMode",
    # Documents
    "DocumentNode",
    "DocumentPaint",
    "PaintColor",
    "load_document",
    "parse_nodes",
    "select_nodes",
    # In-memory hosts
    "InMemoryVariableStore",
    "StaticSelection",
]
