"""Node tree models parsed from design-file JSON.

Accepts node dicts in the shape design tools export them::

    {
        "id": "1:2",
        "name": "Button",
        "type": "FRAME",
        "fills": [{"type": "SOLID", "color": {"r": 0.1, "g": 0.45, "b": 0.91}}],
        "strokes": [],
        "children": [...]
    }

The models satisfy the SceneNode/Paint protocols, so a parsed file can be
fed to the extractor like a live selection.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class PaintColor(BaseModel):
    """Normalized RGB(A) color of a solid paint."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)
    a: float = Field(default=1.0, ge=0.0, le=1.0)


class DocumentPaint(BaseModel):
    """A fill or stroke paint. Non-solid paints have no color."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str
    color: PaintColor | None = None
    opacity: float | None = Field(default=None, ge=0.0, le=1.0)
    visible: bool | None = None


class DocumentNode(BaseModel):
    """A node of a design document tree."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = ""
    name: str = ""
    type: str
    fills: list[DocumentPaint] | None = None
    strokes: list[DocumentPaint] | None = None
    children: list[DocumentNode] | None = None

    def walk(self) -> Iterator[DocumentNode]:
        """Yield this node and its descendants depth-first, pre-order."""
        yield self
        for child in self.children or ():
            yield from child.walk()


def parse_nodes(data: Any) -> list[DocumentNode]:
    """Parse top-level nodes from a decoded design-file payload.

    Supported shapes:
        - a bare node dict
        - ``{"document": node}`` (full file export)
        - ``{"nodes": {id: {"document": node}, ...}}`` (node subset export)
        - a list of node dicts

    Raises:
        ValueError: If the payload matches none of the shapes.
    """
    if isinstance(data, list):
        return [DocumentNode.model_validate(item) for item in data]
    if not isinstance(data, dict):
        raise ValueError(f"Unsupported document payload: {type(data).__name__}")

    if "document" in data:
        return [DocumentNode.model_validate(data["document"])]
    if "nodes" in data and isinstance(data["nodes"], dict):
        nodes: list[DocumentNode] = []
        for node_id, entry in data["nodes"].items():
            if not isinstance(entry, dict) or entry.get("document") is None:
                logger.warning("Skipping node '%s' with no document", node_id)
                continue
            nodes.append(DocumentNode.model_validate(entry["document"]))
        return nodes
    if "type" in data:
        return [DocumentNode.model_validate(data)]

    raise ValueError("Unsupported document payload: expected a node, 'document' or 'nodes'")


def load_document(path: str | Path) -> list[DocumentNode]:
    """Load top-level nodes from a design-file JSON document.

    Args:
        path: Path to a UTF-8 JSON file

    Returns:
        Parsed top-level nodes

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the JSON is invalid or has an unsupported shape
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document does not exist: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    nodes = parse_nodes(data)
    logger.debug("Loaded %d top-level node(s) from %s", len(nodes), path)
    return nodes


def select_nodes(roots: Sequence[DocumentNode], ids: Iterable[str]) -> list[DocumentNode]:
    """Select nodes by id, in the order requested.

    Args:
        roots: Top-level nodes to search
        ids: Node ids; when empty, the roots themselves are the selection

    Returns:
        Selected nodes

    Raises:
        KeyError: If any id is not found
    """
    wanted = list(ids)
    if not wanted:
        return list(roots)

    index = {node.id: node for root in roots for node in root.walk() if node.id}
    missing = [node_id for node_id in wanted if node_id not in index]
    if missing:
        raise KeyError(f"Node id(s) not found: {', '.join(missing)}")
    return [index[node_id] for node_id in wanted]


__all__ = [
    "DocumentNode",
    "DocumentPaint",
    "PaintColor",
    "load_document",
    "parse_nodes",
    "select_nodes",
]
