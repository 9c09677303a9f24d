"""Protocols for the host design tool.

The pipeline depends only on these read-only node protocols and the async
variable store protocol; concrete hosts (a plugin bridge, a parsed design
file, the in-memory fakes) provide the implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field


class RGB(Protocol):
    """Normalized color components of a paint."""

    r: float
    g: float
    b: float


class Paint(Protocol):
    """A paint descriptor on a node's fills or strokes.

    Only ``type == "SOLID"`` paints carry a ``color``. ``visible`` and
    ``opacity`` may be None when the host omits them.
    """

    type: str
    color: RGB | None
    opacity: float | None
    visible: bool | None


class SceneNode(Protocol):
    """A node in the host's shape tree.

    ``fills``, ``strokes`` and ``children`` are optional: the extractor
    reads them with ``getattr`` and skips any that are absent or not lists.
    """

    type: str


class SelectionProvider(Protocol):
    """Source of the nodes the user currently has selected."""

    def get_selection(self) -> Sequence[Any]:
        """Return the selected top-level nodes (empty if nothing selected)."""
        ...


class VariableMode(BaseModel):
    """A mode (e.g. Light/Dark) of a variable collection."""

    model_config = ConfigDict(frozen=True)

    mode_id: str
    name: str = "Mode 1"


class VariableCollection(BaseModel):
    """A named group of design variables in the host store."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    modes: list[VariableMode] = Field(default_factory=list)


class ColorVariable(BaseModel):
    """A named color variable belonging to one collection."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    collection_id: str


class RGBA(BaseModel):
    """Color value written to a variable for one mode."""

    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)
    a: float = Field(default=1.0, ge=0.0, le=1.0)


class VariableStore(Protocol):
    """
    Protocol for the host's design-variable store.

    Every call may suspend awaiting the host and may fail; callers treat
    each one as a fallible remote operation.
    """

    async def list_collections(self) -> list[VariableCollection]:
        """List existing variable collections."""
        ...

    async def create_collection(self, name: str) -> VariableCollection:
        """
        Create a named collection.

        Args:
            name: Collection name

        Returns:
            The new collection with at least one mode
        """
        ...

    async def list_color_variables(self) -> list[ColorVariable]:
        """List existing variables of color kind across all collections."""
        ...

    async def create_color_variable(
        self, name: str, collection: VariableCollection
    ) -> ColorVariable:
        """
        Create a named color variable under a collection.

        Args:
            name: Variable name (token name)
            collection: Owning collection

        Returns:
            The new variable
        """
        ...

    async def set_variable_value(
        self, variable: ColorVariable, mode_id: str, value: RGBA
    ) -> None:
        """
        Set a variable's value for one mode.

        Args:
            variable: Variable to update
            mode_id: Mode of the owning collection
            value: Color value
        """
        ...
