"""Core data model - color samples, sources and naming patterns."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from colortokens.core.color.conversion import to_hex
from colortokens.core.errors import UnknownPatternError


class ColorSource(str, Enum):
    """Where in a node a color was found."""

    FILL = "fill"
    STROKE = "stroke"
    TEXT = "text"


class NamingPattern(str, Enum):
    """Naming convention applied when assigning token names.

    Attributes:
        MATERIAL: Material Design 3 semantic names (``color-primary``).
        TAILWIND: Hue and 50-950 shade (``blue-500``).
        ANTD: Ant Design semantic name and 1-10 level (``primary-6``).
        WCAG: Accessibility-oriented semantic names (``color-info``).
        CUSTOM: User prefix, hue and shade (``brand-blue-500``).
    """

    MATERIAL = "material"
    TAILWIND = "tailwind"
    ANTD = "antd"
    WCAG = "wcag"
    CUSTOM = "custom"

    @classmethod
    def _missing_(cls, value: object) -> NamingPattern:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise UnknownPatternError(value, [m.value for m in cls])


DEFAULT_PATTERN = NamingPattern.TAILWIND
DEFAULT_CUSTOM_PREFIX = "color"


class ColorSample(BaseModel):
    """A solid color found in the node tree.

    Identity for deduplication is ``hex`` only; alpha and source are
    metadata. ``hex`` is derived from the components when not supplied.

    Attributes:
        r: Red component (0-1).
        g: Green component (0-1).
        b: Blue component (0-1).
        a: Paint opacity (0-1).
        hex: ``#RRGGBB`` uppercase, no alpha.
        source: Where the color was found.
        token_name: Assigned token name (empty until named).
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)
    a: float = Field(default=1.0, ge=0.0, le=1.0)
    hex: str = Field(pattern=r"^#[0-9A-F]{6}$")
    source: ColorSource = ColorSource.FILL
    token_name: str = Field(default="", alias="tokenName")

    @model_validator(mode="before")
    @classmethod
    def _derive_hex(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        hex_value = data.get("hex")
        if isinstance(hex_value, str) and hex_value:
            return {**data, "hex": hex_value.upper()}
        if all(isinstance(data.get(k), int | float) for k in ("r", "g", "b")):
            return {**data, "hex": to_hex(data["r"], data["g"], data["b"])}
        return data

    def to_message(self) -> dict[str, Any]:
        """Serialize with wire field names (``tokenName``)."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "DEFAULT_CUSTOM_PREFIX",
    "DEFAULT_PATTERN",
    "ColorSample",
    "ColorSource",
    "NamingPattern",
]
