"""Per-color naming inputs computed in a single HSL pass."""

from __future__ import annotations

from dataclasses import dataclass

from colortokens.core.color.conversion import to_hsl
from colortokens.core.color.roles import ColorRole, role_for_hue
from colortokens.core.color.shades import lightness_to_level, lightness_to_shade


@dataclass(frozen=True)
class ColorProfile:
    """Role and lightness quantizations for one color."""

    role: ColorRole
    hue: float
    saturation: float
    lightness: float
    shade: int
    level: int


def profile_color(r: float, g: float, b: float) -> ColorProfile:
    """Compute the ColorProfile for a normalized RGB color."""
    hue, saturation, lightness = to_hsl(r, g, b)
    return ColorProfile(
        role=role_for_hue(hue, saturation),
        hue=hue,
        saturation=saturation,
        lightness=lightness,
        shade=lightness_to_shade(lightness),
        level=lightness_to_level(lightness),
    )
