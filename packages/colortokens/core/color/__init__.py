"""Color model: conversion, role classification and shade quantization."""

from colortokens.core.color.conversion import hex_to_rgb, to_hex, to_hsl
from colortokens.core.color.profile import ColorProfile, profile_color
from colortokens.core.color.roles import (
    ACHROMATIC_SATURATION_THRESHOLD,
    ColorRole,
    classify_role,
    role_for_hue,
)
from colortokens.core.color.shades import (
    SHADE_SCALE,
    lightness_to_level,
    lightness_to_shade,
)

__all__ = [
    "ACHROMATIC_SATURATION_THRESHOLD",
    "SHADE_SCALE",
    "ColorProfile",
    "ColorRole",
    "classify_role",
    "hex_to_rgb",
    "lightness_to_level",
    "lightness_to_shade",
    "profile_color",
    "role_for_hue",
    "to_hex",
    "to_hsl",
]
