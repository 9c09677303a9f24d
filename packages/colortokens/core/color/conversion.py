"""RGB conversions for normalized color components.

All inputs are floats in [0, 1]. Hex output is ``#RRGGBB`` uppercase with
no alpha channel.
"""

from __future__ import annotations

import re

from colortokens.core.utils.math import clamp, round_half_up

_HEX_COLOR_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")


def _channel_to_hex(value: float) -> str:
    return f"{clamp(round_half_up(value * 255), 0, 255):02X}"


def to_hex(r: float, g: float, b: float) -> str:
    """Convert normalized RGB to a ``#RRGGBB`` hex string.

    Args:
        r: Red component (0-1).
        g: Green component (0-1).
        b: Blue component (0-1).

    Returns:
        Uppercase hex string, e.g. ``'#1A73E8'``.

    Example:
        >>> to_hex(0.0, 0.0, 1.0)
        '#0000FF'
    """
    return f"#{_channel_to_hex(r)}{_channel_to_hex(g)}{_channel_to_hex(b)}"


def to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert normalized RGB to HSL.

    The hue comes from the maximal channel, checked in red, green, blue
    order, so a tie between two channels uses the earlier one. The branch
    arithmetic is kept exactly as written: an algebraically equal form can
    land a hue like 200 one ulp below the boundary.

    Args:
        r: Red component (0-1).
        g: Green component (0-1).
        b: Blue component (0-1).

    Returns:
        (hue_degrees, saturation, lightness) with hue in [0, 360).
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2
    if max_c == min_c:
        return 0.0, 0.0, lightness

    d = max_c - min_c
    s = d / (2 - max_c - min_c) if lightness > 0.5 else d / (max_c + min_c)
    if max_c == r:
        h = ((g - b) / d + (6 if g < b else 0)) / 6
    elif max_c == g:
        h = ((b - r) / d + 2) / 6
    else:
        h = ((r - g) / d + 4) / 6
    return h * 360, s, lightness


def hex_to_rgb(hex_color: str) -> tuple[float, float, float]:
    """Convert ``#RRGGBB`` (leading ``#`` optional) to normalized RGB.

    Raises:
        ValueError: If the string is not a 6-digit hex color.
    """
    match = _HEX_COLOR_RE.match(hex_color.strip())
    if match is None:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    digits = match.group(1)
    return (
        int(digits[0:2], 16) / 255.0,
        int(digits[2:4], 16) / 255.0,
        int(digits[4:6], 16) / 255.0,
    )


__all__ = [
    "hex_to_rgb",
    "to_hex",
    "to_hsl",
]
