"""Lightness quantization onto the two discrete shade scales.

- 50-950 scale (11 steps): 50 is lightest, 950 darkest.
- 1-10 level scale: 1 is lightest, 10 darkest.
"""

from __future__ import annotations

from colortokens.core.utils.math import clamp, round_half_up

SHADE_SCALE: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

MIN_LEVEL = 1
MAX_LEVEL = 10


def lightness_to_shade(lightness: float) -> int:
    """Quantize lightness onto the 50-950 shade scale.

    Args:
        lightness: HSL lightness (0-1).

    Returns:
        Shade value from SHADE_SCALE (1.0 -> 50, 0.0 -> 950).
    """
    last = len(SHADE_SCALE) - 1
    index = clamp(round_half_up((1 - lightness) * last), 0, last)
    return SHADE_SCALE[index]


def lightness_to_level(lightness: float) -> int:
    """Quantize lightness onto the 1-10 level scale.

    Args:
        lightness: HSL lightness (0-1).

    Returns:
        Level between 1 (lightest) and 10 (darkest).
    """
    return clamp(round_half_up((1 - lightness) * 9) + 1, MIN_LEVEL, MAX_LEVEL)


__all__ = [
    "MAX_LEVEL",
    "MIN_LEVEL",
    "SHADE_SCALE",
    "lightness_to_level",
    "lightness_to_shade",
]
