"""Hue-bucket classification of colors into coarse roles."""

from __future__ import annotations

from enum import Enum

from colortokens.core.color.conversion import to_hsl


class ColorRole(str, Enum):
    """Coarse hue classification used to drive token naming.

    Attributes:
        RED: Hue in [0, 20) or [340, 360).
        ORANGE: Hue in [20, 45).
        YELLOW: Hue in [45, 70).
        GREEN: Hue in [70, 165).
        CYAN: Hue in [165, 200).
        BLUE: Hue in [200, 260).
        PURPLE: Hue in [260, 300).
        PINK: Hue in [300, 340).
        GRAY: Saturation below the achromatic threshold, any hue.
    """

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    GRAY = "gray"


# Saturation below which a color is achromatic regardless of hue.
ACHROMATIC_SATURATION_THRESHOLD = 0.12

# Half-open [low, high) hue ranges in degrees, contiguous over [0, 360).
_HUE_BUCKETS: tuple[tuple[ColorRole, float, float], ...] = (
    (ColorRole.RED, 0.0, 20.0),
    (ColorRole.ORANGE, 20.0, 45.0),
    (ColorRole.YELLOW, 45.0, 70.0),
    (ColorRole.GREEN, 70.0, 165.0),
    (ColorRole.CYAN, 165.0, 200.0),
    (ColorRole.BLUE, 200.0, 260.0),
    (ColorRole.PURPLE, 260.0, 300.0),
    (ColorRole.PINK, 300.0, 340.0),
    (ColorRole.RED, 340.0, 360.0),
)


def role_for_hue(hue: float, saturation: float) -> ColorRole:
    """Map an HSL hue/saturation pair to a role.

    Args:
        hue: Hue in degrees.
        saturation: Saturation (0-1).

    Returns:
        The matching ColorRole.
    """
    if saturation < ACHROMATIC_SATURATION_THRESHOLD:
        return ColorRole.GRAY

    for role, low, high in _HUE_BUCKETS:
        if low <= hue < high:
            return role

    # Float wrap-around can land exactly on 360.
    return ColorRole.RED


def classify_role(r: float, g: float, b: float) -> ColorRole:
    """Classify a normalized RGB color into one of nine roles.

    Example:
        >>> classify_role(0.0, 0.0, 1.0)
        <ColorRole.BLUE: 'blue'>
    """
    hue, saturation, _ = to_hsl(r, g, b)
    return role_for_hue(hue, saturation)


__all__ = [
    "ACHROMATIC_SATURATION_THRESHOLD",
    "ColorRole",
    "classify_role",
    "role_for_hue",
]
