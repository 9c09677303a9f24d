"""Tests for lightness quantization."""

from __future__ import annotations

import pytest

from colortokens.core.color.profile import profile_color
from colortokens.core.color.roles import ColorRole, role_for_hue
from colortokens.core.color.shades import (
    SHADE_SCALE,
    lightness_to_level,
    lightness_to_shade,
)


class TestLightnessToShade:
    """Test suite for the 50-950 scale."""

    @pytest.mark.parametrize(
        ("lightness", "expected"),
        [(1.0, 50), (0.9, 100), (0.75, 300), (0.5, 500), (0.25, 800), (0.0, 950)],
    )
    def test_quantization(self, lightness, expected):
        assert lightness_to_shade(lightness) == expected

    def test_result_always_on_scale(self):
        for step in range(101):
            assert lightness_to_shade(step / 100) in SHADE_SCALE

    def test_out_of_range_is_clamped(self):
        assert lightness_to_shade(1.5) == 50
        assert lightness_to_shade(-0.5) == 950


class TestLightnessToLevel:
    """Test suite for the 1-10 scale."""

    @pytest.mark.parametrize(
        ("lightness", "expected"),
        [(1.0, 1), (0.5, 6), (0.25, 8), (0.0, 10)],
    )
    def test_quantization(self, lightness, expected):
        assert lightness_to_level(lightness) == expected

    def test_darker_is_never_lower(self):
        levels = [lightness_to_level(1 - step / 100) for step in range(101)]
        assert levels == sorted(levels)


def test_profile_color_combines_role_and_scales():
    profile = profile_color(0.0, 0.0, 1.0)
    assert profile.role is ColorRole.BLUE
    assert profile.hue == pytest.approx(240.0)
    assert profile.lightness == pytest.approx(0.5)
    assert profile.shade == 500
    assert profile.level == 6


def _reference_profile(r8: int, g8: int, b8: int) -> tuple[ColorRole, int, int]:
    """Role, shade and level from the piecewise HSL formula on 8-bit input."""
    r, g, b = r8 / 255, g8 / 255, b8 / 255
    max_c, min_c = max(r, g, b), min(r, g, b)
    lightness = (max_c + min_c) / 2
    hue = saturation = 0.0
    if max_c != min_c:
        d = max_c - min_c
        saturation = d / (2 - max_c - min_c) if lightness > 0.5 else d / (max_c + min_c)
        if max_c == r:
            hue = ((g - b) / d + (6 if g < b else 0)) / 6
        elif max_c == g:
            hue = ((b - r) / d + 2) / 6
        else:
            hue = ((r - g) / d + 4) / 6
    return (
        role_for_hue(hue * 360, saturation),
        lightness_to_shade(lightness),
        lightness_to_level(lightness),
    )


class TestBoundaryColors:
    """8-bit colors whose hue lands exactly on a bucket boundary."""

    @pytest.mark.parametrize(
        ("rgb", "expected"),
        [
            ((0x00, 0x78, 0xB4), (ColorRole.BLUE, 600, 7)),
            ((0x00, 0x1E, 0x2D), (ColorRole.BLUE, 900, 9)),
        ],
    )
    def test_cyan_blue_boundary(self, rgb, expected):
        r8, g8, b8 = rgb
        profile = profile_color(r8 / 255, g8 / 255, b8 / 255)
        assert (profile.role, profile.shade, profile.level) == expected
        assert _reference_profile(r8, g8, b8) == expected

    def test_near_boundary_matches_reference(self):
        profile = profile_color(0x01 / 255, 0x75 / 255, 0xAF / 255)
        assert (profile.role, profile.shade, profile.level) == _reference_profile(
            0x01, 0x75, 0xAF
        )

    def test_matches_reference_on_grid(self):
        mismatches = []
        for r8 in range(0, 256, 5):
            for g8 in range(0, 256, 3):
                for b8 in range(0, 256, 5):
                    profile = profile_color(r8 / 255, g8 / 255, b8 / 255)
                    got = (profile.role, profile.shade, profile.level)
                    if got != _reference_profile(r8, g8, b8):
                        mismatches.append((r8, g8, b8))
        assert mismatches == []
