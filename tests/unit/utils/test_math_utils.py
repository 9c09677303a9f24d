"""Tests for math utility functions."""

from __future__ import annotations

from colortokens.core.utils.math import clamp, round_half_up


def test_clamp_within_range():
    """Test clamping values within range."""
    assert clamp(5, 0, 10) == 5
    assert clamp(0, 0, 10) == 0
    assert clamp(10, 0, 10) == 10


def test_clamp_outside_range():
    """Test clamping values outside range."""
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10


def test_clamp_with_floats():
    """Test clamping with float values."""
    assert clamp(5.5, 0.0, 10.0) == 5.5
    assert clamp(-1.5, 0.0, 1.0) == 0.0
    assert clamp(11.5, 0.0, 1.0) == 1.0


def test_round_half_up_ties():
    """Ties round toward +infinity, unlike round()."""
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(127.5) == 128
    assert round_half_up(-0.5) == 0


def test_round_half_up_non_ties():
    """Non-ties round to the nearest integer."""
    assert round_half_up(2.4) == 2
    assert round_half_up(2.6) == 3
    assert round_half_up(0.0) == 0
    assert isinstance(round_half_up(4.0), int)
