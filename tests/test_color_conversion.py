# tests/test_color_conversion.py

from __future__ import annotations

import importlib
import itertools

import pytest

"""
conversion tests
================

Does: Validate RGB <-> YCbCr transforms, half-up rounding at the .5 boundary,
      and strict '#RRGGBB' parsing/formatting with typed errors.
"""

cv = importlib.import_module("color_name_finder.matching.color.conversion")
errors = importlib.import_module("color_name_finder.matching.color.errors")


# ──────────────────────────────────────────────────────────────────────────────
# RGB -> YCbCr
# ──────────────────────────────────────────────────────────────────────────────
def test_rgb_to_ycbcr_black_and_white():
    assert cv.rgb_to_ycbcr((0, 0, 0)) == (0.0, 0.0, 0.0)
    y, cb, cr = cv.rgb_to_ycbcr((255, 255, 255))
    assert y == pytest.approx(1.0, abs=1e-12)
    assert cb == pytest.approx(0.0, abs=1e-12)
    assert cr == pytest.approx(0.0, abs=1e-12)


def test_rgb_to_ycbcr_uses_exact_constants():
    point = cv.rgb_to_ycbcr((255, 0, 0))
    assert point.y == 0.299 * 1.0
    assert point.cb == 0.564 * (0.0 - 0.299)
    assert point.cr == 0.713 * (1.0 - 0.299)


def test_rgb_to_ycbcr_returns_named_fields():
    point = cv.rgb_to_ycbcr((0, 0, 255))
    assert point.y == pytest.approx(0.114)
    assert point.cb == pytest.approx(0.564 * (1 - 0.114))
    assert point.cr == pytest.approx(0.713 * -0.114)


# ──────────────────────────────────────────────────────────────────────────────
# YCbCr -> RGB
# ──────────────────────────────────────────────────────────────────────────────
_GRID = range(0, 256, 17)


def test_round_trip_within_one_step_on_grid():
    for rgb in itertools.product(_GRID, _GRID, _GRID):
        back = cv.ycbcr_to_rgb(cv.rgb_to_ycbcr(rgb))
        assert all(abs(a - b) <= 1 for a, b in zip(rgb, back)), (rgb, back)


@pytest.mark.parametrize(
    "rgb",
    [(0, 0, 0), (255, 255, 255), (255, 0, 0), (0, 255, 0), (0, 0, 255), (1, 254, 128)],
)
def test_round_trip_primaries_and_extremes(rgb):
    back = cv.ycbcr_to_rgb(cv.rgb_to_ycbcr(rgb))
    assert all(abs(a - b) <= 1 for a, b in zip(rgb, back))


def test_ycbcr_to_rgb_clamps_out_of_range():
    assert cv.ycbcr_to_rgb(cv.YCbCr(2.0, 0.0, 0.0)) == (255, 255, 255)
    assert cv.ycbcr_to_rgb(cv.YCbCr(-1.0, 0.0, 0.0)) == (0, 0, 0)


@pytest.mark.parametrize(
    "value,expect",
    [(0.5, 1), (1.5, 2), (2.5, 3), (127.5, 128), (254.5, 255), (0.49, 0), (3.0, 3)],
)
def test_round_half_away_from_zero(value, expect):
    assert cv._round_half_up(value) == expect


def test_rounding_differs_from_bankers_at_even_half():
    assert round(2.5) == 2
    assert cv._round_half_up(2.5) == 3


# ──────────────────────────────────────────────────────────────────────────────
# Hex parsing / formatting
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text,expect",
    [
        ("#000000", (0, 0, 0)),
        ("#FFFFFF", (255, 255, 255)),
        ("#ff8000", (255, 128, 0)),
        ("#12aBcD", (0x12, 0xAB, 0xCD)),
    ],
)
def test_parse_hex_ok(text, expect):
    assert cv.parse_hex(text) == expect


@pytest.mark.parametrize("text", ["123456", "#12345", "#1234567", "", "x123456", " #123456"])
def test_parse_hex_format_error(text):
    with pytest.raises(errors.FormatError) as ei:
        cv.parse_hex(text)
    assert ei.value.text == text


@pytest.mark.parametrize(
    "text,channel,pair",
    [
        ("#GGGGGG", "R", "GG"),
        ("#00ZZ00", "G", "ZZ"),
        ("#0000-1", "B", "-1"),
        ("#+f0000", "R", "+f"),
        ("#00 f00", "G", " f"),
        ("#0000f_", "B", "f_"),
    ],
)
def test_parse_hex_digit_error_names_channel(text, channel, pair):
    with pytest.raises(errors.DigitError) as ei:
        cv.parse_hex(text)
    assert ei.value.channel == channel
    assert ei.value.pair == pair
    assert channel in str(ei.value)


def test_hex_errors_share_base_and_are_value_errors():
    for text in ("123456", "#GGGGGG"):
        with pytest.raises(errors.HexColorError):
            cv.parse_hex(text)
        with pytest.raises(ValueError):
            cv.parse_hex(text)


@pytest.mark.parametrize(
    "rgb,expect",
    [((0, 0, 0), "#000000"), ((255, 255, 255), "#FFFFFF"), ((1, 10, 171), "#010AAB")],
)
def test_format_hex_uppercase_zero_padded(rgb, expect):
    assert cv.format_hex(rgb) == expect


@pytest.mark.parametrize("text", ["#a1b2c3", "#FFFFFF", "#000000", "#0f0F0f", "#7fFfAa"])
def test_format_of_parse_is_uppercase_input(text):
    assert cv.format_hex(cv.parse_hex(text)) == text.upper()


def test_ycbcr_to_hex_of_primary():
    assert cv.ycbcr_to_hex(cv.hex_to_ycbcr("#FF0000")) == "#FF0000"
    assert cv.ycbcr_to_hex(cv.hex_to_ycbcr("#00ff00")) == "#00FF00"
