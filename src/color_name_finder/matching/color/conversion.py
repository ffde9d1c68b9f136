"""
conversion.py
=============

Does: Convert 8-bit RGB triples to/from floating-point YCbCr and read/write
      '#RRGGBB' hex strings.
Used By: Catalog loading (one conversion per entry), query handling, match
         reporting (hex echo of the matched color).
Returns: YCbCr points (NamedTuple of floats), RGB tuples, hex strings.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Tuple

from color_name_finder.matching.color.errors import DigitError, FormatError

__all__ = [
    "RGB",
    "YCbCr",
    "rgb_to_ycbcr",
    "ycbcr_to_rgb",
    "parse_hex",
    "format_hex",
    "hex_to_ycbcr",
    "ycbcr_to_hex",
]
__docformat__ = "google"

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]


class YCbCr(NamedTuple):
    """Luma in [0, 1] plus two chroma components centered on 0."""

    y: float
    cb: float
    cr: float


_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_CHANNELS = (("R", 1), ("G", 3), ("B", 5))


# =============================================================================
# 1) RGB <-> YCbCr
# =============================================================================

def rgb_to_ycbcr(rgb: RGB) -> YCbCr:
    """Does: Map an 8-bit RGB triple to (y, cb, cr) with the analog luma weights."""
    r_norm = rgb[0] / 255.0
    g_norm = rgb[1] / 255.0
    b_norm = rgb[2] / 255.0
    y = 0.299 * r_norm + 0.587 * g_norm + 0.114 * b_norm
    cb = 0.564 * (b_norm - y)
    cr = 0.713 * (r_norm - y)
    return YCbCr(y, cb, cr)


def _round_half_up(value: float) -> int:
    # Channels are non-negative here, so half-up is half-away-from-zero.
    return int(math.floor(value + 0.5))


def _to_byte(norm: float) -> int:
    return _round_half_up(min(max(norm, 0.0), 1.0) * 255.0)


def ycbcr_to_rgb(point: YCbCr) -> RGB:
    """
    Does: Invert rgb_to_ycbcr back to 8-bit channels.

    Each channel is clamped to [0, 1] before scaling, then rounded half away
    from zero (127.5 -> 128), never banker's rounding.
    """
    y, cb, cr = point
    r_norm = y + 1.402 * cr
    g_norm = y - 0.344136 * cb - 0.714136 * cr
    b_norm = y + 1.772 * cb
    return (_to_byte(r_norm), _to_byte(g_norm), _to_byte(b_norm))


# =============================================================================
# 2) HEX STRINGS
# =============================================================================

def parse_hex(text: str) -> RGB:
    """
    Does: Parse '#RRGGBB' (case-insensitive) into an RGB triple.

    Raises:
        FormatError: length is not 7 or the first character is not '#'.
        DigitError: a channel pair contains a non-hex character; the error
            names the channel ('R', 'G' or 'B') and the offending pair.
    """
    if len(text) != 7 or not text.startswith("#"):
        raise FormatError(text)

    channels = []
    for channel, start in _CHANNELS:
        pair = text[start:start + 2]
        # int(..., 16) alone would accept '+f', ' f' and 'f_f'
        if not all(ch in _HEX_DIGITS for ch in pair):
            raise DigitError(text, channel, pair)
        channels.append(int(pair, 16))
    r, g, b = channels
    return (r, g, b)


def format_hex(rgb: RGB) -> str:
    """Does: Render an RGB triple as '#RRGGBB' with uppercase digits."""
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_ycbcr(text: str) -> YCbCr:
    return rgb_to_ycbcr(parse_hex(text))


def ycbcr_to_hex(point: YCbCr) -> str:
    return format_hex(ycbcr_to_rgb(point))
