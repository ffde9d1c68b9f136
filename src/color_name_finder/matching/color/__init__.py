"""
color.
=====

Does: Aggregate the color-domain core: error kinds, RGB/YCbCr/hex conversion,
      and catalog loading.
Used By: finder orchestration, CLI, tests.
Returns: Pure functions and small immutable records; catalog loading is the
         only I/O.
"""

# ── Errors ───────────────────────────────────────────────────────────────────
from .errors import (
    CatalogLoadError,
    ColorFinderError,
    DigitError,
    EmptyCatalogError,
    FormatError,
    HexColorError,
)

# ── Conversion ───────────────────────────────────────────────────────────────
from .conversion import (
    RGB,
    YCbCr,
    format_hex,
    hex_to_ycbcr,
    parse_hex,
    rgb_to_ycbcr,
    ycbcr_to_hex,
    ycbcr_to_rgb,
)

# ── Catalog ──────────────────────────────────────────────────────────────────
from .catalog import (
    DEFAULT_HEX_COLUMN,
    DEFAULT_NAME_COLUMN,
    build_catalog,
    load_builtin_catalog,
    load_catalog,
    load_csv_catalog,
)

__all__ = [
    # errors
    "ColorFinderError",
    "HexColorError",
    "FormatError",
    "DigitError",
    "CatalogLoadError",
    "EmptyCatalogError",
    # conversion
    "RGB",
    "YCbCr",
    "rgb_to_ycbcr",
    "ycbcr_to_rgb",
    "parse_hex",
    "format_hex",
    "hex_to_ycbcr",
    "ycbcr_to_hex",
    # catalog
    "DEFAULT_NAME_COLUMN",
    "DEFAULT_HEX_COLUMN",
    "build_catalog",
    "load_csv_catalog",
    "load_builtin_catalog",
    "load_catalog",
]
