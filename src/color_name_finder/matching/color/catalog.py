"""
catalog.py
==========

Does: Build the in-memory named-color catalog from a CSV file or from a
      built-in web palette (CSS3 via webcolors, XKCD via matplotlib),
      converting every entry to YCbCr exactly once.
Used By: finder orchestration and the CLI.
Returns: Ordered list[NamedColor]; rows with bad hex are skipped and logged.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional, Tuple, Union

import pandas as pd
from rapidfuzz import fuzz, process

from color_name_finder.matching.color.conversion import hex_to_ycbcr
from color_name_finder.matching.color.errors import CatalogLoadError, HexColorError
from color_name_finder.matching.color.utils.ycbcr_distance import NamedColor
from color_name_finder.matching.general.utils.log import debug

__all__ = [
    "DEFAULT_NAME_COLUMN",
    "DEFAULT_HEX_COLUMN",
    "BUILTIN_PREFIX",
    "BUILTIN_CATALOGS",
    "normalize_hex_cell",
    "build_catalog",
    "load_csv_catalog",
    "load_builtin_catalog",
    "load_catalog",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

DEFAULT_NAME_COLUMN = "Name"
DEFAULT_HEX_COLUMN = "Hex (24 bit)"
BUILTIN_PREFIX = "builtin:"
BUILTIN_CATALOGS = ("css3", "xkcd")

RawRow = Tuple[str, str]
RowResult = Union[NamedColor, HexColorError]


# =============================================================================
# 1) ROW HANDLING (fold with recovery)
# =============================================================================

def normalize_hex_cell(cell: str) -> str:
    """Does: Strip cell padding and prepend '#' when the source omits it."""
    cell = cell.strip()
    return cell if cell.startswith("#") else f"#{cell}"


def _convert_row(name: str, hex_cell: str) -> RowResult:
    try:
        return NamedColor(name, hex_to_ycbcr(normalize_hex_cell(hex_cell)))
    except HexColorError as e:
        return e


def build_catalog(rows: Iterable[RawRow], source: str = "<rows>") -> List[NamedColor]:
    """
    Does: Convert (name, hex) rows into NamedColor entries, keeping order.

    Each row maps to either an entry or a HexColorError; errors are logged with
    the row name and dropped, so every returned entry holds a parsed color.
    """
    catalog: List[NamedColor] = []
    skipped = 0
    for name, hex_cell in rows:
        result = _convert_row(name, hex_cell)
        if isinstance(result, HexColorError):
            skipped += 1
            logger.warning("Skipping color %r due to hex parse error: %s", name, result)
            continue
        catalog.append(result)

    debug(f"{source}: {len(catalog)} entries kept, {skipped} skipped", topic="catalog")
    logger.info("Loaded %d named colors from %s (%d skipped)", len(catalog), source, skipped)
    return catalog


# =============================================================================
# 2) CSV SOURCE
# =============================================================================

def _suggest_column(missing: str, columns: List[str]) -> Optional[str]:
    hit = process.extractOne(missing, columns, scorer=fuzz.ratio, score_cutoff=60)
    return hit[0] if hit else None


def _require_column(column: str, columns: List[str], source: str) -> None:
    if column in columns:
        return
    hint = _suggest_column(column, columns)
    msg = f"missing column {column!r} (found: {', '.join(map(repr, columns)) or 'none'})"
    if hint:
        msg += f"; did you mean {hint!r}?"
    raise CatalogLoadError(source, msg)


def load_csv_catalog(
    path: Union[str, os.PathLike],
    name_column: str = DEFAULT_NAME_COLUMN,
    hex_column: str = DEFAULT_HEX_COLUMN,
) -> List[NamedColor]:
    """
    Does: Read a headered CSV and build the catalog from two of its columns.

    Raises:
        CatalogLoadError: the file cannot be read, is not valid CSV, or lacks
            the name/hex columns.
    """
    source = os.fspath(path)
    try:
        # Every cell as text; empty cells stay "" rather than NaN
        frame = pd.read_csv(source, dtype=str, keep_default_na=False)
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(source, f"cannot read file: {e}") from e
    except pd.errors.EmptyDataError as e:
        raise CatalogLoadError(source, "file is empty (no header row)") from e
    except pd.errors.ParserError as e:
        raise CatalogLoadError(source, f"malformed CSV: {e}") from e

    columns = [str(c) for c in frame.columns]
    _require_column(name_column, columns, source)
    _require_column(hex_column, columns, source)

    rows = zip(frame[name_column].tolist(), frame[hex_column].tolist())
    return build_catalog(rows, source=source)


# =============================================================================
# 3) BUILT-IN PALETTES (lazy import)
# =============================================================================

def _css3_rows() -> List[RawRow]:
    import webcolors

    return [
        (name, webcolors.name_to_hex(name, spec=webcolors.CSS3))
        for name in sorted(webcolors.names(webcolors.CSS3))
    ]


def _xkcd_rows() -> List[RawRow]:
    from matplotlib.colors import XKCD_COLORS

    return [(key.replace("xkcd:", ""), hx) for key, hx in XKCD_COLORS.items()]


def load_builtin_catalog(name: str) -> List[NamedColor]:
    """Does: Build the catalog from a bundled web palette ('css3' or 'xkcd')."""
    key = name.strip().lower()
    if key == "css3":
        rows = _css3_rows()
    elif key == "xkcd":
        rows = _xkcd_rows()
    else:
        raise CatalogLoadError(
            f"{BUILTIN_PREFIX}{name}",
            f"unknown built-in catalog (choose from: {', '.join(BUILTIN_CATALOGS)})",
        )
    return build_catalog(rows, source=f"{BUILTIN_PREFIX}{key}")


def load_catalog(
    source: Union[str, os.PathLike],
    name_column: str = DEFAULT_NAME_COLUMN,
    hex_column: str = DEFAULT_HEX_COLUMN,
) -> List[NamedColor]:
    """Does: Dispatch 'builtin:<name>' to a bundled palette, anything else to CSV."""
    text = os.fspath(source)
    if text.startswith(BUILTIN_PREFIX):
        return load_builtin_catalog(text[len(BUILTIN_PREFIX):])
    return load_csv_catalog(text, name_column=name_column, hex_column=hex_column)
