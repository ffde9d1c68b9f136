# finder.py
from __future__ import annotations

"""
finder.py
=========

Does: Tie catalog, query parsing, and nearest search together and render
      the text report shown to the user.
Returns:
  - find_color_name(query, catalog, top) -> FinderReport(query, match, alternatives, elapsed)
  - format_report(report, show_hex, precision) -> str
Used by: CLI and tests.
"""

import logging
import time
from typing import List, NamedTuple, Sequence

from color_name_finder.matching.color.conversion import YCbCr, hex_to_ycbcr
from color_name_finder.matching.color.utils.ycbcr_distance import (
    NamedColor,
    NearestMatch,
    find_nearest_color,
    rank_nearest_colors,
)

logger = logging.getLogger(__name__)

__all__ = ["FinderReport", "find_color_name", "format_elapsed", "format_report"]


class FinderReport(NamedTuple):
    query: str
    point: YCbCr
    match: NearestMatch
    alternatives: List[NearestMatch]
    elapsed: float  # seconds


def find_color_name(query: str, catalog: Sequence[NamedColor], top: int = 1) -> FinderReport:
    """
    Parse ``query`` as '#RRGGBB' and look up its nearest catalog entry.

    ``top`` > 1 also collects the runners-up (deterministic order, same
    tie-break as the primary match). Raises HexColorError for a malformed
    query and EmptyCatalogError for an empty catalog.
    """
    start = time.perf_counter()
    point = hex_to_ycbcr(query)
    match = find_nearest_color(point, catalog)
    alternatives: List[NearestMatch] = []
    if top > 1:
        alternatives = rank_nearest_colors(point, catalog, top)[1:]
    elapsed = time.perf_counter() - start
    logger.debug("Query %s -> %s (%.6fs)", query, match.name, elapsed)
    return FinderReport(query, point, match, alternatives, elapsed)


def format_elapsed(seconds: float) -> str:
    """Human-scale duration: µs below 1 ms, ms below 1 s."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.2f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"


def _match_label(m: NearestMatch, show_hex: bool) -> str:
    return f"{m.name} - {m.hex}" if show_hex else m.name


def format_report(report: FinderReport, show_hex: bool = True, precision: int = 4) -> str:
    lines = [
        f"Processing time: {format_elapsed(report.elapsed)}",
        f"Closest Named Color: {_match_label(report.match, show_hex)}",
        "Color Difference (Euclidean Distance in YCbCr space): "
        f"{report.match.distance:.{precision}f}",
    ]
    if report.alternatives:
        lines.append("Runners-up:")
        for rank, alt in enumerate(report.alternatives, start=2):
            lines.append(f"  {rank}. {_match_label(alt, show_hex)} ({alt.distance:.{precision}f})")
    return "\n".join(lines)
