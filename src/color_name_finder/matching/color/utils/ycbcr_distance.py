"""
ycbcr_distance.py
=================

Does: Compute Euclidean distances in YCbCr space and find the catalog entry
      nearest to a query point by exhaustive linear scan.
Used By: finder orchestration, CLI ranking output.
Returns: Distances (float), NearestMatch records (name, distance, point, index).
"""

from __future__ import annotations

import heapq
import logging
import math
from typing import List, NamedTuple, Sequence

from color_name_finder.matching.color.conversion import YCbCr, ycbcr_to_hex
from color_name_finder.matching.color.errors import EmptyCatalogError
from color_name_finder.matching.general.utils.log import debug

__all__ = [
    "NamedColor",
    "NearestMatch",
    "ycbcr_distance_sq",
    "ycbcr_distance",
    "find_nearest_color",
    "rank_nearest_colors",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# ── Types ─────────────────────────────────────────────────────────────────────
class NamedColor(NamedTuple):
    name: str
    ycbcr: YCbCr


class NearestMatch(NamedTuple):
    """A catalog hit: display name, true distance, stored point, catalog position."""

    name: str
    distance: float
    ycbcr: YCbCr
    index: int

    @property
    def hex(self) -> str:
        return ycbcr_to_hex(self.ycbcr)


# =============================================================================
# 1) CORE DISTANCES
# =============================================================================

def ycbcr_distance_sq(a: YCbCr, b: YCbCr) -> float:
    """Does: Squared Euclidean distance (no sqrt) for ranking."""
    dy = a.y - b.y
    dcb = a.cb - b.cb
    dcr = a.cr - b.cr
    return dy * dy + dcb * dcb + dcr * dcr


def ycbcr_distance(a: YCbCr, b: YCbCr) -> float:
    """Does: Euclidean distance in YCbCr space."""
    return math.sqrt(ycbcr_distance_sq(a, b))


# =============================================================================
# 2) NEAREST SEARCH
# =============================================================================

def find_nearest_color(query: YCbCr, catalog: Sequence[NamedColor]) -> NearestMatch:
    """
    Does: Return the catalog entry with minimal distance to ``query``.

    The scan keeps a running minimum and only replaces it on a strictly
    smaller distance, so among tied entries the earliest one wins.

    Raises:
        EmptyCatalogError: ``catalog`` has no entries.
    """
    if not catalog:
        raise EmptyCatalogError("Cannot search an empty color catalog")

    best_index, best_d = -1, math.inf
    for i, entry in enumerate(catalog):
        d = ycbcr_distance_sq(query, entry.ycbcr)
        if d < best_d:
            best_index, best_d = i, d

    best = catalog[best_index]
    debug(f"nearest to {query} is #{best_index} {best.name!r} (d²={best_d:.6g})", topic="search")
    return NearestMatch(best.name, math.sqrt(best_d), best.ycbcr, best_index)


def rank_nearest_colors(
    query: YCbCr,
    catalog: Sequence[NamedColor],
    k: int = 5,
) -> List[NearestMatch]:
    """
    Does: Return up to ``k`` nearest entries ordered by (distance, catalog index).

    Ordering by the (distance_sq, index) pair makes ties resolve exactly as
    in find_nearest_color, so ``rank_nearest_colors(q, c, 1)[0]`` is always
    the same entry.
    """
    if not catalog:
        raise EmptyCatalogError("Cannot search an empty color catalog")
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")

    scored = (
        (ycbcr_distance_sq(query, entry.ycbcr), i)
        for i, entry in enumerate(catalog)
    )
    ranked = [
        NearestMatch(catalog[i].name, math.sqrt(d), catalog[i].ycbcr, i)
        for d, i in heapq.nsmallest(k, scored)
    ]
    logger.debug("Ranked top %d of %d catalog entries", len(ranked), len(catalog))
    return ranked
