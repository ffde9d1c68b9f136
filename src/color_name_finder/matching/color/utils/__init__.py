"""
utils package.
=============

Does: Provide YCbCr distance calculations and nearest-color search shared by
      the finder and the CLI.
"""

from .ycbcr_distance import (
    NamedColor,
    NearestMatch,
    find_nearest_color,
    rank_nearest_colors,
    ycbcr_distance,
    ycbcr_distance_sq,
)

__all__ = [
    "NamedColor",
    "NearestMatch",
    "ycbcr_distance",
    "ycbcr_distance_sq",
    "find_nearest_color",
    "rank_nearest_colors",
]

__docformat__ = "google"
