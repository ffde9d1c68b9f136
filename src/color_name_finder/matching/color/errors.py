# src/color_name_finder/matching/color/errors.py

"""
errors.py.
=========

Does: Define the closed set of error kinds raised by hex parsing, catalog
      loading, and nearest-color search.
Used By: conversion, catalog, ycbcr_distance, finder, cli.
Returns: Exception classes only (no side effects).
"""

from __future__ import annotations

__all__ = [
    "ColorFinderError",
    "HexColorError",
    "FormatError",
    "DigitError",
    "CatalogLoadError",
    "EmptyCatalogError",
]


class ColorFinderError(Exception):
    """Base class for every error raised by color_name_finder."""


# ── Hex parsing ──────────────────────────────────────────────────────────────
class HexColorError(ColorFinderError, ValueError):
    """Raise when a string cannot be read as a '#RRGGBB' color."""

    def __init__(self, text: str, message: str):
        super().__init__(message)
        self.text = text


class FormatError(HexColorError):
    """Raise when the string is not 7 characters long or lacks the '#' prefix."""

    def __init__(self, text: str):
        super().__init__(text, f"Invalid hex format {text!r}. Must be '#RRGGBB'.")


class DigitError(HexColorError):
    """Raise when one channel pair holds non-hexadecimal characters."""

    def __init__(self, text: str, channel: str, pair: str):
        super().__init__(text, f"Invalid hex {channel} component {pair!r} in {text!r}")
        self.channel = channel
        self.pair = pair


# ── Catalog ──────────────────────────────────────────────────────────────────
class CatalogLoadError(ColorFinderError):
    """Raise when the catalog source cannot be read or lacks the expected schema."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source


class EmptyCatalogError(ColorFinderError, LookupError):
    """Raise when a search is run against a catalog with no usable entries."""
