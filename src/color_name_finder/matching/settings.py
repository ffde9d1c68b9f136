"""
settings.py
===========

Does: Read finder settings (catalog source, CSV column names, output options)
      from <data>/finder.json, validate them, and fall back to defaults when
      no data directory is available.
Used By: CLI and finder orchestration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional

from color_name_finder.matching.color.catalog import (
    BUILTIN_PREFIX,
    DEFAULT_HEX_COLUMN,
    DEFAULT_NAME_COLUMN,
)
from color_name_finder.matching.general.utils.load_config import (
    ConfigFileNotFound,
    DataDirNotFound,
    load_config,
    resolve_data_dir,
)

__all__ = ["FinderSettings", "DEFAULT_SETTINGS", "validate_settings", "load_finder_settings"]

logger = logging.getLogger(__name__)

SETTINGS_FILE = "finder.json"


class FinderSettings(NamedTuple):
    catalog: str = "color_names.csv"
    name_column: str = DEFAULT_NAME_COLUMN
    hex_column: str = DEFAULT_HEX_COLUMN
    show_hex: bool = True
    precision: int = 4


DEFAULT_SETTINGS = FinderSettings()

_STR_KEYS = ("catalog", "name_column", "hex_column")


def validate_settings(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Check types of known keys; unknown keys are rejected to catch typos."""
    unknown = set(raw) - set(FinderSettings._fields)
    if unknown:
        raise ValueError(f"unknown setting(s): {', '.join(sorted(unknown))}")
    for key in _STR_KEYS:
        if key in raw and (not isinstance(raw[key], str) or not raw[key]):
            raise TypeError(f"{key} must be a non-empty string")
    if "show_hex" in raw and not isinstance(raw["show_hex"], bool):
        raise TypeError("show_hex must be true or false")
    if "precision" in raw:
        p = raw["precision"]
        if isinstance(p, bool) or not isinstance(p, int) or not 0 <= p <= 12:
            raise ValueError("precision must be an integer in [0, 12]")
    return raw


def _resolve_catalog(catalog: str, data_dir: Path) -> str:
    # Relative CSV paths are taken from the data dir; builtin sources pass through
    if catalog.startswith(BUILTIN_PREFIX) or Path(catalog).is_absolute():
        return catalog
    return str(data_dir / catalog)


def load_finder_settings(base_dir: Optional[Path] = None) -> FinderSettings:
    """
    Load settings from finder.json.

    A missing data dir or missing finder.json yields DEFAULT_SETTINGS with the
    catalog still resolved against the data dir when one exists. Invalid JSON
    or values propagate as ConfigParseError / ConfigTypeError.
    """
    try:
        data_dir = (base_dir or resolve_data_dir()).resolve()
    except DataDirNotFound:
        logger.debug("No data dir found; using default finder settings")
        return DEFAULT_SETTINGS

    try:
        raw = load_config(
            SETTINGS_FILE, "validated_dict", base_dir=data_dir, validator=validate_settings
        )
    except ConfigFileNotFound:
        logger.debug("%s not found in %s; using defaults", SETTINGS_FILE, data_dir)
        raw = {}

    settings = DEFAULT_SETTINGS._replace(**raw)
    return settings._replace(catalog=_resolve_catalog(settings.catalog, data_dir))
