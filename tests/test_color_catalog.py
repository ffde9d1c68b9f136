# tests/test_color_catalog.py
"""Catalog loading tests: CSV rows with recovery, schema errors, built-in palettes."""

from __future__ import annotations

import importlib
import logging

import pytest

cat = importlib.import_module("color_name_finder.matching.color.catalog")
cv = importlib.import_module("color_name_finder.matching.color.conversion")
errors = importlib.import_module("color_name_finder.matching.color.errors")
yd = importlib.import_module("color_name_finder.matching.color.utils.ycbcr_distance")


def _write(tmp_path, text: str, name: str = "colors.csv"):
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


# ---------- Row helpers ----------
@pytest.mark.parametrize(
    "cell,expect",
    [("FF0000", "#FF0000"), ("#ff0000", "#ff0000"), ("  00ff00 ", "#00ff00"), ("", "#")],
)
def test_normalize_hex_cell(cell, expect):
    assert cat.normalize_hex_cell(cell) == expect


def test_build_catalog_keeps_order_and_drops_bad_rows(caplog):
    rows = [("Red", "FF0000"), ("Broken", "GG0000"), ("Short", "12"), ("Black", "#000000")]
    with caplog.at_level(logging.WARNING, logger=cat.__name__):
        catalog = cat.build_catalog(rows)

    assert [e.name for e in catalog] == ["Red", "Black"]
    assert catalog[0].ycbcr == cv.hex_to_ycbcr("#FF0000")
    messages = [r.getMessage() for r in caplog.records]
    assert any("'Broken'" in m and "R component" in m for m in messages)
    assert any("'Short'" in m and "Invalid hex format" in m for m in messages)


def test_build_catalog_all_bad_is_empty():
    assert cat.build_catalog([("Nope", "xyz")]) == []


# ---------- CSV source ----------
def test_load_csv_catalog_default_columns(tmp_path):
    p = _write(
        tmp_path,
        "Name,Hex (24 bit),Red (8 bit)\n"
        "Red,FF0000,255\n"
        "Broken,ZZ0000,0\n"
        "Black,000000,0\n",
    )
    catalog = cat.load_csv_catalog(p)
    assert [e.name for e in catalog] == ["Red", "Black"]


def test_load_csv_catalog_keeps_leading_zero_hex(tmp_path):
    p = _write(tmp_path, "Name,Hex (24 bit)\nNavy,000080\n")
    (entry,) = cat.load_csv_catalog(p)
    assert entry.ycbcr == cv.hex_to_ycbcr("#000080")


def test_load_csv_catalog_custom_columns(tmp_path):
    p = _write(tmp_path, "label,code\nTeal,#008080\n")
    catalog = cat.load_csv_catalog(p, name_column="label", hex_column="code")
    assert [e.name for e in catalog] == ["Teal"]


def test_load_csv_catalog_empty_hex_cell_is_skipped(tmp_path):
    p = _write(tmp_path, "Name,Hex (24 bit)\nBlank,\nRed,FF0000\n")
    assert [e.name for e in cat.load_csv_catalog(p)] == ["Red"]


def test_missing_column_suggests_close_header(tmp_path):
    p = _write(tmp_path, "Name,Hex (24bit)\nRed,FF0000\n")
    with pytest.raises(errors.CatalogLoadError) as ei:
        cat.load_csv_catalog(p)
    msg = str(ei.value)
    assert "'Hex (24 bit)'" in msg
    assert "did you mean 'Hex (24bit)'" in msg
    assert ei.value.source == str(p)


def test_missing_file_is_catalog_load_error(tmp_path):
    with pytest.raises(errors.CatalogLoadError):
        cat.load_csv_catalog(tmp_path / "absent.csv")


def test_empty_file_is_catalog_load_error(tmp_path):
    p = _write(tmp_path, "")
    with pytest.raises(errors.CatalogLoadError) as ei:
        cat.load_csv_catalog(p)
    assert "empty" in str(ei.value)


def test_header_only_gives_empty_catalog(tmp_path):
    p = _write(tmp_path, "Name,Hex (24 bit)\n")
    assert cat.load_csv_catalog(p) == []


# ---------- Dispatch & built-ins ----------
def test_load_catalog_dispatches_to_csv(tmp_path):
    p = _write(tmp_path, "Name,Hex (24 bit)\nRed,FF0000\n")
    assert [e.name for e in cat.load_catalog(str(p))] == ["Red"]


def test_unknown_builtin_raises():
    with pytest.raises(errors.CatalogLoadError) as ei:
        cat.load_catalog("builtin:pantone")
    assert "css3" in str(ei.value)


def test_builtin_css3_catalog():
    pytest.importorskip("webcolors")
    catalog = cat.load_catalog("builtin:css3")
    names = [e.name for e in catalog]
    assert "red" in names and len(catalog) > 100

    m = yd.find_nearest_color(cv.hex_to_ycbcr("#FF0000"), catalog)
    assert m.name == "red" and m.distance == 0.0

    # 'gray' and 'grey' share #808080; sorted order puts 'gray' first
    m = yd.find_nearest_color(cv.hex_to_ycbcr("#808080"), catalog)
    assert m.name == "gray"


def test_builtin_xkcd_catalog():
    pytest.importorskip("matplotlib")
    catalog = cat.load_builtin_catalog("XKCD")
    names = {e.name for e in catalog}
    assert "acid green" in names
    assert all(not n.startswith("xkcd:") for n in names)
