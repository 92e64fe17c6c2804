#!/usr/bin/env python3
"""Test font document loading, validation and saving."""

import json

import pytest

from artfont import (
    EmptyFont,
    Font,
    GlyphHeightMismatch,
    InvalidDimensions,
    InvalidGlyphKey,
    ParseError,
    available_fonts,
    default_font,
    get_font,
    load_font,
    load_from_document,
    resolve_font,
    save_font,
)


def block_document(**overrides) -> dict:
    doc = {
        "width": 3,
        "height": 3,
        "spacing": 1,
        "glyphs": {"A": ["###", "# #", "###"]},
    }
    doc.update(overrides)
    return doc


def test_load_valid_document():
    font = load_from_document(block_document())
    assert (font.width, font.height, font.spacing) == (3, 3, 1)
    assert list(font.glyph_for("A")) == ["###", "# #", "###"]


def test_spacing_defaults_to_zero():
    doc = block_document()
    del doc["spacing"]
    assert load_from_document(doc).spacing == 0


def test_glyph_height_mismatch_reports_character():
    doc = block_document(glyphs={"A": ["###", "# #"]})
    with pytest.raises(GlyphHeightMismatch) as excinfo:
        load_from_document(doc)
    assert excinfo.value.char == "A"
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2


def test_empty_glyphs_rejected():
    with pytest.raises(EmptyFont):
        load_from_document(block_document(glyphs={}))
    doc = block_document()
    del doc["glyphs"]
    with pytest.raises(EmptyFont):
        load_from_document(doc)


@pytest.mark.parametrize(
    "overrides",
    [{"width": 0}, {"height": 0}, {"width": -2}, {"width": None}, {"spacing": -1}],
)
def test_invalid_dimensions(overrides):
    with pytest.raises(InvalidDimensions):
        load_from_document(block_document(**overrides))


def test_missing_height_is_invalid_dimensions():
    doc = block_document()
    del doc["height"]
    with pytest.raises(InvalidDimensions):
        load_from_document(doc)


def test_dimensions_checked_before_glyphs():
    with pytest.raises(InvalidDimensions):
        load_from_document(block_document(width=0, glyphs={}))


@pytest.mark.parametrize("key", ["AB", "", "\\q", "\\u{zz}"])
def test_invalid_glyph_keys(key):
    with pytest.raises(InvalidGlyphKey) as excinfo:
        load_from_document(block_document(glyphs={key: ["###", "# #", "###"]}))
    assert excinfo.value.key == key


def test_escaped_glyph_keys():
    rows = ["###", "# #", "###"]
    font = load_from_document(block_document(glyphs={"\\n": rows, "\\u{2588}": rows, "\\\\": rows}))
    assert font.glyph_for("\n") is not None
    assert font.glyph_for("█") is not None
    assert font.glyph_for("\\") is not None


@pytest.mark.parametrize(
    "doc",
    [
        ["not", "a", "mapping"],
        block_document(width="3"),
        block_document(height=True),
        block_document(glyphs={"A": "###"}),
        block_document(glyphs={"A": ["###", 7, "###"]}),
        block_document(glyphs=["A"]),
    ],
)
def test_malformed_structure_is_parse_error(doc):
    with pytest.raises(ParseError):
        load_from_document(doc)


def test_rows_are_stored_verbatim():
    doc = block_document(glyphs={"A": ["#", "#####", ""]})
    assert load_from_document(doc).glyph_for("A") == ("#", "#####", "")


def test_load_font_from_file(tmp_path):
    path = tmp_path / "block.json"
    path.write_text(json.dumps(block_document()), encoding="utf-8")

    font = load_font(path)
    assert font.name == "block"
    assert font.glyph_for("A") == ("###", "# #", "###")
    assert load_font(str(path)) == font


def test_load_font_invalid_json_wraps_parse_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"width": 3,', encoding="utf-8")

    with pytest.raises(ParseError) as excinfo:
        load_font(path)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)
    assert "broken.json" in str(excinfo.value)


def test_load_font_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_font(tmp_path / "nope.json")


def test_save_font_loads_back(tmp_path):
    font = Font(
        width=2,
        height=2,
        spacing=1,
        glyphs={"A": ["▄▄", "██"], "\\": ["\\ ", " \\"], "\t": ["  ", "  "], '"': ["''", "  "]},
    )
    path = save_font(font, tmp_path / "saved.json")

    loaded = load_font(path)
    assert loaded.to_document() == font.to_document()
    assert "▄▄" in path.read_text(encoding="utf-8")


def test_bundled_fonts_load():
    assert available_fonts() == ["ansi_compact", "default", "mini"]
    for name in available_fonts():
        font = get_font(name)
        assert font.name == name
        assert font.glyph_for("A") is not None

    font = default_font()
    assert (font.width, font.height, font.spacing) == (7, 7, 1)
    assert get_font("ANSI Compact") is get_font("ansi_compact")


def test_unknown_bundled_font():
    with pytest.raises(KeyError):
        get_font("gothic")


def test_resolve_font(tmp_path):
    path = tmp_path / "block.json"
    path.write_text(json.dumps(block_document()), encoding="utf-8")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps(block_document(width=0)), encoding="utf-8")

    assert resolve_font("mini").name == "mini"
    assert resolve_font(path).name == "block"
    assert resolve_font(None).name == "default"
    assert resolve_font("missing-font").name == "default"
    assert resolve_font(bad, fallback="mini").name == "mini"

    font = load_font(path)
    assert resolve_font(font) is font


def test_load_font_invalid_utf8_is_parse_error(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"width": 1, "height": 1, "glyphs": {"A": ["\xff"]}}')

    with pytest.raises(ParseError) as excinfo:
        load_font(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_keys_naming_the_same_character_are_rejected():
    rows = ["###", "# #", "###"]
    with pytest.raises(InvalidGlyphKey) as excinfo:
        load_from_document(block_document(glyphs={"\n": rows, "\\n": rows}))
    assert excinfo.value.key == "\\n"

    with pytest.raises(InvalidGlyphKey):
        load_from_document(block_document(glyphs={"A": rows, "\\u{41}": rows}))


def test_tuple_rows_are_accepted():
    font = load_from_document(block_document())
    rebuilt = load_from_document(block_document(glyphs=dict(font.glyphs)))
    assert rebuilt == font
