#!/usr/bin/env python3
"""Test the fluent AsciiArtBuilder and the convenience render functions."""

import json

import pytest

from artfont import (
    AsciiArtBuilder,
    Font,
    FontError,
    MissingText,
    assemble,
    default_font,
    mini_font,
    render,
    render_mini,
    render_with_font,
)

BARS = Font(width=1, height=2, spacing=0, glyphs={"A": ["#", "#"], "B": ["@", "@"]})


def test_builder_matches_assemble():
    art = AsciiArtBuilder.new().text("Hi").align_center().line_spacing(1).build()
    assert art == assemble(default_font(), "Hi", "center", 1, None)


def test_builder_defaults_match_render():
    assert AsciiArtBuilder().text("Hello").build() == render("Hello")
    assert AsciiArtBuilder().text("AB").font(BARS).build() == render_with_font("AB", BARS)


def test_build_without_text_fails():
    with pytest.raises(MissingText):
        AsciiArtBuilder.new().align_right().build()
    with pytest.raises(ValueError):
        AsciiArtBuilder.new().build()


def test_empty_text_is_valid():
    assert AsciiArtBuilder.new().text("").font(BARS).build() == "\n"


def test_last_write_wins():
    builder = AsciiArtBuilder.new().text("A").text("B").align_right().align_left().spacing(4).spacing(0)
    assert builder.font(BARS).build() == assemble(BARS, "B", "left", 0, 0)


def test_setters_return_new_configurations():
    base = AsciiArtBuilder.new().text("AB\nA").font(BARS)
    right = base.align_right()
    assert base.alignment == "left"
    assert right.alignment == "right"
    assert base.build() == "#@\n#@\n# \n# "
    assert right.build() == "#@\n#@\n #\n #"
    # Builders are immutable, so build() can be called again
    assert base.build() == base.build()


def test_spacing_and_line_spacing():
    art = AsciiArtBuilder.new().text("AB\nBA").font(BARS).spacing(2).line_spacing(1).build()
    assert art.split("\n") == ["#  @", "#  @", "    ", "@  #", "@  #"]


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        AsciiArtBuilder.new().spacing(-1)
    with pytest.raises(ValueError):
        AsciiArtBuilder.new().line_spacing(-1)


def test_align_by_name():
    builder = AsciiArtBuilder.new().text("AB\nA").font(BARS)
    assert builder.align("CENTER").build() == builder.align_center().build()
    with pytest.raises(ValueError):
        builder.align("justify")  # type: ignore[arg-type]


def test_font_by_name_and_path(tmp_path):
    assert AsciiArtBuilder.new().text("hi").font("mini").build() == render_mini("hi")
    assert AsciiArtBuilder.new().text("hi").font(mini_font()).build() == render_mini("hi")

    path = tmp_path / "bars.json"
    path.write_text(json.dumps(BARS.to_document()), encoding="utf-8")
    assert AsciiArtBuilder.new().text("AB").font(path).build() == "#@\n#@"
    assert AsciiArtBuilder.new().text("AB").font(str(path)).build() == "#@\n#@"


def test_invalid_font_file_surfaces_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"width": 1, "height": 2, "glyphs": {}}), encoding="utf-8")

    with pytest.raises(FontError):
        AsciiArtBuilder.new().text("A").font(path).build()
    with pytest.raises(FileNotFoundError):
        AsciiArtBuilder.new().text("A").font(tmp_path / "missing.json").build()


def test_cell_policy():
    wide = Font(width=2, height=2, glyphs={"W": ["###", "#"]})
    builder = AsciiArtBuilder.new().text("WW").font(wide)
    assert builder.build() == "######\n# #   "
    assert builder.cell_policy("glyph").build() == "######\n#  #  "
    with pytest.raises(ValueError):
        builder.cell_policy("wide")  # type: ignore[arg-type]
