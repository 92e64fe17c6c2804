"""Type aliases used across the artfont package."""

from typing import Literal, Tuple

# A glyph is a fixed-height sequence of text rows
Glyph = Tuple[str, ...]

# Horizontal alignment of rendered lines
Alignment = Literal["left", "center", "right"]

ALIGNMENTS: tuple[Alignment, ...] = ("left", "center", "right")

# Row padding rule when composing glyphs: pad each row to the font width,
# or pad every row of a glyph to that glyph's widest row
CellPolicy = Literal["font", "glyph"]

CELL_POLICIES: tuple[CellPolicy, ...] = ("font", "glyph")
