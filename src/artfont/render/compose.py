"""Composition of a single text line into a block of glyph rows."""

from dataclasses import dataclass

from artfont.models import Font
from artfont.types import CELL_POLICIES, CellPolicy, Glyph
from artfont.utils.text import blank, pad_right


@dataclass(frozen=True)
class ComposedBlock:
    """
    One rendered input line before vertical assembly.

    Attributes:
        rows: `font.height` rows. Rows can differ in length when a glyph has
              rows wider than the font's cell; the assembler pads them.
    """

    rows: tuple[str, ...]

    @property
    def width(self) -> int:
        """Content width in columns (0 for an empty line)."""
        return max((len(row) for row in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)


def _cell(glyph: Glyph, width: int, cell_policy: CellPolicy) -> list[str]:
    """
    Pad a glyph's rows for horizontal concatenation.

    "font": each row is padded to `width` on its own; longer rows are kept whole.
    "glyph": rows are padded to the glyph's widest row (at least `width`), so
    an oversize row doesn't shift the glyphs that follow.
    """
    if cell_policy == "glyph":
        width = max([width, *(len(row) for row in glyph)])
    return [pad_right(row, width) for row in glyph]


def compose_line(
    font: Font,
    text: str,
    spacing: int | None = None,
    cell_policy: CellPolicy = "font",
) -> ComposedBlock:
    """
    Compose one line of text into glyph rows.

    Characters missing from the font are rendered as blank cells.

    Args:
        font: Font to render with.
        text: A single line of text (no line breaks).
        spacing: Blank columns between glyphs. None uses font.spacing.
        cell_policy: Row padding rule, "font" (default) or "glyph".

    Returns:
        ComposedBlock with font.height rows.

    Raises:
        ValueError: If spacing is negative or the cell policy is unknown.
    """
    if spacing is None:
        spacing = font.spacing
    if spacing < 0:
        raise ValueError(f"Spacing must not be negative (got {spacing})")
    if cell_policy not in CELL_POLICIES:
        raise ValueError(f"Unknown cell policy '{cell_policy}'. Expected one of: {', '.join(CELL_POLICIES)}")

    cells = [_cell(font.glyph_or_blank(char), font.width, cell_policy) for char in text]
    gap = blank(spacing)

    rows = tuple(gap.join(cell[r] for cell in cells) for r in range(font.height))
    return ComposedBlock(rows=rows)
