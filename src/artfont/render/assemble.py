"""Vertical assembly of composed lines into the final block-art text."""

import logging
from typing import Sequence

from artfont.models import Font
from artfont.render.compose import ComposedBlock, compose_line
from artfont.types import ALIGNMENTS, Alignment, CellPolicy
from artfont.utils.text import align_row, blank, pad_right

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """
    Split text on line breaks.

    A trailing line break does not start an extra line; an empty string is a
    single empty line.
    """
    return text.splitlines() or [""]


def assemble(
    font: Font,
    lines: str | Sequence[str],
    alignment: Alignment = "left",
    line_spacing: int = 0,
    spacing: int | None = None,
    cell_policy: CellPolicy = "font",
) -> str:
    """
    Render one or more lines of text as aligned block-art.

    Each line is composed separately, padded to the widest line according to
    the alignment, and stacked with `line_spacing` blank rows between lines.

    Args:
        font: Font to render with.
        lines: Text (split on line breaks) or a sequence of single lines.
        alignment: "left", "center" or "right".
        line_spacing: Blank rows inserted between consecutive lines.
        spacing: Blank columns between glyphs. None uses font.spacing.
        cell_policy: Glyph row padding rule, "font" (default) or "glyph".

    Returns:
        Rows joined with "\\n". Every row has the same width.

    Raises:
        ValueError: If alignment or cell policy is unknown, or line_spacing/spacing is negative.
    """
    if alignment not in ALIGNMENTS:
        raise ValueError(f"Unknown alignment '{alignment}'. Expected one of: {', '.join(ALIGNMENTS)}")
    if line_spacing < 0:
        raise ValueError(f"Line spacing must not be negative (got {line_spacing})")

    if isinstance(lines, str):
        lines = split_lines(lines)
    elif not lines:
        lines = [""]

    blocks: list[ComposedBlock] = [compose_line(font, line, spacing, cell_policy) for line in lines]
    max_width = max(block.width for block in blocks)
    logger.debug(f"Assembling {len(blocks)} line(s) at {max_width} columns with font '{font.name}'")

    separator = [blank(max_width)] * line_spacing
    rows: list[str] = []
    for index, block in enumerate(blocks):
        if index > 0:
            rows.extend(separator)
        # Square the block first so the whole block shifts as one unit
        rows.extend(align_row(pad_right(row, block.width), max_width, alignment) for row in block.rows)

    return "\n".join(rows)
