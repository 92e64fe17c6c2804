"""Row padding helpers for block-art layout.

Widths are measured in characters: one code point is one column.
"""

from artfont.types import Alignment


def blank(width: int) -> str:
    """A run of `width` blank columns."""
    return " " * max(width, 0)


def pad_right(row: str, width: int) -> str:
    """
    Pad a row with trailing blanks up to `width` columns.

    Rows already at or beyond `width` are returned unchanged (never truncated).
    """
    return row + blank(width - len(row))


def split_padding(deficit: int, alignment: Alignment) -> tuple[int, int]:
    """
    Split a width deficit into (leading, trailing) blank columns.

    Center alignment puts the odd column on the trailing side.

    Args:
        deficit: Columns missing from the row (negative is treated as 0).
        alignment: "left", "center" or "right".

    Returns:
        Tuple of (leading, trailing) column counts.

    Raises:
        ValueError: If the alignment is unknown.
    """
    deficit = max(deficit, 0)
    if alignment == "left":
        return 0, deficit
    if alignment == "right":
        return deficit, 0
    if alignment == "center":
        leading = deficit // 2
        return leading, deficit - leading
    raise ValueError(f"Unknown alignment '{alignment}'. Expected one of: left, center, right")


def align_row(row: str, width: int, alignment: Alignment) -> str:
    """
    Pad a row to `width` columns according to the alignment.

    Args:
        row: Row text.
        width: Target width in columns.
        alignment: "left", "center" or "right".

    Returns:
        The padded row.
    """
    leading, trailing = split_padding(width - len(row), alignment)
    return blank(leading) + row + blank(trailing)
