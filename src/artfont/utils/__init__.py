"""Utility modules."""

from artfont.utils.text import align_row, blank, pad_right, split_padding

__all__ = [
    "align_row",
    "blank",
    "pad_right",
    "split_padding",
]
