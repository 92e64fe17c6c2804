"""Glyph composition and block-art assembly."""

from artfont.render.assemble import assemble, split_lines
from artfont.render.compose import ComposedBlock, compose_line

__all__ = [
    "ComposedBlock",
    "assemble",
    "compose_line",
    "split_lines",
]
