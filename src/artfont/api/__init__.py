"""Public rendering API."""

from artfont.api.builder import (
    AsciiArtBuilder,
    render,
    render_ansi_compact,
    render_mini,
    render_with_font,
)

__all__ = [
    "AsciiArtBuilder",
    "render",
    "render_ansi_compact",
    "render_mini",
    "render_with_font",
]
