"""Block-art text rendering with replaceable fonts."""

__version__ = "0.1.0"

# High-level Python API
from artfont.api import (
    AsciiArtBuilder,
    render,
    render_ansi_compact,
    render_mini,
    render_with_font,
)
from artfont.errors import (
    ArtFontError,
    EmptyFont,
    FontError,
    GlyphHeightMismatch,
    InvalidDimensions,
    InvalidGlyphKey,
    MissingText,
    ParseError,
)
from artfont.fonts import (
    ansi_compact_font,
    available_fonts,
    default_font,
    get_font,
    load_font,
    load_from_document,
    mini_font,
    resolve_font,
    save_font,
)
from artfont.models import Font
from artfont.render import ComposedBlock, assemble, compose_line

__all__ = [
    "ArtFontError",
    "AsciiArtBuilder",
    "ComposedBlock",
    "EmptyFont",
    "Font",
    "FontError",
    "GlyphHeightMismatch",
    "InvalidDimensions",
    "InvalidGlyphKey",
    "MissingText",
    "ParseError",
    "ansi_compact_font",
    "assemble",
    "available_fonts",
    "compose_line",
    "default_font",
    "get_font",
    "load_font",
    "load_from_document",
    "mini_font",
    "render",
    "render_ansi_compact",
    "render_mini",
    "render_with_font",
    "resolve_font",
    "save_font",
]
