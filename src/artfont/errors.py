"""Exceptions raised by font loading and rendering."""


class ArtFontError(Exception):
    """Base class for all artfont errors."""


class FontError(ArtFontError):
    """A font description could not be turned into a valid Font."""


class ParseError(FontError):
    """The font document does not have the expected structure."""


class InvalidDimensions(FontError):
    """Font width/height is missing or non-positive, or spacing is negative."""


class InvalidGlyphKey(FontError):
    """A glyph key does not name exactly one character."""

    def __init__(self, key: str, message: str | None = None) -> None:
        self.key = key
        super().__init__(message or f"Glyph key {key!r} must be exactly one character")


class GlyphHeightMismatch(FontError):
    """A glyph does not have exactly `height` rows."""

    def __init__(self, char: str, expected: int, actual: int) -> None:
        self.char = char
        self.expected = expected
        self.actual = actual
        super().__init__(f"Glyph for {char!r} has {actual} rows, expected {expected}")


class EmptyFont(FontError):
    """The font defines no glyphs."""


class MissingText(ArtFontError, ValueError):
    """build() was called before any text was set."""
