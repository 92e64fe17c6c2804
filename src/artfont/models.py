"""Data model for block-art fonts."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from artfont.errors import EmptyFont, GlyphHeightMismatch, InvalidDimensions, InvalidGlyphKey, ParseError
from artfont.types import Glyph


@dataclass(frozen=True)
class Font:
    """
    A fixed-cell font mapping single characters to glyphs.

    Glyph rows are stored verbatim. Rows shorter than `width` are padded when
    composed; longer rows are kept whole.

    Attributes:
        width: Columns per glyph cell.
        height: Rows per glyph cell. Every glyph has exactly this many rows.
        spacing: Default blank columns between adjacent glyphs.
        glyphs: Read-only mapping from character to glyph rows.
        name: Informational label (bundled font name or file stem).
    """

    width: int
    height: int
    spacing: int = 0
    glyphs: Mapping[str, Glyph] = field(default_factory=dict, hash=False)
    name: str = field(default="custom", compare=False)

    def __post_init__(self) -> None:
        """Freeze the glyph mapping and enforce the font invariants."""
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(
                f"Font width and height must be greater than 0 (got {self.width}x{self.height})"
            )
        if self.spacing < 0:
            raise InvalidDimensions(f"Font spacing must not be negative (got {self.spacing})")
        if not self.glyphs:
            raise EmptyFont("Font defines no glyphs")

        frozen: dict[str, Glyph] = {}
        for char, rows in self.glyphs.items():
            if not isinstance(char, str) or len(char) != 1:
                raise InvalidGlyphKey(str(char))
            if isinstance(rows, str):
                raise ParseError(f"Glyph for {char!r} must be a sequence of row strings, not a string")
            rows = tuple(rows)
            if not all(isinstance(row, str) for row in rows):
                raise ParseError(f"Glyph for {char!r} has non-string rows")
            if len(rows) != self.height:
                raise GlyphHeightMismatch(char, self.height, len(rows))
            frozen[char] = rows

        # Frozen dataclass: bypass __setattr__ for the normalized mapping
        object.__setattr__(self, "glyphs", MappingProxyType(frozen))

    def __contains__(self, char: object) -> bool:
        return char in self.glyphs

    @property
    def characters(self) -> tuple[str, ...]:
        """Sorted characters this font can render."""
        return tuple(sorted(self.glyphs))

    def glyph_for(self, char: str) -> Glyph | None:
        """
        Look up the glyph for a character.

        Args:
            char: Single character to look up.

        Returns:
            Glyph rows, or None if the font has no glyph for `char`.
        """
        return self.glyphs.get(char)

    def blank_glyph(self) -> Glyph:
        """A glyph of `height` rows of `width` spaces."""
        return (" " * self.width,) * self.height

    def glyph_or_blank(self, char: str) -> Glyph:
        """Glyph for `char`, or a blank cell if the font lacks it."""
        glyph = self.glyph_for(char)
        if glyph is None:
            return self.blank_glyph()
        return glyph

    def with_spacing(self, spacing: int) -> "Font":
        """Copy of this font with a different default spacing."""
        return replace(self, spacing=spacing)

    def to_document(self) -> dict[str, Any]:
        """
        Convert to the JSON-shaped document accepted by the loader.

        Returns:
            Dict with width, height, spacing and glyphs (rows as lists).
        """
        return {
            "width": self.width,
            "height": self.height,
            "spacing": self.spacing,
            "glyphs": {char: list(rows) for char, rows in self.glyphs.items()},
        }
