"""High-level API for rendering block-art text."""

import logging
import os
from dataclasses import dataclass, replace

from artfont.errors import MissingText
from artfont.fonts import ansi_compact_font, default_font, get_font, is_bundled_font, load_font, mini_font
from artfont.models import Font
from artfont.render import assemble
from artfont.types import ALIGNMENTS, CELL_POLICIES, Alignment, CellPolicy

logger = logging.getLogger(__name__)


def render(text: str) -> str:
    """
    Render text with the default font, left aligned.

    Example:
        ```python
        from artfont import render

        print(render("Hello"))
        ```
    """
    return assemble(default_font(), text)


def render_with_font(text: str, font: Font) -> str:
    """
    Render text with an explicit font, left aligned.

    Example:
        ```python
        from artfont import load_font, render_with_font

        font = load_font("fonts/block.json")
        print(render_with_font("Hello", font))
        ```
    """
    return assemble(font, text)


def render_ansi_compact(text: str) -> str:
    """Render text with the ANSI Compact font (6x4)."""
    return render_with_font(text, ansi_compact_font())


def render_mini(text: str) -> str:
    """Render text with the Mini font (2x2)."""
    return render_with_font(text, mini_font())


def _load_font_spec(font_spec: Font | str | os.PathLike) -> Font:
    """Turn a Font, bundled font name or font file path into a Font."""
    if isinstance(font_spec, Font):
        return font_spec
    if isinstance(font_spec, str) and is_bundled_font(font_spec):
        return get_font(font_spec)
    return load_font(font_spec)


def _check_non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative (got {value})")
    return value


@dataclass(frozen=True)
class AsciiArtBuilder:
    """
    Immutable, chainable render configuration.

    Every setter returns an updated copy; the last call for a field wins.
    build() validates the configuration and renders it.

    Example:
        ```python
        from artfont import AsciiArtBuilder

        art = (
            AsciiArtBuilder.new()
            .text("Hello\\nWorld")
            .font("ansi_compact")
            .align_center()
            .line_spacing(1)
            .build()
        )
        ```
    """

    text_value: str | None = None
    font_spec: Font | str | os.PathLike | None = None
    spacing_value: int | None = None
    line_spacing_value: int = 0
    alignment: Alignment = "left"
    cell_policy_value: CellPolicy = "font"

    @classmethod
    def new(cls) -> "AsciiArtBuilder":
        """Start an empty configuration."""
        return cls()

    def text(self, text: str) -> "AsciiArtBuilder":
        """Set the text to render. Line breaks separate rendered lines."""
        return replace(self, text_value=text)

    def font(self, font: Font | str | os.PathLike) -> "AsciiArtBuilder":
        """
        Set the font: a Font, a bundled font name, or a path to a font file.

        Names and paths are resolved by build().
        """
        return replace(self, font_spec=font)

    def spacing(self, spacing: int) -> "AsciiArtBuilder":
        """Override the font's spacing between characters."""
        return replace(self, spacing_value=_check_non_negative("Spacing", spacing))

    def line_spacing(self, line_spacing: int) -> "AsciiArtBuilder":
        """Set the number of blank rows between rendered lines."""
        return replace(self, line_spacing_value=_check_non_negative("Line spacing", line_spacing))

    def align(self, alignment: Alignment) -> "AsciiArtBuilder":
        """Set alignment by name ("left", "center" or "right")."""
        alignment = alignment.lower()  # type: ignore[assignment]
        if alignment not in ALIGNMENTS:
            raise ValueError(f"Unknown alignment '{alignment}'. Expected one of: {', '.join(ALIGNMENTS)}")
        return replace(self, alignment=alignment)

    def cell_policy(self, policy: CellPolicy) -> "AsciiArtBuilder":
        """Set the glyph row padding rule: "font" (default) or "glyph"."""
        if policy not in CELL_POLICIES:
            raise ValueError(f"Unknown cell policy '{policy}'. Expected one of: {', '.join(CELL_POLICIES)}")
        return replace(self, cell_policy_value=policy)

    def align_left(self) -> "AsciiArtBuilder":
        return replace(self, alignment="left")

    def align_center(self) -> "AsciiArtBuilder":
        return replace(self, alignment="center")

    def align_right(self) -> "AsciiArtBuilder":
        return replace(self, alignment="right")

    def build(self) -> str:
        """
        Render the configured text.

        Returns:
            The block-art string.

        Raises:
            MissingText: If text() was never called.
            FontError: If a font file was given and is invalid.
            FileNotFoundError: If a font path was given and doesn't exist.
        """
        if self.text_value is None:
            raise MissingText("No text to render. Call text() before build().")

        font = default_font() if self.font_spec is None else _load_font_spec(self.font_spec)
        logger.debug(
            f"Building art with font '{font.name}', alignment={self.alignment}, "
            f"spacing={self.spacing_value}, line_spacing={self.line_spacing_value}"
        )

        return assemble(
            font,
            self.text_value,
            alignment=self.alignment,
            line_spacing=self.line_spacing_value,
            spacing=self.spacing_value,
            cell_policy=self.cell_policy_value,
        )
