"""Font document loading, validation and writing."""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from artfont.errors import (
    EmptyFont,
    GlyphHeightMismatch,
    InvalidDimensions,
    InvalidGlyphKey,
    ParseError,
)
from artfont.models import Font

logger = logging.getLogger(__name__)

# Escaped glyph keys accepted in font documents
_KEY_ESCAPES = {
    "\\n": "\n",
    "\\t": "\t",
    "\\r": "\r",
    "\\0": "\0",
    "\\'": "'",
    '\\"': '"',
    "\\\\": "\\",
}
_UNICODE_KEY = re.compile(r"\\u\{([0-9a-fA-F]{1,6})\}")


class FontDocument(BaseModel):
    """
    Structural schema of a JSON font document.

    Only types are checked here; dimension and glyph rules are applied by
    load_from_document() so each failure maps to its own error.
    """

    model_config = ConfigDict(strict=True)

    width: int | None = None
    height: int | None = None
    spacing: int = 0
    glyphs: dict[str, list[str] | tuple[str, ...]] = Field(default_factory=dict)


def _decode_key(key: str) -> str:
    """
    Decode a glyph key to the single character it names.

    Plain one-character keys are returned as-is. Escapes like "\\n" and
    "\\u{2588}" are decoded.

    Raises:
        InvalidGlyphKey: If the key does not name exactly one character.
    """
    if len(key) == 1:
        return key
    if key in _KEY_ESCAPES:
        return _KEY_ESCAPES[key]

    match = _UNICODE_KEY.fullmatch(key)
    if match:
        try:
            return chr(int(match.group(1), 16))
        except ValueError:
            raise InvalidGlyphKey(key) from None

    raise InvalidGlyphKey(key)


def _encode_key(char: str) -> str:
    """Encode a character as a glyph key that survives a JSON round trip."""
    if not char.isprintable() or char in '\\"':
        return f"\\u{{{ord(char):04x}}}"
    return char


def load_from_document(doc: Mapping[str, Any], name: str = "custom") -> Font:
    """
    Build a validated Font from an already-parsed font document.

    Args:
        doc: Mapping with width, height, optional spacing (default 0) and
             glyphs (character -> list of row strings).
        name: Label stored on the resulting Font.

    Returns:
        Validated Font.

    Raises:
        ParseError: If the document has the wrong shape or field types.
        InvalidDimensions: If width/height are missing or non-positive, or spacing is negative.
        EmptyFont: If no glyphs are defined.
        InvalidGlyphKey: If a glyph key is not exactly one character, or two keys
            name the same character.
        GlyphHeightMismatch: If a glyph's row count differs from height.
    """
    try:
        parsed = FontDocument.model_validate(dict(doc) if isinstance(doc, Mapping) else doc)
    except ValidationError as e:
        raise ParseError(f"Invalid font document: {e}") from e

    if parsed.width is None or parsed.height is None:
        raise InvalidDimensions("Font width and height are required")
    if parsed.width <= 0 or parsed.height <= 0:
        raise InvalidDimensions(
            f"Font width and height must be greater than 0 (got {parsed.width}x{parsed.height})"
        )
    if parsed.spacing < 0:
        raise InvalidDimensions(f"Font spacing must not be negative (got {parsed.spacing})")

    if not parsed.glyphs:
        raise EmptyFont("Font document defines no glyphs")

    glyphs: dict[str, tuple[str, ...]] = {}
    for key, rows in parsed.glyphs.items():
        char = _decode_key(key)
        if char in glyphs:
            raise InvalidGlyphKey(key, f"Glyph key {key!r} redefines character {char!r}")
        if len(rows) != parsed.height:
            raise GlyphHeightMismatch(char, parsed.height, len(rows))

        widest = max(len(row) for row in rows)
        if widest > parsed.width:
            logger.debug(
                f"Glyph {char!r} in font '{name}' has a {widest}-column row (cell width {parsed.width})"
            )

        glyphs[char] = tuple(rows)

    return Font(
        width=parsed.width,
        height=parsed.height,
        spacing=parsed.spacing,
        glyphs=glyphs,
        name=name,
    )


def load_font(source: Mapping[str, Any] | str | os.PathLike) -> Font:
    """
    Load a font from a JSON file or a pre-parsed document.

    Args:
        source: Path to a UTF-8 JSON font file, or an already-parsed document.

    Returns:
        Validated Font. Fonts loaded from files are named after the file stem.

    Raises:
        FileNotFoundError: If the font file doesn't exist.
        ParseError: If the file is not valid JSON or has the wrong shape.
        FontError: Any other validation failure from load_from_document().
    """
    if isinstance(source, Mapping):
        return load_from_document(source)

    path = Path(source)
    logger.info(f"Loading font from {path}")
    content = path.read_bytes()

    try:
        doc = json.loads(content.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise ParseError(f"{path.name}: not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ParseError(f"{path.name}: JSON parse error: {e}") from e

    return load_from_document(doc, name=path.stem)


def save_font(font: Font, path: str | os.PathLike) -> Path:
    """
    Write a font as a JSON document that load_font() accepts.

    Args:
        font: Font to save.
        path: Destination file path.

    Returns:
        Path the font was written to.
    """
    path = Path(path)
    doc = font.to_document()
    doc["glyphs"] = {_encode_key(char): rows for char, rows in doc["glyphs"].items()}

    path.write_text(json.dumps(doc, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.info(f"Saved font '{font.name}' ({len(font.glyphs)} glyphs) to {path}")
    return path
