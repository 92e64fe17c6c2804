"""Bundled font registry and font resolution."""

import logging
import os
from functools import lru_cache
from pathlib import Path

from artfont.errors import FontError
from artfont.fonts.loader import load_font, load_from_document, save_font
from artfont.models import Font

logger = logging.getLogger(__name__)

FONTS_DIR = Path(__file__).parent / "data"

DEFAULT_FONT = "default"


def _normalize_font_name(name: str) -> str:
    """
    Normalize a font name to the snake_case stem of its data file.

    Examples:
        "ANSI Compact" → "ansi_compact"
        "ansi-compact" → "ansi_compact"
        "Mini" → "mini"

    Args:
        name: Font name to normalize (any case, spaces or hyphens).

    Returns:
        Normalized font name.
    """
    return "_".join(name.strip().lower().replace("-", " ").split())


def available_fonts() -> list[str]:
    """
    List bundled font names.

    Bundled fonts are the JSON documents in the package data directory,
    named after their file stem.

    Returns:
        Sorted list of font names.
    """
    return sorted(path.stem for path in FONTS_DIR.glob("*.json"))


def is_bundled_font(name: str) -> bool:
    """Whether `name` (any case) names a bundled font."""
    return _normalize_font_name(name) in available_fonts()


@lru_cache(maxsize=None)
def _load_bundled(name: str) -> Font:
    path = FONTS_DIR / f"{name}.json"
    font = load_font(path)
    logger.info(f"Registered bundled font: {name} ({font.width}x{font.height}, {len(font.glyphs)} glyphs)")
    return font


def get_font(name: str) -> Font:
    """
    Get a bundled font by name.

    Fonts are loaded on first use and shared for the rest of the process.

    Args:
        name: Font name, case-insensitive ("default", "ansi_compact", "mini").

    Returns:
        The bundled Font.

    Raises:
        KeyError: If no bundled font has this name.
    """
    normalized = _normalize_font_name(name)
    if not is_bundled_font(normalized):
        raise KeyError(f"Unknown font '{name}'. Available: {', '.join(available_fonts())}")
    return _load_bundled(normalized)


def default_font() -> Font:
    """The process-wide default font (7x7, spacing 1)."""
    return get_font(DEFAULT_FONT)


def ansi_compact_font() -> Font:
    """The ANSI Compact font (6x4, no spacing)."""
    return get_font("ansi_compact")


def mini_font() -> Font:
    """The Mini font (2x2, no spacing)."""
    return get_font("mini")


def resolve_font(font_spec: str | os.PathLike | Font | None, fallback: str = DEFAULT_FONT) -> Font:
    """
    Resolve a font specification to a Font.

    Resolution priority:
    1. A Font instance is returned unchanged
    2. A bundled font name
    3. A path to a JSON font file
    4. The fallback bundled font

    Args:
        font_spec: Font, bundled font name, or path to a font file. None means fallback.
        fallback: Bundled font name used when the spec can't be resolved.

    Returns:
        Resolved Font.

    Examples:
        >>> resolve_font("Mini").name
        'mini'

        >>> resolve_font("does-not-exist").name
        'default'
    """
    if isinstance(font_spec, Font):
        return font_spec
    if font_spec is None:
        return get_font(fallback)

    # 1. Bundled font names
    if isinstance(font_spec, str) and is_bundled_font(font_spec):
        return get_font(font_spec)

    # 2. Font files
    path = Path(font_spec)
    if path.is_file():
        try:
            return load_font(path)
        except FontError as e:
            logger.warning(f"Could not load font file {path}: {e}")
    else:
        logger.warning(f"Font '{font_spec}' is neither a bundled font nor a font file")

    # 3. Fall back
    logger.info(f"Using fallback font '{fallback}' for '{font_spec}'")
    return get_font(fallback)


__all__ = [
    "DEFAULT_FONT",
    "FONTS_DIR",
    "ansi_compact_font",
    "available_fonts",
    "default_font",
    "get_font",
    "is_bundled_font",
    "load_font",
    "load_from_document",
    "mini_font",
    "resolve_font",
    "save_font",
]
