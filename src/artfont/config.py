"""Configuration loading and validation."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from artfont.types import Alignment

DEFAULT_CONFIG_NAME = "artfont.toml"


class Settings(BaseModel):
    """
    Rendering defaults for the command line.

    All parameters have sensible defaults. Override only what you need using
    Pydantic's model_copy():

        base = Settings(font="mini")
        variant = base.model_copy(update={"align": "center"})
    """

    font: str = "default"
    """Bundled font name or path to a JSON font file."""

    spacing: int | None = Field(default=None, ge=0)
    """Blank columns between characters. None uses the font's own spacing."""

    line_spacing: int = Field(default=0, ge=0)
    """Blank rows between rendered lines."""

    align: Alignment = "left"
    """Horizontal alignment of rendered lines: "left", "center" or "right"."""


def load_config(config_path: Path | None = None) -> Settings:
    """
    Load settings from a TOML file.

    Values may sit at the top level or under an [artfont] table.

    Args:
        config_path: Path to config file. If None, uses artfont.toml in the
                     current directory when present, otherwise defaults.

    Returns:
        Validated Settings object.

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist.
        ValueError: If config is invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            return Settings()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        config_dict = tomllib.load(f)

    return Settings(**config_dict.get("artfont", config_dict))
