"""CLI interface for the block-art text renderer."""

import logging
from pathlib import Path

import click

from artfont.api import AsciiArtBuilder
from artfont.config import load_config
from artfont.errors import ArtFontError
from artfont.fonts import available_fonts, get_font, load_font, save_font
from artfont.types import ALIGNMENTS


@click.group()
@click.version_option(package_name="artfont")
@click.option("-v", "--verbose", is_flag=True, help="Log font loading and layout details to stderr.")
def main(verbose: bool) -> None:
    """Render text as multi-line block-art using bundled or custom fonts."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command("render")
@click.argument("text", nargs=-1, required=True)
@click.option(
    "-f",
    "--font",
    "font_spec",
    type=str,
    help="Bundled font name (see `artfont fonts`) or path to a JSON font file.",
)
@click.option(
    "--spacing",
    type=click.IntRange(min=0),
    help="Blank columns between characters. Uses the font's spacing if not specified.",
)
@click.option(
    "--line-spacing",
    type=click.IntRange(min=0),
    help="Blank rows between rendered lines (default: 0).",
)
@click.option(
    "--align",
    type=click.Choice(list(ALIGNMENTS), case_sensitive=False),
    help="Horizontal alignment of lines: 'left' (default), 'center' or 'right'.",
)
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to artfont.toml. Defaults to ./artfont.toml when present.",
)
def render_command(
    text: tuple[str, ...],
    font_spec: str | None,
    spacing: int | None,
    line_spacing: int | None,
    align: str | None,
    config: Path | None,
) -> None:
    """
    Render TEXT as block-art.

    Words are joined with spaces. A literal \\n starts a new line.
    Use - to read the text from stdin.
    """
    try:
        settings = load_config(config)

        # CLI options override config values
        updates = {}
        if font_spec:
            updates["font"] = font_spec
        if spacing is not None:
            updates["spacing"] = spacing
        if line_spacing is not None:
            updates["line_spacing"] = line_spacing
        if align:
            updates["align"] = align.lower()
        settings = settings.model_copy(update=updates)

        if text == ("-",):
            content = click.get_text_stream("stdin").read()
        else:
            content = " ".join(text).replace("\\n", "\n")

        builder = (
            AsciiArtBuilder.new()
            .text(content)
            .font(settings.font)
            .align(settings.align)
            .line_spacing(settings.line_spacing)
        )
        if settings.spacing is not None:
            builder = builder.spacing(settings.spacing)

        click.echo(builder.build())

    except (ArtFontError, OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command("fonts")
def fonts_command() -> None:
    """List bundled fonts."""
    for name in available_fonts():
        font = get_font(name)
        click.echo(
            f"{name:<14} {font.width}x{font.height}  spacing {font.spacing}  {len(font.glyphs)} glyphs"
        )


@main.command("export")
@click.argument("name")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
def export_command(name: str, output: Path) -> None:
    """Write bundled font NAME to OUTPUT as a JSON font document."""
    try:
        save_font(get_font(name), output)
    except KeyError as e:
        click.echo(f"Error: {e.args[0]}", err=True)
        raise SystemExit(1)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"✓ Font '{name}' saved to: {output}")


@main.command("check")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check_command(path: Path) -> None:
    """Validate the JSON font file at PATH."""
    try:
        font = load_font(path)
    except ArtFontError as e:
        click.echo(f"Error: {type(e).__name__}: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"✓ {path.name}: {font.width}x{font.height}, spacing {font.spacing}, {len(font.glyphs)} glyphs")


if __name__ == "__main__":
    main()
