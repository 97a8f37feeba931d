"""CLI application entry point for audiomark.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from audiomark import __version__
from audiomark.cli.output import (
    console,
    print_catalog,
    print_error,
    print_extent,
    print_font_info,
    print_header,
    print_step,
    print_success,
)
from audiomark.config import (
    AudiomarkSettings,
    LoggingConfig,
    SymbolConfig,
    TextConfig,
)
from audiomark.core import SYMBOL_CATALOG, measure as measure_caption, render_specimen
from audiomark.exceptions import AudiomarkError, FontLoadError
from audiomark.io import PdfCanvas, load_glyph_metrics, standard_font_metrics
from audiomark.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="audiomark",
    help="Render audiogram symbols and form outlines as PDF vector graphics.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Audiomark[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render audiogram symbols and form outlines as PDF vector graphics."""


def _check_font_file(font: Path | None) -> None:
    if font is None:
        return
    if not font.exists():
        print_error(
            f"Font file not found: {font}",
            details=f"The file '{font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)
    if not font.is_file():
        print_error(
            f"Font path is not a file: {font}",
            details="Please provide a path to a TTF font file.",
        )
        raise typer.Exit(code=1)


@app.command()
def specimen(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output PDF path",
        ),
    ] = Path("specimen.pdf"),
    font: Annotated[
        Path | None,
        typer.Option(
            "--font",
            "-f",
            help="TrueType font for the caption (default: Helvetica)",
        ),
    ] = None,
    caption: Annotated[
        str,
        typer.Option(
            "--caption",
            "-c",
            help="Caption centred in the rounded box",
        ),
    ] = "Jane Doe",
    symbol_size: Annotated[
        float,
        typer.Option(
            "--symbol-size",
            "-s",
            help="Symbol size in points",
            min=1.0,
            max=72.0,
        ),
    ] = 10.0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Render a specimen sheet with every shape and symbol.

    Draws a capsule input box, a rounded box with a centred caption, and
    all 30 audiogram symbols in alternating red and blue.

    Example:
        audiomark specimen --font Roboto-Medium.ttf -o specimen.pdf
    """
    _check_font_file(font)

    if not quiet:
        print_header(__version__)

    settings = AudiomarkSettings(
        symbol=SymbolConfig(size_pt=symbol_size),
        text=TextConfig(font_path=font),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        render_logger = RenderLogger(logger)

        canvas = PdfCanvas(
            output,
            settings.page.width_mm,
            settings.page.height_mm,
            title="Audiomark specimen",
        )

        if not quiet:
            print_step("Loading font")

        if settings.text.font_path is not None:
            caption_font = canvas.register_font(settings.text.font_path)
        else:
            caption_font = settings.text.caption_font

        if not quiet:
            metrics = canvas.font_metrics(caption_font)
            print_font_info(caption_font, metrics.units_per_em, len(metrics.advances))
            print_step("Rendering")

        render_logger.start()
        render_specimen(canvas, settings, caption, caption_font, render_logger)
        canvas.save()
        render_logger.finish()

        if not quiet:
            print_success(str(output), render_logger.stats)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except AudiomarkError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def symbols() -> None:
    """List every catalogued symbol and how it is rendered."""
    rows = [
        (symbol.value, symbol.base.value, symbol.filled, strategy.kind)
        for symbol, strategy in SYMBOL_CATALOG.items()
    ]
    print_catalog(rows)


@app.command()
def measure(
    caption: Annotated[
        str,
        typer.Argument(
            help="Caption to measure",
            show_default=False,
        ),
    ],
    font: Annotated[
        Path | None,
        typer.Option(
            "--font",
            "-f",
            help="TrueType font (default: standard font)",
        ),
    ] = None,
    standard_font: Annotated[
        str,
        typer.Option(
            "--standard-font",
            help="Standard PDF font used when no font file is given",
        ),
    ] = "Helvetica",
    size: Annotated[
        float,
        typer.Option(
            "--size",
            "-s",
            help="Font size in points",
            min=0.1,
        ),
    ] = 10.0,
) -> None:
    """Measure a caption's width, height and descent in millimetres."""
    _check_font_file(font)

    try:
        if font is not None:
            metrics = load_glyph_metrics(font)
        else:
            metrics = standard_font_metrics(standard_font)
        extent = measure_caption(caption, metrics, size)
    except AudiomarkError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_extent(caption, extent)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
