"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from audiomark.domain import TextExtent
from audiomark.utils import RenderStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Audiomark[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font: str, units_per_em: int, glyph_count: int) -> None:
    """Print caption font information.

    Args:
        font: Font handle or path
        units_per_em: Units per em value
        glyph_count: Number of code points with an advance
    """
    line = Text("  ")
    line.append(font)
    console.print(line)
    console.print(f"  {glyph_count:,} code points {SYM_DOT} {units_per_em:,} UPM")


def print_extent(caption: str, extent: TextExtent) -> None:
    """Print a measured caption extent."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Caption", caption)
    table.add_row("Width", f"{extent.width_mm:.2f} mm")
    table.add_row("Height", f"{extent.height_mm:.2f} mm")
    table.add_row("Descent", f"{extent.descent_mm:.2f} mm")
    console.print(table)
    if extent.missing:
        console.print(
            f"  [yellow]Missing glyphs:[/yellow] {''.join(extent.missing)} "
            f"{SYM_DOT} width is approximate"
        )


def print_catalog(rows: list[tuple[str, str, bool, str]]) -> None:
    """Print the symbol catalog.

    Args:
        rows: (symbol, base, filled, strategy) tuples
    """
    table = Table(title="Symbol catalog")
    table.add_column("Symbol", style="bold")
    table.add_column("Base")
    table.add_column("Filled")
    table.add_column("Strategy")
    for symbol, base, filled, strategy in rows:
        table.add_row(symbol, base, SYM_OK if filled else "", strategy)
    console.print(table)


def print_success(output_path: str, stats: RenderStats) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        stats: Render statistics
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    colors = f" {SYM_DOT} ".join(f"{count} {name}" for name, count in sorted(stats.colors.items()))
    console.print(
        f"  {stats.symbols_drawn} symbols {SYM_DOT} {stats.shapes_drawn} shapes "
        f"{SYM_DOT} {stats.captions_drawn} captions"
    )
    if colors:
        console.print(f"  {colors}")
    if stats.missing_glyphs:
        console.print(f"  [yellow]{stats.missing_glyphs} missing glyphs[/yellow]")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
