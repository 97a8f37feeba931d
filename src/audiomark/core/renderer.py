"""Symbol and shape rendering onto a canvas.

Every draw operation takes its style explicitly and runs inside
``canvas_style``, which sets the canvas style registers on entry and resets
them on exit (also when drawing raises). Nothing drawn here leaves colour or
stroke width behind for unrelated drawing, so symbols may be drawn in any
order.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from audiomark.config import SymbolConfig
from audiomark.core.catalog import GlyphTextStrategy, OpenStrokeStrategy, resolve_strategy
from audiomark.core.units import pt_to_mm
from audiomark.domain import BLACK, RGB, Path, Point, Symbol, SymbolColor
from audiomark.exceptions import NonPositiveSizeError
from audiomark.utils import RenderLogger

if TYPE_CHECKING:
    from audiomark.io.canvas import Canvas


@dataclass(frozen=True)
class Style:
    """Paint style applied for the duration of one draw operation."""

    fill: RGB
    stroke: RGB
    stroke_width_pt: float

    @classmethod
    def solid(cls, rgb: RGB, stroke_width_pt: float) -> "Style":
        """Same colour for fill, stroke and text."""
        return cls(fill=rgb, stroke=rgb, stroke_width_pt=stroke_width_pt)


@contextmanager
def canvas_style(
    canvas: "Canvas",
    style: Style,
    neutral_stroke_width_pt: float = 0.0,
) -> Iterator[None]:
    """Apply ``style`` to the canvas registers, then reset them.

    On exit the fill and stroke colours return to black and the stroke width
    to ``neutral_stroke_width_pt``.
    """
    canvas.set_fill_color(style.fill)
    canvas.set_stroke_color(style.stroke)
    canvas.set_stroke_width(style.stroke_width_pt)
    try:
        yield
    finally:
        canvas.set_fill_color(BLACK)
        canvas.set_stroke_color(BLACK)
        canvas.set_stroke_width(neutral_stroke_width_pt)


def draw_paths(
    canvas: "Canvas",
    paths: Iterable[Path],
    style: Style,
    neutral_stroke_width_pt: float = 0.0,
) -> int:
    """Paint built paths, each with its own paint mode.

    Returns:
        Number of paths emitted
    """
    count = 0
    with canvas_style(canvas, style, neutral_stroke_width_pt):
        for path in paths:
            canvas.add_path(path, path.paint_mode)
            count += 1
    return count


def alternate_colors(index: int) -> SymbolColor:
    """Red for even positions, blue for odd ones."""
    return SymbolColor.RED if index % 2 == 0 else SymbolColor.BLUE


class SymbolRenderer:
    """Draws catalogued audiogram symbols.

    The renderer holds configuration and an optional statistics logger but
    no drawing state; each ``render`` call is independent.

    Example:
        renderer = SymbolRenderer()
        renderer.render(Symbol.CIRCLE, canvas, "Helvetica", Point(65, 90), 10.0, SymbolColor.RED)
    """

    def __init__(
        self,
        config: SymbolConfig | None = None,
        logger: RenderLogger | None = None,
    ) -> None:
        self.config = config if config is not None else SymbolConfig()
        self._logger = logger

    def render(
        self,
        symbol: Symbol,
        canvas: "Canvas",
        font: str,
        origin: Point,
        size_pt: float,
        color: SymbolColor,
    ) -> None:
        """Draw one symbol.

        Synthesized symbols fill the size_pt x size_pt box whose lower-left
        corner is ``origin``. Text symbols are drawn with their baseline
        starting at ``origin``.

        Args:
            symbol: Symbol to draw
            canvas: Target canvas
            font: Font handle used by text symbols
            origin: Anchor position in millimetres
            size_pt: Symbol size (box side or font size) in points
            color: Palette colour for fill, stroke and text

        Raises:
            UnmappedSymbolError: If the symbol has no catalog entry
            NonPositiveSizeError: If size_pt is not positive
        """
        if size_pt <= 0:
            raise NonPositiveSizeError("size_pt", size_pt)

        strategy = resolve_strategy(symbol)
        neutral = self.config.neutral_stroke_width_pt

        if isinstance(strategy, GlyphTextStrategy):
            style = Style.solid(color.rgb, self.config.stroke_width_pt)
            with canvas_style(canvas, style, neutral):
                canvas.add_text(strategy.text, font, size_pt, origin)
            path_count = 0
        else:
            bold = isinstance(strategy, OpenStrokeStrategy) and symbol.filled
            width = self.config.bold_stroke_width_pt if bold else self.config.stroke_width_pt
            paths = strategy.shape(origin, pt_to_mm(size_pt), symbol.filled)
            path_count = draw_paths(canvas, paths, Style.solid(color.rgb, width), neutral)

        if self._logger is not None:
            self._logger.log_symbol(symbol.value, strategy.kind, color.value, path_count)

    def render_row(
        self,
        symbols: Sequence[Symbol],
        canvas: "Canvas",
        font: str,
        origin: Point,
        step_mm: float | None = None,
        size_pt: float | None = None,
        color_for: Callable[[int], SymbolColor] = alternate_colors,
    ) -> list[Point]:
        """Draw symbols left to right, ``step_mm`` apart.

        Returns:
            The origin used for each symbol, in order
        """
        step = step_mm if step_mm is not None else self.config.step_mm
        size = size_pt if size_pt is not None else self.config.size_pt

        positions = []
        for i, symbol in enumerate(symbols):
            position = origin.offset(i * step, 0.0)
            self.render(symbol, canvas, font, position, size, color_for(i))
            positions.append(position)
        return positions


def render_symbol(
    symbol: Symbol,
    canvas: "Canvas",
    font: str,
    origin: Point,
    size_pt: float,
    color: SymbolColor,
) -> None:
    """Draw one symbol with the default symbol configuration."""
    SymbolRenderer().render(symbol, canvas, font, origin, size_pt, color)
