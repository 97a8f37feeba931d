"""Specimen sheet: every primitive and symbol on one page.

Lays out a capsule input box, a rounded caption box with a centred caption
below it, and a row with every catalogued symbol in alternating colours.
"""

from typing import TYPE_CHECKING

from audiomark.config import AudiomarkSettings
from audiomark.core.paths import capsule, rounded_rect
from audiomark.core.renderer import Style, SymbolRenderer, draw_paths
from audiomark.core.text import draw_centered_text
from audiomark.domain import BLACK, Point, Symbol, TextExtent
from audiomark.utils import RenderLogger

if TYPE_CHECKING:
    from audiomark.io.canvas import Canvas

# Lower-left corner of the capsule input box, in millimetres
INPUT_BOX_ORIGIN = Point(65.0, 140.0)
INPUT_BOX_WIDTH = 80.0
INPUT_BOX_HEIGHT = 15.0

CAPTION_BOX_DROP = 25.0
CAPTION_BOX_HEIGHT = 20.0

SYMBOL_ROW_DROP = 50.0

# Declaration order: each unfilled symbol followed by its filled variant
SPECIMEN_SYMBOLS: tuple[Symbol, ...] = tuple(Symbol)


def render_specimen(
    canvas: "Canvas",
    settings: AudiomarkSettings,
    caption: str,
    caption_font: str,
    render_logger: RenderLogger | None = None,
) -> TextExtent:
    """Draw the specimen sheet.

    Args:
        canvas: Target canvas
        settings: Symbol, shape and text settings
        caption: Text centred in the caption box
        caption_font: Font handle for the caption
        render_logger: Optional statistics logger

    Returns:
        Extent of the centred caption
    """
    outline = Style.solid(BLACK, settings.shape.stroke_width_pt)
    neutral = settings.symbol.neutral_stroke_width_pt

    draw_paths(
        canvas,
        [capsule(INPUT_BOX_ORIGIN, INPUT_BOX_WIDTH, INPUT_BOX_HEIGHT)],
        outline,
        neutral,
    )
    if render_logger is not None:
        render_logger.log_shape(1)

    caption_box = INPUT_BOX_ORIGIN.offset(0.0, -CAPTION_BOX_DROP)
    draw_paths(
        canvas,
        [
            rounded_rect(
                caption_box,
                INPUT_BOX_WIDTH,
                CAPTION_BOX_HEIGHT,
                settings.shape.corner_radius_mm,
            )
        ],
        outline,
        neutral,
    )
    if render_logger is not None:
        render_logger.log_shape(1)

    extent = draw_centered_text(
        canvas,
        caption,
        caption_font,
        settings.text.caption_size_pt,
        caption_box,
        INPUT_BOX_WIDTH,
        CAPTION_BOX_HEIGHT,
        render_logger=render_logger,
        neutral_stroke_width_pt=neutral,
    )

    renderer = SymbolRenderer(settings.symbol, render_logger)
    renderer.render_row(
        SPECIMEN_SYMBOLS,
        canvas,
        settings.text.symbol_font,
        INPUT_BOX_ORIGIN.offset(0.0, -SYMBOL_ROW_DROP),
    )
    return extent
