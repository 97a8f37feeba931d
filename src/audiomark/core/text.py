"""Caption measurement and centring from font glyph metrics.

Widths are the sum of the font's own horizontal advances, scaled from
design units to the requested point size and converted to millimetres.

Measurement is best effort: characters the font has no glyph for add no
width. They are reported in ``TextExtent.missing`` instead of raising, so
a caption with unsupported characters is still drawn, only less precisely
centred. Callers that need an exact width for arbitrary input must check
``TextExtent.is_exact``.
"""

from typing import TYPE_CHECKING

import structlog

from audiomark.core.renderer import Style, canvas_style
from audiomark.core.units import pt_to_mm
from audiomark.domain import BLACK, RGB, GlyphMetrics, Point, TextExtent
from audiomark.exceptions import NonPositiveSizeError
from audiomark.utils import RenderLogger

if TYPE_CHECKING:
    from audiomark.io.canvas import Canvas

logger = structlog.get_logger("audiomark.text")


def measure(caption: str, metrics: GlyphMetrics, size_pt: float) -> TextExtent:
    """Measure the rendered extent of a caption.

    Args:
        caption: Text to measure
        metrics: Metrics of the font the caption will be drawn with
        size_pt: Font size in points

    Returns:
        Width, line height and descent in millimetres. Height and descent
        depend only on the font, so they are non-zero even for "".

    Raises:
        NonPositiveSizeError: If size_pt is not positive

    Examples:
        >>> m = GlyphMetrics(units_per_em=1000, ascender=800, descender=-200, advances={65: 500})
        >>> round(measure("AA", m, 72.0).width_mm, 6)
        25.4
    """
    if size_pt <= 0:
        raise NonPositiveSizeError("size_pt", size_pt)

    width_units = 0
    missing: dict[str, None] = {}
    for char in caption:
        advance = metrics.advance(char)
        if advance is None:
            missing[char] = None
            continue
        width_units += advance

    if missing:
        logger.debug("Glyphs missing from font", caption=caption, missing="".join(missing))

    scale = size_pt / metrics.units_per_em
    return TextExtent(
        width_mm=pt_to_mm(width_units * scale),
        height_mm=pt_to_mm((metrics.ascender - metrics.descender) * scale),
        descent_mm=pt_to_mm(-metrics.descender * scale),
        missing=tuple(missing),
    )


def center_in_box(
    extent: TextExtent,
    box_origin: Point,
    box_width: float,
    box_height: float,
) -> Point:
    """Return the text origin that centres ``extent`` in a box.

    The ascender-to-descender line box is centred vertically, so the
    returned y is the baseline: half the free space plus the descent.
    """
    return Point(
        box_origin.x + (box_width - extent.width_mm) * 0.5,
        box_origin.y + (box_height - extent.height_mm) * 0.5 + extent.descent_mm,
    )


def draw_centered_text(
    canvas: "Canvas",
    caption: str,
    font: str,
    size_pt: float,
    box_origin: Point,
    box_width: float,
    box_height: float,
    color: RGB = BLACK,
    render_logger: RenderLogger | None = None,
    neutral_stroke_width_pt: float = 0.0,
) -> TextExtent:
    """Draw a caption centred in a box.

    The style registers are reset to black and ``neutral_stroke_width_pt``
    afterwards, like every other draw operation.

    Returns:
        The measured extent, including any missing characters
    """
    extent = measure(caption, canvas.font_metrics(font), size_pt)
    position = center_in_box(extent, box_origin, box_width, box_height)

    with canvas_style(canvas, Style.solid(color, 0.0), neutral_stroke_width_pt):
        canvas.add_text(caption, font, size_pt, position)

    if render_logger is not None:
        render_logger.log_caption(caption, extent.missing)
    return extent
