"""Core algorithms for audiomark.

This module contains the core algorithms for:

- Unit conversion between points and millimetres
- Quarter-circle Bezier approximation
- Primitive path synthesis (rounded rectangles, capsules, circles, polygons)
- Symbol catalog and symbol rendering
- Caption measurement and centring from glyph metrics

All geometry functions are:
- Pure (they return new values and never touch a canvas)
- Expressed in millimetres with the origin at the lower-left

Key functions:
- mm_to_pt, pt_to_mm: Unit conversion
- quarter_arc: Bezier quarter circle continuing a path
- rounded_rect, capsule, circle: Curved outlines
- resolve_strategy: Catalog lookup for a symbol
- render_symbol: Draw one symbol on a canvas
- measure, center_in_box, draw_centered_text: Caption placement

Key classes:
- SymbolRenderer: Draws symbols with configured stroke widths
- Style: Paint style for one draw operation
"""

from audiomark.core.arc import BEZIER_ARC_K, Quadrant, quarter_arc
from audiomark.core.catalog import (
    SYMBOL_CATALOG,
    GlyphTextStrategy,
    OpenStrokeStrategy,
    PolygonStrategy,
    RenderStrategy,
    resolve_strategy,
)
from audiomark.core.paths import (
    Diagonal,
    Pointing,
    Side,
    arrow,
    bracket,
    capsule,
    chevron,
    circle,
    cross,
    rounded_rect,
    square,
    star,
    triangle,
)
from audiomark.core.renderer import (
    Style,
    SymbolRenderer,
    alternate_colors,
    canvas_style,
    draw_paths,
    render_symbol,
)
from audiomark.core.specimen import render_specimen
from audiomark.core.text import center_in_box, draw_centered_text, measure
from audiomark.core.units import mm_to_pt, pt_to_mm

__all__ = [
    # Arc approximation
    "BEZIER_ARC_K",
    "Quadrant",
    "quarter_arc",
    # Catalog
    "SYMBOL_CATALOG",
    "GlyphTextStrategy",
    "OpenStrokeStrategy",
    "PolygonStrategy",
    "RenderStrategy",
    "resolve_strategy",
    # Path builders
    "Diagonal",
    "Pointing",
    "Side",
    "arrow",
    "bracket",
    "capsule",
    "chevron",
    "circle",
    "cross",
    "rounded_rect",
    "square",
    "star",
    "triangle",
    # Rendering
    "Style",
    "SymbolRenderer",
    "alternate_colors",
    "canvas_style",
    "draw_paths",
    "render_specimen",
    "render_symbol",
    # Text
    "center_in_box",
    "draw_centered_text",
    "measure",
    # Units
    "mm_to_pt",
    "pt_to_mm",
]
