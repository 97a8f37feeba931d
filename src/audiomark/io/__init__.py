"""Canvas and font I/O layer for audiomark.

This module handles the edges of the system: reading font metrics with
fonttools and emitting vector graphics to a PDF page with ReportLab. It
provides a clean abstraction layer between those libraries and the domain
models.

Key responsibilities:
- Define the Canvas protocol the renderer draws on
- Render paths and text to a PDF page
- Load glyph advance tables from TTF/OTF files
- Provide metrics for the standard PDF fonts

Key classes:
- Canvas: Drawing surface protocol
- PdfCanvas: ReportLab-backed single-page canvas
- FontReader: Load fonts and extract glyph metrics
"""

from audiomark.io.canvas import Canvas, PdfCanvas
from audiomark.io.fonts import FontReader, load_glyph_metrics, standard_font_metrics

__all__ = [
    "Canvas",
    "FontReader",
    "PdfCanvas",
    "load_glyph_metrics",
    "standard_font_metrics",
]
