"""Domain models for audiomark.

This module contains the value types shared by the geometry builders, the
symbol renderer and the canvas backends. All models are designed to be:

- Immutable (frozen dataclasses, enums and named tuples)
- Expressed in page millimetres or font design units, never backend units
- Independent of ReportLab and fonttools implementation details

Key classes:
- Point, PathPoint, Path: Vector geometry handed to a canvas
- PaintMode, RGB: Paint style values
- Symbol, SymbolBase, SymbolColor: The audiogram notation catalogue
- GlyphMetrics, TextExtent: Font metrics and measured caption size
"""

from audiomark.domain.geometry import BLACK, RGB, PaintMode, Path, PathPoint, Point
from audiomark.domain.metrics import GlyphMetrics, TextExtent
from audiomark.domain.symbol import Symbol, SymbolBase, SymbolColor

__all__: list[str] = [
    # Enums
    "PaintMode",
    "Symbol",
    "SymbolBase",
    "SymbolColor",
    # Core types
    "BLACK",
    "RGB",
    "Point",
    "PathPoint",
    "Path",
    "GlyphMetrics",
    "TextExtent",
]
