"""Static mapping from audiogram symbols to render strategies.

Each ``Symbol`` maps to exactly one strategy:

- PolygonStrategy: closed synthesized outline, filled for filled variants
- OpenStrokeStrategy: synthesized open strokes, never filled; filled
  variants are drawn with a bold stroke
- GlyphTextStrategy: a short text run drawn with the symbol font

The table is built once at import time and checked for totality, so a
``Symbol`` added without a catalog entry fails on import rather than at
render time. Adding a symbol is an edit to ``_ENTRIES``.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from audiomark.core.paths import (
    Diagonal,
    Pointing,
    Side,
    arrow,
    bracket,
    chevron,
    circle,
    cross,
    square,
    star,
    triangle,
)
from audiomark.domain import PaintMode, Path, Point, Symbol
from audiomark.exceptions import UnmappedSymbolError

# (origin, size_mm, filled) -> paths to paint, in order
ShapeFn = Callable[[Point, float, bool], tuple[Path, ...]]


@dataclass(frozen=True)
class PolygonStrategy:
    """Closed synthesized outline."""

    kind: ClassVar[str] = "polygon"
    shape: ShapeFn


@dataclass(frozen=True)
class OpenStrokeStrategy:
    """Open synthesized strokes."""

    kind: ClassVar[str] = "open_stroke"
    shape: ShapeFn


@dataclass(frozen=True)
class GlyphTextStrategy:
    """Text fallback drawn with the symbol font."""

    kind: ClassVar[str] = "glyph_text"
    text: str


RenderStrategy = PolygonStrategy | OpenStrokeStrategy | GlyphTextStrategy


def _square(origin: Point, size: float, filled: bool) -> tuple[Path, ...]:
    return (square(origin, size, PaintMode.for_variant(filled)),)


def _triangle(origin: Point, size: float, filled: bool) -> tuple[Path, ...]:
    return (triangle(origin, size, Pointing.UP, PaintMode.for_variant(filled)),)


def _circle(origin: Point, size: float, filled: bool) -> tuple[Path, ...]:
    return (circle(origin, size, PaintMode.for_variant(filled)),)


def _star(origin: Point, size: float, filled: bool) -> tuple[Path, ...]:
    return (star(origin, size, PaintMode.for_variant(filled)),)


def _cross(origin: Point, size: float, filled: bool) -> tuple[Path, ...]:  # noqa: ARG001
    return cross(origin, size)


def _chevron(pointing: Pointing, closed: bool) -> ShapeFn:
    def shape(origin: Point, size: float, filled: bool) -> tuple[Path, ...]:
        return (chevron(origin, size, pointing, closed, PaintMode.for_variant(filled)),)

    return shape


def _bracket(side: Side) -> ShapeFn:
    def shape(origin: Point, size: float, filled: bool) -> tuple[Path, ...]:  # noqa: ARG001
        return (bracket(origin, size, side),)

    return shape


def _arrow(direction: Diagonal) -> ShapeFn:
    def shape(origin: Point, size: float, filled: bool) -> tuple[Path, ...]:
        return arrow(origin, size, direction, filled_head=filled)

    return shape


_ENTRIES: dict[Symbol, RenderStrategy] = {
    Symbol.SQUARE: PolygonStrategy(_square),
    Symbol.SQUARE_FILLED: PolygonStrategy(_square),
    Symbol.TRIANGLE: PolygonStrategy(_triangle),
    Symbol.TRIANGLE_FILLED: PolygonStrategy(_triangle),
    Symbol.CIRCLE: PolygonStrategy(_circle),
    Symbol.CIRCLE_FILLED: PolygonStrategy(_circle),
    Symbol.S: GlyphTextStrategy("S"),
    Symbol.S_FILLED: GlyphTextStrategy("S"),
    Symbol.U: GlyphTextStrategy("U"),
    Symbol.U_FILLED: GlyphTextStrategy("U"),
    Symbol.X: OpenStrokeStrategy(_cross),
    Symbol.X_FILLED: OpenStrokeStrategy(_cross),
    Symbol.A: GlyphTextStrategy("A"),
    Symbol.A_FILLED: GlyphTextStrategy("A"),
    Symbol.GREATER: OpenStrokeStrategy(_chevron(Pointing.RIGHT, closed=False)),
    Symbol.GREATER_FILLED: PolygonStrategy(_chevron(Pointing.RIGHT, closed=True)),
    Symbol.LESS: OpenStrokeStrategy(_chevron(Pointing.LEFT, closed=False)),
    Symbol.LESS_FILLED: PolygonStrategy(_chevron(Pointing.LEFT, closed=True)),
    Symbol.LEFT_BRACKET: OpenStrokeStrategy(_bracket(Side.LEFT)),
    Symbol.LEFT_BRACKET_FILLED: OpenStrokeStrategy(_bracket(Side.LEFT)),
    Symbol.RIGHT_BRACKET: OpenStrokeStrategy(_bracket(Side.RIGHT)),
    Symbol.RIGHT_BRACKET_FILLED: OpenStrokeStrategy(_bracket(Side.RIGHT)),
    Symbol.STAR: PolygonStrategy(_star),
    Symbol.STAR_FILLED: PolygonStrategy(_star),
    Symbol.ARROW_DOWN_RIGHT: OpenStrokeStrategy(_arrow(Diagonal.DOWN_RIGHT)),
    Symbol.ARROW_DOWN_RIGHT_FILLED: OpenStrokeStrategy(_arrow(Diagonal.DOWN_RIGHT)),
    Symbol.ARROW_DOWN_LEFT: OpenStrokeStrategy(_arrow(Diagonal.DOWN_LEFT)),
    Symbol.ARROW_DOWN_LEFT_FILLED: OpenStrokeStrategy(_arrow(Diagonal.DOWN_LEFT)),
    Symbol.VT: GlyphTextStrategy("VT"),
    Symbol.VT_FILLED: GlyphTextStrategy("VT"),
}


def check_catalog(catalog: Mapping[Symbol, RenderStrategy]) -> None:
    """Verify every Symbol has an entry.

    Raises:
        UnmappedSymbolError: For the first symbol without an entry
    """
    for symbol in Symbol:
        if symbol not in catalog:
            raise UnmappedSymbolError(symbol)


SYMBOL_CATALOG: Mapping[Symbol, RenderStrategy] = MappingProxyType(_ENTRIES)
check_catalog(SYMBOL_CATALOG)


def resolve_strategy(symbol: Symbol) -> RenderStrategy:
    """Look up the render strategy for a symbol.

    Raises:
        UnmappedSymbolError: If the symbol has no catalog entry
    """
    try:
        return SYMBOL_CATALOG[symbol]
    except (KeyError, TypeError):
        raise UnmappedSymbolError(symbol) from None
