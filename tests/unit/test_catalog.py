"""Unit tests for the symbol catalog."""

import pytest

from audiomark.core.catalog import (
    SYMBOL_CATALOG,
    GlyphTextStrategy,
    OpenStrokeStrategy,
    PolygonStrategy,
    check_catalog,
    resolve_strategy,
)
from audiomark.domain import PaintMode, Point, Symbol
from audiomark.exceptions import ConfigurationError, UnmappedSymbolError

GLYPH_TEXT = {
    Symbol.S: "S",
    Symbol.S_FILLED: "S",
    Symbol.U: "U",
    Symbol.U_FILLED: "U",
    Symbol.A: "A",
    Symbol.A_FILLED: "A",
    Symbol.VT: "VT",
    Symbol.VT_FILLED: "VT",
}


class TestCatalogTotality:
    """Tests for catalog completeness."""

    def test_every_symbol_mapped(self):
        """Test each symbol has exactly one entry."""
        assert set(SYMBOL_CATALOG) == set(Symbol)
        assert len(SYMBOL_CATALOG) == 30

    def test_check_catalog_accepts_full(self):
        """Test the shipped catalog passes the check."""
        check_catalog(SYMBOL_CATALOG)

    def test_check_catalog_rejects_partial(self):
        """Test a catalog with a missing symbol is rejected."""
        partial = {s: strategy for s, strategy in SYMBOL_CATALOG.items() if s is not Symbol.STAR}
        with pytest.raises(UnmappedSymbolError) as exc_info:
            check_catalog(partial)
        assert exc_info.value.symbol is Symbol.STAR

    def test_catalog_read_only(self):
        """Test the catalog cannot be edited at runtime."""
        with pytest.raises(TypeError):
            SYMBOL_CATALOG[Symbol.STAR] = GlyphTextStrategy("*")  # type: ignore[index]


class TestResolveStrategy:
    """Tests for resolve_strategy."""

    @pytest.mark.parametrize("symbol, text", list(GLYPH_TEXT.items()))
    def test_glyph_text(self, symbol, text):
        """Test S, U, A and VT are drawn as text, filled or not."""
        strategy = resolve_strategy(symbol)
        assert isinstance(strategy, GlyphTextStrategy)
        assert strategy.text == text

    def test_unknown_symbol(self):
        """Test a value that is not a catalogued symbol."""
        with pytest.raises(UnmappedSymbolError):
            resolve_strategy("sparkle")  # type: ignore[arg-type]

    def test_unhashable_symbol(self):
        """Test an unhashable value is reported as unmapped."""
        with pytest.raises(UnmappedSymbolError):
            resolve_strategy(["circle"])  # type: ignore[arg-type]

    def test_unmapped_is_configuration_error(self):
        """Test unmapped symbols are configuration errors."""
        assert issubclass(UnmappedSymbolError, ConfigurationError)

    @pytest.mark.parametrize(
        "symbol, kind",
        [
            (Symbol.SQUARE, "polygon"),
            (Symbol.CIRCLE_FILLED, "polygon"),
            (Symbol.GREATER, "open_stroke"),
            (Symbol.GREATER_FILLED, "polygon"),
            (Symbol.X_FILLED, "open_stroke"),
            (Symbol.RIGHT_BRACKET, "open_stroke"),
            (Symbol.ARROW_DOWN_LEFT_FILLED, "open_stroke"),
            (Symbol.VT_FILLED, "glyph_text"),
        ],
    )
    def test_kinds(self, symbol, kind):
        """Test representative strategy kinds."""
        assert resolve_strategy(symbol).kind == kind


class TestShapeStrategies:
    """Tests for the shapes produced by synthesized strategies."""

    @pytest.mark.parametrize(
        "symbol",
        [s for s, st in SYMBOL_CATALOG.items() if isinstance(st, PolygonStrategy)],
    )
    def test_polygon_paint_mode_follows_variant(self, symbol):
        """Test closed shapes are filled exactly for filled variants."""
        paths = SYMBOL_CATALOG[symbol].shape(Point(0.0, 0.0), 3.5, symbol.filled)
        assert paths
        for path in paths:
            assert path.closed
            assert path.paint_mode is PaintMode.for_variant(symbol.filled)

    @pytest.mark.parametrize(
        "symbol",
        [s for s, st in SYMBOL_CATALOG.items() if isinstance(st, OpenStrokeStrategy)],
    )
    def test_open_strokes_never_filled(self, symbol):
        """Test open paths are always stroke only."""
        paths = SYMBOL_CATALOG[symbol].shape(Point(0.0, 0.0), 3.5, symbol.filled)
        assert paths
        for path in paths:
            if not path.closed:
                assert path.paint_mode is PaintMode.STROKE

    @pytest.mark.parametrize(
        "symbol",
        [s for s, st in SYMBOL_CATALOG.items() if not isinstance(st, GlyphTextStrategy)],
    )
    def test_shapes_stay_in_box(self, symbol):
        """Test every synthesized symbol stays inside its size x size box."""
        origin = Point(10.0, 20.0)
        for path in SYMBOL_CATALOG[symbol].shape(origin, 3.5, symbol.filled):
            min_x, min_y, max_x, max_y = path.bounding_box()
            assert min_x >= 10.0 - 1e-9
            assert min_y >= 20.0 - 1e-9
            assert max_x <= 13.5 + 1e-9
            assert max_y <= 23.5 + 1e-9

    def test_filled_arrow_head(self):
        """Test the filled arrow variant closes and fills its head."""
        shaft, head = SYMBOL_CATALOG[Symbol.ARROW_DOWN_RIGHT_FILLED].shape(
            Point(0.0, 0.0), 3.5, True
        )
        assert head.closed
        assert head.paint_mode is PaintMode.FILL_STROKE
        assert shaft.paint_mode is PaintMode.STROKE
