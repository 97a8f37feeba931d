"""Unit tests for symbol rendering and canvas style handling."""

import pytest

from audiomark.config import SymbolConfig
from audiomark.core.paths import Diagonal, arrow, square
from audiomark.core.renderer import (
    Style,
    SymbolRenderer,
    alternate_colors,
    canvas_style,
    draw_paths,
    render_symbol,
)
from audiomark.core.units import pt_to_mm
from audiomark.domain import BLACK, PaintMode, Point, Symbol, SymbolColor
from audiomark.exceptions import NonPositiveSizeError, UnmappedSymbolError
from audiomark.utils import RenderLogger

RED = SymbolColor.RED.rgb
BLUE = SymbolColor.BLUE.rgb

RESET = [
    ("set_fill_color", BLACK),
    ("set_stroke_color", BLACK),
    ("set_stroke_width", 0.0),
]


class TestCanvasStyle:
    """Tests for canvas_style and draw_paths."""

    def test_sets_then_resets(self, recording_canvas):
        """Test registers are set on entry and reset on exit."""
        with canvas_style(recording_canvas, Style.solid(RED, 1.5)):
            recording_canvas.calls.append(("marker",))

        assert recording_canvas.calls == [
            ("set_fill_color", RED),
            ("set_stroke_color", RED),
            ("set_stroke_width", 1.5),
            ("marker",),
            *RESET,
        ]

    def test_resets_on_error(self, failing_canvas):
        """Test registers are reset when drawing raises."""
        with pytest.raises(RuntimeError, match="backend failure"):
            draw_paths(failing_canvas, [square(Point(0.0, 0.0), 1.0)], Style.solid(BLUE, 0.75))

        assert failing_canvas.calls[-3:] == RESET

    def test_neutral_width(self, recording_canvas):
        """Test the neutral stroke width is configurable."""
        with canvas_style(recording_canvas, Style.solid(RED, 2.0), neutral_stroke_width_pt=0.25):
            pass
        assert recording_canvas.calls[-1] == ("set_stroke_width", 0.25)

    def test_draw_paths_count(self, recording_canvas):
        """Test each path is emitted with its own paint mode."""
        paths = arrow(Point(0.0, 0.0), 3.0, Diagonal.DOWN_LEFT, filled_head=True)
        count = draw_paths(recording_canvas, paths, Style.solid(BLACK, 0.5))

        assert count == 2
        modes = [call[2] for call in recording_canvas.named("add_path")]
        assert modes == [PaintMode.STROKE, PaintMode.FILL_STROKE]


class TestSymbolRenderer:
    """Tests for SymbolRenderer.render."""

    def test_polygon_unfilled(self, recording_canvas):
        """Test an unfilled circle is stroked in the symbol colour."""
        SymbolRenderer().render(
            Symbol.CIRCLE, recording_canvas, "Fixture", Point(65.0, 90.0), 10.0, SymbolColor.RED
        )

        calls = recording_canvas.calls
        assert calls[:3] == [
            ("set_fill_color", RED),
            ("set_stroke_color", RED),
            ("set_stroke_width", 0.75),
        ]
        (_, path, mode) = calls[3]
        assert mode is PaintMode.STROKE
        assert path.bounding_box() == pytest.approx(
            (65.0, 90.0, 65.0 + pt_to_mm(10.0), 90.0 + pt_to_mm(10.0))
        )
        assert calls[4:] == RESET

    def test_polygon_filled(self, recording_canvas):
        """Test a filled variant is painted fill-and-stroke."""
        SymbolRenderer().render(
            Symbol.SQUARE_FILLED, recording_canvas, "Fixture", Point(0.0, 0.0), 10.0, SymbolColor.BLUE
        )
        (_, _, mode) = recording_canvas.named("add_path")[0]
        assert mode is PaintMode.FILL_STROKE

    def test_open_stroke_filled_is_bold(self, recording_canvas):
        """Test filled open-stroke symbols use the bold stroke width."""
        config = SymbolConfig(stroke_width_pt=0.5, bold_stroke_factor=3.0)
        SymbolRenderer(config).render(
            Symbol.X_FILLED, recording_canvas, "Fixture", Point(0.0, 0.0), 10.0, SymbolColor.RED
        )

        assert ("set_stroke_width", 1.5) in recording_canvas.calls
        paths = recording_canvas.named("add_path")
        assert len(paths) == 2
        assert all(mode is PaintMode.STROKE for (_, _, mode) in paths)

    def test_open_stroke_unfilled_is_regular(self, recording_canvas):
        """Test unfilled open-stroke symbols use the regular width."""
        SymbolRenderer().render(
            Symbol.LEFT_BRACKET, recording_canvas, "Fixture", Point(0.0, 0.0), 10.0, SymbolColor.RED
        )
        assert recording_canvas.calls[2] == ("set_stroke_width", 0.75)

    def test_closed_chevron_not_bold(self, recording_canvas):
        """Test filled chevrons are solid shapes at the regular width."""
        SymbolRenderer().render(
            Symbol.LESS_FILLED, recording_canvas, "Fixture", Point(0.0, 0.0), 10.0, SymbolColor.BLUE
        )
        assert recording_canvas.calls[2] == ("set_stroke_width", 0.75)
        (_, path, mode) = recording_canvas.named("add_path")[0]
        assert path.closed
        assert mode is PaintMode.FILL_STROKE

    @pytest.mark.parametrize("symbol, text", [(Symbol.VT, "VT"), (Symbol.A_FILLED, "A")])
    def test_glyph_text(self, recording_canvas, symbol, text):
        """Test text symbols draw their run at the origin."""
        origin = Point(71.0, 90.0)
        SymbolRenderer().render(symbol, recording_canvas, "Fixture", origin, 12.0, SymbolColor.BLUE)

        assert recording_canvas.draws() == [("add_text", text, "Fixture", 12.0, origin)]
        assert recording_canvas.calls[0] == ("set_fill_color", BLUE)
        assert recording_canvas.calls[-3:] == RESET

    @pytest.mark.parametrize("size", [0.0, -10.0])
    def test_non_positive_size(self, recording_canvas, size):
        """Test non-positive sizes raise before any canvas call."""
        with pytest.raises(NonPositiveSizeError):
            SymbolRenderer().render(
                Symbol.STAR, recording_canvas, "Fixture", Point(0.0, 0.0), size, SymbolColor.RED
            )
        assert recording_canvas.calls == []

    def test_unmapped_symbol(self, recording_canvas):
        """Test an unknown symbol raises before any canvas call."""
        with pytest.raises(UnmappedSymbolError):
            SymbolRenderer().render(
                "sparkle",  # type: ignore[arg-type]
                recording_canvas,
                "Fixture",
                Point(0.0, 0.0),
                10.0,
                SymbolColor.RED,
            )
        assert recording_canvas.calls == []

    def test_failure_resets_style(self, failing_canvas):
        """Test registers are reset when the canvas raises mid-symbol."""
        with pytest.raises(RuntimeError):
            SymbolRenderer().render(
                Symbol.S, failing_canvas, "Fixture", Point(0.0, 0.0), 10.0, SymbolColor.RED
            )
        assert failing_canvas.calls[-3:] == RESET

    def test_logs_symbol(self, recording_canvas):
        """Test the render logger counts symbols and colours."""
        render_logger = RenderLogger()
        SymbolRenderer(logger=render_logger).render(
            Symbol.STAR_FILLED, recording_canvas, "Fixture", Point(0.0, 0.0), 10.0, SymbolColor.BLUE
        )
        assert render_logger.stats.symbols_drawn == 1
        assert render_logger.stats.colors["blue"] == 1

    def test_render_symbol_function(self, recording_canvas):
        """Test the module-level helper uses default settings."""
        render_symbol(Symbol.TRIANGLE, recording_canvas, "Fixture", Point(0.0, 0.0), 10.0, SymbolColor.RED)
        assert len(recording_canvas.named("add_path")) == 1


class TestRenderRow:
    """Tests for SymbolRenderer.render_row."""

    def test_all_symbols_alternate_colours(self, recording_canvas, all_symbols):
        """Test 30 symbols give 15 red and 15 blue in declaration order."""
        SymbolRenderer().render_row(all_symbols, recording_canvas, "Fixture", Point(65.0, 90.0))

        fills = [
            call[1]
            for call in recording_canvas.named("set_fill_color")
            if call[1] != BLACK
        ]
        assert len(fills) == 30
        assert fills == [RED if i % 2 == 0 else BLUE for i in range(30)]

    def test_every_draw_is_followed_by_reset(self, recording_canvas, all_symbols):
        """Test no symbol leaves its colour behind for the next."""
        SymbolRenderer().render_row(all_symbols, recording_canvas, "Fixture", Point(0.0, 0.0))
        fills = recording_canvas.named("set_fill_color")
        # Each symbol sets its colour once and resets once
        assert len(fills) == 60
        assert all(call[1] == BLACK for call in fills[1::2])

    def test_positions(self, recording_canvas):
        """Test symbols are spaced step_mm apart."""
        positions = SymbolRenderer().render_row(
            [Symbol.SQUARE, Symbol.S, Symbol.CIRCLE],
            recording_canvas,
            "Fixture",
            Point(65.0, 90.0),
            step_mm=7.0,
        )
        assert positions == [Point(65.0, 90.0), Point(72.0, 90.0), Point(79.0, 90.0)]

    def test_default_step(self, recording_canvas):
        """Test the configured step is used by default."""
        positions = SymbolRenderer(SymbolConfig(step_mm=6.0)).render_row(
            [Symbol.X, Symbol.X], recording_canvas, "Fixture", Point(0.0, 0.0)
        )
        assert positions[1] == Point(6.0, 0.0)

    def test_custom_colours(self, recording_canvas):
        """Test a custom colour function."""
        SymbolRenderer().render_row(
            [Symbol.SQUARE, Symbol.SQUARE],
            recording_canvas,
            "Fixture",
            Point(0.0, 0.0),
            color_for=lambda _i: SymbolColor.BLUE,
        )
        fills = [c[1] for c in recording_canvas.named("set_fill_color") if c[1] != BLACK]
        assert fills == [BLUE, BLUE]

    def test_alternate_colors(self):
        """Test even positions are red, odd are blue."""
        assert alternate_colors(0) is SymbolColor.RED
        assert alternate_colors(1) is SymbolColor.BLUE
        assert alternate_colors(28) is SymbolColor.RED
