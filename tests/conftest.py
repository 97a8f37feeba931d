"""Shared fixtures: a recording canvas and a tiny generated TrueType font."""

import logging
from pathlib import Path
from typing import Any

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from audiomark.domain import RGB, GlyphMetrics, PaintMode, Point, Symbol
from audiomark.domain import Path as VectorPath

FIXTURE_UPM = 2048
FIXTURE_ASCENDER = 1900
FIXTURE_DESCENDER = -500

# "Jane Doe" sums to 4500 design units with these advances
FIXTURE_ADVANCES = {
    "J": 500,
    "a": 600,
    "n": 600,
    "e": 550,
    "space": 400,
    "D": 700,
    "o": 600,
}


def _codepoint(glyph_name: str) -> int:
    return ord(" ") if glyph_name == "space" else ord(glyph_name)


def build_fixture_font(path: Path) -> Path:
    """Write a TrueType font with rectangle glyphs and known metrics."""
    glyph_order = [".notdef", *FIXTURE_ADVANCES]

    fb = FontBuilder(FIXTURE_UPM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({_codepoint(name): name for name in FIXTURE_ADVANCES})

    glyphs = {}
    for name in glyph_order:
        pen = TTGlyphPen(None)
        if name != "space":
            pen.moveTo((100, 0))
            pen.lineTo((100, 1400))
            pen.lineTo((400, 1400))
            pen.lineTo((400, 0))
            pen.closePath()
        glyphs[name] = pen.glyph()
    fb.setupGlyf(glyphs)

    fb.setupHorizontalMetrics(
        {
            name: (FIXTURE_ADVANCES.get(name, 1000), 0 if name == "space" else 100)
            for name in glyph_order
        }
    )
    fb.setupHorizontalHeader(ascent=FIXTURE_ASCENDER, descent=FIXTURE_DESCENDER)
    fb.setupNameTable(
        {
            "familyName": "Audiomark Fixture",
            "styleName": "Regular",
            "psName": "AudiomarkFixture-Regular",
        }
    )
    fb.setupOS2(
        sTypoAscender=FIXTURE_ASCENDER,
        sTypoDescender=FIXTURE_DESCENDER,
        usWinAscent=FIXTURE_ASCENDER,
        usWinDescent=-FIXTURE_DESCENDER,
        fsType=0,
    )
    fb.setupPost()
    fb.save(str(path))
    return path


class RecordingCanvas:
    """Canvas that records every call in order."""

    def __init__(self, metrics: dict[str, GlyphMetrics] | None = None) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self._metrics = metrics or {}

    def add_path(self, path: VectorPath, paint_mode: PaintMode) -> None:
        self.calls.append(("add_path", path, paint_mode))

    def add_text(self, text: str, font: str, size_pt: float, position: Point) -> None:
        self.calls.append(("add_text", text, font, size_pt, position))

    def set_fill_color(self, rgb: RGB) -> None:
        self.calls.append(("set_fill_color", rgb))

    def set_stroke_color(self, rgb: RGB) -> None:
        self.calls.append(("set_stroke_color", rgb))

    def set_stroke_width(self, width_pt: float) -> None:
        self.calls.append(("set_stroke_width", width_pt))

    def font_metrics(self, font: str) -> GlyphMetrics:
        return self._metrics[font]

    def named(self, name: str) -> list[tuple[Any, ...]]:
        """Calls with the given method name."""
        return [call for call in self.calls if call[0] == name]

    def draws(self) -> list[tuple[Any, ...]]:
        """add_path and add_text calls."""
        return [call for call in self.calls if call[0] in ("add_path", "add_text")]


class FailingCanvas(RecordingCanvas):
    """Canvas whose draw calls raise after recording."""

    def add_path(self, path: VectorPath, paint_mode: PaintMode) -> None:
        super().add_path(path, paint_mode)
        raise RuntimeError("backend failure")

    def add_text(self, text: str, font: str, size_pt: float, position: Point) -> None:
        super().add_text(text, font, size_pt, position)
        raise RuntimeError("backend failure")


@pytest.fixture
def fixture_metrics() -> GlyphMetrics:
    """Metrics equal to the generated fixture font's."""
    return GlyphMetrics(
        units_per_em=FIXTURE_UPM,
        ascender=FIXTURE_ASCENDER,
        descender=FIXTURE_DESCENDER,
        advances={_codepoint(name): adv for name, adv in FIXTURE_ADVANCES.items()},
    )


@pytest.fixture
def recording_canvas(fixture_metrics: GlyphMetrics) -> RecordingCanvas:
    """Recording canvas knowing the "Fixture" and "Helvetica" handles."""
    return RecordingCanvas({"Fixture": fixture_metrics, "Helvetica": fixture_metrics})


@pytest.fixture
def failing_canvas(fixture_metrics: GlyphMetrics) -> FailingCanvas:
    """Canvas whose draw calls raise."""
    return FailingCanvas({"Fixture": fixture_metrics})


@pytest.fixture(scope="session")
def fixture_font_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Path to the generated TrueType fixture font."""
    return build_fixture_font(tmp_path_factory.mktemp("fonts") / "AudiomarkFixture.ttf")


@pytest.fixture
def all_symbols() -> list[Symbol]:
    """Every symbol in declaration order."""
    return list(Symbol)


@pytest.fixture(autouse=True)
def _isolate_root_logging():
    """Drop root logging handlers a test added, so none outlive its captured streams."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
