"""Canvas protocol and the ReportLab PDF backend.

The symbol renderer and text placement only talk to the ``Canvas``
protocol. ``PdfCanvas`` implements it on a single ReportLab page; geometry
arrives in millimetres and is converted to points here.
"""

from pathlib import Path as FilePath
from typing import Protocol, runtime_checkable

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont as ReportLabTTFont
from reportlab.pdfgen.canvas import FILL_NON_ZERO, Canvas as ReportLabCanvas

from audiomark.core.units import mm_to_pt
from audiomark.domain import RGB, GlyphMetrics, PaintMode, Path, Point
from audiomark.exceptions import CanvasSaveError, FontLoadError
from audiomark.io.fonts import load_glyph_metrics, standard_font_metrics


@runtime_checkable
class Canvas(Protocol):
    """Drawing surface consumed by the renderer.

    Colour and stroke width are persistent registers: they apply to every
    following draw call until changed.
    """

    def add_path(self, path: Path, paint_mode: PaintMode) -> None: ...

    def add_text(self, text: str, font: str, size_pt: float, position: Point) -> None: ...

    def set_fill_color(self, rgb: RGB) -> None: ...

    def set_stroke_color(self, rgb: RGB) -> None: ...

    def set_stroke_width(self, width_pt: float) -> None: ...

    def font_metrics(self, font: str) -> GlyphMetrics: ...


def _pt(point: Point) -> tuple[float, float]:
    return mm_to_pt(point.x), mm_to_pt(point.y)


class PdfCanvas:
    """Single-page PDF canvas backed by ReportLab.

    Font handles are ReportLab font names: either one of the standard PDF
    fonts or a name returned by ``register_font``.

    Example:
        canvas = PdfCanvas(Path("out.pdf"), 215.9, 279.4)
        font = canvas.register_font(Path("Roboto-Medium.ttf"))
        canvas.add_text("Jane Doe", font, 10.0, Point(65.0, 120.0))
        canvas.save()
    """

    def __init__(
        self,
        output_path: FilePath,
        page_width_mm: float,
        page_height_mm: float,
        title: str | None = None,
    ) -> None:
        self._output_path = output_path
        self._canvas = ReportLabCanvas(
            str(output_path),
            pagesize=(mm_to_pt(page_width_mm), mm_to_pt(page_height_mm)),
        )
        if title:
            self._canvas.setTitle(title)
        self._metrics: dict[str, GlyphMetrics] = {}

    @property
    def output_path(self) -> FilePath:
        return self._output_path

    def register_font(self, font_path: FilePath, name: str | None = None) -> str:
        """Embed a TrueType font and load its metrics.

        Args:
            font_path: Path to a TTF file
            name: Font handle to register under (default: file stem)

        Returns:
            The font handle to pass to ``add_text``

        Raises:
            FontLoadError: If the font cannot be read or embedded
        """
        handle = name or font_path.stem
        metrics = load_glyph_metrics(font_path)
        try:
            pdfmetrics.registerFont(ReportLabTTFont(handle, str(font_path)))
        except Exception as e:
            raise FontLoadError(str(font_path), str(e)) from e

        self._metrics[handle] = metrics
        return handle

    def font_metrics(self, font: str) -> GlyphMetrics:
        """Return metrics for a registered or standard font.

        Raises:
            UnknownFontError: If the font is neither registered nor standard
        """
        if font not in self._metrics:
            self._metrics[font] = standard_font_metrics(font)
        return self._metrics[font]

    def add_path(self, path: Path, paint_mode: PaintMode) -> None:
        pdf_path = self._canvas.beginPath()
        first, *rest = path.points
        pdf_path.moveTo(*_pt(first.point))

        controls: list[Point] = []
        for path_point in rest:
            if path_point.is_control:
                controls.append(path_point.point)
                continue
            if controls:
                (x1, y1), (x2, y2) = (_pt(c) for c in controls)
                pdf_path.curveTo(x1, y1, x2, y2, *_pt(path_point.point))
                controls = []
            else:
                pdf_path.lineTo(*_pt(path_point.point))

        if path.closed:
            pdf_path.close()

        fill = 1 if paint_mode is PaintMode.FILL_STROKE else 0
        self._canvas.drawPath(pdf_path, stroke=1, fill=fill, fillMode=FILL_NON_ZERO)

    def _require_font(self, font: str) -> None:
        """Raise UnknownFontError unless the font is registered or standard."""
        self.font_metrics(font)

    def add_text(self, text: str, font: str, size_pt: float, position: Point) -> None:
        self._require_font(font)
        self._canvas.setFont(font, size_pt)
        self._canvas.drawString(*_pt(position), text)

    def set_fill_color(self, rgb: RGB) -> None:
        self._canvas.setFillColorRGB(*rgb)

    def set_stroke_color(self, rgb: RGB) -> None:
        self._canvas.setStrokeColorRGB(*rgb)

    def set_stroke_width(self, width_pt: float) -> None:
        self._canvas.setLineWidth(width_pt)

    def save(self) -> None:
        """Finish the page and write the PDF.

        Raises:
            CanvasSaveError: If the file cannot be written
        """
        try:
            self._canvas.showPage()
            self._canvas.save()
        except OSError as e:
            raise CanvasSaveError(str(self._output_path), str(e)) from e

