"""Font metric loading.

This module provides the FontReader class for loading TrueType/OpenType
files with fonttools and extracting the advance table into a
``GlyphMetrics`` domain model, plus metrics for the standard PDF fonts.
"""

from pathlib import Path

from fontTools.ttLib import TTFont
from reportlab.pdfbase import pdfmetrics

from audiomark.domain import GlyphMetrics
from audiomark.exceptions import FontLoadError, UnknownFontError

# AFM metrics of the standard PDF fonts are in 1/1000 em
STANDARD_FONT_UPM = 1000

# Printable characters of the WinAnsi (cp1252) encoding used by the standard
# fonts; the five bytes cp1252 leaves undefined are dropped
_STANDARD_CHARACTERS = bytes([*range(0x20, 0x7F), *range(0x80, 0x100)]).decode(
    "cp1252", errors="ignore"
)


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph metrics.

    Example:
        with FontReader(Path("Roboto-Medium.ttf")) as reader:
            metrics = reader.glyph_metrics()
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return self._font["head"].unitsPerEm  # type: ignore[attr-defined]

    def glyph_metrics(self) -> GlyphMetrics:
        """Build the metrics model for the loaded font.

        Vertical metrics come from the ``hhea`` table; advances are taken
        from ``hmtx`` for every code point in the best Unicode cmap.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        cmap = self._font.getBestCmap() or {}
        hmtx = self._font["hmtx"]
        advances = {codepoint: hmtx[glyph_name][0] for codepoint, glyph_name in cmap.items()}

        hhea = self._font["hhea"]
        return GlyphMetrics(
            units_per_em=self.units_per_em,
            ascender=hhea.ascent,  # type: ignore[attr-defined]
            descender=hhea.descent,  # type: ignore[attr-defined]
            advances=advances,
        )

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def load_glyph_metrics(font_path: Path) -> GlyphMetrics:
    """Load glyph metrics from a font file.

    Raises:
        FontLoadError: If the file is missing or is not a usable font
    """
    try:
        with FontReader(font_path) as reader:
            return reader.glyph_metrics()
    except Exception as e:
        raise FontLoadError(str(font_path), str(e)) from e


def standard_font_metrics(name: str) -> GlyphMetrics:
    """Build metrics for one of the 14 standard PDF fonts (e.g. Helvetica).

    Raises:
        UnknownFontError: If ``name`` is not a standard font
    """
    if name not in pdfmetrics.standardFonts:
        raise UnknownFontError(name)

    ascent, descent = pdfmetrics.getAscentDescent(name, STANDARD_FONT_UPM)
    advances = {
        ord(char): round(pdfmetrics.stringWidth(char, name, STANDARD_FONT_UPM))
        for char in _STANDARD_CHARACTERS
    }
    return GlyphMetrics(
        units_per_em=STANDARD_FONT_UPM,
        ascender=round(ascent),
        descender=round(descent),
        advances=advances,
    )
