"""Font metric types.

This module defines the read-only font data used to place text:
- GlyphMetrics: Per-font vertical metrics and horizontal advances
- TextExtent: Rendered size of one caption in millimetres
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from audiomark.exceptions import NonPositiveSizeError


@dataclass(frozen=True)
class GlyphMetrics:
    """Metrics of a loaded font, in font design units.

    Loaded once per font and never mutated afterwards.

    Attributes:
        units_per_em: Size of the em square in design units (e.g. 1000, 2048),
            must be positive
        ascender: Distance from baseline to the top of the line box
        descender: Distance from baseline to the bottom of the line box
            (negative below the baseline)
        advances: Horizontal advance per Unicode code point

    Raises:
        NonPositiveSizeError: If units_per_em is not positive
    """

    units_per_em: int
    ascender: int
    descender: int
    advances: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.units_per_em <= 0:
            raise NonPositiveSizeError("units_per_em", self.units_per_em)
        object.__setattr__(self, "advances", MappingProxyType(dict(self.advances)))

    def advance(self, char: str) -> int | None:
        """Return the advance of a character, or None if the font lacks it."""
        return self.advances.get(ord(char))

    def has_glyph(self, char: str) -> bool:
        return ord(char) in self.advances


@dataclass(frozen=True, slots=True)
class TextExtent:
    """Rendered extent of a caption.

    Attributes:
        width_mm: Sum of glyph advances
        height_mm: Ascender-to-descender line height
        descent_mm: Depth below the baseline (positive)
        missing: Characters absent from the font; they contributed no width
    """

    width_mm: float
    height_mm: float
    descent_mm: float
    missing: tuple[str, ...] = ()

    @property
    def is_exact(self) -> bool:
        """True if every character was found in the font."""
        return not self.missing
