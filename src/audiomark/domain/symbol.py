"""Audiometric symbol identities and colours.

The catalogue is closed: 15 base notations, each with an unfilled and a
filled variant, give the 30 flat ``Symbol`` members used by callers.
"""

from enum import Enum

from audiomark.domain.geometry import RGB


class SymbolBase(str, Enum):
    """Base notation shared by a symbol's filled and unfilled variants."""

    SQUARE = "square"
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    S = "s"
    U = "u"
    X = "x"
    A = "a"
    GREATER = "greater"
    LESS = "less"
    LEFT_BRACKET = "left_bracket"
    RIGHT_BRACKET = "right_bracket"
    STAR = "star"
    ARROW_DOWN_RIGHT = "arrow_down_right"
    ARROW_DOWN_LEFT = "arrow_down_left"
    VT = "vt"


class Symbol(str, Enum):
    """Audiogram notation symbol.

    Values are ``<base>`` for unfilled and ``<base>_filled`` for filled
    variants, so a symbol can be round-tripped from configuration text.
    """

    SQUARE = "square"
    SQUARE_FILLED = "square_filled"
    TRIANGLE = "triangle"
    TRIANGLE_FILLED = "triangle_filled"
    CIRCLE = "circle"
    CIRCLE_FILLED = "circle_filled"
    S = "s"
    S_FILLED = "s_filled"
    U = "u"
    U_FILLED = "u_filled"
    X = "x"
    X_FILLED = "x_filled"
    A = "a"
    A_FILLED = "a_filled"
    GREATER = "greater"
    GREATER_FILLED = "greater_filled"
    LESS = "less"
    LESS_FILLED = "less_filled"
    LEFT_BRACKET = "left_bracket"
    LEFT_BRACKET_FILLED = "left_bracket_filled"
    RIGHT_BRACKET = "right_bracket"
    RIGHT_BRACKET_FILLED = "right_bracket_filled"
    STAR = "star"
    STAR_FILLED = "star_filled"
    ARROW_DOWN_RIGHT = "arrow_down_right"
    ARROW_DOWN_RIGHT_FILLED = "arrow_down_right_filled"
    ARROW_DOWN_LEFT = "arrow_down_left"
    ARROW_DOWN_LEFT_FILLED = "arrow_down_left_filled"
    VT = "vt"
    VT_FILLED = "vt_filled"

    @property
    def filled(self) -> bool:
        """Whether this is the filled variant."""
        return self.value.endswith("_filled")

    @property
    def base(self) -> SymbolBase:
        """Base notation of this symbol."""
        return SymbolBase(self.value.removesuffix("_filled"))

    @classmethod
    def of(cls, base: SymbolBase, filled: bool) -> "Symbol":
        """Look up the flat symbol for a base notation and fill variant."""
        return cls(f"{base.value}_filled" if filled else base.value)


class SymbolColor(Enum):
    """Two-colour palette used on audiograms (red: right ear, blue: left)."""

    RED = "red"
    BLUE = "blue"

    @property
    def rgb(self) -> RGB:
        """Resolve to the fill and stroke colour."""
        return _PALETTE[self]


_PALETTE: dict[SymbolColor, RGB] = {
    SymbolColor.RED: RGB(1.0, 0.0, 0.0),
    SymbolColor.BLUE: RGB(0.0, 0.0, 1.0),
}
