"""Conversion between PDF points and millimetres.

Font sizes and glyph advances are expressed in points, page geometry in
millimetres. Both functions are pure and total.
"""

MM_PER_INCH = 25.4
PT_PER_INCH = 72.0


def mm_to_pt(mm: float) -> float:
    """Convert millimetres to points.

    Examples:
        >>> round(mm_to_pt(25.4), 6)
        72.0
    """
    return mm * PT_PER_INCH / MM_PER_INCH


def pt_to_mm(pt: float) -> float:
    """Convert points to millimetres.

    Examples:
        >>> round(pt_to_mm(72.0), 6)
        25.4
    """
    return pt * MM_PER_INCH / PT_PER_INCH
