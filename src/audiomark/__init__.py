"""Audiomark - Vector symbol and shape synthesis for audiogram reports.

Audiomark draws the notation used on audiogram forms (air and bone conduction
thresholds, masked and unmasked, for both ears) as real vector geometry on a
PDF page. Rounded boxes, capsule input fields and circles are approximated
with cubic Bezier arcs, and captions are centred using the font's own glyph
advances.

Example:
    $ audiomark specimen --output specimen.pdf

This renders a sample sheet with an input box, a centred caption and every
catalogued symbol in alternating red and blue.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
