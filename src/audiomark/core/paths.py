"""Path builders for the primitive shapes used on audiogram forms.

Every builder is a pure function of an origin (the lower-left corner of the
shape's bounding box, in millimetres) and its size parameters. Curved
outlines are traced counter-clockwise and use ``quarter_arc`` for every
rounded turn; polygon shapes are anchors only.

Key functions:
- rounded_rect: Rectangle with four rounded corners
- capsule: Pill shape with semicircular short sides
- circle: Full circle from four quarter arcs
- square, triangle, chevron, bracket, cross, star, arrow: Symbol primitives
"""

import math
from enum import Enum

from audiomark.core.arc import Quadrant, quarter_arc
from audiomark.domain import PaintMode, Path, PathPoint, Point
from audiomark.exceptions import (
    ConfigurationError,
    NonPositiveSizeError,
    RadiusTooLargeError,
)

# Coordinates closer than this are the same vertex (millimetres)
_SAME_POINT_TOL = 1e-9

# Inner to outer radius of a regular five-pointed star
STAR_INNER_RATIO = 0.381966

_CHEVRON_INSET = 0.2
_BRACKET_INSET = 0.3
_ARROW_HEAD = 0.4


class Pointing(Enum):
    """Direction a triangle or chevron tip points to."""

    UP = "up"
    LEFT = "left"
    RIGHT = "right"


class Side(Enum):
    """Which side of a bracket pair."""

    LEFT = "left"
    RIGHT = "right"


class Diagonal(Enum):
    """Direction of a diagonal arrow."""

    DOWN_RIGHT = "down_right"
    DOWN_LEFT = "down_left"


def _require_positive(name: str, value: float) -> None:
    if value <= 0:
        raise NonPositiveSizeError(name, value)


def _same_point(a: Point, b: Point) -> bool:
    return math.isclose(a.x, b.x, abs_tol=_SAME_POINT_TOL) and math.isclose(
        a.y, b.y, abs_tol=_SAME_POINT_TOL
    )


class _Tracer:
    """Accumulates path points while walking an outline."""

    def __init__(self, start: Point) -> None:
        self._points: list[PathPoint] = [PathPoint(start)]

    @property
    def current(self) -> Point:
        return self._points[-1].point

    def line_to(self, point: Point) -> None:
        # Zero-length edges are dropped so degenerate shapes collapse cleanly
        if not _same_point(self.current, point):
            self._points.append(PathPoint(point))

    def arc(self, radius: float, quadrant: Quadrant) -> None:
        if radius > 0:
            self._points.extend(quarter_arc(self.current, radius, quadrant))

    def close(self, paint_mode: PaintMode) -> Path:
        points = self._points
        # A straight edge back to the start is implied by closure
        if (
            len(points) > 1
            and not points[-2].is_control
            and _same_point(points[-1].point, points[0].point)
        ):
            points = points[:-1]
        return Path(points=tuple(points), closed=True, paint_mode=paint_mode)


def rounded_rect(
    origin: Point,
    width: float,
    height: float,
    radius: float,
    paint_mode: PaintMode = PaintMode.STROKE,
) -> Path:
    """Build a rectangle with rounded corners.

    Args:
        origin: Lower-left corner of the bounding box
        width: Width in millimetres
        height: Height in millimetres
        radius: Corner radius in millimetres; 0 gives a plain rectangle
        paint_mode: Stroke only (default) or fill and stroke

    Returns:
        Closed path starting at the end of the bottom-left corner

    Raises:
        NonPositiveSizeError: If width or height is not positive
        RadiusTooLargeError: If 2 * radius exceeds min(width, height)
        ConfigurationError: If radius is negative
    """
    _require_positive("width", width)
    _require_positive("height", height)
    if radius < 0:
        raise ConfigurationError(f"Corner radius must not be negative, got {radius}")
    if 2 * radius > min(width, height):
        raise RadiusTooLargeError(radius, width, height)

    x, y, r = origin.x, origin.y, radius
    tracer = _Tracer(Point(x + r, y))
    tracer.line_to(Point(x + width - r, y))
    tracer.arc(r, Quadrant.BOTTOM_RIGHT)
    tracer.line_to(Point(x + width, y + height - r))
    tracer.arc(r, Quadrant.TOP_RIGHT)
    tracer.line_to(Point(x + r, y + height))
    tracer.arc(r, Quadrant.TOP_LEFT)
    tracer.line_to(Point(x, y + r))
    tracer.arc(r, Quadrant.BOTTOM_LEFT)
    return tracer.close(paint_mode)


def capsule(
    origin: Point,
    width: float,
    height: float,
    paint_mode: PaintMode = PaintMode.STROKE,
) -> Path:
    """Build a pill shape: two long edges joined by semicircular ends.

    The end radius is ``height / 2``. With ``width == height`` the straight
    edges vanish and the result is identical to ``circle(origin, height)``.

    Raises:
        NonPositiveSizeError: If width or height is not positive
        ConfigurationError: If width is smaller than height
    """
    _require_positive("width", width)
    _require_positive("height", height)
    if width < height:
        raise ConfigurationError(
            f"Capsule width {width} must be at least its height {height}"
        )

    x, y, r = origin.x, origin.y, height / 2
    tracer = _Tracer(Point(x + r, y))
    tracer.line_to(Point(x + width - r, y))
    tracer.arc(r, Quadrant.BOTTOM_RIGHT)
    tracer.arc(r, Quadrant.TOP_RIGHT)
    tracer.line_to(Point(x + r, y + height))
    tracer.arc(r, Quadrant.TOP_LEFT)
    tracer.arc(r, Quadrant.BOTTOM_LEFT)
    return tracer.close(paint_mode)


def circle(
    origin: Point,
    diameter: float,
    paint_mode: PaintMode = PaintMode.STROKE,
) -> Path:
    """Build a circle inscribed in the square at ``origin``."""
    _require_positive("diameter", diameter)

    r = diameter / 2
    tracer = _Tracer(Point(origin.x + r, origin.y))
    for quadrant in (
        Quadrant.BOTTOM_RIGHT,
        Quadrant.TOP_RIGHT,
        Quadrant.TOP_LEFT,
        Quadrant.BOTTOM_LEFT,
    ):
        tracer.arc(r, quadrant)
    return tracer.close(paint_mode)


def square(origin: Point, size: float, paint_mode: PaintMode = PaintMode.STROKE) -> Path:
    """Build an axis-aligned square."""
    _require_positive("size", size)
    x, y = origin.x, origin.y
    return Path.polygon(
        [Point(x, y), Point(x + size, y), Point(x + size, y + size), Point(x, y + size)],
        paint_mode=paint_mode,
    )


def triangle(
    origin: Point,
    size: float,
    pointing: Pointing = Pointing.UP,
    paint_mode: PaintMode = PaintMode.STROKE,
) -> Path:
    """Build an isosceles triangle filling the size x size box."""
    _require_positive("size", size)
    x, y, s = origin.x, origin.y, size
    if pointing is Pointing.UP:
        vertices = [Point(x, y), Point(x + s, y), Point(x + s / 2, y + s)]
    elif pointing is Pointing.RIGHT:
        vertices = [Point(x, y), Point(x + s, y + s / 2), Point(x, y + s)]
    else:
        vertices = [Point(x + s, y), Point(x + s, y + s), Point(x, y + s / 2)]
    return Path.polygon(vertices, paint_mode=paint_mode)


def chevron(
    origin: Point,
    size: float,
    pointing: Pointing,
    closed: bool = False,
    paint_mode: PaintMode = PaintMode.STROKE,
) -> Path:
    """Build an angle bracket (``<`` or ``>``).

    An open chevron is two strokes meeting at the tip. A closed chevron is
    the solid arrowhead triangle with the same three vertices.

    Raises:
        ConfigurationError: If pointing is UP
    """
    _require_positive("size", size)
    if pointing is Pointing.UP:
        raise ConfigurationError("Chevrons point left or right")

    x, y, s = origin.x, origin.y, size
    near, far = x + s * _CHEVRON_INSET, x + s * (1 - _CHEVRON_INSET)
    if pointing is Pointing.RIGHT:
        vertices = [Point(near, y + s), Point(far, y + s / 2), Point(near, y)]
    else:
        vertices = [Point(far, y + s), Point(near, y + s / 2), Point(far, y)]
    return Path.polygon(
        vertices,
        closed=closed,
        paint_mode=paint_mode if closed else PaintMode.STROKE,
    )


def bracket(origin: Point, size: float, side: Side) -> Path:
    """Build an open square bracket (``[`` or ``]``)."""
    _require_positive("size", size)
    x, y, s = origin.x, origin.y, size
    spine, lip = x + s * _BRACKET_INSET, x + s * (1 - _BRACKET_INSET)
    if side is Side.RIGHT:
        spine, lip = lip, spine
    return Path.polygon(
        [Point(lip, y + s), Point(spine, y + s), Point(spine, y), Point(lip, y)],
        closed=False,
    )


def cross(origin: Point, size: float) -> tuple[Path, Path]:
    """Build an X as two open diagonal strokes."""
    _require_positive("size", size)
    x, y, s = origin.x, origin.y, size
    return (
        Path.polygon([Point(x, y), Point(x + s, y + s)], closed=False),
        Path.polygon([Point(x, y + s), Point(x + s, y)], closed=False),
    )


def star(origin: Point, size: float, paint_mode: PaintMode = PaintMode.STROKE) -> Path:
    """Build a five-pointed star with one point straight up.

    The outer vertices lie on the circle inscribed in the size x size box.
    """
    _require_positive("size", size)
    cx, cy = origin.x + size / 2, origin.y + size / 2
    outer = size / 2
    inner = outer * STAR_INNER_RATIO

    vertices = []
    for i in range(10):
        angle = math.radians(90 + 36 * i)
        radius = outer if i % 2 == 0 else inner
        vertices.append(Point(cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return Path.polygon(vertices, paint_mode=paint_mode)


def arrow(
    origin: Point,
    size: float,
    direction: Diagonal,
    filled_head: bool = False,
) -> tuple[Path, Path]:
    """Build a diagonal arrow as a shaft plus a head.

    The shaft runs corner to corner of the box; the head's two barbs run
    along the box edges from the tip. A filled head is a closed triangle
    painted fill-and-stroke, otherwise the head is an open stroke.

    Returns:
        (shaft, head) paths
    """
    _require_positive("size", size)
    x, y, s = origin.x, origin.y, size
    h = s * _ARROW_HEAD
    if direction is Diagonal.DOWN_RIGHT:
        tail, tip = Point(x, y + s), Point(x + s, y)
        head = [Point(x + s - h, y), tip, Point(x + s, y + h)]
    else:
        tail, tip = Point(x + s, y + s), Point(x, y)
        head = [Point(x + h, y), tip, Point(x, y + h)]

    shaft = Path.polygon([tail, tip], closed=False)
    if filled_head:
        return shaft, Path.polygon(head, closed=True, paint_mode=PaintMode.FILL_STROKE)
    return shaft, Path.polygon(head, closed=False)
