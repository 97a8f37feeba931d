"""Core geometric types for vector path representation.

This module defines the value types handed from the path builders to a canvas:
- Point: A 2D coordinate in millimetres
- PathPoint: A point flagged as on-curve anchor or Bezier control point
- Path: An ordered sequence of path points with closure and paint mode
- PaintMode: Whether a path is stroked, or filled and stroked
- RGB: A colour with components in the 0..1 range
"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import NamedTuple

from audiomark.exceptions import ConfigurationError


class PaintMode(Enum):
    """How a canvas paints a path.

    Filling always uses the non-zero winding rule.
    """

    STROKE = auto()
    FILL_STROKE = auto()

    @classmethod
    def for_variant(cls, filled: bool) -> "PaintMode":
        """Return FILL_STROKE for filled symbol variants, STROKE otherwise."""
        return cls.FILL_STROKE if filled else cls.STROKE


class RGB(NamedTuple):
    """Colour with red, green and blue components in 0..1."""

    r: float
    g: float
    b: float


BLACK = RGB(0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in page space.

    Attributes:
        x: X coordinate in millimetres
        y: Y coordinate in millimetres (grows upward)
    """

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> "Point":
        """Return a new point displaced by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class PathPoint:
    """A path vertex.

    Attributes:
        point: Position of the vertex
        is_control: True for a Bezier control point, False for an anchor
    """

    point: Point
    is_control: bool = False

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y


@dataclass(frozen=True, slots=True)
class Path:
    """An ordered sequence of path points forming one primitive shape.

    Control points always come in pairs and each pair is followed by the
    anchor that ends the cubic segment. The first point is always an anchor.
    A closed path implies a straight edge from its last point back to its
    first, so that edge is never repeated in ``points``.

    Attributes:
        points: Vertices in drawing order
        closed: Whether the path is closed
        paint_mode: Stroke only, or fill and stroke
    """

    points: tuple[PathPoint, ...]
    closed: bool = True
    paint_mode: PaintMode = PaintMode.STROKE

    def __post_init__(self) -> None:
        if not self.points:
            raise ConfigurationError("Path must contain at least one point")
        if self.points[0].is_control:
            raise ConfigurationError("Path must start with an anchor")

        pending = 0
        for path_point in self.points:
            if path_point.is_control:
                pending += 1
                if pending > 2:
                    raise ConfigurationError("More than two consecutive control points")
            elif pending not in (0, 2):
                raise ConfigurationError("Bezier segment needs exactly two control points")
            else:
                pending = 0
        if pending:
            raise ConfigurationError("Path ends inside a Bezier segment")

    @classmethod
    def polygon(
        cls,
        vertices: list[Point],
        closed: bool = True,
        paint_mode: PaintMode = PaintMode.STROKE,
    ) -> "Path":
        """Build an anchors-only path from plain points."""
        return cls(
            points=tuple(PathPoint(v) for v in vertices),
            closed=closed,
            paint_mode=paint_mode,
        )

    def anchors(self) -> list[Point]:
        """Return on-curve points in order."""
        return [p.point for p in self.points if not p.is_control]

    def controls(self) -> list[Point]:
        """Return Bezier control points in order."""
        return [p.point for p in self.points if p.is_control]

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Bounding box of all vertices, control points included.

        For the quarter-arc construction used here, control points never
        leave the box spanned by their anchors' tangents, so this is also
        the box of the rendered curve.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def with_paint_mode(self, paint_mode: PaintMode) -> "Path":
        """Return a copy of this path with a different paint mode."""
        return replace(self, paint_mode=paint_mode)
