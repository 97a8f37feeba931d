"""Quarter-circle approximation with a single cubic Bezier segment.

Every rounded outline in audiomark (rounded rectangle corners, capsule ends
and full circles) is assembled from ``quarter_arc``. A path is always traced
counter-clockwise, so the four quadrants are the four left turns a path can
take at a corner.
"""

from enum import Enum

from audiomark.domain import PathPoint, Point
from audiomark.exceptions import ConfigurationError

# Control point distance as a fraction of the radius. Slightly smaller than
# 4(sqrt(2)-1)/3; minimises the maximum radial error (about 0.02%).
BEZIER_ARC_K = 0.55191505


class Quadrant(Enum):
    """Counter-clockwise corner turn, as (heading in, heading out) unit vectors."""

    BOTTOM_RIGHT = ((1.0, 0.0), (0.0, 1.0))
    TOP_RIGHT = ((0.0, 1.0), (-1.0, 0.0))
    TOP_LEFT = ((-1.0, 0.0), (0.0, -1.0))
    BOTTOM_LEFT = ((0.0, -1.0), (1.0, 0.0))

    @property
    def heading_in(self) -> tuple[float, float]:
        return self.value[0]

    @property
    def heading_out(self) -> tuple[float, float]:
        return self.value[1]


def quarter_arc(start: Point, radius: float, quadrant: Quadrant) -> list[PathPoint]:
    """Continue a path with a quarter circle starting at ``start``.

    The arc leaves ``start`` travelling along the quadrant's incoming heading
    and arrives at the end anchor travelling along its outgoing heading. Each
    control point sits ``radius * BEZIER_ARC_K`` from its anchor along the
    tangent at that anchor.

    Args:
        start: Anchor the arc starts from (already on the path)
        radius: Arc radius in millimetres
        quadrant: Which corner turn to take

    Returns:
        Three path points: two controls followed by the end anchor

    Raises:
        ConfigurationError: If radius is negative

    Examples:
        >>> pts = quarter_arc(Point(0.0, 0.0), 1.0, Quadrant.BOTTOM_RIGHT)
        >>> pts[-1].point
        Point(x=1.0, y=1.0)
    """
    if radius < 0:
        raise ConfigurationError(f"Arc radius must not be negative, got {radius}")

    (ix, iy), (ox, oy) = quadrant.value
    handle = radius * BEZIER_ARC_K

    end = start.offset(radius * (ix + ox), radius * (iy + oy))
    first = start.offset(handle * ix, handle * iy)
    second = end.offset(-handle * ox, -handle * oy)

    return [
        PathPoint(first, is_control=True),
        PathPoint(second, is_control=True),
        PathPoint(end),
    ]
