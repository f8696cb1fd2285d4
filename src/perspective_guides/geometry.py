"""
Geometry primitives for the perspective guide.

Page coordinates are PostScript points with the origin at the bottom-left
corner of the page and y increasing upward.
"""
from dataclasses import dataclass
import math
from perspective_guides import constants
from perspective_guides.exceptions import InvalidGeometry


def deg2rad(deg, legacy=False):
    """
    Convert degrees to radians.

    Args:
        deg: Angle in degrees
        legacy: Use the truncated 0.01745 rad/deg factor of the original tool
                instead of pi/180, for output parity with guides it produced.
    """
    if legacy:
        return deg * constants.LEGACY_RAD_PER_DEG
    return math.radians(deg)


def rad2deg(rad, legacy=False):
    """Convert radians to degrees. See deg2rad for the legacy factor."""
    if legacy:
        return rad / constants.LEGACY_RAD_PER_DEG
    return math.degrees(rad)


@dataclass(frozen=True)
class Rectangle:
    """Page rectangle anchored with its bottom-left corner at the origin."""
    width: float
    height: float

    def __post_init__(self):
        if not (self.width > 0 and self.height > 0):
            raise InvalidGeometry(
                f"page must have positive width and height, got {self.width} x {self.height}")


@dataclass(frozen=True)
class VanishingPoint:
    """
    A vanishing point on the horizon.

    Attributes:
        x: Horizontal position, may be negative or beyond the page width (off-canvas)
        y: Height of the horizon line
        name: Role of the point in the run ("VP1" or "VP2")
    """
    x: float
    y: float
    name: str = "VP1"

    @property
    def position(self):
        return (self.x, self.y)


@dataclass(frozen=True)
class LineSegment:
    """A drawable straight stroke between two page points."""
    start: tuple
    end: tuple

    @property
    def length(self):
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])


@dataclass(frozen=True)
class EdgeDistances:
    """
    Distances from a vanishing point to the lines extending the page edges.

    top and bottom are always positive; left and right are signed and go
    negative when the point lies beyond that side of the page.
    """
    top: float
    bottom: float
    left: float
    right: float

    @property
    def off_left(self):
        return self.left <= 0

    @property
    def off_right(self):
        return self.right <= 0


def validate_horizon(horizon, rect):
    """Raise InvalidGeometry unless the horizon lies strictly inside the page."""
    if not (0 < horizon < rect.height):
        raise InvalidGeometry(
            f"horizon must lie strictly between 0 and the page height {rect.height}, got {horizon}")


def edge_distances(vp, rect):
    """
    Describe the page rectangle relative to a vanishing point.

    Args:
        vp: VanishingPoint on the horizon
        rect: Page Rectangle

    Returns:
        EdgeDistances for the point
    """
    validate_horizon(vp.y, rect)
    return EdgeDistances(
        top=rect.height - vp.y,
        bottom=vp.y,
        left=vp.x,
        right=rect.width - vp.x,
    )
