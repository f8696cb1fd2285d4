"""
Data structures and interfaces for the ray clipping pipeline.
"""
from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum
import functools
import logging
from perspective_guides import clipping
from perspective_guides.geometry import LineSegment, edge_distances

logger = logging.getLogger(__name__)


class Sector(Enum):
    """The eight angular regions around a vanishing point, counter-clockwise from the right."""
    RIGHT_UPPER = 0
    TOP_RIGHT = 1
    TOP_LEFT = 2
    LEFT_UPPER = 3
    LEFT_LOWER = 4
    BOTTOM_LEFT = 5
    BOTTOM_RIGHT = 6
    RIGHT_LOWER = 7

    @property
    def edge(self):
        """Page edge a ray in this sector leaves through."""
        return self.name.split("_")[0].lower()

    @property
    def faces_left(self):
        """Whether rays in this sector are dropped when the point is off the left side."""
        return self in LEFT_FACING


LEFT_FACING = frozenset({Sector.TOP_LEFT, Sector.LEFT_UPPER, Sector.LEFT_LOWER, Sector.BOTTOM_LEFT})


@functools.lru_cache(maxsize=64)
def _sector_terms(top, bottom, left, right):
    """Cached sector widths and cumulative bounds as hashable tuples."""
    angles = clipping.sector_angles(top, bottom, left, right)
    bounds = clipping.cumulative_bounds(angles)
    return tuple(float(a) for a in angles), tuple(float(s) for s in bounds)


@dataclass(frozen=True)
class SectorTable:
    """
    Sector geometry for one vanishing point on one page.

    Attributes:
        vanishing_point: The point the rays radiate from
        rect: Page rectangle
        distances: EdgeDistances from the point to the page edges
        angles: Widths a0..a7 of the eight sectors (radians)
        bounds: Cumulative sums S0..S7; sector k covers [S(k-1), Sk)
    """
    vanishing_point: object
    rect: object
    distances: object
    angles: tuple
    bounds: tuple

    def __post_init__(self):
        """Validate table sizes and ordering."""
        if len(self.angles) != 8:
            raise ValueError(f"angles must hold 8 sector widths, got {len(self.angles)}")
        if len(self.bounds) != 8:
            raise ValueError(f"bounds must hold 8 cumulative sums, got {len(self.bounds)}")
        if any(b < a for a, b in zip(self.bounds, self.bounds[1:])):
            raise ValueError(f"bounds must be non-decreasing, got {self.bounds}")

    @classmethod
    def from_point(cls, vanishing_point, rect):
        """Build the table for a vanishing point and page rectangle."""
        dist = edge_distances(vanishing_point, rect)
        angles, bounds = _sector_terms(dist.top, dist.bottom, dist.left, dist.right)
        return cls(vanishing_point=vanishing_point, rect=rect, distances=dist,
                   angles=angles, bounds=bounds)

    @property
    def off_left(self):
        return self.distances.off_left

    @property
    def off_right(self):
        return self.distances.off_right

    @property
    def full_turn(self):
        return self.bounds[-1]

    def interval(self, sector):
        """Half-open angle interval [lower, upper) covered by a sector."""
        lower = self.bounds[sector.value - 1] if sector.value > 0 else 0.0
        return lower, self.bounds[sector.value]

    def classify(self, theta):
        """
        Find the sector containing a ray angle.

        Returns:
            Sector, or None when theta lies outside [0, S7)
        """
        if theta < 0:
            return None
        index = bisect_right(self.bounds, theta)
        if index >= len(self.bounds):
            return None
        return Sector(index)

    def is_suppressed(self, sector):
        """Whether rays in a sector are dropped because the point is off that side of the page."""
        if sector.faces_left:
            return self.off_left
        return self.off_right


class RayClipper:
    """
    Responsible for turning ray angles into page-clipped line segments.

    This encapsulates the sector lookup and the per-sector endpoint formulas
    for a single vanishing point.
    """

    def __init__(self, table):
        """
        Initialize with the sector table of the vanishing point.

        Args:
            table: SectorTable for the point and page
        """
        self.table = table

    def endpoint(self, theta, sector):
        """Point where a ray at angle theta in the given sector meets the page boundary."""
        vp = self.table.vanishing_point
        rect = self.table.rect
        solver = clipping.ENDPOINT_SOLVERS[sector.value]
        return solver(theta, self.table.bounds, self.table.distances, vp.x, rect.width, rect.height)

    def clip(self, theta):
        """
        Clip one ray to the page.

        Args:
            theta: Ray angle (radians), counter-clockwise from the horizontal pointing right

        Returns:
            LineSegment from the vanishing point to the page boundary, or None
            when the angle is unclassified or its sector is suppressed
        """
        sector = self.table.classify(theta)
        if sector is None:
            logger.debug("Angle %.6f lies outside the sector table", theta)
            return None
        if self.table.is_suppressed(sector):
            logger.debug("Angle %.6f in %s suppressed (off-canvas)", theta, sector.name)
            return None

        x, y = self.endpoint(theta, sector)
        return LineSegment(start=self.table.vanishing_point.position, end=(float(x), float(y)))
