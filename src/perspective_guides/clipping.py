"""
Ray-rectangle clipping calculations for the perspective guide.

This module contains the closed-form solvers behind the sector table: the
eight angular widths around a vanishing point and, for each sector, the point
where a ray leaves the page.

Angles are measured from the horizontal pointing right, turning counter-clockwise.
"""
import math
import numpy as np


def sector_angles(top, bottom, left, right):
    """
    Angular widths of the eight triangular regions around a vanishing point.

    The order runs counter-clockwise from the horizontal pointing right:
    right-upper, top-right, top-left, left-upper, left-lower, bottom-left,
    bottom-right, right-lower. Only the magnitude of left/right matters here;
    their sign decides which sectors are suppressed.

    Args:
        top, bottom: Distances from the horizon to the top and bottom edges
        left, right: Signed distances from the point to the left and right edges

    Returns:
        Array of 8 angles (radians), each in [0, pi/2]
    """
    l = abs(left)
    r = abs(right)

    # atan2 keeps a zero distance (point on a page edge) finite: atan(x/0) -> pi/2
    numerators = np.array([top, r, l, top, bottom, l, r, bottom], dtype=float)
    denominators = np.array([r, top, top, l, l, bottom, bottom, r], dtype=float)
    return np.arctan2(numerators, denominators)


def cumulative_bounds(angles):
    """
    Running sums S0..S7 of the sector widths.

    Each quadrant contributes atan(x) + atan(1/x) = pi/2, so S7 is a full turn.
    """
    return np.cumsum(angles)


def right_upper(theta, bounds, dist, vx, width, height):
    return (width, dist.bottom + dist.right * math.tan(theta))


def top_right(theta, bounds, dist, vx, width, height):
    return (vx + dist.top * math.tan(bounds[1] - theta), height)


def top_left(theta, bounds, dist, vx, width, height):
    return (vx - dist.top * math.tan(theta - bounds[1]), height)


def left_upper(theta, bounds, dist, vx, width, height):
    return (0.0, dist.bottom + dist.left * math.tan(bounds[3] - theta))


def left_lower(theta, bounds, dist, vx, width, height):
    return (0.0, dist.bottom - dist.left * math.tan(theta - bounds[3]))


def bottom_left(theta, bounds, dist, vx, width, height):
    return (vx - dist.bottom * math.tan(bounds[5] - theta), 0.0)


def bottom_right(theta, bounds, dist, vx, width, height):
    return (vx + dist.bottom * math.tan(theta - bounds[5]), 0.0)


def right_lower(theta, bounds, dist, vx, width, height):
    return (width, dist.bottom - dist.right * math.tan(bounds[7] - theta))


# Indexed by sector number, same order as sector_angles()
ENDPOINT_SOLVERS = (
    right_upper,
    top_right,
    top_left,
    left_upper,
    left_lower,
    bottom_left,
    bottom_right,
    right_lower,
)


def ray_angles(step, count):
    """
    Ray angles i * step for i = 1 .. count - 1.

    Args:
        step: Angle increment (radians)
        count: Number of steps around the point, including the skipped i = 0

    Returns:
        Array of angles (radians); the zero angle is never included
    """
    return np.arange(1, count) * step
