"""
Run configuration for a perspective guide.

GuideConfig holds the values a user supplies (page size, horizon and
vanishing point percentages, angle step, colour). resolve() validates them
and turns them into page coordinates in points.
"""
from dataclasses import dataclass
import logging
import re
from typing import Optional
from perspective_guides import constants
from perspective_guides.exceptions import InvalidColour, InvalidGeometry, NoVanishingPoint
from perspective_guides.geometry import Rectangle, VanishingPoint, validate_horizon
from perspective_guides.pages import resolve_page_size

logger = logging.getLogger(__name__)

HEX_COLOUR_RE = re.compile(r"[0-9a-fA-F]{6}")


@dataclass(frozen=True)
class GuideConfig:
    """
    User-level settings for one guide.

    Attributes:
        page_size: Standard page name or "<W>x<H>" with in/mm units
        orientation: "portrait" or "landscape" (standard sizes only)
        horizon: Height of the horizon line, % of page height
        vp1: Left vanishing point, % of the way from centre to the left border (may exceed 100)
        vp2: Right vanishing point, % of the way from centre to the right border (may exceed 100)
        angle: Angle between neighbouring rays (degrees)
        colour: Stroke colour of the perspective lines, six hex digits
        legacy_angles: Use the original tool's truncated degree-to-radian factor
        credit: Optional text stamped at the bottom-right of the page
    """
    page_size: str = constants.DEFAULT_PAGE_SIZE
    orientation: str = constants.DEFAULT_ORIENTATION
    horizon: float = constants.DEFAULT_HORIZON_PERCENT
    vp1: Optional[int] = None
    vp2: Optional[int] = None
    angle: float = constants.DEFAULT_ANGLE_DEGREES
    colour: str = constants.DEFAULT_COLOUR
    legacy_angles: bool = False
    credit: Optional[str] = None

    @property
    def one_point(self):
        return self.vp1 is None or self.vp2 is None


@dataclass(frozen=True)
class PageGeometry:
    """
    Resolved page coordinates for one run.

    Attributes:
        rect: Page rectangle (points)
        horizon: Horizon height (points)
        vanishing_points: One or two VanishingPoints; the first always plays the VP1 role
    """
    rect: Rectangle
    horizon: float
    vanishing_points: tuple


def vanishing_point_offsets(width, vp1=None, vp2=None):
    """
    Horizontal positions of the vanishing points.

    Percentages are measured from the page centre towards the border inset,
    so 100% puts the point on the inset and larger values push it off the page.

    Returns:
        tuple: (x1, x2) with None for an absent point
    """
    half_x = width / 2.0
    half_x_less_border = half_x - constants.BORDER_INSET
    x1 = None if vp1 is None else half_x - (half_x_less_border * vp1) / 100.0
    x2 = None if vp2 is None else half_x + (half_x_less_border * vp2) / 100.0
    return x1, x2


def validate_colour(colour):
    if not HEX_COLOUR_RE.fullmatch(colour.lstrip("#")):
        raise InvalidColour(f"Bad colour: {colour}")
    return colour.lstrip("#").upper()


def resolve(config):
    """
    Validate a GuideConfig and compute its page geometry.

    Raises:
        NoVanishingPoint: neither vp1 nor vp2 is set
        PageSizeError, OrientationError: the page cannot be resolved
        InvalidGeometry: horizon or angle step out of range
        InvalidColour: colour is not six hex digits

    Returns:
        PageGeometry
    """
    if config.vp1 is None and config.vp2 is None:
        raise NoVanishingPoint("Must supply at least one vanishing point")
    if not config.angle > 0:
        raise InvalidGeometry(f"angle increment must be positive, got {config.angle}")
    validate_colour(config.colour)

    width, height = resolve_page_size(config.page_size, config.orientation)
    rect = Rectangle(width, height)

    horizon = (height * float(config.horizon)) / 100.0
    validate_horizon(horizon, rect)

    x1, x2 = vanishing_point_offsets(width, config.vp1, config.vp2)
    if x1 is None:
        # Single point given as VP2 takes the VP1 role
        points = (VanishingPoint(x2, horizon, "VP1"),)
    elif x2 is None:
        points = (VanishingPoint(x1, horizon, "VP1"),)
    else:
        points = (VanishingPoint(x1, horizon, "VP1"), VanishingPoint(x2, horizon, "VP2"))

    logger.debug("Width: %s", width)
    logger.debug("Height: %s", height)
    logger.debug("Horizon: %s", horizon)
    logger.debug("%s point perspective", "one" if config.one_point else "two")
    for vp in points:
        logger.debug("%s: x = %s", vp.name, vp.x)

    return PageGeometry(rect=rect, horizon=horizon, vanishing_points=points)
