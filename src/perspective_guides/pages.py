"""
Page size resolution: standard names or custom <width>x<height> sizes, in points.
"""
import logging
import re
from perspective_guides import constants
from perspective_guides.exceptions import OrientationError, PageSizeError

logger = logging.getLogger(__name__)

CUSTOM_SIZE_RE = re.compile(r"(\d+)(in|mm)?[xX](\d+)(in|mm)?")


def to_points(value, unit):
    """Convert a length in inches ("in") or millimetres (anything else) to points."""
    if unit == "in":
        return value * constants.POINTS_PER_INCH
    return value * constants.POINTS_PER_MM


def validate_orientation(orientation):
    if orientation not in constants.ORIENTATIONS:
        raise OrientationError(f"Bad orientation: {orientation}")
    return orientation


def resolve_page_size(page_size, orientation=constants.DEFAULT_ORIENTATION):
    """
    Resolve a page size description to (width, height) in points.

    Args:
        page_size: Standard name (e.g. "A4", "letter") or "<W>x<H>" with optional
                   "in"/"mm" suffix per dimension (mm when omitted), e.g. "9inx12in"
        orientation: "portrait" or "landscape"; only applied to standard sizes

    Returns:
        tuple: (width_pt, height_pt)
    """
    validate_orientation(orientation)

    name = page_size.strip().upper()
    if name in constants.PAGE_SIZES:
        short, long = constants.PAGE_SIZES[name]
        if orientation == "portrait":
            return short, long
        return long, short

    match = CUSTOM_SIZE_RE.fullmatch(page_size.strip())
    if match is None:
        raise PageSizeError(f"Bad page size: {page_size}")

    width, width_unit, height, height_unit = match.groups()
    logger.debug("page size: %s%s x %s%s", width, width_unit or "", height, height_unit or "")
    return to_points(int(width), width_unit), to_points(int(height), height_unit)
