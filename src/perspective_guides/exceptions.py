"""
Error types raised while validating a perspective guide configuration.

All of them derive from ValueError so callers that only care about
"bad input" can keep catching the builtin.
"""


class GuideError(ValueError):
    """Base class for configuration and geometry errors."""


class InvalidGeometry(GuideError):
    """Page rectangle, horizon or angle step outside their valid ranges."""


class NoVanishingPoint(GuideError):
    """Neither the left nor the right vanishing point was supplied."""


class PageSizeError(GuideError):
    """Page size is neither a known name nor <width>x<height> with in/mm units."""


class OrientationError(GuideError):
    """Orientation is not one of 'portrait' or 'landscape'."""


class InvalidColour(GuideError):
    """Colour is not a six digit hex string."""
