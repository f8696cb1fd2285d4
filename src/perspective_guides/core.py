import dataclasses
import logging
import math
from perspective_guides import clipping
from perspective_guides.config import GuideConfig, resolve
from perspective_guides.exceptions import InvalidGeometry
from perspective_guides.geometry import LineSegment, deg2rad, rad2deg
from perspective_guides.sectors import RayClipper, SectorTable

logger = logging.getLogger(__name__)


def line_count(angle_deg):
    """Number of angular steps in a full turn; the step need not divide 360."""
    if not angle_deg > 0:
        raise InvalidGeometry(f"angle increment must be positive, got {angle_deg}")
    return int(math.floor(360.0 / angle_deg))


def generate_perspective_lines(vanishing_point, rect, angle_deg, legacy=False):
    """
    Rays from one vanishing point to the page boundary.

    Rays are cast at i * angle for i = 1 .. floor(360 / angle) - 1; the ray at
    angle 0 is never drawn. Rays in sectors facing an off-canvas side are skipped.

    Args:
        vanishing_point: VanishingPoint the family radiates from
        rect: Page Rectangle
        angle_deg: Angle between neighbouring rays (degrees)
        legacy: Use the truncated degree-to-radian factor

    Returns:
        list[LineSegment] in increasing angle order
    """
    table = SectorTable.from_point(vanishing_point, rect)
    clipper = RayClipper(table)

    logger.debug("Drawing lines for %s", vanishing_point.name)
    logger.debug("top: %s bottom: %s left: %s right: %s", table.distances.top,
                 table.distances.bottom, table.distances.left, table.distances.right)
    logger.debug("Off left: %s Off right: %s", table.off_left, table.off_right)
    for a, s in zip(table.angles, table.bounds):
        logger.debug("sector %s - %s deg, sum %s deg", a, rad2deg(a, legacy), rad2deg(s, legacy))

    step = deg2rad(angle_deg, legacy)
    lines = []
    for i, theta in enumerate(clipping.ray_angles(step, count=line_count(angle_deg)), start=1):
        segment = clipper.clip(theta)
        if segment is None:
            continue
        logger.debug("Line %d from %s to %s", i, segment.start, segment.end)
        lines.append(segment)
    return lines


class PerspectiveGuide:
    def __init__(self, config=None, **overrides):
        """
        Initialize a perspective guide from its run configuration.

        Args:
            config: GuideConfig; defaults are used when omitted
            **overrides: GuideConfig fields replacing those of config

        Coordinate System:
        - Origin (0,0): bottom-left corner of the page, y up, units are points.
        - Horizon: horizontal line at self.horizon shared by both vanishing points.
        """
        if config is None:
            config = GuideConfig(**overrides)
        elif overrides:
            config = dataclasses.replace(config, **overrides)

        self.config = config
        self.geometry = resolve(config)
        self.rect = self.geometry.rect
        self.horizon = self.geometry.horizon
        self.vanishing_points = self.geometry.vanishing_points

    @property
    def width(self):
        return self.rect.width

    @property
    def height(self):
        return self.rect.height

    @property
    def one_point(self):
        return len(self.vanishing_points) == 1

    @property
    def line_count(self):
        return line_count(self.config.angle)

    def perspective_lines(self, vanishing_point):
        """Clipped rays for one vanishing point."""
        return generate_perspective_lines(vanishing_point, self.rect, self.config.angle,
                                          self.config.legacy_angles)

    def families(self):
        """
        Line families for every configured vanishing point.

        Returns:
            dict mapping vanishing point name ("VP1", "VP2") to its list of LineSegments
        """
        return {vp.name: self.perspective_lines(vp) for vp in self.vanishing_points}

    def horizon_line(self):
        return LineSegment(start=(0.0, self.horizon), end=(self.width, self.horizon))

    def label(self):
        """Caption stamped at the bottom of the page."""
        cfg = self.config
        if cfg.vp1 is None:
            points = f"VP1: {cfg.vp2}% right"
        elif cfg.vp2 is None:
            points = f"VP1: {cfg.vp1}% left"
        else:
            points = f"VP1: {cfg.vp1}% left, VP2: {cfg.vp2}% right"
        return (f"Perspective guide. Horizon: {cfg.horizon}%, {points}, "
                f"Angle: {cfg.angle:g} deg")

    def default_filename(self):
        """Output file name describing the guide, used when none is given."""
        cfg = self.config
        first, second = (cfg.vp1, cfg.vp2) if cfg.vp1 is not None else (cfg.vp2, None)
        vp2_section = "" if second is None else f"-{second}"
        kind = "one" if self.one_point else "two"
        return (f"{cfg.orientation}-{cfg.page_size}-{cfg.horizon}%-{kind}-point-"
                f"{first}{vp2_section}-{cfg.angle:g}.pdf")
