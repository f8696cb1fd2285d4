"""
Pytest fixtures and configuration for perspective guide tests.

This module provides shared pages, vanishing points and helpers so the
individual test modules stay focused on behaviour.
"""

import math
import pytest
from perspective_guides.config import GuideConfig
from perspective_guides.geometry import Rectangle, VanishingPoint
from perspective_guides.sectors import SectorTable


@pytest.fixture
def page():
    """800 x 600 point page used by the reference scenarios."""
    return Rectangle(800.0, 600.0)


@pytest.fixture
def centred_point():
    """Vanishing point dead centre of the 800 x 600 page."""
    return VanishingPoint(400.0, 300.0)


@pytest.fixture
def vanishing_points():
    """Common vanishing points on a 300 pt horizon."""
    return {
        'centre': VanishingPoint(400.0, 300.0),
        'left_third': VanishingPoint(250.0, 300.0),
        'off_left': VanishingPoint(-50.0, 300.0),
        'off_right': VanishingPoint(850.0, 300.0, "VP2"),
        'left_edge': VanishingPoint(0.0, 300.0),
        'right_edge': VanishingPoint(800.0, 300.0),
    }


@pytest.fixture
def centred_table(page, centred_point):
    return SectorTable.from_point(centred_point, page)


@pytest.fixture
def two_point_config():
    """Two point perspective on landscape A4."""
    return GuideConfig(vp1=30, vp2=40)


@pytest.fixture
def assert_on_boundary():
    """Assertion that a point lies on the page rectangle's boundary."""
    def check(point, rect, tol=1e-6, err_msg=""):
        x, y = point
        on_vertical = math.isclose(x, 0.0, abs_tol=tol) or math.isclose(x, rect.width, abs_tol=tol)
        on_horizontal = math.isclose(y, 0.0, abs_tol=tol) or math.isclose(y, rect.height, abs_tol=tol)
        assert on_vertical or on_horizontal, f"{point} is not on the page boundary - {err_msg}"

    return check


@pytest.fixture
def direction_angle():
    """Angle of a segment from its start point, in [0, 2*pi)."""
    def angle(segment):
        dx = segment.end[0] - segment.start[0]
        dy = segment.end[1] - segment.start[1]
        return math.atan2(dy, dx) % (2.0 * math.pi)
    return angle
