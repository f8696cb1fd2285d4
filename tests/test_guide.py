import pytest
from perspective_guides import constants
from perspective_guides.config import GuideConfig
from perspective_guides.core import PerspectiveGuide, generate_perspective_lines, line_count
from perspective_guides.exceptions import InvalidGeometry, NoVanishingPoint

A4_LONG, A4_SHORT = 841.89, 595.28


def test_one_point_family():
    guide = PerspectiveGuide(vp1=50)
    families = guide.families()

    assert guide.one_point
    assert list(families) == ["VP1"]
    assert len(families["VP1"]) == 11


def test_two_point_families_independent(two_point_config):
    guide = PerspectiveGuide(two_point_config)
    families = guide.families()

    assert not guide.one_point
    assert list(families) == ["VP1", "VP2"]
    for vp in guide.vanishing_points:
        assert families[vp.name] == generate_perspective_lines(vp, guide.rect, two_point_config.angle)
        assert all(s.start == (vp.x, guide.horizon) for s in families[vp.name])


def test_vanishing_point_positions(two_point_config):
    """Percentages run from the page centre towards the 10 pt border inset."""
    guide = PerspectiveGuide(two_point_config)
    half = A4_LONG / 2.0
    vp1, vp2 = guide.vanishing_points

    assert vp1.x == pytest.approx(half - (half - constants.BORDER_INSET) * 0.30)
    assert vp2.x == pytest.approx(half + (half - constants.BORDER_INSET) * 0.40)
    assert vp1.y == vp2.y == pytest.approx(A4_SHORT / 2.0)


def test_vp2_only_promoted_to_vp1():
    guide = PerspectiveGuide(vp2=40)
    half = A4_LONG / 2.0

    assert len(guide.vanishing_points) == 1
    (vp,) = guide.vanishing_points
    assert vp.name == "VP1"
    assert vp.x == pytest.approx(half + (half - constants.BORDER_INSET) * 0.40)
    assert list(guide.families()) == ["VP1"]


def test_off_canvas_point_is_not_an_error():
    """vp1 beyond 100% puts the point left of the page; its lines still draw."""
    guide = PerspectiveGuide(vp1=150, vp2=150)
    vp1, vp2 = guide.vanishing_points
    assert vp1.x < 0
    assert vp2.x > guide.width
    families = guide.families()
    assert families["VP1"] and families["VP2"]
    assert all(s.end[0] != 0.0 for s in families["VP1"])
    assert all(s.end[0] != guide.width for s in families["VP2"])


def test_missing_vanishing_points():
    with pytest.raises(NoVanishingPoint):
        PerspectiveGuide(GuideConfig())


@pytest.mark.parametrize("horizon", [0, 100, -5, 150])
def test_horizon_outside_page(horizon):
    with pytest.raises(InvalidGeometry):
        PerspectiveGuide(vp1=50, horizon=horizon)


@pytest.mark.parametrize("angle", [0, -30])
def test_non_positive_angle(angle):
    with pytest.raises(InvalidGeometry):
        PerspectiveGuide(vp1=50, angle=angle)
    with pytest.raises(InvalidGeometry):
        line_count(angle)


def test_line_count():
    assert line_count(30) == 12
    assert line_count(7) == 51
    assert line_count(90) == 4
    assert line_count(360) == 1


def test_horizon_line():
    guide = PerspectiveGuide(vp1=0, horizon=25, orientation="portrait")
    horizon = guide.horizon_line()
    assert horizon.start == (0.0, pytest.approx(A4_LONG * 0.25))
    assert horizon.end == (A4_SHORT, pytest.approx(A4_LONG * 0.25))


def test_overrides_replace_config_fields(two_point_config):
    guide = PerspectiveGuide(two_point_config, angle=45)
    assert guide.config.angle == 45
    assert guide.config.vp1 == 30
    assert guide.line_count == 8


def test_label():
    assert PerspectiveGuide(vp1=30, vp2=40).label() == \
        "Perspective guide. Horizon: 50%, VP1: 30% left, VP2: 40% right, Angle: 30 deg"
    assert PerspectiveGuide(vp1=30).label() == \
        "Perspective guide. Horizon: 50%, VP1: 30% left, Angle: 30 deg"
    assert PerspectiveGuide(vp2=40, angle=15).label() == \
        "Perspective guide. Horizon: 50%, VP1: 40% right, Angle: 15 deg"


def test_default_filename():
    assert PerspectiveGuide(vp1=30, vp2=40).default_filename() == \
        "landscape-A4-50%-two-point-30-40-30.pdf"
    assert PerspectiveGuide(vp2=40, horizon=33, page_size="LETTER",
                            orientation="portrait").default_filename() == \
        "portrait-LETTER-33%-one-point-40-30.pdf"


@pytest.mark.parametrize("angle,text", [(7.5, "7.5"), (8, "8"), (22.5, "22.5"), (2.5, "2.5"), (3.5, "3.5")])
def test_fractional_angle_kept_in_label_and_filename(angle, text):
    """Fractional steps are printed as given, never rounded to a whole degree."""
    guide = PerspectiveGuide(vp1=50, angle=angle)
    assert guide.label().endswith(f"Angle: {text} deg")
    assert guide.default_filename() == f"landscape-A4-50%-one-point-50-{text}.pdf"


def test_close_angles_get_distinct_filenames():
    assert PerspectiveGuide(vp1=50, angle=7.5).default_filename() != \
        PerspectiveGuide(vp1=50, angle=8).default_filename()



if __name__ == "__main__":
    pytest.main([__file__])
