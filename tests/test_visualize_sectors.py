import numpy as np
import pytest
from matplotlib.patches import Polygon
from perspective_guides import constants
from perspective_guides.sectors import Sector, SectorTable
from perspective_guides.tools.visualize_sectors import main, plot_sectors, sector_polygon


def test_sector_polygon_on_page(centred_table):
    """Sector outlines start at the vanishing point and end on the page boundary."""
    for sector in Sector:
        outline = sector_polygon(centred_table, sector)
        assert outline is not None
        np.testing.assert_allclose(outline[0], (400.0, 300.0))
        assert np.all(np.isfinite(outline))


def test_empty_sector_has_no_polygon(page, vanishing_points):
    table = SectorTable.from_point(vanishing_points['left_edge'], page)
    assert sector_polygon(table, Sector.TOP_LEFT) is None
    assert sector_polygon(table, Sector.BOTTOM_LEFT) is None


def test_plot_sectors_colours(page, vanishing_points):
    table = SectorTable.from_point(vanishing_points['off_left'], page)
    ax = plot_sectors(table)
    wedges = [p for p in ax.patches if isinstance(p, Polygon)]

    assert len(wedges) == 8
    by_name = {w.get_label(): w for w in wedges}
    grey = constants.SUPPRESSED_COLOR
    np.testing.assert_allclose(by_name["LEFT_UPPER"].get_facecolor()[:3], grey)
    np.testing.assert_allclose(by_name["RIGHT_UPPER"].get_facecolor()[:3], constants.SECTOR_COLORS[0])
    # View widened to include the off-canvas point
    assert ax.get_xlim()[0] < -50.0


def test_main_writes_png(tmp_path, capsys):
    out = tmp_path / "sectors.png"
    main(["--vx", "-50", "--out", str(out)])
    assert out.exists()
    assert "Sector plot written" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__])
