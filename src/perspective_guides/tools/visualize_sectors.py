import argparse
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon, Rectangle
from perspective_guides import constants
from perspective_guides.geometry import Rectangle as PageRectangle, VanishingPoint
from perspective_guides.sectors import RayClipper, Sector, SectorTable


def sector_polygon(table, sector, samples=16):
    """
    Outline of the page region reached by rays of one sector.

    Ray endpoints across the sector's angle interval are joined back to the
    vanishing point, giving a triangle (or thin wedge) against the page edge.
    """
    clipper = RayClipper(table)
    lower, upper = table.interval(sector)
    if upper <= lower:
        return None
    # Stay just inside the half-open interval so every sample classifies as this sector
    thetas = np.linspace(lower, upper, samples, endpoint=False)
    points = [table.vanishing_point.position]
    points.extend(clipper.endpoint(theta, sector) for theta in thetas)
    points.append(clipper.endpoint(np.nextafter(upper, lower), sector))
    return np.array(points, dtype=float)


def plot_sectors(table, ax=None):
    """
    Draw the eight sectors of a vanishing point over its page.

    Suppressed sectors are drawn in grey. Returns the axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))

    rect = table.rect
    vp = table.vanishing_point
    for sector in Sector:
        outline = sector_polygon(table, sector)
        if outline is None:
            continue
        if table.is_suppressed(sector):
            color = constants.SUPPRESSED_COLOR
        else:
            color = constants.SECTOR_COLORS[sector.value % len(constants.SECTOR_COLORS)]
        ax.add_patch(Polygon(outline, closed=True, facecolor=color, edgecolor="k",
                             linewidth=0.5, alpha=0.6, label=sector.name))

    ax.add_patch(Rectangle((0, 0), rect.width, rect.height, fill=False, edgecolor="k", linewidth=1.5))
    ax.axhline(vp.y, color="r", linewidth=0.8)
    ax.plot([vp.x], [vp.y], marker="o", color="k")

    # Include off-canvas points in view
    margin = 0.1 * rect.width
    ax.set_xlim(min(0.0, vp.x) - margin, max(rect.width, vp.x) + margin)
    ax.set_ylim(-margin, rect.height + margin)
    ax.set_aspect("equal", adjustable="box")
    ax.set_title(f"{vp.name} sectors (off left: {table.off_left}, off right: {table.off_right})")
    ax.legend(loc="upper right", fontsize=6)
    return ax


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot the clipping sectors of a vanishing point")
    parser.add_argument("--width", type=float, default=800.0)
    parser.add_argument("--height", type=float, default=600.0)
    parser.add_argument("--horizon", type=float, default=300.0, help="horizon height in points")
    parser.add_argument("--vx", type=float, default=400.0, help="vanishing point x in points")
    parser.add_argument("--out", default="sectors.png")
    args = parser.parse_args(argv)

    table = SectorTable.from_point(VanishingPoint(args.vx, args.horizon),
                                   PageRectangle(args.width, args.height))
    ax = plot_sectors(table)
    ax.figure.savefig(args.out, dpi=150, bbox_inches="tight")
    plt.close(ax.figure)
    print(f"Sector plot written to {args.out}")


if __name__ == "__main__":
    main()
