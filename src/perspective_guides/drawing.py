"""
matplotlib drawing backend for perspective guides.

The figure is exactly the size of the page and its single axes spans the
whole figure with data limits [0, width] x [0, height], so one data unit is
one PostScript point and output is 1:1 when printed.
"""
import logging
from pathlib import Path
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle as RectanglePatch
from perspective_guides import constants

logger = logging.getLogger(__name__)


def hex_colour(colour):
    """'DDDDDD' -> '#DDDDDD' for matplotlib."""
    return "#" + colour.lstrip("#")


def segments_array(segments):
    """(N, 2, 2) array of [start, end] points for a LineCollection."""
    if not segments:
        return np.zeros((0, 2, 2))
    return np.array([[s.start, s.end] for s in segments], dtype=float)


def draw_border_trim(ax, width, height, inset=constants.BORDER_INSET):
    """Paint white bands along the four page edges, hiding line ends at the paper margin."""
    bands = [
        (0.0, 0.0, inset, height),             # left
        (width - inset, 0.0, inset, height),   # right
        (0.0, height - inset, width, inset),   # top
        (0.0, 0.0, width, inset),              # bottom
    ]
    for x, y, w, h in bands:
        ax.add_patch(RectanglePatch((x, y), w, h, facecolor=hex_colour(constants.TRIM_COLOUR),
                                    edgecolor="none", zorder=3))


def build_figure(guide):
    """
    Lay out the whole guide on a page-sized matplotlib Figure.

    Args:
        guide: PerspectiveGuide

    Returns:
        matplotlib.figure.Figure
    """
    width, height = guide.width, guide.height
    fig = Figure(figsize=(width / constants.POINTS_PER_INCH, height / constants.POINTS_PER_INCH))
    ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    ax.set_xlim(0.0, width)
    ax.set_ylim(0.0, height)
    ax.set_axis_off()

    # 1. Perspective lines
    for name, lines in guide.families().items():
        logger.debug("%s: %d lines", name, len(lines))
        ax.add_collection(LineCollection(segments_array(lines), colors=hex_colour(guide.config.colour),
                                         linewidths=constants.LINE_WIDTH, zorder=1))

    # 2. Horizon
    horizon = guide.horizon_line()
    ax.add_collection(LineCollection(segments_array([horizon]), colors=hex_colour(constants.HORIZON_COLOUR),
                                     linewidths=constants.HORIZON_LINE_WIDTH, zorder=2))

    # 3. Trim
    draw_border_trim(ax, width, height)

    # 4. Label
    text_style = dict(fontsize=constants.LABEL_FONT_SIZE, fontfamily=constants.LABEL_FONT_FAMILY, fontstyle="italic",
                      color=hex_colour(constants.LABEL_COLOUR), va="bottom", zorder=4)
    ax.text(constants.BORDER_INSET, constants.LABEL_BASELINE, guide.label(), ha="left", **text_style)
    if guide.config.credit:
        ax.text(width - constants.BORDER_INSET, constants.LABEL_BASELINE, guide.config.credit,
                ha="right", **text_style)

    return fig


def save_guide(guide, path, dpi=constants.DEFAULT_RASTER_DPI):
    """
    Write the guide to a file; the format follows the suffix (pdf, png, svg, ...).

    Args:
        guide: PerspectiveGuide
        path: Output path
        dpi: Resolution for raster formats

    Returns:
        Path of the written file
    """
    path = Path(path)
    fmt = path.suffix.lstrip(".").lower() or "pdf"
    fig = build_figure(guide)
    FigureCanvasAgg(fig)
    fig.savefig(path, format=fmt, dpi=dpi)
    logger.info("Writing to %s", path)
    return path


def render_image(guide, dpi=72):
    """
    Rasterise the guide.

    Returns:
        (H, W, 4) uint8 RGBA array
    """
    fig = build_figure(guide)
    canvas = FigureCanvasAgg(fig)
    fig.set_dpi(dpi)
    canvas.draw()
    return np.asarray(canvas.buffer_rgba()).copy()
