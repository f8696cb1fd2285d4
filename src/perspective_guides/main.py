import argparse
import logging
import sys
from perspective_guides import constants
from perspective_guides.config import GuideConfig
from perspective_guides.core import PerspectiveGuide
from perspective_guides.drawing import save_guide
from perspective_guides.exceptions import GuideError
from perspective_guides.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser():
    # -h is the horizon, so help moves to -?
    parser = argparse.ArgumentParser(description="Perspective guide generator", add_help=False)
    parser.add_argument("-f", "--file", help="output filename; derived from the settings when omitted")
    parser.add_argument("-p", "--page-size", default=constants.DEFAULT_PAGE_SIZE,
                        help="page size, either a standard size (eg. A4) or <width>x<height> "
                             "in mm or in (eg. 9inx12in) (default A4)")
    parser.add_argument("-h", "--horizon", type=int, default=constants.DEFAULT_HORIZON_PERCENT,
                        help="how far up is the horizon line, in %% of page height (default 50)")
    parser.add_argument("-1", "--vp1", type=int, default=None,
                        help="position of the lefthand vanishing point, in %% from center to left edge "
                             "(can be > 100; pass negative values as --vp1=-50)")
    parser.add_argument("-2", "--vp2", type=int, default=None,
                        help="position of the righthand vanishing point, in %% from center to right edge "
                             "(can be > 100; pass negative values as --vp2=-50)")
    parser.add_argument("-a", "--angle", type=float, default=constants.DEFAULT_ANGLE_DEGREES,
                        help="angle increment of lines from each vanishing point (default 30)")
    parser.add_argument("-c", "--colour", default=constants.DEFAULT_COLOUR,
                        help="colour of the perspective lines as hex (default 000000)")
    parser.add_argument("-o", "--orientation", default=constants.DEFAULT_ORIENTATION,
                        help="portrait or landscape, ignored for custom <width>x<height> sizes "
                             "(default landscape)")
    parser.add_argument("--credit", default=None, help="text printed at the bottom right of the page")
    parser.add_argument("--legacy-angles", action="store_true",
                        help="use the truncated 0.01745 rad/deg factor of the original tool")
    parser.add_argument("--dpi", type=int, default=constants.DEFAULT_RASTER_DPI,
                        help="resolution for png output")

    other = parser.add_argument_group("other options")
    other.add_argument("-v", "--verbose", action="store_true", help="show informational output")
    other.add_argument("--ui", action="store_true", help="launch the interactive Gradio preview")
    other.add_argument("--version", action="version", version=constants.VERSION,
                       help="print the version number")
    other.add_argument("-?", "--help", action="help", help="print options")
    return parser


def config_from_args(args):
    return GuideConfig(
        page_size=args.page_size,
        orientation=args.orientation,
        horizon=args.horizon,
        vp1=args.vp1,
        vp2=args.vp2,
        angle=args.angle,
        colour=args.colour,
        legacy_angles=args.legacy_angles,
        credit=args.credit,
    )


def generate(config, output_filename=None, dpi=constants.DEFAULT_RASTER_DPI):
    """Build the guide for a configuration and write it out. Returns the output path."""
    guide = PerspectiveGuide(config)
    logger.debug("%s", config)
    logger.debug("angle: %s deg, %d lines", config.angle, guide.line_count)
    return save_guide(guide, output_filename or guide.default_filename(), dpi=dpi)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.ui:
        from perspective_guides.ui import create_ui
        logger.info("Launching UI...")
        demo = create_ui()
        demo.launch()
        return 0

    try:
        generate(config_from_args(args), args.file, dpi=args.dpi)
    except GuideError as exc:
        logger.error("%s", exc)
        return 1
    return 0


def run_ui():
    """Entry point for perspective-guide-ui command."""
    return main(sys.argv[1:] + ["--ui"])


if __name__ == "__main__":
    sys.exit(main())
