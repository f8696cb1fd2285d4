"""
Console logging for the perspective guide command line tools.
"""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Send the 'perspective_guides' logger to stdout at the given level.

    Repeated calls replace the handler instead of stacking another one.
    """
    logger = logging.getLogger("perspective_guides")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                           datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    return logger
