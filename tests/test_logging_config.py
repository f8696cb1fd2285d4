import logging
import pytest
from perspective_guides.logging_config import setup_logging


def test_repeated_setup_keeps_one_handler():
    logger = setup_logging()
    setup_logging(logging.DEBUG)

    assert logger is logging.getLogger("perspective_guides")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def test_child_loggers_reach_stdout(capsys):
    setup_logging(logging.INFO)
    logging.getLogger("perspective_guides.core").debug("hidden")
    logging.getLogger("perspective_guides.core").info("shown")

    out = capsys.readouterr().out
    assert "perspective_guides.core - INFO - shown" in out
    assert "hidden" not in out


if __name__ == "__main__":
    pytest.main([__file__])
