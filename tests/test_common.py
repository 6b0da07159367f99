import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from common import setup_logging


def test_setup_logging_adds_handlers_once(tmp_path):
    logfile = tmp_path / "logs" / "export.log"
    logger = setup_logging("sheet_export_test", str(logfile))
    try:
        assert len(logger.handlers) == 2
        assert logger.level == logging.INFO
        again = setup_logging("sheet_export_test", str(logfile), debug=True)
        assert again is logger
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG

        logger.info("hello file")
        for h in logger.handlers:
            h.flush()
        assert "INFO hello file" in logfile.read_text(encoding="utf-8")
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
