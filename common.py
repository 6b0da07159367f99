# Shared utilities for the sheet exporter
import os
import logging
from typing import Optional


def setup_logging(name: Optional[str], logfile: str, debug: bool = False) -> logging.Logger:
    """
    Configure and return a logger that writes to 'logfile' and the console.

    Passing name=None configures the root logger, so module-level
    logging.* calls end up in the same places. Handlers are only added once
    per logger name; the level is updated on every call.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if logger.handlers:
        return logger

    fmt = logging.Formatter('%(asctime)s %(levelname)s %(message)s')
    log_dir = os.path.dirname(logfile)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = logging.FileHandler(logfile, encoding='utf-8')
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)

    return logger
