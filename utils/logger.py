"""
PF2e Reference: N/A (tooling).
Purpose: Consistent logger setup for grid measurement and highlighting.
Dependencies: logging, os, core/config.py.
Ext Hooks: Route logs into the viewer's message area.
"""

import logging
import os
from typing import Optional
from core.config import LOG_LEVEL

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str,
               file_path: Optional[str] = None,
               level: int = LOG_LEVEL) -> logging.Logger:
    """
    Logger with a single shared format. Writes to stderr, and to file_path when given.
    Handlers are attached only the first time a name is requested.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    if file_path is not None:
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fh = logging.FileHandler(file_path, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    logger.propagate = False
    return logger
