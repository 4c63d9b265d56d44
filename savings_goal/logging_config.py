"""
Logging setup shared by the API and any script driving the solver.

Modules log through ``logging.getLogger(__name__)``; this module only wires
the ``savings_goal`` logger to a stream handler once.
"""

import logging
from typing import Union

ROOT_LOGGER = "savings_goal"

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGING_CONFIGURED = False


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Calling it again only updates the level, so app factories and tests can
    call it freely.
    """
    global _LOGGING_CONFIGURED

    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not _LOGGING_CONFIGURED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        _LOGGING_CONFIGURED = True

    return logger
