"""Logging configuration helpers."""

import logging

LOGGER_NAME = "cafeteria_voting"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure application logging with a single stream handler.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
