"""Logging configuration helpers."""

import logging

_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the gallery logger at the given level.

    httpx logs every request at INFO; it is held at WARNING so periodic
    refreshes do not flood the output.
    """
    logger = logging.getLogger("github_gallery")
    logger.setLevel(level.upper())
    logging.getLogger("httpx").setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
