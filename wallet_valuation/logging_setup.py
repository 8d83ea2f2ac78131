"""Root logger configuration."""
from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Libraries that are chatty at DEBUG and add nothing useful to our output.
_NOISY_LOGGERS = ("aiohttp", "asyncio")


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger.

    Unknown level names fall back to INFO.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    logging.basicConfig(format=_FORMAT, force=True)
    logging.getLogger().setLevel(numeric)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
