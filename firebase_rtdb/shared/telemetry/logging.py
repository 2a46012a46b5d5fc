"""Logging configuration for applications using the client.

The library itself only creates loggers; call setup_logging() from an
application or script to get output.
"""

import logging
import sys

from firebase_rtdb.core.config import get_settings

# httpx logs every request at INFO; the transport already logs calls at DEBUG.
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: int | None = None) -> None:
    """Configure process-wide logging.

    Level is ``level`` when given, else DEBUG when settings.debug is True,
    otherwise INFO. Output goes to stdout. httpx/httpcore are held at
    WARNING unless running at DEBUG.
    """
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(
            logging.DEBUG if level <= logging.DEBUG else logging.WARNING
        )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.
    """
    return logging.getLogger(name)
