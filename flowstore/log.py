import logging
import os
import sys

from typing import Optional


__all__ = (
    "LOG_LEVEL_ENV",

    "setup_logging",
)


LOG_LEVEL_ENV = "FLOWSTORE_LOG_LEVEL"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the ``flowstore`` logger to write to stdout."""
    log_level = level or os.environ.get(LOG_LEVEL_ENV, "INFO")
    numeric_level = getattr(logging, log_level.upper(), None)

    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger("flowstore")
    root.setLevel(numeric_level)

    for existing in list(root.handlers):
        root.removeHandler(existing)

    root.addHandler(handler)

    return root
