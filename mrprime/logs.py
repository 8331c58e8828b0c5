"""Logging setup for the command-line harness.

Library modules only create loggers under the ``mrprime`` namespace; nothing
is emitted until ``configure_logging`` attaches handlers. Records read like
``2025-01-01T00:00:00Z INFO mrprime.cli check n_bits=7 rounds=10 verdict=True``.
"""

from __future__ import annotations
import logging, sys, time
from typing import List, Optional, Union

ROOT = "mrprime"
FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATEFMT = "%Y-%m-%dT%H:%M:%SZ"

_installed: List[logging.Handler] = []


def _formatter() -> logging.Formatter:
    fmt = logging.Formatter(FORMAT, datefmt=DATEFMT)
    fmt.converter = time.gmtime
    return fmt

def configure_logging(level: Union[int, str] = logging.WARNING,
                      path: Optional[str] = None) -> logging.Logger:
    """Log to stderr and, if `path` is set, append to that file as well."""
    reset_logging()
    logger = logging.getLogger(ROOT)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if path:
        handlers.append(logging.FileHandler(path, mode="a", encoding="utf-8"))
    for h in handlers:
        h.setFormatter(_formatter())
        logger.addHandler(h)
        _installed.append(h)

    logger.setLevel(level)
    logger.propagate = False
    return logger

def reset_logging() -> None:
    """Drop handlers installed by configure_logging and restore defaults."""
    logger = logging.getLogger(ROOT)
    for h in _installed:
        logger.removeHandler(h)
        h.close()
    _installed.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
