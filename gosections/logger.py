"""The package's shared logger."""

from __future__ import annotations

import logging
import sys
import threading

_lock = threading.Lock()
_default: logging.Logger | None = None
_current: logging.Logger | None = None


def init_logger() -> None:
    """Set up the default logger once; later calls do nothing."""
    global _default, _current
    with _lock:
        if _default is not None:
            return
        logger = logging.getLogger("gosections")
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s\t%(levelname)s\t%(message)s", "%Y-%m-%dT%H:%M:%S%z")
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
        _default = logger
        if _current is None:
            _current = logger


def set_level(level: int) -> None:
    """Set the level of the default logger; a replaced logger is untouched."""
    init_logger()
    _default.setLevel(level)


def get_logger() -> logging.Logger:
    """Return the logger in use, setting up the default one if needed."""
    if _current is None:
        init_logger()
    return _current


def set_logger(logger: logging.Logger) -> None:
    """Replace the logger in use; raises TypeError for anything but a Logger."""
    global _current
    if not isinstance(logger, logging.Logger):
        raise TypeError(f"expected a logging.Logger, got {type(logger).__name__}")
    with _lock:
        _current = logger