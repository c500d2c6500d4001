# tower_vector/core/log.py
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

PACKAGE_LOGGER = "tower_vector"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Silent until an application attaches handlers
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_handlers: List[logging.Handler] = []


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module of this package. Names outside the package are
    nested under it, so every record reaches the handlers setup_logging adds.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int = logging.INFO,
                  log_file: Optional[Union[str, os.PathLike]] = None) -> logging.Logger:
    """
    Sends the package's log records to the console, and to log_file if given.
    Handlers go on the package logger, not the root logger, and are added
    only once; later calls just change the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if _handlers:
        for h in _handlers:
            h.setLevel(level)
        return logger

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        path = Path(log_file)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(path, encoding="utf-8"))
        except OSError as e:
            logger.warning("Could not open log file %s: %s", path, e)

    for h in handlers:
        h.setLevel(level)
        h.setFormatter(fmt)
        logger.addHandler(h)
        _handlers.append(h)
    return logger


def teardown_logging() -> None:
    """Removes and closes the handlers added by setup_logging."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    while _handlers:
        h = _handlers.pop()
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
