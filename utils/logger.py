"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance;
`main.py` calls `configure_logging` once the settings are loaded.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that log every request at INFO
_QUIET_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
}

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> None:
    """
    Attach the stdout handler to the root logger and set its level.

    Safe to call more than once: the handler is installed a single time and
    later calls only change the level. Unknown level names fall back to INFO.
    """
    global _handler
    root = logging.getLogger()

    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(_handler)
        for name, quiet_level in _QUIET_LOGGERS.items():
            logging.getLogger(name).setLevel(quiet_level)

    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Logging is set up with INFO on first use so modules imported before
    the settings are read still have somewhere to write.
    """
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
