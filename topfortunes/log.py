"""Package logging: one `topfortunes` logger tree, stderr console + daily file.

Modules log through children (``get_logger("decode")``) so file lines carry
their origin. The console stays on stderr because stdout may carry fortunes.
"""

import logging
import sys
from datetime import datetime

from .config import LOGS_DIR, get_setting

LOGGER_NAME = "topfortunes"
CONSOLE_FORMAT = "  %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)-22s %(message)s"

_console: logging.Handler | None = None


def console_level() -> int:
    """Console level from the LOG_LEVEL setting; INFO when unset or unknown."""
    level = logging.getLevelName(str(get_setting("log_level", "INFO")).upper())
    return level if isinstance(level, int) else logging.INFO


def _file_handler() -> logging.Handler | None:
    log_file = LOGS_DIR / f"{LOGGER_NAME}_{datetime.now():%Y%m%d}.log"
    try:
        LOGS_DIR.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%H:%M:%S"))
    return handler


def _configure(logger: logging.Logger):
    global _console
    logger.setLevel(logging.DEBUG)

    _console = logging.StreamHandler(sys.stderr)
    _console.setLevel(console_level())
    _console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(_console)

    handler = _file_handler()
    if handler is None:
        logger.warning("File logging disabled: cannot write to %s", LOGS_DIR)
    else:
        logger.addHandler(handler)


def get_logger(name: str = "") -> logging.Logger:
    """The package logger, or its child ``topfortunes.<name>``.

    Handlers are attached once, on first use.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if _console is None:
        _configure(logger)
    return logger.getChild(name) if name else logger


def set_verbose(verbose: bool = True):
    """Switch the console between DEBUG and its configured level."""
    get_logger()
    _console.setLevel(logging.DEBUG if verbose else console_level())


def log(msg: str):
    """Convenience wrapper — INFO level."""
    get_logger().info(msg)
