"""
Loggers for stdtx modules

Each module keeps a module-level `logger = get_logger(__name__)`. Records go to stdout and, if a log file is given,
to that file as well.
"""
import logging
import sys
from pathlib import Path

__all__ = ["LOG_FORMAT", "get_logger"]

LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s]: %(message)s"


def _formatted(handler: logging.Handler, format_string: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def get_logger(name: str, log_level: str | int = "DEBUG", log_file: Path | None = None,
               format_string: str = LOG_FORMAT) -> logging.Logger:
    """
    Return the named logger. Handlers are attached on the first call for a name only; later calls return the logger
    unchanged whatever arguments they pass.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(log_level.upper() if isinstance(log_level, str) else log_level)
    logger.addHandler(_formatted(logging.StreamHandler(stream=sys.stdout), format_string))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_formatted(logging.FileHandler(log_file), format_string))

    return logger
