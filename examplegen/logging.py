"""Logging setup shared by the generate-* commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "examplegen"
_CONSOLE_FORMAT = "[examplegen] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``examplegen.<name>``, or the package logger when ``name`` is empty."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | str | None = None
) -> logging.Logger:
    """Route examplegen records to stderr and, when given, to ``log_file``.

    The file sink always records DEBUG so a run can be diagnosed after the
    fact without re-running it with ``--verbose``.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.propagate = False

    # Entry points may run more than once per process (tests, wrappers).
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    logger.addHandler(_handler(logging.StreamHandler(), console_level, _CONSOLE_FORMAT))
    if log_file is None:
        logger.setLevel(console_level)
        return logger

    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.addHandler(
        _handler(logging.FileHandler(path, encoding="utf-8"), logging.DEBUG, _FILE_FORMAT)
    )
    logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["configure_logging", "get_logger"]
