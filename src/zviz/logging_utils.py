"""Logging setup for tools that embed zviz.

The library itself only emits records through module loggers under the
``zviz`` namespace. :func:`configure_logging` attaches handlers to that
namespace without touching the host application's root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

LIBRARY_LOGGER_NAME = "zviz"

_BRIEF_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so reconfiguring replaces only our own.
_HANDLER_MARKER = "_zviz_handler"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _install(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
    propagate: bool = False,
) -> logging.Logger:
    """Configure handlers on the ``zviz`` logger.

    Calling this again replaces the handlers installed by a previous call;
    handlers added by the host application are left alone.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG"). Unknown names
        fall back to INFO.
    log_file : str, optional
        Path of a file that also receives the records.
    trace_mode : bool, default False
        When true, emit timestamps and logger names.
    stream : IO[str], optional
        Console stream, ``sys.stderr`` when omitted.
    propagate : bool, default False
        Whether records also reach the host application's root handlers.

    Returns
    -------
    logging.Logger
        The configured ``zviz`` logger.

    """
    level = _resolve_level(log_level)
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = propagate

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_BRIEF_FORMAT)

    _install(logger, logging.StreamHandler(stream or sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            _install(logger, file_handler, level, formatter)

    return logger


__all__ = ["LIBRARY_LOGGER_NAME", "configure_logging"]
