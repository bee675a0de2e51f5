# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py
Opt-in log output for argbind's own diagnostics.

The library never configures logging by itself. Applications that want to see why
a token was ignored or a parse failed call `setup_logging()`, which attaches
handlers to the `argbind` logger only; the root logger and any handlers the host
application installed are left untouched.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from argbind.logger import logger

LOG_MODE_ENV = "ARGBIND_LOG_MODE"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_MODES = ("cli", "json")


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            show_path=False,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    return handler


def setup_logging(
    mode: str | None = None,
    level: int = logging.DEBUG,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
) -> logging.Logger:
    """
    Route the `argbind` logger to the console and, optionally, a file.

    Calling it again replaces the handlers installed by the previous call. Records
    do not propagate further, so a host application that logs through the root
    logger sees each argbind record at most once.

    Args:
        mode (str | None): `"cli"` for Rich console output or `"json"` for one JSON
            object per line. Defaults to `ARGBIND_LOG_MODE`, then `"cli"`.
        level (int): Lowest level emitted by the argbind logger.
        log_filename (str | None): Also append records to this file when given.
        json_log_to_file (bool): Format file records as JSON instead of plain text.

    Returns:
        logging.Logger: The configured `argbind` logger.

    Raises:
        ValueError: If `mode` is not one of `LOG_MODES`.
    """
    mode = mode or os.getenv(LOG_MODE_ENV) or "cli"
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(mode))
    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        if json_log_to_file:
            file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False
    logger.debug("argbind logging enabled in '%s' mode", mode)
    return logger
