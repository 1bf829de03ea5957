"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the shared package logger and an opt-in console/file setup.
Why: A library must stay silent until the host application asks for output.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from splatfmt.config.paths import log_file_from_env

from .handlers import SplatRichHandler


LOGGER_NAME: Final[str] = "splatfmt"


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the package logger.

    Args:
        log_file: Path to the log file. Falls back to ``SPLATFMT_LOG_FILE``;
            when neither is set only console logging is enabled.
        console_level: Logging level for console output. Defaults to INFO.
        file_level: Logging level for file output. Defaults to DEBUG.
        console: Rich console to render to. Defaults to stderr.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if console is None:
        console = Console(stderr=True, soft_wrap=True)
    console_handler = SplatRichHandler(console=console)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    resolved_log_file = (
        Path(log_file).expanduser().resolve() if log_file is not None else log_file_from_env()
    )
    if resolved_log_file is not None:
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


__all__ = ["LOGGER_NAME", "setup_logger", "logger"]
