"""splatfmt: printf-style interpolation for structured log records.

Typical use::

    from splatfmt import SPLAT, splat

    record = {"level": "info", "message": "%s is %d", SPLAT: ["x", 5]}
    splat().transform(record)
    assert record["message"] == "x is 5"
"""

from __future__ import annotations

from .config import SplatOptions
from .features.interpolation import SplatFilter, Splatter, find_tokens, format_message, splat
from .platform.logging import logger, setup_logger
from .shared import SPLAT, LogRecord, extra_args, symbol_for

__version__ = "0.1.0"

__all__ = [
    "SPLAT",
    "LogRecord",
    "SplatFilter",
    "SplatOptions",
    "Splatter",
    "extra_args",
    "find_tokens",
    "format_message",
    "logger",
    "setup_logger",
    "splat",
    "symbol_for",
]
