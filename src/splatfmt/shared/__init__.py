# Where: splatfmt.shared.__init__
# What: Provide a concise import surface for record keys and accessors.
# Why: Encourage every stage to resolve the splat channel the same way.

"""Shared record primitives exposed at the package level."""

from .record import MESSAGE_FIELD, SPLAT_FIELD, LogRecord, extra_args, splat_source
from .symbols import SPLAT, Symbol, symbol_for

__all__ = [
    "MESSAGE_FIELD",
    "SPLAT",
    "SPLAT_FIELD",
    "LogRecord",
    "Symbol",
    "extra_args",
    "splat_source",
    "symbol_for",
]
