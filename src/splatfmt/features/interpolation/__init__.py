# Path: `src/splatfmt/features/interpolation/__init__.py`
# Summary: Export interpolation domain, use case, and adapter symbols.
# Why: Provide a stable import surface for callers and tests.

from .adapters import SplatFilter
from .domain import (
    count_escaped_percents,
    expected_argument_count,
    find_tokens,
    format_message,
    format_number,
)
from .usecases import Splatter, splat

__all__ = [
    "SplatFilter",
    "Splatter",
    "count_escaped_percents",
    "expected_argument_count",
    "find_tokens",
    "format_message",
    "format_number",
    "splat",
]
