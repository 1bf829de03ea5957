"""
Summary: Detect interpolation tokens and escaped percents in message templates.
Why: The number of arguments a template expects drives how much of a splat is consumed.
"""

from __future__ import annotations

import re
from typing import Final

# Token kinds understood by ``format_message``; ``%%`` is included so that
# escaped percents are counted alongside real substitution points.
TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"%[scdjifoO%]")

ESCAPED_PERCENT_PATTERN: Final[re.Pattern[str]] = re.compile(r"%%")


def find_tokens(message: str) -> list[str]:
    """Return every token in ``message``, in order of appearance."""

    return TOKEN_PATTERN.findall(message)


def count_escaped_percents(message: str) -> int:
    """Return the number of literal ``%%`` pairs in ``message``."""

    return len(ESCAPED_PERCENT_PATTERN.findall(message))


def expected_argument_count(message: str) -> int:
    """Return how many arguments ``message`` can substitute.

    Args:
        message: Template to inspect.

    Returns:
        int: Token count minus escaped percents, never below zero.
    """
    return max(len(find_tokens(message)) - count_escaped_percents(message), 0)


__all__ = [
    "ESCAPED_PERCENT_PATTERN",
    "TOKEN_PATTERN",
    "count_escaped_percents",
    "expected_argument_count",
    "find_tokens",
]
