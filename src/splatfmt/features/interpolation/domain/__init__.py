"""Token detection and message rendering."""

from .formatter import format_message, format_number
from .tokens import count_escaped_percents, expected_argument_count, find_tokens

__all__ = [
    "count_escaped_percents",
    "expected_argument_count",
    "find_tokens",
    "format_message",
    "format_number",
]
