"""Where: src/splatfmt/shared/record.py
What: Record type alias and the accessor resolving its extra-arguments channel.
Why: Every stage must agree on which splat source wins when both are present.
"""

from __future__ import annotations

from collections.abc import MutableMapping, Sequence
from typing import Any, Final, TypeAlias

from .symbols import SPLAT, Symbol

LogRecord: TypeAlias = MutableMapping[Any, Any]

SPLAT_FIELD: Final[str] = "splat"
MESSAGE_FIELD: Final[str] = "message"

_SPLAT_KEYS: Final[tuple[Symbol | str, ...]] = (SPLAT, SPLAT_FIELD)


def splat_source(record: LogRecord) -> tuple[Symbol | str, Sequence[Any]] | None:
    """Return the key and sequence backing the record's extra arguments.

    The symbol channel is consulted first. A falsy value (missing, ``None``
    or an empty sequence) counts as absent and falls through to the plain
    ``splat`` field. Strings are never treated as argument lists.
    """

    for key in _SPLAT_KEYS:
        value = record.get(key)
        if value and isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            return key, value
    return None


def extra_args(record: LogRecord) -> Sequence[Any]:
    """Return the record's extra arguments, or an empty tuple when it has none."""

    source = splat_source(record)
    if source is None:
        return ()
    return source[1]


__all__ = [
    "LogRecord",
    "MESSAGE_FIELD",
    "SPLAT_FIELD",
    "extra_args",
    "splat_source",
]
