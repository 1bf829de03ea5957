"""
Summary: Interpolate a record's splat arguments into its message template in place.
Why: Downstream stages see the rendered message while unconsumed arguments stay on the record.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence
from itertools import islice
from typing import Any, final

from splatfmt.config.options import SplatOptions
from splatfmt.platform.logging import logger
from splatfmt.shared.record import MESSAGE_FIELD, LogRecord, splat_source

from ..domain.formatter import format_message
from ..domain.tokens import count_escaped_percents, find_tokens


@final
class Splatter:
    """Format stage applying printf-style interpolation to log records."""

    options: SplatOptions

    def __init__(self, options: SplatOptions | Mapping[str, Any] | None = None) -> None:
        """Initialize the stage.

        Args:
            options: Options value; accepted for compatibility, none are enforced.
        """
        self.options = SplatOptions.coerce(options)

    def _splat(self, record: LogRecord, template: str, tokens: list[str]) -> LogRecord:
        """Consume as many splat arguments as ``template`` expects and render it.

        Args:
            record: Record being transformed.
            template: Message template read from ``record``.
            tokens: Tokens found in ``template``.

        Returns:
            LogRecord: The same record with ``message`` rewritten.
        """
        source = splat_source(record)
        expected = len(tokens) - count_escaped_percents(template)

        consumed: list[Any] = []
        remaining = 0
        if source is not None:
            key, args = source
            if expected > 0:
                consumed = list(islice(args, expected))
                if isinstance(args, list):
                    del args[:expected]
                elif isinstance(args, MutableSequence):
                    # Sequences such as deque only support integer indexing.
                    for _ in consumed:
                        del args[0]
                else:
                    record[key] = list(islice(args, expected, None))
            remaining = len(record[key])

        record[MESSAGE_FIELD] = format_message(template, *consumed)

        logger.debug(
            "Interpolated message",
            extra={
                "interpolation_event": "interpolation.applied",
                "template": template,
                "tokens": len(tokens),
                "consumed": len(consumed),
                "remaining": remaining,
            },
        )
        return record

    def transform(self, record: LogRecord) -> LogRecord:
        """Interpolate splat arguments into ``record``'s message.

        Records without tokens and without splat arguments are returned
        untouched. Records with splat arguments but no tokens are also
        returned untouched so that a later stage can consume the arguments.

        Args:
            record: Record to transform; mutated in place.

        Returns:
            LogRecord: The same record object.
        """
        template = record.get(MESSAGE_FIELD)
        tokens = find_tokens(template) if isinstance(template, str) else []

        if tokens and isinstance(template, str):
            return self._splat(record, template, tokens)

        source = splat_source(record)
        if source is not None:
            logger.debug(
                "No interpolation tokens; leaving splat for later stages",
                extra={
                    "interpolation_event": "interpolation.passthrough",
                    "tokens": 0,
                    "consumed": 0,
                    "remaining": len(source[1]),
                },
            )
        return record

    __call__ = transform


def splat(opts: SplatOptions | Mapping[str, Any] | None = None) -> Splatter:
    """Return a new interpolation stage configured with ``opts``."""

    return Splatter(opts)


__all__ = ["Splatter", "splat"]
