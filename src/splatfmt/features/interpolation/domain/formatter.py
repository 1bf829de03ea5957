"""
Summary: Render printf-style templates with the fixed splat token set.
Why: Interpolation delegates every conversion here so that no argument can crash a log call.
"""

from __future__ import annotations

import decimal
import json
import math
import numbers
import re
from collections.abc import Callable
from typing import Final

from rich.pretty import pretty_repr

from splatfmt.platform.logging import logger

from .tokens import TOKEN_PATTERN

NAN: Final[str] = "NaN"

# Depth used for ``%o``; ``%O`` renders the full structure.
INSPECT_DEPTH: Final[int] = 4

_DECIMAL_LITERAL: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
_INTEGER_PREFIX: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX: Final[re.Pattern[str]] = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def _unprintable(value: object) -> str:
    return f"<unprintable {type(value).__name__}>"


def _guarded(kind: str, render: Callable[[object], str]) -> Callable[[object], str]:
    """Wrap ``render`` so that failures degrade to a placeholder."""

    def _render(value: object) -> str:
        try:
            return render(value)
        except Exception as exc:
            logger.debug(
                "Could not render %s argument of type %s: %s",
                kind,
                type(value).__name__,
                exc,
                extra={"interpolation_event": "interpolation.unprintable"},
            )
            return _unprintable(value)

    return _render


def _parse_literal(raw: str) -> float:
    """Parse a numeric literal, mapping ``Infinity`` to ``math.inf``."""

    sign = -1.0 if raw.startswith("-") else 1.0
    if raw.lstrip("+-") == "Infinity":
        return sign * math.inf
    return float(raw)


def _to_number(value: object) -> int | float:
    """Coerce ``value`` to a number the way ``%d`` expects."""

    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if _DECIMAL_LITERAL.fullmatch(text):
            number = _parse_literal(text)
            if number.is_integer() and "." not in text and "e" not in text.lower():
                return int(text)
            return number
    return math.nan


def format_number(number: int | float) -> str:
    """Render a number without Python-specific float noise."""

    if isinstance(number, int):
        return str(number)
    if math.isnan(number):
        return NAN
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0 and math.copysign(1.0, number) < 0:
        return "-0"
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


def _render_string(value: object) -> str:
    if isinstance(value, str):
        return value
    return str(value)


def _render_number(value: object) -> str:
    return format_number(_to_number(value))


def _render_integer(value: object) -> str:
    if isinstance(value, str):
        match = _INTEGER_PREFIX.match(value)
        return str(int(match.group(1))) if match else NAN
    number = _to_number(value)
    if isinstance(number, float):
        if not math.isfinite(number):
            return NAN
        return str(math.trunc(number))
    return str(number)


def _render_float(value: object) -> str:
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        return format_number(_parse_literal(match.group(1))) if match else NAN
    return format_number(float(_to_number(value)))


def _render_json(value: object) -> str:
    try:
        return json.dumps(value, default=str, ensure_ascii=False, separators=(",", ":"))
    except ValueError as exc:
        if "Circular reference" in str(exc):
            return "[Circular]"
        raise


def _render_inspect(value: object) -> str:
    return pretty_repr(value, max_depth=INSPECT_DEPTH)


def _render_inspect_full(value: object) -> str:
    return pretty_repr(value)


def _render_style(_value: object) -> str:
    # Console styling directives are consumed and dropped.
    return ""


_CONVERTERS: Final[dict[str, Callable[[object], str]]] = {
    "s": _guarded("%s", _render_string),
    "d": _guarded("%d", _render_number),
    "i": _guarded("%i", _render_integer),
    "f": _guarded("%f", _render_float),
    "j": _guarded("%j", _render_json),
    "o": _guarded("%o", _render_inspect),
    "O": _guarded("%O", _render_inspect_full),
    "c": _render_style,
}

_render_extra = _guarded("extra", lambda value: value if isinstance(value, str) else pretty_repr(value))


def format_message(template: str, *args: object) -> str:
    """Substitute ``args`` into ``template`` token by token.

    Tokens are consumed left to right. ``%%`` always collapses to ``%``.
    When arguments run out, the remaining tokens stay in the output verbatim;
    arguments left over once the template is exhausted are appended, separated
    by single spaces.

    Args:
        template: Message template containing ``%`` tokens.
        *args: Substitution arguments.

    Returns:
        str: Rendered message. Never raises for any argument value.
    """
    position = 0

    def _substitute(match: re.Match[str]) -> str:
        nonlocal position
        kind = match.group()[1]
        if kind == "%":
            return "%"
        if position >= len(args):
            return match.group()
        value = args[position]
        position += 1
        return _CONVERTERS[kind](value)

    rendered = TOKEN_PATTERN.sub(_substitute, template)

    if position < len(args):
        extras = " ".join(_render_extra(value) for value in args[position:])
        rendered = f"{rendered} {extras}"

    return rendered


__all__ = ["INSPECT_DEPTH", "NAN", "format_message", "format_number"]
