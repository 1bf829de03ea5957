"""Rich console handler for interpolation diagnostics."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SplatRichHandler(RichHandler):
    """Rich handler that renders interpolation events with icons and counters."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "interpolation.applied": ("✅", "green"),
        "interpolation.passthrough": ("↪️", "yellow"),
        "interpolation.unprintable": ("⚠️", "red"),
    }
    _TEMPLATE_LIMIT: ClassVar[int] = 60

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        _ = kwargs.setdefault("show_time", False)
        _ = kwargs.setdefault("show_path", False)
        _ = kwargs.setdefault("rich_tracebacks", True)
        _ = kwargs.setdefault("markup", False)
        super().__init__(*args, **kwargs)

    @classmethod
    def _shorten(cls, template: str) -> str:
        """Clip long templates so a single line stays readable."""

        if len(template) <= cls._TEMPLATE_LIMIT:
            return template
        return template[: cls._TEMPLATE_LIMIT - 1] + "…"

    def _render_interpolation_message(
        self, record: logging.LogRecord, message: str
    ) -> Text | None:
        """Render structured interpolation events with dedicated styling."""

        event = getattr(record, "interpolation_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(message)

        template = getattr(record, "template", None)
        if isinstance(template, str):
            _ = body.append(" ")
            _ = body.append(repr(self._shorten(template)), style=Style(color="white"))

        counters: list[str] = []
        for name in ("tokens", "consumed", "remaining"):
            value = getattr(record, name, None)
            if isinstance(value, int):
                counters.append(f"{name}={value}")
        if counters:
            _ = body.append(" [" + ", ".join(counters) + "]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for interpolation events."""

        interpolation_text = self._render_interpolation_message(record, message)
        if interpolation_text is not None:
            return interpolation_text

        return super().render_message(record, message)


__all__ = ["SplatRichHandler"]
