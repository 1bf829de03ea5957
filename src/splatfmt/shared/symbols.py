"""Where: src/splatfmt/shared/symbols.py
What: Symbol-like sentinel keys shared by every formatting stage.
Why: Keep the splat channel distinct from user-supplied string keys on a record.
"""

from __future__ import annotations

import threading
from typing import ClassVar, Final, final


@final
class Symbol:
    """Named sentinel that hashes by identity and never equals a string."""

    __slots__ = ("name",)

    _registry: ClassVar[dict[str, "Symbol"]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    name: str

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Symbol({self.name})"

    def __reduce__(self) -> tuple[object, tuple[str]]:
        # Unpickled copies resolve back to the registered singleton.
        return (symbol_for, (self.name,))


def symbol_for(name: str) -> Symbol:
    """Return the process-wide symbol registered under ``name``.

    Repeated calls with the same name return the same object, so stages that
    never import each other still agree on the key.
    """

    existing = Symbol._registry.get(name)  # pyright: ignore[reportPrivateUsage]
    if existing is not None:
        return existing
    with Symbol._lock:  # pyright: ignore[reportPrivateUsage]
        return Symbol._registry.setdefault(name, Symbol(name))  # pyright: ignore[reportPrivateUsage]


# Extra interpolation arguments attached by the logging call site.
SPLAT: Final[Symbol] = symbol_for("splat")


__all__ = ["Symbol", "symbol_for", "SPLAT"]
