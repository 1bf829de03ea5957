"""Where: src/splatfmt/config/options.py
What: Construction-time options accepted by interpolation stages.
Why: Give callers a stable place to pass settings before any are enforced.
Assumptions: - Unknown keys are retained verbatim for forward compatibility.
Trade-offs: - Values are not validated; only the container type is checked.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class SplatOptions:
    """Options value handed to ``Splatter`` at construction."""

    values: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Freeze the provided mapping so stages cannot mutate shared options."""

        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def coerce(cls, value: "SplatOptions | Mapping[str, Any] | None") -> "SplatOptions":
        """Build options from ``None``, a mapping, or an existing instance.

        Args:
            value: Raw options supplied by the caller.

        Returns:
            SplatOptions: Normalized options.

        Raises:
            TypeError: If ``value`` is neither a mapping nor ``SplatOptions``.
        """
        if value is None:
            return cls()
        if isinstance(value, SplatOptions):
            return value
        if isinstance(value, Mapping):
            return cls(values=value)
        raise TypeError(
            f"options must be a mapping or SplatOptions, not {type(value).__name__}"
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Return a raw option value."""

        return self.values.get(key, default)


__all__ = ["SplatOptions"]
