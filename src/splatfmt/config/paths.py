"""Shared path utilities for logging locations.

Policy:
- No log file unless one is passed explicitly or ``SPLATFMT_LOG_FILE`` is set.
- Relative paths and ``~`` are expanded and resolved against the current
  working directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


ENV_LOG_FILE: Final[str] = "SPLATFMT_LOG_FILE"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
) -> Path | None:
    """Resolve a path honoring explicit and environment overrides.

    Args:
        explicit_path: Path supplied by the caller; wins when not ``None``.
        env: Environment mapping. Defaults to ``os.environ``.
        env_var: Variable consulted when no explicit path is given.

    Returns:
        Path | None: Resolved path, or ``None`` when neither source is set.
    """

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return None


def log_file_from_env(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the log file requested through ``SPLATFMT_LOG_FILE``, if any."""

    return resolve_overridable_path(explicit_path=None, env=env, env_var=ENV_LOG_FILE)


__all__ = ["ENV_LOG_FILE", "log_file_from_env", "resolve_overridable_path"]
