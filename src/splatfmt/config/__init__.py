"""Configuration helpers for splatfmt."""

from .options import SplatOptions
from .paths import ENV_LOG_FILE, log_file_from_env, resolve_overridable_path

__all__ = ["ENV_LOG_FILE", "SplatOptions", "log_file_from_env", "resolve_overridable_path"]
