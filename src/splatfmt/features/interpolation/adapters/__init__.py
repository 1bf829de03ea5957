"""Adapters connecting interpolation to other logging frameworks."""

from .stdlib_filter import SplatFilter

__all__ = ["SplatFilter"]
