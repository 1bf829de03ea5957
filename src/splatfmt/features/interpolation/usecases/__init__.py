"""Interpolation use cases."""

from .splatter import Splatter, splat

__all__ = ["Splatter", "splat"]
