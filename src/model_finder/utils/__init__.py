"""Utility modules for model finder."""

from .text import class_basename, normalize, snake_case, squish

__all__ = [
    "class_basename",
    "normalize",
    "snake_case",
    "squish",
]
