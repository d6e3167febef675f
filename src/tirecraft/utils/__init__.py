"""Utility helpers."""

from tirecraft.utils.constants import DEFAULT_EPSILON, GRAVITY
from tirecraft.utils.logging import configure_logging

__all__ = ["DEFAULT_EPSILON", "GRAVITY", "configure_logging"]
