"""Scalar helpers shared by the force routines."""

from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def sine_step(x: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Smoothly blend from ``y1`` to ``y2`` as ``x`` moves from ``x1`` to ``x2``.

    The blend is a linear ramp minus one sine period, so both end slopes are zero.

    Args:
        x: Evaluation point.
        x1: Start of the transition.
        y1: Output at and below ``x1``.
        x2: End of the transition.
        y2: Output at and above ``x2``.

    Returns:
        Blended output value.
    """
    if x <= x1:
        return y1
    if x >= x2:
        return y2
    dx = x2 - x1
    dy = y2 - y1
    return y1 + dy * (x - x1) / dx - (dy / TWO_PI) * math.sin(TWO_PI * (x - x1) / dx)
