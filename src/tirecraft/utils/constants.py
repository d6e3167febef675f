"""Numeric constants used across the library."""

GRAVITY: float = 9.81
DEFAULT_EPSILON: float = 1e-3
NOMINAL_INFLATION_PRESSURE: float = 200_000.0
