"""Conversion factors from ``[UNITS]`` tokens to SI units."""

from __future__ import annotations

import math

LENGTH_TO_METERS: dict[str, float] = {
    "MM": 0.001,
    "CM": 0.01,
    "KM": 1000.0,
    "MILE": 1609.35,
    "FOOT": 0.3048,
    "IN": 0.0254,
    "METER": 1.0,
}

TIME_TO_SECONDS: dict[str, float] = {
    "MILLI": 0.001,
    "MIN": 60.0,
    "HOUR": 3600.0,
    "SEC": 1.0,
    "SECOND": 1.0,
}

ANGLE_TO_RADIANS: dict[str, float] = {
    "DEG": math.pi / 180.0,
    "RAD": 1.0,
    "RADIAN": 1.0,
    "RADIANS": 1.0,
}

MASS_TO_KILOGRAMS: dict[str, float] = {
    "GRAM": 0.001,
    "POUND_MASS": 0.45359237,
    "KPOUND_MASS": 0.45359237 * 1000.0,
    "SLUG": 14.593902937,
    "OUNCE_MASS": 0.0283495231,
    "KG": 1.0,
    "KILOGRAM": 1.0,
}

FORCE_TO_NEWTONS: dict[str, float] = {
    "POUND_FORCE": 4.4482216153,
    "KPOUND_FORCE": 4.4482216153 * 1000.0,
    "DYNE": 0.00001,
    "OUNCE_FORCE": 0.278013851,
    "KG_FORCE": 9.80665,
    "KN": 1000.0,
    "KNEWTON": 1000.0,
    "N": 1.0,
    "NEWTON": 1.0,
}

PRESSURE_TO_PASCALS: dict[str, float] = {
    "KSI": 6894757.2932,
    "PSI": 6894.7572932,
    "BAR": 1.0e5,
    "KPA": 1000.0,
    "KPASCAL": 1000.0,
    "PA": 1.0,
    "PASCAL": 1.0,
}

# (UNITS property, UnitScales field, conversion table)
UNIT_TABLES: tuple[tuple[str, str, dict[str, float]], ...] = (
    ("LENGTH", "length", LENGTH_TO_METERS),
    ("TIME", "time", TIME_TO_SECONDS),
    ("ANGLE", "angle", ANGLE_TO_RADIANS),
    ("MASS", "mass", MASS_TO_KILOGRAMS),
    ("FORCE", "force", FORCE_TO_NEWTONS),
    ("PRESSURE", "pressure", PRESSURE_TO_PASCALS),
)


def unit_factor(token: object, table: dict[str, float]) -> float | None:
    """Resolve a unit token against a conversion table.

    Args:
        token: Raw ``[UNITS]`` value; only strings can match.
        table: Uppercased token to SI factor mapping.

    Returns:
        SI multiplier, or ``None`` when the token is absent or unknown.
    """
    if not isinstance(token, str):
        return None
    return table.get(token.strip().upper())
