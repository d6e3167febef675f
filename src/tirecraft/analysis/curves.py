"""Characteristic-curve sweeps over slip angle and slip ratio."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from tirecraft.tire.model_api import FloatArray, TireModel
from tirecraft.utils.exceptions import ConfigurationError

DEFAULT_MAX_SLIP_ANGLE = 0.25
DEFAULT_MAX_SLIP_RATIO = 0.25
DEFAULT_SAMPLES = 101


@dataclass(frozen=True)
class CharacteristicCurves:
    """Force and moment curves at one operating point.

    Lateral quantities and moments derived from them are indexed by
    ``slip_angle``; longitudinal quantities by ``slip_ratio``.

    Attributes:
        slip_angle: Slip-angle samples [rad].
        slip_ratio: Slip-ratio samples.
        vertical_load: Vertical load of the sweep [N].
        lateral_force: Lateral force per slip angle [N].
        aligning_moment: Aligning moment per slip angle [N*m].
        overturning_moment: Overturning moment per slip angle [N*m].
        longitudinal_force: Longitudinal force per slip ratio [N].
        rolling_resistance_moment: Rolling resistance moment per slip ratio [N*m].
    """

    slip_angle: FloatArray
    slip_ratio: FloatArray
    vertical_load: float
    lateral_force: FloatArray
    aligning_moment: FloatArray
    overturning_moment: FloatArray
    longitudinal_force: FloatArray
    rolling_resistance_moment: FloatArray


def compute_characteristic_curves(
    model: TireModel,
    vertical_load: float,
    inclination_angle: float = 0.0,
    friction: float = 1.0,
    temperature: float | None = None,
    max_slip_angle: float = DEFAULT_MAX_SLIP_ANGLE,
    max_slip_ratio: float = DEFAULT_MAX_SLIP_RATIO,
    samples: int = DEFAULT_SAMPLES,
) -> CharacteristicCurves:
    """Sweep slip symmetrically around zero and evaluate every routine.

    Args:
        model: Initialized tire model.
        vertical_load: Vertical load [N].
        inclination_angle: Inclination (camber) angle [rad].
        friction: Road friction coefficient.
        temperature: Tire temperature for thermal models.
        max_slip_angle: Sweep half-range for slip angle [rad].
        max_slip_ratio: Sweep half-range for slip ratio.
        samples: Number of samples per sweep.

    Returns:
        Curves for all five force and moment routines.

    Raises:
        tirecraft.utils.exceptions.ConfigurationError: If the sweep settings
            are invalid.
    """
    if samples < 2:
        msg = "samples must be at least 2"
        raise ConfigurationError(msg)
    if max_slip_angle <= 0.0 or max_slip_ratio <= 0.0:
        msg = "sweep half-ranges must be positive"
        raise ConfigurationError(msg)
    if vertical_load <= 0.0:
        msg = "vertical_load must be positive"
        raise ConfigurationError(msg)

    alpha = np.linspace(-max_slip_angle, max_slip_angle, samples)
    kappa = np.linspace(-max_slip_ratio, max_slip_ratio, samples)
    fz = np.full(samples, vertical_load, dtype=float)
    gamma = np.full(samples, inclination_angle, dtype=float)

    lateral = model.compute_lateral_force(alpha, fz, gamma, friction, temperature)
    fx = model.compute_longitudinal_force(kappa, fz, gamma, friction, temperature)
    mz = model.compute_aligning_moment(
        alpha, fz, gamma, lateral.fy, lateral.shf, lateral.b, lateral.c
    )

    return CharacteristicCurves(
        slip_angle=alpha,
        slip_ratio=kappa,
        vertical_load=float(vertical_load),
        lateral_force=np.asarray(lateral.fy, dtype=float),
        aligning_moment=np.asarray(mz, dtype=float),
        overturning_moment=np.asarray(
            model.compute_overturning_moment(lateral.fy, fz, gamma), dtype=float
        ),
        longitudinal_force=np.asarray(fx, dtype=float),
        rolling_resistance_moment=np.asarray(
            model.compute_rolling_resistance_moment(fx, fz, gamma), dtype=float
        ),
    )
