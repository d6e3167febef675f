"""Evaluation constants that Tire Property Files do not carry."""

from __future__ import annotations

from dataclasses import dataclass

from tirecraft.utils.constants import DEFAULT_EPSILON
from tirecraft.utils.exceptions import ConfigurationError

DEFAULT_REFERENCE_FRICTION = 0.8
DEFAULT_REFERENCE_RADIUS = 1.0
DEFAULT_LONGITUDINAL_SPEED = 1.0
DEFAULT_CLAMP_EPSILON = DEFAULT_EPSILON


@dataclass(frozen=True)
class TireEvaluationConfig:
    """Constants used by the force and moment routines.

    Attributes:
        reference_friction: Road friction coefficient the file was fitted
            against; the caller's friction is applied relative to it.
        reference_radius: Radius ``R0`` used by the moment routines [m].
        longitudinal_speed: Nominal wheel-center speed for the rolling
            resistance speed terms [m/s].
        clamp_epsilon: Margin keeping the lateral ``B*alpha`` argument inside
            ``(-pi/2, pi/2)``.
    """

    reference_friction: float = DEFAULT_REFERENCE_FRICTION
    reference_radius: float = DEFAULT_REFERENCE_RADIUS
    longitudinal_speed: float = DEFAULT_LONGITUDINAL_SPEED
    clamp_epsilon: float = DEFAULT_CLAMP_EPSILON

    def validate(self) -> None:
        """Validate evaluation constants.

        Raises:
            tirecraft.utils.exceptions.ConfigurationError: If any constant
                violates its bound.
        """
        if self.reference_friction <= 0.0:
            msg = "reference_friction must be positive"
            raise ConfigurationError(msg)
        if self.reference_radius <= 0.0:
            msg = "reference_radius must be positive"
            raise ConfigurationError(msg)
        if self.longitudinal_speed < 0.0:
            msg = "longitudinal_speed must be non-negative"
            raise ConfigurationError(msg)
        if not 0.0 < self.clamp_epsilon < 1.0:
            msg = "clamp_epsilon must lie in (0, 1)"
            raise ConfigurationError(msg)


def build_evaluation_config(
    reference_friction: float = DEFAULT_REFERENCE_FRICTION,
    reference_radius: float = DEFAULT_REFERENCE_RADIUS,
    longitudinal_speed: float = DEFAULT_LONGITUDINAL_SPEED,
    clamp_epsilon: float = DEFAULT_CLAMP_EPSILON,
) -> TireEvaluationConfig:
    """Build a validated evaluation config.

    Args:
        reference_friction: Friction coefficient the file was fitted against.
        reference_radius: Radius ``R0`` for the moment routines [m].
        longitudinal_speed: Nominal speed for rolling resistance [m/s].
        clamp_epsilon: Margin for the lateral arctangent argument clamp.

    Returns:
        Fully validated evaluation configuration.

    Raises:
        tirecraft.utils.exceptions.ConfigurationError: If any constant
            violates its bound.
    """
    config = TireEvaluationConfig(
        reference_friction=reference_friction,
        reference_radius=reference_radius,
        longitudinal_speed=longitudinal_speed,
        clamp_epsilon=clamp_epsilon,
    )
    config.validate()
    return config
