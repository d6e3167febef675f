"""Interfaces between callers and tire force models."""

from __future__ import annotations

from typing import NamedTuple, Protocol, TypeAlias

import numpy as np
import numpy.typing as npt

from tirecraft.utils.exceptions import TirLoadError

FloatArray: TypeAlias = npt.NDArray[np.float64]
Scalar: TypeAlias = float | FloatArray


class LateralForceResult(NamedTuple):
    """Lateral force plus the intermediates the aligning moment reuses.

    Unpacks and indexes like the four-slot ``[Fy, Shf, B, C]`` output vector.

    Attributes:
        fy: Lateral force [N].
        shf: Horizontal shift of the residual-moment slip angle [rad].
        b: Lateral stiffness factor ``B``.
        c: Lateral shape factor ``C``.
    """

    fy: Scalar
    shf: Scalar
    b: Scalar
    c: Scalar


class TireModel(Protocol):
    """Protocol shared by the isothermal and temperature-extended models.

    ``temperature`` is accepted by both force routines so callers can swap
    models; models without thermal terms ignore it.
    """

    def initialize_from_properties(self) -> list[TirLoadError]:
        """Populate parameter records from the model's property store.

        Returns:
            All loading errors, in loader order.
        """
        ...

    def compute_lateral_force(
        self,
        slip_angle: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
        friction: Scalar,
        temperature: Scalar | None = None,
    ) -> LateralForceResult:
        """Compute lateral force and the terms shared with the aligning moment.

        Args:
            slip_angle: Slip angle [rad].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].
            friction: Road friction coefficient.
            temperature: Tire temperature, used by thermal models only.

        Returns:
            ``(fy, shf, b, c)``.
        """
        ...

    def compute_longitudinal_force(
        self,
        slip_ratio: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
        friction: Scalar,
        temperature: Scalar | None = None,
    ) -> Scalar:
        """Compute longitudinal force.

        Args:
            slip_ratio: Longitudinal slip ratio.
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].
            friction: Road friction coefficient.
            temperature: Tire temperature, used by thermal models only.

        Returns:
            Longitudinal force [N].
        """
        ...

    def compute_overturning_moment(
        self, lateral_force: Scalar, vertical_load: Scalar, inclination_angle: Scalar
    ) -> Scalar:
        """Compute overturning moment.

        Args:
            lateral_force: Lateral force [N].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].

        Returns:
            Overturning moment [N*m].
        """
        ...

    def compute_rolling_resistance_moment(
        self, longitudinal_force: Scalar, vertical_load: Scalar, inclination_angle: Scalar
    ) -> Scalar:
        """Compute rolling resistance moment.

        Args:
            longitudinal_force: Longitudinal force [N].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].

        Returns:
            Rolling resistance moment [N*m].
        """
        ...

    def compute_aligning_moment(
        self,
        slip_angle: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
        lateral_force: Scalar,
        shf: Scalar,
        b_fy: Scalar,
        c_fy: Scalar,
    ) -> Scalar:
        """Compute aligning moment from a prior lateral-force evaluation.

        Args:
            slip_angle: Slip angle [rad].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].
            lateral_force: ``fy`` from :meth:`compute_lateral_force`.
            shf: ``shf`` from :meth:`compute_lateral_force`.
            b_fy: ``b`` from :meth:`compute_lateral_force`.
            c_fy: ``c`` from :meth:`compute_lateral_force`.

        Returns:
            Aligning moment [N*m].
        """
        ...
