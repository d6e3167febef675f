"""Temperature-extended Magic Formula model.

Thermal corrections scale the peak factor and slip stiffness of the lateral
and longitudinal forces with the normalized temperature rise
``dT = (T - TREF) / TREF``. Moments are delegated unchanged to the wrapped
isothermal model.
"""

from __future__ import annotations

import logging

import numpy as np

from tirecraft.properties.store import PropertyStore
from tirecraft.tire import loader
from tirecraft.tire.config import TireEvaluationConfig
from tirecraft.tire.model_api import LateralForceResult, Scalar
from tirecraft.tire.pac2002 import Pacejka2002Model
from tirecraft.tire.params import TemperatureParameters
from tirecraft.utils.exceptions import TirLoadError

logger = logging.getLogger(__name__)


class ThermalPacejkaModel:
    """Wrap a :class:`Pacejka2002Model` with temperature-dependent force terms."""

    def __init__(self, base: Pacejka2002Model) -> None:
        """Wrap a base model; temperature coefficients start at zero.

        Args:
            base: Isothermal model providing all non-thermal parameter records.
        """
        self.base = base
        self.temperature = TemperatureParameters()

    @classmethod
    def from_properties(
        cls,
        properties: PropertyStore,
        config: TireEvaluationConfig | None = None,
    ) -> ThermalPacejkaModel:
        """Build an uninitialized thermal model around a fresh base model.

        Args:
            properties: Parsed property store, shared read-only.
            config: Optional evaluation constants.

        Returns:
            Thermal model whose records still hold defaults.
        """
        return cls(Pacejka2002Model(properties, config))

    @property
    def properties(self) -> PropertyStore:
        """Property store of the wrapped model.

        Returns:
            Shared property store.
        """
        return self.base.properties

    def initialize_from_properties(self) -> list[TirLoadError]:
        """Load base records, then ``[TEMPERATURE_COEFFICIENTS]``.

        Returns:
            Base loading errors followed by temperature loading errors.
        """
        errors = self.base.initialize_from_properties()
        thermal_errors = loader.load_temperature(self.properties, self.temperature)
        if thermal_errors:
            logger.info("Temperature coefficients loaded with %d errors", len(thermal_errors))
        return errors + thermal_errors

    def temperature_delta(self, temperature: Scalar | None) -> Scalar:
        """Normalized temperature rise relative to ``TREF``.

        Args:
            temperature: Tire temperature, or ``None`` for the reference temperature.

        Returns:
            ``(T - TREF) / TREF``; zero when ``temperature`` is ``None``.
        """
        if temperature is None:
            return 0.0
        tref = np.float64(self.temperature.tref)
        return (np.asarray(temperature, dtype=np.float64) - tref) / tref

    def compute_lateral_force(
        self,
        slip_angle: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
        friction: Scalar,
        temperature: Scalar | None = None,
    ) -> LateralForceResult:
        """Compute temperature-corrected lateral force.

        Args:
            slip_angle: Slip angle [rad].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].
            friction: Road friction coefficient.
            temperature: Tire temperature, same unit as ``TREF``.

        Returns:
            ``(fy, shf, b, c)`` for the aligning moment.
        """
        t = self.temperature
        dt = self.temperature_delta(temperature)
        return self.base._lateral_force(
            slip_angle,
            vertical_load,
            inclination_angle,
            friction,
            peak_scale=1.0 + t.ty3 * dt + t.ty4 * dt**2,
            stiffness_scale=1.0 + t.ty1 * dt,
            stiffness_load_scale=1.0 + t.ty2 * dt,
        )

    def compute_longitudinal_force(
        self,
        slip_ratio: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
        friction: Scalar,
        temperature: Scalar | None = None,
    ) -> Scalar:
        """Compute temperature-corrected longitudinal force.

        Args:
            slip_ratio: Longitudinal slip ratio.
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].
            friction: Road friction coefficient.
            temperature: Tire temperature, same unit as ``TREF``.

        Returns:
            Longitudinal force [N].
        """
        t = self.temperature
        dt = self.temperature_delta(temperature)
        return self.base._longitudinal_force(
            slip_ratio,
            vertical_load,
            inclination_angle,
            friction,
            peak_scale=1.0 + t.tx3 * dt + t.tx4 * dt**2,
            stiffness_scale=1.0 + t.tx1 * dt + t.tx2 * dt**2,
        )

    def compute_overturning_moment(
        self,
        lateral_force: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
    ) -> Scalar:
        """Compute overturning moment with the isothermal relation.

        Args:
            lateral_force: Lateral force [N].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].

        Returns:
            Overturning moment [N*m].
        """
        return self.base.compute_overturning_moment(lateral_force, vertical_load, inclination_angle)

    def compute_rolling_resistance_moment(
        self,
        longitudinal_force: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
    ) -> Scalar:
        """Compute rolling resistance moment with the isothermal relation.

        Args:
            longitudinal_force: Longitudinal force [N].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].

        Returns:
            Rolling resistance moment [N*m].
        """
        return self.base.compute_rolling_resistance_moment(
            longitudinal_force, vertical_load, inclination_angle
        )

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
        """Compute aligning moment from a thermal lateral-force evaluation.

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
        return self.base.compute_aligning_moment(
            slip_angle, vertical_load, inclination_angle, lateral_force, shf, b_fy, c_fy
        )
