"""Pacejka 2002 Magic Formula tire model.

Forces and moments follow Pacejka, "Tire and Vehicle Dynamics", using pure
slip relations. Inputs may be scalars or numpy arrays of matching shape;
scalar inputs return ``float``.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from tirecraft.properties.store import PropertyStore
from tirecraft.tire import loader
from tirecraft.tire.config import TireEvaluationConfig
from tirecraft.tire.model_api import LateralForceResult, Scalar
from tirecraft.tire.params import (
    AligningParameters,
    ConditionsParameters,
    DimensionParameters,
    LateralParameters,
    LongitudinalParameters,
    ModelParameters,
    OverturningParameters,
    RollingParameters,
    ScalingParameters,
    UnitScales,
    VerticalParameters,
)
from tirecraft.utils.constants import GRAVITY
from tirecraft.utils.exceptions import ModelLoadingError, TirLoadError
from tirecraft.utils.math import sine_step

logger = logging.getLogger(__name__)


def _as_array(value: Scalar) -> np.ndarray:
    """Convert a scalar or array input to a float array.

    Args:
        value: Caller input.

    Returns:
        Float64 array view of ``value``.
    """
    return np.asarray(value, dtype=np.float64)


def _as_output(value: np.ndarray, *inputs: object) -> Scalar:
    """Return ``float`` for all-scalar inputs, else a float array.

    Args:
        value: Computed result.
        *inputs: Caller inputs that determined the result shape.

    Returns:
        Scalar or array result.
    """
    if all(np.isscalar(item) for item in inputs):
        return float(np.asarray(value).item())
    return np.asarray(value, dtype=np.float64)


class Pacejka2002Model:
    """Pacejka 2002 model backed by a parsed Tire Property File.

    Parameter records keep their defaults until
    :meth:`initialize_from_properties` is called.
    """

    def __init__(
        self,
        properties: PropertyStore,
        config: TireEvaluationConfig | None = None,
    ) -> None:
        """Initialize default parameter records for a property store.

        Args:
            properties: Parsed property store, shared read-only.
            config: Evaluation constants. Defaults to :class:`TireEvaluationConfig`.

        Raises:
            tirecraft.utils.exceptions.ModelLoadingError: If ``properties`` is ``None``.
            tirecraft.utils.exceptions.ConfigurationError: If ``config`` is invalid.
        """
        if properties is None:
            msg = "A PropertyStore is required to build a tire model"
            raise ModelLoadingError(msg)
        self.properties = properties
        self.config = config or TireEvaluationConfig()
        self.config.validate()

        self.units = UnitScales()
        self.model = ModelParameters()
        self.dimension = DimensionParameters()
        self.vertical = VerticalParameters()
        self.scaling = ScalingParameters()
        self.longitudinal = LongitudinalParameters()
        self.overturning = OverturningParameters()
        self.lateral = LateralParameters()
        self.rolling = RollingParameters()
        self.aligning = AligningParameters()
        self.conditions = ConditionsParameters()

    @classmethod
    def from_tir(cls, text: str, config: TireEvaluationConfig | None = None) -> Pacejka2002Model:
        """Parse ``.tir`` text and build an uninitialized model.

        Args:
            text: Full contents of a Tire Property File.
            config: Optional evaluation constants.

        Returns:
            Model whose records still hold defaults.
        """
        return cls(PropertyStore.from_tir(text), config)

    def initialize_from_properties(self) -> list[TirLoadError]:
        """Run all section loaders and the derived-value fixups.

        Returns:
            All loading errors, in loader order. None of them abort loading.
        """
        self.units = UnitScales()
        store = self.properties
        errors: list[TirLoadError] = []
        errors.extend(loader.load_units(store, self.units))
        errors.extend(loader.load_model(store, self.model))
        errors.extend(loader.load_dimension(store, self.dimension, self.units))
        errors.extend(loader.load_vertical(store, self.vertical, self.units))
        errors.extend(loader.load_scaling(store, self.scaling))
        errors.extend(loader.load_longitudinal(store, self.longitudinal))
        errors.extend(loader.load_overturning(store, self.overturning))
        errors.extend(loader.load_lateral(store, self.lateral))
        errors.extend(loader.load_rolling(store, self.rolling))
        errors.extend(loader.load_aligning(store, self.aligning))
        errors.extend(loader.load_conditions(store, self.conditions, self.units))

        loader.apply_vertical_fixups(self.vertical, self.dimension)
        if not loader.has_pressure_data(self.conditions):
            zeroed = loader.zero_pressure_coefficients(
                self.longitudinal, self.lateral, self.rolling, self.vertical
            )
            if zeroed:
                logger.debug("No inflation pressure data; zeroed %s", ", ".join(zeroed))

        self._log_errors(errors)
        return errors

    @staticmethod
    def _log_errors(errors: list[TirLoadError]) -> None:
        """Report loading errors through the module logger.

        Args:
            errors: Collected loading errors.
        """
        if errors:
            logger.info("Tire model initialized with %d loading errors", len(errors))
        for error in errors:
            logger.debug("%s: %s", type(error).__name__, error)

    def _load_terms(self, vertical_load: np.ndarray) -> tuple[float, np.ndarray]:
        """Scaled nominal load and normalized load increment.

        Args:
            vertical_load: Vertical load [N].

        Returns:
            ``(Fz0', dfz)``.
        """
        fz0 = np.float64(self.vertical.fnomin * self.scaling.lfzo)
        return fz0, (vertical_load - fz0) / fz0

    def compute_lateral_force(
        self,
        slip_angle: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
        friction: Scalar,
        temperature: Scalar | None = None,
    ) -> LateralForceResult:
        """Compute lateral force and the terms shared with the aligning moment.

        The argument ``B * (alpha + SHy)`` is clamped to
        ``(-pi/2 + eps, pi/2 - eps)``.

        Args:
            slip_angle: Slip angle [rad].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].
            friction: Road friction coefficient.
            temperature: Ignored; this model has no thermal terms.

        Returns:
            ``(fy, shf, b, c)``; pass ``shf``, ``b`` and ``c`` to
            :meth:`compute_aligning_moment`.
        """
        return self._lateral_force(slip_angle, vertical_load, inclination_angle, friction)

    def _lateral_force(
        self,
        slip_angle: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
        friction: Scalar,
        peak_scale: Scalar = 1.0,
        stiffness_scale: Scalar = 1.0,
        stiffness_load_scale: Scalar = 1.0,
    ) -> LateralForceResult:
        """Evaluate the lateral Magic Formula with optional correction factors.

        Args:
            slip_angle: Slip angle [rad].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].
            friction: Road friction coefficient.
            peak_scale: Multiplier on the peak factor ``D``.
            stiffness_scale: Multiplier on the cornering stiffness ``BCD``.
            stiffness_load_scale: Multiplier on the ``PKY2`` load term.

        Returns:
            ``(fy, shf, b, c)``.
        """
        p = self.lateral
        s = self.scaling
        alpha = _as_array(slip_angle)
        fz = _as_array(vertical_load)
        gamma = _as_array(inclination_angle)
        mu = _as_array(friction)
        fz0, dfz = self._load_terms(fz)

        c = p.pcy1 * s.lcy
        mu_y = (p.pdy1 + p.pdy2 * dfz) * (1.0 - p.pdy3 * gamma**2) * s.lmuy
        d = peak_scale * mu_y * fz * mu / self.config.reference_friction
        e = (
            (p.pey1 + p.pey2 * dfz)
            * (1.0 - (p.pey3 + p.pey4 * gamma) * np.sign(alpha))
            * s.ley
        )
        e = np.minimum(e, 1.0)
        bcd = (
            stiffness_scale
            * p.pky1
            * self.vertical.fnomin
            * np.sin(2.0 * np.arctan(fz / (p.pky2 * fz0 * stiffness_load_scale)))
            * s.lfzo
            * s.lky
        )
        b = bcd / (c * d)
        shy = (p.phy1 + p.phy2 * dfz) * s.lhy
        svy = fz * ((p.pvy1 + p.pvy2 * dfz) * s.lvy) * s.lmuy

        b_alpha = self._clamp_slip_argument(b * (alpha + shy))
        fy = d * np.sin(c * np.arctan(b_alpha - e * (b_alpha - np.arctan(b_alpha)))) + svy
        shf = shy + svy / bcd

        inputs = (
            slip_angle,
            vertical_load,
            inclination_angle,
            friction,
            peak_scale,
            stiffness_scale,
            stiffness_load_scale,
        )
        return LateralForceResult(
            fy=_as_output(fy, *inputs),
            shf=_as_output(shf, *inputs),
            b=_as_output(b, *inputs),
            c=float(c),
        )

    def _clamp_slip_argument(self, b_alpha: np.ndarray) -> np.ndarray:
        """Keep ``B * alpha`` where the arctangent stays well conditioned.

        Args:
            b_alpha: Unclamped ``B * (alpha + SHy)``.

        Returns:
            Values clipped to ``(-pi/2 + eps, pi/2 - eps)``.
        """
        limit = math.pi / 2.0 - self.config.clamp_epsilon
        return np.clip(b_alpha, -limit, limit)

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
            temperature: Ignored; this model has no thermal terms.

        Returns:
            Longitudinal force [N].
        """
        return self._longitudinal_force(slip_ratio, vertical_load, inclination_angle, friction)

    def _longitudinal_force(
        self,
        slip_ratio: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
        friction: Scalar,
        peak_scale: Scalar = 1.0,
        stiffness_scale: Scalar = 1.0,
    ) -> Scalar:
        """Evaluate the longitudinal Magic Formula with optional correction factors.

        Args:
            slip_ratio: Longitudinal slip ratio.
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].
            friction: Road friction coefficient.
            peak_scale: Multiplier on the peak factor ``D``.
            stiffness_scale: Multiplier on the slip stiffness ``BCD``.

        Returns:
            Longitudinal force [N].
        """
        p = self.longitudinal
        s = self.scaling
        kappa = _as_array(slip_ratio)
        fz = _as_array(vertical_load)
        gamma = _as_array(inclination_angle)
        mu = _as_array(friction)
        _, dfz = self._load_terms(fz)

        c = p.pcx1 * s.lcx
        mu_x = (p.pdx1 + p.pdx2 * dfz) * (1.0 - p.pdx3 * gamma**2) * s.lmux
        d = peak_scale * mu_x * fz * mu / self.config.reference_friction
        e = np.minimum((p.pex1 + p.pex2 * dfz + p.pex3 * dfz**2) * s.lex, 1.0)
        bcd = stiffness_scale * fz * (p.pkx1 + p.pkx2) * s.lkx
        b = bcd / (c * d)
        shx = (p.phx1 + p.phx2 * dfz) * s.lhx
        svx = fz * (p.pvx1 + p.pvx2 * dfz) * s.lvx * s.lmux

        b_kappa = b * (kappa + shx)
        fx = d * np.sin(c * np.arctan(b_kappa - e * (b_kappa - np.arctan(b_kappa)))) + svx
        return _as_output(
            fx, slip_ratio, vertical_load, inclination_angle, friction, peak_scale, stiffness_scale
        )

    def compute_overturning_moment(
        self,
        lateral_force: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
    ) -> Scalar:
        """Compute overturning moment.

        Args:
            lateral_force: Lateral force [N].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].

        Returns:
            Overturning moment [N*m].
        """
        q = self.overturning
        fy = _as_array(lateral_force)
        fz = _as_array(vertical_load)
        gamma = _as_array(inclination_angle)
        fz_nom = np.float64(self.vertical.fnomin)
        r0 = self.config.reference_radius

        mx = (
            r0 * fz * q.qsx1 * self.scaling.lvx
            - q.qsx2 * gamma
            + q.qsx3 * fy / fz_nom
            + q.qsx4
            * np.cos(q.qsx5 * np.arctan(q.qsx6 * fz / fz_nom) ** 2)
            * np.sin(q.qsx7 * gamma + q.qsx8 * np.arctan(q.qsx9 * fy / fz_nom))
            + q.qsx10 * np.arctan(q.qsx11 * fz / fz_nom) * gamma
        )
        return _as_output(mx, lateral_force, vertical_load, inclination_angle)

    def compute_rolling_resistance_moment(
        self,
        longitudinal_force: Scalar,
        vertical_load: Scalar,
        inclination_angle: Scalar,
    ) -> Scalar:
        """Compute rolling resistance moment at the configured nominal speed.

        Args:
            longitudinal_force: Longitudinal force [N].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].

        Returns:
            Rolling resistance moment [N*m].
        """
        q = self.rolling
        fx = _as_array(longitudinal_force)
        fz = _as_array(vertical_load)
        gamma = _as_array(inclination_angle)
        fz_nom = np.float64(self.vertical.fnomin)
        r0 = self.config.reference_radius
        vx = self.config.longitudinal_speed
        v_ref = math.sqrt(GRAVITY * r0)
        v_star = abs(vx / v_ref)

        speed_blend = sine_step(abs(vx), 0.5, 0.0, 1.0, 1.0) * math.copysign(1.0, vx)
        my = (
            speed_blend
            * fz
            * r0
            * (
                q.qsy1
                + q.qsy2 * fx / fz_nom
                + q.qsy3 * v_star
                + q.qsy4 * v_star**4
                + (q.qsy5 + q.qsy6 * fz / fz_nom) * gamma**2
            )
            * (fz / fz_nom) ** q.qsy7
        )
        return _as_output(my, longitudinal_force, vertical_load, inclination_angle)

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
        """Compute aligning moment as pneumatic trail plus residual moment.

        ``lateral_force``, ``shf``, ``b_fy`` and ``c_fy`` must come from one
        :meth:`compute_lateral_force` call for the same operating point.

        Args:
            slip_angle: Slip angle [rad].
            vertical_load: Vertical load [N].
            inclination_angle: Inclination (camber) angle [rad].
            lateral_force: ``fy`` from the lateral force evaluation.
            shf: ``shf`` from the lateral force evaluation.
            b_fy: ``b`` from the lateral force evaluation.
            c_fy: ``c`` from the lateral force evaluation.

        Returns:
            Aligning moment [N*m].
        """
        q = self.aligning
        s = self.scaling
        alpha = _as_array(slip_angle)
        fz = _as_array(vertical_load)
        fy = _as_array(lateral_force)
        gamma_z = _as_array(inclination_angle) * s.lgaz
        fz0, dfz = self._load_terms(fz)
        r0 = self.config.reference_radius

        c_t = q.qcz1
        sht = q.qhz1 + q.qhz2 * dfz + (q.qhz3 + q.qhz4 * dfz) * gamma_z
        alpha_t = alpha + sht
        b_t = (
            (q.qbz1 + q.qbz2 * dfz + q.qbz3 * dfz**2)
            * (1.0 + q.qbz4 * gamma_z + q.qbz5 * np.abs(gamma_z))
            * r0
            / fz0
            * s.ltr
        )
        d_t = (
            fz
            * (q.qdz1 + q.qdz2 * dfz)
            * (1.0 + q.qdz3 * gamma_z + q.qdz4 * gamma_z**2)
            * r0
            / fz0
            * s.ltr
        )
        e_t = (q.qez1 + q.qez2 * dfz + q.qez3 * dfz**2) * (
            1.0 + (q.qez4 + q.qez5 * gamma_z) * np.arctan(b_t * c_t * alpha_t) / (math.pi / 2.0)
        )
        bt_alpha = b_t * alpha_t
        trail = (
            d_t
            * np.cos(c_t * np.arctan(bt_alpha - e_t * (bt_alpha - np.arctan(bt_alpha))))
            * np.cos(alpha)
        )
        mz = -trail * fy + self._residual_moment(alpha, fz, gamma_z, shf, b_fy, c_fy)
        return _as_output(
            mz, slip_angle, vertical_load, inclination_angle, lateral_force, shf, b_fy, c_fy
        )

    def _residual_moment(
        self,
        alpha: np.ndarray,
        fz: np.ndarray,
        gamma_z: np.ndarray,
        shf: Scalar,
        b_fy: Scalar,
        c_fy: Scalar,
    ) -> np.ndarray:
        """Residual aligning moment ``Mzr`` driven by the lateral-force terms.

        Args:
            alpha: Slip angle [rad].
            fz: Vertical load [N].
            gamma_z: Scaled inclination angle [rad].
            shf: Horizontal shift from the lateral force evaluation.
            b_fy: Lateral stiffness factor from the lateral force evaluation.
            c_fy: Lateral shape factor from the lateral force evaluation.

        Returns:
            Residual moment [N*m].
        """
        q = self.aligning
        s = self.scaling
        _, dfz = self._load_terms(fz)
        alpha_r = alpha + _as_array(shf)
        b_r = np.float64(q.qbz9) * s.lky / s.lmuy + q.qbz10 * _as_array(b_fy) * _as_array(c_fy)
        d_r = (
            fz
            * ((q.qdz6 + q.qdz7 * dfz) * s.ltr + (q.qdz8 + q.qdz9 * dfz) * gamma_z)
            * self.config.reference_radius
            * s.lmuy
        )
        return d_r * np.cos(np.arctan(b_r * alpha_r)) * np.cos(alpha)
