"""Unit tests for the Pacejka 2002 force and moment routines."""

from __future__ import annotations

import math
import unittest

import numpy as np

from tirecraft.tire import (
    AligningParameters,
    LateralForceResult,
    Pacejka2002Model,
    TireEvaluationConfig,
    build_evaluation_config,
)
from tirecraft.utils.constants import GRAVITY
from tirecraft.utils.exceptions import ConfigurationError, ModelLoadingError
from tests.helpers import sample_pacejka_model, sample_property_store


class PacejkaModelTests(unittest.TestCase):
    """Force and moment behavior at representative operating points."""

    _LOAD = 4000.0
    _MU = 0.8

    def setUp(self) -> None:
        """Build a fresh initialized model per test."""
        self.model = sample_pacejka_model()

    def test_missing_property_store_is_rejected(self) -> None:
        """Raise when no property store is supplied."""
        with self.assertRaises(ModelLoadingError):
            Pacejka2002Model(None)  # type: ignore[arg-type]

    def test_invalid_config_is_rejected(self) -> None:
        """Validate evaluation constants at construction."""
        with self.assertRaises(ConfigurationError):
            Pacejka2002Model(
                sample_property_store(), TireEvaluationConfig(reference_friction=0.0)
            )
        with self.assertRaises(ConfigurationError):
            build_evaluation_config(clamp_epsilon=1.5)
        with self.assertRaises(ConfigurationError):
            build_evaluation_config(reference_radius=-0.3)
        with self.assertRaises(ConfigurationError):
            build_evaluation_config(longitudinal_speed=-1.0)

    def test_records_keep_defaults_until_initialized(self) -> None:
        """Leave parameter records untouched by construction alone."""
        model = Pacejka2002Model(sample_property_store())
        self.assertEqual(model.lateral.pcy1, 0.0)
        self.assertEqual(model.dimension.unloaded_radius, 1.0)

    def test_lateral_force_returns_shared_terms(self) -> None:
        """Return ``(fy, shf, b, c)`` usable by index and by name."""
        result = self.model.compute_lateral_force(0.05, self._LOAD, 0.0, self._MU)
        self.assertIsInstance(result, LateralForceResult)
        self.assertEqual(result[0], result.fy)
        self.assertIsInstance(result.fy, float)
        self.assertAlmostEqual(result.c, 1.3507)
        self.assertTrue(math.isfinite(result.shf))
        self.assertTrue(math.isfinite(result.b))

    def test_lateral_force_changes_sign_with_slip(self) -> None:
        """Produce opposing lateral forces for opposing slip angles."""
        positive = self.model.compute_lateral_force(0.05, self._LOAD, 0.0, self._MU).fy
        negative = self.model.compute_lateral_force(-0.05, self._LOAD, 0.0, self._MU).fy
        at_zero = self.model.compute_lateral_force(0.0, self._LOAD, 0.0, self._MU).fy
        self.assertLess(positive * negative, 0.0)
        self.assertLess(abs(at_zero), 0.1 * min(abs(positive), abs(negative)))

    def test_lateral_force_grows_with_load(self) -> None:
        """Increase peak lateral force with vertical load."""
        low = self.model.compute_lateral_force(0.5, 2000.0, 0.0, self._MU).fy
        high = self.model.compute_lateral_force(0.5, 6000.0, 0.0, self._MU).fy
        self.assertGreater(abs(high), abs(low))

    def test_slip_argument_is_clamped(self) -> None:
        """Clip ``B * alpha`` to the open arctangent interval."""
        limit = math.pi / 2.0 - 0.001
        clipped = self.model._clamp_slip_argument(np.array([10.0, -10.0, 0.3]))
        np.testing.assert_allclose(clipped, [limit, -limit, 0.3])

    def test_clamp_respects_configured_epsilon(self) -> None:
        """Use the configured clamp margin."""
        model = Pacejka2002Model(
            sample_property_store(), build_evaluation_config(clamp_epsilon=0.1)
        )
        self.assertAlmostEqual(
            float(model._clamp_slip_argument(np.array(5.0))), math.pi / 2.0 - 0.1
        )

    def test_extreme_slip_saturates_at_clamped_value(self) -> None:
        """Return the same finite force for any slip beyond the clamp."""
        moderate = self.model.compute_lateral_force(0.5, self._LOAD, 0.0, self._MU).fy
        extreme = self.model.compute_lateral_force(1.5, self._LOAD, 0.0, self._MU).fy
        self.assertTrue(math.isfinite(extreme))
        self.assertAlmostEqual(moderate, extreme, places=9)

    def test_friction_scales_lateral_peak(self) -> None:
        """Scale the saturated lateral force with road friction."""
        self.model.lateral.pvy1 = 0.0
        self.model.lateral.pvy2 = 0.0
        dry = self.model.compute_lateral_force(0.5, self._LOAD, 0.0, 0.8).fy
        wet = self.model.compute_lateral_force(0.5, self._LOAD, 0.0, 0.4).fy
        self.assertAlmostEqual(wet / dry, 0.5, places=9)

    def test_longitudinal_force_follows_slip_sign(self) -> None:
        """Drive positive force for positive slip and brake for negative slip."""
        drive = self.model.compute_longitudinal_force(0.1, self._LOAD, 0.0, self._MU)
        brake = self.model.compute_longitudinal_force(-0.1, self._LOAD, 0.0, self._MU)
        self.assertIsInstance(drive, float)
        self.assertGreater(drive, 0.0)
        self.assertLess(brake, 0.0)

    def test_longitudinal_force_drops_on_low_friction(self) -> None:
        """Reduce longitudinal force at high slip on a low-friction road."""
        dry = self.model.compute_longitudinal_force(0.15, self._LOAD, 0.0, 0.8)
        wet = self.model.compute_longitudinal_force(0.15, self._LOAD, 0.0, 0.4)
        self.assertLess(wet, dry)

    def test_overturning_moment_from_camber_term(self) -> None:
        """Evaluate ``-QSX2 * gamma`` when only QSX2 is non-zero."""
        self.assertAlmostEqual(
            self.model.compute_overturning_moment(1000.0, self._LOAD, 0.0), 0.0
        )
        self.assertAlmostEqual(
            self.model.compute_overturning_moment(1000.0, self._LOAD, 0.05), -0.004 * 0.05
        )

    def test_rolling_resistance_moment_matches_closed_form(self) -> None:
        """Reproduce the rolling resistance relation at the nominal speed."""
        v_star = 1.0 / math.sqrt(GRAVITY * 1.0)
        expected = (
            self._LOAD
            * (0.01 + 0.0004 * v_star + 4e-05 * v_star**4)
            * (self._LOAD / 4850.0) ** 0.85
        )
        actual = self.model.compute_rolling_resistance_moment(0.0, self._LOAD, 0.0)
        self.assertAlmostEqual(actual, expected, places=9)

    def test_rolling_resistance_vanishes_at_standstill(self) -> None:
        """Blend the rolling resistance moment to zero at zero speed."""
        model = Pacejka2002Model(
            sample_property_store(), build_evaluation_config(longitudinal_speed=0.0)
        )
        model.initialize_from_properties()
        self.assertEqual(model.compute_rolling_resistance_moment(0.0, self._LOAD, 0.0), 0.0)

    def test_aligning_moment_is_finite(self) -> None:
        """Combine trail and residual moment into a finite value."""
        lateral = self.model.compute_lateral_force(0.03, self._LOAD, 0.0, self._MU)
        mz = self.model.compute_aligning_moment(0.03, self._LOAD, 0.0, *lateral)
        self.assertIsInstance(mz, float)
        self.assertTrue(math.isfinite(mz))

    def test_aligning_moment_matches_closed_form(self) -> None:
        """Reproduce ``Mz = -t * Fy + Mzr`` evaluated by hand."""
        self.model.aligning = AligningParameters(
            qbz1=9.0,
            qbz2=-1.5,
            qbz3=0.4,
            qbz4=0.2,
            qbz5=-0.3,
            qbz9=12.0,
            qbz10=0.3,
            qcz1=1.2,
            qdz1=0.09,
            qdz2=-0.005,
            qdz3=0.4,
            qdz4=-2.0,
            qdz6=0.002,
            qdz7=-0.001,
            qdz8=-0.1,
            qdz9=0.02,
            qez1=-1.5,
            qez2=0.3,
            qez3=-0.1,
            qez4=0.25,
            qez5=-0.8,
            qhz1=0.002,
            qhz2=0.001,
            qhz3=0.05,
            qhz4=-0.02,
        )
        alpha, fz, gamma = 0.04, 5200.0, 0.02
        fy, shf, b, c = self.model.compute_lateral_force(alpha, fz, gamma, self._MU)
        mz = self.model.compute_aligning_moment(alpha, fz, gamma, fy, shf, b, c)

        q = self.model.aligning
        s = self.model.scaling
        r0 = self.model.config.reference_radius
        fz0 = self.model.vertical.fnomin * s.lfzo
        dfz = (fz - fz0) / fz0
        g = gamma * s.lgaz

        alpha_t = alpha + q.qhz1 + q.qhz2 * dfz + (q.qhz3 + q.qhz4 * dfz) * g
        b_t = (
            (q.qbz1 + q.qbz2 * dfz + q.qbz3 * dfz**2)
            * (1.0 + q.qbz4 * g + q.qbz5 * abs(g))
            * r0
            / fz0
            * s.ltr
        )
        c_t = q.qcz1
        d_t = fz * (q.qdz1 + q.qdz2 * dfz) * (1.0 + q.qdz3 * g + q.qdz4 * g**2) * r0 / fz0 * s.ltr
        e_t = (q.qez1 + q.qez2 * dfz + q.qez3 * dfz**2) * (
            1.0 + (q.qez4 + q.qez5 * g) * math.atan(b_t * c_t * alpha_t) * 2.0 / math.pi
        )
        x_t = b_t * alpha_t
        shape = math.atan(x_t - e_t * (x_t - math.atan(x_t)))
        trail = d_t * math.cos(c_t * shape) * math.cos(alpha)

        b_r = q.qbz9 * s.lky / s.lmuy + q.qbz10 * b * c
        d_r = fz * ((q.qdz6 + q.qdz7 * dfz) * s.ltr + (q.qdz8 + q.qdz9 * dfz) * g) * r0 * s.lmuy
        residual = d_r * math.cos(math.atan(b_r * (alpha + shf))) * math.cos(alpha)

        expected = -trail * fy + residual
        self.assertNotEqual(trail, 0.0)
        self.assertNotEqual(residual, 0.0)
        self.assertAlmostEqual(mz, expected, delta=1e-9 * max(1.0, abs(expected)))

    def test_aligning_moment_uses_supplied_lateral_terms(self) -> None:
        """Depend on the caller-supplied ``shf``, ``b`` and ``c`` terms."""
        self.model.aligning.qbz10 = 0.2
        fy, shf, b, c = self.model.compute_lateral_force(0.03, self._LOAD, 0.0, self._MU)
        matched = self.model.compute_aligning_moment(0.03, self._LOAD, 0.0, fy, shf, b, c)
        repeated = self.model.compute_aligning_moment(0.03, self._LOAD, 0.0, fy, shf, b, c)
        other_b = self.model.compute_aligning_moment(0.03, self._LOAD, 0.0, fy, shf, 2.0 * b, c)
        other_shf = self.model.compute_aligning_moment(
            0.03, self._LOAD, 0.0, fy, shf + 0.01, b, c
        )
        self.assertEqual(matched, repeated)
        self.assertNotAlmostEqual(matched, other_b, places=6)
        self.assertNotAlmostEqual(matched, other_shf, places=6)

    def test_routines_support_vectorized_inputs(self) -> None:
        """Return arrays matching the input shape for array inputs."""
        slip = np.array([-0.1, 0.0, 0.1])
        load = np.array([3000.0, 4000.0, 5000.0])
        camber = np.zeros(3)
        lateral = self.model.compute_lateral_force(slip, load, camber, self._MU)
        fx = self.model.compute_longitudinal_force(slip, load, camber, self._MU)
        mz = self.model.compute_aligning_moment(slip, load, camber, *lateral)
        mx = self.model.compute_overturning_moment(lateral.fy, load, camber)
        my = self.model.compute_rolling_resistance_moment(fx, load, camber)
        for output in (lateral.fy, lateral.shf, fx, mz, mx, my):
            self.assertIsInstance(output, np.ndarray)
            self.assertEqual(output.shape, slip.shape)

        scalar = self.model.compute_lateral_force(0.1, 5000.0, 0.0, self._MU).fy
        self.assertAlmostEqual(float(lateral.fy[2]), scalar, places=9)

    def test_base_model_ignores_temperature(self) -> None:
        """Accept and ignore a temperature argument."""
        cold = self.model.compute_longitudinal_force(0.05, self._LOAD, 0.0, self._MU, 10.0)
        plain = self.model.compute_longitudinal_force(0.05, self._LOAD, 0.0, self._MU)
        self.assertEqual(cold, plain)


if __name__ == "__main__":
    unittest.main()
