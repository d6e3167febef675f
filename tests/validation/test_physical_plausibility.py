"""Validation tests for physical plausibility of the sample tire."""

from __future__ import annotations

import unittest

import numpy as np

from tirecraft.analysis import compute_characteristic_curves
from tests.helpers import sample_pacejka_model


class PhysicalValidationTests(unittest.TestCase):
    """Plausibility checks against typical passenger-car tire ranges."""

    _LOAD = 4000.0

    def setUp(self) -> None:
        """Build the sample model and a reference sweep."""
        self.model = sample_pacejka_model()
        self.curves = compute_characteristic_curves(
            self.model, self._LOAD, friction=0.8, max_slip_angle=0.3, samples=301
        )

    def test_peak_friction_coefficients_stay_realistic(self) -> None:
        """Keep normalized peak forces within dry-road ranges."""
        peak_lateral = np.max(np.abs(self.curves.lateral_force)) / self._LOAD
        peak_longitudinal = np.max(np.abs(self.curves.longitudinal_force)) / self._LOAD
        self.assertGreater(peak_lateral, 0.7)
        self.assertLess(peak_lateral, 1.5)
        self.assertGreater(peak_longitudinal, 0.8)
        self.assertLess(peak_longitudinal, 1.6)

    def test_cornering_stiffness_is_plausible(self) -> None:
        """Keep the normalized cornering stiffness near the origin in range."""
        step = 1e-5
        lateral = self.model.compute_lateral_force(
            np.array([-step, step]), self._LOAD, 0.0, 0.8
        ).fy
        stiffness = abs(lateral[1] - lateral[0]) / (2.0 * step) / self._LOAD
        self.assertGreater(stiffness, 5.0)
        self.assertLess(stiffness, 30.0)

    def test_longitudinal_slip_stiffness_matches_coefficients(self) -> None:
        """Recover ``(PKX1 + PKX2) * LKX`` as the slip stiffness per unit load."""
        shift = self.model.longitudinal.phx1 + self.model.longitudinal.phx2 * (
            (self._LOAD - self.model.vertical.fnomin * self.model.scaling.lfzo)
            / (self.model.vertical.fnomin * self.model.scaling.lfzo)
        )
        step = 1e-6
        fx = self.model.compute_longitudinal_force(
            np.array([-shift - step, -shift + step]), self._LOAD, 0.0, 0.8
        )
        stiffness = (fx[1] - fx[0]) / (2.0 * step) / self._LOAD
        longitudinal = self.model.longitudinal
        expected = (longitudinal.pkx1 + longitudinal.pkx2) * self.model.scaling.lkx
        self.assertAlmostEqual(stiffness / expected, 1.0, places=3)

    def test_rolling_resistance_is_small_and_positive(self) -> None:
        """Keep rolling resistance torque a small fraction of load times radius."""
        my = self.curves.rolling_resistance_moment
        ratio = my / (self._LOAD * self.model.config.reference_radius)
        self.assertTrue(np.all(ratio > 0.0))
        self.assertTrue(np.all(ratio < 0.05))

    def test_aligning_moment_stays_bounded_by_lateral_force(self) -> None:
        """Bound aligning moment by a decimetre-scale trail times lateral force."""
        bound = 0.2 * np.max(np.abs(self.curves.lateral_force))
        self.assertTrue(np.all(np.abs(self.curves.aligning_moment) < bound))


if __name__ == "__main__":
    unittest.main()
