"""Tests for package-level export surfaces."""

from __future__ import annotations

import unittest

import tirecraft
import tirecraft.analysis as analysis_pkg
import tirecraft.tire as tire_pkg


class PackageExportTests(unittest.TestCase):
    """Validate the names re-exported by package ``__init__`` modules."""

    def test_top_level_exports_resolve(self) -> None:
        """Resolve every name in ``tirecraft.__all__``."""
        for name in tirecraft.__all__:
            with self.subTest(name=name):
                self.assertIsNotNone(getattr(tirecraft, name))

    def test_tire_exports_resolve(self) -> None:
        """Resolve models, records and config exports."""
        self.assertIsNotNone(tire_pkg.Pacejka2002Model)
        self.assertIsNotNone(tire_pkg.ThermalPacejkaModel)
        self.assertIsNotNone(tire_pkg.TireModel)
        self.assertIsNotNone(tire_pkg.build_evaluation_config)
        self.assertIsNotNone(tire_pkg.CalculationMode)

    def test_analysis_exports_resolve(self) -> None:
        """Resolve curve, plot and export helpers."""
        for name in analysis_pkg.__all__:
            with self.subTest(name=name):
                self.assertIsNotNone(getattr(analysis_pkg, name))

    def test_error_hierarchy_is_rooted(self) -> None:
        """Derive all loading errors from the shared base exception."""
        for error_type in (
            tirecraft.TirSyntaxError,
            tirecraft.SectionNotFoundError,
            tirecraft.PropertyNotFoundError,
            tirecraft.UnitConversionError,
            tirecraft.ModelLoadingError,
        ):
            with self.subTest(error_type=error_type.__name__):
                self.assertTrue(issubclass(error_type, tirecraft.TirLoadError))
                self.assertTrue(issubclass(error_type, tirecraft.TireModelError))
        self.assertTrue(issubclass(tirecraft.ConfigurationError, tirecraft.TireModelError))


if __name__ == "__main__":
    unittest.main()
