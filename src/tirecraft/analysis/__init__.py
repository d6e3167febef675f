"""Curve sweeps, plots, and parameter export."""

from tirecraft.analysis.curves import CharacteristicCurves, compute_characteristic_curves
from tirecraft.analysis.export import error_report, export_parameters_json, model_records
from tirecraft.analysis.plots import export_curve_plots

__all__ = [
    "CharacteristicCurves",
    "compute_characteristic_curves",
    "error_report",
    "export_curve_plots",
    "export_parameters_json",
    "model_records",
]
