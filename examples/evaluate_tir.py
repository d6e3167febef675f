"""Load a Tire Property File and report forces, moments, and curve plots."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tirecraft.analysis import (
    compute_characteristic_curves,
    export_curve_plots,
    export_parameters_json,
)
from tirecraft.properties import PropertyStore
from tirecraft.tire import (
    Pacejka2002Model,
    ThermalPacejkaModel,
    TireModel,
    build_evaluation_config,
)
from tirecraft.utils import configure_logging

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_TIR_PATH = PROJECT_ROOT / "tests" / "fixtures" / "sample.tir"


def _parse_args() -> argparse.Namespace:
    """Parse command-line arguments for the evaluation example.

    Returns:
        Parsed CLI namespace.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "tir_path",
        nargs="?",
        type=Path,
        default=DEFAULT_TIR_PATH,
        help="Tire Property File to evaluate.",
    )
    parser.add_argument("--load", type=float, default=4000.0, help="Vertical load [N].")
    parser.add_argument("--slip-angle", type=float, default=0.05, help="Slip angle [rad].")
    parser.add_argument("--slip-ratio", type=float, default=0.05, help="Slip ratio [-].")
    parser.add_argument("--camber", type=float, default=0.0, help="Inclination angle [rad].")
    parser.add_argument("--friction", type=float, default=0.8, help="Road friction coefficient.")
    parser.add_argument(
        "--temperature",
        type=float,
        default=None,
        help="Tire temperature; enables the temperature-extended model.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=PROJECT_ROOT / "examples" / "output",
        help="Directory receiving plots and the parameter JSON.",
    )
    return parser.parse_args()


def _build_model(store: PropertyStore, use_temperature: bool) -> TireModel:
    """Build the isothermal or thermal model for a property store.

    Args:
        store: Parsed property store.
        use_temperature: Whether to wrap the base model with thermal terms.

    Returns:
        Uninitialized tire model.
    """
    config = build_evaluation_config()
    if use_temperature:
        return ThermalPacejkaModel.from_properties(store, config)
    return Pacejka2002Model(store, config)


def main() -> None:
    """Evaluate one operating point and export curves plus loaded parameters."""
    args = _parse_args()
    configure_logging(logging.INFO)
    logger = logging.getLogger("tir_example")

    store = PropertyStore.from_tir(args.tir_path.read_text(encoding="utf-8"))
    model = _build_model(store, args.temperature is not None)
    errors = model.initialize_from_properties()
    for error in errors:
        logger.warning("%s", error)

    lateral = model.compute_lateral_force(
        args.slip_angle, args.load, args.camber, args.friction, args.temperature
    )
    fx = model.compute_longitudinal_force(
        args.slip_ratio, args.load, args.camber, args.friction, args.temperature
    )
    mz = model.compute_aligning_moment(args.slip_angle, args.load, args.camber, *lateral)
    mx = model.compute_overturning_moment(lateral.fy, args.load, args.camber)
    my = model.compute_rolling_resistance_moment(fx, args.load, args.camber)

    logger.info("Fy: %.1f N | Fx: %.1f N", lateral.fy, fx)
    logger.info("Mz: %.2f Nm | Mx: %.3f Nm | My: %.3f Nm", mz, mx, my)

    curves = compute_characteristic_curves(
        model,
        args.load,
        inclination_angle=args.camber,
        friction=args.friction,
        temperature=args.temperature,
    )
    export_curve_plots(curves, args.output_dir)
    export_parameters_json(model, args.output_dir / "parameters.json", errors)
    logger.info("Wrote plots and parameters to %s", args.output_dir)


if __name__ == "__main__":
    main()
