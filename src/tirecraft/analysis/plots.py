"""Plot generation for characteristic curves."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from tirecraft.analysis.curves import CharacteristicCurves

matplotlib.use("Agg")


def _save_dual_format(fig: Figure, out_base: Path) -> None:
    """Write a figure to PNG and PDF with a shared base path.

    Args:
        fig: Figure object to persist.
        out_base: Output path without suffix.
    """
    out_base.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_base.with_suffix(".png"), dpi=180, bbox_inches="tight")
    fig.savefig(out_base.with_suffix(".pdf"), bbox_inches="tight")


def plot_lateral_force(curves: CharacteristicCurves, out_base: Path) -> None:
    """Plot lateral force against slip angle.

    Args:
        curves: Characteristic curves from one sweep.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(7, 5))
    ax.plot(np.degrees(curves.slip_angle), curves.lateral_force, lw=2.0)
    ax.set_xlabel("Slip angle [deg]")
    ax.set_ylabel("Fy [N]")
    ax.set_title(f"Lateral Force at Fz = {curves.vertical_load:.0f} N")
    ax.grid(True, alpha=0.3)
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_longitudinal_force(curves: CharacteristicCurves, out_base: Path) -> None:
    """Plot longitudinal force against slip ratio.

    Args:
        curves: Characteristic curves from one sweep.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(7, 5))
    ax.plot(curves.slip_ratio, curves.longitudinal_force, lw=2.0)
    ax.set_xlabel("Slip ratio [-]")
    ax.set_ylabel("Fx [N]")
    ax.set_title(f"Longitudinal Force at Fz = {curves.vertical_load:.0f} N")
    ax.grid(True, alpha=0.3)
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_moments(curves: CharacteristicCurves, out_base: Path) -> None:
    """Plot aligning and overturning moments against slip angle.

    Args:
        curves: Characteristic curves from one sweep.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(7, 5))
    slip_deg = np.degrees(curves.slip_angle)
    ax.plot(slip_deg, curves.aligning_moment, label="Mz")
    ax.plot(slip_deg, curves.overturning_moment, label="Mx")
    ax.set_xlabel("Slip angle [deg]")
    ax.set_ylabel("Moment [Nm]")
    ax.set_title("Aligning and Overturning Moments")
    ax.grid(True, alpha=0.3)
    ax.legend()
    _save_dual_format(fig, out_base)
    plt.close(fig)


def export_curve_plots(curves: CharacteristicCurves, output_dir: str | Path) -> None:
    """Export all characteristic-curve plots in PNG and PDF format.

    Args:
        curves: Characteristic curves from one sweep.
        output_dir: Directory receiving the plot files.
    """
    out = Path(output_dir)
    plot_lateral_force(curves, out / "lateral_force")
    plot_longitudinal_force(curves, out / "longitudinal_force")
    plot_moments(curves, out / "moments")
