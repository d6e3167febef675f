"""Shared test helpers."""

from __future__ import annotations

from pathlib import Path

from tirecraft.properties import PropertyStore
from tirecraft.tire import Pacejka2002Model, ThermalPacejkaModel

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"
SAMPLE_TIR_PATH = FIXTURES_DIR / "sample.tir"


def sample_tir_text() -> str:
    """Read the representative PAC2002 property file.

    Returns:
        Contents of ``tests/fixtures/sample.tir``.
    """
    return SAMPLE_TIR_PATH.read_text(encoding="utf-8")


def sample_property_store() -> PropertyStore:
    """Build a property store from the sample property file.

    Returns:
        Store used by unit and integration tests.
    """
    return PropertyStore.from_tir(sample_tir_text())


def store_without_section(section_name: str) -> PropertyStore:
    """Build the sample store with one section removed.

    Args:
        section_name: Section to drop, e.g. ``"LATERAL_COEFFICIENTS"``.

    Returns:
        Store holding every other sample section.
    """
    store = sample_property_store()
    return PropertyStore(
        {name: section for name, section in store.items() if name != section_name.upper()}
    )


def sample_pacejka_model() -> Pacejka2002Model:
    """Create and initialize an isothermal model from the sample file.

    Returns:
        Initialized Pacejka 2002 model.
    """
    model = Pacejka2002Model(sample_property_store())
    model.initialize_from_properties()
    return model


def sample_thermal_model() -> ThermalPacejkaModel:
    """Create and initialize a thermal model from the sample file.

    Returns:
        Initialized temperature-extended model.
    """
    model = ThermalPacejkaModel.from_properties(sample_property_store())
    model.initialize_from_properties()
    return model
