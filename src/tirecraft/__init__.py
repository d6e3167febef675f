"""Tire Property File parsing and Pacejka Magic Formula evaluation."""

from tirecraft.parser import parse_tir
from tirecraft.properties import PropertyStore, build_property_store
from tirecraft.tire import (
    LateralForceResult,
    Pacejka2002Model,
    ThermalPacejkaModel,
    TireEvaluationConfig,
    build_evaluation_config,
)
from tirecraft.utils.exceptions import (
    ConfigurationError,
    ModelLoadingError,
    PropertyNotFoundError,
    SectionNotFoundError,
    TireModelError,
    TirLoadError,
    TirSyntaxError,
    UnitConversionError,
)

__all__ = [
    "ConfigurationError",
    "LateralForceResult",
    "ModelLoadingError",
    "Pacejka2002Model",
    "PropertyNotFoundError",
    "PropertyStore",
    "SectionNotFoundError",
    "ThermalPacejkaModel",
    "TirLoadError",
    "TirSyntaxError",
    "TireEvaluationConfig",
    "TireModelError",
    "UnitConversionError",
    "build_evaluation_config",
    "build_property_store",
    "parse_tir",
]
