"""Tire parameter records, loaders, and Magic Formula models."""

from tirecraft.tire.config import TireEvaluationConfig, build_evaluation_config
from tirecraft.tire.model_api import LateralForceResult, TireModel
from tirecraft.tire.pac2002 import Pacejka2002Model
from tirecraft.tire.params import (
    AligningParameters,
    CalculationMode,
    ConditionsParameters,
    DimensionParameters,
    LateralParameters,
    LongitudinalParameters,
    ModelParameters,
    OverturningParameters,
    RollingParameters,
    ScalingParameters,
    TemperatureParameters,
    TireSide,
    UnitScales,
    VerticalParameters,
)
from tirecraft.tire.thermal import ThermalPacejkaModel

__all__ = [
    "AligningParameters",
    "CalculationMode",
    "ConditionsParameters",
    "DimensionParameters",
    "LateralForceResult",
    "LateralParameters",
    "LongitudinalParameters",
    "ModelParameters",
    "OverturningParameters",
    "Pacejka2002Model",
    "RollingParameters",
    "ScalingParameters",
    "TemperatureParameters",
    "ThermalPacejkaModel",
    "TireEvaluationConfig",
    "TireModel",
    "TireSide",
    "UnitScales",
    "VerticalParameters",
    "build_evaluation_config",
]
