"""Populate parameter records from a :class:`~tirecraft.properties.PropertyStore`.

Every loader follows the same policy: a missing section yields exactly one
:class:`SectionNotFoundError` and leaves the record untouched; each missing
property yields one :class:`PropertyNotFoundError` and resets the field to the
group fallback. Errors are returned, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from tirecraft.properties.store import PropertyStore
from tirecraft.tire.params import (
    AligningParameters,
    CalculationMode,
    ConditionsParameters,
    DimensionParameters,
    LateralParameters,
    LongitudinalParameters,
    ModelParameters,
    OverturningParameters,
    ParameterRecord,
    RollingParameters,
    ScalingParameters,
    TemperatureParameters,
    TireSide,
    UnitScales,
    VerticalParameters,
)
from tirecraft.tire.units import UNIT_TABLES, unit_factor
from tirecraft.utils.constants import NOMINAL_INFLATION_PRESSURE
from tirecraft.utils.exceptions import (
    ModelLoadingError,
    PropertyNotFoundError,
    SectionNotFoundError,
    TirLoadError,
    UnitConversionError,
)

logger = logging.getLogger(__name__)

SUPPORTED_FILE_FORMATS = ("PAC2002", "MF_05")
QSY1_FLOOR = 0.01
PRESSURE_DEPENDENT_PROPERTIES = (
    "PPX1",
    "PPX2",
    "PPX3",
    "PPX4",
    "PPY1",
    "PPY2",
    "PPY3",
    "PPY4",
    "QSY1",
    "QSY2",
    "QSY8",
    "QPFZ1",
)


@dataclass(frozen=True)
class LoadGroup:
    """Expected properties of one ``.tir`` section.

    Attributes:
        section: Section name in the property store.
        properties: Expected property names, in load order.
        fallback: Value assigned to a property that is absent.
        report_missing: Whether an absent property records an error.
    """

    section: str
    properties: tuple[str, ...]
    fallback: float = 0.0
    report_missing: bool = True

    def load(
        self,
        store: PropertyStore,
        record: ParameterRecord,
        scales: Mapping[str, float] | None = None,
    ) -> list[TirLoadError]:
        """Copy the group's properties from the store into a record.

        Args:
            store: Parsed property store.
            record: Record receiving the values.
            scales: Optional unit multipliers keyed by property name.

        Returns:
            Errors for a missing section or missing properties.
        """
        section = store.get(self.section)
        if section is None:
            return [SectionNotFoundError(self.section)]

        scales = scales or {}
        errors: list[TirLoadError] = []
        for name in self.properties:
            value = section.get(name)
            if value is None:
                record.set(name, self.fallback)
                if self.report_missing:
                    errors.append(PropertyNotFoundError(name, self.section))
                continue
            if isinstance(value, str):
                record.set(name, self.fallback)
                errors.append(
                    ModelLoadingError(
                        f'Property "{name}" in section "{self.section}" is not numeric: {value!r}'
                    )
                )
                continue
            record.set(name, scales.get(name, 1.0) * float(value))
        return errors


DIMENSION_GROUP = LoadGroup("DIMENSION", DimensionParameters.property_names())
VERTICAL_GROUP = LoadGroup("VERTICAL", VerticalParameters.property_names())
SCALING_GROUP = LoadGroup(
    "SCALING_COEFFICIENTS",
    ScalingParameters.property_names(),
    fallback=1.0,
    report_missing=False,
)
LONGITUDINAL_GROUP = LoadGroup("LONGITUDINAL_COEFFICIENTS", LongitudinalParameters.property_names())
OVERTURNING_GROUP = LoadGroup("OVERTURNING_COEFFICIENTS", OverturningParameters.property_names())
LATERAL_GROUP = LoadGroup("LATERAL_COEFFICIENTS", LateralParameters.property_names())
ROLLING_GROUP = LoadGroup("ROLLING_COEFFICIENTS", RollingParameters.property_names())
ALIGNING_GROUP = LoadGroup("ALIGNING_COEFFICIENTS", AligningParameters.property_names())
CONDITIONS_GROUP = LoadGroup(
    "TIRE_CONDITIONS",
    ConditionsParameters.property_names(),
    fallback=NOMINAL_INFLATION_PRESSURE,
)
TEMPERATURE_GROUP = LoadGroup("TEMPERATURE_COEFFICIENTS", TemperatureParameters.property_names())


def load_units(store: PropertyStore, units: UnitScales) -> list[TirLoadError]:
    """Resolve ``[UNITS]`` tokens into SI multipliers.

    An unknown or absent token records a :class:`UnitConversionError` and keeps
    the previous multiplier.

    Args:
        store: Parsed property store.
        units: Unit scales updated in place.

    Returns:
        Collected loading errors.
    """
    section = store.get("UNITS")
    if section is None:
        return [SectionNotFoundError("UNITS")]

    errors: list[TirLoadError] = []
    for prop, field_name, table in UNIT_TABLES:
        token = section.get(prop)
        factor = unit_factor(token, table)
        if factor is None:
            errors.append(UnitConversionError(field_name, token))
            continue
        setattr(units, field_name, factor)

    units.speed = units.length / units.time
    units.inertia = units.mass * units.length * units.length
    units.stiffness = units.force / units.length
    units.damping = units.force / units.speed
    logger.debug("Resolved unit scales: %s", units)
    return errors


def load_model(store: PropertyStore, model: ModelParameters) -> list[TirLoadError]:
    """Read format, tire side, friction-ellipse and mode flags from ``[MODEL]``.

    Args:
        store: Parsed property store.
        model: Model flags updated in place.

    Returns:
        Collected loading errors.
    """
    section = store.get("MODEL")
    if section is None:
        return [SectionNotFoundError("MODEL")]

    errors: list[TirLoadError] = []
    file_format = section.get("PROPERTY_FILE_FORMAT")
    model.property_file_format = str(file_format) if file_format is not None else ""
    if not isinstance(file_format, str) or file_format.upper() not in SUPPORTED_FILE_FORMATS:
        errors.append(
            ModelLoadingError(
                "Acceptable tire property file format not found: "
                f'Expected "PAC2002" or "MF_05", found {file_format}'
            )
        )

    tire_side = section.get("TYRESIDE")
    if isinstance(tire_side, str) and tire_side.upper() in ("UNKNOWN", "LEFT"):
        model.measured_side = TireSide.LEFT
    else:
        model.measured_side = TireSide.RIGHT

    fe_method = section.get("FE_METHOD")
    model.use_friction_ellipse = not (isinstance(fe_method, str) and fe_method.upper() == "NO")

    use_mode = section.get("USE_MODE")
    modes = {mode.value: mode for mode in CalculationMode}
    if isinstance(use_mode, float) and use_mode in modes:
        model.calculation_mode = modes[int(use_mode)]
    else:
        model.calculation_mode = CalculationMode.VERTICAL_FORCE_ONLY
    return errors


def load_dimension(
    store: PropertyStore, dimension: DimensionParameters, units: UnitScales
) -> list[TirLoadError]:
    """Load tire geometry, scaling lengths to meters.

    Args:
        store: Parsed property store.
        dimension: Geometry record updated in place.
        units: Resolved unit scales.

    Returns:
        Collected loading errors.
    """
    scales = {
        "UNLOADED_RADIUS": units.length,
        "WIDTH": units.length,
        "RIM_RADIUS": units.length,
        "RIM_WIDTH": units.length,
    }
    return DIMENSION_GROUP.load(store, dimension, scales)


def load_vertical(
    store: PropertyStore, vertical: VerticalParameters, units: UnitScales
) -> list[TirLoadError]:
    """Load vertical stiffness, damping and nominal load.

    Args:
        store: Parsed property store.
        vertical: Vertical record updated in place.
        units: Resolved unit scales.

    Returns:
        Collected loading errors.
    """
    scales = {
        "VERTICAL_STIFFNESS": units.stiffness,
        "VERTICAL_DAMPING": units.damping,
        "FNOMIN": units.force,
    }
    return VERTICAL_GROUP.load(store, vertical, scales)


def load_scaling(store: PropertyStore, scaling: ScalingParameters) -> list[TirLoadError]:
    """Load user scaling factors; absent factors stay neutral at 1.0.

    Args:
        store: Parsed property store.
        scaling: Scaling record updated in place.

    Returns:
        Collected loading errors.
    """
    return SCALING_GROUP.load(store, scaling)


def load_longitudinal(
    store: PropertyStore, longitudinal: LongitudinalParameters
) -> list[TirLoadError]:
    """Load longitudinal force coefficients.

    Args:
        store: Parsed property store.
        longitudinal: Longitudinal record updated in place.

    Returns:
        Collected loading errors.
    """
    return LONGITUDINAL_GROUP.load(store, longitudinal)


def load_overturning(
    store: PropertyStore, overturning: OverturningParameters
) -> list[TirLoadError]:
    """Load overturning moment coefficients.

    Args:
        store: Parsed property store.
        overturning: Overturning record updated in place.

    Returns:
        Collected loading errors.
    """
    return OVERTURNING_GROUP.load(store, overturning)


def load_lateral(store: PropertyStore, lateral: LateralParameters) -> list[TirLoadError]:
    """Load lateral force coefficients.

    Args:
        store: Parsed property store.
        lateral: Lateral record updated in place.

    Returns:
        Collected loading errors.
    """
    return LATERAL_GROUP.load(store, lateral)


def load_rolling(store: PropertyStore, rolling: RollingParameters) -> list[TirLoadError]:
    """Load rolling resistance coefficients, flooring a negative ``QSY1``.

    Args:
        store: Parsed property store.
        rolling: Rolling record updated in place.

    Returns:
        Collected loading errors.
    """
    errors = ROLLING_GROUP.load(store, rolling)
    if rolling.qsy1 < 0.0:
        rolling.qsy1 = QSY1_FLOOR
    return errors


def load_aligning(store: PropertyStore, aligning: AligningParameters) -> list[TirLoadError]:
    """Load aligning moment coefficients.

    Args:
        store: Parsed property store.
        aligning: Aligning record updated in place.

    Returns:
        Collected loading errors.
    """
    return ALIGNING_GROUP.load(store, aligning)


def load_conditions(
    store: PropertyStore, conditions: ConditionsParameters, units: UnitScales
) -> list[TirLoadError]:
    """Load inflation pressures, scaled to pascals.

    Args:
        store: Parsed property store.
        conditions: Conditions record updated in place.
        units: Resolved unit scales.

    Returns:
        Collected loading errors.
    """
    scales = {"IP": units.pressure, "IP_NOM": units.pressure}
    return CONDITIONS_GROUP.load(store, conditions, scales)


def load_temperature(
    store: PropertyStore, temperature: TemperatureParameters
) -> list[TirLoadError]:
    """Load thermal correction coefficients.

    Args:
        store: Parsed property store.
        temperature: Temperature record updated in place.

    Returns:
        Collected loading errors.
    """
    return TEMPERATURE_GROUP.load(store, temperature)


def apply_vertical_fixups(
    vertical: VerticalParameters, dimension: DimensionParameters
) -> None:
    """Derive ``QFZ1`` from stiffness and radius, and force ``QFZ2`` to zero.

    Args:
        vertical: Vertical record updated in place.
        dimension: Loaded geometry.
    """
    if vertical.fnomin != 0.0:
        vertical.qfz1 = vertical.vertical_stiffness * dimension.unloaded_radius / vertical.fnomin
    else:
        vertical.qfz1 = 0.0
    vertical.qfz2 = 0.0


def has_pressure_data(conditions: ConditionsParameters) -> bool:
    """Check whether both inflation pressures carry real data.

    Args:
        conditions: Loaded inflation pressures.

    Returns:
        ``True`` when neither pressure is the unity placeholder.
    """
    return conditions.ip != 1.0 and conditions.ip_nom != 1.0


def zero_pressure_coefficients(*records: ParameterRecord) -> list[str]:
    """Zero every non-zero pressure-dependent coefficient held by the records.

    Args:
        *records: Records to scan, e.g. longitudinal, lateral, rolling, vertical.

    Returns:
        Names of the coefficients that were zeroed.
    """
    zeroed: list[str] = []
    for name in PRESSURE_DEPENDENT_PROPERTIES:
        for record in records:
            if record.has(name) and record.get(name):
                record.set(name, 0.0)
                zeroed.append(name)
    return zeroed
