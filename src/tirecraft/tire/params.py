"""Parameter records populated from Tire Property File sections.

Coefficient records name each field after the lowercased ``.tir`` property it
holds, so loaders and post-load fixups can address fields by property name.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum

from tirecraft.utils.constants import NOMINAL_INFLATION_PRESSURE


class TireSide(str, Enum):
    """Side of the vehicle the tire was measured on."""

    LEFT = "left"
    RIGHT = "right"


class CalculationMode(int, Enum):
    """Force components the property file was fitted for (``USE_MODE``)."""

    VERTICAL_FORCE_ONLY = 0
    LONGITUDINAL_AND_VERTICAL_FORCES = 1
    LATERAL_AND_VERTICAL_FORCES = 2
    UNCOMBINED_FORCE = 3
    COMBINED_FORCE = 4


class ParameterRecord:
    """Name-based access shared by all parameter records."""

    @classmethod
    def property_names(cls) -> tuple[str, ...]:
        """Uppercased ``.tir`` property names covered by the record.

        Returns:
            Property names in field order.
        """
        return tuple(f.name.upper() for f in fields(cls))  # type: ignore[arg-type]

    def has(self, name: str) -> bool:
        """Check whether the record holds a property.

        Args:
            name: ``.tir`` property name, case-insensitive.

        Returns:
            ``True`` when a field of that name exists.
        """
        return name.lower() in {f.name for f in fields(self)}  # type: ignore[arg-type]

    def get(self, name: str) -> object:
        """Read a field by ``.tir`` property name.

        Args:
            name: Property name, case-insensitive.

        Returns:
            Current field value.
        """
        return getattr(self, name.lower())

    def set(self, name: str, value: object) -> None:
        """Write a field by ``.tir`` property name.

        Args:
            name: Property name, case-insensitive.
            value: New field value.

        Raises:
            AttributeError: If the record has no such field.
        """
        if not self.has(name):
            msg = f"{type(self).__name__} has no parameter {name!r}"
            raise AttributeError(msg)
        setattr(self, name.lower(), value)

    def as_dict(self) -> dict[str, object]:
        """Snapshot the record as a plain dictionary.

        Returns:
            Field values keyed by field name.
        """
        return asdict(self)  # type: ignore[call-overload]


@dataclass
class UnitScales(ParameterRecord):
    """Multipliers converting file units to SI.

    Attributes:
        length: File length unit to meters.
        time: File time unit to seconds.
        angle: File angle unit to radians.
        mass: File mass unit to kilograms.
        force: File force unit to newtons.
        pressure: File pressure unit to pascals.
        speed: Derived, ``length / time``.
        inertia: Derived, ``mass * length**2``.
        stiffness: Derived, ``force / length``.
        damping: Derived, ``force / speed``.
    """

    length: float = 1.0
    time: float = 1.0
    angle: float = 1.0
    mass: float = 1.0
    force: float = 1.0
    pressure: float = 1.0
    speed: float = 1.0
    inertia: float = 1.0
    stiffness: float = 1.0
    damping: float = 1.0


@dataclass
class ModelParameters(ParameterRecord):
    """Flags from the ``[MODEL]`` section."""

    property_file_format: str = ""
    measured_side: TireSide = TireSide.LEFT
    use_friction_ellipse: bool = False
    calculation_mode: CalculationMode = CalculationMode.VERTICAL_FORCE_ONLY


@dataclass
class DimensionParameters(ParameterRecord):
    """Tire geometry [m], aspect ratio [-]."""

    unloaded_radius: float = 1.0
    width: float = 0.0
    aspect_ratio: float = 0.0
    rim_radius: float = 0.0
    rim_width: float = 0.0


@dataclass
class VerticalParameters(ParameterRecord):
    """Vertical stiffness, damping and nominal load.

    Attributes:
        vertical_stiffness: Vertical stiffness [N/m].
        vertical_damping: Vertical damping [N*s/m].
        fnomin: Nominal wheel load [N].
        qfz1: Linear stiffness variation with deflection.
        qfz2: Quadratic stiffness variation with deflection.
        qfz3: Stiffness variation with inclination.
        qpfz1: Stiffness variation with inflation pressure.
    """

    vertical_stiffness: float = 0.0
    vertical_damping: float = 0.0
    fnomin: float = 0.0
    qfz1: float = 0.0
    qfz2: float = 0.0
    qfz3: float = 0.0
    qpfz1: float = 0.0


@dataclass
class ScalingParameters(ParameterRecord):
    """User scaling factors, neutral at 1.0."""

    lfzo: float = 1.0
    lcx: float = 1.0
    lmux: float = 1.0
    lex: float = 1.0
    lkx: float = 1.0
    lhx: float = 1.0
    lvx: float = 1.0
    lgax: float = 1.0
    lcy: float = 1.0
    lmuy: float = 1.0
    ley: float = 1.0
    lky: float = 1.0
    lhy: float = 1.0
    lvy: float = 1.0
    lgay: float = 1.0
    ltr: float = 1.0
    lres: float = 1.0
    lgaz: float = 1.0
    lxal: float = 1.0
    lyka: float = 1.0
    lvyka: float = 1.0
    ls: float = 1.0
    lsgkp: float = 1.0
    lsgal: float = 1.0
    lgyr: float = 1.0
    lvmx: float = 1.0
    lmx: float = 1.0
    lmy: float = 1.0
    lip: float = 1.0
    lkyg: float = 1.0
    lcz: float = 1.0


@dataclass
class LongitudinalParameters(ParameterRecord):
    """Pure and combined slip coefficients for ``Fx``."""

    pcx1: float = 0.0
    pdx1: float = 0.0
    pdx2: float = 0.0
    pdx3: float = 0.0
    pex1: float = 0.0
    pex2: float = 0.0
    pex3: float = 0.0
    pex4: float = 0.0
    pkx1: float = 0.0
    pkx2: float = 0.0
    pkx3: float = 0.0
    phx1: float = 0.0
    phx2: float = 0.0
    pvx1: float = 0.0
    pvx2: float = 0.0
    rbx1: float = 0.0
    rbx2: float = 0.0
    rcx1: float = 0.0
    rex1: float = 0.0
    rex2: float = 0.0
    rhx1: float = 0.0
    ptx1: float = 0.0
    ptx2: float = 0.0
    ptx3: float = 0.0
    ppx1: float = 0.0
    ppx2: float = 0.0
    ppx3: float = 0.0
    ppx4: float = 0.0


@dataclass
class OverturningParameters(ParameterRecord):
    """Coefficients for the overturning moment ``Mx``."""

    qsx1: float = 0.0
    qsx2: float = 0.0
    qsx3: float = 0.0
    qsx4: float = 0.0
    qsx5: float = 0.0
    qsx6: float = 0.0
    qsx7: float = 0.0
    qsx8: float = 0.0
    qsx9: float = 0.0
    qsx10: float = 0.0
    qsx11: float = 0.0
    qpx1: float = 0.0


@dataclass
class LateralParameters(ParameterRecord):
    """Pure and combined slip coefficients for ``Fy``."""

    pcy1: float = 0.0
    pdy1: float = 0.0
    pdy2: float = 0.0
    pdy3: float = 0.0
    pey1: float = 0.0
    pey2: float = 0.0
    pey3: float = 0.0
    pey4: float = 0.0
    pky1: float = 0.0
    pky2: float = 0.0
    pky3: float = 0.0
    phy1: float = 0.0
    phy2: float = 0.0
    phy3: float = 0.0
    pvy1: float = 0.0
    pvy2: float = 0.0
    pvy3: float = 0.0
    pvy4: float = 0.0
    rby1: float = 0.0
    rby2: float = 0.0
    rby3: float = 0.0
    rcy1: float = 0.0
    rey1: float = 0.0
    rey2: float = 0.0
    rhy1: float = 0.0
    rhy2: float = 0.0
    rvy1: float = 0.0
    rvy2: float = 0.0
    rvy3: float = 0.0
    rvy4: float = 0.0
    rvy5: float = 0.0
    rvy6: float = 0.0
    pty1: float = 0.0
    pty2: float = 0.0
    ppy1: float = 0.0
    ppy2: float = 0.0
    ppy3: float = 0.0
    ppy4: float = 0.0


@dataclass
class RollingParameters(ParameterRecord):
    """Coefficients for the rolling resistance moment ``My``."""

    qsy1: float = 0.0
    qsy2: float = 0.0
    qsy3: float = 0.0
    qsy4: float = 0.0
    qsy5: float = 0.0
    qsy6: float = 0.0
    qsy7: float = 0.0
    qsy8: float = 0.0


@dataclass
class AligningParameters(ParameterRecord):
    """Pneumatic trail and residual moment coefficients for ``Mz``."""

    qbz1: float = 0.0
    qbz2: float = 0.0
    qbz3: float = 0.0
    qbz4: float = 0.0
    qbz5: float = 0.0
    qbz9: float = 0.0
    qbz10: float = 0.0
    qcz1: float = 0.0
    qdz1: float = 0.0
    qdz2: float = 0.0
    qdz3: float = 0.0
    qdz4: float = 0.0
    qdz6: float = 0.0
    qdz7: float = 0.0
    qdz8: float = 0.0
    qdz9: float = 0.0
    qez1: float = 0.0
    qez2: float = 0.0
    qez3: float = 0.0
    qez4: float = 0.0
    qez5: float = 0.0
    qhz1: float = 0.0
    qhz2: float = 0.0
    qhz3: float = 0.0
    qhz4: float = 0.0
    qpz1: float = 0.0
    qpz2: float = 0.0
    ssz1: float = 0.0
    ssz2: float = 0.0
    ssz3: float = 0.0
    ssz4: float = 0.0
    qtz1: float = 0.0
    mbelt: float = 0.0


@dataclass
class ConditionsParameters(ParameterRecord):
    """Measured and nominal inflation pressure [Pa]."""

    ip: float = NOMINAL_INFLATION_PRESSURE
    ip_nom: float = NOMINAL_INFLATION_PRESSURE


@dataclass
class TemperatureParameters(ParameterRecord):
    """Thermal correction coefficients.

    Attributes:
        ty1: Linear temperature effect on cornering stiffness.
        ty2: Linear temperature effect on the cornering-stiffness load peak.
        ty3: Linear temperature effect on lateral peak friction.
        ty4: Quadratic temperature effect on lateral peak friction.
        tx1: Linear temperature effect on longitudinal slip stiffness.
        tx2: Quadratic temperature effect on longitudinal slip stiffness.
        tx3: Linear temperature effect on longitudinal peak friction.
        tx4: Quadratic temperature effect on longitudinal peak friction.
        tref: Reference temperature.
    """

    ty1: float = 0.0
    ty2: float = 0.0
    ty3: float = 0.0
    ty4: float = 0.0
    tx1: float = 0.0
    tx2: float = 0.0
    tx3: float = 0.0
    tx4: float = 0.0
    tref: float = 0.0
