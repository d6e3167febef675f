"""Custom exceptions for tire property loading and model evaluation."""

from __future__ import annotations


class TireModelError(Exception):
    """Base exception for tire model errors."""


class ConfigurationError(TireModelError):
    """Raised when model evaluation configuration is invalid."""


class TirLoadError(TireModelError):
    """Base class for errors produced while reading Tire Property Files."""


class TirSyntaxError(TirLoadError):
    """Raised when ``.tir`` text does not match the property-file grammar."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        """Store the parser message and failure position.

        Args:
            message: Parser message annotated with the failing source position.
            line: One-based line of the failure, if known.
            column: One-based column of the failure, if known.
        """
        super().__init__(message)
        self.line = line
        self.column = column


class ModelLoadingError(TirLoadError):
    """Raised or collected when a tire model cannot be assembled from properties."""


class SectionNotFoundError(TirLoadError):
    """Collected when an expected ``.tir`` section is absent."""

    def __init__(self, section_name: str) -> None:
        """Build the error for one missing section.

        Args:
            section_name: Name of the missing section.
        """
        super().__init__(f'Section "{section_name}" not found')
        self.section_name = section_name


class PropertyNotFoundError(TirLoadError):
    """Collected when an expected property is absent from its section."""

    def __init__(self, property_name: str, section_name: str) -> None:
        """Build the error for one missing property.

        Args:
            property_name: Name of the missing property.
            section_name: Section in which the property was expected.
        """
        super().__init__(f'Property "{property_name}" not found in section "{section_name}"')
        self.property_name = property_name
        self.section_name = section_name


class UnitConversionError(TirLoadError):
    """Collected when a ``[UNITS]`` token has no known SI conversion."""

    def __init__(self, unit_kind: str, token: object) -> None:
        """Build the error for one unresolved unit token.

        Args:
            unit_kind: Physical quantity of the unit, e.g. ``"length"``.
            token: Unit token found in the file, or ``None`` when absent.
        """
        super().__init__(f"No {unit_kind} unit conversion found for {unit_kind} property {token}")
        self.unit_kind = unit_kind
        self.token = token
