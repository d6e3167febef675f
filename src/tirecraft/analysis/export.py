"""Export helpers for loaded parameter records."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

from tirecraft.tire.model_api import TireModel
from tirecraft.tire.params import ParameterRecord
from tirecraft.utils.exceptions import TirLoadError


def _record_payload(record: ParameterRecord) -> dict[str, object]:
    """Convert one parameter record to JSON-compatible values.

    Args:
        record: Populated parameter record.

    Returns:
        Field values keyed by field name, enums replaced by their values.
    """
    return {
        name: value.value if isinstance(value, Enum) else value
        for name, value in record.as_dict().items()
    }


def model_records(model: TireModel) -> dict[str, ParameterRecord]:
    """Collect the parameter records held by a model.

    Thermal models contribute the records of their wrapped base model plus
    their temperature coefficients.

    Args:
        model: Tire model instance.

    Returns:
        Records keyed by attribute name.
    """
    base = getattr(model, "base", model)
    records = {
        name: value for name, value in vars(base).items() if isinstance(value, ParameterRecord)
    }
    if base is not model:
        records.update(
            {
                name: value
                for name, value in vars(model).items()
                if isinstance(value, ParameterRecord)
            }
        )
    return records


def error_report(errors: list[TirLoadError]) -> list[dict[str, str]]:
    """Describe collected loading errors as plain dictionaries.

    Args:
        errors: Errors returned by ``initialize_from_properties``.

    Returns:
        One ``{"type", "message"}`` entry per error, in order.
    """
    return [{"type": type(error).__name__, "message": str(error)} for error in errors]


def export_parameters_json(
    model: TireModel,
    path: str | Path,
    errors: list[TirLoadError] | None = None,
) -> None:
    """Persist loaded parameter records and loading errors as JSON.

    Args:
        model: Initialized tire model.
        path: Output file path for the JSON document.
        errors: Optional errors returned by ``initialize_from_properties``.
    """
    payload = {
        "parameters": {
            name: _record_payload(record) for name, record in model_records(model).items()
        },
        "errors": error_report(errors or []),
    }
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload, indent=2), encoding="utf-8")
