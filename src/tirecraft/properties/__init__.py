"""Property store built from Tire Property Files."""

from tirecraft.properties.store import (
    TABULAR_DATA_KEY,
    PropertyStore,
    SectionMap,
    build_property_store,
)

__all__ = ["TABULAR_DATA_KEY", "PropertyStore", "SectionMap", "build_property_store"]
