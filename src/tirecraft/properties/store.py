"""Two-level property store built from a ``.tir`` syntax tree."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from tirecraft.parser.ast import AssignmentStatement, GenericStatement, TabularStatement, TirFile
from tirecraft.parser.tir import literal_value, parse_tir

logger = logging.getLogger(__name__)

TABULAR_DATA_KEY = "$tabular_data"

PropertyValue = float | str
TabularRow = tuple[float, float]


class SectionMap(Mapping[str, object]):
    """Read-only mapping of uppercased property names to scalar values.

    Tabular rows are held separately in :attr:`tabular_data` and are also
    reachable under :data:`TABULAR_DATA_KEY` when at least one row exists.
    """

    def __init__(
        self,
        values: Mapping[str, PropertyValue] | None = None,
        tabular_data: tuple[TabularRow, ...] = (),
    ) -> None:
        """Freeze a section's values and rows.

        Args:
            values: Property values keyed by uppercased symbol.
            tabular_data: Ordered ``(x, y)`` rows of the section.
        """
        self._values = MappingProxyType(dict(values or {}))
        self._tabular_data = tuple(tabular_data)

    @property
    def tabular_data(self) -> tuple[TabularRow, ...]:
        """Tabular rows in file order, duplicates retained.

        Returns:
            Tuple of ``(x, y)`` pairs.
        """
        return self._tabular_data

    def _view(self) -> Mapping[str, object]:
        """Combined view of scalar values and the reserved tabular key.

        Returns:
            Mapping including :data:`TABULAR_DATA_KEY` when rows exist.
        """
        if not self._tabular_data:
            return self._values
        return {**self._values, TABULAR_DATA_KEY: self._tabular_data}

    def __getitem__(self, key: str) -> object:
        """Look up a property by name.

        Args:
            key: Property name (case-insensitive) or :data:`TABULAR_DATA_KEY`.

        Returns:
            Stored scalar value or the tabular rows.
        """
        if key == TABULAR_DATA_KEY:
            if not self._tabular_data:
                raise KeyError(key)
            return self._tabular_data
        return self._values[key.upper()]

    def __iter__(self) -> Iterator[str]:
        """Iterate property names in insertion order.

        Returns:
            Iterator over keys, the tabular key last when present.
        """
        return iter(self._view())

    def __len__(self) -> int:
        """Count stored entries.

        Returns:
            Number of properties, plus one when tabular rows exist.
        """
        return len(self._values) + (1 if self._tabular_data else 0)

    def __repr__(self) -> str:
        """Render a debug representation.

        Returns:
            Representation listing the stored entries.
        """
        return f"SectionMap({dict(self._view())!r})"


class PropertyStore(Mapping[str, SectionMap]):
    """Read-only mapping of uppercased section names to :class:`SectionMap`."""

    def __init__(self, sections: Mapping[str, SectionMap] | None = None) -> None:
        """Freeze the section mapping.

        Args:
            sections: Section maps keyed by uppercased section name.
        """
        self._sections = MappingProxyType(dict(sections or {}))

    @classmethod
    def from_tir(cls, text: str) -> PropertyStore:
        """Parse ``.tir`` text and build a store from it.

        Args:
            text: Full contents of a Tire Property File.

        Returns:
            Populated property store.

        Raises:
            tirecraft.utils.exceptions.TirSyntaxError: If the text does not
                match the property-file grammar.
        """
        return build_property_store(parse_tir(text))

    def __getitem__(self, key: str) -> SectionMap:
        """Look up a section by name.

        Args:
            key: Section name (case-insensitive).

        Returns:
            Section map.
        """
        return self._sections[key.upper()]

    def __iter__(self) -> Iterator[str]:
        """Iterate section names in file order.

        Returns:
            Iterator over section names.
        """
        return iter(self._sections)

    def __len__(self) -> int:
        """Count sections.

        Returns:
            Number of distinct sections.
        """
        return len(self._sections)

    def __repr__(self) -> str:
        """Render a debug representation.

        Returns:
            Representation listing section names.
        """
        return f"PropertyStore(sections={list(self._sections)!r})"


def build_property_store(ast: TirFile) -> PropertyStore:
    """Reduce a ``.tir`` syntax tree into a :class:`PropertyStore`.

    Section and property names are uppercased. A repeated section replaces the
    earlier one and a repeated property replaces the earlier value. Comments
    are ignored.

    Args:
        ast: Root file node from :func:`tirecraft.parser.parse_tir`.

    Returns:
        Immutable property store.
    """
    sections: dict[str, SectionMap] = {}
    for section in ast.sections:
        values: dict[str, PropertyValue] = {}
        rows: list[TabularRow] = []
        lines = section.body.lines if section.body is not None else ()
        for body_line in lines:
            if not isinstance(body_line.line, GenericStatement):
                continue
            statement = body_line.line.statement
            if isinstance(statement, AssignmentStatement):
                values[statement.symbol.value.upper()] = literal_value(statement.value)
            elif isinstance(statement, TabularStatement):
                rows.append((statement.left.value, statement.right.value))

        name = section.name.upper()
        if name in sections:
            logger.debug("Section %s repeated; keeping the last occurrence", name)
        sections[name] = SectionMap(values, tuple(rows))

    logger.debug("Built property store with %d sections", len(sections))
    return PropertyStore(sections)
