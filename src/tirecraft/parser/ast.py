"""Abstract syntax tree nodes for Tire Property Files (``.tir``)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class AstNodeKind(str, Enum):
    """Kinds of nodes that make up a ``.tir`` syntax tree."""

    FILE = "tir_file"
    SECTION = "section"
    SECTION_HEADER = "section_header"
    SECTION_BODY = "section_body"
    SECTION_BODY_LINE = "section_body_line"
    GENERIC_STATEMENT = "stmt_generic"
    COMMENT = "comment"
    TABULAR_STATEMENT = "stmt_tabular"
    ASSIGNMENT_STATEMENT = "stmt_assign"
    SYMBOL = "symbol"
    STRING_LITERAL = "string_literal"
    NUMBER_LITERAL = "number_literal"


@dataclass(frozen=True)
class Symbol:
    """Identifier used for section headers and property names."""

    value: str
    kind: AstNodeKind = AstNodeKind.SYMBOL


@dataclass(frozen=True)
class NumberLiteral:
    """Numeric literal, always stored as a float."""

    value: float
    kind: AstNodeKind = AstNodeKind.NUMBER_LITERAL


@dataclass(frozen=True)
class StringLiteral:
    """Single-quoted string literal without the quotes."""

    value: str
    kind: AstNodeKind = AstNodeKind.STRING_LITERAL


@dataclass(frozen=True)
class Comment:
    """Line comment.

    Attributes:
        variant: Leading comment character, one of ``!``, ``$`` or ``{``.
        contents: Raw comment text up to the end of the line.
    """

    variant: str
    contents: str
    kind: AstNodeKind = AstNodeKind.COMMENT


LiteralNode: TypeAlias = NumberLiteral | StringLiteral


@dataclass(frozen=True)
class AssignmentStatement:
    """``SYMBOL = VALUE`` statement."""

    symbol: Symbol
    value: LiteralNode
    kind: AstNodeKind = AstNodeKind.ASSIGNMENT_STATEMENT


@dataclass(frozen=True)
class TabularStatement:
    """Row of two numbers with no ``=`` between them."""

    left: NumberLiteral
    right: NumberLiteral
    kind: AstNodeKind = AstNodeKind.TABULAR_STATEMENT


Statement: TypeAlias = AssignmentStatement | TabularStatement


@dataclass(frozen=True)
class GenericStatement:
    """Wrapper around an assignment or a tabular row."""

    statement: Statement
    kind: AstNodeKind = AstNodeKind.GENERIC_STATEMENT


@dataclass(frozen=True)
class SectionBodyLine:
    """One line of a section body."""

    line: Comment | GenericStatement
    kind: AstNodeKind = AstNodeKind.SECTION_BODY_LINE


@dataclass(frozen=True)
class SectionBody:
    """Ordered lines following a section header."""

    lines: tuple[SectionBodyLine, ...]
    kind: AstNodeKind = AstNodeKind.SECTION_BODY


@dataclass(frozen=True)
class SectionHeader:
    """Bracketed ``[SYMBOL]`` header."""

    symbol: Symbol
    kind: AstNodeKind = AstNodeKind.SECTION_HEADER


@dataclass(frozen=True)
class Section:
    """Section header plus its optional body."""

    header: SectionHeader
    body: SectionBody | None
    kind: AstNodeKind = AstNodeKind.SECTION

    @property
    def name(self) -> str:
        """Header symbol as written in the file.

        Returns:
            Section name without brackets.
        """
        return self.header.symbol.value


@dataclass(frozen=True)
class TirFile:
    """Root node: top-level comments and sections in source order."""

    items: tuple[Comment | Section, ...]
    kind: AstNodeKind = AstNodeKind.FILE

    @property
    def sections(self) -> tuple[Section, ...]:
        """Sections of the file in source order.

        Returns:
            All section nodes, skipping top-level comments.
        """
        return tuple(item for item in self.items if isinstance(item, Section))
