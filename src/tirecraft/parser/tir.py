"""Tire Property File grammar and parse-tree reduction.

Pattern matching is delegated to :mod:`lark`; this module only supplies the
grammar text and one reduction callback per grammar rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lark import Lark, Token, Transformer, Tree
from lark.exceptions import UnexpectedInput

from tirecraft.parser.ast import (
    AssignmentStatement,
    Comment,
    GenericStatement,
    LiteralNode,
    NumberLiteral,
    Section,
    SectionBody,
    SectionBodyLine,
    SectionHeader,
    StringLiteral,
    Symbol,
    TabularStatement,
    TirFile,
)
from tirecraft.utils.exceptions import TirSyntaxError

TIR_GRAMMAR = r"""
tir_file: comment+ section* | section+
section: section_header section_body
section_body: section_body_line*
section_body_line: comment | generic_statement
generic_statement: assignment_statement | tabular_statement
section_header: "[" symbol "]"
assignment_statement: symbol "=" value
tabular_statement: number number
?value: string | number
comment: COMMENT
symbol: SYMBOL
string: STRING
number: NUMBER

COMMENT: /[!${][^\n]*/
SYMBOL: /[A-Za-z][A-Za-z0-9_]*/
STRING: /'[^']*'/
NUMBER: /[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?/

%ignore /[ \t\f\r\n]+/
"""


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching text against a compiled grammar.

    Attributes:
        succeeded: Whether the whole input matched.
        tree: Concrete parse tree on success, else ``None``.
        failure_message: Position-annotated parser message on failure.
        line: One-based failure line, if known.
        column: One-based failure column, if known.
    """

    succeeded: bool
    tree: Tree | None = None
    failure_message: str = ""
    line: int | None = None
    column: int | None = None


class CompiledGrammar:
    """Compiled grammar exposing match-then-reduce."""

    def __init__(self, grammar_text: str, start: str) -> None:
        """Compile a grammar once for repeated matching.

        Args:
            grammar_text: Lark grammar definition.
            start: Name of the start rule.
        """
        self._parser = Lark(grammar_text, start=start, parser="lalr")

    def match(self, text: str) -> MatchResult:
        """Match input text against the grammar.

        Args:
            text: Input to match.

        Returns:
            Match result carrying either the parse tree or a failure description.
        """
        try:
            tree = self._parser.parse(text)
        except UnexpectedInput as exc:
            line = getattr(exc, "line", None)
            column = getattr(exc, "column", None)
            return MatchResult(
                succeeded=False,
                failure_message=str(exc),
                line=line if isinstance(line, int) and line > 0 else None,
                column=column if isinstance(column, int) and column > 0 else None,
            )
        return MatchResult(succeeded=True, tree=tree)

    @staticmethod
    def reduce(result: MatchResult, actions: Transformer) -> Any:
        """Walk a successful match with per-rule reduction callbacks.

        Args:
            result: Successful match result.
            actions: Transformer whose method names match grammar rule names.

        Returns:
            Whatever the start rule's callback produces.

        Raises:
            ValueError: If ``result`` is not a successful match.
        """
        if not result.succeeded or result.tree is None:
            msg = "Cannot reduce a failed match"
            raise ValueError(msg)
        return actions.transform(result.tree)


class TirReducer(Transformer):
    """Reduce a ``.tir`` parse tree into :mod:`tirecraft.parser.ast` nodes."""

    def tir_file(self, children: list[Any]) -> TirFile:
        """Build the root node.

        Args:
            children: Reduced comments and sections.

        Returns:
            File node.
        """
        return TirFile(items=tuple(children))

    def section(self, children: list[Any]) -> Section:
        """Build a section node.

        Args:
            children: Header and body.

        Returns:
            Section node.
        """
        header, body = children
        return Section(header=header, body=body)

    def section_body(self, children: list[SectionBodyLine]) -> SectionBody:
        """Build a (possibly empty) section body.

        Args:
            children: Reduced body lines.

        Returns:
            Section body node.
        """
        return SectionBody(lines=tuple(children))

    def section_body_line(self, children: list[Any]) -> SectionBodyLine:
        """Wrap a comment or statement as a body line.

        Args:
            children: Single comment or generic statement.

        Returns:
            Body line node.
        """
        return SectionBodyLine(line=children[0])

    def generic_statement(self, children: list[Any]) -> GenericStatement:
        """Wrap an assignment or tabular row.

        Args:
            children: Single statement.

        Returns:
            Generic statement node.
        """
        return GenericStatement(statement=children[0])

    def section_header(self, children: list[Symbol]) -> SectionHeader:
        """Build a section header.

        Args:
            children: Header symbol (brackets are filtered by the grammar).

        Returns:
            Header node.
        """
        return SectionHeader(symbol=children[0])

    def assignment_statement(self, children: list[Any]) -> AssignmentStatement:
        """Build an assignment.

        Args:
            children: Symbol and value literal.

        Returns:
            Assignment node.
        """
        symbol, value = children
        return AssignmentStatement(symbol=symbol, value=value)

    def tabular_statement(self, children: list[NumberLiteral]) -> TabularStatement:
        """Build a tabular row.

        Args:
            children: Left and right numbers.

        Returns:
            Tabular node.
        """
        left, right = children
        return TabularStatement(left=left, right=right)

    def comment(self, children: list[Token]) -> Comment:
        """Split a comment token into its variant and contents.

        Args:
            children: Comment token.

        Returns:
            Comment node.
        """
        raw = str(children[0]).rstrip("\r")
        return Comment(variant=raw[0], contents=raw[1:].lstrip(" \t"))

    def symbol(self, children: list[Token]) -> Symbol:
        """Build a symbol.

        Args:
            children: Symbol token.

        Returns:
            Symbol node.
        """
        return Symbol(value=str(children[0]))

    def string(self, children: list[Token]) -> StringLiteral:
        """Build a string literal without its quotes.

        Args:
            children: Quoted string token.

        Returns:
            String literal node.
        """
        return StringLiteral(value=str(children[0])[1:-1])

    def number(self, children: list[Token]) -> NumberLiteral:
        """Build a numeric literal.

        Args:
            children: Number token.

        Returns:
            Number literal node.
        """
        return NumberLiteral(value=float(children[0]))


TIR = CompiledGrammar(TIR_GRAMMAR, start="tir_file")


def parse_tir(text: str) -> TirFile:
    """Parse ``.tir`` text into a syntax tree.

    Args:
        text: Full contents of a Tire Property File.

    Returns:
        Root file node.

    Raises:
        tirecraft.utils.exceptions.TirSyntaxError: If the text does not match
            the property-file grammar.
    """
    result = TIR.match(text)
    if not result.succeeded:
        raise TirSyntaxError(result.failure_message, line=result.line, column=result.column)
    return TIR.reduce(result, TirReducer())


def literal_value(node: LiteralNode) -> float | str:
    """Unwrap a literal node into its Python value.

    Args:
        node: Number or string literal.

    Returns:
        Float for numbers, text for strings.
    """
    return node.value
