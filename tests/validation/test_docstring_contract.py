"""AST-level validation of Google-style docstrings across the repository."""

from __future__ import annotations

import ast
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
SCAN_ROOTS = ("src", "examples", "tests")
IMPLICIT_PARAMS = frozenset({"self", "cls"})

CallableNode = ast.FunctionDef | ast.AsyncFunctionDef


def _section_headers(docstring: str) -> set[str]:
    """Collect the section header lines of a docstring.

    Args:
        docstring: Cleaned docstring text.

    Returns:
        Header names without the trailing colon, e.g. ``{"Args", "Returns"}``.
    """
    headers = set()
    for line in docstring.splitlines():
        stripped = line.strip()
        if stripped.endswith(":") and stripped[:-1].isidentifier():
            headers.add(stripped[:-1])
    return headers


def _explicit_params(node: CallableNode) -> list[str]:
    """List parameter names a caller has to supply or may override.

    Args:
        node: Function or method node.

    Returns:
        Parameter names excluding ``self`` and ``cls``.
    """
    arguments = node.args
    names = [arg.arg for arg in (*arguments.posonlyargs, *arguments.args, *arguments.kwonlyargs)]
    if arguments.vararg is not None:
        names.append(arguments.vararg.arg)
    if arguments.kwarg is not None:
        names.append(arguments.kwarg.arg)
    return [name for name in names if name not in IMPLICIT_PARAMS]


def _declares_return_value(node: CallableNode) -> bool:
    """Tell whether a callable is annotated to return something other than ``None``.

    Args:
        node: Function or method node.

    Returns:
        ``True`` for a present, non-``None`` return annotation.
    """
    annotation = node.returns
    if annotation is None:
        return False
    if isinstance(annotation, ast.Constant):
        return annotation.value is not None and annotation.value != "None"
    return not (isinstance(annotation, ast.Name) and annotation.id == "None")


class _ContractChecker:
    """Walk module-level classes and functions of one file and record violations."""

    def __init__(self, path: Path) -> None:
        """Bind the checker to a repository-relative module path.

        Args:
            path: Path reported in violation messages.
        """
        self.path = path
        self.violations: list[str] = []

    def check_module(self, tree: ast.Module) -> list[str]:
        """Check every top-level class and function of a module.

        Args:
            tree: Parsed module.

        Returns:
            Violation messages for this module.
        """
        for node in tree.body:
            if isinstance(node, ast.ClassDef):
                self._check_class(node)
            elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
                self._check_callable(node, node.name)
        return self.violations

    def _check_class(self, node: ast.ClassDef) -> None:
        """Require a class docstring and check each method.

        Args:
            node: Class definition.
        """
        if ast.get_docstring(node) is None:
            self._report(node, f"missing class docstring for `{node.name}`")
        for member in node.body:
            if isinstance(member, (ast.FunctionDef, ast.AsyncFunctionDef)):
                self._check_callable(member, f"{node.name}.{member.name}")

    def _check_callable(self, node: CallableNode, qualified_name: str) -> None:
        """Require a docstring plus ``Args``/``Returns`` where the signature calls for them.

        Args:
            node: Function or method definition.
            qualified_name: Name used in violation messages.
        """
        doc = ast.get_docstring(node)
        if doc is None:
            self._report(node, f"missing docstring for `{qualified_name}`")
            return
        headers = _section_headers(doc)
        if _explicit_params(node) and "Args" not in headers:
            self._report(node, f"missing Args for `{qualified_name}`")
        if _declares_return_value(node) and "Returns" not in headers:
            self._report(node, f"missing Returns for `{qualified_name}`")

    def _report(self, node: ast.AST, message: str) -> None:
        """Record one violation with its source location.

        Args:
            node: Offending node.
            message: Description of the violation.
        """
        self.violations.append(f"{self.path}:{getattr(node, 'lineno', '?')} {message}")


class DocstringContractTests(unittest.TestCase):
    """Validate docstring presence and section contracts for public code."""

    def test_docstring_contracts(self) -> None:
        """Every scanned file satisfies the summary/Args/Returns contract."""
        for root_name in SCAN_ROOTS:
            with self.subTest(root=root_name):
                violations: list[str] = []
                for path in sorted((REPO_ROOT / root_name).rglob("*.py")):
                    tree = ast.parse(path.read_text(encoding="utf-8"))
                    checker = _ContractChecker(path.relative_to(REPO_ROOT))
                    violations.extend(checker.check_module(tree))
                if violations:
                    formatted = "\n".join(f"- {item}" for item in violations)
                    self.fail(f"Docstring contract violations:\n{formatted}")

    def test_section_headers_ignore_prose_lines(self) -> None:
        """Only bare ``Name:`` lines count as section headers."""
        doc = "Summary.\n\nArgs:\n    x: Value.\n\nNote that Returns: is inline."
        self.assertEqual(_section_headers(doc), {"Args"})


if __name__ == "__main__":
    unittest.main()
