"""Tire Property File grammar, syntax tree, and parser."""

from tirecraft.parser.ast import AstNodeKind, TirFile
from tirecraft.parser.tir import parse_tir

__all__ = ["AstNodeKind", "TirFile", "parse_tir"]
