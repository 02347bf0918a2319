"""Public syntax interface."""

from .exceptions import UsingParseError
from .imports import UsingParser
from .shapes import COMMENT_MARKER, SHAPE_RULES, classify_line, classify_source
from .types import (
    BlankLine,
    CommentLine,
    FunctionDecl,
    GenericLine,
    IfStmt,
    ImportLine,
    LineShape,
    NamespacePath,
    Parameter,
    ShapeKind,
    TypeDecl,
    VarDecl,
)
from .vocabulary import DEFAULT_NAMESPACES, merge_namespace_tables, normalize_namespace

__all__ = [
    "COMMENT_MARKER",
    "SHAPE_RULES",
    "classify_line",
    "classify_source",
    "UsingParser",
    "UsingParseError",
    "LineShape",
    "ShapeKind",
    "BlankLine",
    "CommentLine",
    "ImportLine",
    "TypeDecl",
    "FunctionDecl",
    "VarDecl",
    "IfStmt",
    "GenericLine",
    "NamespacePath",
    "Parameter",
    "DEFAULT_NAMESPACES",
    "merge_namespace_tables",
    "normalize_namespace",
]
