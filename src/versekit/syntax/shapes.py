"""Line-shape classification for Verse source text.

Each line is tried against an ordered table of ``(kind, matcher)`` rules and
takes the shape of the first rule that matches. Lines matching nothing are
``GenericLine`` and receive the structural brace checks downstream.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterator, List, Optional, Tuple

from .exceptions import UsingParseError
from .imports import default_using_parser
from .types import (
    BlankLine,
    CommentLine,
    FunctionDecl,
    GenericLine,
    IfStmt,
    ImportLine,
    LineShape,
    Parameter,
    ShapeKind,
    TypeDecl,
    VarDecl,
)

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"

TYPE_DECL_RE = re.compile(
    r"^(?P<name>\w+)(?:<\w+>)*\s*:=\s*class(?:<\w+>)*\s*"
    r"\(\s*(?P<parent>\w+)\s*\)\s*:\s*$"
)
FUNCTION_DECL_RE = re.compile(
    r"^(?!(?:if|else|for|case|set|return)\b)"
    r"(?P<name>\w+)(?:<\w+>)*\s*\((?P<params>[^)]*)\)\s*(?:<\w+>\s*)*"
    r"(?::(?P<return_type>[^=]*))?=\s*$"
)
VAR_DECL_RE = re.compile(
    r"^(?:@\w+\s+)?"
    r"(?:(?P<var>var)\s+(?P<var_name>\w+)(?:<\w+>)*\s*:"
    r"|(?P<name>\w+)(?:<\w+>)*\s*:(?!=))"
    r"(?P<type_name>[^=]*)=(?!=)(?P<value>.+)$"
)
IF_STMT_RE = re.compile(r"^if\s*\((?P<condition>.*)\)\s*(?::\s*)?$")

ShapeMatcher = Callable[[int, str, str], Optional[LineShape]]


def _match_import(line_no: int, raw: str, text: str) -> Optional[LineShape]:
    if not text.startswith("using"):
        return None
    try:
        namespace = default_using_parser().parse(text, line_no=line_no)
    except UsingParseError as exc:
        logger.debug("not an import line: %s", exc)
        return None
    return ImportLine(line_no=line_no, raw=raw, namespace=namespace)


def _match_type_decl(line_no: int, raw: str, text: str) -> Optional[LineShape]:
    match = TYPE_DECL_RE.match(text)
    if match is None:
        return None
    return TypeDecl(
        line_no=line_no,
        raw=raw,
        name=match.group("name"),
        parent=match.group("parent"),
    )


def _match_function_decl(line_no: int, raw: str, text: str) -> Optional[LineShape]:
    match = FUNCTION_DECL_RE.match(text)
    if match is None:
        return None
    return_type = match.group("return_type")
    return FunctionDecl(
        line_no=line_no,
        raw=raw,
        name=match.group("name"),
        parameters=_parse_parameters(match.group("params")),
        return_type=return_type.strip() if return_type is not None else None,
    )


def _match_var_decl(line_no: int, raw: str, text: str) -> Optional[LineShape]:
    match = VAR_DECL_RE.match(text)
    if match is None:
        return None
    mutable = match.group("var") is not None
    return VarDecl(
        line_no=line_no,
        raw=raw,
        name=match.group("var_name") if mutable else match.group("name"),
        type_name=match.group("type_name").strip(),
        value=match.group("value").strip(),
        mutable=mutable,
    )


def _match_if_stmt(line_no: int, raw: str, text: str) -> Optional[LineShape]:
    match = IF_STMT_RE.match(text)
    if match is None:
        return None
    return IfStmt(line_no=line_no, raw=raw, condition=match.group("condition"))


SHAPE_RULES: Tuple[Tuple[ShapeKind, ShapeMatcher], ...] = (
    (ShapeKind.IMPORT, _match_import),
    (ShapeKind.TYPE_DECL, _match_type_decl),
    (ShapeKind.FUNCTION_DECL, _match_function_decl),
    (ShapeKind.VAR_DECL, _match_var_decl),
    (ShapeKind.IF_STMT, _match_if_stmt),
)


def classify_line(line_no: int, raw: str) -> LineShape:
    """Return the shape of a single source line."""

    text = raw.strip()
    if not text:
        return BlankLine(line_no=line_no, raw=raw)
    if text.startswith(COMMENT_MARKER):
        return CommentLine(line_no=line_no, raw=raw)
    for _kind, matcher in SHAPE_RULES:
        shape = matcher(line_no, raw, text)
        if shape is not None:
            return shape
    return GenericLine(line_no=line_no, raw=raw)


def classify_source(source: str) -> Iterator[LineShape]:
    """Classify every line of *source*, numbering lines from 1."""

    for line_no, raw in enumerate(source.split("\n"), start=1):
        yield classify_line(line_no, raw)


def _parse_parameters(params: str) -> Tuple[Parameter, ...]:
    parameters: List[Parameter] = []
    for chunk in params.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        name, _, type_name = chunk.partition(":")
        parameters.append(Parameter(name=name.strip(), type_name=type_name.strip() or None))
    return tuple(parameters)
