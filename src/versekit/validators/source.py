"""Single-pass heuristic validation of Verse source text."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from ..syntax import (
    FunctionDecl,
    GenericLine,
    IfStmt,
    ImportLine,
    LineShape,
    ShapeKind,
    TypeDecl,
    VarDecl,
    classify_source,
)
from ..syntax.vocabulary import DEFAULT_NAMESPACES, NamespaceTable
from .issues import Diagnostic, ValidationResult
from .namespaces import check_namespaces

logger = logging.getLogger(__name__)

IF_TOKEN_RE = re.compile(r"\bif\b")
TYPE_NAME_RE = re.compile(r"[A-Za-z_]\w*")

_SKIPPED = (ShapeKind.BLANK, ShapeKind.COMMENT)


@dataclass
class _ScanState:
    brace_stack: List[int] = field(default_factory=list)
    brace_balance: int = 0
    imports: Set[str] = field(default_factory=set)
    used_types: Dict[str, int] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def error(
        self,
        line: int,
        message: str,
        *,
        code: str,
        column: Optional[int] = None,
    ) -> None:
        self.diagnostics.append(
            Diagnostic(
                line=line,
                message=message,
                severity="error",
                column=column,
                code=code,
            )
        )

    def use_types(self, annotation: Optional[str], line_no: int) -> None:
        if not annotation:
            return
        for type_name in TYPE_NAME_RE.findall(annotation):
            self.used_types.setdefault(type_name, line_no)


def validate_source(
    source: str,
    *,
    namespaces: Optional[NamespaceTable] = None,
) -> ValidationResult:
    """Scan *source* once and report likely syntax problems.

    Never raises for text input: anything the line shapes do not recognise
    falls through to the generic brace and quote checks. ``namespaces`` maps
    type names to the ``using`` paths they need and defaults to the built-in
    UEFN table.
    """

    table = DEFAULT_NAMESPACES if namespaces is None else namespaces
    state = _ScanState()
    total_lines = 0

    for shape in classify_source(source):
        total_lines = shape.line_no
        if shape.kind in _SKIPPED:
            continue
        if isinstance(shape, ImportLine):
            state.imports.add(shape.namespace.path)
            continue
        _check_shape(shape, state)
        _check_if_parentheses(shape, state)
        _check_string_literals(shape, state)

    _check_brace_balance(state, total_lines or 1)
    state.diagnostics.extend(check_namespaces(state.used_types, state.imports, table))

    result = ValidationResult.from_diagnostics(state.diagnostics)
    logger.debug(
        "validated %d line(s): %d error(s), %d warning(s)",
        total_lines,
        len(result.errors),
        len(result.warnings),
    )
    return result


def _check_shape(shape: LineShape, state: _ScanState) -> None:
    if isinstance(shape, TypeDecl):
        state.use_types(shape.parent, shape.line_no)
    elif isinstance(shape, FunctionDecl):
        if not shape.return_type:
            state.error(
                shape.line_no,
                "Function declaration missing return type",
                code="E_FUNCTION_RETURN_TYPE",
            )
        for parameter in shape.parameters:
            state.use_types(parameter.type_name, shape.line_no)
        state.use_types(shape.return_type, shape.line_no)
    elif isinstance(shape, VarDecl):
        if not shape.type_name:
            state.error(
                shape.line_no,
                "Variable declaration missing type",
                code="E_VARIABLE_TYPE",
            )
        state.use_types(shape.type_name, shape.line_no)
    elif isinstance(shape, IfStmt):
        if not shape.condition.strip():
            state.error(
                shape.line_no,
                "If statement has empty condition",
                code="E_IF_EMPTY_CONDITION",
            )
    elif isinstance(shape, GenericLine):
        _track_braces(shape, state)


def _track_braces(shape: LineShape, state: _ScanState) -> None:
    for offset, char in enumerate(shape.text):
        if char == "{":
            state.brace_balance += 1
            state.brace_stack.append(shape.line_no)
        elif char == "}":
            state.brace_balance -= 1
            if state.brace_stack:
                state.brace_stack.pop()
            else:
                state.error(
                    shape.line_no,
                    "Unexpected closing brace",
                    code="E_BRACE_UNEXPECTED",
                    column=shape.column_of(offset),
                )


def _check_if_parentheses(shape: LineShape, state: _ScanState) -> None:
    text = shape.text
    match = IF_TOKEN_RE.search(text)
    if match is None or "if (" in text or "else if" in text:
        return
    state.error(
        shape.line_no,
        "'if' statement requires parentheses: if (condition)",
        code="E_IF_PARENS",
        column=shape.column_of(match.start()),
    )


def _check_string_literals(shape: LineShape, state: _ScanState) -> None:
    text = shape.text
    if text.count('"') % 2 == 0:
        return
    state.error(
        shape.line_no,
        "Unclosed string literal",
        code="E_STRING_UNCLOSED",
        column=shape.column_of(text.rfind('"')),
    )


def _check_brace_balance(state: _ScanState, last_line: int) -> None:
    balance = state.brace_balance
    if balance == 0:
        return
    if balance > 0:
        detail = f"missing {balance} closing brace(s)"
    else:
        detail = f"{-balance} extra closing brace(s)"
    state.error(last_line, f"Unbalanced braces: {detail}", code="E_BRACE_UNBALANCED")
