"""Shared diagnostic types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Optional, Tuple


Severity = Literal["error", "warning", "info"]


@dataclass(frozen=True)
class Diagnostic:
    line: int
    message: str
    severity: Severity
    column: Optional[int] = None
    code: Optional[str] = None

    def is_error(self) -> bool:
        return self.severity == "error"

    def as_dict(self) -> dict:
        return {
            "line": self.line,
            "column": self.column,
            "message": self.message,
            "severity": self.severity,
            "code": self.code,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one source text."""

    errors: Tuple[Diagnostic, ...] = ()
    warnings: Tuple[Diagnostic, ...] = ()

    @classmethod
    def from_diagnostics(cls, diagnostics: Iterable[Diagnostic]) -> "ValidationResult":
        ordered = sorted(diagnostics, key=lambda item: item.line)
        return cls(
            errors=tuple(item for item in ordered if item.is_error()),
            warnings=tuple(item for item in ordered if item.severity == "warning"),
        )

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def as_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": [item.as_dict() for item in self.errors],
            "warnings": [item.as_dict() for item in self.warnings],
        }
