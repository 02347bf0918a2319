"""Validation utilities for Verse source."""

from .fixes import DEFAULT_SUGGESTION, suggest_fix
from .issues import Diagnostic, Severity, ValidationResult
from .namespaces import check_namespaces
from .source import validate_source

__all__ = [
    "Diagnostic",
    "Severity",
    "ValidationResult",
    "validate_source",
    "check_namespaces",
    "suggest_fix",
    "DEFAULT_SUGGESTION",
]
