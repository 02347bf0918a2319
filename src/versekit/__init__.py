"""Heuristic validator and formatter for Verse source code."""

from .formatting import format_source
from .validators import Diagnostic, ValidationResult, suggest_fix, validate_source

__version__ = "0.1.0"

validate = validate_source
format = format_source

__all__ = [
    "Diagnostic",
    "ValidationResult",
    "format",
    "format_source",
    "suggest_fix",
    "validate",
    "validate_source",
]
