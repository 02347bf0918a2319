"""Remediation hints keyed by diagnostic message."""

from __future__ import annotations

from typing import Tuple

from .issues import Diagnostic


DEFAULT_SUGGESTION = "Review the code around this line for syntax errors"

FIX_SUGGESTIONS: Tuple[Tuple[str, str], ...] = (
    ("'if' statement requires parentheses", "Add parentheses around the condition: if (condition)"),
    ("Unclosed string literal", "Add a closing double quote to complete the string"),
    ("Variable declaration missing type", "Specify the variable type: var Name : Type = Value"),
    ("Function declaration missing return type", "Add a return type: FunctionName() : ReturnType ="),
    ("If statement has empty condition", "Put a condition between the parentheses: if (condition)"),
    ("Unexpected closing brace", "Remove the extra closing brace or add a matching opening brace"),
    ("Unbalanced braces", "Check your code for missing opening or closing braces"),
    ("requires namespace", "Add the required namespace using statement at the top of your file"),
)


def suggest_fix(diagnostic: Diagnostic) -> str:
    """Return remediation text for *diagnostic*, falling back to a generic hint."""

    for pattern, suggestion in FIX_SUGGESTIONS:
        if pattern in diagnostic.message:
            return suggestion
    return DEFAULT_SUGGESTION
