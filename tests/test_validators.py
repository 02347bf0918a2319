"""Tests for validation logic."""

from __future__ import annotations

import time
from pathlib import Path

import pytest

from versekit.syntax import ShapeKind, classify_line
from versekit.validators import Diagnostic, ValidationResult, check_namespaces, validate_source

FIXTURES = Path(__file__).parent / "fixtures"


def _messages(diagnostics) -> list[str]:
    return [item.message for item in diagnostics]


def test_clean_fixture_is_valid() -> None:
    source = (FIXTURES / "button_counter.verse").read_text(encoding="utf-8")
    result = validate_source(source)
    assert result.is_valid
    assert result.errors == ()
    assert result.warnings == ()


def test_broken_fixture_reports_each_problem_in_line_order() -> None:
    source = (FIXTURES / "broken.verse").read_text(encoding="utf-8")
    result = validate_source(source)
    assert not result.is_valid
    assert [(item.line, item.code) for item in result.errors] == [
        (3, "E_FUNCTION_RETURN_TYPE"),
        (5, "E_IF_PARENS"),
        (6, "E_STRING_UNCLOSED"),
        (7, "E_BRACE_UNBALANCED"),
    ]
    assert result.errors[-1].message == "Unbalanced braces: missing 2 closing brace(s)"
    assert [item.code for item in result.warnings] == ["W_NAMESPACE_MISSING"]


def test_balanced_braces_are_valid() -> None:
    source = "\n".join(["{", "Print(1)", "{", "{", "Run()", "}", "}", "}"])
    result = validate_source(source)
    assert result.is_valid
    assert not any("brace" in message for message in _messages(result.errors))


def test_single_unmatched_open_brace_reported_at_last_line() -> None:
    source = "a := class(b):\n{\nx : int = 1"
    result = validate_source(source)
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.message == "Unbalanced braces: missing 1 closing brace(s)"
    assert error.line == 3


def test_unexpected_closing_brace() -> None:
    source = "# header\n\n    }\nPrint(1)"
    result = validate_source(source)
    unexpected = [item for item in result.errors if item.message == "Unexpected closing brace"]
    assert len(unexpected) == 1
    assert unexpected[0].line == 3
    assert unexpected[0].column == 5
    assert result.errors[-1].message == "Unbalanced braces: 1 extra closing brace(s)"


def test_closing_brace_before_opening_on_same_line_is_unexpected() -> None:
    result = validate_source("} else {")
    assert [item.code for item in result.errors] == ["E_BRACE_UNEXPECTED"]


def test_function_missing_return_type() -> None:
    result = validate_source("Run()<suspends> =\n{\n}")
    assert _messages(result.errors) == ["Function declaration missing return type"]
    assert result.errors[0].line == 1


def test_variable_missing_type() -> None:
    result = validate_source("var Count : = 0")
    assert _messages(result.errors) == ["Variable declaration missing type"]


def test_if_with_empty_condition() -> None:
    result = validate_source("if (   )")
    assert _messages(result.errors) == ["If statement has empty condition"]


def test_if_without_parentheses() -> None:
    result = validate_source('if PlayerCount > 0 { Print("hi") }')
    assert [item.code for item in result.errors] == ["E_IF_PARENS"]
    assert result.errors[0].column == 1


def test_if_with_parentheses_passes() -> None:
    result = validate_source('if (PlayerCount > 0) { Print("hi") }')
    assert result.is_valid


def test_else_if_is_not_flagged() -> None:
    result = validate_source("else if Ready")
    assert result.is_valid


def test_if_inside_identifier_is_not_flagged() -> None:
    result = validate_source("Notify(Agent)")
    assert result.is_valid


@pytest.mark.parametrize(
    "line, expected",
    [
        ('Print("hello)', True),
        ('Print("a", "b")', False),
        ('Print("say \\"hi")', True),
        ("Print(1)", False),
    ],
)
def test_quote_parity(line: str, expected: bool) -> None:
    result = validate_source(line)
    flagged = [item for item in result.errors if item.message == "Unclosed string literal"]
    assert bool(flagged) is expected
    if expected:
        assert flagged[0].line == 1


def test_quote_in_comment_line_ignored() -> None:
    result = validate_source('# it"s fine')
    assert result.is_valid


def test_namespace_warning_for_class_parent() -> None:
    result = validate_source("X := class(creative_device):")
    assert result.is_valid
    assert len(result.warnings) == 1
    warning = result.warnings[0]
    assert "creative_device" in warning.message
    assert "/Fortnite.com/Devices" in warning.message
    assert warning.line == 1
    assert warning.severity == "warning"


def test_namespace_satisfied_by_using() -> None:
    source = "using { /Fortnite.com/Devices }\nX := class(creative_device):"
    assert validate_source(source).warnings == ()


def test_namespace_warning_for_parameter_type() -> None:
    source = "Track(Player : player) : void ="
    result = validate_source(source)
    assert _messages(result.warnings) == [
        "Using type 'player' requires namespace '/Fortnite.com/Characters'"
    ]


def test_namespace_warning_reported_once_per_type() -> None:
    source = "\n".join(
        [
            "A : button_device = button_device{}",
            "B : button_device = button_device{}",
        ]
    )
    assert len(validate_source(source).warnings) == 1


def test_custom_namespace_table() -> None:
    table = {"scoreboard": ("/MyGame/Scores",)}
    result = validate_source("Board : scoreboard = scoreboard{}", namespaces=table)
    assert _messages(result.warnings) == [
        "Using type 'scoreboard' requires namespace '/MyGame/Scores'"
    ]
    assert validate_source("X := class(creative_device):", namespaces=table).warnings == ()


def test_check_namespaces_normalizes_paths() -> None:
    diagnostics = check_namespaces(
        {"game_phase": 3},
        {"Fortnite.com/Game"},
        {"game_phase": ("/Fortnite.com/Game",)},
    )
    assert diagnostics == []


@pytest.mark.parametrize("source", ["", "\n\n", "}}}{{{", '"""', "if", "using {"])
def test_validator_never_raises(source: str) -> None:
    result = validate_source(source)
    line_count = len(source.split("\n"))
    for item in (*result.errors, *result.warnings):
        assert 1 <= item.line <= line_count + 1


def test_validation_is_deterministic() -> None:
    source = (FIXTURES / "broken.verse").read_text(encoding="utf-8")
    assert validate_source(source) == validate_source(source)


def test_result_from_diagnostics_partitions_by_severity() -> None:
    result = ValidationResult.from_diagnostics(
        [
            Diagnostic(line=4, message="late", severity="error"),
            Diagnostic(line=1, message="advice", severity="warning"),
            Diagnostic(line=2, message="early", severity="error"),
            Diagnostic(line=1, message="note", severity="info"),
        ]
    )
    assert _messages(result.errors) == ["early", "late"]
    assert _messages(result.warnings) == ["advice"]
    assert not result.is_valid
    assert result.as_dict()["is_valid"] is False


PADDING = " " * 100_000


@pytest.mark.parametrize(
    "line",
    [
        "a:" + PADDING + "x",
        "var a:" + PADDING + "x",
        "a : int" + PADDING + "x",
        "Foo()" + PADDING + "x",
        "Foo():" + PADDING + "x",
        "if (" + PADDING + "x",
        "if (X)" + PADDING + "x",
    ],
)
def test_long_whitespace_runs_validate_in_linear_time(line: str) -> None:
    started = time.perf_counter()
    result = validate_source(line)
    assert time.perf_counter() - started < 2.0
    assert result.is_valid
    assert classify_line(1, line).kind is ShapeKind.GENERIC
