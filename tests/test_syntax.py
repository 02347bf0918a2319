"""Tests for line-shape classification."""

from __future__ import annotations

import pytest

from versekit.syntax import (
    BlankLine,
    CommentLine,
    FunctionDecl,
    GenericLine,
    IfStmt,
    ImportLine,
    ShapeKind,
    TypeDecl,
    UsingParseError,
    UsingParser,
    VarDecl,
    classify_line,
    classify_source,
)


def test_using_parser_reads_path() -> None:
    namespace = UsingParser().parse("using { /Fortnite.com/Devices }")
    assert namespace.segments == ("Fortnite.com", "Devices")
    assert namespace.path == "/Fortnite.com/Devices"


def test_using_parser_rejects_missing_braces() -> None:
    with pytest.raises(UsingParseError) as exc:
        UsingParser().parse("using /Fortnite.com/Devices", line_no=4)
    assert "line 4" in str(exc.value)


def test_classify_blank_and_comment() -> None:
    assert isinstance(classify_line(1, "   "), BlankLine)
    assert isinstance(classify_line(2, "  # note"), CommentLine)


def test_classify_import() -> None:
    shape = classify_line(1, "using { /Verse.org/Simulation }")
    assert isinstance(shape, ImportLine)
    assert shape.namespace.path == "/Verse.org/Simulation"


def test_malformed_using_falls_through_to_generic() -> None:
    shape = classify_line(1, "using { Fortnite.com }")
    assert isinstance(shape, GenericLine)


def test_classify_type_decl() -> None:
    shape = classify_line(3, "hello_device := class(creative_device):")
    assert isinstance(shape, TypeDecl)
    assert shape.name == "hello_device"
    assert shape.parent == "creative_device"


def test_classify_function_decl_with_effects() -> None:
    shape = classify_line(5, "    OnBegin<override>()<suspends> : void =")
    assert isinstance(shape, FunctionDecl)
    assert shape.name == "OnBegin"
    assert shape.return_type == "void"
    assert shape.parameters == ()


def test_classify_function_decl_parameters() -> None:
    shape = classify_line(1, "Greet(Agent : agent, Count : int) : logic =")
    assert isinstance(shape, FunctionDecl)
    assert [p.name for p in shape.parameters] == ["Agent", "Count"]
    assert [p.type_name for p in shape.parameters] == ["agent", "int"]


def test_classify_function_decl_without_return_type() -> None:
    shape = classify_line(1, "OnBegin<override>()<suspends> =")
    assert isinstance(shape, FunctionDecl)
    assert shape.return_type is None


def test_classify_var_decl() -> None:
    shape = classify_line(1, "var Score : int = 0")
    assert isinstance(shape, VarDecl)
    assert shape.mutable is True
    assert shape.name == "Score"
    assert shape.type_name == "int"
    assert shape.value == "0"


def test_classify_editable_var_decl() -> None:
    shape = classify_line(1, "@editable Button : button_device = button_device{}")
    assert isinstance(shape, VarDecl)
    assert shape.type_name == "button_device"


def test_inferred_definition_is_not_var_decl() -> None:
    shape = classify_line(1, "Character := Agent.GetFortCharacter[]")
    assert shape.kind is ShapeKind.GENERIC


def test_classify_if_stmt() -> None:
    shape = classify_line(1, "if (Score > 3)")
    assert isinstance(shape, IfStmt)
    assert shape.condition == "Score > 3"


def test_if_with_inline_body_is_generic() -> None:
    shape = classify_line(1, 'if (Score > 3) { Print("win") }')
    assert isinstance(shape, GenericLine)


def test_classify_source_numbers_lines_from_one() -> None:
    shapes = list(classify_source("a\n\nb"))
    assert [shape.line_no for shape in shapes] == [1, 2, 3]
    assert shapes[1].kind is ShapeKind.BLANK


def test_column_accounts_for_indent() -> None:
    shape = classify_line(1, "    }")
    assert shape.column_of(0) == 5


def test_declaration_captures_are_trimmed() -> None:
    function = classify_line(1, "Foo()  :   int   =")
    assert isinstance(function, FunctionDecl)
    assert function.return_type == "int"

    variable = classify_line(2, "Total   :   float   =   1.5  ")
    assert isinstance(variable, VarDecl)
    assert (variable.type_name, variable.value) == ("float", "1.5")

    untyped = classify_line(3, "var Count : = 0")
    assert isinstance(untyped, VarDecl)
    assert untyped.type_name == ""
