import pytest

from ast_nodes import Program, Stmt, Expr, ExprStmt
from parser import parse
from printer import render, SourcePrinter


@pytest.mark.parametrize("source, expected", [
    ("-a * b", "((-a) * b);"),
    ("!-a", "(!(-a));"),
    ("a + b + c", "((a + b) + c);"),
    ("a + b - c", "((a + b) - c);"),
    ("a * b * c", "((a * b) * c);"),
    ("a * b / c", "((a * b) / c);"),
    ("a + b / c", "(a + (b / c));"),
    ("a + b * c + d / e - f", "(((a + (b * c)) + (d / e)) - f);"),
    ("5 > 4 == 3 < 4", "((5 > 4) == (3 < 4));"),
    ("5 < 4 != 3 > 4", "((5 < 4) != (3 > 4));"),
    ("3 + 4 * 5 == 3 * 1 + 4 * 5", "((3 + (4 * 5)) == ((3 * 1) + (4 * 5)));"),
])
def test_operator_precedence_rendering(source, expected):
    program, errors = parse(source)
    assert errors == []
    assert render(program) == expected


def test_statements_render_one_per_line():
    program, errors = parse("let x = 1 + 2; return x;\nx * 3;")
    assert errors == []
    assert render(program) == "let x = (1 + 2);\nreturn x;\n(x * 3);"


def test_empty_program_renders_empty():
    assert render(Program()) == ""


def test_unknown_nodes_are_rejected():
    with pytest.raises(TypeError):
        SourcePrinter().generate(Program(statements=(Stmt(),)))
    with pytest.raises(TypeError):
        SourcePrinter().generate(Program(statements=(ExprStmt(expr=Expr()),)))


def test_long_prefix_chain_renders():
    depth = 5000
    program, errors = parse("!" * depth + "x;")
    assert errors == []
    assert render(program) == "(!" * depth + "x" + ")" * depth + ";"
