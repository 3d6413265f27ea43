"""End-to-end tests for imp_core.program."""

import pytest

from imp_core import (
    ImpReferenceError,
    ImpTypeError,
    Let,
    NumberLiteral,
    Scope,
    VBool,
    VNumber,
    parse_program,
    run,
    run_source,
)


def expect_state(source, expected):
    assert run(parse_program(source)).to_python() == expected


def test_run_returns_fresh_scope():
    a = run([Let("x", NumberLiteral(1))])
    b = run([])
    assert a == Scope({"x": VNumber(1)})
    assert b == Scope()


def test_declaration_and_reassignment():
    expect_state("let x = 10; x = 20;", {"x": 20})


def test_several_reassignments():
    expect_state("let x = 10; x = 20; x = 30; x = 40;", {"x": 40})


def test_multiple_declarations():
    expect_state("let x = 10; let y = 20;", {"x": 10, "y": 20})


def test_if_else():
    expect_state(
        """
        let x = 5;
        if (x > 0) {
          x = 10;
        } else {
          x = 20;
        }
        """,
        {"x": 10},
    )


def test_while_multiple_iterations():
    expect_state(
        """
        let x = 3;
        while (x > 0) {
          x = x - 1;
        }
        """,
        {"x": 0},
    )


def test_while_no_iterations():
    expect_state(
        """
        let x = 0;
        while (x > 0) {
          x = x - 1;
        }
        """,
        {"x": 0},
    )


def test_factorial():
    expect_state(
        """
        let n = 5;
        let acc = 1;
        while (n > 1) {
          acc = acc * n;
          n = n - 1;
        }
        let done = n === 1;
        """,
        {"n": 1, "acc": 120, "done": True},
    )


def test_print_output_and_state():
    lines = []
    scope = run_source("let x = 10; print x * 2;", lines.append)
    assert lines == ["20"]
    assert scope == Scope({"x": VNumber(10)})


def test_print_order_follows_execution():
    lines = []
    run_source(
        """
        let i = 0;
        while (i < 3) {
          if (i === 1) { print true; } else { print i; }
          i = i + 1;
        }
        """,
        lines.append,
    )
    assert lines == ["0", "true", "2"]


def test_reference_error_aborts_run():
    lines = []
    with pytest.raises(ImpReferenceError):
        run_source("print 1; y = 2; print 3;", lines.append)
    assert lines == ["1"]


def test_type_error_aborts_run():
    with pytest.raises(ImpTypeError):
        run_source("let x = true; if (x + 1 > 0) { }")


def test_booleans_in_state():
    scope = run_source("let a = true && false; let b = 1 < 2 || false;")
    assert scope["a"] == VBool(False)
    assert scope["b"] == VBool(True)
