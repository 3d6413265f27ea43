"""Surface-syntax parser producing imp_core syntax trees.

The grammar is small and C-like::

    let x = 10;
    while (x > 0) { x = x - 1; }
    if (x === 0) { print true; } else { print false; }

Operators bind, loosest first: ``||``, ``&&``, ``===``, ``> <``, ``+ -``,
``* /``; all are left-associative.  ``//`` starts a line comment.
"""

from __future__ import annotations

import logging

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from .errors import ImpSyntaxError
from .nodes import (
    Assign,
    BinaryOp,
    BooleanLiteral,
    Expression,
    If,
    Let,
    NumberLiteral,
    Print,
    Statement,
    VariableRef,
    While,
)

logger = logging.getLogger(__name__)


GRAMMAR = r"""
program: stmt*

?stmt: "let" NAME "=" expr ";"                  -> let
     | NAME "=" expr ";"                        -> assign
     | "print" expr ";"                         -> print_
     | "if" "(" expr ")" block ["else" block]   -> if_
     | "while" "(" expr ")" block               -> while_

block: "{" stmt* "}"

?expr: disjunction

?disjunction: conjunction
            | disjunction OR conjunction        -> binop
?conjunction: equality
            | conjunction AND equality          -> binop
?equality: relation
         | equality EQ relation                 -> binop
?relation: sum
         | relation REL sum                     -> binop
?sum: product
    | sum PLUS product                          -> binop
    | sum MINUS product                         -> binop
?product: atom
        | product MUL atom                      -> binop

?atom: NUMBER                                   -> number
     | MINUS NUMBER                             -> negative
     | "true"                                   -> true_
     | "false"                                  -> false_
     | NAME                                     -> variable
     | "(" expr ")"

OR: "||"
AND: "&&"
EQ: "==="
REL: ">" | "<"
PLUS: "+"
MINUS: "-"
MUL: "*" | "/"

COMMENT: /\/\/[^\n]*/

%import common.CNAME -> NAME
%import common.NUMBER
%import common.WS
%ignore WS
%ignore COMMENT
"""


@v_args(inline=True)
class _TreeBuilder(Transformer):
    """Turns a Lark parse tree into frozen node dataclasses."""

    # -- Statements -----------------------------------------------------

    def program(self, *stmts: Statement) -> tuple[Statement, ...]:
        return stmts

    def block(self, *stmts: Statement) -> tuple[Statement, ...]:
        return stmts

    def let(self, name, expr: Expression) -> Let:
        return Let(str(name), expr)

    def assign(self, name, expr: Expression) -> Assign:
        return Assign(str(name), expr)

    def print_(self, expr: Expression) -> Print:
        return Print(expr)

    def if_(self, test, true_part, false_part) -> If:
        return If(test, true_part, false_part or ())

    def while_(self, test, body) -> While:
        return While(test, body)

    # -- Expressions ----------------------------------------------------

    def binop(self, left, op, right) -> BinaryOp:
        return BinaryOp(str(op), left, right)

    def number(self, tok) -> NumberLiteral:
        return NumberLiteral(float(tok))

    def negative(self, _minus, tok) -> NumberLiteral:
        return NumberLiteral(-float(tok))

    def true_(self) -> BooleanLiteral:
        return BooleanLiteral(True)

    def false_(self) -> BooleanLiteral:
        return BooleanLiteral(False)

    def variable(self, name) -> VariableRef:
        return VariableRef(str(name))


_parser = Lark(GRAMMAR, start=["program", "expr"], parser="lalr")


def _parse(text: str, start: str):
    try:
        tree = _parser.parse(text, start=start)
    except UnexpectedInput as exc:
        line = getattr(exc, "line", None)
        if line is not None and line < 1:
            line = None
        column = getattr(exc, "column", None) if line is not None else None
        raise ImpSyntaxError(f"Invalid syntax: {type(exc).__name__}", line, column) from exc
    return _TreeBuilder().transform(tree)


def parse_program(text: str) -> tuple[Statement, ...]:
    """Parse a whole program into a tuple of statements."""
    stmts = _parse(text, "program")
    logger.debug("parsed %d top-level statement(s)", len(stmts))
    return stmts


def parse_expression(text: str) -> Expression:
    """Parse a single expression (no trailing ``;``)."""
    return _parse(text, "expr")
