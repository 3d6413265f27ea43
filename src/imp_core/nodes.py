"""Syntax tree nodes consumed by the evaluator and executor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NumberLiteral:
    value: float


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    value: bool


@dataclass(frozen=True, slots=True)
class VariableRef:
    name: str


@dataclass(frozen=True, slots=True)
class BinaryOp:
    operator: str  # + - * / && || > < ===
    left: "Expression"
    right: "Expression"


Expression = Union[NumberLiteral, BooleanLiteral, VariableRef, BinaryOp]


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Let:
    name: str
    expression: Expression


@dataclass(frozen=True, slots=True)
class Assign:
    name: str
    expression: Expression


@dataclass(frozen=True, slots=True)
class If:
    test: Expression
    true_part: tuple["Statement", ...] = ()
    false_part: tuple["Statement", ...] = ()


@dataclass(frozen=True, slots=True)
class While:
    test: Expression
    body: tuple["Statement", ...] = ()


@dataclass(frozen=True, slots=True)
class Print:
    expression: Expression


Statement = Union[Let, Assign, If, While, Print]
