"""Expression evaluation."""

from __future__ import annotations

import math
import operator as _op
from typing import Callable

from .environment import Scope
from .errors import ImpTypeError, InvalidConstructError
from .nodes import BinaryOp, BooleanLiteral, Expression, NumberLiteral, VariableRef
from .values import Value, VBool, VNumber, values_equal


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(scope: Scope, expr: Expression) -> Value:
    """Evaluate *expr* against *scope*.  Never mutates *scope*."""
    if isinstance(expr, NumberLiteral):
        return VNumber(expr.value)
    if isinstance(expr, BooleanLiteral):
        return VBool(expr.value)
    if isinstance(expr, VariableRef):
        return scope.lookup(expr.name)
    if isinstance(expr, BinaryOp):
        return _eval_binary(scope, expr)
    raise InvalidConstructError(f"Invalid expression kind: {type(expr).__name__}")


# ---------------------------------------------------------------------------
# Binary operators
# ---------------------------------------------------------------------------

_ARITHMETIC: dict[str, Callable[[float, float], float]] = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
}

_COMPARISON: dict[str, Callable[[float, float], bool]] = {
    ">": _op.gt,
    "<": _op.lt,
}

_LOGICAL: dict[str, Callable[[bool, bool], bool]] = {
    "&&": lambda a, b: a and b,
    "||": lambda a, b: a or b,
}


def _eval_binary(scope: Scope, expr: BinaryOp) -> Value:
    # Both sides are always evaluated; && and || do not short-circuit.
    left = evaluate(scope, expr.left)
    right = evaluate(scope, expr.right)
    op = expr.operator

    if op in _ARITHMETIC:
        a, b = _numbers(op, left, right)
        return VNumber(_ARITHMETIC[op](a, b))
    if op == "/":
        a, b = _numbers(op, left, right)
        return VNumber(_divide(a, b))
    if op in _COMPARISON:
        a, b = _numbers(op, left, right)
        return VBool(_COMPARISON[op](a, b))
    if op in _LOGICAL:
        a, b = _booleans(op, left, right)
        return VBool(_LOGICAL[op](a, b))
    if op == "===":
        return VBool(values_equal(left, right))
    raise InvalidConstructError(f"Invalid binary operator: {op}")


def _numbers(op: str, left: Value, right: Value) -> tuple[float, float]:
    if isinstance(left, VNumber) and isinstance(right, VNumber):
        return left.value, right.value
    raise ImpTypeError(
        f"Invalid operand types for '{op}' operator. Both operands must be numbers.",
        operator=op,
    )


def _booleans(op: str, left: Value, right: Value) -> tuple[bool, bool]:
    if isinstance(left, VBool) and isinstance(right, VBool):
        return left.value, right.value
    raise ImpTypeError(
        f"Invalid operand types for '{op}' operator. Both operands must be booleans.",
        operator=op,
    )


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor yields ±inf or nan, never an error."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return float("nan")
        # The sign of a zero divisor matters: 1 / -0 is -inf.
        negative = (a < 0) != (math.copysign(1.0, b) < 0)
        return float("-inf") if negative else float("inf")
    return a / b
