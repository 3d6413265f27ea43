"""Statement execution: the only place that mutates a Scope or writes output."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable

from .environment import Scope
from .errors import ImpReferenceError, ImpTypeError, InvalidConstructError
from .evaluator import evaluate
from .nodes import Assign, Expression, If, Let, Print, Statement, While
from .values import VBool

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]


def stdout_sink(text: str) -> None:
    """Default sink: one line per printed value on ``sys.stdout``."""
    print(text, file=sys.stdout)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def execute(scope: Scope, stmt: Statement, sink: Sink | None = None) -> None:
    """Execute a single statement against *scope*."""
    if sink is None:
        sink = stdout_sink
    logger.debug("execute %s", type(stmt).__name__)

    if isinstance(stmt, Let):
        scope.declare(stmt.name, evaluate(scope, stmt.expression))
    elif isinstance(stmt, Assign):
        if not scope.is_bound(stmt.name):
            raise ImpReferenceError(stmt.name)
        scope.assign(stmt.name, evaluate(scope, stmt.expression))
    elif isinstance(stmt, If):
        branch = stmt.true_part if _condition(scope, stmt.test) else stmt.false_part
        execute_block(scope, branch, sink)
    elif isinstance(stmt, While):
        _exec_while(scope, stmt, sink)
    elif isinstance(stmt, Print):
        sink(str(evaluate(scope, stmt.expression)))
    else:
        raise InvalidConstructError(f"Invalid statement type: {type(stmt).__name__}")


def execute_block(
    scope: Scope, stmts: Iterable[Statement], sink: Sink | None = None
) -> None:
    """Execute *stmts* strictly in order."""
    for stmt in stmts:
        execute(scope, stmt, sink)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _condition(scope: Scope, test: Expression) -> bool:
    value = evaluate(scope, test)
    if not isinstance(value, VBool):
        raise ImpTypeError("Invalid condition type. Expected a boolean.")
    return value.value


def _exec_while(scope: Scope, stmt: While, sink: Sink | None) -> None:
    # No iteration bound: a test that never turns false never returns.
    iterations = 0
    while _condition(scope, stmt.test):
        execute_block(scope, stmt.body, sink)
        iterations += 1
    logger.debug("while loop finished after %d iteration(s)", iterations)
