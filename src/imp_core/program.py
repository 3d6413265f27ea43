"""Program driver: runs a statement sequence against a fresh Scope."""

from __future__ import annotations

import logging
from typing import Sequence

from .environment import Scope
from .executor import Sink, execute_block
from .nodes import Statement
from .parser import parse_program

logger = logging.getLogger(__name__)


def run(statements: Sequence[Statement], sink: Sink | None = None) -> Scope:
    """Execute *statements* in order and return the resulting top-level Scope.

    Any error aborts the run and propagates to the caller; no partial
    Scope is returned.
    """
    scope = Scope()
    logger.debug("running program of %d statement(s)", len(statements))
    execute_block(scope, statements, sink)
    logger.debug("program finished with %d binding(s)", len(scope))
    return scope


def run_source(text: str, sink: Sink | None = None) -> Scope:
    """Parse *text* and :func:`run` it."""
    return run(parse_program(text), sink)
