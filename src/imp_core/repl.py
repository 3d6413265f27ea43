"""ImpRepl: incremental REPL for notebook / interactive use.

Also provides the ``imp-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

from .environment import Scope
from .errors import ImpCoreError
from .evaluator import evaluate
from .executor import execute_block
from .parser import parse_expression, parse_program
from .values import Value

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "IMP_CORE_LOG_LEVEL"


# ---------------------------------------------------------------------------
# ImpRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class ImpRepl:
    """Stateful REPL that keeps one Scope across calls.

    Usage::

        repl = ImpRepl()
        repl.eval("let x = 10;")
        repl.eval("while (x > 0) { x = x - 1; }")
        repl.eval_expression("x === 0")   # → VBool(True)

        repl.scope        # all bindings
        repl.reset()      # clear state
    """

    def __init__(self, dest: IO[str] | None = None) -> None:
        self.scope = Scope()
        self.dest = dest

    def _sink(self, text: str) -> None:
        print(text, file=self.dest if self.dest is not None else sys.stdout)

    def eval(self, text: str) -> None:
        """Execute program *text* against the accumulated Scope.

        An error aborts the rest of *text*; bindings made before it stay.
        """
        execute_block(self.scope, parse_program(text), self._sink)

    def eval_expression(self, text: str) -> Value:
        """Evaluate a single expression against the accumulated Scope."""
        return evaluate(self.scope, parse_expression(text))

    def reset(self) -> None:
        """Clear all accumulated bindings."""
        self.scope = Scope()


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _report(exc: ImpCoreError) -> None:
    print(f"Error: {exc}", file=sys.stderr)


def _show_vars(repl: ImpRepl, dest: IO[str]) -> None:
    """Print all bindings of the current Scope."""
    if not len(repl.scope):
        print("  (no variables defined)", file=dest)
        return
    width = max(len(k) for k in repl.scope)
    for name in repl.scope:
        print(f"  {name:<{width}} : {repl.scope[name]}", file=dest)


def _run_file(repl: ImpRepl, filepath: str, dest: IO[str]) -> None:
    """Feed each line of *filepath* to :func:`_process_line`."""
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                _process_line(repl, file_line.rstrip("\n"), dest)
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _process_line(repl: ImpRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":vars":
        _show_vars(repl, dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        _run_file(repl, line[4:].strip(), dest)
        return True

    repl.dest = dest
    try:
        # ── ? expression ──────────────────────────────────────────────────
        if line.startswith("? "):
            print(str(repl.eval_expression(line[2:].strip())), file=dest)
            return True

        # ── Regular program input ─────────────────────────────────────────
        repl.eval(line)
    except ImpCoreError as exc:
        _report(exc)
    return True


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_program_file(filepath: str) -> int:
    """Run a whole source file once.  Returns a process exit code."""
    logger.debug("running program file %s", filepath)
    try:
        with open(filepath, encoding="utf-8") as fh:
            text = fh.read()
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return 1
    repl = ImpRepl()
    try:
        repl.eval(text)
    except ImpCoreError as exc:
        _report(exc)
        return 1
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """``imp-repl [FILE]``: run FILE, or start an interactive shell."""
    _configure_logging()
    args = sys.argv[1:] if argv is None else argv
    if args:
        return _run_program_file(args[0])

    repl = ImpRepl()
    dest: IO[str] = sys.stdout
    _file: IO[str] | None = None

    print("imp REPL  (:q to quit  |  :vars  :reset  |  ? <expr>  ?<< <file>)")

    while True:
        try:
            line = input("imp> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not line:
            continue

        # ── Output redirect: ?>> filepath  /  ?>> ─────────────────────────
        if line.startswith("?>> "):
            filepath = line[4:].strip()
            if _file:
                _file.close()
                _file = None
                dest = sys.stdout
            try:
                _file = open(filepath, "w", encoding="utf-8")
                dest = _file
            except OSError as exc:
                print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
            continue

        if line == "?>>":
            if _file:
                _file.close()
                _file = None
            dest = sys.stdout
            continue

        if not _process_line(repl, line, dest):
            break

    if _file:
        _file.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
