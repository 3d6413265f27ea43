"""imp_core: evaluator for a small imperative expression/statement language."""

from .environment import Scope
from .errors import (
    ImpCoreError,
    ImpReferenceError,
    ImpSyntaxError,
    ImpTypeError,
    InvalidConstructError,
)
from .evaluator import evaluate
from .executor import execute, execute_block
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
from .parser import parse_expression, parse_program
from .program import run, run_source
from .repl import ImpRepl
from .values import Value, VBool, VNumber

__all__ = [
    "run",
    "run_source",
    "evaluate",
    "execute",
    "execute_block",
    "parse_program",
    "parse_expression",
    "Scope",
    "Value",
    "VNumber",
    "VBool",
    "Expression",
    "NumberLiteral",
    "BooleanLiteral",
    "VariableRef",
    "BinaryOp",
    "Statement",
    "Let",
    "Assign",
    "If",
    "While",
    "Print",
    "ImpCoreError",
    "ImpReferenceError",
    "ImpTypeError",
    "InvalidConstructError",
    "ImpSyntaxError",
    "ImpRepl",
]
