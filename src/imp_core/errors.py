"""Error taxonomy for imp_core."""

from __future__ import annotations


class ImpCoreError(Exception):
    """Base class for every error raised while parsing or running a program."""


class ImpReferenceError(ImpCoreError):
    """A variable was read or assigned before it was declared."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"ReferenceError: {name} is not defined.")


class ImpTypeError(ImpCoreError):
    """Operand or condition types violate an operator's requirements."""

    def __init__(self, message: str, operator: str | None = None) -> None:
        self.operator = operator
        super().__init__(message)


class InvalidConstructError(ImpCoreError):
    """A syntax node carries an unknown kind or operator symbol."""


class ImpSyntaxError(ImpCoreError):
    """Source text could not be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
