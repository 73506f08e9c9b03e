"""
Evaluation error taxonomy shared by the expression and condition layers.

Errors are produced exclusively while evaluating expressions.
Conditions never create new kinds, they only let these propagate.
"""

from enum import Enum


class ErrorKind(Enum):
    """The three ways an expression evaluation can fail."""

    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_VARIABLE = "invalid_variable"
    INVALID_OPERATION = "invalid_operation"


class ExpressionError(Exception):
    """
    Base class for all evaluation failures.

    Properties:
        kind: ErrorKind identifying the failure
    """

    kind: ErrorKind = ErrorKind.INVALID_OPERATION

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)


class DivisionByZero(ExpressionError):
    """Raised when an expression divides by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidVariable(ExpressionError):
    """Raised when a referenced variable slot is absent or out of range."""

    kind = ErrorKind.INVALID_VARIABLE


class InvalidOperation(ExpressionError):
    """Raised when an operation is undefined for the given operands."""

    kind = ErrorKind.INVALID_OPERATION


__all__ = [
    "ErrorKind",
    "ExpressionError",
    "DivisionByZero",
    "InvalidVariable",
    "InvalidOperation",
]
