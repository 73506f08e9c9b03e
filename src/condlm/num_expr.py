"""
Reference numeric expressions.

A minimal grammar implementing the Expression capability:
constants, variable slots and the four binary arithmetic operators.

Example:
    (x0 + 1) / 2

Becomes:
    BinaryArithmetic(
        operator=ArithmeticOperator.DIV,
        left=BinaryArithmetic(
            operator=ArithmeticOperator.ADD,
            left=Var(0),
            right=Const(1)
        ),
        right=Const(2)
    )
"""

from dataclasses import dataclass
from enum import Enum
import operator
from typing import Any, Sequence, Union

from condlm.errors import DivisionByZero, InvalidOperation, InvalidVariable
from condlm.expressions import Expression, expression_to_sexp
from condlm.sexp import Atom, SList, Sexp


@dataclass(frozen=True)
class Const(Expression):
    """
    A literal element.

    Properties:
        value: The constant (int or float)
    """

    value: Union[int, float]

    def evaluate(self, variables: Sequence[Any]) -> Any:
        return self.value

    def to_sexp(self) -> Sexp:
        return Atom.from_value(self.value)


@dataclass(frozen=True)
class Var(Expression):
    """
    References a variable slot in the binding.

    IMPORTANT:
        The index is NOT validated at construction.
        An out-of-range index only fails when evaluated.
    """

    index: int

    def evaluate(self, variables: Sequence[Any]) -> Any:
        if self.index < 0 or self.index >= len(variables):
            raise InvalidVariable(
                f"variable {self.index} not bound (binding has {len(variables)} slots)"
            )
        return variables[self.index]

    def to_sexp(self) -> Sexp:
        return SList.of("var", Atom.from_value(self.index))


class ArithmeticOperator(Enum):
    """Binary arithmetic operators. Values are the S-expression tokens."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


_ARITHMETIC_FUNCS = {
    ArithmeticOperator.ADD: operator.add,
    ArithmeticOperator.SUB: operator.sub,
    ArithmeticOperator.MUL: operator.mul,
    ArithmeticOperator.DIV: operator.truediv,
}


@dataclass(frozen=True)
class BinaryArithmetic(Expression):
    """
    Applies an arithmetic operator to two sub-expressions.

    Operands are evaluated left first; the first error wins.
    """

    operator: ArithmeticOperator
    left: Expression
    right: Expression

    def evaluate(self, variables: Sequence[Any]) -> Any:
        left = self.left.evaluate(variables)
        right = self.right.evaluate(variables)
        if self.operator == ArithmeticOperator.DIV and right == 0:
            raise DivisionByZero(f"{left!r} / {right!r}")
        try:
            return _ARITHMETIC_FUNCS[self.operator](left, right)
        except (TypeError, OverflowError) as e:
            raise InvalidOperation(str(e)) from e

    def to_sexp(self) -> Sexp:
        return SList.of(
            self.operator.value,
            expression_to_sexp(self.left),
            expression_to_sexp(self.right),
        )


__all__ = ["Const", "Var", "ArithmeticOperator", "BinaryArithmetic"]
