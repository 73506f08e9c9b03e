"""
Condition System for CLM

Boolean conditions are represented as immutable trees, never as strings.
Leaves are boolean literals or comparisons between two expressions;
internal nodes are logical connectives over sub-conditions.

ARCHITECTURAL RULE:
    These classes are structure only.
    Evaluation lives in condlm.evaluator.
    Textual projection lives in condlm.backends.

Every node owns its children outright. No sharing, no cycles.
Equality is structural: And(TRUE, FALSE) != FALSE even though both
evaluate to False.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Condition(ABC):
    """
    Base class for all condition nodes.

    DO NOT:
        - Add evaluation logic here (belongs in evaluator)
        - Add string representations (belongs in backends)
        - Add simplification logic (out of scope)
    """
    pass


class LogicalOperator(Enum):
    """
    Binary connectives over conditions.

    Values double as the S-expression operator tokens.
    """

    AND = "and"
    OR = "or"


class ComparisonOperator(Enum):
    """
    Comparisons between two evaluated expressions.

    Values double as the S-expression operator tokens.
    """

    EQUAL = "=="
    LESS = "<"
    GREATER = ">"
    LESS_EQUAL = "<="
    GREATER_EQUAL = ">="


@dataclass(frozen=True)
class BooleanLiteral(Condition):
    """
    The constant conditions true and false.

    Use the TRUE / FALSE module constants rather than building new ones.
    """

    value: bool


TRUE = BooleanLiteral(True)
FALSE = BooleanLiteral(False)


@dataclass(frozen=True)
class Not(Condition):
    """
    Logical negation of a sub-condition.

    Example:
        NOT (x0 > 0)

    Becomes:
        Not(Comparison(ComparisonOperator.GREATER, Var(0), Const(0)))
    """

    operand: Condition


@dataclass(frozen=True)
class Connective(Condition):
    """
    Represents AND / OR over two sub-conditions.

    Example:
        (x0 >= 1 AND x0 <= 5)

    Becomes:
        Connective(
            operator=LogicalOperator.AND,
            left=Comparison(ComparisonOperator.GREATER_EQUAL, Var(0), Const(1)),
            right=Comparison(ComparisonOperator.LESS_EQUAL, Var(0), Const(5))
        )
    """

    operator: LogicalOperator
    left: Condition
    right: Condition


@dataclass(frozen=True)
class Comparison(Condition):
    """
    Compares the values of two expressions.

    Properties:
        operator: ComparisonOperator enum
        left: Left expression (anything with evaluate(variables))
        right: Right expression

    IMPORTANT:
        Expressions are opaque here. No validation happens at
        construction; a bad variable slot only fails when evaluated.
    """

    operator: ComparisonOperator
    left: Any
    right: Any


__all__ = [
    "Condition",
    "LogicalOperator",
    "ComparisonOperator",
    "BooleanLiteral",
    "TRUE",
    "FALSE",
    "Not",
    "Connective",
    "Comparison",
]
