"""
S-expression generator for CLM conditions.

Converts a Condition tree into the shared Sexp tree, and from there
into text:

    TRUE                                  -> true
    Not(c)                                -> (not c)
    Connective(AND, a, b)                 -> (and a b)
    Comparison(GREATER, Var(0), Const(0)) -> (> (var 0) 0)

Embedded expressions are projected by their own to_sexp().
The condition layer only supplies operator tokens and recursion.
"""

import logging

from condlm.conditions import (
    BooleanLiteral,
    Comparison,
    ComparisonOperator,
    Condition,
    Connective,
    LogicalOperator,
    Not,
)
from condlm.expressions import expression_to_sexp
from condlm.sexp import Atom, SList, Sexp


logger = logging.getLogger(__name__)


def condition_to_sexp(condition: Condition) -> Sexp:
    """
    Project a condition tree to an S-expression.

    Raises:
        TypeError: For an unknown node type, or an embedded expression
            that cannot export itself
    """
    if isinstance(condition, BooleanLiteral):
        return Atom.from_value(condition.value)

    if isinstance(condition, Not):
        return SList.of("not", condition_to_sexp(condition.operand))

    if isinstance(condition, Connective):
        if not isinstance(condition.operator, LogicalOperator):
            raise TypeError(f"Unsupported LogicalOperator: {condition.operator!r}")
        return SList.of(
            condition.operator.value,
            condition_to_sexp(condition.left),
            condition_to_sexp(condition.right),
        )

    if isinstance(condition, Comparison):
        if not isinstance(condition.operator, ComparisonOperator):
            raise TypeError(f"Unsupported ComparisonOperator: {condition.operator!r}")
        return SList.of(
            condition.operator.value,
            expression_to_sexp(condition.left),
            expression_to_sexp(condition.right),
        )

    raise TypeError(f"Unsupported Condition type: {type(condition)}")


def sexp_to_string(condition: Condition) -> str:
    """Render a condition as S-expression text, e.g. '(and true false)'."""
    return str(condition_to_sexp(condition))


def save_sexp_file(condition: Condition, filename: str) -> None:
    """
    Render a condition and save it to file.

    Args:
        condition: Condition to serialize
        filename: Output file path (.sexp extension recommended)
    """
    text = sexp_to_string(condition)
    with open(filename, 'w') as f:
        f.write(text + "\n")
    logger.debug("Wrote S-expression (%d chars) to %s", len(text), filename)


__all__ = ["condition_to_sexp", "sexp_to_string", "save_sexp_file"]
