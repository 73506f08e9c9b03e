"""
Condition Evaluator — walks a condition tree against a variable binding.

Evaluation is a pure post-order descent:
    - Literals return their value without touching the binding
    - Not inverts its operand
    - Connectives evaluate BOTH operands, then combine
    - Comparisons evaluate left, then right, then compare natively

Only an error stops evaluation. There is no short-circuit on the boolean
value, so And(FALSE, <failing>) raises rather than returning False.

Errors raised by expressions are never caught here. The exact exception
object reaches the caller.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, Sequence

from condlm.conditions import (
    BooleanLiteral,
    Comparison,
    ComparisonOperator,
    Condition,
    Connective,
    LogicalOperator,
    Not,
)


_COMPARISONS: Dict[ComparisonOperator, Callable[[Any, Any], bool]] = {
    ComparisonOperator.EQUAL: operator.eq,
    ComparisonOperator.LESS: operator.lt,
    ComparisonOperator.GREATER: operator.gt,
    ComparisonOperator.LESS_EQUAL: operator.le,
    ComparisonOperator.GREATER_EQUAL: operator.ge,
}


def evaluate_condition(condition: Condition, variables: Sequence[Any] = ()) -> bool:
    """
    Evaluate a condition with the given variables bound.

    Args:
        condition: Root of the condition tree
        variables: Ordered binding passed unexamined to every expression

    Returns:
        True or False

    Raises:
        ExpressionError: The first error raised by an embedded expression,
            in left-to-right depth-first order
        TypeError: If the tree contains a node that is not a Condition
    """
    if isinstance(condition, BooleanLiteral):
        return condition.value

    if isinstance(condition, Not):
        return not evaluate_condition(condition.operand, variables)

    if isinstance(condition, Connective):
        left = evaluate_condition(condition.left, variables)
        right = evaluate_condition(condition.right, variables)
        if condition.operator == LogicalOperator.AND:
            return left and right
        if condition.operator == LogicalOperator.OR:
            return left or right
        raise TypeError(f"Unsupported LogicalOperator: {condition.operator!r}")

    if isinstance(condition, Comparison):
        compare = _COMPARISONS.get(condition.operator)
        if compare is None:
            raise TypeError(f"Unsupported ComparisonOperator: {condition.operator!r}")
        left = condition.left.evaluate(variables)
        right = condition.right.evaluate(variables)
        # NaN and other incomparable values compare False, never raise.
        return bool(compare(left, right))

    raise TypeError(f"Unsupported Condition type: {type(condition)}")


__all__ = ["evaluate_condition"]
