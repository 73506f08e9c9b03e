"""
Example condition builders used by the demo and tests.

Each builder returns a plain Condition tree over num_expr expressions.
"""
from condlm.conditions import (
    Comparison,
    ComparisonOperator,
    Condition,
    Connective,
    LogicalOperator,
    Not,
)
from condlm.num_expr import ArithmeticOperator, BinaryArithmetic, Const, Var


def build_range_check(slot: int = 0, low: float = 1, high: float = 5, missing: float = -8) -> Condition:
    """(x[slot] >= low AND x[slot] <= high) OR x[slot] == missing"""
    in_range = Connective(
        operator=LogicalOperator.AND,
        left=Comparison(
            operator=ComparisonOperator.GREATER_EQUAL,
            left=Var(slot),
            right=Const(low),
        ),
        right=Comparison(
            operator=ComparisonOperator.LESS_EQUAL,
            left=Var(slot),
            right=Const(high),
        ),
    )
    return Connective(
        operator=LogicalOperator.OR,
        left=in_range,
        right=Comparison(
            operator=ComparisonOperator.EQUAL,
            left=Var(slot),
            right=Const(missing),
        ),
    )


def build_ratio_guard(numerator: int = 0, denominator: int = 1, threshold: float = 0.5) -> Condition:
    """NOT (x[numerator] / x[denominator] < threshold)

    Raises DivisionByZero when evaluated with x[denominator] == 0.
    """
    return Not(
        Comparison(
            operator=ComparisonOperator.LESS,
            left=BinaryArithmetic(
                operator=ArithmeticOperator.DIV,
                left=Var(numerator),
                right=Var(denominator),
            ),
            right=Const(threshold),
        )
    )
