"""
Expression capability consumed by conditions.

Conditions compare the values of expressions, but they never look
inside one. All they need is:

    evaluate(variables) -> element     (raises ExpressionError on failure)
    to_sexp() -> Sexp                  (optional, for serialization)

Any object providing these methods can be embedded in a condition.
The Expression base class below is a convenience for implementers;
conditions do not require subclassing it.

ARCHITECTURAL RULE:
    The concrete expression grammar (constants, variables, arithmetic)
    lives outside the condition layer. See num_expr for a reference one.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from condlm.sexp import Sexp


class Expression(ABC):
    """
    Base class for element-valued expression trees.

    An element is whatever scalar the host chooses (int, float, ...).
    It only has to support the native comparison operators.
    """

    @abstractmethod
    def evaluate(self, variables: Sequence[Any]) -> Any:
        """
        Evaluate the expression with the given variables bound.

        Args:
            variables: Ordered binding, indexed by variable slot

        Returns:
            A single element

        Raises:
            ExpressionError: If evaluation fails
        """

    def to_sexp(self) -> Sexp:
        """Project the expression to an S-expression."""
        raise TypeError(f"{type(self).__name__} does not support S-expression export")


def expression_to_sexp(expr: Any) -> Sexp:
    """Project any expression-like object, failing loudly if it cannot export itself."""
    to_sexp = getattr(expr, "to_sexp", None)
    if to_sexp is None:
        raise TypeError(f"Unsupported Expression type: {type(expr)}")
    return to_sexp()


__all__ = ["Expression", "expression_to_sexp"]
