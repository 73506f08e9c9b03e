"""
Condition Logic Model (CLM) Package

A small embeddable engine for boolean conditions over numeric expressions.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - How expressions compute their values
    - How hosts store or look up variables
    - Parsing source text into trees

Conditions are plain immutable data. Evaluation and serialization
live in separate layers and never modify the tree.
"""

from condlm.conditions import (
    Condition,
    LogicalOperator,
    ComparisonOperator,
    BooleanLiteral,
    TRUE,
    FALSE,
    Not,
    Connective,
    Comparison,
)
from condlm.errors import (
    ErrorKind,
    ExpressionError,
    DivisionByZero,
    InvalidVariable,
    InvalidOperation,
)
from condlm.evaluator import evaluate_condition
from condlm.expressions import Expression
from condlm.sexp import Sexp, Atom, SList
from condlm.backends.sexp_generator import condition_to_sexp

__version__ = "0.1.0"
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
    "ErrorKind",
    "ExpressionError",
    "DivisionByZero",
    "InvalidVariable",
    "InvalidOperation",
    "evaluate_condition",
    "Expression",
    "Sexp",
    "Atom",
    "SList",
    "condition_to_sexp",
]
