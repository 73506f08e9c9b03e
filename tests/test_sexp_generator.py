"""
Tests for the S-expression projection of conditions.
"""

import pytest
from condlm.backends.sexp_generator import (
    condition_to_sexp,
    save_sexp_file,
    sexp_to_string,
)
from condlm.conditions import (
    TRUE,
    FALSE,
    Not,
    Connective,
    LogicalOperator,
    Comparison,
    ComparisonOperator,
)
from condlm.expressions import Expression
from condlm.num_expr import ArithmeticOperator, BinaryArithmetic, Const, Var
from condlm.sexp import Atom, SList


class TestTokens:
    def test_literals(self):
        assert condition_to_sexp(TRUE) == Atom("true")
        assert condition_to_sexp(FALSE) == Atom("false")

    def test_not(self):
        assert condition_to_sexp(Not(TRUE)) == SList.of("not", "true")

    def test_and(self):
        cond = Connective(LogicalOperator.AND, TRUE, FALSE)
        assert sexp_to_string(cond) == "(and true false)"

    def test_or(self):
        cond = Connective(LogicalOperator.OR, FALSE, TRUE)
        assert sexp_to_string(cond) == "(or false true)"

    @pytest.mark.parametrize("op,token", [
        (ComparisonOperator.EQUAL, "=="),
        (ComparisonOperator.LESS, "<"),
        (ComparisonOperator.GREATER, ">"),
        (ComparisonOperator.LESS_EQUAL, "<="),
        (ComparisonOperator.GREATER_EQUAL, ">="),
    ])
    def test_comparisons(self, op, token):
        cond = Comparison(op, Var(0), Const(1))
        assert sexp_to_string(cond) == f"({token} (var 0) 1)"

    def test_all_tags_distinct(self):
        conditions = [
            TRUE,
            FALSE,
            Not(TRUE),
            Connective(LogicalOperator.AND, TRUE, TRUE),
            Connective(LogicalOperator.OR, TRUE, TRUE),
        ] + [Comparison(op, Const(1), Const(1)) for op in ComparisonOperator]
        heads = set()
        for cond in conditions:
            sexp = condition_to_sexp(cond)
            heads.add(sexp if isinstance(sexp, Atom) else sexp.head)
        assert len(heads) == 10


class TestProjection:
    def test_nested(self):
        cond = Not(Connective(
            LogicalOperator.AND,
            Comparison(ComparisonOperator.GREATER, Var(0), Const(0.0)),
            Comparison(ComparisonOperator.LESS_EQUAL, Var(1), Const(5)),
        ))
        assert sexp_to_string(cond) == "(not (and (> (var 0) 0.0) (<= (var 1) 5)))"

    def test_deterministic(self):
        a = Connective(LogicalOperator.OR, TRUE, Comparison(ComparisonOperator.EQUAL, Const(5), Const(5)))
        b = Connective(LogicalOperator.OR, TRUE, Comparison(ComparisonOperator.EQUAL, Const(5), Const(5)))
        assert condition_to_sexp(a) == condition_to_sexp(b)
        assert sexp_to_string(a) == sexp_to_string(a)

    def test_custom_expression_projection(self):
        """The expression layer owns its own projection."""

        class Named(Expression):
            def __init__(self, name):
                self.name = name

            def evaluate(self, variables):
                return 0

            def to_sexp(self):
                return SList.of("ref", self.name)

        cond = Comparison(ComparisonOperator.EQUAL, Named("speed"), Const(3))
        assert sexp_to_string(cond) == "(== (ref speed) 3)"

    def test_expression_without_export_raises(self):
        class Opaque(Expression):
            def evaluate(self, variables):
                return 0

        with pytest.raises(TypeError):
            condition_to_sexp(Comparison(ComparisonOperator.EQUAL, Opaque(), Const(0)))

    def test_nested_expression_without_export_raises(self):
        class Opaque(Expression):
            def evaluate(self, variables):
                return 0

        cond = Comparison(
            ComparisonOperator.EQUAL,
            BinaryArithmetic(ArithmeticOperator.ADD, Opaque(), Const(1)),
            Const(0),
        )
        with pytest.raises(TypeError):
            condition_to_sexp(cond)

    def test_plain_object_without_export_raises(self):
        with pytest.raises(TypeError):
            condition_to_sexp(Comparison(ComparisonOperator.EQUAL, object(), Const(0)))

    def test_connective_with_string_operator(self):
        with pytest.raises(TypeError):
            condition_to_sexp(Connective("and", TRUE, FALSE))

    def test_comparison_with_string_operator(self):
        with pytest.raises(TypeError):
            condition_to_sexp(Comparison("==", Const(1), Const(1)))

    def test_unknown_node_type(self):
        with pytest.raises(TypeError):
            condition_to_sexp("true")


def test_save_sexp_file(tmp_path):
    path = tmp_path / "cond.sexp"
    save_sexp_file(Connective(LogicalOperator.AND, TRUE, FALSE), str(path))
    assert path.read_text() == "(and true false)\n"
