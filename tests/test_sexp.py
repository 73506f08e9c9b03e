"""
Tests for S-expression values and their text rendering.
"""

import pytest
from condlm.sexp import Atom, SList


class TestAtom:
    def test_bare_token(self):
        assert str(Atom("true")) == "true"
        assert str(Atom("<=")) == "<="

    @pytest.mark.parametrize("value,token", [
        (True, "true"),
        (False, "false"),
        (5, "5"),
        (-8, "-8"),
        (0.1, "0.1"),
        (0.0, "0.0"),
        ("x", "x"),
    ])
    def test_from_value(self, value, token):
        assert Atom.from_value(value).token == token

    def test_quoting(self):
        assert str(Atom("two words")) == '"two words"'
        assert str(Atom("")) == '""'
        assert str(Atom('say "hi"')) == '"say \\"hi\\""'
        assert str(Atom("(x)")) == '"(x)"'

    def test_immutable(self):
        atom = Atom("a")
        with pytest.raises(AttributeError):
            atom.token = "b"


class TestSList:
    def test_of_wraps_strings(self):
        lst = SList.of("and", "true", "false")
        assert lst.items == (Atom("and"), Atom("true"), Atom("false"))
        assert lst.head == Atom("and")

    def test_rendering(self):
        assert str(SList.of("and", "true", "false")) == "(and true false)"

    def test_nested_rendering(self):
        inner = SList.of(">", SList.of("var", "0"), "0.0")
        assert str(SList.of("not", inner)) == "(not (> (var 0) 0.0))"

    def test_empty(self):
        assert str(SList()) == "()"
        assert SList().head is None

    def test_structural_equality(self):
        assert SList.of("or", "a", "b") == SList.of("or", Atom("a"), Atom("b"))
        assert SList.of("or", "a", "b") != SList.of("and", "a", "b")
