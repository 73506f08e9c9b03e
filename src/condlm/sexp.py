"""
S-Expression values

A tiny tagged tree used as the shared textual projection of conditions
and expressions. It is output-only: there is no reader.

    Atom("true")                          -> true
    SList.of("and", "true", "false")      -> (and true false)
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import Tuple, Union


_QUOTE_CHARS = set(' \t\n\r()"\\;')


class Sexp(ABC):
    """
    Base class for S-expression values.

    Structure only. Rendering happens in __str__ of the subclasses.
    """
    pass


@dataclass(frozen=True)
class Atom(Sexp):
    """
    A bare token.

    Properties:
        token: The textual token (e.g. "true", "0.5", "==")
    """

    token: str

    @classmethod
    def from_value(cls, value: Union[bool, int, float, str]) -> "Atom":
        """Build an atom from a scalar, using the canonical token for its type."""
        if isinstance(value, bool):
            return cls("true" if value else "false")
        if isinstance(value, float):
            return cls(repr(value))
        return cls(str(value))

    def __str__(self) -> str:
        if self.token and not any(c in _QUOTE_CHARS for c in self.token):
            return self.token
        escaped = self.token.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'


@dataclass(frozen=True)
class SList(Sexp):
    """
    A parenthesized list, normally tagged by an operator atom in head position.

    Properties:
        items: Tuple of Sexp values
    """

    items: Tuple[Sexp, ...] = ()

    @classmethod
    def of(cls, *items: Union[Sexp, str]) -> "SList":
        """Build a list, turning plain strings into atoms."""
        return cls(tuple(Atom(i) if isinstance(i, str) else i for i in items))

    @property
    def head(self) -> Sexp | None:
        return self.items[0] if self.items else None

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.items) + ")"


__all__ = ["Sexp", "Atom", "SList"]
