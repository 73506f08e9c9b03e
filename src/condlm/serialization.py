"""
Serialization helpers for CLM conditions.

Exports a condition as plain data (nested lists of strings), JSON or YAML.
The data shape mirrors the S-expression projection one-to-one:

    (and true (> (var 0) 0))  ->  ["and", "true", [">", ["var", "0"], "0"]]

Export only. Reading conditions back is deliberately not provided.
"""
from __future__ import annotations

import json
from typing import Any, List, Union

import yaml

from condlm.backends.sexp_generator import condition_to_sexp
from condlm.conditions import Condition
from condlm.sexp import Atom, SList, Sexp


def sexp_to_data(sexp: Sexp) -> Union[str, List[Any]]:
    """Turn atoms into strings and lists into Python lists."""
    if isinstance(sexp, Atom):
        return sexp.token
    if isinstance(sexp, SList):
        return [sexp_to_data(item) for item in sexp.items]
    raise TypeError(f"Unsupported Sexp type: {type(sexp)}")


def condition_to_data(condition: Condition) -> Union[str, List[Any]]:
    """Export a condition as nested lists of tokens."""
    return sexp_to_data(condition_to_sexp(condition))


def condition_to_json(condition: Condition) -> str:
    """Export a condition as a JSON array."""
    return json.dumps(condition_to_data(condition))


def condition_to_yaml(condition: Condition) -> str:
    """Export a condition as a YAML sequence."""
    return yaml.safe_dump(condition_to_data(condition))
