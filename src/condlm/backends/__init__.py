"""Backends for CLM output generation (S-expressions, DOT)."""

from .dot_generator import DotMode, generate_dot, save_dot_file
from .sexp_generator import condition_to_sexp, sexp_to_string, save_sexp_file

__all__ = [
    "DotMode",
    "generate_dot",
    "save_dot_file",
    "condition_to_sexp",
    "sexp_to_string",
    "save_sexp_file",
]
