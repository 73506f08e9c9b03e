"""
Graphviz DOT diagram generator for CLM conditions.

Converts a Condition tree into Graphviz DOT format for debugging.

Supports two modes:
    - SIMPLE: Operator tokens only
    - DETAILED: Comparison nodes also show both operand expressions
"""

import itertools
import logging
from enum import Enum
from typing import Iterator, List

from condlm.conditions import (
    BooleanLiteral,
    Comparison,
    Condition,
    Connective,
    Not,
)
from condlm.expressions import expression_to_sexp


logger = logging.getLogger(__name__)


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"          # Just operators
    DETAILED = "detailed"      # Include comparison operands


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    # Escape backslashes first
    s = s.replace('\\', '\\\\')
    # Escape quotes
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _node_label(condition: Condition, mode: DotMode) -> str:
    if isinstance(condition, BooleanLiteral):
        return "true" if condition.value else "false"
    if isinstance(condition, Not):
        return "not"
    if isinstance(condition, Connective):
        return condition.operator.value
    if isinstance(condition, Comparison):
        if mode == DotMode.DETAILED:
            left = str(expression_to_sexp(condition.left))
            right = str(expression_to_sexp(condition.right))
            return f"{left} {condition.operator.value} {right}"
        return condition.operator.value
    raise TypeError(f"Unsupported Condition type: {type(condition)}")


def _children(condition: Condition) -> List[Condition]:
    if isinstance(condition, Not):
        return [condition.operand]
    if isinstance(condition, Connective):
        return [condition.left, condition.right]
    return []


def _emit(condition: Condition, node_id: str, ids: Iterator[int],
          mode: DotMode, lines: List[str]) -> None:
    """Append the node and, depth-first, its subtree."""
    label = _escape_dot_string(_node_label(condition, mode))
    if isinstance(condition, BooleanLiteral):
        lines.append(f'  {node_id} [shape=ellipse, fillcolor=lightgreen, label={label}];')
    elif isinstance(condition, Comparison):
        lines.append(f'  {node_id} [fillcolor=lightyellow, label={label}];')
    else:
        lines.append(f'  {node_id} [label={label}];')

    for child in _children(condition):
        child_id = f"n{next(ids)}"
        lines.append(f"  {node_id} -> {child_id};")
        _emit(child, child_id, ids, mode, lines)


def generate_dot(condition: Condition, mode: DotMode = DotMode.SIMPLE) -> str:
    """
    Generate Graphviz DOT format for a condition.

    Args:
        condition: Condition tree to visualize
        mode: Visualization mode (SIMPLE, DETAILED)

    Returns:
        String containing DOT graph definition
    """
    lines = []

    # Header
    lines.append("digraph condition {")
    lines.append("  rankdir=TB;")
    lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")

    ids = itertools.count(1)
    _emit(condition, "n0", ids, mode, lines)

    # Footer
    lines.append("}")

    return "\n".join(lines)


def save_dot_file(condition: Condition, filename: str, mode: DotMode = DotMode.SIMPLE) -> None:
    """
    Generate DOT and save to file.

    Args:
        condition: Condition to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
    """
    dot = generate_dot(condition, mode=mode)
    with open(filename, 'w') as f:
        f.write(dot)
    logger.debug("Wrote DOT graph (%s mode) to %s", mode.value, filename)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]
