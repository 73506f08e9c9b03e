#!/usr/bin/env python3
"""
Demo: Evaluate example conditions and print their S-expression and DOT forms.
"""

from condlm.backends import DotMode, generate_dot, sexp_to_string
from condlm.errors import ExpressionError
from condlm.evaluator import evaluate_condition
from condlm.examples import build_range_check, build_ratio_guard


def main():
    conditions = {
        "range check": build_range_check(slot=0),
        "ratio guard": build_ratio_guard(numerator=0, denominator=1),
    }
    bindings = [[3.0, 4.0], [-8.0, 2.0], [7.0, 0.0], [1.0]]

    print("=" * 80)
    print("CONDITION DEMO")
    print("=" * 80)

    for name, cond in conditions.items():
        print(f"\n{name.upper()}: {sexp_to_string(cond)}")
        print("-" * 80)
        for binding in bindings:
            try:
                result = evaluate_condition(cond, binding)
            except ExpressionError as e:
                result = f"error: {e.kind.value}"
            print(f"  {binding!s:<14} -> {result}")

    print("\n" + "=" * 80)
    print(generate_dot(conditions["range check"], mode=DotMode.DETAILED))
    print("=" * 80)


if __name__ == "__main__":
    main()
