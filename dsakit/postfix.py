"""Conversion of infix expressions with + - * / into postfix form."""

from __future__ import annotations

import argparse
import sys

_PRECEDENCE = {"*": 3, "/": 3, "+": 2, "-": 2}


def precedence(ch: str) -> int:
    """Return the binding strength of ``ch``; 0 for anything not an operator."""
    return _PRECEDENCE.get(ch, 0)


def is_operator(ch: str) -> bool:
    """Return True when ``ch`` is one of + - * /."""
    return ch in _PRECEDENCE


def infix_to_postfix(infix: str) -> str:
    """Return ``infix`` rewritten in postfix order.

    Every character that is not an operator is copied through as an operand.
    """
    output: list[str] = []
    operators: list[str] = []
    chars = iter(infix)
    pending = next(chars, None)
    while pending is not None:
        if not is_operator(pending):
            output.append(pending)
            pending = next(chars, None)
        elif not operators or precedence(pending) > precedence(operators[-1]):
            operators.append(pending)
            pending = next(chars, None)
        else:
            output.append(operators.pop())
    output.extend(reversed(operators))
    return "".join(output)


def main(argv: list[str] | None = None) -> int:
    """Print the postfix form of an infix expression."""
    parser = argparse.ArgumentParser(description="Convert infix to postfix.")
    parser.add_argument(
        "expression", nargs="?", default="a-b+t/6", help="infix expression"
    )
    args = parser.parse_args(argv)
    print(f"Postfix is: {infix_to_postfix(args.expression)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())