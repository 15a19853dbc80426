"""Conversions between infix, prefix and postfix expression notation.

Operands are single ASCII letters or digits; operators are ``^ * / + -``.
Whitespace is ignored.
"""

from __future__ import annotations

import string
from collections.abc import Callable, Iterable, Iterator

_OPERANDS = frozenset(string.ascii_letters + string.digits)
_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_PAREN_SWAP = str.maketrans("()", ")(")


class ExpressionError(ValueError):
    """Raised for a malformed expression."""


def precedence(op: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    return _PRECEDENCE.get(op, 0)


def _tokens(expr: str) -> Iterator[str]:
    for ch in expr:
        if ch.isspace():
            continue
        if ch not in _OPERANDS and ch not in _PRECEDENCE and ch not in "()":
            raise ExpressionError(f"unexpected character {ch!r}")
        yield ch


def _shunt(tokens: Iterable[str], pops_equal: Callable[[str], bool]) -> str:
    """Turn infix tokens into postfix; ``pops_equal`` decides ties in precedence."""
    output: list[str] = []
    stack: list[str] = []
    for ch in tokens:
        if ch in _OPERANDS:
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unbalanced ')'")
            stack.pop()
        else:
            rank = precedence(ch)
            tie = pops_equal(ch)
            while stack and (
                rank < precedence(stack[-1]) or (tie and rank == precedence(stack[-1]))
            ):
                output.append(stack.pop())
            stack.append(ch)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError("unbalanced '('")
        output.append(top)
    return "".join(output)


def infix_to_postfix(expr: str) -> str:
    """Convert an infix expression to postfix; all operators associate left."""
    return _shunt(_tokens(expr), lambda op: True)


def infix_to_prefix(expr: str) -> str:
    """Convert an infix expression to prefix.

    ``^`` associates right; the other operators associate left.
    """
    mirrored = expr[::-1].translate(_PAREN_SWAP)
    return _shunt(_tokens(mirrored), lambda op: op == "^")[::-1]


def _fold(tokens: Iterable[str], combine: Callable[[str, str, str], str]) -> str:
    """Reduce operand/operator tokens with a stack.

    ``combine`` receives the operator, then the first and second operands popped.
    """
    stack: list[str] = []
    for ch in tokens:
        if ch in _OPERANDS:
            stack.append(ch)
            continue
        if ch not in _PRECEDENCE:
            raise ExpressionError(f"unexpected character {ch!r}")
        if len(stack) < 2:
            raise ExpressionError(f"operator {ch!r} lacks operands")
        first = stack.pop()
        second = stack.pop()
        stack.append(combine(ch, first, second))
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single term")
    return stack[0]


def postfix_to_infix(expr: str) -> str:
    """Convert a postfix expression to a fully parenthesised infix one."""
    return _fold(_tokens(expr), lambda op, a, b: f"({b}{op}{a})")


def postfix_to_prefix(expr: str) -> str:
    """Convert a postfix expression to prefix."""
    return _fold(_tokens(expr), lambda op, a, b: op + b + a)


def prefix_to_infix(expr: str) -> str:
    """Convert a prefix expression to a fully parenthesised infix one."""
    return _fold(_tokens(expr[::-1]), lambda op, a, b: f"({a}{op}{b})")


def prefix_to_postfix(expr: str) -> str:
    """Convert a prefix expression to postfix."""
    return _fold(_tokens(expr[::-1]), lambda op, a, b: a + b + op)