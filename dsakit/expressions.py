"""Bracket matching and infix-to-postfix conversion."""

from __future__ import annotations

from enum import Enum

_OPENING = {"(": ")", "[": "]", "{": "}"}
_CLOSING = set(_OPENING.values())
_OPERATORS = set("+-*/^")


class BracketCheck(Enum):
    """Outcome of checking the brackets in an expression."""

    VALID = "Bracket is well balanced"
    UNMATCHED_CLOSING = "Right brackets are more than left brackets"
    MISMATCHED = "Mismatched brackets"
    UNCLOSED = "Brackets are not balanced"


def check_brackets(expression: str) -> BracketCheck:
    """Classify how the (), [] and {} brackets in ``expression`` pair up."""
    stack: list[str] = []
    for ch in expression:
        if ch in _OPENING:
            stack.append(ch)
        elif ch in _CLOSING:
            if not stack:
                return BracketCheck.UNMATCHED_CLOSING
            if _OPENING[stack.pop()] != ch:
                return BracketCheck.MISMATCHED
    return BracketCheck.VALID if not stack else BracketCheck.UNCLOSED


def is_balanced(expression: str) -> bool:
    """Return True if every bracket in ``expression`` is properly matched."""
    return check_brackets(expression) is BracketCheck.VALID


def precedence(symbol: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    if symbol == "^":
        return 3
    if symbol in ("*", "/"):
        return 2
    if symbol in ("+", "-"):
        return 1
    return 0


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix.

    Operators of equal precedence, ``^`` included, associate to the left.
    Whitespace is dropped. Unbalanced parentheses raise ValueError.
    """
    stack: list[str] = []
    output: list[str] = []
    for symbol in expression:
        if symbol.isspace():
            continue
        if symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        elif symbol in _OPERATORS:
            while stack and precedence(stack[-1]) >= precedence(symbol):
                output.append(stack.pop())
            stack.append(symbol)
        else:
            output.append(symbol)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '(' in expression")
        output.append(top)
    return "".join(output)