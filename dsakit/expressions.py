"""Conversion of infix expressions to postfix notation."""

from __future__ import annotations

__all__ = ["precedence", "infix_to_postfix"]

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``; 0 for anything unknown."""
    return _PRECEDENCE.get(operator, 0)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Letters and digits are operands; every other non-blank character is an
    operator.  Operators of equal precedence, ``^`` included, associate to
    the left.  Raises ``ValueError`` on unbalanced parentheses.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if char.isalnum():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise ValueError("unmatched '(' in expression")
        output.append(operator)
    return "".join(output)