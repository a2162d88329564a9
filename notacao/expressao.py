"""Conversion between infix and postfix notation, and evaluation of both.

Infix expressions accept the binary operators ``+ - * / ^``, the prefix
square root ``R`` and parentheses.  ``s(NUM)`` and ``c(NUM)`` give the sine
and cosine of ``NUM`` degrees; they are evaluated while converting and
appear in the postfix output as numbers with six decimals.
"""

from __future__ import annotations

import math
import re
import string

_OPERATORS = "+-*/^R"
_NUMBER_CHARS = frozenset(string.digits + ".")
_LEADING_FLOAT = re.compile(
    r"\s*[+-]?(?:"
    r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan"
    r")",
    re.IGNORECASE,
)


class ExpressionError(ValueError):
    """Base class for errors raised while handling an expression."""


class ConversionError(ExpressionError):
    """Raised when an expression cannot be converted to another notation."""


class EvaluationError(ExpressionError):
    """Raised when a postfix expression cannot be evaluated."""


def precedence(op: str) -> int:
    """Return the binding strength of an operator; unknown operators get 0."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    if op in ("^", "R"):
        return 3
    if op in ("s", "c"):
        return 4
    return 0


def _leading_float(text: str) -> float:
    """Read the longest number at the start of ``text``; 0.0 if there is none."""
    match = _LEADING_FLOAT.match(text)
    if not match:
        return 0.0
    return float(match.group().strip())


def _scan_number(text: str, start: int) -> int:
    """Return the index just past the run of digits and dots starting at ``start``."""
    end = start
    while end < len(text) and text[end] in _NUMBER_CHARS:
        end += 1
    return end


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to space-separated postfix notation.

    Raises ConversionError when the parentheses do not balance.
    """
    output: list[str] = []
    stack: list[str] = []
    i = 0
    while i < len(infix):
        ch = infix[i]
        if ch.isspace():
            i += 1
            continue

        if ch in "sc" and infix[i + 1 : i + 2] == "(":
            start = i + 2
            end = _scan_number(infix, start)
            angle = math.radians(_leading_float(infix[start:end]))
            value = math.sin(angle) if ch == "s" else math.cos(angle)
            output.append(f"{value:.6f}")
            i = end + 1 if infix[end : end + 1] == ")" else end
            continue

        if ch in _NUMBER_CHARS:
            end = _scan_number(infix, i)
            output.append(infix[i:end])
            i = end
            continue

        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ConversionError("unbalanced ')' in expression")
            stack.pop()
        else:
            while stack and stack[-1] != "(" and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
        i += 1

    while stack:
        op = stack.pop()
        if op == "(":
            raise ConversionError("unbalanced '(' in expression")
        output.append(op)

    return " ".join(output)


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and int(value) % 2 == 1


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _apply(op: str, stack: list[float]) -> float:
    if op == "R":
        if not stack:
            raise EvaluationError("square root without an operand")
        a = stack.pop()
        if a < 0:
            raise EvaluationError("square root of a negative number")
        return math.sqrt(a)

    if len(stack) < 2:
        raise EvaluationError(f"operator {op!r} needs two operands")
    b = stack.pop()
    a = stack.pop()
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise EvaluationError("division by zero")
        return a / b
    return _power(a, b)


def evaluate_postfix(postfix: str) -> float:
    """Evaluate a space-separated postfix expression.

    Raises EvaluationError on missing operands, division by zero, the square
    root of a negative number, or when more than one value is left over.
    """
    stack: list[float] = []
    for token in postfix.split(" "):
        if not token:
            continue
        if len(token) == 1 and token in _OPERATORS:
            stack.append(_apply(token, stack))
        else:
            stack.append(_leading_float(token))

    if not stack:
        raise EvaluationError("empty expression")
    if len(stack) > 1:
        raise EvaluationError("operands left without an operator")
    return stack[0]


def evaluate_infix(infix: str) -> float:
    """Convert an infix expression to postfix and evaluate it."""
    return evaluate_postfix(infix_to_postfix(infix))


def postfix_to_infix(postfix: str) -> str:
    """Convert a postfix expression to fully parenthesised infix notation.

    Every operator, ``R`` included, takes two operands.  When several
    values remain at the end, the last one built is returned.
    """
    stack: list[str] = []
    for token in postfix.split(" "):
        if not token:
            continue
        if len(token) == 1 and token in _OPERATORS:
            if len(stack) < 2:
                raise ConversionError(f"operator {token!r} needs two operands")
            b = stack.pop()
            a = stack.pop()
            stack.append(f"({a} {token} {b})")
        else:
            stack.append(token)

    if not stack:
        raise ConversionError("empty expression")
    return stack[-1]