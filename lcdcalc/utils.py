"""Small helpers shared by the expression parser and the display code."""

import re

_DIGITS = frozenset("0123456789")
_DIGIT_LIKE = _DIGITS | frozenset("pera")
_FUNCTION = re.compile(r"f[0-9]")

_PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "%": 2,
    "^": 3,
    "_": 3,
    "!": 4,
    "--": 4,
}

DISPLAY_WIDTH = 16


def precedence(op):
    """Return the binding strength of an operator or unary function token."""
    if _FUNCTION.fullmatch(op):
        return 4
    return _PRECEDENCE.get(op, 0)


def is_digit(ch):
    """Tell whether a character is a digit or a symbol that stands for a number."""
    return ch in _DIGIT_LIKE


def is_number(expression):
    """Tell whether a string is an optionally negative decimal number."""
    body = expression[1:] if expression.startswith("-") else expression
    return (
        bool(body)
        and body.count(".") <= 1
        and all(c in _DIGITS or c == "." for c in body)
    )


def wrap(text):
    """Keep only the last characters of text that fit on one display line."""
    return text[-DISPLAY_WIDTH:]