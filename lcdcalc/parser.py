"""Tokenising, infix-to-postfix conversion and evaluation of calculator input."""

import math
import operator
import random
import re

from .utils import is_number, precedence

MAX_TOKENS = 32

_NUMBER = re.compile(r"[0-9.]+")
_FUNCTION = re.compile(r"f[0-9]")
_DIGITS = frozenset("0123456789")
_NUMBER_START = _DIGITS | {"."}
_BINARY_SYMBOLS = frozenset("+-*/^_%!")


class CalculatorError(Exception):
    """Failure while processing an expression; carries a numeric code."""

    prefix = ""
    messages: dict = {}

    def __init__(self, code):
        self.code = code
        super().__init__(self.messages.get(code, f"error {code}"))

    @property
    def symbol(self):
        """The short form shown on the display, such as ``!T1``."""
        return f"!{self.prefix}{self.code}"


class TokenizeError(CalculatorError):
    """The expression could not be split into tokens."""

    prefix = "T"
    messages = {
        1: "malformed number",
        2: "unknown token",
        3: "unbalanced parentheses",
    }


class EvaluationError(CalculatorError):
    """The postfix expression could not be evaluated."""

    prefix = "E"
    messages = {
        4: "invalid factorial",
        5: "missing operand for unary operation",
        6: "missing operands for binary operation",
        7: "division by zero",
        8: "expression does not reduce to a single value",
    }


def _format(value):
    return f"{value:.2f}"


def _starts_number(token):
    return token[:1] in _NUMBER_START


def _is_unary(token):
    return token == "--" or bool(_FUNCTION.fullmatch(token))


def tokenize(expression, answer=""):
    """Split an expression into tokens.

    Spaces are ignored. ``p``, ``e`` and ``r`` become pi, e and a random
    number, ``a`` becomes the previous answer, ``f0``..``f9`` are functions
    and a minus that cannot be binary becomes ``--``.
    """
    text = expression.replace(" ", "")
    tokens = []
    depth = 0
    pos = 0
    while pos < len(text):
        number = _NUMBER.match(text, pos)
        if number:
            literal = number.group()
            if literal.count(".") > 1 or literal.endswith("."):
                raise TokenizeError(1)
            tokens.append(literal)
            pos = number.end()
            continue

        ch = text[pos]
        pos += 1
        if ch == "f" and pos < len(text) and text[pos] in _DIGITS:
            tokens.append("f" + text[pos])
            pos += 1
        elif ch == "p":
            tokens.append(_format(math.pi))
        elif ch == "e":
            tokens.append(_format(math.e))
        elif ch == "r":
            tokens.append(_format(random.randrange(1000) / 1000))
        elif ch == "a":
            tokens.append(answer if is_number(answer) else "0")
        elif ch == "(":
            tokens.append(ch)
            depth += 1
        elif ch == ")":
            tokens.append(ch)
            depth -= 1
        elif ch == "-" and (not tokens or not _starts_number(tokens[-1])):
            tokens.append("--")
        elif ch in _BINARY_SYMBOLS:
            tokens.append(ch)
        else:
            raise TokenizeError(2)

    if depth != 0:
        raise TokenizeError(3)
    return tokens


def convert(tokens):
    """Reorder infix tokens into postfix order; at most MAX_TOKENS are read."""
    suffix = []
    operators = []
    for token in list(tokens)[:MAX_TOKENS]:
        if not token:
            break
        if _starts_number(token) or token == "!":
            suffix.append(token)
        elif token == "(":
            operators.append(token)
        elif token == ")":
            while operators and operators[-1] != "(":
                suffix.append(operators.pop())
            if operators:
                operators.pop()
        else:
            strength = precedence(token)
            right_assoc = _is_unary(token)
            while operators and (
                strength < precedence(operators[-1])
                if right_assoc
                else strength <= precedence(operators[-1])
            ):
                suffix.append(operators.pop())
            operators.append(token)

    suffix.extend(reversed(operators))
    return suffix


def _guarded(func):
    def apply(x):
        try:
            return func(x)
        except (ValueError, OverflowError):
            return math.nan

    return apply


def _ln(x):
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log(x)


def _log10(x):
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log10(x)


def _rounder(func):
    def apply(x):
        if not math.isfinite(x):
            return x
        return float(func(x))

    return apply


def _sign(x):
    return 0.0 if x == 0 else x / abs(x)


_UNARY = {
    "--": operator.neg,
    "f0": _sign,
    "f1": _guarded(math.sin),
    "f2": _guarded(math.cos),
    "f3": _guarded(math.tan),
    "f4": _ln,
    "f5": lambda x: _ln(x) / math.log(2),
    "f6": _log10,
    "f7": abs,
    "f8": _rounder(math.floor),
    "f9": _rounder(math.ceil),
}


def _is_odd_integer(y):
    return math.isfinite(y) and y.is_integer() and y % 2 == 1


def _pow(x, y):
    try:
        return math.pow(x, y)
    except OverflowError:
        return -math.inf if x < 0 and _is_odd_integer(y) else math.inf
    except ValueError:
        if x == 0 and y < 0:
            return math.copysign(math.inf, x) if _is_odd_integer(y) else math.inf
        return math.nan


def _divide(x, y):
    if y == 0:
        raise EvaluationError(7)
    return x / y


def _modulo(x, y):
    if y == 0:
        raise EvaluationError(7)
    try:
        return math.fmod(x, y)
    except ValueError:
        return math.nan


def _root(x, y):
    if x == 0:
        raise EvaluationError(7)
    return _pow(y, 1.0 / x)


_BINARY = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "%": _modulo,
    "^": _pow,
    "_": _root,
}


def _factorial(x):
    if not x.is_integer() or x < 0 or x > 100:
        raise EvaluationError(4)
    return float(math.factorial(int(x)))


def evaluate(suffix):
    """Evaluate postfix tokens and return the result with two decimals."""
    stack = []
    for token in suffix:
        if _starts_number(token):
            stack.append(float(token))
        elif token == "!":
            if not stack:
                raise EvaluationError(4)
            stack.append(_factorial(stack.pop()))
        elif _is_unary(token):
            if not stack:
                raise EvaluationError(5)
            stack.append(_UNARY[token](stack.pop()))
        else:
            if len(stack) < 2:
                raise EvaluationError(6)
            y = stack.pop()
            x = stack.pop()
            action = _BINARY.get(token)
            stack.append(action(x, y) if action else x)

    if len(stack) != 1:
        raise EvaluationError(8)
    return _format(stack[0])


def calculate(expression, answer=""):
    """Compute an expression, returning the result or an error symbol."""
    if expression == "":
        return ""
    try:
        return evaluate(convert(tokenize(expression, answer)))
    except CalculatorError as error:
        return error.symbol