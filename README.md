# lcdcalc

This is the expression engine of a small scientific calculator whose display
holds 16 characters. You write an expression in the calculator's compact key
notation. The engine splits it into tokens, reorders the tokens into suffix
(postfix) notation and evaluates the result.

## Installation

```
pip install .
```

## Usage

```python
from lcdcalc.parser import calculate

calculate("2+3*4")        # "14.00"
calculate("f7(--5)")      # abs of a doubly negated 5: "5.00"
calculate("a*2", "21")    # uses the previous answer: "42.00"
calculate("1/0")          # "!E7"
```

`calculate(expression, answer="")` returns a string:

- A result is formatted with two decimals.
- An empty expression gives an empty string.
- An expression that cannot be worked out gives an error code in the form the display shows, such as `"!T2"` or `"!E7"`.

### Notation

Spaces in an expression are ignored.

| Key        | Meaning                                              |
|------------|------------------------------------------------------|
| `0-9 .`    | number                                               |
| `+ - * /`  | arithmetic                                           |
| `%`        | modulo                                               |
| `^`        | power                                                |
| `_`        | root: `3_8` is the cube root of 8                    |
| `!`        | factorial (integers 0 to 100)                        |
| `( )`      | grouping                                             |
| `p`, `e`   | pi and Euler's number, rounded to two decimals       |
| `r`        | random value from 0.000 to 0.999, rounded to two decimals |
| `a`        | previous answer, or 0 if it is not a number          |
| `f0`..`f9` | sgn, sin, cos, tan, ln, log2, log10, abs, floor, ceil |

A `-` is a unary minus when it does not follow a number. That covers a `-` at
the start of the expression and one after `(`, `)` or an operator.

### Error codes

| Code  | Meaning                                        |
|-------|------------------------------------------------|
| `!T1` | malformed number                               |
| `!T2` | unknown token                                  |
| `!T3` | unbalanced parentheses                         |
| `!E4` | factorial error                                |
| `!E5` | missing operand for a unary operation          |
| `!E6` | missing operands for a binary operation        |
| `!E7` | division by zero, including modulo and a zeroth root |
| `!E8` | the expression does not reduce to a single value |

### Lower-level API

`lcdcalc.parser` also exposes each stage on its own:

- `tokenize(expression, answer="")` returns a list of token strings.
- `convert(tokens)` returns the tokens in postfix order. It reads at most `MAX_TOKENS` (32) tokens.
- `evaluate(suffix)` returns the result formatted with two decimals.

On failure these stages raise `TokenizeError` or `EvaluationError`. Both are
subclasses of `CalculatorError`. The exception carries the numeric `code`, and
its `symbol` property gives the display form, such as `"!T1"`.

`lcdcalc.utils` provides these helpers:

- `precedence` gives the binding strength of an operator.
- `is_digit` tells whether a character is a digit or one of `p`, `e`, `r`, `a`.
- `is_number` tells whether a string is an optionally negative decimal.
- `wrap` keeps the last 16 characters of a text so that it fits on the display.

## What it does not do

The package has no keypad handling, no display driver and no interactive
program. It only turns an expression string into a result string.

## Running the tests

```
pip install .[test]
pytest
```