import pytest

from lcdcalc.utils import is_digit, is_number, precedence, wrap


def test_precedence_levels_from_source():
    assert precedence("+") == 1
    assert precedence("-") == 1
    assert precedence("*") == 2
    assert precedence("/") == 2
    assert precedence("%") == 2
    assert precedence("^") == 3
    assert precedence("_") == 3
    assert precedence("!") == 4
    assert precedence("--") == 4


@pytest.mark.parametrize("op", ["f0", "f5", "f9"])
def test_functions_bind_like_unary_minus(op):
    assert precedence(op) == precedence("--")


@pytest.mark.parametrize("op", ["(", ")", "f", "fx", "f10", "x", ""])
def test_unknown_tokens_have_no_precedence(op):
    assert precedence(op) == 0


def test_precedence_ordering():
    assert precedence("+") < precedence("*") < precedence("^") < precedence("!")


@pytest.mark.parametrize("ch", list("0123456789pera"))
def test_is_digit_accepts_digits_and_constants(ch):
    assert is_digit(ch) is True


@pytest.mark.parametrize("ch", list("x+-.f()") + [""])
def test_is_digit_rejects_other_characters(ch):
    assert is_digit(ch) is False


@pytest.mark.parametrize("text", ["12", "-1.5", ".5", "5.", "0", "-0.25", "."])
def test_is_number_accepts(text):
    assert is_number(text) is True


@pytest.mark.parametrize(
    "text", ["", "-", "1.2.3", "1e5", "--1", "1-2", "!E7", " 1", "+1"]
)
def test_is_number_rejects(text):
    assert is_number(text) is False


def test_wrap_leaves_short_text_alone():
    assert wrap("1+2") == "1+2"
    assert wrap("x" * 16) == "x" * 16


def test_wrap_keeps_the_tail_of_long_text():
    text = "0123" + "y" * 16
    assert wrap(text) == "y" * 16


def test_wrap_length_is_bounded():
    for size in range(0, 40):
        result = wrap("z" * size)
        assert len(result) == min(size, 16)