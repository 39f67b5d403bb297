import pytest
from hypothesis import given
from hypothesis import strategies as st

from numinterp.context import Context, make_token
from numinterp.expressions import (
    AndExpression,
    ConstantExpression,
    DigitExpression,
    DigitsExpression,
    DotExpression,
    ExpExpression,
    ExponentExpression,
    FloatExpression,
    FractionExpression,
    InfExpression,
    MinusExpression,
    NanExpression,
    OrExpression,
    PlusExpression,
    SignedIntegerExpression,
    SignExpression,
    ZeroExpression,
)


def context_of(text):
    return Context(make_token(char) for char in text.lower())


integer_parts = st.integers(min_value=1, max_value=999).map(str)
signs = st.sampled_from(["+", "-", ""])
decimal_parts = st.one_of(
    st.just(""),
    st.text(alphabet="0123456789", min_size=1, max_size=6).map(lambda d: "." + d),
)


@given(st.sampled_from("eE"), integer_parts)
def test_random_unsigned_exponent(char, value):
    ctx = context_of(char + value)
    assert ExponentExpression().interpret(ctx) is True
    assert ctx.is_finished() is True


@given(st.sampled_from(["e+", "e-"]), integer_parts)
def test_random_signed_exponent(prefix, value):
    ctx = context_of(prefix + value)
    assert ExponentExpression().interpret(ctx) is True
    assert ctx.is_finished() is True


@pytest.mark.parametrize("text", ["e", "e+", "e-x", "ex"])
def test_exponent_without_value_restores(text):
    ctx = context_of(text)
    assert ExponentExpression().interpret(ctx) is False
    assert ctx.remaining() == len(text)


def test_exponent_needs_marker():
    ctx = context_of("12")
    assert ExponentExpression().interpret(ctx) is False
    assert ctx.remaining() == 2


@given(st.sampled_from(["+", "-"]))
def test_random_sign(sign):
    ctx = context_of(sign)
    assert SignExpression().interpret(ctx) is True
    assert ctx.is_finished() is True


@given(integer_parts)
def test_random_not_sign_integer(value):
    assert SignExpression().interpret(context_of(value)) is False


@given(decimal_parts)
def test_random_not_sign_decimal(value):
    assert SignExpression().interpret(context_of(value)) is False


def test_plus_and_minus():
    assert PlusExpression().interpret(context_of("+")) is True
    assert PlusExpression().interpret(context_of("-")) is False
    assert MinusExpression().interpret(context_of("-")) is True
    assert MinusExpression().interpret(context_of("+")) is False
    assert PlusExpression().interpret(context_of("")) is False


@given(signs, integer_parts)
def test_random_signed_integer(sign, integer):
    ctx = context_of(sign + integer)
    assert SignedIntegerExpression().interpret(ctx) is True
    assert ctx.is_finished() is True


@given(integer_parts)
def test_random_unsigned_integer(integer):
    ctx = context_of(integer)
    assert SignedIntegerExpression().interpret(ctx) is True
    assert ctx.is_finished() is True


@pytest.mark.parametrize("text", ["+", "-", "+a", "x1"])
def test_signed_integer_failure_restores(text):
    ctx = context_of(text)
    assert SignedIntegerExpression().interpret(ctx) is False
    assert ctx.remaining() == len(text)


def test_signed_integer_leading_zero_stops_after_zero():
    ctx = context_of("0123")
    assert SignedIntegerExpression().interpret(ctx) is True
    assert ctx.remaining() == 3


def test_zero_expression():
    assert ZeroExpression().interpret(context_of("0")) is True
    assert ZeroExpression().interpret(context_of("1")) is False


@pytest.mark.parametrize("char", list("0123456789"))
def test_digit_matches_each_digit(char):
    ctx = context_of(char)
    assert DigitExpression().interpret(ctx) is True
    assert ctx.is_finished() is True


@pytest.mark.parametrize("char", ["a", ".", "+", "e"])
def test_digit_rejects_non_digits(char):
    ctx = context_of(char)
    assert DigitExpression().interpret(ctx) is False
    assert ctx.remaining() == 1


def test_digits_are_greedy():
    ctx = context_of("123a")
    assert DigitsExpression().interpret(ctx) is True
    assert ctx.remaining() == 1


def test_digits_need_one_digit():
    assert DigitsExpression().interpret(context_of("a1")) is False
    assert DigitsExpression().interpret(context_of("")) is False


def test_terminal_markers():
    assert DotExpression().interpret(context_of(".")) is True
    assert DotExpression().interpret(context_of(",")) is False
    assert ExpExpression().interpret(context_of("E")) is True
    assert ExpExpression().interpret(context_of("x")) is False


def test_fraction():
    ctx = context_of(".25x")
    assert FractionExpression().interpret(ctx) is True
    assert ctx.remaining() == 1


def test_fraction_without_digits_restores():
    ctx = context_of(".x")
    assert FractionExpression().interpret(ctx) is False
    assert ctx.remaining() == 2


@given(signs, integer_parts, decimal_parts)
def test_float_consumes_whole_decimal(sign, integer, decimal):
    ctx = context_of(sign + integer + decimal)
    assert FloatExpression().interpret(ctx) is True
    assert ctx.is_finished() is True


@pytest.mark.parametrize("text", ["1.5e3", "-0.25E-7", "+42e+1", "7"])
def test_float_full_forms(text):
    ctx = context_of(text)
    assert FloatExpression().interpret(ctx) is True
    assert ctx.is_finished() is True


def test_float_leaves_dangling_parts():
    ctx = context_of("1.e")
    assert FloatExpression().interpret(ctx) is True
    assert ctx.remaining() == 2


def test_float_needs_integer_part():
    ctx = context_of(".5")
    assert FloatExpression().interpret(ctx) is False
    assert ctx.remaining() == 2


@pytest.mark.parametrize("text", ["inf", "+inf", "-inf", "nan", "+nan", "-nan", "INF"])
def test_constant_matches(text):
    ctx = context_of(text)
    assert ConstantExpression().interpret(ctx) is True
    assert ctx.is_finished() is True


@pytest.mark.parametrize("text", ["-in", "+x", "na", "infinity"[:2], "1"])
def test_constant_failure_restores(text):
    ctx = context_of(text)
    assert ConstantExpression().interpret(ctx) is False
    assert ctx.remaining() == len(text)


def test_inf_and_nan_terminals():
    assert InfExpression().interpret(context_of("inf")) is True
    assert InfExpression().interpret(context_of("nan")) is False
    assert NanExpression().interpret(context_of("nan")) is True
    assert NanExpression().interpret(context_of("in")) is False


def test_and_expression_matches_both():
    ctx = context_of("+1")
    assert AndExpression(PlusExpression(), DigitExpression()).interpret(ctx) is True
    assert ctx.is_finished() is True


def test_and_expression_restores_on_failure():
    ctx = context_of("+a")
    assert AndExpression(PlusExpression(), DigitExpression()).interpret(ctx) is False
    assert ctx.remaining() == 2


def test_or_expression_picks_either():
    either = OrExpression(InfExpression(), NanExpression())
    assert either.interpret(context_of("inf")) is True
    assert either.interpret(context_of("nan")) is True
    assert either.interpret(context_of("abc")) is False