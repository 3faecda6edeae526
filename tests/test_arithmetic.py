import math

import pytest

from interpreter.parser import ParseError
from interpreter.runtime import Evaluation, MathError, evaluate
from interpreter.tokenizer import Token, TokenType, tokenize
from interpreter.value import NumericValue


@pytest.mark.parametrize(
    "code, expected_value, expected_is_int",
    [
        pytest.param("1", 1.0, True),
        pytest.param("-1", -1.0, True),
        pytest.param("1+2", 3.0, True),
        pytest.param("(1+2)", 3.0, True),
        pytest.param("-(1+2)", -3.0, True),
        pytest.param("(((1)))", 1.0, True),
        pytest.param("1 * 4 + 5", 9.0, True),
        pytest.param("1 + 4 * 5", 21.0, True),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0, True),
        pytest.param("-3+4", 1.0, True),
        pytest.param("3-4", -1.0, True),
        pytest.param("(1)-2", -1.0, True),
        pytest.param("10 - 2 - 3", 5.0, True),
        # integer division floors, float division does not
        pytest.param("5/2", 2.0, True),
        pytest.param("5.0/2", 2.5, False),
        pytest.param("5/2.0", 2.5, False),
        pytest.param("10 / 5 / 2 / 2", 0.0, True),
        pytest.param("7/(0-2)", -4.0, True),
        # remainder keeps the sign of the dividend
        pytest.param("7%3", 1.0, True),
        pytest.param("(0-7)%3", -1.0, True),
        pytest.param("7.5 % 2", 1.5, False),
        # power is left-associative
        pytest.param("2^10", 1024.0, True),
        pytest.param("2^3^2", 64.0, True),
        pytest.param("4^0.5", 2.0, False),
        pytest.param("2 * 3 ^ 2", 18.0, True),
        # unary minus takes the whole term that follows it
        pytest.param("-2^2", -4.0, True),
        pytest.param("-5/2", -2.0, True),
        pytest.param("-2*3+1", -5.0, True),
        pytest.param("2*-3+1", -4.0, True),
        pytest.param("--1", 1.0, True),
        # scientific notation flag comes from the result
        pytest.param("1E3", 1000.0, True),
        pytest.param("2.5E2", 250.0, True),
        pytest.param("1E0", 1.0, True),
        pytest.param("1E3/7", 142.0, True),
        # trig results are never integers
        pytest.param("sin(0)", 0.0, False),
        pytest.param("cos(0)", 1.0, False),
        pytest.param("tan(0)", 0.0, False),
        pytest.param("cos(0) * 2", 2.0, False),
        pytest.param("cos(0) * 7 / 2", 3.5, False),
        pytest.param("sin(1+1-2)", 0.0, False),
        # decimals are never integers
        pytest.param("3.000", 3.0, False),
        pytest.param("3.0 + 1", 4.0, False),
    ],
)
def test_eval_arithmetic(code: str, expected_value: float, expected_is_int: bool) -> None:
    remaining, value, is_int = evaluate(tokenize(code))
    assert remaining == []
    assert value == expected_value
    assert is_int is expected_is_int


@pytest.mark.parametrize(
    "code, expected_value",
    [
        pytest.param("12.340", 12.34),
        pytest.param("1.05", 1.05),
        pytest.param("0.047", 0.047),
        pytest.param("1.0470", 1.047),
        pytest.param("15E-1", 1.5),
        pytest.param("1E-2", 0.01),
        pytest.param("sin(1)", math.sin(1)),
        pytest.param("tan(0.5)", math.tan(0.5)),
        pytest.param("1.5 * 1.5", 2.25),
    ],
)
def test_eval_float(code: str, expected_value: float) -> None:
    result = evaluate(tokenize(code))
    assert result.value == pytest.approx(expected_value)
    assert result.is_integer is False


def test_scientific_suffix_swallows_additive_tail_of_negative_exponent() -> None:
    # the unary minus after E takes "2+1" as its operand
    assert evaluate(tokenize("1E-2+1")).value == pytest.approx(0.1)


@pytest.mark.parametrize(
    "code",
    [
        pytest.param("1/0"),
        pytest.param("1/(2-2)"),
        pytest.param("1.5/0.0"),
        pytest.param("sin(1)/0"),
        pytest.param("(1/0) + 1"),
    ],
)
def test_division_by_zero(code: str) -> None:
    with pytest.raises(MathError) as exc_info:
        evaluate(tokenize(code))
    assert str(exc_info.value) == "Maths error: Division by zero"


@pytest.mark.parametrize(
    "code, expected_value",
    [
        pytest.param("1E400", math.inf),
        pytest.param("9E308", math.inf),
        pytest.param("10^400", math.inf),
        pytest.param("9^9^9^9", math.inf),
        pytest.param("(0-10)^400", math.inf),
        pytest.param("(0-10)^401", -math.inf),
        pytest.param("0.5^(0-2000)", math.inf),
        pytest.param("-1E400", -math.inf),
    ],
)
def test_overflow_is_infinite(code: str, expected_value: float) -> None:
    assert evaluate(tokenize(code)).value == expected_value


def test_infinite_standard_form_is_not_integer() -> None:
    assert evaluate(tokenize("1E400")).is_integer is False


@pytest.mark.parametrize(
    "code, expected_value",
    [
        pytest.param("9" * 308, float(int("9" * 308))),
        pytest.param("1." + "5" * 308, 1 + 5 / 9),
        pytest.param("0." + "0" * 307 + "1", 1e-308),
    ],
)
def test_longest_numbers(code: str, expected_value: float) -> None:
    assert evaluate(tokenize(code)).value == pytest.approx(expected_value, rel=1e-9, abs=0)


@pytest.mark.parametrize("code", ["5%0", "5.5%0", "(0-8)^0.5"])
def test_nan_results(code: str) -> None:
    assert math.isnan(evaluate(tokenize(code)).value)


def test_zero_to_negative_power() -> None:
    assert evaluate(tokenize("0^(0-1)")).value == math.inf


@pytest.mark.parametrize(
    "code, errmsg",
    [
        pytest.param("(2+3", "Missing right bracket"),
        pytest.param("sin(1", "Missing right bracket for sin"),
        pytest.param("cos(1", "Missing right bracket for cos"),
        pytest.param("tan(1", "Missing right bracket for tan"),
        pytest.param("2.", "Missing value after decimal point"),
        pytest.param("*2", "Unknown syntax error, unexpected MUL"),
        pytest.param("", "Unexpected end of expression"),
        pytest.param("-", "Unexpected end of expression"),
    ],
)
def test_eval_syntax_error(code: str, errmsg: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        evaluate(tokenize(code))
    assert exc_info.value.errmsg == errmsg


def test_eval_leaves_unconsumed_tokens() -> None:
    result = evaluate(tokenize("2 3"))
    assert result == Evaluation(remaining=[Token(TokenType.NUMBER, 3)], value=2.0, is_integer=True)


def test_eval_is_repeatable() -> None:
    tokens = tokenize("(1 + 2.5) * sin(3) / 4")
    assert evaluate(tokens) == evaluate(tokens)


@pytest.mark.parametrize(
    "value, expected_str",
    [
        pytest.param(NumericValue.integer(2), "2"),
        pytest.param(NumericValue.integer(-7), "-7"),
        pytest.param(NumericValue.floating(2), "2.0"),
        pytest.param(NumericValue.floating(2.5), "2.5"),
    ],
)
def test_numeric_value_str(value: NumericValue, expected_str: str) -> None:
    assert str(value) == expected_str


@pytest.mark.parametrize(
    "code, expected_str",
    [
        pytest.param("5/2", "2"),
        pytest.param("5.0/2", "2.5"),
        pytest.param("sin(0)", "0.0"),
        pytest.param("2.5E2", "250"),
        pytest.param("1E400", "inf"),
    ],
)
def test_evaluation_as_value(code: str, expected_str: str) -> None:
    assert str(evaluate(tokenize(code)).as_value()) == expected_str
