import logging
import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence

from interpreter.builtins import BUILTIN_FUNCS
from interpreter.grammar import GrammarWalker
from interpreter.tokenizer import Token, TokenType
from interpreter.utils import double_is_int, ints_to_double
from interpreter.value import BinaryOperationImpl, NumericValue, UnaryOperationImpl

logger = logging.getLogger(__name__)


@dataclass
class MathError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"Maths error: {self.errmsg}"


class Evaluation(NamedTuple):
    remaining: list[Token]
    value: float
    is_integer: bool

    def as_value(self) -> NumericValue:
        return NumericValue(self.value, self.is_integer)


def evaluate(tokens: Sequence[Token]) -> Evaluation:
    result, i = Evaluator(tokens).walk()
    logger.debug("Evaluated to %s (integer: %s), %d tokens left", result.v, result.is_int, len(tokens) - i)
    return Evaluation(remaining=list(tokens[i:]), value=result.v, is_integer=result.is_int)


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        # IEEE infinity; negative only for an odd integer power of a negative base
        odd_power = exponent.is_integer() and exponent % 2 == 1
        return math.copysign(math.inf, base if odd_power else 1.0)
    except ValueError:
        # no real result, or zero to a negative power
        return math.inf if base == 0.0 else math.nan


def _remainder(a: float, b: float) -> float:
    # unguarded: remainder by zero is NaN, as with C-style fmod on IEEE floats
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _divide(a: NumericValue, b: NumericValue) -> NumericValue:
    if b.v == 0.0:
        raise MathError("Division by zero")
    quotient = a.v / b.v
    if a.is_int and b.is_int:
        return NumericValue.integer(math.floor(quotient) if math.isfinite(quotient) else quotient)
    return NumericValue.floating(quotient)


BINARY_IMPLS: dict[TokenType, BinaryOperationImpl] = {
    TokenType.ADD: lambda a, b: NumericValue(a.v + b.v, a.is_int and b.is_int),
    TokenType.SUB: lambda a, b: NumericValue(a.v - b.v, a.is_int and b.is_int),
    TokenType.MUL: lambda a, b: NumericValue(a.v * b.v, a.is_int and b.is_int),
    TokenType.DIV: _divide,
    TokenType.MOD: lambda a, b: NumericValue(_remainder(a.v, b.v), a.is_int and b.is_int),
    TokenType.EXP: lambda a, b: NumericValue(_power(a.v, b.v), a.is_int and b.is_int),
}

negate: UnaryOperationImpl = lambda a: NumericValue(-a.v, a.is_int)  # type: ignore


class Evaluator(GrammarWalker[NumericValue]):
    def unary_minus(self, i: int) -> tuple[NumericValue, int]:
        # the negation takes a whole term and then carries on with the
        # additive tail: -2^2 is -4 and 2*-3+1 is 2*(-(3)+1)
        operand, i = self.term(i)
        return self.expression_tail(negate(operand), i)

    def integer(self, value: int) -> NumericValue:
        return NumericValue.integer(value)

    def decimal(self, value: int, fraction: int) -> NumericValue:
        return NumericValue.floating(ints_to_double(value, fraction))

    def binary(self, op_idx: int, left: NumericValue, right: NumericValue) -> NumericValue:
        op = self.tokens[op_idx].type
        if op not in BINARY_IMPLS:
            raise RuntimeError(f"Unexpected binary operator: {op}")
        return BINARY_IMPLS[op](left, right)

    def standard_form(self, base: NumericValue, exponent: NumericValue) -> NumericValue:
        result = base.v * _power(10.0, exponent.v)
        return NumericValue(result, double_is_int(result))

    def function(self, func: TokenType, argument: NumericValue) -> NumericValue:
        # trig results are never integers, even sin(0)
        builtin = BUILTIN_FUNCS[func]
        result = builtin.fn(argument.v)
        logger.debug("%s(%s) = %s", builtin.name, argument.v, result)
        return NumericValue.floating(result)
