"""Recursive-descent walk over the arithmetic grammar

    Expression -> Term {(+|-) Term}
    Term       -> Power {(*|/|%) Power}
    Power      -> Scientific {^ Scientific}
    Scientific -> Atom [E Atom]
    Atom       -> Number [. Number] | sin( Expression ) | cos( Expression )
                | tan( Expression ) | ( Expression ) | - Atom

Every rule takes the index of the first token it may consume and returns
its result together with the index of the first token it did not consume.
What a rule produces is left to the subclass hooks, so the syntax checker
and the evaluator share one grammar.
"""
import abc
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from interpreter.tokenizer import Token, TokenType, token_offset, untokenize


@dataclass
class ParseError(Exception):
    errmsg: str
    tokens: Sequence[Token]
    error_token_idx: int

    def __str__(self) -> str:
        filler_whitespace = " " * token_offset(self.tokens, self.error_token_idx)
        return "\n".join([f"Parser error: {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


ADDITIVE_OPS = (TokenType.ADD, TokenType.SUB)
MULTIPLICATIVE_OPS = (TokenType.MUL, TokenType.DIV, TokenType.MOD)
FUNCTION_TOKENS = (TokenType.SIN, TokenType.COS, TokenType.TAN)

R = TypeVar("R")


class GrammarWalker(abc.ABC, Generic[R]):
    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens

    def walk(self) -> tuple[R, int]:
        return self.expression(0)

    def _peek(self, i: int) -> TokenType | None:
        return self.tokens[i].type if i < len(self.tokens) else None

    # grammar rules

    def expression(self, i: int) -> tuple[R, int]:
        left, i = self.term(i)
        return self.expression_tail(left, i)

    def expression_tail(self, left: R, i: int) -> tuple[R, int]:
        while self._peek(i) in ADDITIVE_OPS:
            op_idx = i
            right, i = self.term(i + 1)
            left = self.binary(op_idx, left, right)
        return left, i

    def term(self, i: int) -> tuple[R, int]:
        left, i = self.power(i)
        while self._peek(i) in MULTIPLICATIVE_OPS:
            op_idx = i
            right, i = self.power(i + 1)
            left = self.binary(op_idx, left, right)
        return left, i

    def power(self, i: int) -> tuple[R, int]:
        # left-associative: 2^3^2 is (2^3)^2
        left, i = self.scientific(i)
        while self._peek(i) is TokenType.EXP:
            op_idx = i
            right, i = self.scientific(i + 1)
            left = self.binary(op_idx, left, right)
        return left, i

    def scientific(self, i: int) -> tuple[R, int]:
        base, i = self.atom(i)
        if self._peek(i) is TokenType.SCIENTIFIC:
            exponent, i = self.atom(i + 1)
            return self.standard_form(base, exponent), i
        return base, i

    def atom(self, i: int) -> tuple[R, int]:
        first = self._peek(i)
        if first is None:
            raise ParseError("Unexpected end of expression", tokens=self.tokens, error_token_idx=i)
        elif first is TokenType.NUMBER:
            return self._number(i)
        elif first in FUNCTION_TOKENS:
            argument, i = self._bracketed(i, f"Missing right bracket for {first.name.lower()}")
            return self.function(first, argument), i
        elif first is TokenType.LEFT_PAREN:
            return self._bracketed(i, "Missing right bracket")
        elif first is TokenType.UNARY_SUB:
            return self.unary_minus(i + 1)
        else:
            raise ParseError(f"Unknown syntax error, unexpected {first}", tokens=self.tokens, error_token_idx=i)

    def _number(self, i: int) -> tuple[R, int]:
        value = self.tokens[i].value
        if self._peek(i + 1) is not TokenType.DOT:
            return self.integer(value), i + 1
        if self._peek(i + 2) is not TokenType.NUMBER:
            raise ParseError("Missing value after decimal point", tokens=self.tokens, error_token_idx=i + 2)
        return self.decimal(value, self.tokens[i + 2].value), i + 3

    def _bracketed(self, i: int, errmsg: str) -> tuple[R, int]:
        inner, i = self.expression(i + 1)
        if self._peek(i) is not TokenType.RIGHT_PAREN:
            raise ParseError(errmsg, tokens=self.tokens, error_token_idx=i)
        return inner, i + 1

    # hooks

    @abc.abstractmethod
    def unary_minus(self, i: int) -> tuple[R, int]:
        """Consumes the operand of a unary minus starting at ``i``"""

    @abc.abstractmethod
    def integer(self, value: int) -> R:
        ...

    @abc.abstractmethod
    def decimal(self, value: int, fraction: int) -> R:
        ...

    @abc.abstractmethod
    def binary(self, op_idx: int, left: R, right: R) -> R:
        """Combines two operands of the operator token at ``op_idx``"""

    @abc.abstractmethod
    def standard_form(self, base: R, exponent: R) -> R:
        ...

    @abc.abstractmethod
    def function(self, func: TokenType, argument: R) -> R:
        ...
