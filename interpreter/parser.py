import logging
from typing import Sequence

from interpreter.grammar import GrammarWalker, ParseError
from interpreter.tokenizer import Token, TokenType, format_tokens

__all__ = ["ParseError", "SyntaxChecker", "check"]

logger = logging.getLogger(__name__)


class SyntaxChecker(GrammarWalker[None]):
    """Validates structure only, nothing is computed"""

    def unary_minus(self, i: int) -> tuple[None, int]:
        return self.atom(i)

    def integer(self, value: int) -> None:
        return None

    def decimal(self, value: int, fraction: int) -> None:
        return None

    def binary(self, op_idx: int, left: None, right: None) -> None:
        return None

    def standard_form(self, base: None, exponent: None) -> None:
        return None

    def function(self, func: TokenType, argument: None) -> None:
        return None


def check(tokens: Sequence[Token]) -> list[Token]:
    """Returns the tokens left over after the longest well-formed expression"""
    _, i = SyntaxChecker(tokens).walk()
    remaining = list(tokens[i:])
    logger.debug("Syntax check left %s", format_tokens(remaining))
    return remaining
