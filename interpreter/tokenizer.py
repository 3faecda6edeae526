import enum
import logging
import string
from dataclasses import dataclass, field
from typing import Sequence

from interpreter.utils import PrintableEnum, count_leading_zeroes, remove_trailing_zeroes

logger = logging.getLogger(__name__)

EXCERPT_RADIUS = 12

# longer literals would not fit a double
MAX_NUMBER_DIGITS = 308


@dataclass
class LexError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    def _excerpt(self) -> tuple[str, int]:
        start = max(0, self.error_char_idx - EXCERPT_RADIUS)
        end = min(len(self.code), self.error_char_idx + EXCERPT_RADIUS)
        prefix = "..." if start > 0 else ""
        suffix = "..." if end < len(self.code) else ""
        return prefix + self.code[start:end] + suffix, self.error_char_idx - start + len(prefix)

    def __str__(self) -> str:
        excerpt, caret_col = self._excerpt()
        return "\n".join([f"Lexer error at {self.error_char_idx}: {self.errmsg}", excerpt, " " * caret_col + "^"])


class TokenType(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    UNARY_SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    MOD = enum.auto()
    EXP = enum.auto()
    DOT = enum.auto()
    SCIENTIFIC = enum.auto()
    SIN = enum.auto()
    COS = enum.auto()
    TAN = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    NUMBER = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    # only meaningful for NUMBER tokens
    value: int = 0
    lexeme: str = field(default="", compare=False, repr=False)

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"{self.type} {self.value}"
        return str(self.type)


SINGLE_CHAR_TOKENS = {
    "+": TokenType.ADD,
    "*": TokenType.MUL,
    "/": TokenType.DIV,
    "%": TokenType.MOD,
    "^": TokenType.EXP,
    ".": TokenType.DOT,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "E": TokenType.SCIENTIFIC,
}

KEYWORD_TOKENS = {
    "sin(": TokenType.SIN,
    "cos(": TokenType.COS,
    "tan(": TokenType.TAN,
}

# "-" after one of these is a binary minus
NUMBER_LIKE = (TokenType.NUMBER, TokenType.RIGHT_PAREN)


def _fraction_value(digits: str) -> int:
    # leading zeroes are moved to the end: "05" -> 50, "0470" -> 470, "340" -> 34
    leading_zeroes = count_leading_zeroes(digits)
    return remove_trailing_zeroes(int(digits)) * 10**leading_zeroes


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        prev_type = tokens[-1].type if tokens else None
        if code[i] in string.digits:
            number_end_idx = i + 1
            while number_end_idx < len(code) and code[number_end_idx] in string.digits:
                number_end_idx += 1
            digits = code[i:number_end_idx]
            if len(digits) > MAX_NUMBER_DIGITS:
                raise LexError(f"Number longer than {MAX_NUMBER_DIGITS} digits", code=code, error_char_idx=i)
            value = _fraction_value(digits) if prev_type is TokenType.DOT else int(digits)
            tokens.append(Token(type=TokenType.NUMBER, value=value, lexeme=digits))
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i : i + 4] in KEYWORD_TOKENS:
            tokens.append(Token(type=KEYWORD_TOKENS[code[i : i + 4]], lexeme=code[i : i + 4]))
            i += 3
        elif code[i] == "-":
            minus_type = TokenType.SUB if prev_type in NUMBER_LIKE else TokenType.UNARY_SUB
            tokens.append(Token(type=minus_type, lexeme="-"))
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i]))
        elif code[i].isspace():
            pass
        else:
            raise LexError(f"Unrecognised character {code[i]!r}", code=code, error_char_idx=i)
        i += 1

    logger.debug("Tokenized %r into %d tokens", code, len(tokens))
    return tokens


def _lexeme(token: Token) -> str:
    if token.lexeme:
        return token.lexeme
    if token.type is TokenType.NUMBER:
        return str(token.value)
    if token.type in KEYWORD_TOKENS.values():
        return next(k for k, v in KEYWORD_TOKENS.items() if v is token.type)
    if token.type in (TokenType.SUB, TokenType.UNARY_SUB):
        return "-"
    return next(k for k, v in SINGLE_CHAR_TOKENS.items() if v is token.type)


GLUED_AFTER = (
    TokenType.DOT,
    TokenType.LEFT_PAREN,
    TokenType.UNARY_SUB,
    TokenType.SIN,
    TokenType.COS,
    TokenType.TAN,
)
GLUED_BEFORE = (TokenType.DOT, TokenType.RIGHT_PAREN)


def untokenize(tokens: Sequence[Token]) -> str:
    # 12 . 34 => 12.34, ( 1 + 2 ) => (1 + 2), - 3 => -3
    result = ""
    for idx, token in enumerate(tokens):
        if idx > 0 and tokens[idx - 1].type not in GLUED_AFTER and token.type not in GLUED_BEFORE:
            result += " "
        result += _lexeme(token)
    return result


def token_offset(tokens: Sequence[Token], idx: int) -> int:
    """Column of ``tokens[idx]`` in ``untokenize(tokens)``; one past the end for ``idx == len(tokens)``"""
    if idx >= len(tokens):
        return len(untokenize(tokens)) + (1 if tokens else 0)
    return len(untokenize(tokens[: idx + 1])) - len(_lexeme(tokens[idx]))


def format_tokens(tokens: Sequence[Token]) -> str:
    return " ".join([*(str(t) for t in tokens), "EOL"])
