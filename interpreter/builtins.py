import math
from typing import Callable

from interpreter.tokenizer import TokenType
from interpreter.value import BuiltinFunc

BUILTIN_FUNCS: dict[TokenType, BuiltinFunc] = dict()


def register_builtin_func(token_type: TokenType):
    def decorator(fn: Callable[[float], float]) -> Callable[[float], float]:
        def decorated(arg: float) -> float:
            try:
                return fn(arg)
            except ValueError:
                # math raises where IEEE returns NaN, e.g. sin(inf)
                return math.nan

        BUILTIN_FUNCS[token_type] = BuiltinFunc(name=token_type.name.lower(), fn=decorated)
        return decorated

    return decorator


@register_builtin_func(TokenType.SIN)
def sin_(arg: float) -> float:
    return math.sin(arg)


@register_builtin_func(TokenType.COS)
def cos_(arg: float) -> float:
    return math.cos(arg)


@register_builtin_func(TokenType.TAN)
def tan_(arg: float) -> float:
    return math.tan(arg)
