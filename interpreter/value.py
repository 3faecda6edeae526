from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class NumericValue:
    """A float magnitude and whether it is conceptually an integer

    ``is_int`` only survives an operation when every operand had it set.
    """

    v: float
    is_int: bool

    @classmethod
    def integer(cls, v: float) -> "NumericValue":
        return cls(v=float(v), is_int=True)

    @classmethod
    def floating(cls, v: float) -> "NumericValue":
        return cls(v=float(v), is_int=False)

    def __str__(self) -> str:
        if self.is_int and self.v.is_integer():
            return str(int(self.v))
        return str(self.v)


UnaryOperationImpl = Callable[[NumericValue], NumericValue]
BinaryOperationImpl = Callable[[NumericValue, NumericValue], NumericValue]


@dataclass
class BuiltinFunc:
    name: str
    fn: Callable[[float], float]
