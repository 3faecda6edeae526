import enum
import math


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def count_leading_zeroes(digits: str) -> int:
    return len(digits) - len(digits.lstrip("0"))


def remove_trailing_zeroes(num: int) -> int:
    if num == 0:
        return 0
    while num % 10 == 0:
        num //= 10
    return num


def digit_count(num: int) -> int:
    return len(str(num))


def ints_to_double(a: int, b: int) -> float:
    """Combines integer part ``a`` and fractional token ``b`` into ``a.b``.

    ``b`` comes from the tokenizer with leading zeroes moved to its end,
    so ``1.05`` arrives as ``(1, 50)``.
    """
    if b == 0:
        return float(a)
    return a + remove_trailing_zeroes(b) * 10.0 ** -digit_count(b)


def double_is_int(a: float) -> bool:
    return math.isfinite(a) and a.is_integer()
