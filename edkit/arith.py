"""Integer arithmetic, comparisons and small statistics over number series."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

_COMPARISONS = (
    ("==", lambda a, b: a == b),
    ("!=", lambda a, b: a != b),
    ("<", lambda a, b: a < b),
    (">", lambda a, b: a > b),
    ("<=", lambda a, b: a <= b),
    (">=", lambda a, b: a >= b),
)


def greeting() -> str:
    """Return the classic greeting."""
    return "Hello World!"


def int_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def int_rem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, matching ``int_div``."""
    return a - b * int_div(a, b)


def real_div(a: int, b: int) -> float:
    """Real-valued quotient of two integers."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return a / b


@dataclass(frozen=True)
class Operations:
    """Results of the basic operations on a pair of integers."""

    sum: int
    difference: int
    product: int
    quotient: int
    real_quotient: float
    remainder: int

    def __str__(self) -> str:
        rows = (
            ("Soma:", self.sum),
            ("Subtração:", self.difference),
            ("Multiplicação:", self.product),
            ("Divisão Inteira:", self.quotient),
            ("Divisão Real:", f"{self.real_quotient:g}"),
            ("Resto:", self.remainder),
        )
        return "\n".join(f"{label:<17}{value}" for label, value in rows)


def operations(a: int, b: int) -> Operations:
    """Compute sum, difference, product, quotients and remainder of ``a`` and ``b``."""
    return Operations(
        sum=a + b,
        difference=a - b,
        product=a * b,
        quotient=int_div(a, b),
        real_quotient=real_div(a, b),
        remainder=int_rem(a, b),
    )


def comparisons(a: int, b: int) -> list[str]:
    """Return the relational operators that hold between ``a`` and ``b``, in a fixed order."""
    return [symbol for symbol, holds in _COMPARISONS if holds(a, b)]


def count_below(numbers: Iterable[int], limit: int = 5) -> int:
    """Count how many numbers are strictly smaller than ``limit``."""
    return sum(1 for number in numbers if number < limit)


def even_series_sum(start: int = 2, stop: int = 20) -> int:
    """Sum the series start, start + 2, ... up to and including ``stop``."""
    return sum(range(start, stop + 1, 2))


def average_until_zero(numbers: Iterable[int]) -> float:
    """Average the numbers read before the first zero (or the end of input)."""
    values = []
    for number in numbers:
        if number == 0:
            break
        values.append(number)
    if not values:
        raise ValueError("no numbers before the terminating zero")
    return sum(values) / len(values)


def mean_and_variance(numbers: Iterable[int]) -> tuple[float, float]:
    """Return the mean and the population variance of the numbers."""
    values = list(numbers)
    if not values:
        raise ValueError("mean and variance need at least one number")
    mean = math.fsum(values) / len(values)
    variance = math.fsum((value - mean) ** 2 for value in values) / len(values)
    return mean, variance


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a