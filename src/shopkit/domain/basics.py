"""Small numeric helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence


def max_of(a: float, b: float) -> float:
    """Return the larger of *a* and *b*; *a* when they are equal."""
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    """Classic FizzBuzz for a single number.

    Examples:
        >>> fizz_buzz(15)
        'FizzBuzz'
        >>> fizz_buzz(17)
        '17'
    """
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_average(numbers: Sequence[float]) -> float:
    """Arithmetic mean; NaN for an empty sequence."""
    if not numbers:
        return math.nan
    return sum(numbers) / len(numbers)


def factorial(n: int) -> int | None:
    """Return ``n!``, or None when *n* is negative."""
    if n < 0:
        return None
    return math.factorial(n)
