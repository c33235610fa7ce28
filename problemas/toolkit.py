"""Small numeric and formatting helpers shared by the problem solvers."""

from __future__ import annotations

import math
from collections.abc import Iterable

_LOG_2 = math.log(2)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm with truncating remainder."""
    while b != 0:
        a, b = b, _trunc_mod(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ZeroDivisionError("lcm of 0 and 0 is undefined")
    return _trunc_div(a * b, divisor)


def is_numeric(text: str) -> bool:
    """True when the text is non-empty and made only of ASCII digits."""
    return bool(text) and all("0" <= ch <= "9" for ch in text)


def log2(value: int | float) -> float:
    """Base-2 logarithm computed as ln(value) / ln(2)."""
    if value <= 0:
        raise ValueError("log2 is only defined for positive values")
    return math.log(value) / _LOG_2


def format_row(values: Iterable[object]) -> str:
    """Render values each followed by a space, ending with a newline."""
    return "".join(f"{value} " for value in values) + "\n"


def format_grid(rows: Iterable[Iterable[object]]) -> str:
    """Render each row on its own line."""
    return "".join(format_row(row) for row in rows)


def format_set(values: Iterable[int]) -> str:
    """Render the distinct values in ascending order on one line."""
    return format_row(sorted(set(values)))