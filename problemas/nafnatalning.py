"""Counting name pairs across groups and the pages needed to list them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


def pair_total(counts: Iterable[int]) -> int:
    """Number of pairs drawn from two different groups."""
    values = list(counts)
    remaining = sum(values)
    total = 0
    for count in values:
        remaining -= count
        total += remaining * count
    return total


def pages_needed(counts: Iterable[int], per_page: int) -> int:
    """Pages needed to print all cross-group pairs, per_page to a page."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    numerator = pair_total(counts) - 1
    # Division rounds toward zero, so an empty listing still takes one page.
    quotient = abs(numerator) // per_page
    if numerator < 0:
        quotient = -quotient
    return quotient + 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read 'n p' and n group sizes from standard input; print the page count."""
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        raise ValueError("expected group count and page size")
    n, per_page = int(tokens[0]), int(tokens[1])
    counts = [int(tok) for tok in tokens[2 : 2 + n]]
    if len(counts) < n:
        raise ValueError("input ended before all group sizes were read")
    print(pages_needed(counts, per_page))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())