"""Counting ligatures in a text for many queries at once.

A query names a set of two-letter ligatures. Walking the text from left to
right, a consecutive letter pair is replaced by a ligature when the pair
belongs to the query and its first letter was not already consumed by the
previous ligature. The answer for a query is the number of ligatures formed.

All queries are processed together: each query is one bit of a Python
integer, and the per-query counters are kept bit-sliced, so every text pair
costs a handful of big-integer operations regardless of the query count.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

ALPHABET = 26
PAIR_CODES = ALPHABET * ALPHABET


def pair_code(first: str, second: str) -> int:
    """Code in range(676) of the pair of lowercase letters (first, second)."""
    for letter in (first, second):
        if len(letter) != 1 or not "a" <= letter <= "z":
            raise ValueError(f"expected a lowercase letter, got {letter!r}")
    return (ord(first) - ord("a")) * ALPHABET + (ord(second) - ord("a"))


def text_pairs(text: str) -> list[int]:
    """Codes of every consecutive letter pair of the text, in order."""
    return [pair_code(a, b) for a, b in zip(text, text[1:])]


def _query_codes(query: str) -> set[int]:
    if len(query) % 2:
        raise ValueError(f"query {query!r} does not split into letter pairs")
    return {pair_code(query[i], query[i + 1]) for i in range(0, len(query), 2)}


def _add(counter: list[int], carry: int) -> None:
    """Add one to every bit-sliced counter whose bit is set in carry."""
    level = 0
    while carry:
        if level == len(counter):
            counter.append(0)
        current = counter[level]
        counter[level] = current ^ carry
        carry &= current
        level += 1


def count_ligatures(text: str, queries: Iterable[str]) -> list[int]:
    """Number of ligatures formed in the text for each query.

    Each query is a string of concatenated two-letter ligatures.
    """
    query_list = list(queries)
    masks = [0] * PAIR_CODES
    for index, query in enumerate(query_list):
        bit = 1 << index
        for code in _query_codes(query):
            masks[code] |= bit

    counter: list[int] = []
    step = 0
    for code in text_pairs(text):
        step = masks[code] & ~step
        _add(counter, step)

    results = [0] * len(query_list)
    for level, bits in enumerate(counter):
        weight = 1 << level
        while bits:
            low = bits & -bits
            results[low.bit_length() - 1] += weight
            bits ^= low
    return results


def solve_stream(text: str) -> str:
    """Read 'n q k', the text and q queries; return one count per line."""
    tokens = text.split()
    if len(tokens) < 4:
        raise ValueError("expected 'n q k' followed by the text")
    n, q, k = (int(tok) for tok in tokens[:3])
    word = tokens[3]
    if len(word) < n:
        raise ValueError("text is shorter than its declared length")
    raw_queries = tokens[4 : 4 + q]
    if len(raw_queries) < q:
        raise ValueError("input ended before all queries were read")
    queries = []
    for raw in raw_queries:
        if len(raw) < 2 * k:
            raise ValueError(f"query {raw!r} has fewer than {k} pairs")
        queries.append(raw[: 2 * k])
    return "".join(f"{count}\n" for count in count_ligatures(word[:n], queries))


def main(argv: Sequence[str] | None = None) -> int:
    """Read the problem from standard input and print the counts."""
    sys.stdout.write(solve_stream(sys.stdin.read()))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())