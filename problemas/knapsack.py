"""0/1 knapsack solved by dynamic programming, with a text-stream driver."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from problemas.toolkit import format_row


@dataclass(frozen=True)
class Item:
    """An object that may be packed: its value and its weight."""

    value: int
    weight: int


def best_value_table(capacity: int, items: Sequence[Item]) -> list[list[int]]:
    """Return table[w][j]: best value using the first j items within weight w."""
    table = [[0] * (len(items) + 1) for _ in range(capacity + 1)]
    for w in range(1, capacity + 1):
        row = table[w]
        for j, item in enumerate(items, start=1):
            best = row[j - 1]
            if item.weight <= w:
                best = max(best, table[w - item.weight][j - 1] + item.value)
            row[j] = best
    return table


def best_selection(capacity: int, items: Sequence[Item]) -> list[int]:
    """Indices of an optimal selection, listed from the last item to the first."""
    table = best_value_table(capacity, items)
    chosen = []
    weight = capacity
    for j in range(len(items), 0, -1):
        if table[weight][j] > table[weight][j - 1]:
            chosen.append(j - 1)
            weight -= items[j - 1].weight
    return chosen


def solve_stream(text: str) -> str:
    """Solve every 'capacity count' case in the text and return the output."""
    tokens = iter(text.split())
    out = []
    while True:
        try:
            capacity = int(next(tokens))
            count = int(next(tokens))
        except StopIteration:
            break
        try:
            items = [Item(int(next(tokens)), int(next(tokens))) for _ in range(count)]
        except StopIteration:
            raise ValueError("input ended before all items were read") from None
        chosen = best_selection(capacity, items)
        out.append(f"{len(chosen)}\n")
        out.append(format_row(chosen))
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Read cases from standard input and write the selections."""
    sys.stdout.write(solve_stream(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())