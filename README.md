# problemas

Solutions to a few programming-contest problems, plus a small toolkit of
helpers that they share.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

Each command reads the problem's input from standard input and writes the
answer to standard output. Malformed or truncated input raises `ValueError`.

### problemas-knapsack

The input holds any number of cases. Each case starts with an integer capacity
`C` and an item count `n`, followed by `n` pairs of `value weight`. For each
case the command prints how many items were chosen on one line, then their
zero-based indices on the next, from the last chosen item to the first.

    printf '5 3\n1 5\n10 5\n100 5\n' | problemas-knapsack

prints

    1
    2 

### problemas-nafnatalning

The input is a group count `n` and a page size `p`, followed by `n` group
sizes. The command counts the pairs that take one member from each of two
different groups and prints how many pages of `p` pairs are needed to list
them (at least one page, even when there are no pairs).

    printf '3 2\n1 2 3\n' | problemas-nafnatalning

prints `6` (11 pairs, 2 to a page).

### problemas-ligatures

The input is `n q k`, then a lowercase string of length `n`, then `q` queries.
Each query is made of `k` two-letter ligatures written one after another.
Walking the string from left to right, a pair of adjacent letters becomes a
ligature when it is one of the query's ligatures and its first letter was not
already taken by the ligature just before it. For every query the command
prints the number of ligatures formed, one per line.

    printf '4 1 2\nabcd\nabcd\n' | problemas-ligatures

prints `2`.

All queries are answered together: each query is one bit of a Python integer
and the counters are kept bit-sliced, so each pair of the string costs a few
big-integer operations whatever the number of queries.

## Library use

    from problemas.knapsack import Item, best_selection, best_value_table
    from problemas.nafnatalning import pair_total, pages_needed
    from problemas.ligatures import count_ligatures, pair_code, text_pairs
    from problemas.toolkit import gcd, lcm, is_numeric

    best_selection(10, [Item(value=6, weight=4), Item(value=5, weight=6)])  # [1, 0]
    pages_needed([1, 2, 3], 2)                                             # 6
    count_ligatures("abcd", ["abcd"])                                      # [2]
    gcd(12, 18), lcm(4, 6), is_numeric("123")                              # 6, 12, True

- `problemas.knapsack`: `Item`, `best_value_table` (the full dynamic-programming
  table), `best_selection`, and `solve_stream`, which turns the command's input
  text into its output text.
- `problemas.nafnatalning`: `pair_total` and `pages_needed`.
- `problemas.ligatures`: `pair_code`, `text_pairs`, `count_ligatures` and
  `solve_stream`.
- `problemas.toolkit`: `gcd`, `lcm`, `is_numeric`, `log2`, and `format_row`,
  `format_grid` and `format_set`, which return the text printed for a
  sequence, a grid or a set (each value followed by a space, each row ending
  in a newline).