import io
import itertools

import pytest

from problemas.knapsack import Item, best_selection, best_value_table, main, solve_stream

FIRST = [Item(1, 5), Item(10, 5), Item(100, 5)]
SECOND = [Item(5, 4), Item(4, 3), Item(3, 2), Item(2, 1)]
SAMPLE = "5 3\n1 5\n10 5\n100 5\n6 4\n5 4\n4 3\n3 2\n2 1\n"


def _brute_best(capacity, items):
    best = 0
    for r in range(len(items) + 1):
        for combo in itertools.combinations(items, r):
            if sum(i.weight for i in combo) <= capacity:
                best = max(best, sum(i.value for i in combo))
    return best


def test_first_sample_selection():
    assert best_selection(5, FIRST) == [2]


def test_second_sample_selection():
    assert best_selection(6, SECOND) == [3, 2, 1]


@pytest.mark.parametrize("capacity", range(0, 12))
def test_selection_is_feasible_and_optimal(capacity):
    chosen = best_selection(capacity, SECOND)
    assert sum(SECOND[i].weight for i in chosen) <= capacity
    value = sum(SECOND[i].value for i in chosen)
    assert value == _brute_best(capacity, SECOND)
    assert best_value_table(capacity, SECOND)[capacity][len(SECOND)] == value


def test_table_shape_and_zero_edges():
    table = best_value_table(4, FIRST)
    assert len(table) == 5
    assert all(len(row) == 4 for row in table)
    assert all(row[0] == 0 for row in table)
    assert all(v == 0 for v in table[0])


def test_empty_items():
    assert best_selection(10, []) == []


def test_solve_stream_sample():
    expected = "1\n" + "2 \n" + "3\n" + "3 2 1 \n"
    assert solve_stream(SAMPLE) == expected


def test_solve_stream_truncated_items():
    with pytest.raises(ValueError):
        solve_stream("5 2\n1 1\n")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))
    assert main() == 0
    assert capsys.readouterr().out == solve_stream(SAMPLE)