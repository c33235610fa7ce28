import io

import pytest

from problemas.nafnatalning import main, pages_needed, pair_total


def test_single_group_has_no_pairs():
    assert pair_total([7]) == 0
    assert pair_total([]) == 0


@pytest.mark.parametrize("counts", [[2, 3], [1, 1, 1, 1], [5, 0, 4, 9], [10, 20, 30]])
def test_pair_total_matches_square_identity(counts):
    s = sum(counts)
    assert 2 * pair_total(counts) == s * s - sum(c * c for c in counts)


def test_pair_total_order_independent():
    assert pair_total([3, 8, 2]) == pair_total([2, 3, 8])


def test_no_pairs_still_one_page():
    assert pages_needed([4], 10) == 1


@pytest.mark.parametrize("counts,per_page", [([2, 3], 1), ([2, 3], 4), ([5, 6, 7], 10), ([1, 1], 1)])
def test_pages_cover_all_pairs(counts, per_page):
    total = pair_total(counts)
    pages = pages_needed(counts, per_page)
    assert pages * per_page >= total
    assert (pages - 1) * per_page < total


def test_exact_fit_pages():
    assert pages_needed([2, 3], 6) == 1
    assert pages_needed([2, 3], 3) == 2


def test_invalid_page_size():
    with pytest.raises(ValueError):
        pages_needed([1, 2], 0)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 4\n1 2 3\n"))
    assert main() == 0
    assert capsys.readouterr().out == f"{pages_needed([1, 2, 3], 4)}\n"


def test_main_truncated_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 4\n1 2\n"))
    with pytest.raises(ValueError):
        main()