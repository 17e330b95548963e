import pytest

from spojkit.trip import all_lcs, lcs_table, main, solve


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


PAIRS = [
    ("abcabcaa", "acbacba"),
    ("abcbdab", "bdcaba"),
    ("aaaa", "aa"),
    ("xyz", "zyx"),
]


def test_sample_pair():
    assert all_lcs("abcabcaa", "acbacba") == [
        "ababa", "abaca", "abcba", "acaba", "acaca", "acbaa", "acbca",
    ]


@pytest.mark.parametrize("first, second", PAIRS)
def test_results_are_common_subsequences_of_full_length(first, second):
    length = lcs_table(first, second)[-1][-1]
    results = all_lcs(first, second)
    assert results
    for trip in results:
        assert len(trip) == length
        assert _is_subsequence(trip, first)
        assert _is_subsequence(trip, second)


@pytest.mark.parametrize("first, second", PAIRS)
def test_results_sorted_and_distinct(first, second):
    results = all_lcs(first, second)
    assert results == sorted(set(results))


@pytest.mark.parametrize("first, second", PAIRS)
def test_symmetric(first, second):
    assert all_lcs(first, second) == all_lcs(second, first)


def test_table_shape_and_edges():
    table = lcs_table("abc", "ab")
    assert len(table) == 4
    assert all(len(row) == 3 for row in table)
    assert table[0] == [0, 0, 0]
    assert [row[0] for row in table] == [0, 0, 0, 0]


def test_identical_strings():
    assert all_lcs("abc", "abc") == ["abc"]


def test_nothing_in_common():
    assert all_lcs("abc", "xyz") == [""]


def test_solve_concatenates_cases(tmp_path, capsys):
    text = "2\n\nabc\nabc\nab\nba\n"
    assert solve(text) == "abc\na\nb\n"
    path = tmp_path / "input"
    path.write_text(text)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "abc\na\nb\n"