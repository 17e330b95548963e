import io

import pytest

from spojkit.binstirl import main, solve, stirling_parity

LIMIT = 40


def _stirling_table():
    table = [[0] * (LIMIT + 1) for _ in range(LIMIT + 1)]
    table[0][0] = 1
    for n in range(1, LIMIT + 1):
        for k in range(1, n + 1):
            table[n][k] = k * table[n - 1][k] + table[n - 1][k - 1]
    return table


TABLE = _stirling_table()


@pytest.mark.parametrize("n", range(1, LIMIT + 1))
def test_matches_recurrence(n):
    assert [stirling_parity(n, m) for m in range(1, n + 1)] == [
        TABLE[n][m] % 2 for m in range(1, n + 1)
    ]


def test_sample():
    assert solve("1\n4 2\n") == "1\n"


def test_solve_answers_each_pair():
    pairs = [(5, 3), (6, 4), (7, 7)]
    out = solve("3\n5 3\n6 4\n7 7\n")
    assert out.splitlines() == [str(TABLE[n][m] % 2) for n, m in pairs]


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n4 2\n3 3\n"))
    main([])
    assert capsys.readouterr().out == "1\n1\n"