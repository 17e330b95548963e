import io

import pytest

from spojkit.surprise import main, solve


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2\nabc\nhello world\n", "cba\ndlrow olleh\n"),
        ("1\nkeep\ndrop\n", "peek\n"),
        ("3\nab", "ba\n\n\n"),
        ("1\n a b \n", " b a \n"),
    ],
)
def test_solve(text, expected):
    assert solve(text) == expected


def test_reversing_twice_restores():
    body = "first line\nsecond, longer line\nx\n"
    assert solve("3\n" + solve("3\n" + body)) == body


def test_missing_count_rejected():
    with pytest.raises(ValueError):
        solve("hello\n")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nxyz\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "zyx\n"