"""All distinct longest common subsequences of two strings."""

from __future__ import annotations

from functools import lru_cache

from spojkit.acpc10e import _counted, _run


def lcs_table(first: str, second: str) -> list[list[int]]:
    """Table whose cell ``[i][j]`` is the LCS length of ``first[:i]`` and ``second[:j]``."""
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i, a in enumerate(first, start=1):
        for j, b in enumerate(second, start=1):
            if a == b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def all_lcs(first: str, second: str) -> list[str]:
    """Every distinct longest common subsequence, in alphabetical order."""
    table = lcs_table(first, second)

    @lru_cache(maxsize=None)
    def collect(i: int, j: int) -> frozenset[str]:
        length = table[i][j]
        if length == 0:
            return frozenset({""})
        found: set[str] = set()
        if first[i - 1] == second[j - 1]:
            found.update(prefix + first[i - 1] for prefix in collect(i - 1, j - 1))
        if table[i - 1][j] == length:
            found.update(collect(i - 1, j))
        if table[i][j - 1] == length:
            found.update(collect(i, j - 1))
        return frozenset(found)

    return sorted(collect(len(first), len(second)))


def solve(text: str) -> str:
    """Answer a count followed by that many pairs of strings."""
    words = _counted(text, 2)
    return "".join(
        f"{trip}\n"
        for first, second in zip(words[::2], words[1::2])
        for trip in all_lcs(first, second)
    )


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)