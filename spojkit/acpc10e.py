"""Count the matches of a tournament: a round robin in groups, then a knockout."""

from __future__ import annotations

import fileinput
import sys
from collections.abc import Callable


def _run(solver: Callable[[str], str], argv: list[str] | None) -> int:
    """Feed the first file argument, or standard input, through ``solver``."""
    files = (sys.argv[1:] if argv is None else argv)[:1]
    with fileinput.FileInput(files, encoding="utf-8") as lines:
        sys.stdout.write(solver("".join(lines)))
    return 0


def _counted(text: str, width: int = 1) -> list[str]:
    """Tokens of the cases announced by the leading count, ``width`` tokens per case."""
    tokens = text.split()
    if not tokens:
        return []
    return tokens[1 : 1 + width * int(tokens[0])]


def _bracket_size(qualified: int) -> int:
    """Smallest power of two that can hold ``qualified`` teams."""
    if qualified <= 1:
        return 1
    return 1 << (qualified - 1).bit_length()


def match_count(groups: int, teams: int, advance: int, extra: int) -> tuple[int, int]:
    """Return ``(matches, byes)`` for the tournament.

    Every group of ``teams`` plays a full round robin, ``advance`` teams per
    group plus ``extra`` wild cards go on to a knockout bracket, which is
    padded with byes up to the next power of two.
    """
    group_matches = groups * teams * (teams - 1) // 2
    qualified = groups * advance + extra
    bracket = _bracket_size(qualified)
    return group_matches + bracket - 1, bracket - qualified


def solve(text: str) -> str:
    """Answer every ``G T A D`` line up to the ``-1`` terminator."""
    values = iter(int(token) for token in text.split())
    lines = []
    for groups, teams, advance, extra in zip(values, values, values, values):
        if groups == -1:
            break
        matches, byes = match_count(groups, teams, advance, extra)
        lines.append(f"{groups}*{advance}/{teams}+{extra}={matches}+{byes}\n")
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)