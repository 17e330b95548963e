"""Print every line of a message backwards."""

from __future__ import annotations

import re

from spojkit.acpc10e import _run

_COUNT = re.compile(r"\s*([+-]?\d+)")


def solve(text: str) -> str:
    """Reverse the lines that follow the leading line count.

    Lines missing at the end of the input come out empty.
    """
    match = _COUNT.match(text)
    if match is None:
        raise ValueError("input does not start with a line count")
    count = int(match.group(1))
    lines = text[match.end() + 1 :].split("\n")
    lines += [""] * max(0, count - len(lines))
    return "".join(f"{line[::-1]}\n" for line in lines[:count])


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)