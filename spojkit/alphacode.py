"""Count the ways a string of digits decodes with A=1 ... Z=26."""

from __future__ import annotations

import string
from functools import cache

from spojkit.acpc10e import _run


def _check(code: str) -> None:
    if not code or any(ch not in string.digits for ch in code):
        raise ValueError(f"not a digit string: {code!r}")


def count_decodings(code: str) -> int:
    """Number of decodings, computed bottom-up from the end of the code."""
    _check(code)
    after_next, after = 1, 0 if code[-1] == "0" else 1
    for digit, following in reversed(list(zip(code, code[1:]))):
        if digit == "0":
            value = 0
        else:
            value = after
            if int(digit + following) <= 26:
                value += after_next
        after_next, after = after, value
    return after


def count_decodings_recursive(code: str) -> int:
    """Number of decodings, computed top-down by recursion on the position."""
    _check(code)
    last = len(code) - 1

    @cache
    def count_from(low: int) -> int:
        if low <= last and code[low] == "0":
            return 0
        if low >= last:
            return 1
        total = count_from(low + 1)
        if int(code[low : low + 2]) <= 26:
            total += count_from(low + 2)
        return total

    return count_from(0)


def solve(text: str) -> str:
    """Answer every code up to the terminating ``0``."""
    lines = []
    for token in text.split():
        if token == "0":
            break
        lines.append(f"{count_decodings(token)}\n")
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)