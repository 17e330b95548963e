"""Tell whether a number is a sum of two squares."""

from __future__ import annotations

from math import isqrt

from spojkit.acpc10e import _counted, _run


def is_sum_of_two_squares(x: int) -> bool:
    """True when ``x == a*a + b*b`` for some non-negative integers ``a`` and ``b``."""
    if x < 0:
        raise ValueError(f"x must not be negative, got {x}")
    low, high = 0, isqrt(x)
    while low <= high:
        total = low * low + high * high
        if total > x:
            high -= 1
        elif total < x:
            low += 1
        else:
            return True
    return False


def solve(text: str) -> str:
    """Answer a count followed by that many numbers with Yes or No."""
    return "".join(
        "Yes\n" if is_sum_of_two_squares(int(token)) else "No\n" for token in _counted(text)
    )


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)