"""Sum of the proper divisors of a number."""

from __future__ import annotations

from math import isqrt

from spojkit.acpc10e import _counted, _run


def proper_divisor_sum(n: int) -> int:
    """Sum of all divisors of ``n`` smaller than ``n``."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    total = 0 if n == 1 else 1
    for divisor in range(2, isqrt(n) + 1):
        if n % divisor == 0:
            quotient = n // divisor
            total += divisor if quotient == divisor else divisor + quotient
    return total


def solve(text: str) -> str:
    """Answer a count followed by that many numbers."""
    return "".join(f"{proper_divisor_sum(int(token))}\n" for token in _counted(text))


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)