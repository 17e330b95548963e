"""Number of trailing zeros of n factorial."""

from __future__ import annotations

from spojkit.acpc10e import _counted, _run


def trailing_zeros(n: int) -> int:
    """Count the trailing zeros of ``n!`` by counting factors of five."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    count = 0
    while n:
        n //= 5
        count += n
    return count


def solve(text: str) -> str:
    """Answer a count followed by that many numbers."""
    return "".join(f"{trailing_zeros(int(token))}\n" for token in _counted(text))


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)