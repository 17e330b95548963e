"""Parity of Stirling numbers of the second kind."""

from __future__ import annotations

from spojkit.acpc10e import _counted, _run


def stirling_parity(n: int, m: int) -> int:
    """Return ``S(n, m) mod 2`` as 0 or 1."""
    # Halving truncates toward zero, so m == 0 gives 0 rather than -1.
    half = (m - 1) // 2 if m >= 1 else -((1 - m) // 2)
    return 1 if (n - m) & half == 0 else 0


def solve(text: str) -> str:
    """Answer a count followed by that many ``n m`` pairs."""
    values = iter(int(token) for token in _counted(text, 2))
    return "".join(f"{stirling_parity(n, m)}\n" for n, m in zip(values, values))


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)