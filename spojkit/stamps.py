"""Fewest friends to borrow stamps from."""

from __future__ import annotations

from collections.abc import Iterable

from spojkit.acpc10e import _run


def min_friends(needed: int, offers: Iterable[int]) -> int | None:
    """Fewest offers, largest first, that add up to ``needed``; ``None`` if impossible."""
    total = 0
    for count, offer in enumerate(sorted(offers, reverse=True), start=1):
        total += offer
        if total >= needed:
            return count
    return None


def solve(text: str) -> str:
    """Answer every scenario of ``needed friends`` followed by the offers."""
    values = iter(int(token) for token in text.split())
    out = []
    for scenario in range(1, next(values, 0) + 1):
        needed = next(values)
        friends = next(values)
        answer = min_friends(needed, [next(values) for _ in range(friends)])
        verdict = "impossible" if answer is None else answer
        out.append(f"Scenario #{scenario}:\n{verdict}\n\n")
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)