"""Find where to cut a necklace so it reads as the smallest rotation."""

from __future__ import annotations

from spojkit.acpc10e import _counted, _run


def minimal_rotation(necklace: str) -> int:
    """1-based start of the lexicographically smallest rotation, earliest on ties."""
    size = len(necklace)
    if not size:
        raise ValueError("empty necklace")
    first, second, offset = 0, 1, 0
    while first < size and second < size and offset < size:
        left = necklace[(first + offset) % size]
        right = necklace[(second + offset) % size]
        if left == right:
            offset += 1
            continue
        if left > right:
            first += offset + 1
        else:
            second += offset + 1
        if first == second:
            second += 1
        offset = 0
    return min(first, second) + 1


def minimal_rotation_brute(necklace: str) -> int:
    """Same answer as :func:`minimal_rotation`, by eliminating rotations column by column."""
    size = len(necklace)
    if not size:
        raise ValueError("empty necklace")
    candidates = list(range(size))
    for column in range(size):
        smallest = min(necklace[(start + column) % size] for start in candidates)
        candidates = [start for start in candidates if necklace[(start + column) % size] == smallest]
    return candidates[0] + 1


def solve(text: str) -> str:
    """Answer a count followed by that many necklaces."""
    return "".join(f"{minimal_rotation(necklace)}\n" for necklace in _counted(text))


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)