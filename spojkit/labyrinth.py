"""Longest rope needed inside a labyrinth: the widest span of any open region."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator, Sequence

_WALL = "#"

Cell = tuple[int, int]


def _neighbours(cell: Cell, height: int, width: int) -> Iterator[Cell]:
    row, col = cell
    if row > 0:
        yield row - 1, col
    if col > 0:
        yield row, col - 1
    if row < height - 1:
        yield row + 1, col
    if col < width - 1:
        yield row, col + 1


def _farthest(open_cells: set[Cell], start: Cell, height: int, width: int) -> tuple[Cell, dict[Cell, int]]:
    """Breadth-first search from ``start``; return the last cell reached and all distances."""
    distance = {start: 0}
    queue = deque([start])
    last = start
    while queue:
        last = queue.popleft()
        for neighbour in _neighbours(last, height, width):
            if neighbour in open_cells and neighbour not in distance:
                distance[neighbour] = distance[last] + 1
                queue.append(neighbour)
    return last, distance


def longest_rope(rows: Sequence[str]) -> int:
    """Length of the longest path between two open cells of one region.

    ``rows`` holds the grid, ``#`` for rock and anything else for open floor.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("labyrinth rows differ in length")
    open_cells = {
        (r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch != _WALL
    }
    seen: set[Cell] = set()
    best = 0
    for cell in sorted(open_cells):
        if cell in seen:
            continue
        far, region = _farthest(open_cells, cell, height, width)
        seen.update(region)
        end, spans = _farthest(open_cells, far, height, width)
        best = max(best, spans[end])
    return best


def solve(text: str) -> str:
    """Answer a count followed by that many ``columns rows`` grids."""
    tokens = iter(text.split())
    lines = []
    for _ in range(int(next(tokens, "0"))):
        width = int(next(tokens))
        height = int(next(tokens))
        rows = []
        for _ in range(height):
            row = next(tokens)
            if len(row) < width:
                raise ValueError(f"row {row!r} shorter than {width} columns")
            rows.append(row[:width])
        lines.append(f"Maximum rope length is {longest_rope(rows)}.\n")
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    sys.stdout.write(solve(text))
    return 0