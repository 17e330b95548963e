"""Work out which orders stay in effect after chains of cancellations."""

from __future__ import annotations

from collections.abc import Iterable

from spojkit.acpc10e import _run


def effective_orders(commands: Iterable[int | None]) -> list[int]:
    """Return the 1-based numbers of the orders still in effect.

    Each command is ``None`` for a declaration or the number of an earlier
    order that it cancels. Cancelling an order revives what that order
    cancelled, and so on down the chain.
    """
    active: dict[int, bool] = {}
    cancels: dict[int, int] = {}
    for number, target in enumerate(commands, start=1):
        active[number] = True
        if target is None:
            continue
        if not 1 <= target < number:
            raise ValueError(f"order {number} cannot cancel order {target}")
        cancels[number] = target
        node, cancelling = number, True
        while node in cancels:
            node = cancels[node]
            active[node] = not cancelling
            cancelling = not cancelling
    return [number for number, on in active.items() if on]


def solve(text: str) -> str:
    """Answer every scenario: the number of orders in effect, then their numbers."""
    tokens = iter(text.split())
    out = []
    for _ in range(int(next(tokens, "0"))):
        commands: list[int | None] = []
        for _ in range(int(next(tokens))):
            word = next(tokens)
            commands.append(None if word == "declare" else int(next(tokens)))
        remaining = effective_orders(commands)
        out.append(f"{len(remaining)}\n")
        out.append("".join(f"{number} " for number in remaining) + "\n")
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)