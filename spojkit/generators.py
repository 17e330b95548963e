"""Random test inputs for the problem solvers."""

from __future__ import annotations

import argparse
import random
import string
from collections.abc import Callable

_BEADS_CASES = 1000
_BEADS_LENGTH = 10001
_NUMBER_CASES = 200000
_NUMBER_LIMIT = 500000
_TRIP_CASES = 10
_TRIP_LENGTH = 80


def _letters(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_lowercase, k=length))


def beads_input(rng: random.Random) -> str:
    """A necklace input: one all-``a`` necklace of full length, then random ones."""
    count = _BEADS_CASES // 2 + rng.randrange(_BEADS_CASES) // 2
    lines = [str(count), "a" * _BEADS_LENGTH]
    lines.extend(
        _letters(rng, 1 + rng.randrange(_BEADS_LENGTH)) for _ in range(count - 1)
    )
    return "\n".join(lines) + "\n"


def divsum_input(rng: random.Random) -> str:
    """A list of large numbers, one per line, with no leading count."""
    count = _NUMBER_CASES // 2 + rng.randrange(_NUMBER_CASES) // 2
    return "".join(
        f"{_NUMBER_LIMIT // 2 + rng.randrange(_NUMBER_LIMIT) // 2}\n" for _ in range(count)
    )


def trip_input(rng: random.Random) -> str:
    """A count, a blank line, then pairs of random lower-case strings."""
    count = _TRIP_CASES // 2 + rng.randrange(_TRIP_CASES) // 2
    lines = [str(count), ""]
    for _ in range(count - 1):
        for _ in range(2):
            lines.append(_letters(rng, _TRIP_LENGTH // 2 + rng.randrange(_TRIP_LENGTH) // 2))
    return "\n".join(lines) + "\n"


_GENERATORS: dict[str, Callable[[random.Random], str]] = {
    "beads": beads_input,
    "divsum": divsum_input,
    "acpc10e": divsum_input,
    "trip": trip_input,
}


def main(argv: list[str] | None = None) -> int:
    """Write a random input for the chosen problem to a file."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("problem", choices=sorted(_GENERATORS))
    parser.add_argument("-o", "--output", default="test", help="file to write")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    text = _GENERATORS[args.problem](random.Random(args.seed))
    with open(args.output, "w", encoding="utf-8") as handle:
        handle.write(text)
    return 0