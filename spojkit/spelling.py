"""Remove one mistyped letter from each word."""

from __future__ import annotations

from spojkit.acpc10e import _counted, _run


def remove_letter(word: str, position: int) -> str:
    """Return ``word`` without its letter at 1-based ``position``."""
    if not 1 <= position <= len(word):
        raise ValueError(f"position {position} outside word of length {len(word)}")
    return word[: position - 1] + word[position:]


def solve(text: str) -> str:
    """Answer a count followed by that many ``position word`` pairs."""
    tokens = iter(_counted(text, 2))
    return "".join(
        f"{number} {remove_letter(word, int(position))}\n"
        for number, (position, word) in enumerate(zip(tokens, tokens), start=1)
    )


def main(argv: list[str] | None = None) -> int:
    """Read the problem input from a file argument or standard input."""
    return _run(solve, argv)