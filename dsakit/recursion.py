"""Small recursive routines: counting up and the Tower of Hanoi."""

from __future__ import annotations


def count_up(n: int) -> list[int]:
    """Return the numbers 1 to ``n`` in ascending order."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(range(1, n + 1))


def tower_of_hanoi(
    n: int, source: str, helper: str, destination: str
) -> list[tuple[int, str, str]]:
    """Return the moves ``(disc, from_peg, to_peg)`` that shift ``n`` discs.

    Disc 1 is the smallest.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    moves: list[tuple[int, str, str]] = []

    def solve(discs: int, src: str, via: str, dst: str) -> None:
        if discs == 1:
            moves.append((1, src, dst))
            return
        solve(discs - 1, src, dst, via)
        moves.append((discs, src, dst))
        solve(discs - 1, via, src, dst)

    solve(n, source, helper, destination)
    return moves