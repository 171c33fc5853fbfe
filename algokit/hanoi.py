"""Tower of Hanoi move generation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """Moving disc number ``disc`` from peg ``source`` to peg ``target``."""

    disc: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"move disc {self.disc} from {self.source} to {self.target}"


def hanoi_moves(
    discs: int,
    source: str = "s",
    target: str = "d",
    auxiliary: str = "a",
) -> Iterator[Move]:
    """Yield the moves that carry ``discs`` discs from ``source`` to ``target``.

    Disc 1 is the smallest. A count of zero or less yields nothing.
    """
    if discs <= 0:
        return
    yield from hanoi_moves(discs - 1, source, auxiliary, target)
    yield Move(discs, source, target)
    yield from hanoi_moves(discs - 1, auxiliary, target, source)