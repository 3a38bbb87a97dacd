"""One-move neighbors of a board, in ``UP, RIGHT, DOWN, LEFT`` order."""

from __future__ import annotations

from backend.models.board import BoardState, Direction


class Neighbors:
    """Iterator over the boards one blank move away from *center*.

    Moves that would push the blank off the grid are skipped.  After each
    yielded board, :attr:`direction` names the move that produced it.
    """

    def __init__(self, center: BoardState, start: Direction = Direction.UP) -> None:
        self.center = center
        self._next_dir = start

    def __iter__(self) -> Neighbors:
        return self

    def __next__(self) -> BoardState:
        while self._next_dir is not Direction.END:
            candidate = self.center.apply(self._next_dir)
            self._next_dir = self._next_dir.next()
            if candidate != self.center:
                return candidate
        raise StopIteration

    @property
    def direction(self) -> Direction:
        return self._next_dir.previous()


def neighbors(center: BoardState) -> Neighbors:
    return Neighbors(center)
