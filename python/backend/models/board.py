"""Board model for the 15-puzzle.

A board is packed into a single 64-bit integer: cell ``i`` (row-major,
``0..15``) lives in bits ``4*i .. 4*i + 3``.  Tile ``t`` is stored as
``t - 1`` and the blank as ``15``, so the solved board reads
``0xFEDCBA9876543210`` and is the largest of all packed values.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

SIZE = 4
CELLS = SIZE * SIZE
BLANK = 15  # internal value of the blank cell

_ROW_SEP = "--+--+--+--"


class InvalidBoardError(ValueError):
    """Raised when external input does not describe a 4×4 board."""


class UnsolvableBoardError(ValueError):
    """Raised for a board outside the solved state's reachability class."""


class Direction(StrEnum):
    """Where the *blank* moves.  ``END`` terminates the cycle and never moves."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    END = "end"

    def next(self) -> Direction:
        return _NEXT[self]

    def previous(self) -> Direction:
        return _PREVIOUS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


_NEXT = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.END,
    Direction.END: Direction.END,
}
_PREVIOUS = {
    Direction.UP: Direction.END,
    Direction.RIGHT: Direction.UP,
    Direction.DOWN: Direction.RIGHT,
    Direction.LEFT: Direction.DOWN,
    Direction.END: Direction.LEFT,
}

MOVES: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)

_MANHATTAN = [
    [abs((a & 3) - (b & 3)) + abs((a >> 2) - (b >> 2)) for b in range(CELLS)]
    for a in range(CELLS)
]


@lru_cache(maxsize=64)
def _positions(code: int) -> tuple[int, ...]:
    """Cell index of every value on the packed board *code*."""
    where = [0] * CELLS
    for pos in range(CELLS):
        where[(code >> (4 * pos)) & 15] = pos
    return tuple(where)


@dataclass(frozen=True, order=True)
class BoardState:
    """Immutable 4×4 board.  Ordered and hashed by its packed ``code``."""

    code: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_cells(cls, cells: list[int]) -> BoardState:
        """Pack internal cell values (``0..14`` tiles, ``15`` blank)."""
        code = 0
        for i, v in enumerate(cells):
            code |= v << (4 * i)
        return cls(code)

    @classmethod
    def from_tiles(cls, tiles: list[int]) -> BoardState:
        """Create a board from a flat row-major tile list, ``0`` for the blank.

        Example::

            BoardState.from_tiles([1, 2, 3, 4, 5, 6, 7, 8,
                                   9, 10, 11, 12, 13, 14, 0, 15])
        """
        if len(tiles) != CELLS:
            raise InvalidBoardError(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(tiles)}."
            )
        for v in tiles:
            if not isinstance(v, int) or isinstance(v, bool):
                raise InvalidBoardError(f"Tile {v!r} is not an integer.")
            if not 0 <= v < CELLS:
                raise InvalidBoardError(
                    f"Tile {v} is out of range 0..{CELLS - 1}."
                )
        if len(set(tiles)) != CELLS:
            dupes = sorted(v for v, n in Counter(tiles).items() if n > 1)
            missing = sorted(set(range(CELLS)) - set(tiles))
            raise InvalidBoardError(
                f"Duplicate tiles {dupes}, missing tiles {missing}."
            )
        return cls.from_cells([BLANK if v == 0 else v - 1 for v in tiles])

    @classmethod
    def parse(cls, text: str) -> BoardState:
        """Parse 16 whitespace-separated integers, ``0`` for the blank."""
        tokens = text.split()
        if len(tokens) != CELLS:
            raise InvalidBoardError(
                f"Expected {CELLS} numbers, got {len(tokens)}."
            )
        tiles: list[int] = []
        for token in tokens:
            try:
                tiles.append(int(token))
            except ValueError:
                raise InvalidBoardError(f"{token!r} is not a number.") from None
        return cls.from_tiles(tiles)

    # -- queries --------------------------------------------------------------

    def cell(self, index: int) -> int:
        """Internal value stored at *index*."""
        return (self.code >> (4 * index)) & 15

    def cells(self) -> list[int]:
        return [(self.code >> (4 * i)) & 15 for i in range(CELLS)]

    def to_tiles(self) -> list[int]:
        return [0 if v == BLANK else v + 1 for v in self.cells()]

    def tile_at(self, row: int, col: int) -> int:
        v = self.cell(row * SIZE + col)
        return 0 if v == BLANK else v + 1

    def blank_index(self) -> int:
        for i in range(CELLS):
            if (self.code >> (4 * i)) & 15 == BLANK:
                return i
        raise RuntimeError(f"Board {self.code:#018x} has no blank cell.")

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index(), SIZE)

    @property
    def is_solved(self) -> bool:
        return self == SOLVED

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if the value at (row, col) sits in its goal position."""
        return self.cell(row * SIZE + col) == row * SIZE + col

    def is_solvable(self) -> bool:
        """Return True if the solved board is reachable from this one."""
        flat = [v for v in self.cells() if v != BLANK]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        blank_row_from_bottom = SIZE - 1 - self.blank_index() // SIZE
        return (inversions + blank_row_from_bottom) % 2 == 0

    # -- transformations ------------------------------------------------------

    def swap(self, i: int, j: int) -> BoardState:
        vi = self.cell(i)
        vj = self.cell(j)
        code = self.code & ~((15 << (4 * i)) | (15 << (4 * j)))
        code |= (vj << (4 * i)) | (vi << (4 * j))
        return BoardState(code)

    def apply(self, direction: Direction) -> BoardState:
        """Move the blank one cell.  Returns ``self`` when the move is off-grid."""
        hole = self.blank_index()
        row, col = divmod(hole, SIZE)

        if direction is Direction.UP:
            return self if row == 0 else self.swap(hole, hole - SIZE)
        if direction is Direction.DOWN:
            return self if row == SIZE - 1 else self.swap(hole, hole + SIZE)
        if direction is Direction.LEFT:
            return self if col == 0 else self.swap(hole, hole - 1)
        if direction is Direction.RIGHT:
            return self if col == SIZE - 1 else self.swap(hole, hole + 1)
        return self

    def heuristic_distance(self, target: BoardState) -> int:
        """Half the summed Manhattan distance of every cell to *target*.

        The blank is counted like a tile, so each move changes the sum by
        two; halving keeps the score in move units.
        """
        where = _positions(target.code)
        code = self.code
        total = 0
        for pos in range(CELLS):
            total += _MANHATTAN[pos][where[(code >> (4 * pos)) & 15]]
        return total // 2

    # -- rendering ------------------------------------------------------------

    def render(self) -> str:
        tiles = self.to_tiles()
        rows = [
            "|".join(f"{v:02d}" for v in tiles[r * SIZE : (r + 1) * SIZE])
            for r in range(SIZE)
        ]
        return f"\n{_ROW_SEP}\n".join(rows)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"BoardState({self.code:#018x})"


SOLVED = BoardState(0xFEDCBA9876543210)
