"""15-puzzle solver — meet-in-the-middle best-first search.

Two frontiers grow out of one shared heap: one rooted at the start board,
one at the solved board.  Each candidate is scored by its root distance
plus the heuristic distance to the *opposite* root.  The search stops as
soon as a popped board is already owned by the other side, then splices
the two predecessor chains into one path.

The result is usually short but not guaranteed to be optimal.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from enum import StrEnum

from backend.engine.gamesolver.neighbors import neighbors
from backend.models.board import SOLVED, BoardState, Direction, UnsolvableBoardError

logger = logging.getLogger(__name__)


class Side(StrEnum):
    START = "start"
    GOAL = "goal"


@dataclass(frozen=True)
class _Node:
    dist: int
    prev: BoardState
    side: Side


# ======================================================================
#  Path reconstruction
# ======================================================================

def _chain(board: BoardState, table: dict[BoardState, _Node]) -> list[BoardState]:
    """Walk predecessor links from *board* back to its root (inclusive)."""
    chain = [board]
    while table[chain[-1]].prev != chain[-1]:
        chain.append(table[chain[-1]].prev)
    return chain


def _join(
    middle: BoardState, other: BoardState, table: dict[BoardState, _Node]
) -> list[BoardState]:
    first = _chain(middle, table)
    second = _chain(other, table)

    # The solved board is the largest packed value, so the chain ending
    # at the higher root is the goal half.
    if second[-1] > first[-1]:
        first.reverse()
        return first + second
    second.reverse()
    return second + first


# ======================================================================
#  Search
# ======================================================================

def solve(start: BoardState) -> list[BoardState]:
    """Return boards from *start* to the solved board, both inclusive."""
    if start == SOLVED:
        return [start]
    if not start.is_solvable():
        raise UnsolvableBoardError(
            f"Board {start!r} cannot reach the solved arrangement."
        )

    targets = {Side.START: SOLVED, Side.GOAL: start}
    table: dict[BoardState, _Node] = {
        start: _Node(0, start, Side.START),
        SOLVED: _Node(0, SOLVED, Side.GOAL),
    }

    heap: list[tuple[int, BoardState, BoardState]] = []
    for root, target in ((start, SOLVED), (SOLVED, start)):
        for nb in neighbors(root):
            heapq.heappush(heap, (1 + nb.heuristic_distance(target), nb, root))

    logger.debug("search start=%r seeded=%d", start, len(heap))
    expanded = 0

    while heap:
        _, board, prev = heapq.heappop(heap)
        prev_node = table[prev]

        owner = table.get(board)
        if owner is not None:
            if owner.side != prev_node.side:
                path = _join(board, prev, table)
                logger.debug(
                    "frontiers met after %d expansions (visited=%d, heap=%d), "
                    "path has %d moves",
                    expanded, len(table), len(heap), len(path) - 1,
                )
                return path
            continue

        dist = prev_node.dist + 1
        table[board] = _Node(dist, prev, prev_node.side)
        expanded += 1
        target = targets[prev_node.side]

        for nb in neighbors(board):
            seen = table.get(nb)
            if seen is None or seen.side != prev_node.side:
                heapq.heappush(
                    heap, (dist + 1 + nb.heuristic_distance(target), nb, board)
                )

    raise RuntimeError(
        f"Search exhausted without the frontiers meeting (start={start!r})."
    )


# ======================================================================
#  Path → moves
# ======================================================================

def _direction(first: BoardState, second: BoardState) -> Direction:
    it = neighbors(first)
    for nb in it:
        if nb == second:
            return it.direction
    logger.warning("boards %r and %r are not one move apart", first, second)
    return Direction.END


def moves_for(path: list[BoardState]) -> list[Direction]:
    """Translate consecutive boards of *path* into blank moves."""
    return [_direction(path[i - 1], path[i]) for i in range(1, len(path))]


# ======================================================================
#  Public API
# ======================================================================

class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def path(board: BoardState) -> list[BoardState]:
        return solve(board)

    @staticmethod
    def moves(board: BoardState) -> list[Direction]:
        """Return a move sequence that solves *board* (``[]`` if solved)."""
        return moves_for(solve(board))

    @staticmethod
    def hint(board: BoardState) -> Direction | None:
        """Return the next move towards the solution, or ``None`` if solved."""
        if board.is_solved:
            return None
        moves = Solver.moves(board)
        return moves[0] if moves else None
