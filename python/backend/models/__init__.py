from backend.models.board import (
    SOLVED,
    BoardState,
    Direction,
    InvalidBoardError,
    UnsolvableBoardError,
)

__all__ = [
    "SOLVED",
    "BoardState",
    "Direction",
    "InvalidBoardError",
    "UnsolvableBoardError",
]
