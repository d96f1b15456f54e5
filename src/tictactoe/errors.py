"""Move rejection errors raised by :class:`tictactoe.engine.Game`.

Every error is raised before the game is touched, so callers can catch
``InvalidMoveError`` and ask the same player again.
"""
from __future__ import annotations


class InvalidMoveError(ValueError):
    reason = "Invalid move"

    def __init__(self, row: object, col: object, message: str | None = None) -> None:
        self.row = row
        self.col = col
        super().__init__(message or f"{self.reason}: ({row}, {col})")


class OutOfBoundsError(InvalidMoveError):
    reason = "Invalid board position"


class CellOccupiedError(InvalidMoveError):
    reason = "Board position occupied"


class GameOverError(InvalidMoveError):
    reason = "Game is already over"
