"""tictactoe package.

Game engine for two-player tic-tac-toe, text rendering, and a console CLI.

Convenience imports are exposed for common workflows.
"""

from .engine import Game, GameStatus
from .errors import CellOccupiedError, GameOverError, InvalidMoveError, OutOfBoundsError
from .game_basics import Mark

__all__ = [
    "Game",
    "GameStatus",
    "Mark",
    "InvalidMoveError",
    "OutOfBoundsError",
    "CellOccupiedError",
    "GameOverError",
]
