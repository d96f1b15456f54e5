"""
Game engine: grid and turn state, move application, outcome queries.
Teaching notes:
- The grid is a flat list of 9 marks in row-major order; (row, col) maps to
  row * 3 + col.
- Only apply_move and reset change state. A rejected move changes nothing.
- Outcome queries are pure: asking twice without a move gives the same answer.
- Report winner() before is_draw(): a full grid with a line is a win.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import CellOccupiedError, GameOverError, OutOfBoundsError
from .game_basics import (
    LINES,
    PLAYER_MARKS,
    SIZE,
    WIN_PATTERNS,
    Mark,
    get_winner,
    has_line,
    is_full,
    line_owned_by,
    serialize_board,
)

log = logging.getLogger(__name__)

Move = Tuple[int, int]


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"


def _in_range(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and 0 <= v < SIZE


class Game:
    """A single tic-tac-toe game between two players.

    ``first`` is the mark that opens the game and moves first again after
    every :meth:`reset`. ``names`` optionally maps marks to display names.
    """

    def __init__(self, first: Mark = Mark.X, names: Optional[Dict[Mark, str]] = None) -> None:
        if first not in PLAYER_MARKS:
            raise ValueError(f"First player must be X or O, got {first!r}")
        self.first = first
        self.names: Dict[Mark, str] = dict(names or {})
        self._board: List[Mark] = []
        self._current = first
        self._history: List[Tuple[int, int, Mark]] = []
        self.reset()

    @classmethod
    def from_moves(cls, moves: Iterable[Move], first: Mark = Mark.X) -> "Game":
        game = cls(first=first)
        for row, col in moves:
            game.apply_move(row, col)
        return game

    # -- lifecycle -----------------------------------------------------------

    def reset(self) -> None:
        self._board = [Mark.EMPTY] * (SIZE * SIZE)
        self._current = self.first
        self._history = []
        log.debug("reset: %s to move", self.first.symbol)

    def apply_move(self, row: int, col: int) -> None:
        if not (_in_range(row) and _in_range(col)):
            raise OutOfBoundsError(row, col)
        idx = row * SIZE + col
        if self._board[idx] is not Mark.EMPTY:
            raise CellOccupiedError(row, col)
        if self.is_terminal():
            raise GameOverError(row, col)
        mark = self._current
        self._board[idx] = mark
        self._history.append((row, col, mark))
        self._current = mark.opponent
        log.debug("move %d: %s at (%d, %d)", len(self._history), mark.symbol, row, col)
        if self.is_terminal():
            log.debug("game over: %s", self.status().value)

    # -- outcome queries ---------------------------------------------------

    def check_win(self, mark: Mark) -> bool:
        if mark not in PLAYER_MARKS:
            raise ValueError(f"Can only check a player mark, got {mark!r}")
        return has_line(self._board, mark)

    def winner(self) -> Optional[Mark]:
        return get_winner(self._board)

    def is_draw(self) -> bool:
        return is_full(self._board)

    def is_terminal(self) -> bool:
        return self.winner() is not None or self.is_draw()

    def status(self) -> GameStatus:
        w = self.winner()
        if w is Mark.X:
            return GameStatus.X_WON
        if w is Mark.O:
            return GameStatus.O_WON
        if self.is_draw():
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    def winning_line(self) -> Optional[Tuple[Move, ...]]:
        w = self.winner()
        if w is None:
            return None
        for line, pattern in zip(LINES, WIN_PATTERNS):
            if line_owned_by(self._board, pattern, w):
                return line
        return None

    # -- state queries -------------------------------------------------------

    @property
    def current_player(self) -> Mark:
        return self._current

    @property
    def moves_played(self) -> int:
        return len(self._history)

    @property
    def history(self) -> Tuple[Tuple[int, int, Mark], ...]:
        return tuple(self._history)

    def cell(self, row: int, col: int) -> Mark:
        if not (_in_range(row) and _in_range(col)):
            raise OutOfBoundsError(row, col)
        return self._board[row * SIZE + col]

    def board(self) -> Tuple[Mark, ...]:
        return tuple(self._board)

    def grid(self) -> Tuple[Tuple[Mark, ...], ...]:
        return tuple(tuple(self._board[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))

    def serialize(self) -> str:
        return serialize_board(self._board)

    def legal_moves(self) -> List[Move]:
        if self.is_terminal():
            return []
        return [divmod(i, SIZE) for i, v in enumerate(self._board) if v is Mark.EMPTY]

    def name_of(self, mark: Mark) -> str:
        return self.names.get(mark) or mark.symbol

    def __repr__(self) -> str:
        return f"Game(board={self.serialize()!r}, to_move={self._current.symbol})"
