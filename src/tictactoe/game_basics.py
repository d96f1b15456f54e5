"""
Game basics: marks, the eight lines, board serialization, winner/draw checks.
Teaching notes:
- A cell holds one of three marks: EMPTY, X or O. X moves first by default.
- Marks are distinct tags, never numbers to add up. A line is won only when
  all three of its cells hold the same mark.
- A flat board lists the 9 cells row by row; serialized it reads "0"=empty,
  "1"=X, "2"=O, e.g. "100020000".
"""
from enum import Enum
from typing import List, Optional, Sequence, Tuple

SIZE = 3


class Mark(Enum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def opponent(self) -> "Mark":
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opponent")

    @property
    def symbol(self) -> str:
        return " " if self is Mark.EMPTY else self.name

    @classmethod
    def parse(cls, text: str) -> "Mark":
        """Player mark from its symbol, case-insensitive ("x" -> Mark.X)."""
        key = text.strip().upper()
        if key not in ("X", "O"):
            raise ValueError(f"Unknown player mark: {text!r}")
        return cls[key]


PLAYER_MARKS = (Mark.X, Mark.O)

# rows, columns, then main and anti diagonal
LINES: List[Tuple[Tuple[int, int], ...]] = (
    [tuple((r, c) for c in range(SIZE)) for r in range(SIZE)]
    + [tuple((r, c) for r in range(SIZE)) for c in range(SIZE)]
    + [tuple((i, i) for i in range(SIZE)), tuple((SIZE - 1 - i, i) for i in range(SIZE))]
)

WIN_PATTERNS = [[r * SIZE + c for r, c in line] for line in LINES]


def serialize_board(board: Sequence[Mark]) -> str:
    return ''.join(str(cell.value) for cell in board)


def line_owned_by(board: Sequence[Mark], pattern: Sequence[int], mark: Mark) -> bool:
    return all(board[i] is mark for i in pattern)


def has_line(board: Sequence[Mark], mark: Mark) -> bool:
    return any(line_owned_by(board, pattern, mark) for pattern in WIN_PATTERNS)


def get_winner(board: Sequence[Mark]) -> Optional[Mark]:
    for mark in PLAYER_MARKS:
        if has_line(board, mark):
            return mark
    return None


def is_full(board: Sequence[Mark]) -> bool:
    return Mark.EMPTY not in board
