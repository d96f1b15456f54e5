"""Text rendering of a game for console play. Built only from engine queries."""
from typing import List

from .engine import Game
from .game_basics import SIZE

HEADER = "Tic Tac Toe\n-----------"
ROW_SEP = "---+---+---"


def render_grid(game: Game) -> str:
    lines: List[str] = []
    for r, row in enumerate(game.grid()):
        lines.append("|".join(f" {cell.symbol} " for cell in row))
        if r < SIZE - 1:
            lines.append(ROW_SEP)
    return "\n".join(lines)


def outcome_message(game: Game) -> str:
    """Announcement for a finished game, or "" while it is still running."""
    w = game.winner()
    if w is not None:
        return f"{game.name_of(w)} wins!"
    if game.is_draw():
        return "It's a draw!"
    return ""


def render_board(game: Game) -> str:
    text = f"{HEADER}\n{render_grid(game)}"
    msg = outcome_message(game)
    if msg:
        text += f"\n\n{msg}"
    return text


def render_indices() -> str:
    rows = ["  |  ".join(f"{r} {c}" for c in range(SIZE)) for r in range(SIZE)]
    body = "\n------+-------+------\n".join(f" {row} " for row in rows)
    return (
        "Have a look at the index representation before you start:\n"
        "______________________\n\n"
        f"{body}\n"
        "______________________\n\n"
    )
