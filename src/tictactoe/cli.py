from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from .config import Settings, load_settings
from .engine import Game
from .errors import InvalidMoveError
from .render import render_board, render_indices


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_play = sub.add_parser("play", help="Play a two-player game on the console")
    p_play.add_argument("--player-x", default=None, help="Display name for X (env: TTT_PLAYER_X)")
    p_play.add_argument("--player-o", default=None, help="Display name for O (env: TTT_PLAYER_O)")
    p_play.add_argument(
        "--first", choices=["X", "O", "x", "o"], default=None, help="Mark that moves first (env: TTT_FIRST)"
    )

    p_rep = sub.add_parser("replay", help="Apply a list of moves and print the resulting board")
    p_rep.add_argument("--moves", required=True, help='Space-separated row,col pairs, e.g. "0,0 1,1 2,2"')
    p_rep.add_argument(
        "--first", choices=["X", "O", "x", "o"], default=None, help="Mark that moves first (env: TTT_FIRST)"
    )

    return p


def parse_move(text: str) -> Tuple[int, int]:
    """Parse "1 2" or "1,2" into (row, col). Raises ValueError otherwise."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected row and column, got {text!r}")
    return int(parts[0]), int(parts[1])


def parse_moves(text: str) -> List[Tuple[int, int]]:
    return [parse_move(tok) for tok in text.split()]


def play(game: Game, stdin: TextIO, stdout: TextIO) -> int:
    """Console loop: prompt until the game ends. Returns 1 if input runs out."""
    print(render_indices(), file=stdout)
    while not game.is_terminal():
        print(render_board(game), file=stdout)
        mark = game.current_player
        stdout.write(
            f"{game.name_of(mark)} ({mark.symbol}), enter row and column (0-2), e.g. 1 2: "
        )
        stdout.flush()
        line = stdin.readline()
        if not line:
            print("", file=stdout)
            logging.error("Input ended before the game was over.")
            return 1
        try:
            row, col = parse_move(line)
            game.apply_move(row, col)
        except ValueError as e:
            logging.debug("rejected: %s", e)
            print("Invalid move. Try again.", file=stdout)
    print(render_board(game), file=stdout)
    return 0


def _settings_or_error(ns: argparse.Namespace) -> Optional[Settings]:
    try:
        return load_settings(
            player_x=getattr(ns, "player_x", None),
            player_o=getattr(ns, "player_o", None),
            first=ns.first,
        )
    except ValueError as e:
        logging.error("%s", e)
        return None


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe"))
        except Exception:
            print("unknown")
        return 0

    if ns.cmd == "play":
        settings = _settings_or_error(ns)
        if settings is None:
            return 2
        game = Game(first=settings.first, names=settings.names())
        return play(game, sys.stdin, sys.stdout)

    if ns.cmd == "replay":
        settings = _settings_or_error(ns)
        if settings is None:
            return 2
        try:
            moves = parse_moves(ns.moves)
        except ValueError:
            logging.error("Invalid move list. Use row,col pairs such as \"0,0 1,1\".")
            return 2
        game = Game(first=settings.first, names=settings.names())
        for n, (row, col) in enumerate(moves, start=1):
            try:
                game.apply_move(row, col)
            except InvalidMoveError as e:
                logging.error("Move %d rejected: %s", n, e)
                return 2
        print(render_board(game))
        logging.info(
            "status=%s moves=%d board=%s",
            game.status().value,
            game.moves_played,
            game.serialize(),
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
