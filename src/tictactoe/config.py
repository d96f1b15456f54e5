"""Player settings for console play.

Environment-first: TTT_PLAYER_X, TTT_PLAYER_O and TTT_FIRST supply the
defaults; command-line flags override them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .game_basics import Mark


@dataclass
class Settings:
    player_x: str = "X"
    player_o: str = "O"
    first: Mark = Mark.X

    def names(self) -> dict[Mark, str]:
        return {Mark.X: self.player_x, Mark.O: self.player_o}


def load_settings(
    player_x: str | None = None,
    player_o: str | None = None,
    first: str | None = None,
) -> Settings:
    """Resolve settings: explicit argument -> environment -> default.

    Raises ValueError when the starting mark is neither X nor O.
    """
    s = Settings()
    x = player_x or os.getenv("TTT_PLAYER_X")
    o = player_o or os.getenv("TTT_PLAYER_O")
    f = first or os.getenv("TTT_FIRST")
    if x:
        s.player_x = x.strip()
    if o:
        s.player_o = o.strip()
    if f:
        s.first = Mark.parse(f)
    return s
