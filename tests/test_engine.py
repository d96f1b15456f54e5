import pytest

from tictactoe import (
    CellOccupiedError,
    Game,
    GameOverError,
    GameStatus,
    InvalidMoveError,
    Mark,
    OutOfBoundsError,
)

TOP_ROW_WIN = [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]
DRAW_SEQUENCE = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


def snapshot(game: Game):
    return game.serialize(), game.current_player, game.moves_played, game.history


def test_new_game_is_empty_with_x_to_move():
    g = Game()
    assert g.serialize() == "000000000"
    assert g.current_player is Mark.X
    assert g.moves_played == 0
    assert g.winner() is None
    assert not g.is_draw()
    assert not g.is_terminal()
    assert g.status() is GameStatus.IN_PROGRESS


def test_apply_move_places_mark_and_flips_turn():
    g = Game()
    assert g.apply_move(1, 2) is None
    assert g.cell(1, 2) is Mark.X
    assert g.current_player is Mark.O
    assert g.moves_played == 1
    g.apply_move(0, 0)
    assert g.cell(0, 0) is Mark.O
    assert g.current_player is Mark.X
    assert g.history == ((1, 2, Mark.X), (0, 0, Mark.O))


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5), (1.0, 1), (True, 0), ("1", 1)])
def test_out_of_bounds_leaves_state_unchanged(row, col):
    g = Game.from_moves([(1, 1)])
    before = snapshot(g)
    with pytest.raises(OutOfBoundsError) as exc:
        g.apply_move(row, col)
    assert isinstance(exc.value, InvalidMoveError)
    assert (exc.value.row, exc.value.col) == (row, col)
    assert snapshot(g) == before


def test_occupied_cell_rejected_and_turn_stays_with_second_player():
    g = Game()
    g.apply_move(0, 0)
    after_first = snapshot(g)
    with pytest.raises(CellOccupiedError):
        g.apply_move(0, 0)
    assert snapshot(g) == after_first
    assert g.current_player is Mark.O


def test_top_row_win_scenario():
    g = Game()
    for r, c in TOP_ROW_WIN:
        assert g.winner() is None
        g.apply_move(r, c)
    assert g.winner() is Mark.X
    assert g.check_win(Mark.X)
    assert not g.check_win(Mark.O)
    assert not g.is_draw()
    assert g.is_terminal()
    assert g.status() is GameStatus.X_WON
    assert g.winning_line() == ((0, 0), (0, 1), (0, 2))


def test_draw_scenario():
    g = Game()
    for r, c in DRAW_SEQUENCE:
        assert not g.is_terminal()
        g.apply_move(r, c)
    assert g.moves_played == 9
    assert g.winner() is None
    assert g.is_draw()
    assert g.is_terminal()
    assert g.status() is GameStatus.DRAW
    assert g.winning_line() is None
    assert g.legal_moves() == []


def test_o_wins_on_column():
    g = Game.from_moves([(0, 0), (0, 1), (2, 2), (1, 1), (1, 0), (2, 1)])
    assert g.winner() is Mark.O
    assert g.status() is GameStatus.O_WON
    assert g.winning_line() == ((0, 1), (1, 1), (2, 1))


def test_anti_diagonal_win():
    g = Game.from_moves([(2, 0), (0, 0), (1, 1), (0, 1), (0, 2)])
    assert g.winner() is Mark.X
    assert g.winning_line() == ((2, 0), (1, 1), (0, 2))


def test_win_on_last_move_is_a_win_not_a_draw():
    # X completes the main diagonal with the ninth mark
    g = Game.from_moves([(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (2, 0), (1, 2), (2, 1), (2, 2)])
    assert g.is_draw()
    assert g.winner() is Mark.X
    assert g.status() is GameStatus.X_WON


def test_moves_after_game_over_are_rejected():
    g = Game.from_moves(TOP_ROW_WIN)
    before = snapshot(g)
    with pytest.raises(GameOverError):
        g.apply_move(2, 2)
    assert snapshot(g) == before
    assert g.legal_moves() == []


def test_occupied_cell_after_game_over_reports_occupied():
    g = Game.from_moves(TOP_ROW_WIN)
    before = snapshot(g)
    with pytest.raises(CellOccupiedError):
        g.apply_move(0, 2)
    assert snapshot(g) == before


def test_check_win_rejects_empty_mark():
    with pytest.raises(ValueError):
        Game().check_win(Mark.EMPTY)


def test_queries_are_idempotent():
    g = Game.from_moves(TOP_ROW_WIN[:4])
    results = [(g.winner(), g.is_draw(), g.is_terminal(), g.serialize()) for _ in range(3)]
    assert results[0] == results[1] == results[2]


def test_reset_restores_initial_state():
    g = Game.from_moves(TOP_ROW_WIN)
    g.reset()
    assert g.serialize() == "000000000"
    assert g.moves_played == 0
    assert g.history == ()
    assert g.current_player is Mark.X
    assert not g.is_terminal()
    g.apply_move(0, 0)
    assert g.cell(0, 0) is Mark.X


def test_first_player_o():
    g = Game(first=Mark.O)
    g.apply_move(0, 0)
    assert g.cell(0, 0) is Mark.O
    assert g.current_player is Mark.X
    g.reset()
    assert g.current_player is Mark.O


def test_first_player_must_be_a_player_mark():
    with pytest.raises(ValueError):
        Game(first=Mark.EMPTY)


def test_snapshots_do_not_alias_engine_state():
    g = Game()
    grid = g.grid()
    board = g.board()
    g.apply_move(0, 0)
    assert grid[0][0] is Mark.EMPTY
    assert board[0] is Mark.EMPTY
    assert g.grid()[0][0] is Mark.X
    assert len(g.grid()) == 3 and all(len(row) == 3 for row in g.grid())


def test_legal_moves_row_major():
    g = Game.from_moves([(0, 0), (1, 1)])
    assert g.legal_moves() == [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)]


def test_cell_bounds_checked():
    with pytest.raises(OutOfBoundsError):
        Game().cell(3, 0)


def test_from_moves_propagates_errors():
    with pytest.raises(CellOccupiedError):
        Game.from_moves([(0, 0), (0, 0)])


def test_name_of_falls_back_to_symbol():
    g = Game(names={Mark.X: "Ada"})
    assert g.name_of(Mark.X) == "Ada"
    assert g.name_of(Mark.O) == "O"
