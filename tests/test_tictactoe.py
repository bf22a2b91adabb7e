import random

import pytest

from consolegames.tictactoe import (
    EMPTY,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Board,
    Game,
    Position,
)


@pytest.fixture
def game():
    g = Game("alice", "bob", rng=random.Random(0))
    g.init_board()
    return g


def _marks(game, mark):
    return [(i, j) for i, row in enumerate(game.grid) for j, v in enumerate(row) if v == mark]


def test_init_board_layout():
    board = Board()
    board.init_board()
    assert board.grid[1] == ["-"] * 5
    assert board.grid[3] == ["-"] * 5
    assert board.grid[0] == [EMPTY, "|", EMPTY, "|", EMPTY]


def test_valid_move_only_on_free_cells(game):
    assert game.valid_move(Position(0, 0))
    assert not game.valid_move(Position(0, 1))
    assert not game.valid_move(Position(1, 0))


def test_move_places_mark_and_counts(game):
    assert game.move(Position(2, 2))
    assert game.grid[2][2] == "X"
    assert game.moves == 1
    assert not game.move(Position(2, 2))
    assert game.moves == 1


def test_x_won_on_row(game):
    for col in (0, 2, 4):
        game.move(Position(4, col))
    assert game.x_won()
    assert not game.o_won()
    assert game.game_over()


def test_o_won_on_diagonal(game):
    game.current_player = "O"
    for pos in (Position(0, 4), Position(2, 2), Position(4, 0)):
        game.move(pos)
    assert game.o_won()


def test_switch_players(game, capsys):
    game.switch_players()
    assert game.current_player == "O"
    assert "It's bob's turn." in capsys.readouterr().out
    game.switch_players()
    assert game.current_player == "X"
    assert "It's alice's turn." in capsys.readouterr().out


def test_no_switch_after_game_over(game):
    for col in (0, 2, 4):
        game.move(Position(0, col))
    game.switch_players()
    assert game.current_player == "X"


def test_cursor_moves_and_stays_in_bounds(game):
    game.update_cursor(KEY_UP)
    game.update_cursor(KEY_UP)
    game.update_cursor(KEY_UP)
    assert game.cursor == Position(0, 2)
    game.update_cursor(KEY_RIGHT)
    game.update_cursor(KEY_RIGHT)
    assert game.cursor == Position(0, 4)
    game.update_cursor(KEY_DOWN)
    game.update_cursor(KEY_LEFT)
    assert game.cursor == Position(2, 2)


def test_unknown_key_leaves_cursor(game):
    game.update_cursor(ord("q"))
    assert game.cursor == Position(2, 2)


def test_block_fills_gap_in_row(game):
    game.grid[0][0] = "X"
    game.grid[0][4] = "X"
    assert game.block()
    assert game.grid[0][2] == "O"
    assert game.already_moved


def test_block_without_threat(game):
    game.grid[0][0] = "X"
    assert not game.block()
    assert _marks(game, "O") == []


def test_win_completes_row(game):
    game.grid[2][0] = "O"
    game.grid[2][2] = "O"
    assert game.win()
    assert game.grid[2][4] == "O"
    assert game.o_won()


def test_hard_prefers_win_over_block(game):
    game.grid[0][0] = "X"
    game.grid[0][2] = "X"
    game.grid[4][0] = "O"
    game.grid[4][2] = "O"
    game.comp_move("hard")
    assert game.o_won()
    assert game.grid[0][4] == EMPTY


def test_medium_blocks(game):
    game.grid[0][0] = "X"
    game.grid[2][0] = "X"
    game.comp_move("medium")
    assert game.grid[4][0] == "O"
    assert len(_marks(game, "O")) == 1


def test_easy_places_one_mark(game):
    game.move(Position(2, 2))
    game.comp_move("easy")
    assert len(_marks(game, "O")) == 1
    assert game.moves == 2


def test_comp_move_counts_even_when_board_full(game):
    for i in (0, 2, 4):
        for j in (0, 2, 4):
            game.grid[i][j] = "X"
    game.comp_move("easy")
    assert game.moves == 1
    assert _marks(game, "O") == []


def test_render_shape_and_cursor(game):
    text = game.render(Position(2, 2))
    lines = text.splitlines()
    assert len(lines) == 7
    assert "|-----|" in lines[0]
    assert text.count("*") == 1


def test_render_hides_cursor_under_mark(game, capsys):
    game.move(Position(2, 2))
    game.show_board(Position(2, 2))
    out = capsys.readouterr().out
    assert "*" not in out
    assert "X" in out