import io

import pytest

from consolegames.tictactoe import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP
from consolegames.tictactoe_main import ENTER, main, read_key

U = "\x1b[A"
D = "\x1b[B"
R = "\x1b[C"
L = "\x1b[D"
E = "\n"


def _run(monkeypatch, capsys, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main()
    return code, capsys.readouterr().out


def test_read_key_decodes_keys(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(U + D + R + L + "\n\rq"))
    keys = [read_key() for _ in range(7)]
    assert keys == [KEY_UP, KEY_DOWN, KEY_RIGHT, KEY_LEFT, ENTER, ENTER, ord("q")]


def test_read_key_at_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(EOFError):
        read_key()


def test_multiplayer_x_wins_diagonal(monkeypatch, capsys):
    keys = E + U + E + L + E + R + R + E + D + D + E
    code, out = _run(monkeypatch, capsys, "m\nalice\nbob\n" + keys)
    assert code == 0
    assert "alice Won!" in out
    assert "bob Won!" not in out


def test_multiplayer_draw(monkeypatch, capsys):
    keys = (
        U + L + E
        + D + R + E
        + U + E
        + R + E
        + D + D + L + L + E
        + U + E
        + R + R + E
        + D + L + E
        + R + E
    )
    code, out = _run(monkeypatch, capsys, "m\nalice\nbob\n" + keys)
    assert code == 0
    assert "It is a draw!" in out
    assert "Won!" not in out


def test_multiplayer_rejects_occupied_cell(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "m\nalice\nbob\n" + E + E)
    assert code == 1
    assert "Invalid move, try again!" in out
    assert "It's bob's turn. " in out


def test_unknown_mode(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "x\n")
    assert code == 0
    assert "Type 'Multiplayer' or 'Single Player'." in out


def test_single_player_asks_again_for_difficulty(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "s\nimpossible\nhard\n")
    assert code == 1
    assert out.count("Type 'easy', 'medium' or 'hard'.") == 1
    assert "|-----|" in out


def test_single_player_computer_answers_move(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "s\neasy\n" + E)
    assert code == 1
    assert "It's your turn." in out
    assert "\x1b[34mO\x1b[0m" in out