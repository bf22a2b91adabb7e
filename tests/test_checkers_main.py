import io

import pytest

from consolegames.checkers_main import main


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main()
    return code, capsys.readouterr().out


def test_empty_input_ends_with_error_code(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "")
    assert code == 1
    assert "It's White's turn." in out
    assert "Enter coordinates: " in out


def test_incomplete_move_ends_with_error_code(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2 1 3\n")
    assert code == 1
    assert "Invalid move." not in out


def test_non_number_input_is_reported(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2 x 3 0\n")
    assert code == 1
    assert "expected a number" in out


def test_invalid_move_keeps_turn(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2 1 2 2\n")
    assert code == 1
    assert "Invalid move." in out
    assert "It's White's turn" in out
    assert "It's Blue's turn." not in out


def test_blue_cannot_move_first(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "5 0 4 1\n")
    assert code == 1
    assert "Invalid move." in out


def test_simple_move_passes_turn(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2 1 3 0\n")
    assert code == 1
    assert "It's Blue's turn." in out
    assert "White has 12 pieces" in out
    assert "Blue has 12 pieces" in out
    assert "Invalid move." not in out


def test_capture_removes_blue_piece(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2 1 3 2\n5 4 4 3\n3 2 5 4\n")
    assert code == 1
    assert "5, 4" in out
    assert "Blue has 11 pieces" in out
    assert "White has 12 pieces" in out
    assert out.count("It's Blue's turn.") == 2


def test_missed_capture_costs_a_piece(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2 1 3 2\n5 4 4 3\n2 5 3 4\n")
    assert code == 1
    assert "White has 11 pieces" in out
    assert "Blue has 12 pieces" in out


@pytest.mark.parametrize("move", ["9 9 8 8", "-1 0 0 1"])
def test_out_of_board_move_is_invalid(monkeypatch, capsys, move):
    code, out = _run(monkeypatch, capsys, move + "\n")
    assert code == 1
    assert "Invalid move." in out