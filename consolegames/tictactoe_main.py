"""Console tic-tac-toe driven by arrow keys and Enter."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Callable

from consolegames.tictactoe import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP, Game

ENTER = 13
ESCAPE = 27
_DIFFICULTIES = ("easy", "medium", "hard")
_ARROWS = {"A": KEY_UP, "B": KEY_DOWN, "C": KEY_RIGHT, "D": KEY_LEFT}

_GREEN = "\033[32m"
_RED = "\033[31m"
_BLUE = "\033[34m"
_RESET = "\033[0m"
_CLEAR = "\033[2J\033[H"


def _decode(read: Callable[[], str]) -> int:
    char = read()
    if not char:
        raise EOFError
    if char == "\x03":
        raise KeyboardInterrupt
    if char in ("\r", "\n"):
        return ENTER
    if char == "\x1b":
        if read() == "[":
            return _ARROWS.get(read(), ESCAPE)
        return ESCAPE
    return ord(char)


def read_key() -> int:
    """Read one key press; arrows give the codes the game understands."""
    stream = sys.stdin
    if not stream.isatty():
        return _decode(lambda: stream.read(1))
    if sys.platform == "win32":
        import msvcrt

        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            return ord(msvcrt.getwch())
        if char == "\x03":
            raise KeyboardInterrupt
        return ENTER if char == "\r" else ord(char)

    import termios
    import tty

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return _decode(lambda: os.read(fd, 1).decode(errors="replace"))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _clear_screen() -> None:
    """Clear the terminal with the system command, or with an escape code."""
    if sys.stdout.isatty():
        command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
        try:
            subprocess.run(command, check=False)
            return
        except OSError:
            pass
    sys.stdout.write(_CLEAR)
    sys.stdout.flush()


def _read_word(prompt: str = "") -> str:
    while True:
        words = input(prompt).split()
        if words:
            return words[0]
        prompt = ""


def _turn_name(game: Game) -> str:
    return game.name1 if game.current_player == "X" else game.name2


def _multiplayer() -> int:
    name1 = _read_word("Enter name of first player: ")
    name2 = _read_word("Enter name of second player: ")
    game = Game(name1, name2)
    game.init_board()
    game.show_board(game.cursor)
    print(f"It's {name1}'s turn!")

    while True:
        if game.x_won():
            print(f"\n{_RED}{name1} Won!{_RESET}")
            return 0
        if game.o_won():
            print(f"\n{_BLUE}{name2} Won!{_RESET}")
            return 0
        if game.moves == 9:
            print(f"\n{_GREEN}It is a draw!{_RESET}")
            return 0

        key = read_key()
        _clear_screen()
        if key == ENTER:
            cursor = game.cursor
            if game.move(cursor):
                game.show_board(cursor)
                game.switch_players()
            else:
                game.show_board(game.cursor)
                print("Invalid move, try again!")
                print(f"It's {_turn_name(game)}'s turn. ")
        else:
            game.update_cursor(key)
            game.show_board(game.cursor)
            print(f"It's {_turn_name(game)}'s turn.", end="", flush=True)


def _single_player() -> int:
    print("Choose difficulty (easy, medium or hard): ")
    difficulty = _read_word()
    while difficulty not in _DIFFICULTIES:
        print("Type 'easy', 'medium' or 'hard'.")
        difficulty = _read_word()

    game = Game("", "")
    game.init_board()
    game.show_board(game.cursor)

    while True:
        if game.x_won():
            print(f"\n{_RED}You Won!{_RESET}")
            return 0
        if game.o_won():
            print(f"\n{_BLUE}Computer Won!{_RESET}")
            return 0
        if game.moves == 10:
            print(f"\n{_GREEN}It is a draw!{_RESET}")
            return 0

        key = read_key()
        _clear_screen()
        if key == ENTER:
            cursor = game.cursor
            if game.move(cursor):
                game.comp_move(difficulty)
                game.show_board(cursor)
                print("It's your turn.")
            else:
                game.show_board(game.cursor)
                print("Invalid move, try again!")
                print("It's your turn.")
        else:
            game.update_cursor(key)
            game.show_board(game.cursor)
            print("It's your turn.")


def main(argv: list[str] | None = None) -> int:
    """Play tic-tac-toe against another person or the computer."""
    try:
        print("Single Player or Multiplayer (Type just 's' or 'm').")
        mode = _read_word()
        if mode == "m":
            return _multiplayer()
        if mode == "s":
            return _single_player()
        print("Type 'Multiplayer' or 'Single Player'.")
        return 0
    except (EOFError, KeyboardInterrupt):
        print()
        return 1