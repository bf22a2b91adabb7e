"""Console checkers for two players taking turns at one keyboard."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Iterator, TextIO

from consolegames.checkers_game import Game
from consolegames.checkers_pieces import PieceType, Player, Position

PIECES_PER_SIDE = 12

_BLUE = "\033[34m"
_RESET = "\033[0m"
_CLEAR = "\033[2J\033[H"


def _integers(stream: TextIO) -> Iterator[int]:
    """Yield whitespace-separated integers from a stream."""
    for line in stream:
        for word in line.split():
            try:
                yield int(word)
            except ValueError:
                raise ValueError(f"expected a number, got {word!r}") from None


def _read_move(numbers: Iterator[int]) -> tuple[Position, Position]:
    try:
        from_row, from_col, to_row, to_col = (next(numbers) for _ in range(4))
    except (StopIteration, RuntimeError):
        raise EOFError from None
    return Position(from_row, from_col), Position(to_row, to_col)


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


def _must_eat_again(game: Game, player: Player, start: Position, end: Position) -> bool:
    if not game.has_eaten(start, end):
        return False
    if player.current_player is PieceType.WHITE:
        return game.white_can_eat() or game.white_queen_can_eat()
    return game.blue_can_eat() or game.blue_queen_can_eat()


def _play_turn(game: Game, player: Player, start: Position, end: Position) -> None:
    if not game.is_valid_move(start, end, player.current_player, player.current_queen):
        print()
        print("Invalid move.")
        print(f"It's {player.name}'s turn")
        return

    if not game.will_eat(start, end):
        if player.current_player is PieceType.WHITE:
            game.white_forfeit(end)
            game.white_queen_forfeit(end)
        else:
            game.blue_forfeit(end)
            game.blue_queen_forfeit(end)

    if game.has_eaten(start, end):
        game.set_coord(end)
    print()
    print(f"{game.coord_r}, {game.coord_c}")

    game.move(start, end)
    _clear_screen()
    game.show()

    if _must_eat_again(game, player, start, end):
        print()
        print(f"It's {player.name}'s turn, {player.name} should eat one more time.")
    else:
        player.switch_players()

    print(f"White has {PIECES_PER_SIDE - game.w_count} pieces")
    print(f"Blue has {PIECES_PER_SIDE - game.b_count} pieces")


def main(argv: list[str] | None = None) -> int:
    """Play checkers; each turn reads four numbers: from-row from-col to-row to-col."""
    game = Game()
    player = Player()
    game.initialize()
    game.show()
    print()
    print("It's White's turn.")

    numbers = _integers(sys.stdin)
    try:
        while True:
            if game.w_count == PIECES_PER_SIDE:
                print(f"{_BLUE}Game over, Blue won!{_RESET}")
                return 0
            if game.b_count == PIECES_PER_SIDE:
                print()
                print("Game over, White won!")
                return 0

            print()
            print("Enter coordinates: ", end="", flush=True)
            start, end = _read_move(numbers)
            _play_turn(game, player, start, end)
    except EOFError:
        print()
        return 1
    except ValueError as exc:
        print()
        print(exc)
        return 1