"""Tic-tac-toe on a 5x5 character grid with a simple computer opponent."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Iterator

EMPTY = " "
KEY_UP = 72
KEY_DOWN = 80
KEY_LEFT = 75
KEY_RIGHT = 77

_GREEN = "\033[32m"
_RED = "\033[31m"
_BLUE = "\033[34m"
_RESET = "\033[0m"


@dataclass(frozen=True)
class Position:
    row: int
    col: int


_WINNING_LINES = (
    *((Position(r, 0), Position(r, 2), Position(r, 4)) for r in (0, 2, 4)),
    *((Position(0, c), Position(2, c), Position(4, c)) for c in (0, 2, 4)),
    (Position(0, 0), Position(2, 2), Position(4, 4)),
    (Position(0, 4), Position(2, 2), Position(4, 0)),
)

_DIAGONAL_COMPLETIONS = (
    (Position(0, 0), Position(4, 4), Position(2, 2)),
    (Position(0, 4), Position(4, 0), Position(2, 2)),
    (Position(0, 0), Position(2, 2), Position(4, 4)),
    (Position(2, 2), Position(4, 4), Position(0, 0)),
    (Position(0, 4), Position(2, 2), Position(4, 0)),
    (Position(4, 0), Position(2, 2), Position(0, 4)),
)


class Board:
    """A square grid of characters; playable cells sit at even coordinates."""

    def __init__(self, size: int = 5) -> None:
        self.size = size
        self.grid = [[EMPTY] * size for _ in range(size)]

    @staticmethod
    def _layout(row: int, col: int) -> str:
        if row in (1, 3):
            return "-"
        if col in (1, 3):
            return "|"
        return EMPTY

    def init_board(self) -> None:
        """Draw the separator lines and clear the playing cells."""
        self.grid = [[self._layout(i, j) for j in range(self.size)] for i in range(self.size)]

    @staticmethod
    def _cell(value: str, under_cursor: bool) -> str:
        if value == "X":
            return f"{_RED}X{_RESET}"
        if value == "O":
            return f"{_BLUE}O{_RESET}"
        if under_cursor:
            return f"{_GREEN}*{_RESET}"
        return value

    def render(self, cursor: Position) -> str:
        bar = f"{_GREEN}|{_RESET}"
        rule = "-" * self.size
        lines = [f"{_GREEN}|{rule}|{_RESET}"]
        for i, row in enumerate(self.grid):
            cells = "".join(
                self._cell(value, Position(i, j) == cursor) for j, value in enumerate(row)
            )
            lines.append(f"{bar}{cells}{bar}")
        lines.append(f"{bar}{_GREEN}{rule}|{_RESET}")
        return "\n".join(lines) + "\n"

    def show_board(self, cursor: Position) -> None:
        print(self.render(cursor), end="")


class Game(Board):
    """Game state: marks on the board, whose turn it is and the cursor."""

    def __init__(self, name1: str, name2: str, rng: random.Random | None = None) -> None:
        super().__init__()
        self.name1 = name1
        self.name2 = name2
        self.current_player = "X"
        self.cursor = Position(2, 2)
        self.moves = 0
        self.already_moved = False
        self.already_won = False
        self._rng = rng or random.Random()

    def _at(self, pos: Position) -> str:
        return self.grid[pos.row][pos.col]

    def _put(self, pos: Position, mark: str) -> None:
        self.grid[pos.row][pos.col] = mark

    def move(self, to: Position) -> bool:
        """Place the current player's mark if the cell is free."""
        if not self.valid_move(to):
            return False
        self.moves += 1
        self._put(to, self.current_player)
        return True

    def switch_players(self) -> None:
        if self.game_over():
            return
        if self.current_player == "X":
            self.current_player = "O"
            print(f"It's {self.name2}'s turn.")
        else:
            self.current_player = "X"
            print(f"It's {self.name1}'s turn.")

    def _has_line(self, mark: str) -> bool:
        return any(all(self._at(pos) == mark for pos in line) for line in _WINNING_LINES)

    def x_won(self) -> bool:
        return self._has_line("X")

    def o_won(self) -> bool:
        return self._has_line("O")

    def game_over(self) -> bool:
        return self.x_won() or self.o_won()

    def valid_move(self, to: Position) -> bool:
        return self._at(to) == EMPTY

    def update_cursor(self, key: int) -> None:
        """Move the cursor one playable cell in the direction of an arrow key."""
        row, col = self.cursor.row, self.cursor.col
        last = self.size - 1
        if key == KEY_UP and row > 0:
            self.cursor = replace(self.cursor, row=row - 2)
        elif key == KEY_DOWN and row < last:
            self.cursor = replace(self.cursor, row=row + 2)
        elif key == KEY_LEFT and col > 0:
            self.cursor = replace(self.cursor, col=col - 2)
        elif key == KEY_RIGHT and col < last:
            self.cursor = replace(self.cursor, col=col + 2)

    def _completions(self) -> Iterator[tuple[Position, Position, Position]]:
        corners = range(0, self.size, 2)
        for i in corners:
            for j in corners:
                yield Position(i, 0), Position(i, 4), Position(i, 2)
                yield Position(i, 0), Position(i, 2), Position(i, 4)
                yield Position(i, 2), Position(i, 4), Position(i, 0)
                yield Position(0, j), Position(4, j), Position(2, j)
                yield Position(0, j), Position(2, j), Position(4, j)
                yield Position(2, j), Position(4, j), Position(0, j)
        yield from _DIAGONAL_COMPLETIONS

    def _complete_line(self, mark: str) -> bool:
        for first, second, target in self._completions():
            if self._at(first) == mark and self._at(second) == mark and self.valid_move(target):
                self._put(target, "O")
                return True
        return False

    def block(self) -> bool:
        """Put an O where X would complete a line."""
        self.already_moved = self._complete_line("X")
        return self.already_moved

    def win(self) -> bool:
        """Put an O where it completes a line of O."""
        self.already_won = self._complete_line("O")
        return self.already_won

    def comp_move(self, difficulty: str) -> None:
        """Make the computer's move at the given difficulty."""
        self.moves += 1
        free = [
            pos
            for pos in (
                Position(i, j) for i in range(0, self.size, 2) for j in range(0, self.size, 2)
            )
            if self.valid_move(pos)
        ]
        if difficulty == "easy":
            play_random = True
        elif difficulty == "medium":
            self.block()
            play_random = not self.already_moved
        elif difficulty == "hard":
            self.win()
            if not self.already_won:
                self.block()
            play_random = not self.already_moved and not self.already_won
        else:
            return
        if play_random and free:
            self._put(self._rng.choice(free), "O")