"""Checkers rules on top of the board: capture checks, forfeits and moves."""

from __future__ import annotations

from typing import Iterator

from consolegames.checkers_board import Board
from consolegames.checkers_pieces import Piece, PieceType, Position

_DIAGONALS = ((1, 1), (1, -1), (-1, 1), (-1, -1))

_WHITE_SIDE = (PieceType.WHITE, PieceType.WHITE_QUEEN)
_BLUE_SIDE = (PieceType.BLUE, PieceType.BLUE_QUEEN)


class Game(Board):
    """A board with the rules for capturing, forced captures and moving.

    ``coord_r`` and ``coord_c`` hold the square last given to :meth:`set_coord`.
    """

    def __init__(self, size: int = 8) -> None:
        super().__init__(size)
        self.coord_r = 0
        self.coord_c = 0

    def set_coord(self, end: Position) -> None:
        self.coord_r = end.row
        self.coord_c = end.col

    def _kind(self, row: int, col: int) -> PieceType:
        return self.grid[row][col].kind

    def _squares(self, descending: bool) -> Iterator[tuple[int, int]]:
        indices = range(self.size - 1, -1, -1) if descending else range(self.size)
        for i in indices:
            for j in indices:
                yield i, j

    def _can_jump(self, row: int, col: int, enemies: tuple[PieceType, ...]) -> bool:
        """Whether a plain piece can jump an adjacent enemy into an empty square."""
        return any(
            self.in_bounds(Position(row + 2 * dr, col + 2 * dc))
            and self._kind(row + dr, col + dc) in enemies
            and self._kind(row + 2 * dr, col + 2 * dc) is PieceType.EMPTY
            for dr, dc in _DIAGONALS
        )

    def _queen_can_jump(self, row: int, col: int, enemy: PieceType) -> bool:
        for dr, dc in _DIAGONALS:
            k = 1
            while self.in_bounds(Position(row + (k + 1) * dr, col + (k + 1) * dc)):
                if (
                    self._kind(row + k * dr, col + k * dc) is enemy
                    and self._kind(row + (k + 1) * dr, col + (k + 1) * dc) is PieceType.EMPTY
                    and (
                        k == 1
                        or self._kind(row + (k - 1) * dr, col + (k - 1) * dc) is PieceType.EMPTY
                    )
                ):
                    return True
                k += 1
        return False

    def _queen_threatens(self, row: int, col: int, enemies: tuple[PieceType, ...]) -> bool:
        """Whether a queen could take an enemy with empty squares on both sides."""
        for dr, dc in _DIAGONALS:
            k = 1
            while self.in_bounds(Position(row + (k + 1) * dr, col + (k + 1) * dc)):
                if (
                    self._kind(row + k * dr, col + k * dc) in enemies
                    and self._kind(row + (k - 1) * dr, col + (k - 1) * dc) is PieceType.EMPTY
                    and self._kind(row + (k + 1) * dr, col + (k + 1) * dc) is PieceType.EMPTY
                ):
                    return True
                k += 1
        return False

    def will_eat(self, start: Position, end: Position) -> bool:
        return abs(end.row - start.row) > 1

    def has_eaten(self, start: Position, end: Position) -> bool:
        return abs(end.row - start.row) > 1

    def white_can_eat(self) -> bool:
        return any(
            self._kind(i, j) is PieceType.WHITE and self._can_jump(i, j, (PieceType.BLUE,))
            for i, j in self._squares(descending=True)
        )

    def blue_can_eat(self) -> bool:
        return any(
            self._kind(i, j) is PieceType.BLUE and self._can_jump(i, j, (PieceType.WHITE,))
            for i, j in self._squares(descending=False)
        )

    def white_queen_can_eat(self) -> bool:
        return any(
            self._kind(i, j) is PieceType.WHITE_QUEEN
            and self._queen_can_jump(i, j, PieceType.BLUE)
            for i, j in self._squares(descending=True)
        )

    def blue_queen_can_eat(self) -> bool:
        return any(
            self._kind(i, j) is PieceType.BLUE_QUEEN
            and self._queen_can_jump(i, j, PieceType.WHITE)
            for i, j in self._squares(descending=False)
        )

    def _plain_forfeit(
        self,
        end: Position,
        kind: PieceType,
        enemies: tuple[PieceType, ...],
        descending: bool,
    ) -> bool:
        """Remove the first piece of ``kind`` that could have captured.

        Nothing is removed when that piece stands on ``end``. Returns whether a
        piece was removed.
        """
        for i, j in self._squares(descending):
            if self._kind(i, j) is kind and self._can_jump(i, j, enemies):
                if Position(i, j) == end:
                    return False
                self.grid[i][j].kind = PieceType.EMPTY
                return True
        return False

    def _queen_forfeit(
        self,
        end: Position,
        kind: PieceType,
        enemies: tuple[PieceType, ...],
        descending: bool,
    ) -> bool:
        for i, j in self._squares(descending):
            if self._kind(i, j) is not kind or Position(i, j) == end:
                continue
            if self._queen_threatens(i, j, enemies):
                self.grid[i][j].kind = PieceType.EMPTY
                return True
        return False

    def white_forfeit(self, end: Position) -> None:
        """Take away a white piece that passed up a capture."""
        if self._plain_forfeit(end, PieceType.WHITE, _BLUE_SIDE, descending=True):
            self.w_count += 1

    def blue_forfeit(self, end: Position) -> None:
        """Take away a blue piece that passed up a capture."""
        if self._plain_forfeit(end, PieceType.BLUE, _WHITE_SIDE, descending=False):
            self.b_count += 1

    def white_queen_forfeit(self, end: Position) -> None:
        """Take away a white queen that passed up a capture."""
        if self._queen_forfeit(end, PieceType.WHITE_QUEEN, _BLUE_SIDE, descending=True):
            self.w_count += 1

    def blue_queen_forfeit(self, end: Position) -> None:
        """Take away a blue queen that passed up a capture."""
        if self._queen_forfeit(end, PieceType.BLUE_QUEEN, _WHITE_SIDE, descending=False):
            self.b_count += 1

    def move(self, start: Position, end: Position) -> None:
        """Move a piece, promote it on the far row, and remove a jumped piece.

        The jumped square is the one recorded by the last call to
        :meth:`is_valid_move`.
        """
        if not (self.in_bounds(start) and self.in_bounds(end)):
            return
        piece = self.piece_at(start)
        if (end.row == 0 and piece.kind is PieceType.BLUE) or (
            end.row == self.size - 1 and piece.kind is PieceType.WHITE
        ):
            piece.make_queen()

        self.grid[end.row][end.col] = Piece(piece.kind)
        self.grid[start.row][start.col] = Piece()

        if self.row_diff == 2:
            middle = self.grid[self.mid_row][self.mid_col]
            if middle.kind in _WHITE_SIDE:
                self.w_count += 1
            elif middle.kind in _BLUE_SIDE:
                self.b_count += 1
            middle.kind = PieceType.EMPTY