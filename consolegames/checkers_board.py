"""The checkers board: squares, set-up, drawing and move validation."""

from __future__ import annotations

import sys

from consolegames.checkers_pieces import Piece, PieceType, Position

_RED = "\033[31m"
_BLUE = "\033[34m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


class Board:
    """A square grid of pieces with the counts of pieces each side has lost.

    ``w_count`` counts white pieces taken off the board, ``b_count`` blue ones.
    ``row_diff``, ``col_diff``, ``mid_row`` and ``mid_col`` describe the move
    last passed to :meth:`is_valid_move`.
    """

    def __init__(self, size: int = 8) -> None:
        self.size = size
        self.grid = [[Piece() for _ in range(size)] for _ in range(size)]
        self.w_count = 0
        self.b_count = 0
        self.row_diff = 0
        self.col_diff = 0
        self.mid_row = 0
        self.mid_col = 0

    def initialize(self) -> None:
        """Put white pieces on the dark squares of the top three rows and blue
        pieces on those of the rows below the fifth."""
        for i, row in enumerate(self.grid):
            for j, piece in enumerate(row):
                if (i + j) % 2 != 1:
                    continue
                if i < 3:
                    piece.kind = PieceType.WHITE
                elif i > 4:
                    piece.kind = PieceType.BLUE

    def piece_at(self, pos: Position) -> Piece:
        return self.grid[pos.row][pos.col]

    def place(self, pos: Position, kind: PieceType) -> None:
        self.grid[pos.row][pos.col] = Piece(kind)

    @staticmethod
    def _cell(piece: Piece) -> str:
        symbol = piece.symbol()
        if symbol == ".":
            return f"{_YELLOW}{symbol}{_RESET} "
        if symbol in ("b", "B"):
            return f"{_BLUE}{symbol}{_RESET} "
        return f"{symbol} "

    def render(self) -> str:
        """Return the board as coloured text with row and column numbers."""
        header = f"{_BLUE}&{_RESET} " + "".join(
            f"{_RED}{i}{_RESET} " for i in range(self.size)
        )
        lines = [header]
        for i, row in enumerate(self.grid):
            lines.append(f"{_RED}{i}{_RESET} " + "".join(self._cell(p) for p in row))
        return "\n".join(lines) + "\n"

    def show(self) -> None:
        """Write the rendered board to standard output."""
        out = sys.stdout
        out.write(self.render())
        out.flush()

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.size and 0 <= pos.col < self.size

    def is_valid_move(
        self,
        start: Position,
        end: Position,
        player: PieceType,
        queen: PieceType,
    ) -> bool:
        """Check a move for the side given by ``player`` and ``queen``.

        A queen's long move removes the enemy pieces it jumps over while it is
        being checked, and counts them as lost.
        """
        if not (self.in_bounds(start) and self.in_bounds(end)):
            return False
        self.row_diff = abs(start.row - end.row)
        self.col_diff = abs(start.col - end.col)
        mover = self.piece_at(start).kind
        if mover is PieceType.WHITE_QUEEN:
            return self._queen_move(start, end, queen, PieceType.WHITE, PieceType.BLUE)
        if mover is PieceType.BLUE_QUEEN:
            return self._queen_move(start, end, queen, PieceType.BLUE, PieceType.WHITE)
        return self._plain_move(start, end, player)

    def _plain_move(self, start: Position, end: Position, player: PieceType) -> bool:
        if self.row_diff == 2:
            self.mid_row = (start.row + end.row) // 2
            self.mid_col = (start.col + end.col) // 2
            middle = self.grid[self.mid_row][self.mid_col].kind
            return not (middle is PieceType.EMPTY or middle is player)

        if self.row_diff != self.col_diff or self.row_diff > 2:
            return False
        if self.piece_at(end).kind is not PieceType.EMPTY:
            return False
        mover = self.piece_at(start).kind
        if mover is not player:
            return False
        d_row = end.row - start.row
        d_col = end.col - start.col
        if mover is PieceType.WHITE and d_row < 0 and d_col != 0:
            return False
        if mover is PieceType.BLUE and d_row > 0 and d_col != 0:
            return False
        return True

    def _queen_move(
        self,
        start: Position,
        end: Position,
        queen: PieceType,
        own: PieceType,
        enemy: PieceType,
    ) -> bool:
        if self.row_diff != self.col_diff:
            return False
        if self.piece_at(end).kind is not PieceType.EMPTY:
            return False
        if self.piece_at(start).kind is not queen:
            return False

        d_row = end.row - start.row
        d_col = end.col - start.col
        if d_row == 0 or d_col == 0:
            return True
        step_row = 1 if d_row > 0 else -1
        step_col = 1 if d_col > 0 else -1

        for i in range(1, self.row_diff):
            cell = self.grid[start.row + i * step_row][start.col + i * step_col]
            beyond = self.grid[start.row + (i + 1) * step_row][start.col + (i + 1) * step_col]
            if cell.kind is own:
                return False
            if cell.kind is enemy:
                if beyond.kind is PieceType.EMPTY:
                    if enemy is PieceType.BLUE:
                        self.b_count += 1
                    else:
                        self.w_count += 1
                    cell.kind = PieceType.EMPTY
                elif beyond.kind is enemy:
                    return False
        return True