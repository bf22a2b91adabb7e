"""Pieces, board positions and the turn tracker for checkers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class PieceType(Enum):
    WHITE = auto()
    BLUE = auto()
    WHITE_QUEEN = auto()
    BLUE_QUEEN = auto()
    EMPTY = auto()


_PROMOTIONS = {
    PieceType.WHITE: PieceType.WHITE_QUEEN,
    PieceType.BLUE: PieceType.BLUE_QUEEN,
}

_SYMBOLS = {
    PieceType.WHITE: "w",
    PieceType.BLUE: "b",
    PieceType.WHITE_QUEEN: "W",
    PieceType.BLUE_QUEEN: "B",
    PieceType.EMPTY: ".",
}


@dataclass
class Piece:
    """The content of one square."""

    kind: PieceType = PieceType.EMPTY

    def make_queen(self) -> None:
        """Promote a plain piece; queens and empty squares are unchanged."""
        self.kind = _PROMOTIONS.get(self.kind, self.kind)

    def symbol(self) -> str:
        return _SYMBOLS[self.kind]


@dataclass(frozen=True)
class Position:
    row: int
    col: int


@dataclass
class Player:
    """Whose turn it is, as a piece kind and the matching queen kind."""

    current_player: PieceType = PieceType.WHITE
    current_queen: PieceType = PieceType.WHITE_QUEEN

    @property
    def name(self) -> str:
        return "White" if self.current_player is PieceType.WHITE else "Blue"

    def switch_players(self) -> None:
        """Hand the turn to the other side and announce it."""
        if self.current_player is PieceType.WHITE:
            self.current_player = PieceType.BLUE
            self.current_queen = PieceType.BLUE_QUEEN
        elif self.current_player is PieceType.BLUE:
            self.current_player = PieceType.WHITE
            self.current_queen = PieceType.WHITE_QUEEN
        else:
            return
        print()
        print(f"It's {self.name}'s turn.")