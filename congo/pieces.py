"""Piece encoding, board geometry and moves for Congo."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

BOARD_DIM = 7
BOARD_LENGTH = BOARD_DIM * BOARD_DIM
OFF_BOARD = -1
PIECE_POSITION_COUNT = 22
MINOR_PIECE_COUNT = 8
RIVER_RANK = 3

PIECE_COLOUR_MASK = 0b11000
PIECE_TYPE_MASK = 0b00111

_FILES = "abcdefg"
_RANKS = "1234567"


class Piece(IntEnum):
    """Piece types and colours; a square holds ``colour | type``."""

    NONE = 0
    LION = 1
    PAWN = 2
    SUPER_PAWN = 3
    ZEBRA = 4
    GIRAFFE = 5
    WHITE = 8
    BLACK = 16


SYMBOLS = {
    Piece.LION: "l",
    Piece.PAWN: "p",
    Piece.SUPER_PAWN: "s",
    Piece.ZEBRA: "z",
    Piece.GIRAFFE: "g",
}

PIECE_FROM_SYMBOL = {symbol: kind for kind, symbol in SYMBOLS.items()}


def piece_type(piece: int) -> int:
    """Return the type bits of an encoded piece."""
    return piece & PIECE_TYPE_MASK


def piece_colour(piece: int) -> int:
    """Return the colour bits of an encoded piece."""
    return piece & PIECE_COLOUR_MASK


def opponent(colour: int) -> int:
    """Return the other side's colour."""
    return colour ^ PIECE_COLOUR_MASK


def index_to_coordinate(index: int) -> str:
    """Turn a square index into algebraic form such as ``d4``.

    Division truncates toward zero, so the off-board index renders as ``\\`1``.
    """
    rank = int(index / BOARD_DIM)
    file = index - rank * BOARD_DIM
    return f"{chr(ord('a') + file)}{rank + 1}"


@dataclass(frozen=True, slots=True)
class Move:
    """A move from one square index to another."""

    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> Move:
        """Read a move written as two coordinates, e.g. ``a2a3``."""
        if len(text) < 4:
            raise ValueError(f"move too short: {text!r}")
        squares = []
        for file_char, rank_char in (text[0:2], text[2:4]):
            if file_char not in _FILES or rank_char not in _RANKS:
                raise ValueError(f"invalid square in move: {text!r}")
            squares.append(_RANKS.index(rank_char) * BOARD_DIM + _FILES.index(file_char))
        return cls(squares[0], squares[1])

    def __str__(self) -> str:
        return index_to_coordinate(self.start) + index_to_coordinate(self.end)