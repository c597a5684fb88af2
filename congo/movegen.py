"""Move generation for each Congo piece type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar, Protocol

from congo.pieces import (
    BOARD_DIM,
    BOARD_LENGTH,
    MINOR_PIECE_COUNT,
    OFF_BOARD,
    RIVER_RANK,
    Move,
    Piece,
    opponent,
    piece_colour,
    piece_type,
)

SINGLE_CELL_MOVES = (-1, 1, -7, 7, 6, -6, 8, -8)
LION_ATTACK_SCORE = 10

Table = tuple[tuple[int, ...], ...]


class BoardLike(Protocol):
    """The board state the generators read."""

    squares: list[int]
    side_to_play: int
    piece_positions: list[int]
    minor_piece_positions: list[int]


def is_off_board(index: int) -> bool:
    """Return True if the index lies outside the board."""
    return index < 0 or index > BOARD_LENGTH - 1


def _distance(a: int, b: int) -> int:
    rank_a, file_a = divmod(a, BOARD_DIM)
    rank_b, file_b = divmod(b, BOARD_DIM)
    return max(abs(rank_a - rank_b), abs(file_a - file_b))


def precompute_legal_moves(offsets: Sequence[int], distance: int) -> Table:
    """For each square, list targets by offset that stay on the board at the given king distance."""
    table = []
    for position in range(BOARD_LENGTH):
        targets = []
        for offset in offsets:
            target = position + offset
            if not is_off_board(target) and _distance(position, target) == distance:
                targets.append(target)
        table.append(tuple(targets))
    return tuple(table)


def _score(mobility: int = 0, attack: int = 0) -> None:
    MoveGenerator.mobility_score += mobility
    MoveGenerator.attack_score += attack


def _minor_positions(board: BoardLike) -> Sequence[int]:
    start = 0 if board.side_to_play == Piece.WHITE else MINOR_PIECE_COUNT
    return board.minor_piece_positions[start:start + MINOR_PIECE_COUNT]


class MoveGenerator(ABC):
    """Base for per-piece generators; keeps running mobility and attack tallies."""

    attack_score: ClassVar[int] = 0
    mobility_score: ClassVar[int] = 0

    @abstractmethod
    def generate_moves(self, board: BoardLike) -> list[Move]:
        """Return the moves for the side to play, in generation order."""

    @classmethod
    def reset_scores(cls) -> None:
        """Zero the shared mobility and attack tallies."""
        MoveGenerator.attack_score = 0
        MoveGenerator.mobility_score = 0


def _is_empty(squares: Sequence[int], index: int) -> bool:
    return not is_off_board(index) and squares[index] == Piece.NONE


def _open_line_between_lions(squares: Sequence[int], player_lion: int, opponent_lion: int) -> bool:
    start = min(player_lion, opponent_lion)
    end = max(player_lion, opponent_lion)

    clear = True
    position = start + BOARD_DIM
    while position < end and clear:
        clear = squares[position] == Piece.NONE
        position += BOARD_DIM
    if clear and position == end:
        return True

    diagonal, anti_diagonal = 8, 6
    if _is_empty(squares, start + diagonal) and start + 2 * diagonal == end:
        return True
    return _is_empty(squares, start + anti_diagonal) and start + 2 * anti_diagonal == end


def _in_castle(index: int) -> bool:
    rank, file = divmod(index, BOARD_DIM)
    return rank != RIVER_RANK and 2 <= file <= 4


class LionMoveGenerator(MoveGenerator):
    """Lion steps inside its castle and the flying capture of the other lion."""

    def generate_moves(self, board: BoardLike) -> list[Move]:
        side = board.side_to_play
        squares = board.squares
        player_lion = board.piece_positions[Piece.LION | side]
        opponent_lion = board.piece_positions[Piece.LION | opponent(side)]
        moves = []

        if _open_line_between_lions(squares, player_lion, opponent_lion):
            moves.append(Move(player_lion, opponent_lion))
            _score(mobility=1, attack=LION_ATTACK_SCORE)

        for offset in SINGLE_CELL_MOVES:
            target = player_lion + offset
            if is_off_board(target):
                continue
            piece = squares[target]
            if piece_colour(piece) != side and _in_castle(target):
                moves.append(Move(player_lion, target))
                _score(mobility=1, attack=int(piece != Piece.NONE))
        return moves


ZEBRA_MOVES = (5, 13, 15, 9, -5, -13, -15, -9)
_ZEBRA_TARGETS = precompute_legal_moves(ZEBRA_MOVES, 2)


class ZebraMoveGenerator(MoveGenerator):
    """Knight-like zebra moves."""

    def generate_moves(self, board: BoardLike) -> list[Move]:
        side = board.side_to_play
        position = board.piece_positions[Piece.ZEBRA | side]
        if position == OFF_BOARD:
            return []

        moves = []
        for target in _ZEBRA_TARGETS[position]:
            piece = board.squares[target]
            if piece_colour(piece) == side:
                continue
            attack = int(piece != Piece.NONE)
            if piece_type(piece) == Piece.LION:
                attack += LION_ATTACK_SCORE
            _score(mobility=1, attack=attack)
            moves.append(Move(position, target))
        return moves


GIRAFFE_JUMPS = (-16, -14, -12, 2, 16, 14, 12, -2)
_GIRAFFE_CAPTURES = precompute_legal_moves(GIRAFFE_JUMPS, 2)
_GIRAFFE_NAVIGATIONS = tuple(
    steps + jumps
    for steps, jumps in zip(precompute_legal_moves(SINGLE_CELL_MOVES, 1), _GIRAFFE_CAPTURES)
)


class GiraffeMoveGenerator(MoveGenerator):
    """Giraffe captures two squares away and moves one or two squares to empty squares."""

    def generate_moves(self, board: BoardLike) -> list[Move]:
        side = board.side_to_play
        position = board.piece_positions[Piece.GIRAFFE | side]
        if position == OFF_BOARD:
            return []

        squares = board.squares
        enemy = opponent(side)
        moves = []

        for target in _GIRAFFE_CAPTURES[position]:
            piece = squares[target]
            if piece_colour(piece) == enemy:
                moves.append(Move(position, target))
                attack = 1
                if piece_type(piece) == Piece.LION:
                    attack += LION_ATTACK_SCORE
                _score(mobility=1, attack=attack)

        for target in _GIRAFFE_NAVIGATIONS[position]:
            if squares[target] == Piece.NONE:
                moves.append(Move(position, target))
                _score(mobility=1)
        return moves


_PAWN_FORWARD = {
    Piece.WHITE: precompute_legal_moves((6, 7, 8), 1),
    Piece.BLACK: precompute_legal_moves((-6, -7, -8), 1),
}
_PAWN_BACKWARD = {
    Piece.WHITE: (-7, -14),
    Piece.BLACK: (7, 14),
}


class PawnMoveGenerator(MoveGenerator):
    """Pawn steps forward and retreats once past the river."""

    def generate_moves(self, board: BoardLike) -> list[Move]:
        moves: list[Move] = []
        for position in _minor_positions(board):
            if position == OFF_BOARD:
                continue
            if piece_type(board.squares[position]) != Piece.PAWN:
                continue
            moves.extend(self._forward_moves(board, position))
            moves.extend(self._backward_moves(board, position))
        return moves

    @staticmethod
    def _forward_moves(board: BoardLike, position: int) -> list[Move]:
        enemy = opponent(board.side_to_play)
        moves = []
        for target in _PAWN_FORWARD[board.side_to_play][position]:
            piece = board.squares[target]
            if piece_colour(piece) == enemy or piece == Piece.NONE:
                moves.append(Move(position, target))
                kind = piece_type(piece)
                if kind == Piece.LION:
                    attack = LION_ATTACK_SCORE
                else:
                    attack = int(kind != Piece.NONE)
                _score(mobility=1, attack=attack)
        return moves

    @staticmethod
    def _backward_moves(board: BoardLike, position: int) -> list[Move]:
        rank = position // BOARD_DIM
        side = board.side_to_play
        if side == Piece.WHITE and rank <= RIVER_RANK:
            return []
        if side == Piece.BLACK and rank >= RIVER_RANK:
            return []

        moves = []
        for offset in _PAWN_BACKWARD[side]:
            target = position + offset
            if board.squares[target] != Piece.NONE:
                break
            moves.append(Move(position, target))
            _score(mobility=1)
        return moves


_SUPER_PAWN_CAPTURES = {
    Piece.WHITE: precompute_legal_moves((-1, 1, 6, 7, 8), 1),
    Piece.BLACK: precompute_legal_moves((1, -1, -6, -7, -8), 1),
}
_SUPER_PAWN_RETREATS = {
    Piece.WHITE: ((-8, -16), (-7, -14), (-6, -12)),
    Piece.BLACK: ((8, 16), (7, 14), (6, 12)),
}


class SuperPawnMoveGenerator(MoveGenerator):
    """Super pawn steps forward or sideways and retreats one or two squares."""

    def generate_moves(self, board: BoardLike) -> list[Move]:
        moves: list[Move] = []
        for position in _minor_positions(board):
            if position == OFF_BOARD:
                continue
            if piece_type(board.squares[position]) != Piece.SUPER_PAWN:
                continue
            moves.extend(self._capture_moves(board, position))
            moves.extend(self._retreat_moves(board, position))
        return moves

    @staticmethod
    def _capture_moves(board: BoardLike, position: int) -> list[Move]:
        enemy = opponent(board.side_to_play)
        moves = []
        for target in _SUPER_PAWN_CAPTURES[board.side_to_play][position]:
            piece = board.squares[target]
            if piece_colour(piece) == enemy or piece == Piece.NONE:
                moves.append(Move(position, target))
                attack = 0
                if piece != Piece.NONE:
                    attack = 1
                    if piece_type(piece) == Piece.LION:
                        attack += LION_ATTACK_SCORE
                _score(mobility=1, attack=attack)
        return moves

    @staticmethod
    def _retreat_moves(board: BoardLike, position: int) -> list[Move]:
        moves = []
        for near, far in _SUPER_PAWN_RETREATS[board.side_to_play]:
            if not _valid_retreat(board, position, position + near):
                continue
            moves.append(Move(position, position + near))
            _score(mobility=1)
            if _valid_retreat(board, position, position + far):
                moves.append(Move(position, position + far))
                _score(mobility=1)
        return moves


def _valid_retreat(board: BoardLike, position: int, target: int) -> bool:
    if is_off_board(target) or board.squares[target] != Piece.NONE:
        return False
    return _distance(position, target) <= 2