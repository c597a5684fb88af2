"""Static evaluation of Congo positions from the side to play's view."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from congo.board import Board
from congo.movegen import LION_ATTACK_SCORE
from congo.pieces import OFF_BOARD, Move, Piece, opponent, piece_colour, piece_type

MAX_EVAL = 1_000_000

PIECE_VALUES = {
    Piece.PAWN: 100,
    Piece.ZEBRA: 300,
    Piece.SUPER_PAWN: 350,
    Piece.GIRAFFE: 400,
}


def _material_balance(board: Board) -> int:
    white = black = 0
    for piece in board.squares:
        if piece == Piece.NONE:
            continue
        kind = piece_type(piece)
        if kind == Piece.LION:
            continue
        if piece_colour(piece) == Piece.WHITE:
            white += PIECE_VALUES[kind]
        else:
            black += PIECE_VALUES[kind]
    return white - black


def _decided_score(board: Board) -> int | None:
    """Score for a won, lost or drawn position, or None if play goes on."""
    if board.is_terminal():
        if board.piece_positions[Piece.LION | board.side_to_play] != OFF_BOARD:
            return MAX_EVAL
        return -MAX_EVAL
    if board.white_piece_count == 1 and board.black_piece_count == 1:
        return 0
    return None


def _perspective(board: Board) -> int:
    return 1 if board.side_to_play == Piece.WHITE else -1


class Evaluator(ABC):
    """Scores a board for the side to play."""

    def __init__(self, board: Board) -> None:
        self.board = board

    @abstractmethod
    def evaluate(self) -> int:
        """Return the score of the current position for the side to play."""


class MaterialEvaluator(Evaluator):
    """Scores by material alone."""

    def evaluate(self) -> int:
        decided = _decided_score(self.board)
        if decided is not None:
            return decided
        return _material_balance(self.board) * _perspective(self.board)


class AdvancedEvaluator(Evaluator):
    """Scores by material, mobility and threats against enemy pieces."""

    def material_score(self) -> int:
        """Return white's material minus black's, lions excluded."""
        return _material_balance(self.board)

    @staticmethod
    def mobility_score(white_moves: Sequence[Move], black_moves: Sequence[Move]) -> int:
        """Return how many more moves white has than black."""
        return len(white_moves) - len(black_moves)

    def attack_score(self, moves: Sequence[Move]) -> int:
        """Count moves landing on the opponent's pieces, lions weighted extra."""
        enemy = opponent(self.board.side_to_play)
        return sum(self._threat(move, enemy) for move in moves)

    def _threat(self, move: Move, enemy: int) -> int:
        piece = self.board.squares[move.end]
        if piece == Piece.NONE or piece_colour(piece) != enemy:
            return 0
        return 1 + (LION_ATTACK_SCORE if piece_type(piece) == Piece.LION else 0)

    def evaluate(self) -> int:
        board = self.board
        decided = _decided_score(board)
        if decided is not None:
            return decided

        own_moves = board.generate_moves()
        board.flip_side()
        other_moves = board.generate_moves()
        board.flip_side()
        if board.side_to_play == Piece.WHITE:
            white_moves, black_moves = own_moves, other_moves
        else:
            white_moves, black_moves = other_moves, own_moves

        attack = self._threats_on(white_moves, Piece.BLACK) - self._threats_on(black_moves, Piece.WHITE)
        mobility = self.mobility_score(white_moves, black_moves)
        return (self.material_score() + mobility + attack) * _perspective(board)

    def _threats_on(self, moves: Sequence[Move], target_colour: int) -> int:
        return sum(self._threat(move, target_colour) for move in moves)