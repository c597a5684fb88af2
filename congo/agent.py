"""A Congo player using iterative-deepening alpha-beta search."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from congo.board import RIVER_END_INDEX, RIVER_START_INDEX, STARTING_FEN, Board, is_in_river
from congo.evaluation import MAX_EVAL, AdvancedEvaluator
from congo.pieces import OFF_BOARD, Move, Piece, opponent, piece_colour
from congo.timer import Timer


def _both_in_river(move: Move) -> bool:
    return is_in_river(move.start) and is_in_river(move.end)


class Agent:
    """Keeps a board and searches it for the best move within a time limit."""

    INITIAL_ALPHA = -MAX_EVAL
    INITIAL_BETA = MAX_EVAL
    MAX_DEPTH = 25
    MIN_TIME_LIMIT_MS = 500
    NO_MOVE = Move(-1, -1)

    def __init__(self, fen: str = STARTING_FEN) -> None:
        self.board = Board(fen)
        self.evaluator = AdvancedEvaluator(self.board)
        self.timer = Timer()
        self.best_move = self.NO_MOVE
        self.last_depth_completed = True
        self.time_remaining_ms = MAX_EVAL
        self.states_explored = 0

    def update_board(self, fen: str) -> None:
        """Replace the current position with the one given."""
        self.board = Board(fen)
        self.evaluator = AdvancedEvaluator(self.board)

    def make_move(self, move: Move) -> None:
        """Play a move, drowning river pieces, and pass the turn."""
        board = self.board
        piece_to_move = board.squares[move.start]

        board.remove_river_pieces(move)
        board.make_move(move)
        if _both_in_river(move):
            board.update_piece_position(piece_to_move, move.end, OFF_BOARD)

        if board.side_to_play == Piece.BLACK:
            board.move_count += 1
        board.flip_side()

    def unmake_move(
        self,
        move: Move,
        moving_piece: int,
        captured_piece: int,
        river_pieces: Sequence[int],
    ) -> None:
        """Take back a move, given the pieces it touched and the river beforehand."""
        board = self.board
        if board.side_to_play == Piece.WHITE:
            board.move_count -= 1
        board.flip_side()

        for square, piece in enumerate(river_pieces, start=RIVER_START_INDEX):
            if square in (move.start, move.end):
                continue
            if piece_colour(piece) == board.side_to_play:
                board.update_piece_position(piece, OFF_BOARD, square)

        if _both_in_river(move):
            board.update_piece_position(moving_piece, OFF_BOARD, move.end)

        board.unmake_move(move, moving_piece, captured_piece)

    def _snapshot(self, move: Move) -> tuple[int, int, tuple[int, ...]]:
        squares = self.board.squares
        return squares[move.start], squares[move.end], tuple(squares[RIVER_START_INDEX:RIVER_END_INDEX])

    def perft(self, max_depth: int = 6) -> Iterator[tuple[int, int, int]]:
        """Yield (depth, positions at that depth, milliseconds taken) for each depth."""
        previous = 0
        for depth in range(1, max_depth + 1):
            self.states_explored = 0
            self.timer.start()
            self.explore_moves(depth)
            elapsed = self.timer.elapsed_ms()
            total = self.states_explored
            yield depth, total - previous, elapsed
            previous = total

    def explore_moves(self, depth: int) -> None:
        """Walk every line of play to the given depth, counting positions reached."""
        if self.board.is_terminal() or depth == 0:
            return
        for move in self.board.generate_moves():
            self.states_explored += 1
            moving, captured, river = self._snapshot(move)
            self.make_move(move)
            self.explore_moves(depth - 1)
            self.unmake_move(move, moving, captured, river)

    def minimax(self, depth: int, alpha: int, beta: int) -> int:
        """Negamax search with alpha-beta pruning; records the best move found."""
        if self.time_remaining_ms - self.timer.elapsed_ms() < self.MIN_TIME_LIMIT_MS:
            self.last_depth_completed = False
            return beta

        if self.board.is_terminal() or depth <= 0:
            return int(self.evaluator.evaluate())

        best_score = -MAX_EVAL
        current_best = self.NO_MOVE

        for move in self.board.generate_moves():
            moving, captured, river = self._snapshot(move)
            self.make_move(move)
            score = -self.minimax(depth - 1, -beta, -alpha)
            best_score = max(best_score, score)
            self.unmake_move(move, moving, captured, river)

            if best_score >= beta:
                return beta
            if best_score > alpha:
                alpha = best_score
                current_best = move

        self.best_move = current_best
        return best_score

    def get_move(self, time_limit_ms: int) -> Move:
        """Deepen the search until time runs short; return the last complete result."""
        self.last_depth_completed = True
        self.time_remaining_ms = time_limit_ms
        current_best = self.NO_MOVE
        self.timer.start()

        for depth in range(1, self.MAX_DEPTH + 1):
            self.minimax(depth, self.INITIAL_ALPHA, self.INITIAL_BETA)
            if not self.last_depth_completed:
                return current_best
            current_best = self.best_move
            self.best_move = self.NO_MOVE

        return current_best


__all__ = ["Agent", "opponent"]