"""Congo board state: parsing, rendering, making and unmaking moves."""

from __future__ import annotations

from congo.movegen import (
    GiraffeMoveGenerator,
    LionMoveGenerator,
    PawnMoveGenerator,
    SuperPawnMoveGenerator,
    ZebraMoveGenerator,
)
from congo.pieces import (
    BOARD_DIM,
    BOARD_LENGTH,
    MINOR_PIECE_COUNT,
    OFF_BOARD,
    PIECE_FROM_SYMBOL,
    PIECE_POSITION_COUNT,
    SYMBOLS,
    Move,
    Piece,
    opponent,
    piece_colour,
    piece_type,
)

STARTING_FEN = "g2l2z/ppppppp/7/7/7/PPPPPPP/G2L2Z w 0"
RIVER_START_INDEX = 21
RIVER_END_INDEX = 28

_GENERATORS = (
    LionMoveGenerator(),
    ZebraMoveGenerator(),
    GiraffeMoveGenerator(),
    PawnMoveGenerator(),
    SuperPawnMoveGenerator(),
)


def is_in_river(position: int) -> bool:
    """Return True if the square lies on the river rank."""
    return RIVER_START_INDEX <= position < RIVER_END_INDEX


def _is_minor(kind: int) -> bool:
    return kind in (Piece.PAWN, Piece.SUPER_PAWN)


class Board:
    """A Congo position with piece lookup tables kept in step with the squares."""

    def __init__(self, fen: str) -> None:
        self.squares: list[int] = [int(Piece.NONE)] * BOARD_LENGTH
        self.piece_positions: list[int] = [OFF_BOARD] * PIECE_POSITION_COUNT
        self.minor_piece_positions: list[int] = [OFF_BOARD] * (2 * MINOR_PIECE_COUNT)
        self.white_piece_count = 0
        self.black_piece_count = 0

        fields = fen.split(" ")
        if len(fields) < 3:
            raise ValueError(f"incomplete position: {fen!r}")
        layout, side, count = fields[0], fields[1], fields[2]
        self.side_to_play = int(Piece.WHITE if side == "w" else Piece.BLACK)
        try:
            self.move_count = int(count)
        except ValueError:
            raise ValueError(f"invalid move count: {count!r}") from None

        self._place_pieces(layout)

    def _place_pieces(self, layout: str) -> None:
        file, rank = 0, BOARD_DIM - 1
        minor_counts = {Piece.WHITE: 0, Piece.BLACK: 0}

        for char in layout:
            if char == "/":
                file = 0
                rank -= 1
                continue
            if "1" <= char <= "7":
                file += int(char)
                continue

            symbol = char.lower()
            colour = Piece.BLACK if symbol == char else Piece.WHITE
            kind = PIECE_FROM_SYMBOL.get(symbol)
            if kind is None:
                raise ValueError(f"unknown piece symbol: {char!r}")
            if not (0 <= file < BOARD_DIM and 0 <= rank < BOARD_DIM):
                raise ValueError(f"piece {char!r} placed off the board")

            value = int(colour | kind)
            location = rank * BOARD_DIM + file

            if _is_minor(kind):
                slot = minor_counts[colour]
                if slot >= MINOR_PIECE_COUNT:
                    raise ValueError("too many pawns for one side")
                offset = 0 if colour == Piece.WHITE else MINOR_PIECE_COUNT
                self.minor_piece_positions[offset + slot] = location
                minor_counts[colour] = slot + 1
            else:
                self.piece_positions[value] = location

            self._increase_count(colour)
            self.squares[location] = value
            file += 1

    def render(self) -> str:
        """Return the board drawn as text, rank 7 first, with file letters below."""
        lines = []
        for rank in range(BOARD_DIM - 1, -1, -1):
            cells = []
            for file in range(BOARD_DIM):
                piece = self.squares[rank * BOARD_DIM + file]
                symbol = SYMBOLS.get(piece_type(piece), "_")
                if piece_colour(piece) == Piece.WHITE:
                    symbol = symbol.upper()
                cells.append(f"{symbol}  ")
            lines.append(f"{rank + 1} " + "".join(cells) + "\n")
        lines.append("  " + "".join(f"{letter}  " for letter in "abcdefg") + "\n")
        return "".join(lines)

    def to_fen(self) -> str:
        """Return the position in the same notation the constructor reads."""
        rows = []
        for rank in range(BOARD_DIM - 1, -1, -1):
            row = []
            empty = 0
            for file in range(BOARD_DIM):
                piece = self.squares[rank * BOARD_DIM + file]
                if piece == Piece.NONE:
                    empty += 1
                    continue
                symbol = SYMBOLS[piece_type(piece)]
                if piece_colour(piece) == Piece.WHITE:
                    symbol = symbol.upper()
                if empty:
                    row.append(str(empty))
                    empty = 0
                row.append(symbol)
            if empty:
                row.append(str(empty))
            rows.append("".join(row))
        side = "w" if self.side_to_play == Piece.WHITE else "b"
        return f"{'/'.join(rows)} {side} {self.move_count}"

    def generate_moves(self) -> list[Move]:
        """Return every move for the side to play, most recently generated first."""
        moves: list[Move] = []
        for generator in _GENERATORS:
            moves.extend(generator.generate_moves(self))
        moves.reverse()
        return moves

    def valid_moves_string(self) -> str:
        """Return the legal moves as sorted coordinates separated by spaces."""
        return " ".join(sorted(str(move) for move in self.generate_moves()))

    def make_move(self, move: Move) -> None:
        """Move a piece, capturing whatever stands on the target square."""
        moving = self.squares[move.start]
        captured = self.squares[move.end]
        if captured != Piece.NONE:
            self.update_piece_position(captured, move.end, OFF_BOARD)
        self.update_piece_position(moving, move.start, move.end)

    def unmake_move(self, move: Move, moving_piece: int, captured_piece: int) -> None:
        """Undo a move given the pieces that stood on its squares beforehand."""
        self.update_piece_position(moving_piece, move.end, move.start)
        if captured_piece != Piece.NONE:
            self.update_piece_position(captured_piece, OFF_BOARD, move.end)

    def remove_river_pieces(self, move: Move) -> None:
        """Drown the mover's pieces left in the river, except those the move touches."""
        for index in range(RIVER_START_INDEX, RIVER_END_INDEX):
            if index in (move.start, move.end):
                continue
            piece = self.squares[index]
            if piece == Piece.NONE:
                continue
            if piece_colour(piece) == self.side_to_play:
                self.update_piece_position(piece, index, OFF_BOARD)

    def is_terminal(self) -> bool:
        """Return True once either lion has been captured."""
        return (
            self.piece_positions[Piece.LION | self.side_to_play] == OFF_BOARD
            or self.piece_positions[Piece.LION | opponent(self.side_to_play)] == OFF_BOARD
        )

    def debug_string(self) -> str:
        """Return the drawing, the legal moves and the position notation together."""
        return f"{self.render()}Valid moves: {self.valid_moves_string()}\n{self.to_fen()}\n\n"

    def update_piece_position(self, piece: int, old_position: int, new_position: int) -> None:
        """Move a piece between squares or on and off the board, promoting pawns."""
        kind = piece_type(piece)
        colour = piece_colour(piece)

        if old_position != OFF_BOARD:
            self.squares[old_position] = int(Piece.NONE)
        else:
            self._increase_count(colour)

        if _is_minor(kind):
            self.minor_piece_positions[self.minor_piece_index(colour, old_position)] = new_position
        else:
            self.piece_positions[colour | kind] = new_position

        if new_position == OFF_BOARD:
            self._decrease_count(colour)
            return

        if kind == Piece.PAWN:
            promotion_rank = BOARD_DIM - 1 if self.side_to_play == Piece.WHITE else 0
            if new_position // BOARD_DIM == promotion_rank:
                self.squares[new_position] = int(Piece.SUPER_PAWN | self.side_to_play)
                return
        self.squares[new_position] = piece

    def minor_piece_index(self, colour: int, position: int) -> int:
        """Return the slot in the pawn table holding the given colour's pawn at position."""
        start = 0 if colour == Piece.WHITE else MINOR_PIECE_COUNT
        for slot in range(start, start + MINOR_PIECE_COUNT):
            if self.minor_piece_positions[slot] == position:
                return slot
        raise ValueError(f"no pawn of that colour at position {position}")

    def flip_side(self) -> None:
        """Hand the turn to the other side."""
        self.side_to_play = opponent(self.side_to_play)

    def _increase_count(self, colour: int) -> None:
        if colour == Piece.WHITE:
            self.white_piece_count += 1
        else:
            self.black_piece_count += 1

    def _decrease_count(self, colour: int) -> None:
        if colour == Piece.WHITE:
            self.white_piece_count -= 1
        else:
            self.black_piece_count -= 1