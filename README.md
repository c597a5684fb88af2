# congo

An engine for Congo, the 7x7 African chess variant. It provides a board
read from and written to a FEN-style notation, move generation for every
piece (lion, zebra, giraffe, pawn and super pawn), river drowning, pawn
promotion, static evaluation, and an agent that chooses moves by
iterative-deepening alpha-beta search within a time limit.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line engine

The `congo` command reads instructions from standard input, one per line,
until it reads a line holding only `END` or the input ends. It starts from
the standard opening position.

- `position <fen>` replaces the current position, for example
  `position g2l2z/ppppppp/7/7/7/PPPPPPP/G2L2Z w 0`
- `go <seconds>` searches for a move within the given number of seconds,
  prints it in coordinate form (such as `d2d3`) and plays it on the board
- `moves <move>` plays a move, such as `d6d5`, on the board

Lines with any other instruction are ignored.

```
congo
position g2l2z/ppppppp/7/7/7/PPPPPPP/G2L2Z w 0
go 2
END
```

The search stops once less than 500 milliseconds of the allowed time
remain, and answers with the best move of the last depth it finished.

## Position notation

The board part lists ranks from 7 down to 1, separated by `/`. Lower-case
letters are Black and upper-case are White: `l` lion, `z` zebra, `g`
giraffe, `p` pawn and `s` super pawn. Digits count empty squares. After the
board come the side to play (`w` or `b`) and the move count, separated by
single spaces. The opening position is `congo.board.STARTING_FEN`.

## Library use

```python
from congo.agent import Agent
from congo.board import STARTING_FEN, Board
from congo.evaluation import AdvancedEvaluator, MaterialEvaluator
from congo.pieces import Move

board = Board(STARTING_FEN)
print(board.render())               # drawing with rank numbers and file letters
print(board.valid_moves_string())   # sorted legal moves, space separated
print(board.to_fen())               # the position in the notation above
print(board.debug_string())         # all three together

print(MaterialEvaluator(board).evaluate())
print(AdvancedEvaluator(board).evaluate())

agent = Agent(STARTING_FEN)
move = agent.get_move(2000)         # time limit in milliseconds
print(move)
agent.make_move(move)
agent.make_move(Move.parse("d6d5"))
```

- `congo.pieces` holds the piece encoding (`Piece`), `Move` with
  `Move.parse` and its coordinate `str()`, and `index_to_coordinate`.
- `congo.movegen` holds one generator class per piece type.
- `congo.board.Board` keeps the squares and piece tables, and offers
  `generate_moves`, `make_move`, `unmake_move`, `remove_river_pieces`,
  `is_terminal` and `flip_side`.
- `congo.evaluation` scores a position for the side to play:
  `MaterialEvaluator` by material alone, `AdvancedEvaluator` by material,
  mobility and attacks on enemy pieces. A captured lion scores
  ±1,000,000; lions alone on both sides score 0.
- `congo.agent.Agent` plays moves (`make_move`, `unmake_move`) and searches
  (`minimax`, `get_move`).
- `congo.timer.Timer` is the millisecond stopwatch the search uses.

`Agent.perft(max_depth)` counts reachable positions depth by depth, which
is useful for checking move generation:

```python
for depth, positions, ms in Agent(STARTING_FEN).perft(3):
    print(depth, positions, ms)
```

## What it does not do

Moves given to `Agent.make_move`, `Board.make_move` or the `moves`
instruction are played as given; they are not checked against the legal
moves. There is no graphical board and no saving of games.