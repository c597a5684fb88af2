import pytest

from congo.board import STARTING_FEN, Board
from congo.evaluation import (
    MAX_EVAL,
    PIECE_VALUES,
    AdvancedEvaluator,
    Evaluator,
    MaterialEvaluator,
)
from congo.pieces import Move, Piece

MIDGAME_FEN = "3l3/7/7/7/7/7/3LZ2 {side} 0"


def test_evaluator_is_abstract():
    with pytest.raises(TypeError):
        Evaluator(Board(STARTING_FEN))


@pytest.mark.parametrize(
    "symbol, value",
    [("P", 100), ("Z", 300), ("S", 350), ("G", 400)],
)
def test_material_value_of_single_extra_piece(symbol, value):
    board = Board(f"3l3/7/7/7/7/7/3L{symbol}2 w 0")
    assert MaterialEvaluator(board).evaluate() == value


@pytest.mark.parametrize("evaluator_cls", [MaterialEvaluator, AdvancedEvaluator])
def test_win_and_loss(evaluator_cls):
    assert evaluator_cls(Board("7/7/7/7/7/7/3L3 w 0")).evaluate() == MAX_EVAL
    assert evaluator_cls(Board("7/7/7/7/7/7/3L3 b 0")).evaluate() == -MAX_EVAL


@pytest.mark.parametrize("evaluator_cls", [MaterialEvaluator, AdvancedEvaluator])
def test_lone_lions_draw(evaluator_cls):
    assert evaluator_cls(Board("3l3/7/7/7/7/7/3L3 w 0")).evaluate() == 0


@pytest.mark.parametrize("evaluator_cls", [MaterialEvaluator, AdvancedEvaluator])
def test_starting_position_is_balanced(evaluator_cls):
    assert evaluator_cls(Board(STARTING_FEN)).evaluate() == 0


def test_material_evaluator_counts_from_side_to_play():
    white = MaterialEvaluator(Board(MIDGAME_FEN.format(side="w"))).evaluate()
    black = MaterialEvaluator(Board(MIDGAME_FEN.format(side="b"))).evaluate()
    assert white == PIECE_VALUES[Piece.ZEBRA]
    assert black == -PIECE_VALUES[Piece.ZEBRA]


def test_material_score_is_from_white_view():
    board = Board(MIDGAME_FEN.format(side="b"))
    assert AdvancedEvaluator(board).material_score() == PIECE_VALUES[Piece.ZEBRA]
    assert AdvancedEvaluator(Board(STARTING_FEN)).material_score() == 0


def test_mobility_score_is_length_difference():
    moves = Board(STARTING_FEN).generate_moves()
    assert AdvancedEvaluator.mobility_score(moves, []) == len(moves)
    assert AdvancedEvaluator.mobility_score([], moves) == -len(moves)
    assert AdvancedEvaluator.mobility_score(moves, moves) == 0


def test_attack_score():
    evaluator = AdvancedEvaluator(Board("3l3/7/7/7/7/7/3L3 w 0"))
    assert evaluator.attack_score([Move(3, 45)]) == 11
    assert evaluator.attack_score([Move(3, 10)]) == 0
    assert evaluator.attack_score([]) == 0


def test_attack_score_ignores_own_pieces():
    evaluator = AdvancedEvaluator(Board("3l3/7/7/7/7/7/3L3 b 0"))
    assert evaluator.attack_score([Move(45, 3)]) == 11
    assert evaluator.attack_score([Move(3, 45)]) == 0


def test_advanced_score_flips_with_side_to_play():
    white = AdvancedEvaluator(Board(MIDGAME_FEN.format(side="w"))).evaluate()
    black = AdvancedEvaluator(Board(MIDGAME_FEN.format(side="b"))).evaluate()
    assert white == -black
    assert white > 0


def test_advanced_evaluate_leaves_board_unchanged():
    board = Board(MIDGAME_FEN.format(side="b"))
    before = (board.to_fen(), list(board.squares), board.side_to_play)
    AdvancedEvaluator(board).evaluate()
    assert (board.to_fen(), list(board.squares), board.side_to_play) == before