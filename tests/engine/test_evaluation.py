"""Tests for the static evaluator and the passed-pawn test."""

import pytest

from pawnrace.core.board import Board
from pawnrace.core.enums import Colour
from pawnrace.core.notation import board_from_diagram
from pawnrace.engine.evaluation import WIN_SCORE, EvalWeights, Evaluator, is_passed_pawn
from pawnrace.game.state import Game

POSITIONS = [
    Board.initial(),
    Board.initial(5, white_gap=1, black_gap=3),
    board_from_diagram(
        """
        . . . . . . . .
        . B . . . B . .
        . . . . . . . .
        . . . W . . . .
        . . B . . . . .
        . . . . . . . .
        W . . . . W . W
        . . . . . . . .
        """
    ),
    board_from_diagram(
        """
        . . . . .
        . B . . .
        . . W B .
        . W . . .
        . . . . .
        """
    ),
]


def _square(board: Board, x: int, y: int):
    sq = board.get_square(x, y)
    assert sq is not None
    return sq


class TestEvaluate:
    def test_initial_position_is_balanced(self) -> None:
        game = Game()
        assert Evaluator().evaluate(game, Colour.WHITE) == 0

    @pytest.mark.parametrize("board", POSITIONS)
    def test_antisymmetry(self, board: Board) -> None:
        evaluator = Evaluator()
        for side in (Colour.WHITE, Colour.BLACK):
            game = Game(board.copy(), side)
            assert evaluator.evaluate(game, Colour.WHITE) == -evaluator.evaluate(
                game, Colour.BLACK
            )

    def test_advancement_and_passed_terms(self) -> None:
        board = Board(8)
        board.place(0, 3, Colour.WHITE)  # a4: 4 from promotion, passed
        board.place(7, 6, Colour.BLACK)  # h7: 6 from promotion, passed
        game = Game(board)
        # white: (8 - 4) * 10 + 50 = 90; black: (8 - 6) * 10 + 50 = 70
        assert Evaluator().evaluate(game, Colour.WHITE) == 20
        assert Evaluator().evaluate(game, Colour.BLACK) == -20

    def test_material(self) -> None:
        board = Board(8)
        board.place(0, 1, Colour.WHITE)
        board.place(1, 1, Colour.WHITE)
        board.place(7, 6, Colour.BLACK)
        game = Game(board)
        weights = EvalWeights(advancement_value=0, passed_pawn_bonus=0)
        assert Evaluator(weights).evaluate(game, Colour.WHITE) == 100

    def test_custom_weights(self) -> None:
        board = Board(8)
        board.place(0, 3, Colour.WHITE)
        board.place(7, 6, Colour.BLACK)
        game = Game(board)
        weights = EvalWeights(pawn_value=0, advancement_value=1, passed_pawn_bonus=0)
        assert Evaluator(weights).evaluate(game, Colour.WHITE) == 2

    def test_decided_game_scores_win_and_loss(self) -> None:
        game = Game(board_from_diagram("W . .\n. . .\n. . B"), Colour.BLACK)
        evaluator = Evaluator()
        assert evaluator.evaluate(game, Colour.WHITE) == WIN_SCORE
        assert evaluator.evaluate(game, Colour.BLACK) == -WIN_SCORE
        winner = game.game_result()
        assert evaluator.evaluate(game, Colour.WHITE, winner) == WIN_SCORE
        assert evaluator.evaluate(game, Colour.BLACK, winner) == -WIN_SCORE


class TestPassedPawn:
    def test_lone_pawn_is_passed(self) -> None:
        board = Board(8)
        board.place(3, 3, Colour.WHITE)
        board.place(0, 6, Colour.BLACK)
        assert is_passed_pawn(board, _square(board, 3, 3), Colour.WHITE)

    @pytest.mark.parametrize("blocker", [(3, 4), (2, 5), (4, 6), (4, 7), (2, 7)])
    def test_blocker_ahead_disqualifies(self, blocker: tuple[int, int]) -> None:
        board = Board(8)
        board.place(3, 3, Colour.WHITE)
        board.place(*blocker, Colour.BLACK)
        assert not is_passed_pawn(board, _square(board, 3, 3), Colour.WHITE)

    @pytest.mark.parametrize("bystander", [(3, 2), (4, 3), (1, 6), (5, 5), (2, 0)])
    def test_pawns_behind_or_far_do_not_count(self, bystander: tuple[int, int]) -> None:
        board = Board(8)
        board.place(3, 3, Colour.WHITE)
        board.place(*bystander, Colour.BLACK)
        assert is_passed_pawn(board, _square(board, 3, 3), Colour.WHITE)

    def test_black_scans_downwards(self) -> None:
        board = Board(8)
        board.place(0, 4, Colour.BLACK)
        board.place(1, 5, Colour.WHITE)
        assert is_passed_pawn(board, _square(board, 0, 4), Colour.BLACK)
        board.place(1, 0, Colour.WHITE)
        assert not is_passed_pawn(board, _square(board, 0, 4), Colour.BLACK)

    def test_own_pawns_do_not_block(self) -> None:
        board = Board(8)
        board.place(3, 3, Colour.WHITE)
        board.place(3, 5, Colour.WHITE)
        assert is_passed_pawn(board, _square(board, 3, 3), Colour.WHITE)

    def test_wrong_colour_is_not_passed(self) -> None:
        board = Board(8)
        board.place(3, 3, Colour.WHITE)
        assert not is_passed_pawn(board, _square(board, 3, 3), Colour.BLACK)
        assert not is_passed_pawn(board, _square(board, 4, 4), Colour.WHITE)
