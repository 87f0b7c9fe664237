"""
Tests for reversi.agent.search and reversi.agent.heuristics

Tests the alpha-beta evaluator and its heuristic terms.
"""

import numpy as np
import pytest

from conftest import board_from_rows
from reversi.agent import heuristics
from reversi.agent.config import SearchConfig
from reversi.agent.search import AlphaBetaEvaluator, ordered_moves
from reversi.core.errors import EvaluatorContractError
from reversi.core.types import FIRST, SECOND, unflatten_index
from reversi.games.game_rules import initial_board, legal_moves, move_scores


# Two options for the mover: a three-disc capture at (0,4) and a
# one-disc capture at (4,5).
GREEDY_ROWS = [
    "XOOO....",
    "........",
    "........",
    "........",
    "........",
    ".....O..",
    ".....X..",
]

COIN_ONLY = SearchConfig(
    max_depth=1,
    use_coin_parity=True,
    use_stability_score=False,
)


@pytest.fixture
def evaluator() -> AlphaBetaEvaluator:
    return AlphaBetaEvaluator()


class TestSearchConfig:
    """SearchConfig validation."""

    def test_defaults(self):
        """Coin parity and stability on, the rest off."""
        config = SearchConfig(max_depth=3)
        assert config.use_coin_parity and config.use_stability_score
        assert not (config.use_actual_mobility or config.use_potential_mobility or config.use_corner_score)

    def test_depth_must_be_positive(self):
        """Depth 0 is rejected."""
        with pytest.raises(ValueError):
            SearchConfig(max_depth=0)


class TestOrderedMoves:
    """Move ordering tests."""

    def test_biggest_capture_first(self):
        """Moves are sorted by flip count."""
        board = board_from_rows(GREEDY_ROWS)
        assert ordered_moves(FIRST, board) == [(0, 4), (4, 5)]

    def test_ties_keep_row_major_order(self):
        """Equal captures stay in board order."""
        assert ordered_moves(FIRST, initial_board()) == [(2, 3), (3, 2), (4, 5), (5, 4)]


class TestChoose:
    """AlphaBetaEvaluator.choose tests."""

    def test_greedy_at_depth_one(self, evaluator):
        """With coin parity only, First takes the bigger capture."""
        board = board_from_rows(GREEDY_ROWS).ravel()
        assert evaluator.choose(board, FIRST, COIN_ONLY) == 4

    def test_second_minimises(self, evaluator):
        """Second takes the bigger capture on the mirrored board."""
        board = (-board_from_rows(GREEDY_ROWS)).ravel()
        assert evaluator.choose(board, SECOND, COIN_ONLY) == 4

    @pytest.mark.parametrize("config", [
        SearchConfig(max_depth=1),
        SearchConfig(max_depth=2, use_corner_score=True),
        SearchConfig(
            max_depth=3,
            use_actual_mobility=True,
            use_potential_mobility=True,
            use_corner_score=True,
        ),
    ])
    @pytest.mark.parametrize("player", [FIRST, SECOND])
    def test_returns_legal_index(self, evaluator, config, player):
        """Whatever the tier, the answer is a legal cell index."""
        board = initial_board()
        index = evaluator.choose(board.ravel(), player, config)
        assert 0 <= index < 64
        r, c = unflatten_index(index)
        assert legal_moves(player, board)[r, c]
        assert evaluator.nodes > 0

    def test_deterministic(self, evaluator):
        """Same position, same answer."""
        board = initial_board().ravel()
        config = SearchConfig(max_depth=3, use_corner_score=True)
        assert evaluator.choose(board, FIRST, config) == evaluator.choose(board, FIRST, config)

    def test_no_move_raises(self, evaluator):
        """Asking for a move where none exists breaks the contract."""
        board = board_from_rows(["XO......"]).ravel()
        with pytest.raises(EvaluatorContractError):
            evaluator.choose(board, SECOND, COIN_ONLY)

    def test_wrong_size_raises(self, evaluator):
        """Boards must have 64 cells."""
        with pytest.raises(ValueError):
            evaluator.choose(np.zeros(63, dtype=np.int8), FIRST, COIN_ONLY)


class TestHeuristics:
    """Static evaluation terms."""

    def test_opening_is_balanced(self):
        """Every term is zero on the symmetric opening."""
        board = initial_board()
        first = move_scores(FIRST, board)
        second = move_scores(SECOND, board)
        assert heuristics.coin_parity(board) == 0
        assert heuristics.actual_mobility(first, second) == 0
        assert heuristics.potential_mobility(board) == 0
        assert heuristics.corner_score(board, first, second) == 0
        assert heuristics.stability_score(board) == 0

    def test_coin_parity(self):
        """Coin parity is the disc sum."""
        board = board_from_rows(["XXXO...."])
        assert heuristics.coin_parity(board) == 2

    def test_owned_corner(self):
        """Owning a corner with no contest scores a full ratio."""
        board = board_from_rows(["X......."])
        first = move_scores(FIRST, board)
        second = move_scores(SECOND, board)
        assert heuristics.corner_score(board, first, second) == 1.0

    def test_stability_weights(self):
        """Corners weigh 4, X-squares -4."""
        board = board_from_rows(["X.......", ".O......"])
        assert heuristics.stability_score(board) == 4 - (-4)

    def test_potential_mobility(self):
        """Empty cells next to Second's disc count for First."""
        board = board_from_rows([
            "........",
            "........",
            "........",
            "...O....",
        ])
        assert heuristics.potential_mobility(board) == 1.0

    def test_weighted_sum(self):
        """evaluate combines enabled terms with their weights."""
        board = board_from_rows(["XXXO...."])
        assert heuristics.evaluate(board, COIN_ONLY) == 2 * heuristics.COIN_PARITY_WEIGHT
        config = SearchConfig(max_depth=1, use_coin_parity=False, use_stability_score=True)
        expected = heuristics.stability_score(board) * heuristics.STABILITY_WEIGHT
        assert heuristics.evaluate(board, config) == expected
