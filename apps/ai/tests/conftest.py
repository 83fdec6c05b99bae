"""
Pytest fixtures for AI app tests.

Provides fixtures for:
- Evaluators
- Small positions that keep deep searches fast
- Players and game states built from the rule set
"""
import pytest
from typing import Any, Dict

from apps.ai.evaluation.expectimax import ExpectimaxEvaluator
from apps.game.services.game_engine import LIGHT, BoardState
from apps.game.services.move_generator import MoveGenerator


@pytest.fixture
def evaluator() -> ExpectimaxEvaluator:
    """Return an evaluator that allows forced passes, capped at 3 plies."""
    return ExpectimaxEvaluator(generator=MoveGenerator(allow_pass=True), max_depth=3)


@pytest.fixture
def endgame_board() -> BoardState:
    """Return a position where Light bears off its last two checkers with any roll."""
    return BoardState.from_points(
        {22: 1, 23: 1, 0: -1, 1: -1},
        finished=(13, 13),
    )


@pytest.fixture
def hit_board() -> BoardState:
    """Return a position where Light can hit a Dark blot on point 12."""
    return BoardState.from_points({10: 1, 18: 14, 12: -1, 0: -14})


@pytest.fixture
def hit_game_state(hit_board) -> Dict[str, Any]:
    """Return a rule-set game state for hit_board with Light to play 2-1."""
    return {
        'board': hit_board,
        'current_turn': LIGHT,
        'dice': [2, 1],
    }
