"""
Position evaluation for backgammon.

Provides the static pip-count heuristic and the expectimax search
built on top of it, used by:
- Expectimax players
- The analyze_position management command
"""
from .backgammon import evaluate_position, pip_count
from .expectimax import DICE_OUTCOMES, ExpectimaxEvaluator, best_move, evaluate

__all__ = [
    'DICE_OUTCOMES',
    'ExpectimaxEvaluator',
    'best_move',
    'evaluate',
    'evaluate_position',
    'pip_count',
]
