"""
Backgammon rules engine and turn generation.

Usage:
    from apps.game.services import BoardState, LIGHT, MoveGenerator

    state = BoardState.standard()
    state = state.apply_move(LIGHT, 0, 6)
    positions = MoveGenerator().generate(state, LIGHT, [3, 1])
"""
from .game_engine import (
    BAR,
    DARK,
    LIGHT,
    OFF,
    BoardState,
    apply_move,
    destination,
    opponent,
    side_index,
)
from .move_generator import AtomicMove, MoveGenerator, Turn, generate, generate_turns, single_die_moves

__all__ = [
    'BAR',
    'DARK',
    'LIGHT',
    'OFF',
    'AtomicMove',
    'BoardState',
    'MoveGenerator',
    'Turn',
    'apply_move',
    'destination',
    'generate',
    'generate_turns',
    'opponent',
    'side_index',
    'single_die_moves',
]
