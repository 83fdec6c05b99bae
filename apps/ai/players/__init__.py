"""
Player abstractions for AI players.

All players share the `select_action` interface used by the match runner.
"""
from .base import BasePlayer
from .random_player import RandomPlayer
from .expectimax import ExpectimaxPlayer

PLAYER_TYPES = {
    'random': RandomPlayer,
    'expectimax': ExpectimaxPlayer,
}

__all__ = [
    'BasePlayer',
    'RandomPlayer',
    'ExpectimaxPlayer',
    'PLAYER_TYPES',
]
