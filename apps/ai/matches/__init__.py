"""
Match infrastructure for backgammon players.

Example usage:
    from apps.ai.matches import MatchRunner
    from apps.ai.players import ExpectimaxPlayer, RandomPlayer

    runner = MatchRunner(seed=3)
    result = runner.run_match(ExpectimaxPlayer('search'), RandomPlayer('random'), num_games=10)
    print(f"Search wins: {result.player_a_wins}")
"""
from .runner import GameResult, MatchResult, MatchRunner

__all__ = [
    'GameResult',
    'MatchResult',
    'MatchRunner',
]
