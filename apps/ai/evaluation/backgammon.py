"""
Backgammon position heuristics.

The search bottoms out on the race: the pip count differential.
Values are Light's remaining distance minus Dark's, so lower values
are better for Light and higher values are better for Dark.
"""
from apps.game.services.game_engine import BoardState, side_index


def pip_count(state: BoardState, side: str) -> int:
    """
    Calculate the pip count for a side.

    Pip count is the total number of pips a side must move to bear off
    all checkers. Checkers on the bar count 25 each. Lower is better.

    Args:
        state: Backgammon position.
        side: LIGHT or DARK.

    Returns:
        Total pip count for the side.
    """
    return state.total_pip_distance()[side_index(side)]


def evaluate_position(state: BoardState) -> float:
    """
    Static evaluation used at the search horizon.

    Args:
        state: Backgammon position.

    Returns:
        Light's pip count minus Dark's, as a float.
    """
    return float(state.net_pip_distance())
