"""
Abstract base class for game rule sets.

A rule set wraps a game state dictionary and drives a game turn by turn
on top of the rules engine: whose turn it is, which actions are legal,
and what happens when one is applied.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class BaseRuleSet(ABC):
    """Interface for turn-by-turn game drivers."""

    def __init__(self, game_state: Optional[Dict[str, Any]] = None):
        """
        Initialize rule set with current game state.

        Args:
            game_state: Dictionary containing the current game state.
                        A fresh initial state is used when omitted.
        """
        self.game_state = game_state if game_state is not None else self.get_initial_state()

    @abstractmethod
    def get_initial_state(self) -> Dict[str, Any]:
        """Return the initial game state for a new game."""
        pass

    @abstractmethod
    def get_legal_actions(self, player_id: str) -> List[Dict[str, Any]]:
        """
        Get all legal actions for the specified player.

        Args:
            player_id: Identifier for the player (e.g., 'light' or 'dark').

        Returns:
            List of dictionaries describing legal actions. Each action dict
            has at minimum a 'type' key.
        """
        pass

    @abstractmethod
    def apply_action(self, player_id: str, action: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply an action and return the result.

        Raises:
            ValueError: If the action is invalid.
        """
        pass

    @abstractmethod
    def check_winner(self) -> Optional[str]:
        """Return the winner's player ID, or None if the game is ongoing."""
        pass

    @abstractmethod
    def get_current_player(self) -> str:
        """Get the ID of the player whose turn it is."""
        pass

    @abstractmethod
    def validate_state(self) -> bool:
        """Return True if the current game state is legal."""
        pass

    @abstractmethod
    def roll_dice(self) -> Dict[str, Any]:
        """Roll the dice for the current player."""
        pass

    def calculate_score(self, winner_id: str) -> Dict[str, int]:
        """
        Calculate scores for all players after game completion.

        Args:
            winner_id: ID of the winning player.

        Returns:
            Dictionary mapping player IDs to their scores.
        """
        return {winner_id: 1}
