"""
Base player abstraction.

Players choose one action from the legal actions offered by the
rule set. The key method is `select_action`.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class BasePlayer(ABC):
    """
    Abstract base class for all player types.

    Attributes:
        player_id: Unique identifier for this player instance.
        name: Human-readable name for display purposes.

    Example:
        class FirstPlayer(BasePlayer):
            def select_action(self, game_state, legal_actions):
                return legal_actions[0]

            def get_player_type(self):
                return 'first'
    """

    def __init__(self, player_id: str, name: Optional[str] = None):
        """
        Initialize a player.

        Args:
            player_id: Unique identifier for this player.
            name: Optional display name. Defaults to player_id if not provided.
        """
        self.player_id = player_id
        self.name = name or player_id

    @abstractmethod
    def select_action(
        self,
        game_state: Dict[str, Any],
        legal_actions: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Choose an action from the list of legal actions.

        Args:
            game_state: Current game state, e.g.
                {'board': BoardState, 'current_turn': 'light', 'dice': [3, 5]}
            legal_actions: Turn actions from the rule set, e.g.
                {'type': 'turn', 'moves': [[0, 3], [0, 5]], 'state': BoardState, ...}

        Returns:
            A single action dictionary from legal_actions.

        Raises:
            ValueError: If legal_actions is empty.
        """
        pass

    @abstractmethod
    def get_player_type(self) -> str:
        """Return the type identifier for this player (e.g., 'random')."""
        pass

    def on_game_start(self, game_state: Dict[str, Any]) -> None:
        """Called when a new game starts."""
        pass

    def on_game_end(self, game_state: Dict[str, Any], result: Dict[str, Any]) -> None:
        """
        Called when a game ends.

        Args:
            game_state: Final game state.
            result: Dictionary with 'winner' and 'points'.
        """
        pass

    def get_config(self) -> Dict[str, Any]:
        """Return player configuration."""
        return {
            'player_id': self.player_id,
            'name': self.name,
            'type': self.get_player_type(),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.player_id})"

    def __str__(self) -> str:
        return f"{self.name} ({self.get_player_type()})"
