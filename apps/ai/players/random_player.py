"""
Random player implementation.

Picks uniformly among the legal turns. Used as a baseline opponent and
for smoke-testing full games.
"""
import random
from typing import Any, Dict, List, Optional

from .base import BasePlayer


class RandomPlayer(BasePlayer):
    """
    A player that chooses turns uniformly at random.

    Attributes:
        seed: Optional random seed for reproducibility.
    """

    def __init__(
        self,
        player_id: str,
        name: Optional[str] = None,
        seed: Optional[int] = None,
    ):
        super().__init__(player_id=player_id, name=name or 'Random Player')
        self.seed = seed
        self._rng = random.Random(seed)

    def select_action(
        self,
        game_state: Dict[str, Any],
        legal_actions: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        if not legal_actions:
            raise ValueError("Cannot select from empty action list")

        return self._rng.choice(legal_actions)

    def get_player_type(self) -> str:
        return 'random'

    def get_config(self) -> Dict[str, Any]:
        config = super().get_config()
        config['seed'] = self.seed
        return config
