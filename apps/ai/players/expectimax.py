"""
Expectimax player implementation.

Selects turns with the brute-force expectimax search: every legal
resulting position is scored by averaging over the opponent's rolls
down to the configured depth.
"""
from typing import Any, Dict, List, Optional

from apps.game.conf import engine_setting

from ..evaluation.expectimax import ExpectimaxEvaluator
from .base import BasePlayer


class ExpectimaxPlayer(BasePlayer):
    """
    A player that searches for the best turn.

    Depth 1 picks the turn with the best pip differential; each extra ply
    averages over one more round of rolls and gets much slower.

    Attributes:
        depth: Search depth passed to the evaluator.
        evaluator: The evaluator (and move generator) this player reuses.

    Example:
        player = ExpectimaxPlayer(player_id='search_1', depth=1)
        action = player.select_action(game_state, legal_actions)
    """

    def __init__(
        self,
        player_id: str,
        name: Optional[str] = None,
        depth: Optional[int] = None,
        evaluator: Optional[ExpectimaxEvaluator] = None,
    ):
        super().__init__(player_id=player_id, name=name or 'Expectimax Player')
        self.depth = depth if depth is not None else engine_setting('SEARCH_DEPTH')
        self.evaluator = evaluator or ExpectimaxEvaluator()
        self.last_value: Optional[float] = None

    def select_action(
        self,
        game_state: Dict[str, Any],
        legal_actions: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Select the turn the search rates best for the side to move.

        Raises:
            ValueError: If legal_actions is empty or the searched turn is
                not among them.
        """
        if not legal_actions:
            raise ValueError("Cannot select from empty action list")

        if len(legal_actions) == 1:
            return legal_actions[0]

        turn, value = self.evaluator.best_turn(
            game_state['board'],
            game_state['current_turn'],
            game_state['dice'],
            self.depth,
        )
        self.last_value = value

        for action in legal_actions:
            if action['state'] == turn.state:
                return action

        raise ValueError("Searched turn is not among the legal actions")

    def get_player_type(self) -> str:
        return 'expectimax'

    def get_config(self) -> Dict[str, Any]:
        config = super().get_config()
        config['depth'] = self.depth
        return config
