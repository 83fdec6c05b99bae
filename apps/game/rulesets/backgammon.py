"""
Backgammon turn driver.

Drives a game on top of the rules engine and move generator:
- Dice rolling (seedable)
- Legal turns for the current roll
- Applying a whole turn, by resulting position or by move list
- Win detection and scoring (single, gammon, backgammon)

Game state:
    {
        'board': BoardState,
        'current_turn': 'light' | 'dark',
        'dice': [] or [die1, die2],
    }
"""
import logging
import random
from typing import Any, Dict, List, Optional, Sequence

from ..exceptions import MoveError
from ..services.game_engine import (
    HOME_SIZE,
    LIGHT,
    NUM_POINTS,
    BoardState,
    destination,
    opponent,
    side_index,
)
from ..services.move_generator import MoveGenerator
from .base import BaseRuleSet

logger = logging.getLogger(__name__)


class BackgammonRuleSet(BaseRuleSet):
    """
    Backgammon game driver.

    A turn is applied as a whole: the submitted turn must reach one of the
    positions the move generator allows for the current roll. When no die
    can be played, the only legal action is an empty turn (a pass).

    Example:
        ruleset = BackgammonRuleSet(seed=7)
        ruleset.apply_action('light', {'type': 'roll'})
        actions = ruleset.get_legal_actions('light')
        ruleset.apply_action('light', actions[0])
    """

    def __init__(
        self,
        game_state: Optional[Dict[str, Any]] = None,
        seed: Optional[int] = None,
        generator: Optional[MoveGenerator] = None,
    ):
        super().__init__(game_state)
        self.generator = generator or MoveGenerator()
        self._rng = random.Random(seed)

    def get_initial_state(self) -> Dict[str, Any]:
        """Return standard backgammon starting position."""
        return {
            'board': BoardState.standard(),
            'current_turn': LIGHT,
            'dice': [],
        }

    @property
    def board(self) -> BoardState:
        return self.game_state['board']

    def roll_dice(self) -> Dict[str, Any]:
        """Roll two dice and list the turns they allow."""
        die1 = self._rng.randint(1, 6)
        die2 = self._rng.randint(1, 6)
        self.game_state['dice'] = [die1, die2]

        return {
            'dice': [die1, die2],
            'legal_moves': self.get_legal_actions(self.get_current_player()),
        }

    def get_legal_actions(self, player_id: str) -> List[Dict[str, Any]]:
        """Get all legal turns for the current player and roll."""
        if player_id != self.get_current_player():
            return []

        dice = self.game_state.get('dice', [])
        if not dice:
            return []

        turns = self.generator.generate_turns(self.board, player_id, dice)
        return [
            {
                'type': 'turn',
                'moves': [list(move) for move in turn.moves],
                'state': turn.state,
                'dice_used': turn.dice_used,
            }
            for turn in turns
        ]

    def apply_action(self, player_id: str, action: Dict[str, Any]) -> Dict[str, Any]:
        """Execute an action and return the result."""
        if player_id != self.get_current_player():
            raise ValueError("It's not your turn.")

        action_type = action.get('type')

        if action_type == 'roll':
            if self.game_state.get('dice'):
                raise ValueError("Dice have already been rolled.")
            return self.roll_dice()

        elif action_type == 'turn':
            return self._play_turn(player_id, action)

        raise ValueError(f"Unknown action type: {action_type}")

    def check_winner(self) -> Optional[str]:
        """Check if a side has borne off all checkers."""
        return self.board.winner()

    def get_current_player(self) -> str:
        """Return whose turn it is."""
        return self.game_state.get('current_turn', LIGHT)

    def validate_state(self) -> bool:
        """Validate checker conservation on the board."""
        return self.board.is_valid()

    def calculate_score(self, winner_id: str) -> Dict[str, int]:
        """Calculate score based on win type."""
        loser = opponent(winner_id)
        board = self.board

        if board.finished[side_index(loser)] == 0:
            if board.captured[side_index(loser)] > 0 or self._has_checker_in_home_board(loser, winner_id):
                multiplier = 3  # Backgammon
            else:
                multiplier = 2  # Gammon
        else:
            multiplier = 1  # Normal

        return {winner_id: multiplier, loser: 0}

    def switch_turn(self) -> None:
        """Switch to the other player's turn."""
        self.game_state['current_turn'] = opponent(self.get_current_player())
        self.game_state['dice'] = []

    # Private helper methods

    def _play_turn(self, side: str, action: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a whole turn against the generator and apply it."""
        dice = self.game_state.get('dice', [])
        if not dice:
            raise ValueError("Roll the dice before moving.")

        target = action.get('state')
        if target is None:
            target = self._replay_moves(side, dice, action.get('moves', []))

        legal = {turn.state: turn for turn in self.generator.generate_turns(self.board, side, dice)}
        if target not in legal:
            raise ValueError(f"Illegal turn for {side} with dice {dice}")

        turn = legal[target]
        self.game_state['board'] = target

        winner = self.check_winner()
        if winner:
            score = self.calculate_score(winner)
            logger.info(f"{winner} wins with {score[winner]} point(s)")
            return {'success': True, 'moves': list(turn.moves), 'winner': winner, 'score': score}

        self.switch_turn()
        return {'success': True, 'moves': list(turn.moves)}

    def _replay_moves(
        self,
        side: str,
        dice: Sequence[int],
        moves: Sequence[Sequence[int]],
    ) -> BoardState:
        """Play a list of [from, to] moves, matching each one to a die."""
        remaining = [dice[0]] * 4 if dice[0] == dice[1] else list(dice)
        state = self.board

        for origin, target in moves:
            for die in sorted(set(remaining)):
                if destination(side, origin, die) != target:
                    continue
                try:
                    candidate = state.apply_move(side, origin, die)
                except MoveError:
                    continue
                break
            else:
                raise ValueError(f"Move {origin}->{target} cannot be played with {remaining}")

            state = candidate
            remaining.remove(die)

        return state

    def _has_checker_in_home_board(self, loser: str, winner: str) -> bool:
        """Check if loser has a checker in winner's home board."""
        if winner == LIGHT:
            home = range(NUM_POINTS - HOME_SIZE, NUM_POINTS)
        else:
            home = range(HOME_SIZE)
        return any(self.board.count(loser, point) for point in home)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(turn={self.get_current_player()}, "
            f"dice={self.game_state.get('dice')})"
        )
