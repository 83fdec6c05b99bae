"""
Match runner for playing games between players.

Plays complete backgammon games between any two players using the
backgammon rule set: roll, offer the legal turns, apply the chosen
turn, repeat until one side has borne off everything.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from apps.game.rulesets.backgammon import BackgammonRuleSet
from apps.game.services.game_engine import DARK, LIGHT, BoardState, opponent

if TYPE_CHECKING:
    from ..players.base import BasePlayer

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a single game."""
    winner: Optional[str] = None  # Player ID or None for draw
    loser: Optional[str] = None
    is_draw: bool = False
    points: int = 0
    num_turns: int = 0
    final_state: Optional[BoardState] = None
    player_colors: Dict[str, str] = field(default_factory=dict)
    game_history: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class MatchResult:
    """Result of a match (multiple games)."""
    player_a_id: str
    player_b_id: str
    player_a_wins: int = 0
    player_b_wins: int = 0
    player_a_points: int = 0
    player_b_points: int = 0
    draws: int = 0
    games: List[GameResult] = field(default_factory=list)

    @property
    def total_games(self) -> int:
        return self.player_a_wins + self.player_b_wins + self.draws


class MatchRunner:
    """
    Run games and matches between players.

    Example:
        runner = MatchRunner(seed=1)
        result = runner.run_match(
            ExpectimaxPlayer('search'),
            RandomPlayer('random', seed=2),
            num_games=4,
        )
        print(f"Search wins: {result.player_a_wins}")
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        record_history: bool = False,
        max_turns_per_game: int = 1000,
        starting_board: Optional[BoardState] = None,
    ):
        """
        Initialize the match runner.

        Args:
            seed: Seed for the dice of every game this runner plays.
            record_history: Whether to record each turn played.
            max_turns_per_game: Maximum turns before declaring a draw.
            starting_board: Position every game starts from, with Light to
                move. Defaults to the standard opening.
        """
        self.record_history = record_history
        self.max_turns_per_game = max_turns_per_game
        self.starting_board = starting_board
        self._rng = random.Random(seed)

    def run_game(
        self,
        player_a: 'BasePlayer',
        player_b: 'BasePlayer',
        swap_colors: bool = False,
    ) -> GameResult:
        """
        Run a single game between two players.

        Args:
            player_a: First player (Light unless colors are swapped).
            player_b: Second player.
            swap_colors: If True, player_b plays Light.

        Returns:
            GameResult with winner, points and turn count.
        """
        result = GameResult()

        if swap_colors:
            light_player, dark_player = player_b, player_a
        else:
            light_player, dark_player = player_a, player_b

        players = {LIGHT: light_player, DARK: dark_player}
        result.player_colors = {
            light_player.player_id: LIGHT,
            dark_player.player_id: DARK,
        }

        game_state = None
        if self.starting_board is not None:
            game_state = {'board': self.starting_board, 'current_turn': LIGHT, 'dice': []}
        ruleset = BackgammonRuleSet(game_state, seed=self._rng.randrange(2 ** 32))
        for player in players.values():
            player.on_game_start(ruleset.game_state)

        while result.num_turns < self.max_turns_per_game:
            side = ruleset.get_current_player()
            current_player = players[side]

            ruleset.apply_action(side, {'type': 'roll'})
            legal_actions = ruleset.get_legal_actions(side)

            if not legal_actions:
                # Only reachable when passing is disabled
                ruleset.switch_turn()
                result.num_turns += 1
                continue

            action = current_player.select_action(ruleset.game_state, legal_actions)

            if self.record_history:
                result.game_history.append({
                    'player': current_player.player_id,
                    'color': side,
                    'dice': list(ruleset.game_state['dice']),
                    'moves': action['moves'],
                })

            outcome = ruleset.apply_action(side, action)
            result.num_turns += 1

            if outcome.get('winner'):
                result.winner = players[side].player_id
                result.loser = players[opponent(side)].player_id
                result.points = outcome['score'][side]
                result.final_state = ruleset.board

                summary = {'winner': result.winner, 'points': result.points}
                for player in players.values():
                    player.on_game_end(ruleset.game_state, summary)

                logger.info(
                    f"{result.winner} ({side}) beat {result.loser} for "
                    f"{result.points} point(s) in {result.num_turns} turns"
                )
                return result

        # Game reached turn limit - declare draw
        logger.warning(f"Game stopped after {result.num_turns} turns without a winner")
        result.is_draw = True
        result.final_state = ruleset.board
        return result

    def run_match(
        self,
        player_a: 'BasePlayer',
        player_b: 'BasePlayer',
        num_games: int = 1,
        alternate_colors: bool = True,
    ) -> MatchResult:
        """
        Run a match of multiple games.

        Args:
            player_a: First player.
            player_b: Second player.
            num_games: Number of games in the match.
            alternate_colors: If True, alternate who plays Light.

        Returns:
            MatchResult with wins and points for each player.
        """
        result = MatchResult(
            player_a_id=player_a.player_id,
            player_b_id=player_b.player_id,
        )

        for i in range(num_games):
            swap = alternate_colors and (i % 2 == 1)
            game_result = self.run_game(player_a, player_b, swap_colors=swap)
            result.games.append(game_result)

            if game_result.is_draw:
                result.draws += 1
            elif game_result.winner == player_a.player_id:
                result.player_a_wins += 1
                result.player_a_points += game_result.points
            else:
                result.player_b_wins += 1
                result.player_b_points += game_result.points

        return result
