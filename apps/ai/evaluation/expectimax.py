"""
Brute-force expectimax search.

Alternates chance nodes (the 21 distinct rolls, weighted by probability)
and choice nodes (the best turn for the side to move). No pruning and no
caching across calls: this is a reference search, and its cost grows
combinatorially with depth, so interactive use should stay at 1-2 ply.

Values follow the horizon heuristic (Light's pips minus Dark's):
Light picks the lowest value, Dark the highest.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from apps.game.conf import engine_setting
from apps.game.exceptions import NoLegalMoves
from apps.game.services.game_engine import LIGHT, BoardState, opponent, side_index
from apps.game.services.move_generator import MoveGenerator, Turn

from .backgammon import evaluate_position

logger = logging.getLogger(__name__)

# (die 1, die 2, probability) for every unordered roll
DICE_OUTCOMES: List[Tuple[int, int, float]] = [
    (d1, d2, (1.0 if d1 == d2 else 2.0) / 36.0)
    for d1 in range(1, 7)
    for d2 in range(d1, 7)
]


def _prefers(side: str, value: float, best: float) -> bool:
    """True if ``side`` strictly prefers ``value`` over ``best``."""
    if side == LIGHT:
        return value < best
    return value > best


class ExpectimaxEvaluator:
    """
    Expectimax evaluator over the dice-outcome tree.

    Attributes:
        generator: Move generator whose scratch tables this search reuses.
        max_depth: Largest depth accepted by :meth:`evaluate`.
        nodes_evaluated: Positions visited by the last top-level call.

    Example:
        evaluator = ExpectimaxEvaluator()
        value = evaluator.evaluate(BoardState.standard(), LIGHT, depth=1)
        state, value = evaluator.best_move(BoardState.standard(), LIGHT, [6, 5], depth=1)
    """

    def __init__(
        self,
        generator: Optional[MoveGenerator] = None,
        max_depth: Optional[int] = None,
    ):
        self.generator = generator or MoveGenerator()
        if max_depth is None:
            max_depth = engine_setting('MAX_SEARCH_DEPTH')
        self.max_depth = max_depth
        self.nodes_evaluated = 0

    def evaluate(self, state: BoardState, side: str, depth: int) -> float:
        """
        Expected value of a position with ``side`` about to roll.

        Args:
            state: Position to evaluate.
            side: Side to move.
            depth: Plies to search; 0 returns the static evaluation.

        Returns:
            Expected pip differential (Light minus Dark).

        Raises:
            ValueError: If depth is outside 0..max_depth.
            NoLegalMoves: If some roll produces no candidate positions.
        """
        side_index(side)
        self._check_depth(depth, minimum=0)
        self.nodes_evaluated = 0

        value = self._evaluate(state, side, depth)
        logger.debug(
            f"Evaluated {side} to move at depth {depth}: {value:.3f} "
            f"({self.nodes_evaluated} nodes)"
        )
        return value

    def best_turn(
        self,
        state: BoardState,
        side: str,
        dice: Sequence[int],
        depth: int,
    ) -> Tuple[Turn, float]:
        """
        Pick the best turn for a roll.

        Each candidate is scored with the opponent to move at
        ``depth - 1``. Ties keep the first candidate generated.

        Args:
            state: Position to move from.
            side: Side to move.
            dice: The roll.
            depth: Plies to search, at least 1.

        Returns:
            (turn, value) for the chosen turn.

        Raises:
            ValueError: If depth is outside 1..max_depth.
            NoLegalMoves: If the roll produces no candidate positions.
        """
        side_index(side)
        self._check_depth(depth, minimum=1)
        self.nodes_evaluated = 0

        turn, value = self._best_turn(state, side, dice, depth)
        logger.debug(
            f"Best {side} turn for {list(dice)} at depth {depth}: "
            f"{list(turn.moves)} -> {value:.3f} ({self.nodes_evaluated} nodes)"
        )
        return turn, value

    def best_move(
        self,
        state: BoardState,
        side: str,
        dice: Sequence[int],
        depth: int,
    ) -> Tuple[BoardState, float]:
        """Like :meth:`best_turn`, returning the resulting position."""
        turn, value = self.best_turn(state, side, dice, depth)
        return turn.state, value

    def _check_depth(self, depth: int, minimum: int) -> None:
        if not isinstance(depth, int) or not minimum <= depth <= self.max_depth:
            raise ValueError(
                f"Search depth must be between {minimum} and {self.max_depth}, got {depth}"
            )

    def _evaluate(self, state: BoardState, side: str, depth: int) -> float:
        self.nodes_evaluated += 1

        if depth == 0 or state.winner() is not None:
            return evaluate_position(state)

        total = 0.0
        for d1, d2, probability in DICE_OUTCOMES:
            _, value = self._best_turn(state, side, (d1, d2), depth)
            total += probability * value

        return total

    def _best_turn(
        self,
        state: BoardState,
        side: str,
        dice: Sequence[int],
        depth: int,
    ) -> Tuple[Turn, float]:
        turns = self.generator.generate_turns(state, side, dice)
        if not turns:
            raise NoLegalMoves(f"{side} has no legal moves for {list(dice)}")

        next_side = opponent(side)
        best_turn = None
        best_value = 0.0

        for turn in turns:
            value = self._evaluate(turn.state, next_side, depth - 1)
            if best_turn is None or _prefers(side, value, best_value):
                best_turn = turn
                best_value = value

        return best_turn, best_value


def evaluate(state: BoardState, side: str, depth: int) -> float:
    """Shortcut for :meth:`ExpectimaxEvaluator.evaluate`."""
    return ExpectimaxEvaluator().evaluate(state, side, depth)


def best_move(
    state: BoardState,
    side: str,
    dice: Sequence[int],
    depth: int,
) -> Tuple[BoardState, float]:
    """Shortcut for :meth:`ExpectimaxEvaluator.best_move`."""
    return ExpectimaxEvaluator().best_move(state, side, dice, depth)
