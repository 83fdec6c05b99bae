"""
Turn generation for backgammon.

Enumerates every distinct position reachable with a roll, applying the
precedence rules for a full turn:
- Use as many dice as possible (both, or all four on doubles)
- Among turns using the same number of dice, prefer the ones with the
  fewest wasteful (overshooting) bear-offs
- Enter from the bar before moving anything else

Results are deduplicated by resulting position, not by move sequence:
moving two different checkers in either order usually lands on the same
board, and counting those twice would bias any search that averages over
candidates.

Candidates are sorted into buckets keyed by (dice used, wasteful moves),
and only the highest-priority non-empty bucket is returned:

    two dice: 2u0w, 2u1w, 2u2w, 1u0w, 1u1w
    doubles:  4u0w..4u4w, 3u0w..3u3w, 2u0w..2u2w, 1u0w, 1u1w

If no die can be played at all the turn is a forced pass (a single
zero-move turn back to the same position) unless passing is disabled.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..conf import engine_setting
from ..exceptions import MoveError
from .game_engine import BAR, NUM_POINTS, BoardState, Move, destination, side_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AtomicMove:
    """A single-die move and the position it leads to."""
    move: Move
    state: BoardState
    wasteful: bool = False


@dataclass(frozen=True)
class Turn:
    """
    A complete turn.

    Attributes:
        state: Resulting position.
        moves: The first move sequence found that reaches ``state``.
        dice_used: Number of dice played (0 for a forced pass).
        wasted: Number of overshooting bear-offs in ``moves``.
    """
    state: BoardState
    moves: Tuple[Move, ...]
    dice_used: int
    wasted: int


def bucket_order(max_dice: int) -> List[Tuple[int, int]]:
    """
    (dice used, wasteful moves) pairs in priority order.

    Returns 5 buckets for a regular roll and 14 for doubles.
    """
    return [
        (used, wasted)
        for used in range(max_dice, 0, -1)
        for wasted in range(used + 1)
    ]


BUCKET_ORDER: Dict[int, List[Tuple[int, int]]] = {
    2: bucket_order(2),
    4: bucket_order(4),
}

BUCKET_INDEX: Dict[int, Dict[Tuple[int, int], int]] = {
    max_dice: {key: i for i, key in enumerate(order)}
    for max_dice, order in BUCKET_ORDER.items()
}


def bucket_label(dice_used: int, wasted: int) -> str:
    """Short bucket name, e.g. '2u1w'."""
    return f'{dice_used}u{wasted}w'


def _check_dice(dice: Sequence[int]) -> Tuple[int, int]:
    if len(dice) != 2:
        raise ValueError(f"Expected two dice, got {list(dice)}")
    for die in dice:
        if not 1 <= die <= 6:
            raise ValueError(f"Die value {die} is out of range")
    low, high = sorted(dice)
    return low, high


class MoveGenerator:
    """
    Generates the legal resulting positions for a roll.

    Holds the per-bucket scratch tables, which are cleared and reused on
    every call. Results are copied out before returning, so a single
    generator can serve a whole recursive search, but it must not be used
    by two searches at the same time.

    Attributes:
        allow_pass: Return a zero-move turn when no die can be played.

    Example:
        generator = MoveGenerator()
        for turn in generator.generate_turns(BoardState.standard(), LIGHT, [6, 5]):
            print(turn.moves)
    """

    def __init__(self, allow_pass: Optional[bool] = None):
        if allow_pass is None:
            allow_pass = engine_setting('ALLOW_PASS')
        self.allow_pass = allow_pass
        self._buckets: Dict[int, List[Dict[BoardState, Tuple[Move, ...]]]] = {
            max_dice: [{} for _ in order]
            for max_dice, order in BUCKET_ORDER.items()
        }

    def single_die_moves(self, state: BoardState, side: str, die: int) -> List[AtomicMove]:
        """
        List the legal atomic moves of one die.

        Only bar entries are tried while the side has captured checkers.
        Overshooting bear-offs are returned only when the die has no other
        legal move.

        Args:
            state: Position to move from.
            side: Side to move.
            die: Die value 1-6.

        Returns:
            Legal moves in origin order.
        """
        sign = 1 if side_index(side) == 0 else -1

        if state.captured[side_index(side)]:
            origins = [BAR]
        else:
            origins = [i for i in range(NUM_POINTS) if state.points[i] * sign > 0]

        regular = []
        wasteful = []

        for origin in origins:
            try:
                result = state.apply_move(side, origin, die)
            except MoveError:
                continue

            move = (origin, destination(side, origin, die))
            if state.is_overshoot(side, origin, die):
                wasteful.append(AtomicMove(move, result, True))
            else:
                regular.append(AtomicMove(move, result, False))

        return regular or wasteful

    def generate_turns(self, state: BoardState, side: str, dice: Sequence[int]) -> List[Turn]:
        """
        Generate the distinct turns allowed by a roll.

        Args:
            state: Position to move from.
            side: Side to move.
            dice: Two die values, in any order.

        Returns:
            Turns from the highest-priority non-empty bucket, in discovery
            order. A forced pass yields ``[Turn(state, (), 0, 0)]``, or an
            empty list when passing is disabled.

        Raises:
            ValueError: If the dice are malformed.
        """
        low, high = _check_dice(dice)

        if low == high:
            max_dice = 4
            sequences = [(low,) * 4]
        else:
            max_dice = 2
            sequences = [(low, high), (high, low)]

        buckets = self._buckets[max_dice]
        index = BUCKET_INDEX[max_dice]

        try:
            for sequence in sequences:
                self._expand(state, side, sequence, buckets, index)

            for (used, wasted), bucket in zip(BUCKET_ORDER[max_dice], buckets):
                if bucket:
                    return [
                        Turn(result, moves, used, wasted)
                        for result, moves in bucket.items()
                    ]
        finally:
            for bucket in buckets:
                bucket.clear()

        logger.debug(f"{side} cannot play {low}-{high}")
        if self.allow_pass:
            return [Turn(state, (), 0, 0)]
        return []

    def generate(self, state: BoardState, side: str, dice: Sequence[int]) -> List[BoardState]:
        """Distinct resulting positions for a roll (see :meth:`generate_turns`)."""
        return [turn.state for turn in self.generate_turns(state, side, dice)]

    def _expand(
        self,
        state: BoardState,
        side: str,
        sequence: Sequence[int],
        buckets: List[Dict[BoardState, Tuple[Move, ...]]],
        index: Dict[Tuple[int, int], int],
    ) -> None:
        """
        Play the dice of ``sequence`` in order, filing finished turns.

        Positions are expanded level by level; a position reached twice
        with the same waste count is expanded once, keeping the first move
        sequence that reached it.
        """
        frontier: Dict[Tuple[BoardState, int], Tuple[Move, ...]] = {(state, 0): ()}

        for played, die in enumerate(sequence):
            next_frontier: Dict[Tuple[BoardState, int], Tuple[Move, ...]] = {}

            for (current, wasted), moves in frontier.items():
                options = self.single_die_moves(current, side, die)

                if not options:
                    # Remaining dice are unusable from here
                    if played:
                        buckets[index[(played, wasted)]].setdefault(current, moves)
                    continue

                for option in options:
                    key = (option.state, wasted + int(option.wasteful))
                    if key not in next_frontier:
                        next_frontier[key] = moves + (option.move,)

            frontier = next_frontier

        for (current, wasted), moves in frontier.items():
            buckets[index[(len(sequence), wasted)]].setdefault(current, moves)


def single_die_moves(state: BoardState, side: str, die: int) -> List[AtomicMove]:
    """Shortcut for :meth:`MoveGenerator.single_die_moves`."""
    return MoveGenerator().single_die_moves(state, side, die)


def generate_turns(state: BoardState, side: str, dice: Sequence[int]) -> List[Turn]:
    """Shortcut for :meth:`MoveGenerator.generate_turns` with a fresh generator."""
    return MoveGenerator().generate_turns(state, side, dice)


def generate(state: BoardState, side: str, dice: Sequence[int]) -> List[BoardState]:
    """Shortcut for :meth:`MoveGenerator.generate` with a fresh generator."""
    return MoveGenerator().generate(state, side, dice)
