"""
Backgammon rules engine.

Owns the board representation and the single-die move rules:
- Board state (points, bar, borne-off checkers)
- Single-die move validation and application
- Hitting blots and entering from the bar
- Bearing off, including the farthest-checker rule
- Pip counting

Board Representation:
    Points are indexed 0-23.
    Positive values: Light checkers (move toward 23, bear off past 23)
    Negative values: Dark checkers (move toward 0, bear off past 0)
    Light's home board is 18-23, Dark's home board is 0-5.

    BAR (24) as a move origin means "enter from the bar".
    OFF (25) as a move destination means "bear off".
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from ..exceptions import (
    BearOffBlocked,
    BearOffNotAllowed,
    IllegalOrigin,
    NoPieceToMove,
    TargetOccupiedByOpponent,
)

LIGHT = 'light'
DARK = 'dark'
SIDES = (LIGHT, DARK)

# Board constants
NUM_POINTS = 24
HOME_SIZE = 6
CHECKERS_PER_SIDE = 15
BAR = 24
OFF = 25
BAR_DISTANCE = 25

Move = Tuple[int, int]


def side_index(side: str) -> int:
    """Return the counter index for a side (Light 0, Dark 1)."""
    if side == LIGHT:
        return 0
    if side == DARK:
        return 1
    raise ValueError(f"Unknown side: {side!r}")


def opponent(side: str) -> str:
    """Return the other side."""
    return DARK if side_index(side) == 0 else LIGHT


def _direction(side: str) -> int:
    return 1 if side_index(side) == 0 else -1


def destination(side: str, origin: int, die: int) -> int:
    """
    Calculate where a single-die move lands.

    Returns the entry point for BAR origins, OFF when the move leaves
    the board, and the target point index otherwise. Does not check
    legality.
    """
    sign = _direction(side)
    if origin == BAR:
        return die - 1 if sign > 0 else NUM_POINTS - die
    target = origin + sign * die
    if not 0 <= target < NUM_POINTS:
        return OFF
    return target


@dataclass(frozen=True)
class BoardState:
    """
    Immutable backgammon position.

    Every move produces a new instance, so two logically distinct positions
    never share storage. Equality and hashing are structural, which lets
    the move generator deduplicate positions with a plain dict.

    Attributes:
        points: 24 signed occupancy counts (sign = owner, magnitude 0-15).
        captured: Checkers on the bar, as (light, dark).
        finished: Checkers borne off, as (light, dark).
    """

    points: Tuple[int, ...] = (0,) * NUM_POINTS
    captured: Tuple[int, int] = (0, 0)
    finished: Tuple[int, int] = (0, 0)

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(self.points))
        object.__setattr__(self, 'captured', tuple(self.captured))
        object.__setattr__(self, 'finished', tuple(self.finished))

        if len(self.points) != NUM_POINTS:
            raise ValueError(f"Board must have {NUM_POINTS} points, got {len(self.points)}")
        for count in self.points:
            if abs(count) > CHECKERS_PER_SIDE:
                raise ValueError(f"Point count {count} exceeds {CHECKERS_PER_SIDE} checkers")
        for name in ('captured', 'finished'):
            counters = getattr(self, name)
            if len(counters) != 2 or any(c < 0 or c > CHECKERS_PER_SIDE for c in counters):
                raise ValueError(f"Invalid {name} counters: {counters}")

    # Constructors

    @classmethod
    def empty(cls) -> 'BoardState':
        """Return a board with no checkers anywhere."""
        return cls()

    @classmethod
    def standard(cls) -> 'BoardState':
        """Return the standard starting position."""
        return cls.from_points({
            0: 2,      # Light: 2 checkers
            5: -5,     # Dark: 5 checkers
            7: -3,     # Dark: 3 checkers
            11: 5,     # Light: 5 checkers
            12: -5,    # Dark: 5 checkers
            16: 3,     # Light: 3 checkers
            18: 5,     # Light: 5 checkers
            23: -2,    # Dark: 2 checkers
        })

    @classmethod
    def from_points(
        cls,
        points: Mapping[int, int],
        captured: Tuple[int, int] = (0, 0),
        finished: Tuple[int, int] = (0, 0),
    ) -> 'BoardState':
        """
        Build a position from a sparse {index: signed count} mapping.

        Args:
            points: Occupied points only; missing indices are empty.
            captured: Checkers on the bar, as (light, dark).
            finished: Checkers borne off, as (light, dark).
        """
        board = [0] * NUM_POINTS
        for index, count in points.items():
            if not 0 <= index < NUM_POINTS:
                raise ValueError(f"Point index {index} out of range")
            board[index] = count
        return cls(tuple(board), captured, finished)

    # Queries

    def count(self, side: str, index: int) -> int:
        """Number of the side's checkers on a point."""
        return max(0, self.points[index] * _direction(side))

    def checkers_on_board(self, side: str) -> int:
        sign = _direction(side)
        return sum(c * sign for c in self.points if c * sign > 0)

    def checker_total(self, side: str) -> int:
        """On-board + captured + finished checkers for a side."""
        idx = side_index(side)
        return self.checkers_on_board(side) + self.captured[idx] + self.finished[idx]

    def validate(self) -> None:
        """
        Check checker conservation for both sides.

        Raises:
            ValueError: If a side does not account for exactly 15 checkers.
        """
        for side in SIDES:
            total = self.checker_total(side)
            if total != CHECKERS_PER_SIDE:
                raise ValueError(
                    f"{side} has {total} checkers, expected {CHECKERS_PER_SIDE}"
                )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValueError:
            return False
        return True

    def is_all_home(self, side: str) -> bool:
        """True if the side has nothing on the bar and every checker is home."""
        if self.captured[side_index(side)]:
            return False

        if side == LIGHT:
            return all(c <= 0 for c in self.points[:NUM_POINTS - HOME_SIZE])
        return all(c >= 0 for c in self.points[HOME_SIZE:])

    def distance_to_exit(self, side: str, index: int) -> int:
        """Pips a checker at ``index`` (or on the bar) needs to bear off."""
        if index == BAR:
            return BAR_DISTANCE
        if side_index(side) == 0:
            return NUM_POINTS - index
        return index + 1

    def is_overshoot(self, side: str, origin: int, die: int) -> bool:
        """True if moving from ``origin`` bears off with pips to spare."""
        if origin == BAR:
            return False
        return die > self.distance_to_exit(side, origin)

    def total_pip_distance(self) -> Tuple[int, int]:
        """
        Total pips each side must travel to bear off everything.

        Returns:
            (light, dark) distances; bar checkers count 25 each.
        """
        light = self.captured[0] * BAR_DISTANCE
        dark = self.captured[1] * BAR_DISTANCE

        for index, count in enumerate(self.points):
            if count > 0:
                light += count * (NUM_POINTS - index)
            elif count < 0:
                dark += -count * (index + 1)

        return light, dark

    def net_pip_distance(self) -> int:
        """Light's pip distance minus Dark's (negative favours Light)."""
        light, dark = self.total_pip_distance()
        return light - dark

    def winner(self) -> Optional[str]:
        """Return the side that has borne off all checkers, if any."""
        for side in SIDES:
            if self.finished[side_index(side)] == CHECKERS_PER_SIDE:
                return side
        return None

    # Moves

    def apply_move(self, side: str, origin: int, die: int) -> 'BoardState':
        """
        Move one checker of ``side`` by ``die`` pips.

        Args:
            side: LIGHT or DARK.
            origin: Point index 0-23, or BAR to enter a captured checker.
            die: Die value 1-6.

        Returns:
            The resulting position (this instance is left untouched).

        Raises:
            IllegalOrigin: Origin or die out of range.
            NoPieceToMove: No checker of ``side`` at the origin.
            TargetOccupiedByOpponent: Destination is an opposing made point.
            BearOffNotAllowed: Bearing off before all checkers are home.
            BearOffBlocked: Overshooting while a checker is farther back.
        """
        if not 1 <= die <= 6:
            raise IllegalOrigin(f"Die value {die} is out of range")

        idx = side_index(side)
        sign = _direction(side)
        points = list(self.points)
        captured = list(self.captured)
        finished = list(self.finished)

        if origin == BAR:
            if captured[idx] == 0:
                raise NoPieceToMove(f"{side} has no captured checkers")
            target = destination(side, BAR, die)
            captured[idx] -= 1
        elif 0 <= origin < NUM_POINTS:
            if points[origin] * sign <= 0:
                raise NoPieceToMove(f"{side} has no checker on point {origin}")
            target = destination(side, origin, die)
            points[origin] -= sign

            if target == OFF:
                self._check_bear_off(side, origin, die)
                finished[idx] += 1
                return BoardState(tuple(points), tuple(captured), tuple(finished))
        else:
            raise IllegalOrigin(f"Illegal origin {origin}")

        occupant = points[target] * sign
        if occupant <= -2:
            raise TargetOccupiedByOpponent(f"Point {target} is held by the opponent")

        if occupant == -1:
            # Hit: the lone opposing checker goes to the bar
            points[target] = sign
            captured[1 - idx] += 1
        else:
            points[target] += sign

        return BoardState(tuple(points), tuple(captured), tuple(finished))

    def _check_bear_off(self, side: str, origin: int, die: int) -> None:
        if not self.is_all_home(side):
            raise BearOffNotAllowed(f"{side} still has checkers outside home")

        if self.is_overshoot(side, origin, die) and self._has_checker_behind(side, origin):
            raise BearOffBlocked(
                f"{side} must bear off from farther back before using {die} from {origin}"
            )

    def _has_checker_behind(self, side: str, origin: int) -> bool:
        """True if the side has a checker strictly farther from the exit."""
        if side == LIGHT:
            return any(c > 0 for c in self.points[:origin])
        return any(c < 0 for c in self.points[origin + 1:])

    # Views

    def mirrored(self) -> 'BoardState':
        """Return the side-swapped position (Light and Dark exchange roles)."""
        return BoardState(
            tuple(-c for c in reversed(self.points)),
            (self.captured[1], self.captured[0]),
            (self.finished[1], self.finished[0]),
        )

    def snapshot(self) -> Dict[str, Any]:
        """Read-only, JSON-friendly view for renderers."""
        light, dark = self.total_pip_distance()
        return {
            'points': list(self.points),
            'captured': {LIGHT: self.captured[0], DARK: self.captured[1]},
            'finished': {LIGHT: self.finished[0], DARK: self.finished[1]},
            'pips': {LIGHT: light, DARK: dark},
        }


def apply_move(state: BoardState, side: str, origin: int, die: int) -> BoardState:
    """Functional form of :meth:`BoardState.apply_move`."""
    return state.apply_move(side, origin, die)
