"""
Errors raised by the rules engine and the search.

Single-move errors derive from ``MoveError`` (a ``ValueError``) and are
expected to be caught by the move generator, which treats them as "this
atomic move is illegal". ``NoLegalMoves`` is a search-level failure and is
not meant to be recovered from.
"""


class MoveError(ValueError):
    """A single-die move could not be applied."""


class IllegalOrigin(MoveError):
    """Origin is neither a board point nor the bar, or the die is out of range."""


class NoPieceToMove(MoveError):
    """The side has no checker at the origin (or nothing on the bar)."""


class TargetOccupiedByOpponent(MoveError):
    """The destination is a point made by the opponent."""


class BearOffNotAllowed(MoveError):
    """Bearing off before all of the side's checkers are home."""


class BearOffBlocked(MoveError):
    """Overshooting bear-off while a checker sits farther from the exit."""


class NoLegalMoves(RuntimeError):
    """A dice roll produced no candidate positions during search."""
