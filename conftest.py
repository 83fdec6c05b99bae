"""
Pytest configuration and shared fixtures for the Backgammon engine.

This module provides fixtures for:
- Common board positions
- Move generators and evaluators with fresh scratch tables
"""
import pytest

from apps.game.services.game_engine import BoardState
from apps.game.services.move_generator import MoveGenerator


@pytest.fixture
def standard_board():
    """Return the standard starting position."""
    return BoardState.standard()


@pytest.fixture
def bearing_off_board():
    """Return a position where Light is bearing off."""
    from apps.game.tests.factories import BearingOffBoardFactory
    return BearingOffBoardFactory()


@pytest.fixture
def race_board():
    """Return a symmetric no-contact position."""
    from apps.game.tests.factories import RaceBoardFactory
    return RaceBoardFactory()


@pytest.fixture
def bar_board():
    """Return a position with one Light checker on the bar."""
    from apps.game.tests.factories import BarBoardFactory
    return BarBoardFactory()


@pytest.fixture
def generator():
    """Return a move generator that allows forced passes."""
    return MoveGenerator(allow_pass=True)
