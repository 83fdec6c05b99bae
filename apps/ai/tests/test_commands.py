"""
Tests for management commands.

Tests analyze_position and play_game for:
- Output on valid input
- CommandError on invalid input
- Point spec parsing
"""
from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.ai.management.commands.analyze_position import parse_points
from apps.ai.matches.runner import MatchResult, MatchRunner


def run(*args):
    out = StringIO()
    call_command(*args, stdout=out)
    return out.getvalue()


class TestParsePoints:
    """Tests for index:count parsing."""

    def test_parse(self):
        assert parse_points(['0:2, 5:-5', '23:-2']) == {0: 2, 5: -5, 23: -2}

    def test_repeated_index_adds(self):
        assert parse_points(['18:3', '18:2']) == {18: 5}

    def test_invalid(self):
        with pytest.raises(CommandError, match="Invalid point spec"):
            parse_points(['18'])


class TestAnalyzePosition:
    """Tests for the analyze_position command."""

    def test_standard_position(self):
        output = run('analyze_position', '--depth', '0')

        assert 'Pips remaining: light 167, dark 167' in output
        assert 'Value at depth 0 (light to move): 0.000' in output
        assert 'Positions searched: 1' in output

    def test_best_turn(self):
        output = run('analyze_position', '--depth', '1', '--dice', '3', '1')
        assert 'Best turn for 3-1:' in output
        assert '(value -4.000)' in output

    def test_custom_position(self):
        output = run(
            'analyze_position',
            '--points', '22:1,23:1',
            '--points', '0:-1,1:-1',
            '--finished', '13', '13',
            '--depth', '2',
        )

        assert 'Pips remaining: light 3, dark 3' in output
        assert 'Value at depth 2 (light to move): -3.000' in output

    def test_forced_pass_reported(self):
        output = run(
            'analyze_position',
            '--points', '0:1,5:-5,7:-3,11:5,12:-5,16:3,18:5,23:-2',
            '--captured', '1', '0',
            '--side', 'light',
            '--depth', '0',
            '--dice', '6', '6',
        )
        assert 'Best turn for 6-6: pass' in output

    def test_invalid_position(self):
        with pytest.raises(CommandError, match="Invalid position"):
            run('analyze_position', '--points', '18:15')

    def test_depth_too_large(self):
        with pytest.raises(CommandError, match="Search depth"):
            run('analyze_position', '--depth', '9')


class TestPlayGame:
    """Tests for the play_game command."""

    def test_random_match(self):
        output = run(
            'play_game',
            '--light', 'random',
            '--dark', 'random',
            '--games', '2',
            '--seed', '3',
        )

        assert 'Game 1:' in output
        assert 'Game 2:' in output
        assert 'Match finished!' in output
        assert 'random_a:' in output
        assert 'random_b:' in output

    def test_games_must_be_positive(self):
        with pytest.raises(CommandError, match="at least 1"):
            run('play_game', '--games', '0')

    def test_random_players_get_separate_seeds(self):
        with patch.object(MatchRunner, 'run_match', return_value=MatchResult('random_a', 'random_b')) as run_match:
            run('play_game', '--light', 'random', '--dark', 'random', '--seed', '3')

        player_a, player_b = run_match.call_args[0]
        assert player_a.seed == 3
        assert player_b.seed == 4

    def test_unseeded_random_players(self):
        with patch.object(MatchRunner, 'run_match', return_value=MatchResult('random_a', 'random_b')) as run_match:
            run('play_game', '--light', 'random', '--dark', 'random')

        player_a, player_b = run_match.call_args[0]
        assert player_a.seed is None
        assert player_b.seed is None
