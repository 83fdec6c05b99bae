"""
Tests for the backgammon turn driver.

Tests BackgammonRuleSet including:
- Initial state and dice rolling
- Legal turn listing
- Applying turns by position and by move list
- Forced passes
- Win detection and scoring
"""
import pytest

from apps.game.rulesets import BackgammonRuleSet, BaseRuleSet
from apps.game.services.game_engine import BAR, DARK, LIGHT, OFF, BoardState


def ruleset_for(board, side=LIGHT, dice=None):
    return BackgammonRuleSet({
        'board': board,
        'current_turn': side,
        'dice': list(dice or []),
    })


class TestSetup:
    """Tests for initial state and rolling."""

    def test_initial_state(self):
        ruleset = BackgammonRuleSet()

        assert ruleset.board == BoardState.standard()
        assert ruleset.get_current_player() == LIGHT
        assert ruleset.game_state['dice'] == []
        assert ruleset.validate_state()
        assert ruleset.check_winner() is None

    def test_seeded_rolls_repeat(self):
        first = BackgammonRuleSet(seed=11).roll_dice()['dice']
        second = BackgammonRuleSet(seed=11).roll_dice()['dice']

        assert first == second
        assert all(1 <= die <= 6 for die in first)

    def test_roll_action_lists_turns(self):
        ruleset = BackgammonRuleSet(seed=3)

        result = ruleset.apply_action(LIGHT, {'type': 'roll'})

        assert len(result['dice']) == 2
        assert result['legal_moves']
        assert ruleset.game_state['dice'] == result['dice']

    def test_cannot_roll_twice(self):
        ruleset = BackgammonRuleSet(seed=3)
        ruleset.apply_action(LIGHT, {'type': 'roll'})

        with pytest.raises(ValueError, match="already been rolled"):
            ruleset.apply_action(LIGHT, {'type': 'roll'})

    def test_wrong_player(self):
        ruleset = BackgammonRuleSet()

        with pytest.raises(ValueError, match="not your turn"):
            ruleset.apply_action(DARK, {'type': 'roll'})

    def test_unknown_action(self):
        ruleset = BackgammonRuleSet()

        with pytest.raises(ValueError, match="Unknown action type"):
            ruleset.apply_action(LIGHT, {'type': 'double'})


class TestLegalActions:
    """Tests for turn listing."""

    def test_no_actions_before_rolling(self):
        assert BackgammonRuleSet().get_legal_actions(LIGHT) == []

    def test_no_actions_for_waiting_side(self, standard_board):
        ruleset = ruleset_for(standard_board, dice=[6, 5])
        assert ruleset.get_legal_actions(DARK) == []

    def test_actions_match_generator(self, standard_board):
        ruleset = ruleset_for(standard_board, dice=[6, 5])

        actions = ruleset.get_legal_actions(LIGHT)
        turns = ruleset.generator.generate_turns(standard_board, LIGHT, [6, 5])

        assert [a['state'] for a in actions] == [t.state for t in turns]
        assert all(a['type'] == 'turn' for a in actions)
        assert all(a['dice_used'] == 2 for a in actions)
        assert all(len(a['moves']) == 2 for a in actions)


class TestPlayTurn:
    """Tests for applying turns."""

    def test_apply_listed_action(self, standard_board):
        ruleset = ruleset_for(standard_board, dice=[3, 1])
        action = ruleset.get_legal_actions(LIGHT)[0]

        result = ruleset.apply_action(LIGHT, action)

        assert result['success']
        assert ruleset.board == action['state']
        assert ruleset.get_current_player() == DARK
        assert ruleset.game_state['dice'] == []

    def test_apply_move_list(self, standard_board):
        ruleset = ruleset_for(standard_board, dice=[6, 5])

        ruleset.apply_action(LIGHT, {'type': 'turn', 'moves': [[0, 6], [6, 11]]})

        expected = standard_board.apply_move(LIGHT, 0, 6).apply_move(LIGHT, 6, 5)
        assert ruleset.board == expected
        assert ruleset.validate_state()

    def test_dark_move_list(self, standard_board):
        ruleset = ruleset_for(standard_board, side=DARK, dice=[6, 5])

        ruleset.apply_action(DARK, {'type': 'turn', 'moves': [[23, 17], [17, 12]]})

        assert ruleset.board.points[23] == -1
        assert ruleset.board.points[12] == -6
        assert ruleset.get_current_player() == LIGHT

    def test_partial_turn_rejected(self, standard_board):
        ruleset = ruleset_for(standard_board, dice=[6, 5])

        with pytest.raises(ValueError, match="Illegal turn"):
            ruleset.apply_action(LIGHT, {'type': 'turn', 'moves': [[0, 6]]})

        assert ruleset.board == standard_board
        assert ruleset.get_current_player() == LIGHT

    def test_unplayable_move_rejected(self, standard_board):
        ruleset = ruleset_for(standard_board, dice=[6, 5])

        with pytest.raises(ValueError, match="cannot be played"):
            ruleset.apply_action(LIGHT, {'type': 'turn', 'moves': [[0, 3], [11, 16]]})

    def test_unreachable_state_rejected(self, standard_board, race_board):
        ruleset = ruleset_for(standard_board, dice=[6, 5])

        with pytest.raises(ValueError, match="Illegal turn"):
            ruleset.apply_action(LIGHT, {'type': 'turn', 'state': race_board})

    def test_must_roll_first(self, standard_board):
        ruleset = ruleset_for(standard_board)

        with pytest.raises(ValueError, match="Roll the dice"):
            ruleset.apply_action(LIGHT, {'type': 'turn', 'moves': []})

    def test_bar_entry_move_list(self, bar_board):
        ruleset = ruleset_for(bar_board, dice=[3, 1])

        ruleset.apply_action(LIGHT, {'type': 'turn', 'moves': [[BAR, 2], [2, 3]]})

        assert ruleset.board.captured == (0, 0)
        assert ruleset.board.points[3] == 1

    def test_forced_pass(self, bar_board):
        ruleset = ruleset_for(bar_board, dice=[6, 6])

        actions = ruleset.get_legal_actions(LIGHT)
        assert actions == [{'type': 'turn', 'moves': [], 'state': bar_board, 'dice_used': 0}]

        ruleset.apply_action(LIGHT, actions[0])

        assert ruleset.board == bar_board
        assert ruleset.get_current_player() == DARK


class TestWinning:
    """Tests for game end and scoring."""

    def test_last_checker_wins(self):
        board = BoardState.from_points({23: 1, 0: -15}, finished=(14, 0))
        ruleset = ruleset_for(board, dice=[2, 1])

        result = ruleset.apply_action(LIGHT, {'type': 'turn', 'moves': [[23, OFF]]})

        assert result['winner'] == LIGHT
        assert result['score'] == {LIGHT: 2, DARK: 0}
        assert ruleset.check_winner() == LIGHT

    def test_single_game(self):
        board = BoardState.from_points({0: -14}, finished=(15, 1))
        assert ruleset_for(board).calculate_score(LIGHT) == {LIGHT: 1, DARK: 0}

    def test_gammon(self):
        board = BoardState.from_points({0: -10, 3: -5}, finished=(15, 0))
        assert ruleset_for(board).calculate_score(LIGHT) == {LIGHT: 2, DARK: 0}

    def test_backgammon_checker_in_winner_home(self):
        board = BoardState.from_points({0: -14, 20: -1}, finished=(15, 0))
        assert ruleset_for(board).calculate_score(LIGHT) == {LIGHT: 3, DARK: 0}

    def test_backgammon_checker_on_bar(self):
        board = BoardState.from_points({23: 14}, captured=(1, 0), finished=(0, 15))
        assert ruleset_for(board).calculate_score(DARK) == {DARK: 3, LIGHT: 0}


class TestBaseRuleSet:
    """Tests for the rule set interface."""

    def test_roll_dice_is_required(self):
        class NoDiceRuleSet(BaseRuleSet):
            def get_initial_state(self):
                return {}

            def get_legal_actions(self, player_id):
                return []

            def apply_action(self, player_id, action):
                return {}

            def check_winner(self):
                return None

            def get_current_player(self):
                return LIGHT

            def validate_state(self):
                return True

        with pytest.raises(TypeError):
            NoDiceRuleSet()

