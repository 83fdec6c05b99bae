"""
RuleSet pattern for driving games turn by turn.

Usage:
    from apps.game.rulesets import BackgammonRuleSet

    ruleset = BackgammonRuleSet(seed=42)
    ruleset.apply_action('light', {'type': 'roll'})
    actions = ruleset.get_legal_actions('light')
"""
from .base import BaseRuleSet
from .backgammon import BackgammonRuleSet

__all__ = [
    'BaseRuleSet',
    'BackgammonRuleSet',
]
