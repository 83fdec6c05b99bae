"""AI app configuration."""
from django.apps import AppConfig


class AiConfig(AppConfig):
    """Configuration for the AI app (evaluation, players, matches)."""

    name = 'apps.ai'
    verbose_name = 'Backgammon AI'
