"""Game app configuration."""
from django.apps import AppConfig


class GameConfig(AppConfig):
    """Configuration for the game app (rules engine and turn generation)."""

    name = 'apps.game'
    verbose_name = 'Backgammon Rules'
