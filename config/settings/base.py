"""
Base settings for the Backgammon engine project.

The engine has no database, templates or HTTP surface; Django provides
configuration, logging setup and the management commands.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'insecure-backgammon-engine-key')

DEBUG = False

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'apps.game',
    'apps.ai',
]

DATABASES = {}

USE_TZ = True

TIME_ZONE = 'UTC'

# Rules engine and search
BACKGAMMON_ENGINE = {
    # Default plies for players and analyze_position
    'SEARCH_DEPTH': int(os.environ.get('BACKGAMMON_SEARCH_DEPTH', 1)),
    # Hard cap on any search; the tree grows combinatorially
    'MAX_SEARCH_DEPTH': 4,
    # Return a zero-move turn when no die can be played
    'ALLOW_PASS': True,
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': os.environ.get('DJANGO_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
