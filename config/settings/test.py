"""
Test settings for the Backgammon engine project.
"""
from .base import *

BACKGAMMON_ENGINE = {
    'SEARCH_DEPTH': 1,
    'MAX_SEARCH_DEPTH': 3,
    'ALLOW_PASS': True,
}

LOGGING['loggers']['apps']['level'] = 'WARNING'
