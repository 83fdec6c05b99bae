"""
Development settings for the Backgammon engine project.
"""
from .base import *

DEBUG = True

# Search statistics from the evaluator are logged at DEBUG
LOGGING['loggers']['apps']['level'] = os.environ.get('DJANGO_LOG_LEVEL', 'DEBUG')
