"""
Engine configuration lookup.

Engine knobs live in the ``BACKGAMMON_ENGINE`` settings dict. The rules
engine and search are usable without a configured Django project (for
scripts and notebooks), in which case the defaults below apply.
"""
from typing import Any, Dict

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULTS: Dict[str, Any] = {
    'SEARCH_DEPTH': 1,
    'MAX_SEARCH_DEPTH': 4,
    'ALLOW_PASS': True,
}


def engine_setting(name: str) -> Any:
    """
    Return a single engine setting.

    Args:
        name: Key inside ``BACKGAMMON_ENGINE`` (e.g. 'MAX_SEARCH_DEPTH').

    Returns:
        The configured value, or the built-in default.

    Raises:
        KeyError: If the name is not a known engine setting.
    """
    if name not in DEFAULTS:
        raise KeyError(f"Unknown engine setting: {name}")

    try:
        overrides = getattr(settings, 'BACKGAMMON_ENGINE', {})
    except ImproperlyConfigured:
        overrides = {}

    return overrides.get(name, DEFAULTS[name])
