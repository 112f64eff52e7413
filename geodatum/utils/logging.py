"""Logging utility for geodatum"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geodatum')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str, *args):
    """
    Logs a warning the first time a given message template is seen. Arguments are
    interpolated lazily by the logger, so messages differing only in their arguments
    are still reported once.
    """
    if warning not in _WARNINGS:
        LOGGER.warning(warning, *args)
        _WARNINGS.add(warning)
