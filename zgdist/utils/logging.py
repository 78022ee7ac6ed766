"""Logging utility for zgdist"""

__all__ = ['LOGGER', 'reset_warnings', 'warn_once']

import logging

LOGGER = logging.getLogger('zgdist')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str):
    """Logs a warning only the first time a given message is seen"""
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)


def reset_warnings():
    """Forget previously emitted warnings so that they may be logged again"""
    _WARNINGS.clear()
