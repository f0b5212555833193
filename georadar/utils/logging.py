"""
Package logger for georadar, and a helper for warnings which should only be
raised once per process
"""

__all__ = ['LOGGER', 'reset_warnings', 'set_log_level', 'warn_once']

import logging
from typing import Union

from georadar.utils.mixins import LoggingMixin

LOGGER = logging.getLogger('georadar')
LOGGER.setLevel(logging.WARNING)

_HANDLER = logging.StreamHandler()
_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_HANDLER)

# Messages already emitted by warn_once()
_WARNED = set()


def set_log_level(level: Union[int, str]):
    """
    Sets the verbosity of the package logger and of every class logger below
    it. 'DEBUG' traces the k-factor iterations.

    Args:
        level:
            A logging level, or its name (case insensitive)
    """
    LOGGER.setLevel(level.upper() if isinstance(level, str) else level)


def reset_warnings():
    """Forgets every warning issued so far, so that each can be raised again"""
    _WARNED.clear()
    LoggingMixin.WARNED_ONCE.clear()


def warn_once(msg: str, *args):
    """Logs a warning on the package logger, unless the same message was already logged"""
    if msg in _WARNED:
        return

    LOGGER.warning(msg, *args)
    _WARNED.add(msg)
