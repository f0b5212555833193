"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives a class a logger named after its module and class, e.g.
    'georadar.earth.EllipsoidalEarth', which propagates to the package logger.

    Warnings raised through `warn_once` are remembered across every instance
    of every subclass.
    """
    logger: logging.Logger

    WARNED_ONCE: set = set()

    def __init__(self, logstr: Optional[str] = None):
        name = type(self).__qualname__
        if logstr:
            name = f'{name}.{logstr}'

        module = type(self).__module__
        self.logger = logging.getLogger(name if module == 'builtins' else f'{module}.{name}')

    def warn_once(self, msg, *args, **kwargs):
        """
        Logs a warning the first time a message template is seen. Arguments are
        not part of the key: 'falling back to %s' is logged once, whatever %s.
        """
        if msg in LoggingMixin.WARNED_ONCE:
            return

        self.logger.warning(msg, *args, **kwargs)
        LoggingMixin.WARNED_ONCE.add(msg)
