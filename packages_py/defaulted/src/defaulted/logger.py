"""
Defaulted Logger
Level-gated logging with a fixed prefix, routed through the stdlib
``logging`` module under the ``defaulted`` logger name.
"""
import logging
import os
from typing import Any, Literal

LogLevel = Literal['silent', 'error', 'warn', 'info', 'debug', 'trace']

TRACE = 5
logging.addLevelName(TRACE, 'TRACE')

LOG_LEVELS = {
    'silent': 0,
    'error': 1,
    'warn': 2,
    'info': 3,
    'debug': 4,
    'trace': 5
}

_STDLIB_LEVELS = {
    'error': logging.ERROR,
    'warn': logging.WARNING,
    'info': logging.INFO,
    'debug': logging.DEBUG,
    'trace': TRACE,
}

_current_level: LogLevel = 'warn'

# Detect initial log level from env
env_level = os.getenv('DEFAULTED_LOG_LEVEL', '').lower()
if env_level in LOG_LEVELS:
    _current_level = env_level  # type: ignore

PREFIX = os.getenv('DEFAULTED_LOG_PREFIX', '[defaulted]')

_stdlib_logger = logging.getLogger('defaulted')
_stdlib_logger.addHandler(logging.NullHandler())


def get_log_level() -> LogLevel:
    return _current_level


def set_log_level(level: LogLevel) -> None:
    global _current_level
    if level in LOG_LEVELS:
        _current_level = level


class DefaultedLogger:
    def _should_log(self, level: LogLevel) -> bool:
        return LOG_LEVELS[level] <= LOG_LEVELS[_current_level]

    def _emit(self, level: LogLevel, message: str, *args: Any) -> None:
        if self._should_log(level):
            _stdlib_logger.log(_STDLIB_LEVELS[level], f"{PREFIX} {message}", *args)

    def error(self, message: str, *args: Any) -> None:
        self._emit('error', message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._emit('warn', message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._emit('info', message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self._emit('debug', message, *args)

    def trace(self, message: str, *args: Any) -> None:
        self._emit('trace', message, *args)


_logger_instance = DefaultedLogger()


def get_logger() -> DefaultedLogger:
    return _logger_instance
