"""
Structured Logger for EnvReader

Provides:
- Context injection (component, var_name)
- Thread-safe context management
- Opt-in console setup for host processes

Usage:
    # Library modules
    logger = get_logger('EnvReader.env_vars', context={'component': 'env_vars'})
    logger.debug('DB_PORT not set, using default')

    # Host process, once at startup
    setup_logging(console_level='DEBUG')
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Optional

from EnvReader.logging_config import (
    ROOT_LOGGER_NAME,
    LoggingConfig,
    get_logging_config,
    set_logging_config,
)


# Thread-safe context storage
_log_context: ContextVar[Dict[str, Any]] = ContextVar('log_context', default={})


class StructuredLogger(logging.LoggerAdapter):
    """
    Logger adapter with context injection.

    Merges context from set_context(), the adapter's default extra and
    per-call extra into a single ``record.context`` dict.
    """

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        context = {}
        context.update(_log_context.get())

        if self.extra:
            context.update(self.extra)

        if 'extra' in kwargs:
            context.update(kwargs.pop('extra'))

        if context:
            kwargs['extra'] = {'context': context}

        return msg, kwargs


# ============================================================================
# Logger Factory
# ============================================================================

_loggers: Dict[str, StructuredLogger] = {}


def get_logger(name: str, context: Optional[Dict[str, Any]] = None) -> StructuredLogger:
    """
    Get or create a structured logger.

    No handlers are attached here; records propagate until a host process
    calls setup_logging() or configures logging itself.

    Args:
        name: Logger name (e.g., 'EnvReader.env_vars')
        context: Optional default context (component, etc.)

    Returns:
        StructuredLogger instance
    """
    cache_key = f"{name}:{sorted((context or {}).items())}"

    if cache_key not in _loggers:
        _loggers[cache_key] = StructuredLogger(logging.getLogger(name), extra=context)

    return _loggers[cache_key]


# ============================================================================
# Context Management
# ============================================================================

def set_context(**context) -> None:
    """Set thread-local logging context."""
    current = _log_context.get().copy()
    current.update(context)
    _log_context.set(current)


def clear_context() -> None:
    """Clear thread-local logging context."""
    _log_context.set({})


def get_context() -> Dict[str, Any]:
    """Get a copy of the current thread-local logging context."""
    return _log_context.get().copy()


@contextmanager
def log_context(**context):
    """
    Context manager for temporary logging context.

    Examples:
        >>> with log_context(service='api'):
        ...     port = int_var('PORT')  # debug records carry service='api'
    """
    previous = get_context()
    set_context(**context)
    try:
        yield
    finally:
        _log_context.set(previous)


# ============================================================================
# Setup
# ============================================================================

def setup_logging(
    console_level: Optional[str] = None,
    use_json: Optional[bool] = None,
) -> LoggingConfig:
    """
    Attach a console handler to the EnvReader package logger.

    Args:
        console_level: Console log level (default: $LOG_LEVEL or INFO)
        use_json: Force JSON formatting (default: $LOG_JSON or False)

    Returns:
        LoggingConfig instance
    """
    if console_level is None and use_json is None:
        config = get_logging_config()
    else:
        config = LoggingConfig(console_level=console_level, use_json=use_json)
        set_logging_config(config)

    config.configure_logger(ROOT_LOGGER_NAME)
    return config


__all__ = [
    'StructuredLogger',
    'get_logger',
    'set_context',
    'clear_context',
    'get_context',
    'log_context',
    'setup_logging',
]
