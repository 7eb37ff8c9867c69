"""
Logging Configuration for EnvReader

This module provides the console logging setup used when a host process
asks EnvReader to log:
- JSON formatting for production environments
- Colored console output for development
- Context injection (component, var_name)

EnvReader never attaches handlers on import. Call
``EnvReader.logger.setup_logging()`` to opt in.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional


ROOT_LOGGER_NAME = 'EnvReader'

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'pathname', 'process', 'processName',
    'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'context', 'taskName', 'asctime',
])


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging in production.

    Outputs log records as JSON with consistent structure:
    {
        "timestamp": "2026-10-18T10:30:45.123456Z",
        "level": "DEBUG",
        "logger": "EnvReader.env_vars",
        "message": "DB_PORT not set, using default",
        "context": {
            "component": "env_vars",
            "var_name": "DB_PORT"
        },
        "extra": {...},
        "exc_info": "..."
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data = {
            'timestamp': datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if hasattr(record, 'context'):
            log_data['context'] = record.context

        extra_fields = {
            key: value for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        }
        if extra_fields:
            log_data['extra'] = extra_fields

        if record.exc_info:
            log_data['exc_info'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ColoredConsoleFormatter(logging.Formatter):
    """
    Colored console formatter for development environments.
    Uses ANSI color codes for better readability.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\x1b[38;21m',      # Grey
        'INFO': '\x1b[38;21m',       # Grey
        'WARNING': '\x1b[38;5;214m', # Orange
        'ERROR': '\x1b[31;21m',      # Red
        'CRITICAL': '\x1b[31;1m',    # Bold Red
    }
    RESET = '\x1b[0m'

    def __init__(self, include_context: bool = True):
        """
        Initialize formatter.

        Args:
            include_context: Whether to include context fields in output
        """
        self.include_context = include_context
        fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)'
        super().__init__(fmt, datefmt='%Y-%m-%d %H:%M:%S')

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color codes."""
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        try:
            formatted = super().format(record)
        finally:
            record.levelname = levelname

        if self.include_context and getattr(record, 'context', None):
            context_str = ' | '.join(f"{k}={v}" for k, v in record.context.items())
            formatted += f" [{context_str}]"

        return formatted


class LoggingConfig:
    """
    Central logging configuration.

    Console level and format come from the environment unless given:
    LOG_LEVEL (default INFO) and LOG_JSON (default false).
    """

    DEFAULT_LEVEL = 'INFO'

    def __init__(
        self,
        console_level: Optional[str] = None,
        use_json: Optional[bool] = None,
    ):
        """
        Initialize logging configuration.

        Args:
            console_level: Console log level (default: $LOG_LEVEL or INFO)
            use_json: Force JSON formatting (default: $LOG_JSON or False)
        """
        # Imported here, env_vars itself logs through this package
        from EnvReader.env_vars import bool_var, optional_var

        self.console_level = (console_level or optional_var('LOG_LEVEL', self.DEFAULT_LEVEL)).upper()
        if use_json is None:
            use_json = bool_var('LOG_JSON', False)
        self.use_json = use_json

        if not isinstance(logging.getLevelName(self.console_level), int):
            raise ValueError(f"Unknown log level: {self.console_level}")

    def get_console_formatter(self) -> logging.Formatter:
        """Get appropriate console formatter."""
        if self.use_json:
            return JSONFormatter()
        return ColoredConsoleFormatter(include_context=True)

    def create_console_handler(self) -> logging.StreamHandler:
        """Create configured console handler."""
        handler = logging.StreamHandler()
        handler.setLevel(self.console_level)
        handler.setFormatter(self.get_console_formatter())
        return handler

    def configure_logger(self, logger_name: str = ROOT_LOGGER_NAME) -> logging.Logger:
        """
        Configure a logger with a console handler.

        Args:
            logger_name: Name of the logger (default: the EnvReader package logger)

        Returns:
            Configured logger instance
        """
        logger = logging.getLogger(logger_name)
        logger.setLevel(self.console_level)

        # Clear existing handlers to avoid duplicates
        if logger.hasHandlers():
            logger.handlers.clear()

        logger.addHandler(self.create_console_handler())
        logger.propagate = False

        return logger

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'LoggingConfig':
        """
        Create LoggingConfig from dictionary.

        Args:
            config: Configuration dictionary

        Returns:
            LoggingConfig instance
        """
        return cls(
            console_level=config.get('console_level'),
            use_json=config.get('use_json'),
        )


# Singleton instance for easy access
_default_config: Optional[LoggingConfig] = None


def get_logging_config() -> LoggingConfig:
    """Get or create default logging configuration."""
    global _default_config
    if _default_config is None:
        _default_config = LoggingConfig()
    return _default_config


def set_logging_config(config: Optional[LoggingConfig]) -> None:
    """Set default logging configuration (None resets it)."""
    global _default_config
    _default_config = config
