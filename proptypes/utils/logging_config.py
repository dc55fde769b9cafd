"""
Logging configuration for proptypes.

The library stays quiet by default: the package logger only carries a
NullHandler until ``LoggerFactory.configure`` is asked for console or file
output.
"""
import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional
import traceback

ROOT_LOGGER_NAME = 'proptypes'


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        # Add extra fields
        if hasattr(record, 'extra_fields'):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class LoggerFactory:
    """Factory for creating configured loggers."""

    _loggers: Dict[str, logging.Logger] = {}
    _handlers: list = []
    _configured = False

    @classmethod
    def configure(
        cls,
        log_level: str = "WARNING",
        enable_console: bool = False,
        enable_file: bool = False,
        enable_structured: bool = False,
        log_dir: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ):
        """
        Configure the package logger.

        Calling this again replaces the handlers installed by the previous call.

        Args:
            log_level: Level name for the ``proptypes`` logger
            enable_console: Emit records to stderr
            enable_file: Emit records to a rotating file under ``log_dir``
            enable_structured: Use JSON lines instead of plain text
            log_dir: Directory for the log file (defaults to ``logs``)
            max_bytes: Rotation size for the log file
            backup_count: Number of rotated files to keep
        """
        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in cls._handlers:
            package_logger.removeHandler(handler)
            handler.close()
        cls._handlers = []

        package_logger.setLevel(getattr(logging, log_level.upper()))

        if enable_structured:
            formatter: logging.Formatter = StructuredFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            cls._handlers.append(console_handler)

        # File handler with rotation
        if enable_file:
            log_path = Path(log_dir or "logs")
            log_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path / "proptypes.log",
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setFormatter(formatter)
            cls._handlers.append(file_handler)

        if not cls._handlers:
            cls._handlers.append(logging.NullHandler())

        for handler in cls._handlers:
            package_logger.addHandler(handler)

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with the given name."""
        if not cls._configured:
            cls.configure()

        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)

        return cls._loggers[name]


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger."""
    return LoggerFactory.get_logger(name)
