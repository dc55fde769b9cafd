"""
Utility modules for proptypes.
"""
from .logging_config import get_logger, LoggerFactory, StructuredFormatter
from .exceptions import (
    ProptypesError,
    ValidationError,
    InvariantViolation,
    MalformedCheckerError,
    ConfigurationError
)
from .error_handlers import capture_errors, handle_errors

__all__ = [
    'get_logger',
    'LoggerFactory',
    'StructuredFormatter',
    'ProptypesError',
    'ValidationError',
    'InvariantViolation',
    'MalformedCheckerError',
    'ConfigurationError',
    'capture_errors',
    'handle_errors',
]
