"""
Exception hierarchy for proptypes.
"""
from typing import Any, Dict, Optional


class ProptypesError(Exception):
    """Base exception for all proptypes errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


class ValidationError(ProptypesError):
    """Raised when a value does not match its checker."""
    pass


class InvariantViolation(ProptypesError):
    """Raised when a schema or checker is itself malformed."""
    pass


class MalformedCheckerError(InvariantViolation):
    """Raised when a checker returns something other than None or a failure."""
    pass


class ConfigurationError(ProptypesError):
    """Raised when configuration is invalid."""
    pass
