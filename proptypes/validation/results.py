"""
Result values returned by checkers.
"""
from enum import Enum
from typing import Any, Dict, Optional

from ..utils.exceptions import InvariantViolation, ProptypesError, ValidationError


class FailureKind(Enum):
    """Whether a failure is an ordinary mismatch or a broken schema."""
    VALIDATION = 'validation'
    INVARIANT = 'invariant'


class CheckFailure:
    """
    A checker's report that a value is invalid.

    Checkers return ``None`` when the value is valid. Failures are plain
    values rather than exceptions so that union checkers can try and discard
    many of them cheaply.
    """

    __slots__ = ('message', 'kind', 'path')

    def __init__(
        self,
        message: str,
        kind: FailureKind = FailureKind.VALIDATION,
        path: Optional[str] = None
    ):
        self.message = message
        self.kind = kind
        self.path = path

    @property
    def is_invariant(self) -> bool:
        return self.kind is FailureKind.INVARIANT

    def to_exception(self, details: Optional[Dict[str, Any]] = None) -> ProptypesError:
        """Build the exception dispatch raises for this failure."""
        details = dict(details or {})
        if self.path is not None:
            details.setdefault('path', self.path)
        if self.is_invariant:
            return InvariantViolation(self.message, details=details)
        return ValidationError(self.message, details=details)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CheckFailure):
            return NotImplemented
        return (self.message, self.kind, self.path) == (other.message, other.kind, other.path)

    def __hash__(self) -> int:
        return hash((self.message, self.kind, self.path))

    def __repr__(self) -> str:
        return f'CheckFailure({self.message!r}, kind={self.kind.value})'

    def __str__(self) -> str:
        return self.message


def validation_failure(message: str, path: Optional[str] = None) -> CheckFailure:
    return CheckFailure(message, FailureKind.VALIDATION, path)


def invariant_failure(message: str, path: Optional[str] = None) -> CheckFailure:
    return CheckFailure(message, FailureKind.INVARIANT, path)


def is_failure(result: Any) -> bool:
    """True for values that signal a failure: ``CheckFailure`` or an exception."""
    return isinstance(result, (CheckFailure, Exception))
