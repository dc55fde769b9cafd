"""
proptypes: runtime value-shape validation.

Describe expected shapes by composing checkers, then check values crossing a
trust boundary (function parameters, decoded payloads, configuration)::

    from proptypes import PropTypes as T, check_prop_types

    check_prop_types(
        {'name': T.string, 'tags': T.array_of(T.string).is_optional},
        {'name': 'job-1', 'tags': ['nightly']},
    )
"""
from .utils import (
    ProptypesError,
    ValidationError,
    InvariantViolation,
    MalformedCheckerError,
    ConfigurationError
)
from .validation import *
from .validation import __all__ as _validation_all

__version__ = '0.1.0'

__all__ = [
    'ProptypesError',
    'ValidationError',
    'InvariantViolation',
    'MalformedCheckerError',
    'ConfigurationError',
    *_validation_all,
]
