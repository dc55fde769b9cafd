"""
Run schemas of checkers against values and raise on the first failure.
"""
from typing import Any, Mapping

from ..utils.error_handlers import capture_errors
from ..utils.exceptions import (
    InvariantViolation,
    MalformedCheckerError,
    ProptypesError,
    ValidationError,
)
from ..utils.logging_config import get_logger
from .kinds import coarse_kind
from .results import CheckFailure

logger = get_logger(__name__)

DEFAULT_LOCATION = 'param'
DEFAULT_SUBJECT_NAME = 'function'


def check_prop_type(
    type_spec: Any,
    values: Any,
    type_spec_name: str,
    location: str,
    subject_name: str
) -> None:
    """
    Check one named value and raise if it fails.

    Raises:
        InvariantViolation: ``type_spec`` is not callable, or a combinator
            reported a malformed member
        MalformedCheckerError: the checker returned something that is neither
            ``None`` nor a failure
        ValidationError: the value does not match
    """
    subject = subject_name or 'Anonymous'
    details = {'location': location, 'path': type_spec_name, 'subject': subject}

    if not callable(type_spec):
        raise InvariantViolation(
            f'{subject}: {location} type `{type_spec_name}` is invalid; it must be a callable '
            f'checker, usually from the proptypes package, but received `{coarse_kind(type_spec)}`.',
            details=details
        )

    error = capture_errors(
        type_spec, values, type_spec_name, subject_name, location, type_spec_name,
        passthrough=(ProptypesError,)
    )

    if error is None:
        return

    if isinstance(error, CheckFailure):
        logger.debug(f"{subject}: {location} `{type_spec_name}` failed: {error.message}")
        raise error.to_exception(details)

    if isinstance(error, Exception):
        logger.debug(f"{subject}: {location} `{type_spec_name}` raised {type(error).__name__}: {error}")
        raise ValidationError(str(error), details=details) from error

    raise MalformedCheckerError(
        f'{subject}: type specification of {location} `{type_spec_name}` is invalid; the type '
        f'checker function must return `None` or a `CheckFailure` but returned a '
        f'{coarse_kind(error)}. You may have forgotten to pass an argument to the type checker '
        f'creator (array_of, instance_of, object_of, one_of, one_of_type, and shape all '
        f'require an argument).',
        details=details
    )


def check_prop_types(
    type_specs: Mapping[str, Any],
    values: Any,
    location: str = DEFAULT_LOCATION,
    subject_name: str = DEFAULT_SUBJECT_NAME
) -> bool:
    """
    Assert that ``values`` match ``type_specs``.

    Specs are checked in mapping order and the first failure is raised; later
    specs are not consulted.

    Args:
        type_specs: Mapping of name to checker
        values: Mapping (or object) holding the values to check
        location: Free-text tag used in messages, e.g. "param" or "field"
        subject_name: Name of whatever owns the values, used in messages

    Returns:
        True when every value matches
    """
    for type_spec_name, type_spec in type_specs.items():
        check_prop_type(type_spec, values, type_spec_name, location, subject_name)
    return True


def check_value_type(
    value: Any,
    type_spec: Any,
    throws: bool = True,
    location: str = DEFAULT_LOCATION,
    subject_name: str = DEFAULT_SUBJECT_NAME
) -> bool:
    """
    Check a single value, reported under the name ``value``.

    With ``throws=False`` any proptypes error turns into a ``False`` return.
    """
    try:
        check_prop_type(type_spec, {'value': value}, 'value', location, subject_name)
    except ProptypesError:
        if throws:
            raise
        return False

    return True
