"""
Runtime parameter checking for functions.
"""
from typing import Any, Callable, Optional
import functools
import inspect
from ..config.config_manager import get_config
from ..utils.exceptions import InvariantViolation
from ..utils.logging_config import get_logger
from .dispatch import DEFAULT_LOCATION, DEFAULT_SUBJECT_NAME, check_prop_types

logger = get_logger(__name__)


def check_params(**type_specs: Any) -> Callable:
    """
    Decorator that checks a function's arguments against checkers.

    Arguments are bound with the function's signature and defaults applied,
    so a parameter left at a ``None`` default needs an optional checker.
    Checking is skipped while the ``validation.enabled`` setting is false.

    Example::

        @check_params(name=T.string, retries=T.number.is_optional)
        def connect(name, retries=None):
            ...
    """
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)
        unknown = [name for name in type_specs if name not in sig.parameters]
        if unknown:
            raise InvariantViolation(
                f"{func.__qualname__}: checkers given for unknown parameters {unknown}",
                details={"function": func.__qualname__, "unknown": unknown}
            )

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if get_config("validation.enabled", True):
                bound_args = sig.bind(*args, **kwargs)
                bound_args.apply_defaults()
                check_prop_types(
                    type_specs,
                    bound_args.arguments,
                    get_config("defaults.location", DEFAULT_LOCATION),
                    func.__qualname__
                )
            return func(*args, **kwargs)

        wrapper.__type_specs__ = dict(type_specs)
        logger.debug(f"Checking parameters {list(type_specs)} of {func.__qualname__}")
        return wrapper

    return decorator


def ensure_value(
    value: Any,
    type_spec: Any,
    name: str = "value",
    subject_name: Optional[str] = None
) -> Any:
    """
    Check a value against a checker and return it, raising on mismatch.

    The subject defaults to the ``defaults.subject_name`` setting.
    """
    check_prop_types(
        {name: type_spec},
        {name: value},
        get_config("defaults.location", DEFAULT_LOCATION),
        subject_name or get_config("defaults.subject_name", DEFAULT_SUBJECT_NAME)
    )
    return value
